"""Shared type definitions."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence, Union


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A decoded position; ``elevation`` is set only for 3D polylines."""

    latitude: float
    longitude: float
    elevation: float | None = None

    @classmethod
    def from_point(cls, point: Sequence[float]) -> Coordinate:
        return cls(*point)

    def to_pair(self, decimals: int) -> list[float | int]:
        """Rounded ``[lat, lng]``; whole values come out as ints so JSON prints ``52``."""

        return [
            _plain_number(round(self.latitude, decimals)),
            _plain_number(round(self.longitude, decimals)),
        ]


def _plain_number(value: float) -> float | int:
    return int(value) if value.is_integer() else value


@dataclass(frozen=True, slots=True)
class ToolInvocation:
    """A single incoming tool call."""

    name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ToolSuccess:
    """Normalized payload of a successful tool call.

    ``indent`` mirrors the JSON layout each tool has always produced: pretty
    printed for lookups, compact for geometry-heavy results.
    """

    payload: Any
    indent: int | None = None

    def render(self) -> str:
        if self.indent is None:
            return json.dumps(self.payload, ensure_ascii=False, separators=(",", ":"))
        return json.dumps(self.payload, ensure_ascii=False, indent=self.indent)


@dataclass(frozen=True, slots=True)
class ToolFailure:
    """A business-level failure such as an empty result set."""

    message: str

    def render(self) -> str:
        return self.message


ToolOutcome = Union[ToolSuccess, ToolFailure]
