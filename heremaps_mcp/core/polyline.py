"""Flexible polyline decoding.

HERE routing returns section geometry as a flexible polyline. Decoding is
done by HERE's ``flexpolyline`` package; this module turns its errors into
``PolylineDecodeError`` so callers only deal with the package's own hierarchy.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

import flexpolyline

from .exceptions import PolylineDecodeError

Point = tuple[float, ...]

_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def iter_decode(encoded: str) -> Iterator[Point]:
    """Yield ``(lat, lng)`` or ``(lat, lng, z)`` tuples lazily."""

    if not _ALPHABET.fullmatch(encoded):
        raise PolylineDecodeError("Invalid polyline: character outside the encoding alphabet")
    try:
        yield from flexpolyline.iter_decode(encoded)
    except ValueError as exc:
        raise PolylineDecodeError(f"Invalid polyline: {exc}") from exc
    except RuntimeError as exc:
        # flexpolyline lets StopIteration escape when the input ends early
        raise PolylineDecodeError("Invalid polyline: unexpected end of input") from exc


def decode(encoded: str) -> list[Point]:
    return list(iter_decode(encoded))
