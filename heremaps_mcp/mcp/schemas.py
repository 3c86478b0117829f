"""Pydantic schema for the result envelope returned by every tool call."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..core.types import ToolFailure, ToolOutcome


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ResultEnvelope(BaseModel):
    """Uniform ``{content, isError}`` wrapper sent back to the agent."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    content: list[TextContent] = Field(..., min_length=1)
    is_error: bool = Field(False, alias="isError")

    @classmethod
    def from_text(cls, text: str, *, is_error: bool) -> "ResultEnvelope":
        return cls(content=[TextContent(text=text)], is_error=is_error)

    @classmethod
    def from_texts(cls, texts: list[str], *, is_error: bool) -> "ResultEnvelope":
        return cls(content=[TextContent(text=text) for text in texts], is_error=is_error)

    @classmethod
    def from_outcome(cls, outcome: ToolOutcome) -> "ResultEnvelope":
        return cls.from_text(outcome.render(), is_error=isinstance(outcome, ToolFailure))

    @property
    def text(self) -> str:
        return self.content[0].text

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
