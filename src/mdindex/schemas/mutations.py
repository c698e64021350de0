"""Line-range mutation models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Span(BaseModel):
    """A 1-based line range.

    ``end_line`` is exclusive. When it is ``None`` the span is a pure
    insertion before ``start_line``.
    """

    model_config = ConfigDict(frozen=True)

    start_line: int = Field(..., ge=1)
    end_line: int | None = None

    @model_validator(mode="after")
    def check_order(self) -> "Span":
        if self.end_line is not None and self.end_line < self.start_line:
            raise ValueError(
                f"end_line {self.end_line} precedes start_line {self.start_line}"
            )
        return self


class TextMutation(Span):
    """Replace a span with a block of text."""

    new_content: str


class FileMutation(BaseModel):
    """All mutations targeting one file."""

    model_config = ConfigDict(frozen=True)

    filename: str
    mutations: list[TextMutation] = Field(default_factory=list)
