"""Section tree models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Section(BaseModel):
    """A heading and the headings nested beneath it within one document.

    Attributes:
        level: Heading depth, 1 being a title.
        title: Plain text of the heading.
        anchor: In-page link target derived from the title (e.g. ``#usage``).
        filename: Document the heading belongs to.
        children: Nested sections in source order, all deeper than ``level``.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["section"] = "section"
    level: int = Field(..., ge=1, le=6)
    title: str
    anchor: str
    filename: str
    children: list["Section"] = Field(default_factory=list)
