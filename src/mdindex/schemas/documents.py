"""Filesystem object models: documents and directories."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from markdown_it.tree import SyntaxTreeNode
from pydantic import BaseModel, ConfigDict, Field

from mdindex.schemas.sections import Section


class Document(BaseModel):
    """A parsed Markdown file.

    Attributes:
        filename: Path of the file as it was loaded.
        title: Text of the leading level-1 heading, else the file stem.
        sections: Top-level sections; deeper headings nest inside them.
        tree: Parsed syntax tree, kept for locating insertion points.
        line_count: Number of source lines, used to append after the last one.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: Literal["document"] = "document"
    filename: str
    title: str
    sections: list[Section] = Field(default_factory=list)
    tree: SyntaxTreeNode = Field(repr=False, exclude=True)
    line_count: int = Field(default=0, ge=0)


class Directory(BaseModel):
    """A directory holding documents and subdirectories.

    Attributes:
        filename: Path of the directory as it was loaded.
        title: Title of the root document, else the directory name.
        entries: Children sorted by name, empty ones already pruned.
        root_document: The directory's own README, if any.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["directory"] = "directory"
    filename: str
    title: str
    entries: list["FsObject"] = Field(default_factory=list)
    root_document: Document | None = None


FsObject = Annotated[Union[Directory, Document], Field(discriminator="type")]

Directory.model_rebuild()
