"""Render tables of contents, navigation rows and links as Markdown."""

from __future__ import annotations

import os
import posixpath
from typing import Sequence

from mdindex.config import MDINDEX_MARKDOWN_EXTENSION, MDINDEX_ROOT_DOCUMENT
from mdindex.schemas import FsObject, NavContext, Section
from mdindex.sections import flatten_sections

_RULE = "---"
_SECTION_TOC_HEADING = "Table of Contents"
_FILE_TOC_HEADING = "In this directory"


def render_section_toc(sections: Sequence[Section], max_level: int) -> str:
    """Render a document's own headings as an indented link list.

    Level-2 sections sit flush left; each level below adds two spaces.
    Returns an empty string when the document has no sections.
    """
    if not sections:
        return ""

    lines = [_RULE, _SECTION_TOC_HEADING, ""]
    for section in flatten_sections(sections, max_level):
        indent = "  " * max(0, section.level - 2)
        lines.append(f"{indent}- [{section.title}]({section.anchor})")
    lines.append(_RULE)
    return "\n".join(lines)


def render_file_toc(filename: str, entries: Sequence[FsObject]) -> str:
    """Render a directory listing as seen from ``filename``."""
    if not entries:
        return ""

    lines = [_RULE, _FILE_TOC_HEADING, ""]
    for entry in entries:
        lines.append(f"- {make_fs_link(filename, entry)}")
    lines.append(_RULE)
    return "\n".join(lines)


def render_nav(filename: str, nav: NavContext) -> str:
    """Render a previous/up/next table row, or nothing if all are missing."""
    if nav.is_empty():
        return ""

    prev_link = _optional_link(filename, nav.prev)
    up_link = _optional_link(filename, nav.up)
    next_link = _optional_link(filename, nav.next)

    prev_title = "← Previous" if prev_link else ""
    up_title = "↑ Up" if up_link else ""
    next_title = "Next →" if next_link else ""

    return "\n".join(
        [
            f"| {prev_title} | {up_title} | {next_title} |",
            "|:--|:-:|--:|",
            f"| {prev_link} | {up_link} | {next_link} |",
        ]
    )


def make_fs_link(filename: str, obj: FsObject) -> str:
    """Link to ``obj`` relative to the directory of ``filename``.

    A link that resolves to the current directory points at its root
    document instead.
    """
    base = filename
    if base.endswith(MDINDEX_MARKDOWN_EXTENSION):
        base = os.path.dirname(base)

    link = _relative_posix(obj.filename, base)
    if link in (".", ""):
        link = MDINDEX_ROOT_DOCUMENT

    return f"[{obj.title}]({link})"


def wrap_in_markers(marker: str, content: str) -> str:
    """Surround content with the comment lines that delimit a managed block."""
    lines = [begin_marker(marker)]
    if content:
        lines.append(content)
    lines.append(end_marker(marker))
    return "\n".join(lines)


def begin_marker(marker: str) -> str:
    return f"<!-- BEGIN {marker} -->"


def end_marker(marker: str) -> str:
    return f"<!-- END {marker} -->"


def _optional_link(filename: str, obj: FsObject | None) -> str:
    return make_fs_link(filename, obj) if obj is not None else ""


def _relative_posix(target: str, start: str) -> str:
    start = start or os.curdir
    relative = os.path.relpath(target, start)
    return posixpath.join(*relative.split(os.sep))
