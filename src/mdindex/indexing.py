"""Compute the table of contents and navigation mutations for a tree."""

from __future__ import annotations

import logging
from typing import Iterable, Literal

from mdindex.config import MDINDEX_TOC_MAX_LEVEL, NAV_MARKER, TOC_MARKER
from mdindex.markdown import heading_level, html_literal, start_line, walk
from mdindex.output_formatter import (
    begin_marker,
    end_marker,
    render_file_toc,
    render_nav,
    render_section_toc,
    wrap_in_markers,
)
from mdindex.schemas import (
    Directory,
    Document,
    FileMutation,
    FsObject,
    NavContext,
    Span,
    TextMutation,
)

logger = logging.getLogger(__name__)

InsertLocation = Literal["top", "h2", "bottom"]

_TOC_LOCATIONS: tuple[InsertLocation, ...] = ("h2", "bottom")
_NAV_LOCATIONS: tuple[InsertLocation, ...] = ("top",)


def index_object(obj: FsObject, nav: NavContext | None = None) -> list[FileMutation]:
    """Compute the mutations for a document or a whole directory tree."""
    nav = nav or NavContext()
    if isinstance(obj, Directory):
        return index_directory(obj, nav)
    return [index_document(obj, nav)]


def index_directory(directory: Directory, nav: NavContext | None = None) -> list[FileMutation]:
    """Index every entry of a directory, then its root document.

    Entries navigate to their siblings and up to this directory's root
    document. The root document itself navigates with ``nav``, i.e. by the
    directory's own position among its siblings, and lists the entries.
    """
    nav = nav or NavContext()
    result: list[FileMutation] = []

    entries = directory.entries
    for i, entry in enumerate(entries):
        result.extend(
            index_object(
                entry,
                NavContext(
                    prev=entries[i - 1] if i > 0 else None,
                    next=entries[i + 1] if i < len(entries) - 1 else None,
                    up=directory.root_document,
                ),
            )
        )

    root = directory.root_document
    if root is not None:
        toc = render_file_toc(root.filename, entries)
        nav_row = render_nav(root.filename, nav)
        result.append(
            FileMutation(
                filename=root.filename,
                mutations=[
                    make_mutation(root, TOC_MARKER, toc, _TOC_LOCATIONS),
                    make_mutation(root, NAV_MARKER, nav_row, _NAV_LOCATIONS),
                ],
            )
        )

    return result


def index_document(document: Document, nav: NavContext | None = None) -> FileMutation:
    """Compute the TOC and navigation mutations of a single document."""
    nav = nav or NavContext()
    toc = render_section_toc(document.sections, MDINDEX_TOC_MAX_LEVEL)
    nav_row = render_nav(document.filename, nav)
    return FileMutation(
        filename=document.filename,
        mutations=[
            make_mutation(document, TOC_MARKER, toc, _TOC_LOCATIONS),
            make_mutation(document, NAV_MARKER, nav_row, _NAV_LOCATIONS),
        ],
    )


def make_mutation(
    document: Document,
    marker: str,
    content: str,
    insert_locations: Iterable[InsertLocation],
) -> TextMutation:
    """Build the mutation that writes ``content`` into a marker block.

    An existing block is replaced in place. Otherwise the block is inserted
    at the first of ``insert_locations`` that exists in the document, or at
    the bottom if none does.
    """
    span = find_marker(document, marker)

    if span is None:
        for location in insert_locations:
            span = find_insert_location(document, location)
            if span is not None:
                break
    if span is None:
        span = find_end(document)

    logger.debug(
        "%s block of %s at lines %s-%s",
        marker,
        document.filename,
        span.start_line,
        span.end_line,
    )
    return TextMutation(
        start_line=span.start_line,
        end_line=span.end_line,
        new_content=wrap_in_markers(marker, content),
    )


def find_marker(document: Document, marker: str) -> Span | None:
    """Locate a previously written block, end marker line included.

    The last begin and end markers win. A begin marker with no end marker
    after it yields a pure insertion at the begin marker.
    """
    begin = begin_marker(marker)
    end = end_marker(marker)
    first_line: int | None = None
    last_line: int | None = None

    for node in walk(document.tree):
        literal = html_literal(node)
        if literal == begin:
            first_line = start_line(node)
        elif literal == end:
            last_line = start_line(node) + 1

    if first_line is None:
        return None
    if last_line is None or last_line <= first_line:
        # No end marker after the begin marker: insert without replacing.
        return Span(start_line=first_line)
    return Span(start_line=first_line, end_line=last_line)


def find_insert_location(document: Document, location: InsertLocation) -> Span | None:
    if location == "top":
        return find_start()
    if location == "h2":
        return find_h2(document)
    if location == "bottom":
        return find_end(document)
    raise ValueError(f"Unknown insert location: {location!r}")


def find_h2(document: Document) -> Span | None:
    for node in walk(document.tree):
        if node.type == "heading" and heading_level(node) == 2:
            return Span(start_line=start_line(node))
    return None


def find_start() -> Span:
    return Span(start_line=1)


def find_end(document: Document) -> Span:
    return Span(start_line=document.line_count + 1)
