"""Section tree construction and utilities."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Sequence

from mdindex.schemas import Section

_ANCHOR_SEPARATOR_RE = re.compile(r"[^a-zA-Z0-9]+")


def anchor_from_title(title: str) -> str:
    """Derive an in-page anchor from a heading title.

    Follows GitHub's convention for plain ASCII titles. Duplicate titles are
    not disambiguated.
    """
    slug = _ANCHOR_SEPARATOR_RE.sub("-", title).lower()
    slug = re.sub(r"^-|-$", "", slug)
    return "#" + slug


def build_sections(
    filename: str, headings: Sequence[tuple[int, str]]
) -> list[Section]:
    """Nest a flat, ordered list of ``(level, title)`` headings into a forest.

    Each heading adopts the following headings for as long as they are
    strictly deeper than itself, so a shallow heading closes every open
    level at once.
    """
    pending = list(reversed(headings))

    def _build_one(level: int, title: str) -> Section:
        children: list[Section] = []
        while pending and pending[-1][0] > level:
            children.append(_build_one(*pending.pop()))
        return Section(
            level=level,
            title=title,
            anchor=anchor_from_title(title),
            filename=filename,
            children=children,
        )

    result: list[Section] = []
    while pending:
        result.append(_build_one(*pending.pop()))
    return result


def flatten_sections(sections: Iterable[Section], max_level: int) -> Iterator[Section]:
    """Yield sections depth-first, skipping any deeper than ``max_level``.

    A skipped section's children are skipped with it.
    """
    for section in sections:
        if section.level > max_level:
            continue
        yield section
        yield from flatten_sections(section.children, max_level)
