"""Thin adapter over markdown-it-py exposing the pieces the indexer needs."""

from __future__ import annotations

import re
from typing import Iterator

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

# Strict CommonMark: without GFM tables a navigation table is a plain
# paragraph, which an HTML comment line is always allowed to interrupt.
_PARSER = MarkdownIt("commonmark")
_LINE_BREAK_RE = re.compile(r"(\r\n|\r|\n)")


def parse_markdown(text: str) -> SyntaxTreeNode:
    """Parse Markdown text into a syntax tree."""
    return SyntaxTreeNode(_PARSER.parse(text))


def walk(tree: SyntaxTreeNode) -> Iterator[SyntaxTreeNode]:
    """Yield every node depth-first in document order, the root first."""
    yield from tree.walk(include_self=True)


def iter_headings(tree: SyntaxTreeNode) -> Iterator[SyntaxTreeNode]:
    for node in walk(tree):
        if node.type == "heading":
            yield node


def heading_level(node: SyntaxTreeNode) -> int:
    """Return the 1-6 level of a heading node."""
    return int(node.tag[1:])


def text_of(node: SyntaxTreeNode) -> str:
    """Reconstruct the plain text of a node.

    Only literal text descendants survive; emphasis, links and the like
    contribute their inner text while code spans contribute nothing.
    """
    parts = []
    for child in walk(node):
        if child.type == "text":
            text = child.content.strip()
            if text:
                parts.append(text)
    return " ".join(parts)


def start_line(node: SyntaxTreeNode) -> int:
    """Return the 1-based first source line of a block node."""
    if node.is_root or node.map is None:
        raise ValueError(f"{node.type} node carries no source position")
    return node.map[0] + 1


def html_literal(node: SyntaxTreeNode) -> str | None:
    """Return the raw text of an HTML block, or None for any other node."""
    if node.type != "html_block":
        return None
    return node.content.rstrip("\r\n")


def split_lines(text: str) -> tuple[list[str], list[str]]:
    """Split text into lines and the line breaks between them.

    ``\\r\\n``, ``\\r`` and ``\\n`` all end a line, as they do for the parser.
    The break after ``lines[i]`` is ``breaks[i]``; the final line has none.
    """
    parts = _LINE_BREAK_RE.split(text)
    return parts[0::2], parts[1::2]


def count_lines(text: str) -> int:
    """Count source lines the way the parser numbers them.

    A trailing line break terminates the last line rather than starting a
    new one, so ``"a\\nb\\n"`` has two lines and ``""`` has none.
    """
    if not text:
        return 0
    lines, _ = split_lines(text)
    if lines[-1] == "":
        lines.pop()
    return len(lines)
