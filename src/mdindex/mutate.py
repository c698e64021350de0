"""Apply line-range mutations to files."""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable

from mdindex.file_utils import read_text_async, write_text_async
from mdindex.markdown import split_lines
from mdindex.schemas import FileMutation, TextMutation

logger = logging.getLogger(__name__)


async def apply_mutations(file_mutations: Iterable[FileMutation]) -> None:
    """Rewrite every targeted file concurrently.

    The first failure propagates; files already written stay written.
    """
    await asyncio.gather(
        *(mutate_file(fm.filename, fm.mutations) for fm in file_mutations)
    )


async def mutate_file(filename: str, mutations: Iterable[TextMutation]) -> None:
    """Apply a set of non-overlapping mutations to one file in place."""
    contents = await read_text_async(filename)
    await write_text_async(filename, apply_to_text(contents, mutations))
    logger.debug("Wrote %s", filename)


def apply_to_text(text: str, mutations: Iterable[TextMutation]) -> str:
    """Apply non-overlapping mutations to text and return the result.

    Mutations are applied bottom-up so that the line numbers of those still
    pending stay valid. Each one replaces lines ``[start_line, end_line)``
    with its content as a single block. Overlapping spans are not detected.

    Line breaks outside the replaced ranges are kept as they were; an
    inserted block is followed by ``\\n``.
    """
    lines, breaks = split_lines(text)
    for mutation in sorted(mutations, key=lambda m: m.start_line, reverse=True):
        start = mutation.start_line - 1
        stop = (mutation.end_line or mutation.start_line) - 1
        if stop > start:
            # The break after the last replaced line now follows the block.
            del breaks[start : stop - 1]
        else:
            breaks.insert(min(start, len(breaks)), "\n")
        lines[start:stop] = [mutation.new_content]

    parts = [lines[0]]
    for line_break, line in zip(breaks, lines[1:]):
        parts.append(line_break)
        parts.append(line)
    return "".join(parts)
