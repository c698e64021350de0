"""Async filesystem helpers backed by a thread pool."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path


async def read_text_async(path: str | Path, encoding: str = "utf-8") -> str:
    """Read text from a file asynchronously using a thread pool.

    Line endings are returned untranslated.

    Args:
        path: Path to the file to read.
        encoding: Text encoding to use.

    Returns:
        The file contents as a string.
    """
    return await asyncio.to_thread(_read_text, Path(path), encoding)


def _read_text(path: Path, encoding: str) -> str:
    with path.open("r", encoding=encoding, newline="") as handle:
        return handle.read()


async def write_text_async(
    path: str | Path, content: str, encoding: str = "utf-8"
) -> None:
    """Write text to a file asynchronously using a thread pool.

    Newlines are written exactly as given.

    Args:
        path: Path to the file to write.
        content: Text content to write.
        encoding: Text encoding to use.
    """
    await asyncio.to_thread(_write_text, Path(path), content, encoding)


def _write_text(path: Path, content: str, encoding: str) -> None:
    with path.open("w", encoding=encoding, newline="") as handle:
        handle.write(content)


async def stat_async(path: str | Path) -> os.stat_result:
    """Stat a path asynchronously using a thread pool."""
    return await asyncio.to_thread(os.stat, path)


async def list_dir_async(path: str | Path) -> list[str]:
    """List the entry names of a directory asynchronously, in no particular order."""
    return await asyncio.to_thread(os.listdir, path)


async def file_exists_async(path: str | Path) -> bool:
    """Check whether a path exists.

    Only a missing path counts as absent; any other stat failure, such as a
    permission error, is raised.

    Args:
        path: Path to probe.

    Returns:
        True if the path exists, False if it does not.
    """
    try:
        await stat_async(path)
    except FileNotFoundError:
        return False
    return True
