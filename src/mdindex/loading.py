"""Load a directory tree of Markdown files into documents and directories."""

from __future__ import annotations

import asyncio
import locale
import logging
import os
import stat

from mdindex.config import MDINDEX_MARKDOWN_EXTENSION, MDINDEX_ROOT_DOCUMENT
from mdindex.file_utils import (
    file_exists_async,
    list_dir_async,
    read_text_async,
    stat_async,
)
from mdindex.markdown import (
    count_lines,
    heading_level,
    iter_headings,
    parse_markdown,
    text_of,
)
from mdindex.schemas import Directory, Document, FsObject
from mdindex.sections import build_sections

logger = logging.getLogger(__name__)


async def load(fsname: str) -> FsObject:
    """Load a path as a directory or a document, depending on what it is.

    Raises:
        OSError: If the path, or anything beneath it, cannot be read.
    """
    info = await stat_async(fsname)
    if stat.S_ISDIR(info.st_mode):
        return await load_directory(fsname)
    return await load_document(fsname)


async def _load_entry(fsname: str) -> FsObject:
    info = await stat_async(fsname)
    if stat.S_ISDIR(info.st_mode):
        return await load_directory(fsname)
    if not is_markdown(fsname):
        # Pruned by the caller, so the contents are never needed.
        return _unindexed_document(fsname)
    return await load_document(fsname)


async def load_directory(dirname: str) -> Directory:
    """Load a directory, its root document and every indexable entry below it.

    Entries are sorted by name and loaded concurrently. Entries without
    content are pruned once their own subtrees are loaded, so a directory
    holding nothing but empty directories is itself empty.
    """
    names = [
        name
        for name in await list_dir_async(dirname)
        if name != MDINDEX_ROOT_DOCUMENT and not name.startswith(".")
    ]
    names.sort(key=_name_sort_key)

    root_path = os.path.join(dirname, MDINDEX_ROOT_DOCUMENT)
    root_document = (
        await load_document(root_path) if await file_exists_async(root_path) else None
    )

    loaded = await asyncio.gather(*(_load_entry(os.path.join(dirname, name)) for name in names))
    entries = []
    for entry in loaded:
        if has_content(entry):
            entries.append(entry)
        else:
            logger.debug("Skipping %s: nothing to index", entry.filename)

    title = root_document.title if root_document else _basename(dirname)
    return Directory(
        filename=dirname,
        title=title,
        entries=entries,
        root_document=root_document,
    )


async def load_document(filename: str) -> Document:
    """Read and parse a Markdown file.

    A leading level-1 heading becomes the document title and is left out of
    the section tree; without one the title is the file name minus its
    extension.
    """
    contents = await read_text_async(filename)
    tree = parse_markdown(contents)

    headings = [(heading_level(node), text_of(node)) for node in iter_headings(tree)]

    title = _strip_extension(os.path.basename(filename))
    if headings and headings[0][0] == 1:
        title = headings.pop(0)[1]

    sections = build_sections(filename, headings)
    logger.debug("Loaded %s: %r with %d top-level sections", filename, title, len(sections))
    return Document(
        filename=filename,
        title=title,
        sections=sections,
        tree=tree,
        line_count=count_lines(contents),
    )


def has_content(obj: FsObject) -> bool:
    """Return True if an entry deserves a place in its directory's listing."""
    if isinstance(obj, Document):
        return is_markdown(obj.filename)
    return obj.root_document is not None or len(obj.entries) > 0


def is_markdown(filename: str) -> bool:
    return filename.endswith(MDINDEX_MARKDOWN_EXTENSION)


def _unindexed_document(filename: str) -> Document:
    return Document(
        filename=filename,
        title=os.path.basename(filename),
        tree=parse_markdown(""),
    )


def _name_sort_key(name: str) -> tuple[str, str]:
    # Case-insensitive first, exact name as the tiebreak.
    return (locale.strxfrm(name.casefold()), locale.strxfrm(name))


def _strip_extension(basename: str) -> str:
    if basename.endswith(MDINDEX_MARKDOWN_EXTENSION):
        return basename[: -len(MDINDEX_MARKDOWN_EXTENSION)]
    return basename


def _basename(dirname: str) -> str:
    return os.path.basename(os.path.normpath(dirname))
