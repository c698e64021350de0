"""End-to-end indexing: load a tree, compute its mutations, write them."""

from __future__ import annotations

import logging

from mdindex.indexing import index_object
from mdindex.loading import load
from mdindex.mutate import apply_mutations
from mdindex.schemas import FileMutation

logger = logging.getLogger(__name__)


async def index_path(path: str) -> list[FileMutation]:
    """Index a directory tree or a single document in place.

    Args:
        path: Directory or Markdown file to index.

    Returns:
        The mutations that were written, one entry per file.

    Raises:
        OSError: If any file cannot be read or written. Files written before
            the failure are left as they are.
    """
    tree = await load(path)
    mutations = index_object(tree)
    logger.debug("Computed mutations for %d files under %s", len(mutations), path)
    await apply_mutations(mutations)
    return mutations
