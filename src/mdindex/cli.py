"""Command-line entry point for mdindex."""

from __future__ import annotations

import argparse
import asyncio
import locale
import logging

from mdindex.config import MDINDEX_LOG_LEVEL
from mdindex.pipeline import index_path

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="mdindex",
        description="Write tables of contents and navigation links into Markdown files.",
    )
    parser.add_argument(
        "path", nargs="?", default=".", help="Directory or Markdown file to index (default: .)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every file touched")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else MDINDEX_LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.warning("Sorting names by code point: %s", exc)

    try:
        mutations = asyncio.run(index_path(args.path))
    except Exception:
        logger.exception("Indexing %s failed", args.path)
        return 1

    logger.info("Indexed %d files under %s", len(mutations), args.path)
    return 0
