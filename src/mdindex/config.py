"""Local configuration for mdindex."""

from __future__ import annotations

import os


DEFAULT_ROOT_DOCUMENT = "README.md"
DEFAULT_MARKDOWN_EXTENSION = ".md"
DEFAULT_TOC_MAX_LEVEL = 3
DEFAULT_LOG_LEVEL = "WARNING"

TOC_MARKER = "TOC"
NAV_MARKER = "NAV"

# Name of the document that represents its directory in listings and navigation.
MDINDEX_ROOT_DOCUMENT = os.getenv("MDINDEX_ROOT_DOCUMENT", DEFAULT_ROOT_DOCUMENT)
MDINDEX_MARKDOWN_EXTENSION = os.getenv("MDINDEX_MARKDOWN_EXTENSION", DEFAULT_MARKDOWN_EXTENSION)
MDINDEX_TOC_MAX_LEVEL = int(os.getenv("MDINDEX_TOC_MAX_LEVEL", str(DEFAULT_TOC_MAX_LEVEL)))
MDINDEX_LOG_LEVEL = os.getenv("MDINDEX_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
