"""Shared schemas for mdindex."""

from mdindex.schemas.documents import Directory, Document, FsObject
from mdindex.schemas.mutations import FileMutation, Span, TextMutation
from mdindex.schemas.navigation import NavContext
from mdindex.schemas.sections import Section

__all__ = [
    "Directory",
    "Document",
    "FileMutation",
    "FsObject",
    "NavContext",
    "Section",
    "Span",
    "TextMutation",
]
