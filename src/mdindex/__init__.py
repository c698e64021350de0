"""mdindex: tables of contents and navigation for Markdown trees."""

from mdindex.indexing import index_directory, index_document, index_object, make_mutation
from mdindex.loading import load, load_directory, load_document
from mdindex.mutate import apply_mutations, apply_to_text, mutate_file
from mdindex.pipeline import index_path
from mdindex.schemas import (
    Directory,
    Document,
    FileMutation,
    FsObject,
    NavContext,
    Section,
    Span,
    TextMutation,
)

__all__ = [
    "Directory",
    "Document",
    "FileMutation",
    "FsObject",
    "NavContext",
    "Section",
    "Span",
    "TextMutation",
    "apply_mutations",
    "apply_to_text",
    "index_directory",
    "index_document",
    "index_object",
    "index_path",
    "load",
    "load_directory",
    "load_document",
    "make_mutation",
    "mutate_file",
]
