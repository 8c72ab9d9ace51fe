"""Notebook readers."""

from inkscript.readers.local import (
    INDEX_FILENAME,
    LocalDocument,
    read_document,
)

__all__ = [
    "LocalDocument",
    "read_document",
    "INDEX_FILENAME",
]
