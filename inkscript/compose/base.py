"""
Composers render recognized pages into an output document.

A composer writes to any text sink with a write(str) method (an open
file, sys.stdout, io.StringIO). The first failed write aborts the
composition and propagates; output written so far is left as is.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from typing import Protocol

from inkscript.models import Metadata
from inkscript.text.tokenlist import Node


class TextSink(Protocol):
    def write(self, s: str, /) -> object: ...


class Composer(ABC):
    """Abstract base for output formats."""

    name: str = "base"
    extension: str = ""

    def compose(
        self,
        sink: TextSink,
        metadata: Metadata,
        pages: Mapping[str, Node | None],
    ) -> None:
        """
        Write the document to sink.

        Pages are written in the metadata's page order; page ids without
        an entry in pages are skipped.

        Args:
            sink: Writable text stream.
            metadata: Title and page order of the document.
            pages: Page id to the first node of that page's token list.
        """
        self.write_header(sink, metadata)
        for number, first in present_pages(metadata, pages):
            self.write_page(sink, number, first)
        self.write_footer(sink, metadata)

    @abstractmethod
    def write_header(self, sink: TextSink, metadata: Metadata) -> None:
        pass

    @abstractmethod
    def write_page(self, sink: TextSink, number: int, first: Node | None) -> None:
        """Write one page; number is 1-based."""
        pass

    def write_footer(self, sink: TextSink, metadata: Metadata) -> None:
        pass


def present_pages(
    metadata: Metadata,
    pages: Mapping[str, Node | None],
) -> Iterator[tuple[int, Node | None]]:
    """Yield (1-based page number, first node) for pages that have results."""
    for index, page_id in enumerate(metadata.page_ids):
        if page_id in pages:
            yield index + 1, pages[page_id]


def write_tokens(sink: TextSink, first: Node | None) -> None:
    """Write the text of every token in list order."""
    if first is None:
        return
    for token in first.iter_tokens():
        sink.write(token.text)
