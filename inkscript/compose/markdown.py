"""
Markdown output.

The recognized text is written as is; no attempt is made to detect
lists or headings in the handwriting.
"""

from __future__ import annotations

from inkscript.compose.base import Composer, TextSink, write_tokens
from inkscript.models import Metadata
from inkscript.text.tokenlist import Node

PAGE_BREAK = "\n\n---\n\n"


class MarkdownComposer(Composer):
    """
    Markdown with the title as heading and a thematic break after each page.

    The break also follows the last page.
    """

    name = "md"
    extension = "md"

    def write_header(self, sink: TextSink, metadata: Metadata) -> None:
        sink.write(f"# {metadata.title}\n\n")

    def write_page(self, sink: TextSink, number: int, first: Node | None) -> None:
        sink.write(f"**Page {number}**\n\n")
        write_tokens(sink, first)
        sink.write(PAGE_BREAK)

    def write_footer(self, sink: TextSink, metadata: Metadata) -> None:
        sink.write("\n")
