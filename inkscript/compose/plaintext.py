"""Plain text output."""

from __future__ import annotations

from inkscript.compose.base import Composer, TextSink, write_tokens
from inkscript.models import Metadata
from inkscript.text.tokenlist import Node


class PlaintextComposer(Composer):
    """
    Plain text with an uppercased title and numbered page markers.

    Example output:

        MY TITLE

        [Page 1]

        foo bar
    """

    name = "txt"
    extension = "txt"

    def write_header(self, sink: TextSink, metadata: Metadata) -> None:
        if metadata.title:
            sink.write(metadata.title.upper() + "\n")

    def write_page(self, sink: TextSink, number: int, first: Node | None) -> None:
        sink.write(f"\n[Page {number}]\n\n")
        write_tokens(sink, first)
        sink.write("\n")
