"""
Output composers (plain text, Markdown).

Example:
    >>> composer = get_composer("md")
    >>> with open("notes.md", "w", encoding="utf-8") as f:
    ...     composer.compose(f, Metadata.of(doc), pages)
"""

from __future__ import annotations

from inkscript.compose.base import Composer, TextSink, present_pages, write_tokens
from inkscript.compose.markdown import MarkdownComposer
from inkscript.compose.plaintext import PlaintextComposer
from inkscript.exceptions import UnsupportedFormatError

COMPOSERS: dict[str, type[Composer]] = {
    PlaintextComposer.name: PlaintextComposer,
    MarkdownComposer.name: MarkdownComposer,
}


def supported_formats() -> list[str]:
    """Return the list of output formats."""
    return sorted(COMPOSERS)


def get_composer(fmt: str) -> Composer:
    """
    Return the composer for an output format.

    Raises:
        UnsupportedFormatError: If fmt is not one of supported_formats().
    """
    try:
        return COMPOSERS[fmt]()
    except KeyError:
        raise UnsupportedFormatError(
            f"Format '{fmt}' is not supported. Supported: {', '.join(supported_formats())}"
        ) from None


__all__ = [
    "Composer",
    "TextSink",
    "PlaintextComposer",
    "MarkdownComposer",
    "COMPOSERS",
    "get_composer",
    "supported_formats",
    "present_pages",
    "write_tokens",
]
