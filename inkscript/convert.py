"""
Notebook conversion orchestrator.

This module provides the `convert()` function that turns a notebook into
a text document by wiring together:
- Recognizer (ink to recognition results, cached)
- Text pipeline (token lists, dehyphenation)
- Composer (plain text or Markdown output)
"""

from __future__ import annotations

import io
import logging
from collections.abc import Mapping

from inkscript.compose import TextSink, get_composer
from inkscript.models import Document, Metadata, Result
from inkscript.recognition.recognizer import Recognizer
from inkscript.text.pipeline import DEFAULT_PIPELINE, PipelineFunc
from inkscript.text.result import to_token_list
from inkscript.text.tokenlist import Node

logger = logging.getLogger(__name__)


def prepare_pages(
    results: Mapping[str, Result],
    pipeline: PipelineFunc = DEFAULT_PIPELINE,
) -> dict[str, Node | None]:
    """Build the token list of each page and run the text pipeline on it."""
    pages: dict[str, Node | None] = {}
    for page_id, result in results.items():
        pages[page_id] = pipeline(to_token_list(result))
    return pages


def convert(
    document: Document,
    recognizer: Recognizer,
    sink: TextSink,
    fmt: str = "txt",
    pipeline: PipelineFunc = DEFAULT_PIPELINE,
    language: str | None = None,
) -> None:
    """
    Recognize a notebook and write it to sink.

    Args:
        document: The notebook to convert.
        recognizer: Recognizer used for all pages.
        sink: Writable text stream receiving the output.
        fmt: Output format ("txt" or "md").
        pipeline: Text repair applied to each page.
        language: Optional recognition language override.

    Raises:
        UnsupportedFormatError: If fmt is not supported (checked before
            any recognition call is made).
        PageRecognitionError: If any page could not be recognized.
        OSError: If writing to sink fails.

    Example:
        >>> with open("notes.md", "w", encoding="utf-8") as f:
        ...     convert(read_document("notes/"), recognizer, f, fmt="md")
    """
    composer = get_composer(fmt)
    metadata = Metadata.of(document)

    results = recognizer.recognize(document, language=language)
    pages = prepare_pages(results, pipeline)

    composer.compose(sink, metadata, pages)
    logger.debug("Composed %d pages of %r as %s", len(pages), metadata.title, fmt)


def transcribe(
    document: Document,
    recognizer: Recognizer,
    fmt: str = "txt",
    pipeline: PipelineFunc = DEFAULT_PIPELINE,
    language: str | None = None,
) -> str:
    """Like convert(), but return the output as a string."""
    buffer = io.StringIO()
    convert(document, recognizer, buffer, fmt=fmt, pipeline=pipeline, language=language)
    return buffer.getvalue()
