"""
InkScript: Convert handwritten notebooks to plain text or Markdown.

The pen strokes of each page are sent to a handwriting recognition
service, the recognized text is repaired (words hyphenated across line
breaks are rejoined) and the pages are composed into one document.
Recognition results are cached on disk, keyed by the ink content.

Example:
    >>> import inkscript
    >>> settings = inkscript.load_settings()
    >>> doc = inkscript.read_document("~/notebooks/meeting")
    >>> with inkscript.Recognizer.from_settings(settings) as recognizer:
    ...     print(inkscript.transcribe(doc, recognizer, fmt="md"))
"""

from inkscript.compose import (
    Composer,
    MarkdownComposer,
    PlaintextComposer,
    get_composer,
    supported_formats,
)
from inkscript.config import (
    LANG_DE,
    LANG_EN,
    RecognitionConfig,
    Settings,
    load_settings,
)
from inkscript.convert import convert, prepare_pages, transcribe
from inkscript.exceptions import (
    BadResponseError,
    ConfigurationError,
    DocumentError,
    InkScriptError,
    PageRecognitionError,
    RecognitionError,
    UnsupportedFormatError,
)
from inkscript.models import (
    # Ink
    BrushType,
    Document,
    Dot,
    Drawing,
    InkStroke,
    Layer,
    Metadata,
    # Recognition output
    Result,
    Word,
)
from inkscript.readers import LocalDocument, read_document
from inkscript.recognition import (
    ContentCache,
    RecognitionClient,
    RecognitionStats,
    Recognizer,
    fingerprint,
)
from inkscript.text import DEFAULT_PIPELINE, Node, Token, build_pipeline, dehyphenate, to_text

__version__ = "0.1.0"
__all__ = [
    # Main API
    "convert",
    "transcribe",
    "prepare_pages",
    "read_document",
    "LocalDocument",
    # Configuration
    "Settings",
    "RecognitionConfig",
    "load_settings",
    "LANG_EN",
    "LANG_DE",
    # Recognition
    "Recognizer",
    "RecognitionStats",
    "RecognitionClient",
    "ContentCache",
    "fingerprint",
    # Text
    "Token",
    "Node",
    "to_text",
    "dehyphenate",
    "build_pipeline",
    "DEFAULT_PIPELINE",
    # Composers
    "Composer",
    "PlaintextComposer",
    "MarkdownComposer",
    "get_composer",
    "supported_formats",
    # Models
    "Document",
    "Metadata",
    "Drawing",
    "Layer",
    "InkStroke",
    "Dot",
    "BrushType",
    "Result",
    "Word",
    # Exceptions
    "InkScriptError",
    "ConfigurationError",
    "DocumentError",
    "RecognitionError",
    "BadResponseError",
    "PageRecognitionError",
    "UnsupportedFormatError",
]
