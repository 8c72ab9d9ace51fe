"""
Exception classes for InkScript.

All InkScript exceptions inherit from InkScriptError,
making it easy to catch all library errors.

Example:
    >>> try:
    ...     results = recognizer.recognize(doc)
    ... except inkscript.PageRecognitionError as e:
    ...     print(f"Page {e.page_id} failed: {e}")
    ... except inkscript.InkScriptError as e:
    ...     print(f"InkScript error: {e}")
"""

from __future__ import annotations

from typing import Any


class InkScriptError(Exception):
    """
    Base exception for all InkScript errors.

    Catch this to handle any InkScript-specific error.
    """

    pass


class ConfigurationError(InkScriptError):
    """
    Raised for invalid or incomplete configuration.

    Example:
        >>> RecognitionConfig(language="xx")
        ConfigurationError: language must be one of ('en_US', 'de_DE'), got 'xx'
    """

    pass


class DocumentError(InkScriptError):
    """Raised when a notebook or one of its page drawings cannot be read."""

    pass


class UnsupportedFormatError(InkScriptError):
    """
    Raised when an output format is not supported.

    Example:
        >>> get_composer("docx")
        UnsupportedFormatError: Format 'docx' is not supported. Supported: md, txt
    """

    pass


class RecognitionError(InkScriptError):
    """
    Raised when the remote recognition call fails.

    Covers network failures and non-success responses. The HTTP status
    and the decoded error body (if any) are kept for diagnostics.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        detail: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class BadResponseError(RecognitionError):
    """Raised when a response body from the recognition service cannot be decoded."""

    pass


class PageRecognitionError(RecognitionError):
    """
    Raised by the recognizer when recognition fails for one page.

    The original error is available as ``__cause__``.
    """

    def __init__(self, page_id: str, cause: Exception) -> None:
        status_code = getattr(cause, "status_code", None)
        detail = getattr(cause, "detail", None)
        super().__init__(
            f"Recognition failed for page {page_id}: {cause}",
            status_code=status_code,
            detail=detail,
        )
        self.page_id = page_id
