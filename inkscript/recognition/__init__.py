"""
Handwriting recognition: ink conversion, caching and the remote service.

Example:
    >>> from inkscript.recognition import Recognizer
    >>> recognizer = Recognizer.from_settings(settings)
    >>> results = recognizer.recognize(doc)
"""

from inkscript.recognition.cache import ContentCache
from inkscript.recognition.client import RecognitionClient
from inkscript.recognition.fingerprint import fingerprint
from inkscript.recognition.ink import (
    MIN_SPEED,
    SPEED_FACTOR,
    STROKE_GAP,
    clamp_pressure,
    convert_drawing,
    convert_layer,
    convert_stroke,
)
from inkscript.recognition.recognizer import RecognitionStats, Recognizer
from inkscript.recognition.request import (
    Configuration,
    PointerType,
    Request,
    Stroke,
    StrokeGroup,
    prepare_request,
)

__all__ = [
    # Orchestration
    "Recognizer",
    "RecognitionStats",
    # Service
    "RecognitionClient",
    # Cache
    "ContentCache",
    "fingerprint",
    # Ink conversion
    "convert_drawing",
    "convert_layer",
    "convert_stroke",
    "clamp_pressure",
    "SPEED_FACTOR",
    "MIN_SPEED",
    "STROKE_GAP",
    # Request model
    "Request",
    "StrokeGroup",
    "Stroke",
    "PointerType",
    "Configuration",
    "prepare_request",
]
