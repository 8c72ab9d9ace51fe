"""
Content fingerprints for recognition requests.

The fingerprint is the cache key for a page. It covers every request
field that affects recognition, and leaves out the point timestamps:
those are synthesized during conversion, so identical ink must map to
the same key no matter when it was converted.
"""

from __future__ import annotations

import hashlib
import struct
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hashlib import _Hash

    from inkscript.recognition.request import Configuration, Request, Stroke


def fingerprint(request: Request) -> str:
    """
    Return the hex digest identifying the recognition content of a request.

    Example:
        >>> fingerprint(req) == fingerprint(copy_with_other_timestamps)
        True
    """
    h = hashlib.sha1()
    _int(h, request.width)
    _int(h, request.height)
    _str(h, request.conversion_state)
    _str(h, request.content_type)
    _int(h, request.x_dpi)
    _int(h, request.y_dpi)
    _configuration(h, request.configuration)
    for group in request.stroke_groups:
        for stroke in group.strokes:
            _stroke(h, stroke)
    return h.hexdigest()


def _configuration(h: _Hash, config: Configuration) -> None:
    _str(h, config.lang)

    text = config.text
    _bool(h, text.guides)
    _bool(h, text.add_lk_text)
    for margin in (text.margin.top, text.margin.left, text.margin.right, text.margin.bottom):
        _int(h, margin)

    export = config.export
    _int(h, export.image_resolution)
    _bool(h, export.jiix.strokes)
    _bool(h, export.jiix.bounding_box)
    _bool(h, export.jiix.chars)
    _bool(h, export.jiix.words)

    raw = config.raw_content
    _bool(h, raw.text)
    _bool(h, raw.shape)
    _bool(h, raw.add_lk_text)


def _stroke(h: _Hash, stroke: Stroke) -> None:
    _str(h, stroke.pointer_type.value)
    for x, y, p in zip(stroke.x, stroke.y, stroke.p):
        _int(h, x)
        _int(h, y)
        h.update(struct.pack("<d", p))


def _int(h: _Hash, value: int) -> None:
    h.update(struct.pack("<q", value))


def _bool(h: _Hash, value: bool) -> None:
    h.update(struct.pack("<?", value))


def _str(h: _Hash, value: str) -> None:
    data = value.encode("utf-8")
    _int(h, len(data))
    h.update(data)
