"""
Request model for the batch recognition endpoint.

The dataclasses here mirror the JSON body of a batch call; to_dict()
produces the exact wire shape (camelCase and hyphenated keys included).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from inkscript.config import RecognitionConfig
from inkscript.models import MAX_HEIGHT, MAX_WIDTH

DEFAULT_CONTENT_TYPE = "Text"
DEFAULT_CONVERSION = "DIGITAL_EDIT"  # required when the REST API is used
DEFAULT_PEN_STYLE = "color: #000000; -myscript-pen-width: ;"
DEFAULT_RESOLUTION = 96
DEFAULT_IMAGE_RESOLUTION = 300
DEFAULT_POINTER_ID = 1


class PointerType(str, Enum):
    PEN = "PEN"
    TOUCH = "TOUCH"
    ERASER = "ERASER"


# =============================================================================
# INK
# =============================================================================


@dataclass
class Stroke:
    """
    A single stroke of digital ink.

    Parallel arrays of coordinates, timestamps (ms) and pressure values.
    Timestamps only need to increase from point to point; they are not
    wall-clock times.
    """

    x: list[int] = field(default_factory=list)
    y: list[int] = field(default_factory=list)
    t: list[int] = field(default_factory=list)
    p: list[float] = field(default_factory=list)
    pointer_type: PointerType = PointerType.PEN
    pointer_id: int = DEFAULT_POINTER_ID
    id: str = ""

    def __len__(self) -> int:
        return len(self.x)

    def add_point(self, x: int, y: int, t: int, p: float) -> None:
        self.x.append(x)
        self.y.append(y)
        self.t.append(t)
        self.p.append(p)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        data.update(
            {
                "pointerType": self.pointer_type.value,
                "pointerId": self.pointer_id,
                "x": list(self.x),
                "y": list(self.y),
                "t": list(self.t),
                "p": list(self.p),
            }
        )
        return data


@dataclass
class StrokeGroup:
    """Strokes sharing one pen style, submitted together."""

    strokes: list[Stroke] = field(default_factory=list)
    pen_style: str = DEFAULT_PEN_STYLE

    def to_dict(self) -> dict[str, Any]:
        return {
            "penStyle": self.pen_style,
            "strokes": [s.to_dict() for s in self.strokes],
        }


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass
class Margin:
    top: int = 0
    left: int = 0
    right: int = 0
    bottom: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"top": self.top, "left": self.left, "right": self.right, "bottom": self.bottom}


@dataclass
class TextConfiguration:
    """Settings for text recognition."""

    guides: bool = False
    margin: Margin = field(default_factory=Margin)
    add_lk_text: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "guides": {"enable": self.guides},
            "margin": self.margin.to_dict(),
            "configuration": {"addLKText": self.add_lk_text},
        }


@dataclass
class JiixConfiguration:
    """
    Options for the JIIX export format.

    With bounding_box, each recognized element is described by a box that
    refers to the input drawing. With words, the result lists every word;
    with chars as well, the character index of each word is included.
    """

    bounding_box: bool = True
    chars: bool = False
    words: bool = True
    strokes: bool = True
    style: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "strokes": self.strokes,
            "bounding-box": self.bounding_box,
            "style": self.style,
            "text": {"chars": self.chars, "words": self.words},
        }


@dataclass
class ExportConfiguration:
    jiix: JiixConfiguration = field(default_factory=JiixConfiguration)
    image_resolution: int = DEFAULT_IMAGE_RESOLUTION

    def to_dict(self) -> dict[str, Any]:
        return {"jiix": self.jiix.to_dict(), "image-resolution": self.image_resolution}


@dataclass
class RawContentConfiguration:
    text: bool = True
    shape: bool = True
    add_lk_text: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "recognition": {"text": self.text, "shape": self.shape},
            "text": {"addLKText": self.add_lk_text},
        }


@dataclass
class Configuration:
    """Root object for the configuration of a batch call."""

    lang: str
    text: TextConfiguration = field(default_factory=TextConfiguration)
    export: ExportConfiguration = field(default_factory=ExportConfiguration)
    raw_content: RawContentConfiguration = field(default_factory=RawContentConfiguration)

    @classmethod
    def from_config(cls, config: RecognitionConfig) -> Configuration:
        return cls(
            lang=config.language,
            text=TextConfiguration(guides=config.guides),
            export=ExportConfiguration(
                jiix=JiixConfiguration(
                    bounding_box=config.bounding_box,
                    chars=config.chars,
                    words=config.words,
                )
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "lang": self.lang,
            "text": self.text.to_dict(),
            "export": self.export.to_dict(),
            "raw-content": self.raw_content.to_dict(),
        }


# =============================================================================
# REQUEST
# =============================================================================


@dataclass
class Request:
    """Root element of a batch call."""

    configuration: Configuration
    width: int = MAX_WIDTH
    height: int = MAX_HEIGHT
    content_type: str = DEFAULT_CONTENT_TYPE
    conversion_state: str = DEFAULT_CONVERSION
    x_dpi: int = DEFAULT_RESOLUTION
    y_dpi: int = DEFAULT_RESOLUTION
    theme: str = ""
    stroke_groups: list[StrokeGroup] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "contentType": self.content_type,
            "conversionState": self.conversion_state,
            "xDPI": self.x_dpi,
            "yDPI": self.y_dpi,
            "theme": self.theme,
            "strokeGroups": [g.to_dict() for g in self.stroke_groups],
            "configuration": self.configuration.to_dict(),
        }


def prepare_request(
    config: RecognitionConfig | None = None,
    stroke_groups: list[StrokeGroup] | None = None,
) -> Request:
    """Create the request for one full notebook page."""
    config = config or RecognitionConfig()
    return Request(
        configuration=Configuration.from_config(config),
        stroke_groups=list(stroke_groups or []),
    )
