"""
Data models for InkScript.

Two groups:
- Ink input: Drawing → Layer → InkStroke → Dot, as recorded by the tablet
- Recognition output: Result and its JIIX parts (Word, Char, Item, ...)

Recognition models mirror the JIIX JSON keys in to_dict()/from_dict()
so that cached results round-trip through the same shape the service
returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Protocol, runtime_checkable

# Page size of the tablet canvas in device units
MAX_WIDTH = 1404
MAX_HEIGHT = 1872


# ═══════════════════════════════════════════════════════════════════════════════
# Ink Input
# ═══════════════════════════════════════════════════════════════════════════════


class BrushType(IntEnum):
    """Brush codes used in the tablet's line format (v3 and v5 variants)."""

    PAINTBRUSH = 0
    PENCIL = 1
    BALLPOINT = 2
    MARKER = 3
    FINELINER = 4
    HIGHLIGHTER = 5
    ERASER = 6
    MECHANICAL_PENCIL = 7
    ERASE_AREA = 8
    PAINTBRUSH_V5 = 12
    MECHANICAL_PENCIL_V5 = 13
    PENCIL_V5 = 14
    BALLPOINT_V5 = 15
    MARKER_V5 = 16
    FINELINER_V5 = 17
    HIGHLIGHTER_V5 = 18
    CALLIGRAPHY_V5 = 21

    @classmethod
    def _missing_(cls, value: object) -> BrushType | None:
        # Codes added by newer firmware are kept as plain pen ink
        if not isinstance(value, int):
            return None
        member = int.__new__(cls, value)
        member._name_ = f"UNKNOWN_{value}"
        member._value_ = value
        return member

    @property
    def is_eraser(self) -> bool:
        """Eraser and erase-area brushes."""
        return self in (BrushType.ERASER, BrushType.ERASE_AREA)

    @property
    def is_text(self) -> bool:
        """Whether strokes of this brush carry handwriting."""
        return not self.is_eraser and self not in (
            BrushType.HIGHLIGHTER,
            BrushType.HIGHLIGHTER_V5,
        )


@dataclass(frozen=True)
class Dot:
    """A single sampled pen position."""

    x: float
    y: float
    speed: float = 0.0
    direction: float = 0.0
    width: float = 0.0
    pressure: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Dot:
        """Create from dictionary."""
        return cls(
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
            speed=float(data.get("speed", 0.0)),
            direction=float(data.get("direction", 0.0)),
            width=float(data.get("width", 0.0)),
            pressure=float(data.get("pressure", 0.0)),
        )


@dataclass
class InkStroke:
    """One continuous pen gesture."""

    brush_type: BrushType
    dots: list[Dot] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InkStroke:
        """Create from dictionary."""
        return cls(
            brush_type=BrushType(int(data.get("brush", BrushType.BALLPOINT))),
            dots=[Dot.from_dict(d) for d in data.get("dots", [])],
        )


@dataclass
class Layer:
    """An ordered set of strokes drawn on one layer of a page."""

    strokes: list[InkStroke] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Layer:
        """Create from dictionary."""
        return cls(strokes=[InkStroke.from_dict(s) for s in data.get("strokes", [])])


@dataclass
class Drawing:
    """The raw digital ink content of one page."""

    layers: list[Layer] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Drawing:
        """Create from dictionary."""
        return cls(layers=[Layer.from_dict(layer) for layer in data.get("layers", [])])


@runtime_checkable
class Document(Protocol):
    """A notebook: an ordered list of pages, each with a drawing."""

    @property
    def title(self) -> str: ...

    def pages(self) -> list[str]: ...

    def drawing(self, page_id: str) -> Drawing: ...


@dataclass(frozen=True)
class Metadata:
    """What a composer needs to know about a document."""

    title: str
    page_ids: list[str] = field(default_factory=list)

    @classmethod
    def of(cls, document: Document) -> Metadata:
        """Take title and page order from a document."""
        return cls(title=document.title, page_ids=list(document.pages()))


# ═══════════════════════════════════════════════════════════════════════════════
# Recognition Output (JIIX)
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass
class BoundingBox:
    """Bounding box; coordinates are in millimetres."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0 and self.width == 0 and self.height == 0

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> BoundingBox:
        data = data or {}
        return cls(
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
            width=float(data.get("width", 0.0)),
            height=float(data.get("height", 0.0)),
        )


@dataclass
class Point:
    x: float = 0.0
    y: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Point:
        return cls(x=float(data.get("x", 0.0)), y=float(data.get("y", 0.0)))


@dataclass
class Item:
    """An ink item (stroke reference) that contributed to a word or char."""

    id: str = ""
    type: str = ""
    timestamp: str = ""  # e.g. "2021-01-09 13:23:42.196250"
    label: str = ""
    baseline: float = 0.0
    x_height: float = 0.0
    left_side_bearing: float = 0.0
    bounding_box: BoundingBox = field(default_factory=BoundingBox)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "timestamp": self.timestamp,
            "label": self.label,
            "baseline": self.baseline,
            "x-height": self.x_height,
            "left-side-bearing": self.left_side_bearing,
            "bounding-box": self.bounding_box.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Item:
        return cls(
            id=data.get("id", ""),
            type=data.get("type", ""),
            timestamp=data.get("timestamp", ""),
            label=data.get("label", ""),
            baseline=float(data.get("baseline", 0.0)),
            x_height=float(data.get("x-height", 0.0)),
            left_side_bearing=float(data.get("left-side-bearing", 0.0)),
            bounding_box=BoundingBox.from_dict(data.get("bounding-box")),
        )


@dataclass
class Word:
    """
    A single recognized "word", including whitespace or punctuation.

    Concatenating the labels of all words gives the full text.
    """

    label: str
    reflow_label: str = ""
    first_char: int = 0
    last_char: int = 0
    bounding_box: BoundingBox = field(default_factory=BoundingBox)
    candidates: list[str] = field(default_factory=list)
    items: list[Item] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"label": self.label, "reflow-label": self.reflow_label}
        if self.first_char:
            data["first-char"] = self.first_char
        if self.last_char:
            data["last-char"] = self.last_char
        if not self.bounding_box.is_zero:
            data["bounding-box"] = self.bounding_box.to_dict()
        if self.candidates:
            data["candidates"] = list(self.candidates)
        if self.items:
            data["items"] = [i.to_dict() for i in self.items]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Word:
        return cls(
            label=data.get("label", ""),
            reflow_label=data.get("reflow-label", ""),
            first_char=int(data.get("first-char", 0)),
            last_char=int(data.get("last-char", 0)),
            bounding_box=BoundingBox.from_dict(data.get("bounding-box")),
            candidates=list(data.get("candidates") or []),
            items=[Item.from_dict(i) for i in data.get("items") or []],
        )


@dataclass
class Char:
    label: str
    word: int = 0
    grid: list[Point] = field(default_factory=list)
    bounding_box: BoundingBox = field(default_factory=BoundingBox)
    items: list[Item] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "label": self.label,
            "word": self.word,
            "grid": [p.to_dict() for p in self.grid],
        }
        if not self.bounding_box.is_zero:
            data["bounding-box"] = self.bounding_box.to_dict()
        if self.items:
            data["items"] = [i.to_dict() for i in self.items]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Char:
        return cls(
            label=data.get("label", ""),
            word=int(data.get("word", 0)),
            grid=[Point.from_dict(p) for p in data.get("grid") or []],
            bounding_box=BoundingBox.from_dict(data.get("bounding-box")),
            items=[Item.from_dict(i) for i in data.get("items") or []],
        )


@dataclass
class Linebreak:
    line: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"line": self.line}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Linebreak:
        return cls(line=int(data.get("line", 0)))


@dataclass
class Result:
    """
    Recognition output for one page.

    The label contains the complete recognized text. If the "words"
    export option was enabled, words holds the individual words and
    whitespace in reading order.

    Example:
        >>> result = Result.from_dict(response.json())
        >>> result.label
        'Hello world'
        >>> [w.label for w in result.words]
        ['Hello', ' ', 'world']
    """

    label: str = ""
    id: str = ""
    version: str = ""
    type: str = ""
    bounding_box: BoundingBox = field(default_factory=BoundingBox)
    words: list[Word] = field(default_factory=list)
    chars: list[Char] = field(default_factory=list)
    linebreaks: list[Linebreak] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "version": self.version,
            "type": self.type,
            "label": self.label,
            "bounding-box": self.bounding_box.to_dict(),
            "words": [w.to_dict() for w in self.words],
            "chars": [c.to_dict() for c in self.chars],
            "linebreaks": [lb.to_dict() for lb in self.linebreaks],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Result:
        """
        Create from a decoded JSON object.

        Raises:
            ValueError: If data is not a JSON object.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Result must be a JSON object, got {type(data).__name__}")
        return cls(
            id=data.get("id", ""),
            version=data.get("version", ""),
            type=data.get("type", ""),
            label=data.get("label", ""),
            bounding_box=BoundingBox.from_dict(data.get("bounding-box")),
            words=[Word.from_dict(w) for w in data.get("words") or []],
            chars=[Char.from_dict(c) for c in data.get("chars") or []],
            linebreaks=[Linebreak.from_dict(lb) for lb in data.get("linebreaks") or []],
        )
