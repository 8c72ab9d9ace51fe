"""
Pytest configuration and fixtures for InkScript tests.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from inkscript.models import BrushType, Dot, Drawing, InkStroke, Layer, Result, Word
from inkscript.recognition.client import RecognitionClient
from inkscript.text.token import Token
from inkscript.text.tokenlist import build_linked_list


@dataclass
class FakeDocument:
    """In-memory notebook for tests."""

    title: str
    drawings: dict[str, Drawing] = field(default_factory=dict)

    def pages(self) -> list[str]:
        return list(self.drawings)

    def drawing(self, page_id: str) -> Drawing:
        return self.drawings[page_id]


def make_list(*texts: str):
    """Build a token list from literal token texts; returns the first node."""
    return build_linked_list(Token(t) for t in texts)


def make_drawing(*points: tuple[float, float], brush: BrushType = BrushType.BALLPOINT) -> Drawing:
    """A one-layer, one-stroke drawing through the given points."""
    dots = [Dot(x=x, y=y, speed=1.0, pressure=0.5) for x, y in points]
    return Drawing(layers=[Layer(strokes=[InkStroke(brush_type=brush, dots=dots)])])


def make_result(*labels: str) -> Result:
    """A recognition result with one word per label."""
    return Result(label="".join(labels), words=[Word(label=label) for label in labels])


@pytest.fixture(name="make_list")
def make_list_fixture():
    return make_list


@pytest.fixture(name="make_drawing")
def make_drawing_fixture():
    return make_drawing


@pytest.fixture(name="make_result")
def make_result_fixture():
    return make_result


@pytest.fixture
def sample_drawing() -> Drawing:
    return make_drawing((10.0, 10.0), (20.0, 15.0), (30.0, 20.0))


@pytest.fixture
def sample_document() -> FakeDocument:
    return FakeDocument(
        title="My Title",
        drawings={
            "p1": make_drawing((10.0, 10.0), (20.0, 20.0)),
            "p2": make_drawing((100.0, 100.0), (110.0, 120.0)),
        },
    )


@pytest.fixture
def mock_client() -> MagicMock:
    """A RecognitionClient double returning one fixed result."""
    client = MagicMock(spec=RecognitionClient)
    client.batch.return_value = make_result("hello", " ", "world")
    return client


@pytest.fixture
def notebook_dir(tmp_path: Path) -> Path:
    """A notebook exported to disk with two pages."""
    path = tmp_path / "notebook"
    path.mkdir()
    (path / "notebook.json").write_text(
        json.dumps({"title": "Meeting Notes", "pages": ["p1", "p2"]}), encoding="utf-8"
    )
    for page_id, offset in (("p1", 0), ("p2", 200)):
        drawing = {
            "layers": [
                {
                    "strokes": [
                        {
                            "brush": int(BrushType.FINELINER),
                            "dots": [
                                {"x": 10 + offset, "y": 10, "speed": 1.0, "pressure": 0.4},
                                {"x": 20 + offset, "y": 30, "speed": 2.0, "pressure": 0.6},
                            ],
                        }
                    ]
                }
            ]
        }
        (path / f"{page_id}.json").write_text(json.dumps(drawing), encoding="utf-8")
    return path


@pytest.fixture(name="make_document")
def make_document_fixture():
    return FakeDocument
