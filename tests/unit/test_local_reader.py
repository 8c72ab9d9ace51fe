"""
Unit tests for the local notebook reader.
"""

import json

import pytest

from inkscript.exceptions import DocumentError
from inkscript.models import BrushType, Document
from inkscript.readers.local import LocalDocument, read_document


class TestReadDocument:
    """Tests for opening notebook directories."""

    def test_index(self, notebook_dir):
        document = read_document(notebook_dir)
        assert isinstance(document, LocalDocument)
        assert isinstance(document, Document)
        assert document.title == "Meeting Notes"
        assert document.pages() == ["p1", "p2"]

    def test_title_defaults_to_directory(self, notebook_dir):
        (notebook_dir / "notebook.json").write_text(json.dumps({"pages": []}), encoding="utf-8")
        assert read_document(notebook_dir).title == "notebook"

    def test_missing_directory(self, tmp_path):
        with pytest.raises(DocumentError, match="not found"):
            read_document(tmp_path / "nope")

    def test_missing_index(self, tmp_path):
        with pytest.raises(DocumentError, match="Missing notebook index"):
            read_document(tmp_path)

    def test_malformed_index(self, notebook_dir):
        (notebook_dir / "notebook.json").write_text("{", encoding="utf-8")
        with pytest.raises(DocumentError):
            read_document(notebook_dir)

    def test_pages_must_be_list(self, notebook_dir):
        (notebook_dir / "notebook.json").write_text(
            json.dumps({"title": "x", "pages": "p1"}), encoding="utf-8"
        )
        with pytest.raises(DocumentError, match="list"):
            read_document(notebook_dir)


class TestDrawing:
    """Tests for loading page drawings."""

    def test_load(self, notebook_dir):
        drawing = read_document(notebook_dir).drawing("p2")
        stroke = drawing.layers[0].strokes[0]
        assert stroke.brush_type is BrushType.FINELINER
        assert stroke.dots[0].x == 210
        assert stroke.dots[1].pressure == 0.6

    def test_missing_drawing(self, notebook_dir):
        (notebook_dir / "p2.json").unlink()
        document = read_document(notebook_dir)
        with pytest.raises(DocumentError, match="Missing drawing"):
            document.drawing("p2")

    def test_unknown_page(self, notebook_dir):
        with pytest.raises(DocumentError):
            read_document(notebook_dir).drawing("p9")

    def test_unknown_brush_read_as_pen(self, notebook_dir):
        stroke = {"brush": 23, "dots": [{"x": 1, "y": 2, "speed": 1.0}]}
        (notebook_dir / "p1.json").write_text(
            json.dumps({"layers": [{"strokes": [stroke]}]}), encoding="utf-8"
        )
        brush = read_document(notebook_dir).drawing("p1").layers[0].strokes[0].brush_type
        assert brush == 23
        assert brush.is_text

    def test_malformed_dots(self, notebook_dir):
        (notebook_dir / "p1.json").write_text(
            json.dumps({"layers": [{"strokes": [{"brush": 2, "dots": ["x"]}]}]}), encoding="utf-8"
        )
        with pytest.raises(DocumentError, match="Malformed"):
            read_document(notebook_dir).drawing("p1")
