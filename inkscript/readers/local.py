"""
Reader for notebooks exported to a local directory.

Layout:

    <notebook>/
        notebook.json        {"title": "...", "pages": ["<page id>", ...]}
        <page id>.json       {"layers": [{"strokes": [{"brush": 2, "dots": [...]}]}]}

Drawings are loaded lazily, one page at a time, so recognition tasks can
read their pages concurrently.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from inkscript.exceptions import DocumentError
from inkscript.models import Drawing

logger = logging.getLogger(__name__)

INDEX_FILENAME = "notebook.json"
DRAWING_SUFFIX = ".json"


@dataclass
class LocalDocument:
    """
    A notebook stored on disk.

    Attributes:
        path: Notebook directory.
        title: Notebook title (defaults to the directory name).
        page_ids: Page ids in notebook order.
    """

    path: Path
    title: str
    page_ids: list[str] = field(default_factory=list)

    def pages(self) -> list[str]:
        return list(self.page_ids)

    def drawing_path(self, page_id: str) -> Path:
        return self.path / f"{page_id}{DRAWING_SUFFIX}"

    def drawing(self, page_id: str) -> Drawing:
        """
        Load the drawing of one page.

        Raises:
            DocumentError: If the page is unknown or its drawing cannot be read.
        """
        if page_id not in self.page_ids:
            raise DocumentError(f"Page {page_id} is not part of notebook {self.title!r}")

        path = self.drawing_path(page_id)
        data = _load_json(path, what="drawing")
        try:
            drawing = Drawing.from_dict(data)
        except (ValueError, TypeError, AttributeError) as e:
            raise DocumentError(f"Malformed drawing {path}: {e}") from e

        logger.debug("Loaded page %s: %d layers", page_id, len(drawing.layers))
        return drawing


def read_document(path: str | Path) -> LocalDocument:
    """
    Open a notebook directory.

    Only the index is read here; drawings are read on demand.

    Raises:
        DocumentError: If the directory or its index is missing or malformed.
    """
    path = Path(path).expanduser()
    if not path.is_dir():
        raise DocumentError(f"Notebook directory not found: {path}")

    index = _load_json(path / INDEX_FILENAME, what="notebook index")
    if not isinstance(index, dict):
        raise DocumentError(f"Notebook index {path / INDEX_FILENAME} must contain an object")

    pages = index.get("pages", [])
    if not isinstance(pages, list):
        raise DocumentError(f"'pages' in {path / INDEX_FILENAME} must be a list")

    title = index.get("title") or path.name
    document = LocalDocument(path=path, title=str(title), page_ids=[str(p) for p in pages])
    logger.info("Opened notebook %r with %d pages", document.title, len(document.page_ids))
    return document


def _load_json(path: Path, what: str) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise DocumentError(f"Missing {what}: {path}") from e
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DocumentError(f"Cannot read {what} {path}: {e}") from e
