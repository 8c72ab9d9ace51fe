"""
Unit tests for the plain text and Markdown composers.
"""

import io

import pytest

from inkscript.compose import (
    MarkdownComposer,
    PlaintextComposer,
    get_composer,
    supported_formats,
)
from inkscript.exceptions import UnsupportedFormatError
from inkscript.models import Metadata
from inkscript.text.token import tokenize
from inkscript.text.tokenlist import build_linked_list


def page(text: str):
    return build_linked_list(tokenize(text))


class FailingSink:
    """Accepts a number of writes, then fails."""

    def __init__(self, allowed: int = 0) -> None:
        self.allowed = allowed
        self.written: list[str] = []

    def write(self, s: str) -> int:
        if len(self.written) >= self.allowed:
            raise OSError("disk full")
        self.written.append(s)
        return len(s)


@pytest.fixture
def metadata() -> Metadata:
    return Metadata(title="My Title", page_ids=["p1", "p2"])


@pytest.fixture
def pages():
    return {"p1": page("foo bar baz\nnewline"), "p2": page("second page")}


def compose(composer, metadata, pages) -> str:
    sink = io.StringIO()
    composer.compose(sink, metadata, pages)
    return sink.getvalue()


class TestPlaintext:
    """Tests for PlaintextComposer."""

    def test_exact_output(self, metadata, pages):
        output = compose(PlaintextComposer(), metadata, pages)
        assert output == (
            "MY TITLE\n\n[Page 1]\n\nfoo bar baz\nnewline\n\n[Page 2]\n\nsecond page\n"
        )

    def test_missing_page_skipped_numbering_kept(self, pages):
        metadata = Metadata(title="T", page_ids=["p0", "p1", "p2"])
        output = compose(PlaintextComposer(), metadata, {"p2": pages["p2"]})
        assert output == "T\n\n[Page 3]\n\nsecond page\n"

    def test_metadata_order_wins(self, pages):
        metadata = Metadata(title="T", page_ids=["p2", "p1"])
        output = compose(PlaintextComposer(), metadata, pages)
        assert output.index("second page") < output.index("foo bar baz")

    def test_empty_title(self, pages):
        output = compose(PlaintextComposer(), Metadata(title="", page_ids=["p2"]), pages)
        assert output == "\n[Page 1]\n\nsecond page\n"

    def test_empty_page(self):
        output = compose(PlaintextComposer(), Metadata(title="T", page_ids=["p1"]), {"p1": None})
        assert output == "T\n\n[Page 1]\n\n\n"

    def test_sink_error_propagates(self, metadata, pages):
        sink = FailingSink(allowed=2)
        with pytest.raises(OSError):
            PlaintextComposer().compose(sink, metadata, pages)
        assert "".join(sink.written) == "MY TITLE\n\n[Page 1]\n\n"


class TestMarkdown:
    """Tests for MarkdownComposer."""

    def test_heading(self, metadata, pages):
        output = compose(MarkdownComposer(), metadata, pages)
        assert output.startswith("# My Title\n\n")

    def test_page_block(self):
        metadata = Metadata(title="T", page_ids=["a", "b", "c"])
        output = compose(MarkdownComposer(), metadata, {"c": page("foo bar baz\nnewline")})
        assert output == "# T\n\n**Page 3**\n\nfoo bar baz\nnewline\n\n---\n\n\n"

    def test_rule_after_every_page(self, metadata, pages):
        output = compose(MarkdownComposer(), metadata, pages)
        assert output == (
            "# My Title\n\n"
            "**Page 1**\n\nfoo bar baz\nnewline\n\n---\n\n"
            "**Page 2**\n\nsecond page\n\n---\n\n"
            "\n"
        )

    def test_sink_error_propagates(self, metadata, pages):
        with pytest.raises(OSError):
            MarkdownComposer().compose(FailingSink(), metadata, pages)


class TestGetComposer:
    """Tests for format lookup."""

    def test_formats(self):
        assert supported_formats() == ["md", "txt"]
        assert isinstance(get_composer("txt"), PlaintextComposer)
        assert isinstance(get_composer("md"), MarkdownComposer)

    def test_unsupported(self):
        with pytest.raises(UnsupportedFormatError, match="docx"):
            get_composer("docx")

    def test_extensions(self):
        assert get_composer("txt").extension == "txt"
        assert get_composer("md").extension == "md"
