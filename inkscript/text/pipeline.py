"""
Text repair pipeline.

A pipeline step takes the first node of a page's token list and returns
the first node of the modified list. Steps may change, remove or insert
tokens.
"""

from __future__ import annotations

from collections.abc import Callable

from inkscript.text.hyphenation import dehyphenate
from inkscript.text.tokenlist import Node

PipelineFunc = Callable[[Node | None], Node | None]


def build_pipeline(*steps: PipelineFunc) -> PipelineFunc:
    """
    Combine several pipeline steps into one, applied left to right.

    Example:
        >>> repair = build_pipeline(dehyphenate)
        >>> first = repair(first)
    """

    def run(first: Node | None) -> Node | None:
        for step in steps:
            first = step(first)
        return first

    return run


DEFAULT_PIPELINE: PipelineFunc = build_pipeline(dehyphenate)
