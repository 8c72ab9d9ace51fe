"""
Hyphenation rejoiner.

Handwriting often breaks a word with a hyphen at the end of a line. The
recognizer returns such words as separate tokens:

    ["foo", "-", "\\n", "bar"]

This module merges them back into one token ("foobar") with a single
left-to-right scan over a page's token list.

A dash only counts as hyphenation when it directly follows a word. A dash
after whitespace ("foo - bar", or a list marker as in "foo\\n- item") is
left alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from inkscript.text.token import Token
from inkscript.text.tokenlist import Node

logger = logging.getLogger(__name__)


# =============================================================================
# DATA STRUCTURES
# =============================================================================


class ScanState(Enum):
    """States of the hyphenation scanner."""

    IDLE = "idle"
    SAW_WORD = "saw_word"
    SAW_DASH = "saw_dash"
    SAW_WORD_AFTER_GAP = "saw_word_after_gap"


@dataclass
class HyphenationStats:
    """Statistics for one dehyphenation pass."""

    candidates_found: int = 0  # word directly followed by a dash
    words_merged: int = 0


# =============================================================================
# DEHYPHENATION
# =============================================================================


def dehyphenate(first: Node | None, stats: HyphenationStats | None = None) -> Node | None:
    """
    Merge words that are separated by a hyphen.

    The scan tracks the length of the current run (the word, the dash and
    any whitespace after it). When the continuing word is reached, the run
    is collapsed into its start node, and scanning resumes after that node.

    Args:
        first: First node of the page's token list (mutated in place).
        stats: Optional statistics collector.

    Returns:
        The first node of the repaired list.

    Example:
        >>> first = build_linked_list([Token("foo"), Token("-"), Token("\\n"), Token("bar")])
        >>> to_text(dehyphenate(first))
        'foobar'
    """
    stats = stats if stats is not None else HyphenationStats()
    state = ScanState.IDLE
    run = 0

    node = first
    while node is not None:
        token = node.token

        if state is ScanState.IDLE:
            if token.is_word:
                state = ScanState.SAW_WORD
                run = 1
        elif state is ScanState.SAW_WORD:
            if token.is_dash:
                state = ScanState.SAW_DASH
                run += 1
                stats.candidates_found += 1
            else:
                state = ScanState.IDLE
                run = 0
        elif state is ScanState.SAW_DASH:
            if token.is_whitespace:
                run += 1
            elif token.is_word:
                state = ScanState.SAW_WORD_AFTER_GAP
            else:
                state = ScanState.IDLE
                run = 0

        if state is ScanState.SAW_WORD_AFTER_GAP:
            # The current node is removed by the merge; continue from the
            # merged node instead.
            node = _merge_run(node, run)
            stats.words_merged += 1
            state = ScanState.IDLE
            run = 0

        node = node.next

    return first


def _merge_run(last: Node, run: int) -> Node:
    """Collapse the run ending at last into its start node and return it."""
    start = last.behind(run)
    if start is None:
        raise RuntimeError(f"Run of {run} tokens extends past the start of the list")

    parts = [start.token.text]
    for _ in range(run):
        following = start.next
        if following.token.is_word:
            parts.append(following.token.text)
        following.remove()

    merged = "".join(parts)
    logger.debug("Merged hyphenated word: %s", merged)
    start.update(Token(merged))
    return start
