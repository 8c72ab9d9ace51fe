"""Conversion of recognition results into token lists."""

from __future__ import annotations

from inkscript.models import Result
from inkscript.text.token import Token, tokenize
from inkscript.text.tokenlist import Node, build_linked_list


def to_token_list(result: Result) -> Node | None:
    """
    Create a token list with one token per recognized word.

    Word order is preserved. Results without a word breakdown fall back
    to tokenizing the flat label.

    Returns:
        The first node, or None for an empty page.
    """
    if result.words:
        return build_linked_list(Token(w.label) for w in result.words)
    return build_linked_list(tokenize(result.label))
