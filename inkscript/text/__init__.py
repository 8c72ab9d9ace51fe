"""
Recognized text: tokens, token lists and text repair.

Example:
    >>> from inkscript.text import DEFAULT_PIPELINE, to_text, to_token_list
    >>> first = DEFAULT_PIPELINE(to_token_list(result))
    >>> print(to_text(first))
"""

from inkscript.text.hyphenation import (
    HyphenationStats,
    ScanState,
    dehyphenate,
)
from inkscript.text.pipeline import (
    DEFAULT_PIPELINE,
    PipelineFunc,
    build_pipeline,
)
from inkscript.text.result import to_token_list
from inkscript.text.token import Token, tokenize
from inkscript.text.tokenlist import (
    Node,
    build_linked_list,
    to_text,
    to_tokens,
)

__all__ = [
    # Tokens
    "Token",
    "tokenize",
    # Token list
    "Node",
    "build_linked_list",
    "to_text",
    "to_tokens",
    "to_token_list",
    # Repair
    "dehyphenate",
    "HyphenationStats",
    "ScanState",
    "PipelineFunc",
    "build_pipeline",
    "DEFAULT_PIPELINE",
]
