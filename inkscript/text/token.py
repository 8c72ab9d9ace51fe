"""
Tokens of recognized text.

A Token is a single text element recognized from handwriting. The full
text of a page is a sequence of tokens.

Tokenization rules:
- consecutive whitespace is split into multiple tokens
- punctuation is a single token
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass

# Single characters treated as whitespace
WHITESPACE = frozenset(
    "\u0009"  # horizontal tab
    "\u000a"  # line feed
    "\u000b"  # vertical tab
    "\u000c"  # form feed
    "\u000d"  # carriage return
    "\u0020"  # space
    "\u0085"  # next line
    "\u00a0"  # no-break space
    "\u1680"  # ogham space mark
    "\u180e"  # mongolian vowel separator
    "\u2000\u2001\u2002\u2003\u2004\u2005"  # en quad .. four-per-em space
    "\u2006\u2007\u2008\u2009\u200a"  # six-per-em space .. hair space
    "\u2028"  # line separator
    "\u2029"  # paragraph separator
    "\u202f"  # narrow no-break space
    "\u205f"  # medium mathematical space
    "\u3000"  # ideographic space
)

# Mandatory line breaks
NEWLINES = frozenset("\u000a\u000b\u000c\u000d\u0085\u2028\u2029")

# Hyphen-like characters, see Unicode category Pd
DASHES = frozenset(
    "\u002d"  # hyphen-minus
    "\u058a"  # armenian hyphen
    "\u05be"  # hebrew punctuation maqaf
    "\u1400"  # canadian syllabics hyphen
    "\u2010"  # hyphen
    "\u2011"  # non-breaking hyphen
    "\u2012"  # figure dash
    "\u2013"  # en dash
    "\u2014"  # em dash
    "\u2015"  # horizontal bar
    "\u2e3a"  # two em dash
    "\u2e3b"  # three em dash
    "\ufe58"  # small em dash
    "\ufe63"  # small hyphen-minus
    "\uff0d"  # fullwidth hyphen-minus
)


@dataclass(frozen=True)
class Token:
    """
    A classified unit of recognized text.

    Classification is derived from the text on every call; nothing but
    the text itself is stored.

    Example:
        >>> Token("-").is_dash
        True
        >>> Token("foo bar").is_word
        False
    """

    text: str

    def __str__(self) -> str:
        return self.text

    @property
    def _single(self) -> bool:
        return len(self.text) == 1

    @property
    def is_whitespace(self) -> bool:
        """A single whitespace character, typically a space or newline."""
        return self._single and self.text in WHITESPACE

    @property
    def is_newline(self) -> bool:
        return self._single and self.text in NEWLINES

    @property
    def is_punctuation(self) -> bool:
        """A single character from the Unicode punctuation categories."""
        return self._single and unicodedata.category(self.text).startswith("P")

    @property
    def is_word(self) -> bool:
        """
        Whether every character is a letter.

        This may still be a poorly recognized word.
        """
        return bool(self.text) and all(unicodedata.category(c).startswith("L") for c in self.text)

    @property
    def is_dash(self) -> bool:
        """A dash, including several Unicode variants."""
        return self._single and self.text in DASHES

    @property
    def starts_upper(self) -> bool:
        return bool(self.text) and self.text[0].isupper()


def tokenize(text: str) -> list[Token]:
    """
    Split a flat label into tokens.

    Runs of letters and digits form one token each; every other
    character (whitespace, punctuation, symbols) becomes its own token.

    Example:
        >>> [t.text for t in tokenize("foo-\\nbar")]
        ['foo', '-', '\\n', 'bar']
    """
    tokens: list[Token] = []
    current: list[str] = []

    for c in text:
        if c.isalnum():
            current.append(c)
            continue
        if current:
            tokens.append(Token("".join(current)))
            current = []
        tokens.append(Token(c))

    if current:
        tokens.append(Token("".join(current)))

    return tokens
