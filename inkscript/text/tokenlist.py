"""
Doubly linked list of tokens.

Text repair steps delete and relink interior tokens while scanning, so
the recognized text of a page is held as linked Nodes rather than a
Python list. A list is addressed through its first node.

All link manipulation happens in this module; callers only use the
primitives below (insert_before, insert_after, remove, update) and
bounded traversal (ahead, behind).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from inkscript.text.token import Token


class Node:
    """
    An element in a doubly linked list of Tokens.

    Example:
        >>> first = build_linked_list([Token("foo"), Token(" "), Token("bar")])
        >>> first.next.remove()
        >>> to_text(first)
        'foobar'
    """

    __slots__ = ("_prev", "_next", "_token")

    def __init__(self, token: Token) -> None:
        self._prev: Node | None = None
        self._next: Node | None = None
        self._token = token

    def __repr__(self) -> str:
        return f"Node({self._token.text!r})"

    @property
    def token(self) -> Token:
        return self._token

    @property
    def next(self) -> Node | None:
        """The following node, None if this is the last node."""
        return self._next

    @property
    def prev(self) -> Node | None:
        """The preceding node, None if this is the first node."""
        return self._prev

    @property
    def is_first(self) -> bool:
        return self._prev is None

    @property
    def is_last(self) -> bool:
        return self._next is None

    @property
    def is_linked(self) -> bool:
        return self._prev is not None or self._next is not None

    def _check_insertable(self, other: Node) -> None:
        if other is self:
            raise ValueError("Cannot link a node to itself")
        if other.is_linked:
            raise ValueError(f"{other!r} is already part of a list; remove it first")

    def insert_after(self, other: Node) -> None:
        """Link other directly after this node."""
        self._check_insertable(other)
        following = self._next
        self._next = other
        other._prev = self
        other._next = following
        if following is not None:
            following._prev = other

    def insert_before(self, other: Node) -> None:
        """Link other directly before this node."""
        self._check_insertable(other)
        preceding = self._prev
        self._prev = other
        other._next = self
        other._prev = preceding
        if preceding is not None:
            preceding._next = other

    def remove(self) -> None:
        """Drop this node from its list and link its neighbours directly."""
        if self._prev is not None:
            self._prev._next = self._next
        if self._next is not None:
            self._next._prev = self._prev
        self._prev = None
        self._next = None

    def update(self, token: Token) -> None:
        """Replace the payload; the position is unchanged."""
        self._token = token

    def ahead(self, n: int) -> Node | None:
        """The node n steps toward the end, None if the list ends sooner."""
        node: Node | None = self
        for _ in range(n):
            if node is None:
                break
            node = node._next
        return node

    def behind(self, n: int) -> Node | None:
        """The node n steps toward the start, None if the list starts sooner."""
        node: Node | None = self
        for _ in range(n):
            if node is None:
                break
            node = node._prev
        return node

    def first(self) -> Node:
        node = self
        while node._prev is not None:
            node = node._prev
        return node

    def last(self) -> Node:
        node = self
        while node._next is not None:
            node = node._next
        return node

    def iter_nodes(self) -> Iterator[Node]:
        """Iterate from this node to the end of the list."""
        node: Node | None = self
        while node is not None:
            yield node
            node = node._next

    def iter_reversed(self) -> Iterator[Node]:
        """Iterate from this node back to the start of the list."""
        node: Node | None = self
        while node is not None:
            yield node
            node = node._prev

    def iter_tokens(self) -> Iterator[Token]:
        for node in self.iter_nodes():
            yield node.token


def build_linked_list(tokens: Iterable[Token]) -> Node | None:
    """
    Create a linked list from tokens.

    Returns:
        The first node, or None when tokens is empty.
    """
    first: Node | None = None
    last: Node | None = None
    for token in tokens:
        node = Node(token)
        if last is None:
            first = node
        else:
            last.insert_after(node)
        last = node
    return first


def to_text(first: Node | None) -> str:
    """Concatenate the text of all tokens from first to the end."""
    if first is None:
        return ""
    return "".join(t.text for t in first.iter_tokens())


def to_tokens(first: Node | None) -> list[Token]:
    if first is None:
        return []
    return list(first.iter_tokens())
