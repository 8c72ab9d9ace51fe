"""
Unit tests for the doubly linked token list.
"""

import pytest

from inkscript.text.token import Token
from inkscript.text.tokenlist import Node, build_linked_list, to_text, to_tokens


def assert_well_formed(first: Node) -> None:
    """Every forward link has a matching backward link and vice versa."""
    assert first.prev is None
    for node in first.iter_nodes():
        if node.next is not None:
            assert node.next.prev is node
        if node.prev is not None:
            assert node.prev.next is node


def texts(first) -> list[str]:
    return [t.text for t in to_tokens(first)]


class TestBuild:
    """Tests for build_linked_list()."""

    def test_empty(self):
        assert build_linked_list([]) is None
        assert to_text(None) == ""
        assert to_tokens(None) == []

    def test_order_preserved(self, make_list):
        first = make_list("foo", " ", "bar")
        assert texts(first) == ["foo", " ", "bar"]
        assert to_text(first) == "foo bar"
        assert_well_formed(first)

    def test_single_node(self, make_list):
        first = make_list("foo")
        assert first.is_first
        assert first.is_last
        assert not first.is_linked


class TestTraversal:
    """Tests for ahead(), behind(), first() and last()."""

    @pytest.fixture
    def nodes(self, make_list):
        first = make_list("a", "b", "c", "d")
        return list(first.iter_nodes())

    def test_ahead(self, nodes):
        assert nodes[0].ahead(0) is nodes[0]
        assert nodes[0].ahead(2) is nodes[2]
        assert nodes[0].ahead(3) is nodes[3]

    def test_ahead_past_end(self, nodes):
        assert nodes[0].ahead(4) is None
        assert nodes[2].ahead(10) is None

    def test_behind(self, nodes):
        assert nodes[3].behind(1) is nodes[2]
        assert nodes[3].behind(3) is nodes[0]

    def test_behind_past_start(self, nodes):
        assert nodes[3].behind(4) is None
        assert nodes[0].behind(1) is None

    def test_first_and_last(self, nodes):
        assert nodes[2].first() is nodes[0]
        assert nodes[1].last() is nodes[3]

    def test_iter_reversed(self, nodes):
        assert [n.token.text for n in nodes[3].iter_reversed()] == ["d", "c", "b", "a"]


class TestMutation:
    """Tests for insert, remove and update."""

    def test_insert_after_middle(self, make_list):
        first = make_list("a", "c")
        first.insert_after(Node(Token("b")))
        assert texts(first) == ["a", "b", "c"]
        assert_well_formed(first)

    def test_insert_after_last(self, make_list):
        first = make_list("a")
        first.insert_after(Node(Token("b")))
        assert texts(first) == ["a", "b"]
        assert first.next.is_last

    def test_insert_before_first(self, make_list):
        first = make_list("b", "c")
        node = Node(Token("a"))
        first.insert_before(node)
        assert node.is_first
        assert texts(node) == ["a", "b", "c"]
        assert_well_formed(node)

    def test_insert_before_middle(self, make_list):
        first = make_list("a", "c")
        first.next.insert_before(Node(Token("b")))
        assert texts(first) == ["a", "b", "c"]
        assert_well_formed(first)

    def test_insert_linked_node_rejected(self, make_list):
        first = make_list("a", "b")
        other = make_list("x", "y")
        with pytest.raises(ValueError):
            first.insert_after(other)

    def test_insert_self_rejected(self, make_list):
        first = make_list("a")
        with pytest.raises(ValueError):
            first.insert_after(first)

    def test_remove_middle(self, make_list):
        first = make_list("a", "b", "c")
        middle = first.next
        middle.remove()
        assert texts(first) == ["a", "c"]
        assert not middle.is_linked
        assert_well_formed(first)

    def test_remove_last(self, make_list):
        first = make_list("a", "b")
        first.next.remove()
        assert first.is_last
        assert texts(first) == ["a"]

    def test_remove_first(self, make_list):
        first = make_list("a", "b")
        second = first.next
        first.remove()
        assert second.is_first
        assert texts(second) == ["b"]

    def test_removed_node_can_be_reinserted(self, make_list):
        first = make_list("a", "b", "c")
        node = first.next
        node.remove()
        first.last().insert_after(node)
        assert texts(first) == ["a", "c", "b"]
        assert_well_formed(first)

    def test_update_keeps_position(self, make_list):
        first = make_list("a", "b", "c")
        first.next.update(Token("B"))
        assert texts(first) == ["a", "B", "c"]
        assert_well_formed(first)

    def test_many_operations_keep_structure(self, make_list):
        first = make_list(*"abcdefgh")
        nodes = list(first.iter_nodes())
        nodes[2].remove()
        nodes[5].remove()
        nodes[7].insert_after(Node(Token("i")))
        nodes[0].insert_after(Node(Token("x")))
        nodes[4].update(Token("E"))
        assert to_text(first) == "axbdEghi"
        assert_well_formed(first)
        assert [n.token for n in first.last().iter_reversed()] == list(reversed(to_tokens(first)))
