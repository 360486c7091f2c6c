"""Tests for tree lookups."""

import unittest

from htmlast import get_element_by_id, get_elements_by_tag_name, iter_elements, parse


class TestGetElementById(unittest.TestCase):
    def setUp(self):
        self.root = parse('<div><div><div id="foo"></div></div></div>')

    def test_query_by_id(self):
        element = self.root.children[0]
        foo = get_element_by_id(element, "foo")
        assert foo is not None
        assert foo.attributes["id"] == "foo"

    def test_query_from_document(self):
        foo = get_element_by_id(self.root, "foo")
        assert foo is self.root.children[0].children[0].children[0]

    def test_missing_id(self):
        assert get_element_by_id(self.root, "bar") is None

    def test_start_node_is_not_compared(self):
        root = parse('<div id="self"><span id="child"></span></div>')
        div = root.children[0]
        assert get_element_by_id(div, "self") is None
        assert get_element_by_id(div, "child").tag_name == "span"
        assert get_element_by_id(root, "self") is div

    def test_first_match_in_document_order(self):
        root = parse('<div><p id="dup">deep</p></div><p id="dup">shallow</p>')
        found = get_element_by_id(root, "dup")
        assert found.children[0].data == "deep"

    def test_text_nodes_are_skipped(self):
        root = parse("<p>id</p>text")
        assert get_element_by_id(root, "id") is None

    def test_empty_document(self):
        assert get_element_by_id(parse(""), "anything") is None


class TestTagQueries(unittest.TestCase):
    def test_iter_elements_document_order(self):
        root = parse("<div><p>a<b>b</b></p><span></span></div><br>")
        assert [element.tag_name for element in iter_elements(root)] == ["div", "p", "b", "span", "br"]

    def test_get_elements_by_tag_name(self):
        root = parse("<ul><li>a<li>b<ul><li>c</ul></ul>")
        items = get_elements_by_tag_name(root, "li")
        assert [item.children[0].data for item in items] == ["a", "b", "c"]

    def test_no_matches(self):
        assert get_elements_by_tag_name(parse("<p>x</p>"), "table") == []
