"""Tests for document-level parsing: empty input, DOCTYPE, comments, text."""

import unittest
from contextlib import redirect_stdout
from io import StringIO

from htmlast import Document, Element, HTMLAst, Text, parse
from htmlast.constants import KNOWN_ELEMENTS, VOID_ELEMENTS


class TestDocument(unittest.TestCase):
    def test_empty_string(self):
        """An empty string parses to a document without children."""
        root = parse("")
        assert isinstance(root, Document)
        assert root.tag_name == "document"
        assert root.attributes == {}
        assert root.children == []

    def test_none_is_empty(self):
        assert parse(None).children == []

    def test_whitespace_only(self):
        assert parse(" \n\t \r\n").children == []

    def test_parser_object_exposes_root(self):
        parser = HTMLAst("<p>x</p>")
        assert isinstance(parser.root, Document)
        assert parser.errors == []

    def test_text_at_top_level(self):
        root = parse("just text")
        assert len(root.children) == 1
        assert isinstance(root.children[0], Text)
        assert root.children[0].data == "just text"


class TestDoctype(unittest.TestCase):
    def test_doctype_is_invisible(self):
        root = parse("<!DOCTYPE html><html></html>")
        assert len(root.children) == 1
        assert root.children[0].tag_name == "html"

    def test_no_doctype(self):
        root = parse("<html></html>")
        assert len(root.children) == 1
        assert root.children[0].tag_name == "html"

    def test_same_tree_with_and_without_doctype(self):
        assert parse("<!DOCTYPE html><html></html>") == parse("<html></html>")

    def test_doctype_body_is_not_validated(self):
        html = '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN"><div></div>'
        root = parse(html)
        assert [child.tag_name for child in root.children] == ["div"]

    def test_lowercase_doctype_is_skipped_as_bogus_markup(self):
        """DOCTYPE detection is case-sensitive; other casings are skipped with an error."""
        parser = HTMLAst("<!doctype html><html></html>", collect_errors=True)
        assert [child.tag_name for child in parser.root.children] == ["html"]
        assert [error.code for error in parser.errors] == ["bogus-markup-declaration"]


class TestComments(unittest.TestCase):
    def test_leading_comment_before_doctype(self):
        root = parse("  <!-- header --><!DOCTYPE html><html></html>")
        assert [child.tag_name for child in root.children] == ["html"]

    def test_repeated_leading_comments(self):
        """Any number of comments and whitespace runs are skipped before the DOCTYPE."""
        root = parse("<!-- a -->\n<!-- b -->  <!-- c --><!DOCTYPE html><html></html>")
        assert [child.tag_name for child in root.children] == ["html"]

    def test_consecutive_comments_in_content(self):
        root = parse("<div><!-- a --><!-- b --><span>x</span></div>")
        div = root.children[0]
        assert [child.tag_name for child in div.children] == ["span"]

    def test_comment_splits_text(self):
        root = parse("<p>one<!-- gap -->two</p>")
        p = root.children[0]
        assert [child.data for child in p.children] == ["one", "two"]

    def test_comment_only_document(self):
        assert parse("<!-- nothing here -->").children == []

    def test_comment_may_contain_markup(self):
        root = parse("<!-- <div> --><p>x</p>")
        assert [child.tag_name for child in root.children] == ["p"]


class TestText(unittest.TestCase):
    def test_text_is_trimmed(self):
        root = parse("<p>   padded   </p>")
        assert root.children[0].children[0].data == "padded"

    def test_whitespace_runs_produce_no_nodes(self):
        root = parse("<div>\n  <span>a</span>\n  <span>b</span>\n</div>")
        div = root.children[0]
        assert [child.tag_name for child in div.children] == ["span", "span"]

    def test_mixed_content(self):
        root = parse("<p>Hello <b>bold</b> world</p>")
        p = root.children[0]
        assert [child.tag_name for child in p.children] == ["#text", "b", "#text"]
        assert p.children[0].data == "Hello"
        assert p.children[2].data == "world"

    def test_entities_are_not_decoded(self):
        root = parse("<p>a &amp; b</p>")
        assert root.children[0].children[0].data == "a &amp; b"


class TestDeterminism(unittest.TestCase):
    def test_two_parses_are_equal(self):
        html = '<!DOCTYPE html><html lang="en"><body><ul><li>a<li>b</ul><p>x<br>y</body></html>'
        first = parse(html)
        second = parse(html)
        assert first is not second
        assert first == second

    def test_different_inputs_are_not_equal(self):
        assert parse("<p>a</p>") != parse("<p>b</p>")
        assert parse("<p>a</p>") != parse('<p id="x">a</p>')

    def test_nodes_are_unhashable(self):
        with self.assertRaises(TypeError):
            hash(parse("<p></p>"))


class TestVoidElements(unittest.TestCase):
    def test_void_elements_are_known(self):
        assert VOID_ELEMENTS <= KNOWN_ELEMENTS

    def test_void_element_has_no_children(self):
        root = parse("<br>text")
        br, text = root.children
        assert isinstance(br, Element)
        assert br.tag_name == "br"
        assert br.children == []
        assert text.data == "text"

    def test_void_element_does_not_consume_end_tag(self):
        root = parse("<div><img src='a.png'></img>after</div>")
        div = root.children[0]
        assert [child.tag_name for child in div.children] == ["img", "#text"]
        assert div.children[0].children == []

    def test_self_closing_syntax(self):
        root = parse("<p>a<br/>b<img />c</p>")
        p = root.children[0]
        assert [child.tag_name for child in p.children] == ["#text", "br", "#text", "img", "#text"]

    def test_self_closing_slash_on_non_void_is_ignored(self):
        root = parse("<div/><span>x</span></div>")
        div = root.children[0]
        assert [child.tag_name for child in div.children] == ["span"]


class TestNesting(unittest.TestCase):
    def test_deep_nesting(self):
        root = parse("<div><section><article><p>deep</p></article></section></div>")
        node = root
        for tag in ("div", "section", "article", "p"):
            assert len(node.children) == 1
            node = node.children[0]
            assert node.tag_name == tag
        assert node.children[0].data == "deep"

    def test_siblings_after_closed_element(self):
        root = parse("<div><span>a</span><span>b</span></div><p>c</p>")
        assert [child.tag_name for child in root.children] == ["div", "p"]
        assert len(root.children[0].children) == 2

    def test_end_tag_closes_unclosed_descendants(self):
        root = parse("<div><span>x</div><p>y</p>")
        div, p = root.children
        assert div.children[0].tag_name == "span"
        assert p.children[0].data == "y"


class TestDebugTrace(unittest.TestCase):
    def test_debug_prints_trace(self):
        out = StringIO()
        with redirect_stdout(out):
            HTMLAst("<ul><li>a<li>b</ul>", debug=True)
        trace = out.getvalue()
        assert "<ul>" in trace
        assert "<li> implicitly closes <li>" in trace
        assert "</ul>" in trace

    def test_no_trace_by_default(self):
        out = StringIO()
        with redirect_stdout(out):
            HTMLAst("<ul><li>a<li>b</ul>")
        assert out.getvalue() == ""
