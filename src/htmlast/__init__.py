from .errors import HTMLParseError, InvalidTagError, MalformedInputError, ParseError, StrictModeError
from .node import Document, Element, Node, Text
from .parser import HTMLAst, parse
from .query import get_element_by_id, get_elements_by_tag_name, iter_elements
from .serialize import to_html, to_test_format

__all__ = [
    "Document",
    "Element",
    "HTMLAst",
    "HTMLParseError",
    "InvalidTagError",
    "MalformedInputError",
    "Node",
    "ParseError",
    "StrictModeError",
    "Text",
    "get_element_by_id",
    "get_elements_by_tag_name",
    "iter_elements",
    "parse",
    "to_html",
    "to_test_format",
]
