"""HTML element constants.

The parser accepts a closed vocabulary of element names. Everything here is a
module-level frozenset or a read-only mapping, built once at import time and
never mutated, so concurrent parses can share it.

Usage:
    from htmlast.constants import KNOWN_ELEMENTS, VOID_ELEMENTS

References:
    - https://html.spec.whatwg.org/multipage/syntax.html#void-elements
    - https://html.spec.whatwg.org/multipage/syntax.html#optional-tags
"""

from types import MappingProxyType

KNOWN_ELEMENTS = frozenset(
    [
        "a",
        "abbr",
        "acronym",
        "address",
        "applet",
        "area",
        "article",
        "aside",
        "audio",
        "b",
        "base",
        "basefont",
        "bdi",
        "bdo",
        "bgsound",
        "big",
        "blink",
        "blockquote",
        "body",
        "br",
        "button",
        "canvas",
        "caption",
        "center",
        "cite",
        "code",
        "col",
        "colgroup",
        "content",
        "data",
        "datalist",
        "dd",
        "decorator",
        "del",
        "details",
        "dfn",
        "dir",
        "div",
        "dl",
        "dt",
        "element",
        "em",
        "embed",
        "fieldset",
        "figcaption",
        "figure",
        "font",
        "footer",
        "form",
        "frame",
        "frameset",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "head",
        "header",
        "hgroup",
        "hr",
        "html",
        "i",
        "iframe",
        "img",
        "input",
        "ins",
        "isindex",
        "kbd",
        "keygen",
        "label",
        "legend",
        "li",
        "link",
        "listing",
        "main",
        "map",
        "mark",
        "marquee",
        "menu",
        "menuitem",
        "meta",
        "meter",
        "nav",
        "nobr",
        "noframes",
        "noscript",
        "object",
        "ol",
        "optgroup",
        "option",
        "output",
        "p",
        "param",
        "plaintext",
        "pre",
        "progress",
        "q",
        "rp",
        "rt",
        "ruby",
        "s",
        "samp",
        "script",
        "section",
        "select",
        "shadow",
        "small",
        "source",
        "spacer",
        "span",
        "strike",
        "strong",
        "style",
        "sub",
        "summary",
        "sup",
        "table",
        "tbody",
        "td",
        "template",
        "textarea",
        "tfoot",
        "th",
        "thead",
        "time",
        "title",
        "tr",
        "track",
        "tt",
        "u",
        "ul",
        "var",
        "video",
        "wbr",
        "xmp",
    ],
)

# Never have children, never consume an end tag.
VOID_ELEMENTS = frozenset(
    [
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    ],
)

_P_CLOSERS = frozenset(
    [
        "address",
        "article",
        "aside",
        "blockquote",
        "details",
        "dir",
        "div",
        "dl",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hgroup",
        "hr",
        "main",
        "menu",
        "nav",
        "ol",
        "p",
        "pre",
        "section",
        "table",
        "ul",
    ],
)

# Open element -> start tags that end it without an end tag. Only the sibling
# family is listed; closing an ancestor (e.g. <tr> ending an open <td>) is
# handled by walking outward through OPTIONAL_END_TAG_ELEMENTS.
IMPLICIT_END_TAG_CLOSERS = MappingProxyType(
    {
        "p": _P_CLOSERS,
        "li": frozenset(["li"]),
        "dt": frozenset(["dt", "dd"]),
        "dd": frozenset(["dt", "dd"]),
        "rt": frozenset(["rt", "rp"]),
        "rp": frozenset(["rt", "rp"]),
        "optgroup": frozenset(["optgroup"]),
        "option": frozenset(["option", "optgroup"]),
        "thead": frozenset(["tbody", "tfoot"]),
        "tbody": frozenset(["tbody", "tfoot"]),
        "tfoot": frozenset(["tbody"]),
        "tr": frozenset(["tr", "tbody", "thead", "tfoot"]),
        "td": frozenset(["td", "th"]),
        "th": frozenset(["td", "th"]),
        "head": frozenset(["body"]),
    },
)

# Elements whose end tag may be left out without a missing-end-tag error.
OPTIONAL_END_TAG_ELEMENTS = frozenset(IMPLICIT_END_TAG_CLOSERS) | frozenset(["html", "body", "colgroup", "caption"])

WHITESPACE = "\t\n\f\r "

DOCTYPE_NAME = "!DOCTYPE"
