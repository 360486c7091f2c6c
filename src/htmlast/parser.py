"""HTML to AST parser.

``parse_content`` and ``parse_element`` are mutually recursive: content
parsing finds a start tag and builds the element, and the element parses its
own nested content before handing the cursor back. The only mutable state is
the cursor position plus the stack of open tag names used to decide when an
element ends without its end tag.
"""

from .constants import IMPLICIT_END_TAG_CLOSERS, OPTIONAL_END_TAG_ELEMENTS, VOID_ELEMENTS
from .errors import MalformedInputError, ParseError, StrictModeError
from .node import Document, Element, Text
from .scanner import Scanner


class HTMLAst:
    __slots__ = ("collect_errors", "debug_enabled", "errors", "root", "scanner", "strict")

    def __init__(self, html, *, collect_errors=False, strict=False, debug=False):
        self.collect_errors = bool(collect_errors)
        self.strict = bool(strict)
        self.debug_enabled = bool(debug)
        self.errors = []
        self.scanner = Scanner(html)
        try:
            self.root = self._parse_document()
        except RecursionError:
            # Two frames per open element; the interpreter limit bounds nesting depth
            msg = "Elements nested too deeply"
            raise MalformedInputError(msg, code="nesting-too-deep") from None

    def debug(self, message, indent=0):
        if self.debug_enabled:
            print(f"{' ' * indent}{message}")

    # ---------------------
    # Entry point
    # ---------------------

    def _parse_document(self):
        scanner = self.scanner
        root = Document()

        pos = scanner.skip_trivia(0)
        if scanner.is_doctype(pos):
            pos = scanner.skip_to_tag_end(pos, code="eof-in-doctype")
            self.debug("DOCTYPE skipped")

        self.parse_content(pos, [], root.children)
        return root

    # ---------------------
    # Content parser
    # ---------------------

    def parse_content(self, pos, open_tags, children):
        """Parse the content of an element (or the document) into children.

        Returns the position where the content stopped: end of input, an end
        tag of an open element, or a start tag that implicitly closes one.
        """
        scanner = self.scanner
        depth = len(open_tags) * 2
        while not scanner.at_end(pos):
            pos = scanner.skip_trivia(pos)
            if scanner.at_end(pos):
                break

            text, text_end = scanner.read_text(pos)
            if text_end > pos:
                pos = text_end
                text = text.strip()
                if text:
                    self.debug(f'"{text[:40]}"', indent=depth)
                    children.append(Text(text))
                continue

            tag_name, _ = scanner.start_tag_at(pos)
            if tag_name:
                if self._closes_open_element(tag_name, open_tags):
                    self.debug(f"<{tag_name}> implicitly closes <{open_tags[-1]}>", indent=depth)
                    break
                element, pos = self.parse_element(pos, open_tags)
                children.append(element)
                continue

            end_tag = scanner.end_tag_at(pos)
            if end_tag:
                if end_tag in open_tags:
                    break
                self.debug(f"stray </{end_tag}> ignored", indent=depth)
                self._report("unexpected-end-tag", pos, f"Unexpected end tag </{end_tag}>")
                pos = scanner.skip_to_tag_end(pos)
                continue

            if scanner.is_bogus_markup(pos):
                self._report("bogus-markup-declaration", pos, "Markup declaration skipped")
                pos = scanner.skip_to_tag_end(pos)
                continue

            # Unreachable: "<" followed by anything else is an invalid start tag
            break  # pragma: no cover

        return pos

    def _closes_open_element(self, tag_name, open_tags):
        """Return True if a start tag ends the innermost open element.

        Walks outward from the innermost element while the elements passed
        have omissible end tags, so a <tr> inside an open <td> ends the <td>
        on its way to the enclosing <tr>.
        """
        for open_tag in reversed(open_tags):
            closers = IMPLICIT_END_TAG_CLOSERS.get(open_tag)
            if closers and tag_name in closers:
                return True
            if open_tag not in OPTIONAL_END_TAG_ELEMENTS:
                return False
        return False

    # ---------------------
    # Element builder
    # ---------------------

    def parse_element(self, pos, open_tags):
        """Build one element starting at its start tag.

        Returns the element and the position after its end tag, or after
        the point where its content stopped if the end tag is absent.
        """
        scanner = self.scanner
        start = pos
        tag_name, pos = scanner.start_tag_at(pos)
        pos, attributes = scanner.parse_attributes(pos)
        element = Element(tag_name, attributes)

        depth = len(open_tags) * 2
        self.debug(f"<{tag_name}>", indent=depth)

        if tag_name in VOID_ELEMENTS:
            return element, pos

        open_tags.append(tag_name)
        try:
            pos = self.parse_content(pos, open_tags, element.children)
        finally:
            open_tags.pop()

        if scanner.end_tag_at(pos) == tag_name:
            pos = scanner.skip_to_tag_end(pos)
            self.debug(f"</{tag_name}>", indent=depth)
        elif tag_name not in OPTIONAL_END_TAG_ELEMENTS:
            self._report("missing-end-tag", start, f"No end tag for <{tag_name}>")

        return element, pos

    # ---------------------
    # Errors
    # ---------------------

    def _report(self, code, pos, message):
        if not (self.collect_errors or self.strict):
            return
        error = ParseError(code, location=self.scanner.location(pos), message=message)
        if self.strict:
            raise StrictModeError(error, pos=pos)
        self.errors.append(error)


def parse(html, *, collect_errors=False, strict=False, debug=False):
    """Parse an HTML string and return its ``Document`` root."""
    return HTMLAst(html, collect_errors=collect_errors, strict=strict, debug=debug).root
