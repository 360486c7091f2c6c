"""Position-based scanning primitives.

A ``Scanner`` wraps one immutable source string. Every method takes a cursor
position and returns the new one; the scanner itself never moves, so callers
thread the position through explicitly. Each loop is bounded by the buffer
length and raises ``MalformedInputError`` when a terminator never shows up.
"""

import re

from .constants import DOCTYPE_NAME, KNOWN_ELEMENTS, WHITESPACE
from .errors import InvalidTagError, MalformedInputError

_TAG_NAME_TERMINATORS = WHITESPACE + "/>"
_ATTR_NAME_TERMINATORS = WHITESPACE + "/>="
_ATTR_VALUE_UNQUOTED_TERMINATORS = WHITESPACE + ">"

_WHITESPACE_RUN_PATTERN = re.compile(f"[{re.escape(WHITESPACE)}]*")
_TAG_NAME_TERMINATOR_PATTERN = re.compile(f"[{re.escape(_TAG_NAME_TERMINATORS)}]")
_ATTR_NAME_TERMINATOR_PATTERN = re.compile(f"[{re.escape(_ATTR_NAME_TERMINATORS)}]")
_ATTR_VALUE_UNQUOTED_PATTERN = re.compile(f"[{re.escape(_ATTR_VALUE_UNQUOTED_TERMINATORS)}]")

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"


class Scanner:
    __slots__ = ("buffer", "length")

    def __init__(self, html):
        self.buffer = html or ""
        self.length = len(self.buffer)

    def at_end(self, pos):
        return pos >= self.length

    def location(self, pos):
        """Return the 1-based (line, column) of a cursor position."""
        pos = min(pos, self.length)
        line = self.buffer.count("\n", 0, pos) + 1
        column = pos - (self.buffer.rfind("\n", 0, pos) + 1) + 1
        return line, column

    # ---------------------
    # Cursor primitives
    # ---------------------

    def skip_whitespace(self, pos):
        return _WHITESPACE_RUN_PATTERN.match(self.buffer, pos).end()

    def is_comment(self, pos):
        return self.buffer.startswith(COMMENT_OPEN, pos)

    def skip_comment(self, pos):
        """Eat a comment starting at pos, returning the position after ``-->``."""
        end = self.buffer.find(COMMENT_CLOSE, pos + len(COMMENT_OPEN))
        if end == -1:
            raise self._malformed("eof-in-comment", "Unterminated comment", pos)
        return end + len(COMMENT_CLOSE)

    def skip_trivia(self, pos):
        """Eat any run of whitespace and comments."""
        while True:
            pos = self.skip_whitespace(pos)
            if not self.is_comment(pos):
                return pos
            pos = self.skip_comment(pos)

    def read_text(self, pos):
        """Return the raw text up to the next ``<`` (or end) and the position of that ``<``."""
        end = self.buffer.find("<", pos)
        if end == -1:
            end = self.length
        return self.buffer[pos:end], end

    def read_tag_name(self, pos):
        """Read a tag name. pos is just after ``<`` or ``</``; the result stops before
        whitespace, ``/`` or ``>``.
        """
        match = _TAG_NAME_TERMINATOR_PATTERN.search(self.buffer, pos)
        end = match.start() if match else self.length
        return self.buffer[pos:end], end

    def skip_to_tag_end(self, pos, code="eof-in-tag"):
        """Eat everything through the next ``>``."""
        end = self.buffer.find(">", pos)
        if end == -1:
            raise self._malformed(code, "Unterminated tag", pos)
        return end + 1

    # ---------------------
    # Tag classifiers
    # ---------------------

    def start_tag_at(self, pos):
        """Check for a start tag at pos.

        Returns ``(tag_name, pos_after_name)``, or ``("", pos)`` when pos is not
        at a start tag. Raises ``InvalidTagError`` for an unknown or empty name.
        """
        buffer = self.buffer
        if pos >= self.length or buffer[pos] != "<":
            return "", pos
        nxt = buffer[pos + 1 : pos + 2]
        if nxt in ("/", "!", "?"):
            return "", pos

        tag_name, end = self.read_tag_name(pos + 1)
        if tag_name not in KNOWN_ELEMENTS:
            raise self._invalid_tag(tag_name, pos)
        return tag_name, end

    def end_tag_at(self, pos):
        """Return the validated name of an end tag at pos, or ``""`` if there is none."""
        if not self.buffer.startswith("</", pos):
            return ""
        tag_name, _ = self.read_tag_name(pos + 2)
        if tag_name not in KNOWN_ELEMENTS:
            raise self._invalid_tag(tag_name, pos)
        return tag_name

    def is_doctype(self, pos):
        return self.buffer.startswith("<" + DOCTYPE_NAME, pos) and (
            self.read_tag_name(pos + 1)[0] == DOCTYPE_NAME
        )

    def is_bogus_markup(self, pos):
        """``<!`` that is not a comment, or a ``<?`` processing instruction."""
        return self.buffer.startswith(("<!", "<?"), pos) and not self.is_comment(pos)

    # ---------------------
    # Attribute tokenizer
    # ---------------------

    def parse_attributes(self, pos):
        """Parse ``name[=value]`` pairs up to the closing ``>`` of a start tag.

        Returns ``(pos_after_gt, attributes)``. A name without ``=`` maps to
        ``""``; a repeated name keeps the last value.
        """
        buffer = self.buffer
        length = self.length
        attributes = {}
        while True:
            pos = self.skip_whitespace(pos)
            if pos >= length:
                raise self._malformed("eof-in-tag", "Unterminated start tag", pos)
            c = buffer[pos]
            if c == ">":
                return pos + 1, attributes
            if c == "/":
                # Self-closing slash; meaningless for the tree
                pos += 1
                continue

            name, pos = self._read_attribute_name(pos)
            after_name = self.skip_whitespace(pos)
            if after_name < length and buffer[after_name] == "=":
                value, pos = self._read_attribute_value(self.skip_whitespace(after_name + 1))
            else:
                value = ""
            attributes[name] = value

    def _read_attribute_name(self, pos):
        match = _ATTR_NAME_TERMINATOR_PATTERN.search(self.buffer, pos)
        end = match.start() if match else self.length
        if end == pos:
            # A stray "=" with no name in front of it
            end = pos + 1
        return self.buffer[pos:end], end

    def _read_attribute_value(self, pos):
        buffer = self.buffer
        if pos >= self.length:
            raise self._malformed("eof-in-attribute-value", "Missing attribute value", pos)
        quote = buffer[pos]
        if quote in ('"', "'"):
            end = buffer.find(quote, pos + 1)
            if end == -1:
                raise self._malformed("eof-in-attribute-value", "Unterminated attribute value", pos)
            return buffer[pos + 1 : end], end + 1
        match = _ATTR_VALUE_UNQUOTED_PATTERN.search(buffer, pos)
        end = match.start() if match else self.length
        return buffer[pos:end], end

    # ---------------------
    # Errors
    # ---------------------

    def _invalid_tag(self, tag_name, pos):
        line, column = self.location(pos)
        return InvalidTagError(tag_name, pos=pos, line=line, column=column)

    def _malformed(self, code, message, pos):
        line, column = self.location(pos)
        return MalformedInputError(message, pos=pos, line=line, column=column, code=code)
