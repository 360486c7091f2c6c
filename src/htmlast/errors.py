"""Parse errors.

Fatal conditions raise an ``HTMLParseError`` subclass and abort the parse.
Recoverable conditions are recorded as ``ParseError`` values; they are only
kept when the parser runs with ``collect_errors=True`` and are promoted to a
``StrictModeError`` when it runs with ``strict=True``.
"""


class ParseError:
    """A recoverable condition found while parsing.

    ``location`` is the ``(line, column)`` tuple returned by
    ``Scanner.location``, or None when the position is unknown.
    """

    __slots__ = ("code", "location", "message")

    def __init__(self, code, location=None, message=None):
        self.code = code
        self.location = location
        self.message = message

    @property
    def line(self):
        return self.location[0] if self.location else None

    @property
    def column(self):
        return self.location[1] if self.location else None

    def __repr__(self):
        return f"ParseError({self.code!r}, location={self.location!r})"

    def __str__(self):
        parts = []
        if self.location:
            parts.append("({},{}):".format(*self.location))
        parts.append(self.code)
        if self.message:
            parts.append(f"- {self.message}")
        return " ".join(parts)

    def __eq__(self, other):
        if not isinstance(other, ParseError):
            return NotImplemented
        # message is free text, not part of identity
        return (self.code, self.location) == (other.code, other.location)

    __hash__ = None


class HTMLParseError(Exception):
    """Base class for errors that abort a parse."""

    code = "parse-error"

    def __init__(self, message, pos=None, line=None, column=None, code=None):
        if code is not None:
            self.code = code
        self.message = message
        self.pos = pos
        self.line = line
        self.column = column
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class InvalidTagError(HTMLParseError):
    """A start or end tag names an element outside the known vocabulary."""

    code = "invalid-tag"

    def __init__(self, tag_name, pos=None, line=None, column=None):
        self.tag_name = tag_name
        super().__init__(f"Invalid HTML tag: {tag_name!r}", pos=pos, line=line, column=column)


class MalformedInputError(HTMLParseError):
    """Input ended while a terminator (``>``, a quote, ``-->``) was still expected."""

    code = "malformed-input"


class StrictModeError(HTMLParseError):
    """Raised in strict mode for the first recoverable parse error."""

    code = "strict-mode"

    def __init__(self, error, pos=None):
        self.error = error
        # str(error) already carries the location
        super().__init__(str(error), pos=pos, code=error.code)
        self.line = error.line
        self.column = error.column
