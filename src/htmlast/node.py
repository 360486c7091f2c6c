class Node:
    """Represents a node of the parsed tree.
    - tag_name: e.g., 'div', 'p', etc. '#text' for text nodes, 'document' for the root.
    - attributes: dict of tag attributes
    - children: list of child Nodes

    Links only point from parent to children; nodes keep no parent or sibling
    references.
    """

    __slots__ = ("attributes", "children", "tag_name")

    def __init__(self, tag_name, attributes=None):
        if tag_name is None or tag_name == "":
            msg = "Empty tag_name passed to Node constructor"
            raise ValueError(msg)
        self.tag_name = tag_name
        self.attributes = dict(attributes) if attributes else {}
        self.children = []

    @property
    def is_text(self):
        return False

    def append_child(self, child):
        self.children.append(child)

    def find_child_by_tag(self, tag_name):
        """Find first child with the given tag name.

        Args:
            tag_name: Tag name to search for
        Returns:
            First matching child or None if not found

        """
        for child in self.children:
            if child.tag_name == tag_name:
                return child
        return None

    def to_test_format(self, indent=0):
        from .serialize import to_test_format

        return to_test_format(self, indent)

    def __eq__(self, other):
        if not isinstance(other, Node) or type(self) is not type(other):
            return NotImplemented
        return (
            self.tag_name == other.tag_name
            and self.attributes == other.attributes
            and self.children == other.children
        )

    __hash__ = None  # Unhashable since we define __eq__

    def __repr__(self):
        return f"{type(self).__name__}(<{self.tag_name}>, children={len(self.children)})"


class Document(Node):
    __slots__ = ()

    def __init__(self):
        super().__init__("document")


class Element(Node):
    __slots__ = ()


class Text(Node):
    """A run of character data, stored trimmed and never empty."""

    __slots__ = ("data",)

    def __init__(self, data):
        if not data:
            msg = "Text nodes must carry non-empty data"
            raise ValueError(msg)
        super().__init__("#text")
        self.data = data

    @property
    def is_text(self):
        return True

    def append_child(self, child):
        msg = "Text nodes cannot have children"
        raise TypeError(msg)

    def __eq__(self, other):
        if not isinstance(other, Text):
            return NotImplemented
        return self.data == other.data

    __hash__ = None

    def __repr__(self):
        return f"Text({self.data[:30]!r})"
