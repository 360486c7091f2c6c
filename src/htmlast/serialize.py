"""Serialization of parsed trees.

``to_test_format`` produces the ``| ``-prefixed tree dump used by the
fixture files; ``to_html`` pretty-prints markup.
"""

from .constants import VOID_ELEMENTS

# Keeps adjacent text nodes apart on reparse; comments are dropped by the parser
TEXT_SEPARATOR = "<!-- -->"


def to_test_format(node, indent=0):
    """Convert a node to the fixture tree format.

    Elements print as ``| <tag>``, attributes (sorted) on their own lines two
    columns deeper, and text as ``| "text"``. The document prints its children.
    """
    if node.tag_name == "document":
        return "\n".join(to_test_format(child, 0) for child in node.children)
    if node.is_text:
        return f'| {" " * indent}"{node.data}"'

    lines = [f"| {' ' * indent}<{node.tag_name}>"]
    for key, value in sorted(node.attributes.items()):
        lines.append(f'| {" " * (indent + 2)}{key}="{value}"')
    lines.extend(to_test_format(child, indent + 2) for child in node.children)
    return "\n".join(lines)


def to_html(node, indent=0, indent_size=2):
    """Convert node to pretty-printed HTML string."""
    if node.tag_name == "document":
        return "\n".join(_children_to_html(node.children, indent, indent_size))
    return _node_to_html(node, indent, indent_size)


def _quote_attribute(key, value):
    """Quote a value with whichever quote character it does not contain.

    Entities are never decoded on parse, so escaping would change the value.
    """
    if '"' not in value:
        return f'{key}="{value}"'
    if "'" not in value:
        return f"{key}='{value}'"
    msg = f"Attribute {key!r} value contains both quote characters: {value!r}"
    raise ValueError(msg)


def _children_to_html(children, indent, indent_size):
    parts = []
    previous_is_text = False
    for child in children:
        if child.is_text and previous_is_text:
            parts.append(" " * (indent * indent_size) + TEXT_SEPARATOR)
        parts.append(_node_to_html(child, indent, indent_size))
        previous_is_text = child.is_text
    return parts


def _node_to_html(node, indent=0, indent_size=2):
    """Helper to convert a node to HTML."""
    prefix = " " * (indent * indent_size)

    if node.is_text:
        return f"{prefix}{node.data}"

    name = node.tag_name
    attr_str = ""
    if node.attributes:
        attr_parts = []
        for key, value in node.attributes.items():
            if value == "":
                attr_parts.append(key)
            else:
                attr_parts.append(_quote_attribute(key, value))
        attr_str = " " + " ".join(attr_parts)

    if name in VOID_ELEMENTS:
        return f"{prefix}<{name}{attr_str}>"

    children = node.children
    if not children:
        return f"{prefix}<{name}{attr_str}></{name}>"

    # Text-only content stays on one line
    if all(child.is_text for child in children):
        text = TEXT_SEPARATOR.join(child.data for child in children)
        return f"{prefix}<{name}{attr_str}>{text}</{name}>"

    parts = [f"{prefix}<{name}{attr_str}>"]
    parts.extend(_children_to_html(children, indent + 1, indent_size))
    parts.append(f"{prefix}</{name}>")
    return "\n".join(parts)
