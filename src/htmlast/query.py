"""Read-only lookups over a parsed tree."""


def iter_elements(root):
    """Yield the element descendants of root in document order.

    root itself is not yielded. Text nodes are skipped.
    """
    stack = [iter(root.children)]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            continue
        if child.is_text:
            continue
        yield child
        if child.children:
            stack.append(iter(child.children))


def get_element_by_id(root, element_id):
    """Return the first descendant of root whose ``id`` attribute equals element_id.

    Search is depth-first in document order and starts at root's children;
    root itself is never compared. Returns None when nothing matches.
    """
    for element in iter_elements(root):
        if element.attributes.get("id") == element_id:
            return element
    return None


def get_elements_by_tag_name(root, tag_name):
    """Return every descendant element of root with the given tag name, in document order."""
    return [element for element in iter_elements(root) if element.tag_name == tag_name]
