"""Generic traversal and box-drawing printing of document trees."""

from collections.abc import Iterator

from cooktree.document.base import Node

BRANCH = "┣╸"
BRANCH_INDENT = "┃ "
LAST_BRANCH = "┗╸"
LAST_BRANCH_INDENT = "  "


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and its descendants depth first, parents before children."""
    yield node
    for child in node.children():
        yield from walk(child)


def tree_lines(node: Node, node_indent: str = "", child_indent: str = "") -> Iterator[str]:
    """
    Lazily yield the printed lines of a document tree.

    Every child but the last is drawn with "┣╸" and its subtree continues
    under "┃ "; the last child is drawn with "┗╸" and continues under blank
    indentation.
    """
    yield node_indent + node.label()

    children = node.children()
    last = len(children) - 1
    for index, child in enumerate(children):
        if index < last:
            lines = tree_lines(child, BRANCH, BRANCH_INDENT)
        else:
            lines = tree_lines(child, LAST_BRANCH, LAST_BRANCH_INDENT)
        for line in lines:
            yield child_indent + line


def print_tree(node: Node) -> str:
    """
    Render a document tree as text.

    Example for a recipe with two single-direction steps::

        recipe
        ┣╸step
        ┃ ┗╸Mix
        ┗╸step
          ┗╸Bake
    """
    return "\n".join(tree_lines(node))
