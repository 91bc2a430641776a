"""Base class for recipe document nodes."""

from pydantic import BaseModel, ConfigDict

from cooktree.exceptions import InvariantViolation
from cooktree.logging_config import get_logger

logger = get_logger(__name__)


class Node(BaseModel):
    """
    Base class for every element of a parsed recipe document.

    Subclasses describe themselves for tree printing through two methods:
    ``label()`` returns the one-line text shown for the node and
    ``children()`` returns the nodes printed beneath it. A subclass that
    implements neither is a programming error and fails loudly.
    """

    model_config = ConfigDict(from_attributes=True)

    def label(self) -> str:
        return _missing_reflection(self, "label")

    def children(self) -> list["Node"]:
        return _missing_reflection(self, "children")


def _missing_reflection(node: Node, method: str):
    logger.error(f"{type(node).__name__} does not implement {method}()")
    raise InvariantViolation(f"Missed document node case: {node!r}", subject=node)
