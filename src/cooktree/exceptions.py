"""Errors raised by cooktree."""

from typing import Any


class InvariantViolation(Exception):
    """
    Raised when input breaks a contract that correctly parsed recipes never break.

    Examples are an empty value list reaching the aggregator or a document
    node class without tree reflection. This is not a recoverable condition;
    callers should let it propagate.
    """

    def __init__(self, message: str, subject: Any = None):
        super().__init__(message)
        self.subject = subject
