"""Normalize units before they are used as aggregation keys or displayed."""

from cooktree.normalize.inflection import pluralize, singularize

__all__ = [
    "pluralize",
    "singularize",
]
