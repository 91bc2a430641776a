"""Semantic analysis of parsed recipes."""

from cooktree.analysis.ingredients import (
    IngredientAmount,
    IngredientAmountCollection,
    IngredientTable,
    collect_ingredients,
)

__all__ = [
    "IngredientAmount",
    "IngredientAmountCollection",
    "IngredientTable",
    "collect_ingredients",
]
