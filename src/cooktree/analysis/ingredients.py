"""Aggregation of ingredient amounts across a recipe."""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from cooktree.document.nodes import IngredientNode, RecipeNode
from cooktree.document.quantity import (
    DecimalQuantity,
    TextQuantity,
    ValueList,
    make_quantity,
)
from cooktree.document.tree import walk
from cooktree.exceptions import InvariantViolation
from cooktree.logging_config import LoggingContext, get_logger
from cooktree.normalize.inflection import singularize

logger = get_logger(__name__)

UnitNormalizer = Callable[[str], str]


@dataclass
class IngredientAmount:
    """
    A single quantity mention of an ingredient, e.g. "2|3 cups".

    ``quantity`` may be given as a ValueList, a single quantity or a plain
    number; the latter two are wrapped in a one-element ValueList.
    """

    quantity: ValueList
    units: str

    def __post_init__(self) -> None:
        if not isinstance(self.quantity, ValueList):
            self.quantity = ValueList([make_quantity(self.quantity)])

    @classmethod
    def from_node(cls, ingredient: IngredientNode) -> "IngredientAmount":
        """Amount of an ingredient mention in a parsed document."""
        return cls(ingredient.amount.quantity, ingredient.amount.units)


@dataclass
class IngredientAmountCollection:
    """
    Running totals of one ingredient.

    Numeric amounts are summed per singular unit in ``countable``. Free-text
    amounts are kept per unit as written in ``uncountable``, where a later
    mention replaces an earlier one. Both maps are independent: a unit may
    appear in each.
    """

    countable: dict[str, Decimal] = field(default_factory=dict)
    uncountable: dict[str, str] = field(default_factory=dict)
    normalize_unit: UnitNormalizer = field(default=singularize, repr=False, compare=False)

    def add(self, amount: IngredientAmount) -> None:
        """
        Add one amount.

        Only the first value of the amount's ValueList is used; further values
        are ignored.

        Raises:
            InvariantViolation: If the amount has no values at all.
        """
        units = self.normalize_unit(amount.units)
        value = amount.quantity.first

        if value is None:
            logger.error(f"Empty quantity for units {amount.units!r}")
            raise InvariantViolation(
                f"Ingredient amount in {amount.units!r} has no quantity values",
                subject=amount,
            )

        if isinstance(value, TextQuantity):
            self.uncountable[amount.units] = value.value
            logger.debug(f"Set uncountable amount {amount.units!r} to {value.value!r}")
            return

        self.countable[units] = self.countable.get(units, Decimal(0)) + value.as_decimal()
        logger.debug(f"Countable total for {units!r} is now {self.countable[units]}")

    def __iter__(self) -> Iterator[IngredientAmount]:
        """Yield the current totals as amounts, countable buckets first."""
        for units, total in self.countable.items():
            yield IngredientAmount(ValueList([DecimalQuantity(total)]), units)
        for units, text in self.uncountable.items():
            yield IngredientAmount(ValueList([TextQuantity(text)]), units)

    def __len__(self) -> int:
        return len(self.countable) + len(self.uncountable)


class IngredientTable:
    """
    Totals of every ingredient mentioned while walking one recipe.

    A table belongs to a single accumulation pass; use a new table per recipe.

    Example:
        table = IngredientTable()
        table.add("flour", IngredientAmount(2, "cup"))
        table.add("flour", IngredientAmount(1, "cups"))
        table.ingredients["flour"].countable  # {"cup": Decimal("3")}
    """

    def __init__(self, normalize_unit: UnitNormalizer = singularize):
        self.normalize_unit = normalize_unit
        self.ingredients: dict[str, IngredientAmountCollection] = {}

    def add(self, name: str, amount: IngredientAmount) -> None:
        """Add an amount of ``name``, creating its collection on first mention."""
        if name not in self.ingredients:
            self.ingredients[name] = IngredientAmountCollection(normalize_unit=self.normalize_unit)

        with LoggingContext(ingredient=name):
            self.ingredients[name].add(amount)

    def add_all(self, name: str, amounts: Iterable[IngredientAmount]) -> None:
        """
        Add several amounts of ``name`` in order.

        Accepts any iterable of amounts, including another table's
        IngredientAmountCollection. Amounts added before a failure stay added.
        """
        for amount in amounts:
            self.add(name, amount)

    def add_recipe(self, recipe: RecipeNode, name: str | None = None) -> None:
        """Add every ingredient mention found in ``recipe``."""
        with LoggingContext(recipe=name):
            count = 0
            for node in walk(recipe):
                if isinstance(node, IngredientNode):
                    self.add(node.name, IngredientAmount.from_node(node))
                    count += 1
            logger.info(f"Collected {count} ingredient mentions into {len(self)} ingredients")

    def __contains__(self, name: Any) -> bool:
        return name in self.ingredients

    def __getitem__(self, name: str) -> IngredientAmountCollection:
        return self.ingredients[name]

    def __len__(self) -> int:
        return len(self.ingredients)


def collect_ingredients(
    recipe: RecipeNode,
    normalize_unit: UnitNormalizer = singularize,
) -> IngredientTable:
    """Build a fresh ingredient table from a parsed recipe."""
    table = IngredientTable(normalize_unit=normalize_unit)
    table.add_recipe(recipe)
    return table
