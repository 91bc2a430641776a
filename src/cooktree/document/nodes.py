"""Document nodes produced by the recipe parser."""

from collections.abc import Callable
from typing import Annotated, Literal

from pydantic import Field

from cooktree.document.base import Node
from cooktree.document.quantity import (
    DecimalQuantity,
    FractionQuantity,
    IntegerQuantity,
    ValueList,
    plain_decimal,
)
from cooktree.normalize.inflection import pluralize

Pluralizer = Callable[[str, int], str]


class AmountNode(Node):
    """Quantity and unit of an ingredient mention, e.g. "2 cups"."""

    quantity: ValueList
    units: str = ""

    def label(self, pluralizer: Pluralizer = pluralize) -> str:
        """
        Unit-aware phrase for the first quantity.

        Whole numbers inflect the unit by their value, decimals always take
        the plural and fractions always take the singular. Anything else is
        shown verbatim.
        """
        first = self.quantity.first
        if isinstance(first, IntegerQuantity):
            return f"{first.value} {pluralizer(self.units, first.value)}"
        if isinstance(first, DecimalQuantity):
            return f"{plain_decimal(first.value)} {pluralizer(self.units, 2)}"
        if isinstance(first, FractionQuantity):
            return f"{first.label()} {pluralizer(self.units, 1)}"
        return f"{self.quantity} {self.units}"

    def children(self) -> list[Node]:
        return []


class DirectionNode(Node):
    """Plain instruction text."""

    kind: Literal["direction"] = "direction"
    value: str

    def label(self) -> str:
        return self.value

    def children(self) -> list[Node]:
        return []


class IngredientNode(Node):
    kind: Literal["ingredient"] = "ingredient"
    name: str
    amount: AmountNode

    def label(self) -> str:
        return f"ING: {self.name} [{self.amount.label()}]"

    def children(self) -> list[Node]:
        return []


class EquipmentNode(Node):
    kind: Literal["equipment"] = "equipment"
    name: str

    def label(self) -> str:
        return f"EQ: {self.name}"

    def children(self) -> list[Node]:
        return []

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EquipmentNode):
            return NotImplemented
        return self.name == other.name


class TimerNode(Node):
    """A timer such as "~eggs{3%minutes}". Equality ignores the timer name."""

    kind: Literal["timer"] = "timer"
    name: str = ""
    quantity: ValueList
    units: str = ""

    def label(self) -> str:
        return f"TIMER({self.name}): {self.quantity} {self.units}"

    def children(self) -> list[Node]:
        return []

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimerNode):
            return NotImplemented
        return self.quantity == other.quantity and self.units == other.units


class MetadataNode(Node):
    """A ``key: value`` metadata line of the recipe."""

    key: str
    value: str

    def label(self) -> str:
        return f"{self.key} => {self.value}"

    def children(self) -> list[Node]:
        return []

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MetadataNode):
            return NotImplemented
        return self.key == other.key and self.value == other.value


Instruction = Annotated[
    DirectionNode | IngredientNode | EquipmentNode | TimerNode,
    Field(discriminator="kind"),
]


class StepNode(Node):
    """One step of a recipe. Steps compare by the labels of their instructions."""

    instructions: list[Instruction] = Field(default_factory=list)

    def label(self) -> str:
        return "step"

    def children(self) -> list[Node]:
        return list(self.instructions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StepNode):
            return NotImplemented
        return [i.label() for i in self.instructions] == [i.label() for i in other.instructions]


class RecipeNode(Node):
    steps: list[StepNode] = Field(default_factory=list)
    metadata: list[MetadataNode] = Field(default_factory=list)

    def label(self) -> str:
        return "recipe"

    def children(self) -> list[Node]:
        return [*self.steps, *self.metadata]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecipeNode):
            return NotImplemented
        return self.steps == other.steps and self.metadata == other.metadata
