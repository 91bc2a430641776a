"""Recipe document tree: quantities, nodes and tree printing."""

from cooktree.document.base import Node
from cooktree.document.nodes import (
    AmountNode,
    DirectionNode,
    EquipmentNode,
    IngredientNode,
    Instruction,
    MetadataNode,
    RecipeNode,
    StepNode,
    TimerNode,
)
from cooktree.document.quantity import (
    BaseQuantity,
    DecimalQuantity,
    FractionQuantity,
    IntegerQuantity,
    Quantity,
    TextQuantity,
    ValueList,
    format_decimal,
    make_quantity,
    parse_quantity,
    quantities_equal,
    render_quantity,
    values_prefix_equal,
)
from cooktree.document.tree import print_tree, tree_lines, walk

__all__ = [
    "AmountNode",
    "BaseQuantity",
    "DecimalQuantity",
    "DirectionNode",
    "EquipmentNode",
    "FractionQuantity",
    "IngredientNode",
    "Instruction",
    "IntegerQuantity",
    "MetadataNode",
    "Node",
    "Quantity",
    "RecipeNode",
    "StepNode",
    "TextQuantity",
    "TimerNode",
    "ValueList",
    "format_decimal",
    "make_quantity",
    "parse_quantity",
    "print_tree",
    "quantities_equal",
    "render_quantity",
    "tree_lines",
    "values_prefix_equal",
    "walk",
]
