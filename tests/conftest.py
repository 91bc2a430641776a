"""Pytest configuration and shared fixtures."""

import pytest

from cooktree.document import (
    AmountNode,
    DirectionNode,
    EquipmentNode,
    FractionQuantity,
    IngredientNode,
    IntegerQuantity,
    MetadataNode,
    RecipeNode,
    StepNode,
    TextQuantity,
    TimerNode,
    ValueList,
)

# =============================================================================
# Document Fixtures
# =============================================================================


@pytest.fixture
def two_step_recipe():
    """Recipe with a "Mix" step followed by a "Bake" step."""
    return RecipeNode(
        steps=[
            StepNode(instructions=[DirectionNode(value="Mix")]),
            StepNode(instructions=[DirectionNode(value="Bake")]),
        ]
    )


@pytest.fixture
def pancake_recipe():
    """Recipe exercising every instruction type plus metadata."""
    return RecipeNode(
        steps=[
            StepNode(
                instructions=[
                    DirectionNode(value="Whisk "),
                    IngredientNode(
                        name="flour",
                        amount=AmountNode(quantity=ValueList([IntegerQuantity(2)]), units="cup"),
                    ),
                    DirectionNode(value=" with "),
                    IngredientNode(
                        name="milk",
                        amount=AmountNode(quantity=ValueList([FractionQuantity(1, 2)]), units="cup"),
                    ),
                    DirectionNode(value=" in a "),
                    EquipmentNode(name="bowl"),
                ]
            ),
            StepNode(
                instructions=[
                    DirectionNode(value="Season with "),
                    IngredientNode(
                        name="salt",
                        amount=AmountNode(
                            quantity=ValueList([TextQuantity("a pinch")]), units="pinch"
                        ),
                    ),
                    DirectionNode(value=", add "),
                    IngredientNode(
                        name="flour",
                        amount=AmountNode(quantity=ValueList([IntegerQuantity(1)]), units="cups"),
                    ),
                    DirectionNode(value=" and rest for "),
                    TimerNode(quantity=ValueList([IntegerQuantity(10)]), units="minutes"),
                ]
            ),
        ],
        metadata=[MetadataNode(key="servings", value="4")],
    )


# =============================================================================
# Normalization Fixtures
# =============================================================================


@pytest.fixture
def identity_normalizer():
    """Unit normalizer that leaves units untouched."""
    return lambda unit: unit
