"""
Quantities attached to ingredient amounts and timers.

A quantity is one of four variants: a whole number, an arbitrary precision
decimal, an unevaluated fraction, or free text such as "a pinch". Numeric
variants compare equal whenever they denote the same value, whatever their
representation.
"""

import re
from collections.abc import Iterable, Iterator, Mapping, Sequence
from decimal import ROUND_HALF_EVEN, Decimal
from fractions import Fraction
from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field, TypeAdapter

from cooktree.document.base import Node

DISPLAY_SIGNIFICANT_DIGITS = 2

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_DECIMAL_RE = re.compile(r"^[+-]?\d*\.\d+$")
_FRACTION_RE = re.compile(r"^(\d+)\s*/\s*(\d+)$")


def format_decimal(value: Decimal, significant_digits: int = DISPLAY_SIGNIFICANT_DIGITS) -> str:
    """
    Format a decimal for display with at most ``significant_digits`` digits.

    Rounds half to even, drops trailing zeros and never uses exponent notation:
    3.14159 -> "3.1", 123.4 -> "120", 2.0 -> "2".
    """
    if not value.is_finite():
        return str(value)
    if value.is_zero():
        return "0"

    exponent = value.adjusted() - significant_digits + 1
    rounded = value.quantize(Decimal(1).scaleb(exponent), rounding=ROUND_HALF_EVEN)
    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def plain_decimal(value: Decimal) -> str:
    """Full decimal digits without trailing zeros or exponent notation."""
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class BaseQuantity(Node):
    """Common behaviour of the quantity variants."""

    model_config = ConfigDict(frozen=True)

    def as_fraction(self) -> Fraction:
        """Exact rational value of a numeric quantity."""
        raise TypeError(f"{self!r} has no numeric value")

    def as_decimal(self) -> Decimal:
        """Decimal value of a numeric quantity."""
        raise TypeError(f"{self!r} has no numeric value")

    def children(self) -> list[Node]:
        return []

    def __str__(self) -> str:
        return self.label()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseQuantity):
            return NotImplemented
        return quantities_equal(self, other)

    def __hash__(self) -> int:
        return hash(self.as_fraction())


class IntegerQuantity(BaseQuantity):
    kind: Literal["integer"] = "integer"
    value: int

    def __init__(self, value: int, **data: Any):
        super().__init__(value=value, **data)

    def as_fraction(self) -> Fraction:
        return Fraction(self.value)

    def as_decimal(self) -> Decimal:
        return Decimal(self.value)

    def label(self) -> str:
        return str(self.value)


class DecimalQuantity(BaseQuantity):
    kind: Literal["decimal"] = "decimal"
    value: Decimal

    def __init__(self, value: Decimal | str | int, **data: Any):
        super().__init__(value=value, **data)

    def as_fraction(self) -> Fraction:
        return Fraction(self.value)

    def as_decimal(self) -> Decimal:
        return self.value

    def label(self) -> str:
        return format_decimal(self.value)


class FractionQuantity(BaseQuantity):
    """A fraction kept as written. The denominator is assumed to be non-zero."""

    kind: Literal["fraction"] = "fraction"
    numerator: int
    denominator: int

    def __init__(self, numerator: int, denominator: int, **data: Any):
        super().__init__(numerator=numerator, denominator=denominator, **data)

    def as_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def as_decimal(self) -> Decimal:
        return Decimal(self.numerator) / Decimal(self.denominator)

    def label(self) -> str:
        # Not reduced and not evaluated: 2/4 stays "2/4"
        return f"{self.numerator}/{self.denominator}"


class TextQuantity(BaseQuantity):
    """A free-text amount such as "a pinch"."""

    kind: Literal["text"] = "text"
    value: str

    def __init__(self, value: str, **data: Any):
        super().__init__(value=value, **data)

    def label(self) -> str:
        return self.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))


Quantity = Annotated[
    IntegerQuantity | DecimalQuantity | FractionQuantity | TextQuantity,
    Field(discriminator="kind"),
]

_quantity_adapter = TypeAdapter(Quantity)


def quantities_equal(left: BaseQuantity, right: BaseQuantity) -> bool:
    """
    Compare two quantities by value.

    Numeric variants are compared exactly as rationals, so
    ``IntegerQuantity(2) == FractionQuantity(4, 2) == DecimalQuantity("2.0")``.
    Any comparison with a text quantity is False, including two text
    quantities holding the same string. Whether free-text amounts should
    compare by content is undecided; until then they never match.
    """
    if isinstance(left, TextQuantity) or isinstance(right, TextQuantity):
        return False
    return left.as_fraction() == right.as_fraction()


def render_quantity(quantity: BaseQuantity) -> str:
    """Display form of a quantity."""
    return quantity.label()


def make_quantity(value: Any) -> BaseQuantity:
    """
    Build the quantity variant matching a Python value.

    int -> integer, Decimal or float -> decimal, ``(numerator, denominator)``
    -> fraction, str -> text. Quantities are returned unchanged and mappings
    are validated as serialized quantities, e.g. ``{"kind": "integer", "value": 2}``.
    """
    if isinstance(value, BaseQuantity):
        return value
    if isinstance(value, Mapping):
        return _quantity_adapter.validate_python(value)
    if isinstance(value, bool):
        raise TypeError("bool is not a quantity")
    if isinstance(value, int):
        return IntegerQuantity(value)
    if isinstance(value, Decimal):
        return DecimalQuantity(value)
    if isinstance(value, float):
        return DecimalQuantity(Decimal(str(value)))
    if isinstance(value, tuple) and len(value) == 2:
        return FractionQuantity(*value)
    if isinstance(value, str):
        return TextQuantity(value)
    raise TypeError(f"Cannot build a quantity from {value!r}")


def parse_quantity(token: str) -> BaseQuantity:
    """
    Read a single quantity token.

    "3" -> integer, "1.5" -> decimal, "3/4" -> fraction, anything else is
    kept as free text.
    """
    token = token.strip()

    if _INTEGER_RE.match(token):
        return IntegerQuantity(int(token))
    if _DECIMAL_RE.match(token):
        return DecimalQuantity(Decimal(token))
    if match := _FRACTION_RE.match(token):
        return FractionQuantity(int(match.group(1)), int(match.group(2)))
    return TextQuantity(token)


def values_prefix_equal(left: Sequence[BaseQuantity], right: Sequence[BaseQuantity]) -> bool:
    """
    Compare two value lists element by element over their common prefix.

    Lengths are not compared, so ``[2]`` matches ``[2, 3, 4]``.
    """
    return all(lhs == rhs for lhs, rhs in zip(left, right))


class ValueList(Node):
    """Ordered quantities attached to one amount, e.g. "1|2|3"."""

    values: list[Quantity] = Field(default_factory=list)

    def __init__(self, values: Iterable[Any] = (), **data: Any):
        super().__init__(values=[make_quantity(v) for v in values], **data)

    @property
    def first(self) -> BaseQuantity | None:
        return self.values[0] if self.values else None

    def __iter__(self) -> Iterator[BaseQuantity]:  # type: ignore[override]
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> BaseQuantity:
        return self.values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueList):
            return NotImplemented
        return values_prefix_equal(self.values, other.values)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.label()

    def label(self) -> str:
        return "|".join(render_quantity(v) for v in self.values)

    def children(self) -> list[Node]:
        return []
