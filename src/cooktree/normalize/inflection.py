"""Singular/plural inflection of measurement units."""

import re

# =============================================================================
# Inflection Tables
# =============================================================================

# Abbreviations and symbols that read the same for any count
UNINFLECTED: set[str] = {
    # Metric
    "g",
    "kg",
    "mg",
    "ml",
    "l",
    "dl",
    "cl",
    # US customary
    "tsp",
    "tbsp",
    "tbs",
    "oz",
    "pt",
    "qt",
    "gal",
    "lb",
    # Count
    "pc",
    "pkg",
    # Time
    "h",
    "hr",
    "min",
    "sec",
}

# Words without a separate plural form
UNCOUNTABLE: set[str] = {
    "dozen",
    "whole",
    "some",
}

# Pluralized abbreviations mapped back to their canonical form
PLURAL_ABBREVIATIONS: dict[str, str] = {
    "lbs": "lb",
    "pcs": "pc",
    "pkgs": "pkg",
    "tsps": "tsp",
    "tbsps": "tbsp",
    "hrs": "hr",
    "mins": "min",
    "secs": "sec",
}

# Singular -> plural for words the suffix rules get wrong
IRREGULAR: dict[str, str] = {
    "leaf": "leaves",
    "loaf": "loaves",
    "half": "halves",
    "knife": "knives",
    "calf": "calves",
    "tomato": "tomatoes",
    "potato": "potatoes",
    "mango": "mangoes",
    "cookie": "cookies",
    "pie": "pies",
    "foot": "feet",
    "tooth": "teeth",
}

IRREGULAR_SINGULAR: dict[str, str] = {plural: singular for singular, plural in IRREGULAR.items()}

# (pattern, replacement), first match wins
SINGULAR_RULES: list[tuple[str, str]] = [
    (r"([^aeiou])ies$", r"\1y"),
    (r"(ch|sh|ss|x|z)es$", r"\1"),
    (r"(ss|us|is)$", r"\1"),
    (r"s$", ""),
]

PLURAL_RULES: list[tuple[str, str]] = [
    (r"([^aeiou])y$", r"\1ies"),
    (r"(ch|sh|ss|x|z)$", r"\1es"),
    (r"$", "s"),
]


# =============================================================================
# Helpers
# =============================================================================


def _split_last_word(unit: str) -> tuple[str, str]:
    """Split "fluid ounces" into ("fluid ", "ounces")."""
    head, sep, word = unit.rpartition(" ")
    return head + sep, word


def _match_case(word: str, original: str) -> str:
    if len(original) > 1 and original.isupper():
        return word.upper()
    if original[:1].isupper():
        return word[:1].upper() + word[1:]
    return word


def _apply_rules(word: str, rules: list[tuple[str, str]]) -> str:
    for pattern, replacement in rules:
        if re.search(pattern, word, flags=re.IGNORECASE):
            return re.sub(pattern, replacement, word, count=1, flags=re.IGNORECASE)
    return word


def _is_invariant(lower: str) -> bool:
    return not lower or lower in UNINFLECTED or lower in UNCOUNTABLE


def _singular_word(word: str) -> str:
    lower = word.lower()

    if _is_invariant(lower) or lower in IRREGULAR:
        return word
    if lower in PLURAL_ABBREVIATIONS:
        return _match_case(PLURAL_ABBREVIATIONS[lower], word)
    if lower in IRREGULAR_SINGULAR:
        return _match_case(IRREGULAR_SINGULAR[lower], word)

    return _apply_rules(word, SINGULAR_RULES)


def _plural_word(word: str) -> str:
    lower = word.lower()

    if _is_invariant(lower):
        return word
    if lower in IRREGULAR:
        return _match_case(IRREGULAR[lower], word)

    return _apply_rules(word, PLURAL_RULES)


# =============================================================================
# Public API
# =============================================================================


def singularize(unit: str) -> str:
    """
    Canonical singular form of a unit.

    Only the last word of a multi-word unit is inflected. Abbreviations
    such as "g" or "tbsp" are returned unchanged, and already singular
    units map to themselves.

    Examples:
        "cups" -> "cup"
        "pinches" -> "pinch"
        "lbs" -> "lb"
        "fluid ounces" -> "fluid ounce"
    """
    head, word = _split_last_word(unit)
    return head + _singular_word(word)


def pluralize(unit: str, count: int | float = 2) -> str:
    """
    Inflect a unit for display next to ``count``.

    The singular form is used when ``count`` is exactly one, the plural
    form otherwise. The unit may be given in either form.
    """
    head, word = _split_last_word(unit)
    singular = _singular_word(word)
    if count == 1:
        return head + singular
    return head + _plural_word(singular)
