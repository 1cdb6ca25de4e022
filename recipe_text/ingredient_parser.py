"""Ingredient line parser - splits amount, unit, and name

The line is cleaned, fraction glyphs are spelled out, and then an ordered
cascade of patterns is tried. The first pattern that matches builds the
Ingredient; more specific patterns come before generic ones.
"""

import re
from typing import Callable, Optional

from recipe_text.models import Ingredient
from recipe_text.vocabulary import SIZE_ADJECTIVES, UNIT_ALTERNATION, UNIT_PATTERN, normalize_fractions

BULLET_PATTERN = re.compile(r"^[•·▪◦\-\*–]+\s*")
LIST_NUMBER_PATTERN = re.compile(r"^\d+[\.\)]\s+")
INGREDIENTS_LABEL_PATTERN = re.compile(r"^ingredients?\s*:?\s*", re.IGNORECASE)
PRICE_PATTERN = re.compile(r"\(\$[\d.,]+\)")

# Mixed numbers and ranges must come before their prefixes
NUMERAL = r"\d+\s+\d+/\d+|\d+\s*-\s*\d+|\d+/\d+|\d+(?:\.\d+)?"
FRACTION = r"\d+\s+\d+/\d+|\d+/\d+"
SIZE = "|".join(SIZE_ADJECTIVES)

FRACTION_UNIT_PATTERN = re.compile(
    rf"^({FRACTION})\s*({UNIT_ALTERNATION})\b\.?\s+(.+)$", re.IGNORECASE
)
AMOUNT_UNIT_PATTERN = re.compile(
    rf"^({NUMERAL})\s*({UNIT_ALTERNATION})\b\.?\s+(.+)$", re.IGNORECASE
)
TO_TASTE_PATTERN = re.compile(r"^(.+?)\s*,?\s+to\s+taste\.?$", re.IGNORECASE)
COUNT_SIZE_PATTERN = re.compile(
    rf"^(\d+)\s+(?!\d+/\d+)(?:({SIZE})\s+)?(.+)$", re.IGNORECASE
)
TRAILING_QUANTITY_PATTERN = re.compile(
    rf"^(.+?),\s*({NUMERAL})\s*({UNIT_ALTERNATION})\.?$", re.IGNORECASE
)
LEADING_NUMERAL_PATTERN = re.compile(rf"^\s*({NUMERAL})")
NUMERAL_NAME_PATTERN = re.compile(rf"^({NUMERAL})\s+(.+)$")

Matcher = Callable[[str], Optional[Ingredient]]


def _clean_name(name: str) -> str:
    """Trim whitespace and stray punctuation left over from a split."""
    return name.strip().lstrip(',;:)').rstrip(',;').strip()


def _clean_amount(amount: str) -> str:
    """Collapse inner whitespace: "1  1/2" -> "1 1/2", "2 - 3" -> "2-3"."""
    amount = re.sub(r"\s*-\s*", "-", amount.strip())
    return re.sub(r"\s+", " ", amount)


def clean_ingredient_line(line: str) -> str:
    """Strip list markers, labels and price annotations, then spell out fractions.

    Args:
        line: Raw ingredient line (e.g., "• ½ cup sugar ($0.37)")

    Returns:
        Cleaned line (e.g., "1/2 cup sugar"), possibly empty
    """
    if not line:
        return ""

    cleaned = BULLET_PATTERN.sub("", line.strip())
    cleaned = LIST_NUMBER_PATTERN.sub("", cleaned)
    cleaned = INGREDIENTS_LABEL_PATTERN.sub("", cleaned)
    cleaned = PRICE_PATTERN.sub("", cleaned)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    return normalize_fractions(cleaned)


def _match_fraction_unit(line: str) -> Optional[Ingredient]:
    # "1/2 lb Italian sausage"
    match = FRACTION_UNIT_PATTERN.match(line)
    if not match:
        return None
    amount, unit, name = match.groups()
    return Ingredient(name=_clean_name(name), amount=_clean_amount(amount), unit=unit)


def _match_amount_unit(line: str) -> Optional[Ingredient]:
    # "2 cloves garlic, minced", "8 oz pappardelle"
    match = AMOUNT_UNIT_PATTERN.match(line)
    if not match:
        return None
    amount, unit, name = match.groups()
    return Ingredient(name=_clean_name(name), amount=_clean_amount(amount), unit=unit)


def _match_to_taste(line: str) -> Optional[Ingredient]:
    # "Salt and pepper, to taste"
    match = TO_TASTE_PATTERN.match(line)
    if not match:
        return None
    return Ingredient(name=_clean_name(match.group(1)), amount="to taste", unit="")


def _match_count_size(line: str) -> Optional[Ingredient]:
    # "1 small onion", "3 eggs" - only when no unit word follows
    match = COUNT_SIZE_PATTERN.match(line)
    if not match:
        return None
    amount, size, name = match.groups()
    if UNIT_PATTERN.search(name):
        return None
    if size:
        name = f"{size} {name}"
    return Ingredient(name=_clean_name(name), amount=amount, unit="")


def _match_trailing_quantity(line: str) -> Optional[Ingredient]:
    # "Chicken breasts, 500 g"
    match = TRAILING_QUANTITY_PATTERN.match(line)
    if not match:
        return None
    name, amount, unit = match.groups()
    return Ingredient(name=_clean_name(name), amount=_clean_amount(amount), unit=unit)


def _match_unit_scan(line: str) -> Optional[Ingredient]:
    """Split around the first unit word found anywhere in the line."""
    match = UNIT_PATTERN.search(line)
    if not match:
        return None

    prefix = line[:match.start()]
    name = _clean_name(line[match.end():].lstrip('.'))

    numeral = LEADING_NUMERAL_PATTERN.match(prefix)
    amount = _clean_amount(numeral.group(1)) if numeral else "1"

    # "1 garlic clove": the name sits before the unit
    if not name:
        name = _clean_name(prefix[numeral.end():] if numeral else prefix)

    return Ingredient(name=name, amount=amount, unit=match.group(1))


def _match_numeral(line: str) -> Optional[Ingredient]:
    # "1.5 avocados", "2-3 potatoes"
    match = NUMERAL_NAME_PATTERN.match(line)
    if not match:
        return None
    amount, name = match.groups()
    return Ingredient(name=_clean_name(name), amount=_clean_amount(amount), unit="")


def _match_name_only(line: str) -> Optional[Ingredient]:
    return Ingredient(name=_clean_name(line), amount="", unit="")


# Order matters: first match wins
INGREDIENT_PATTERNS: tuple[tuple[str, Matcher], ...] = (
    ("fraction_unit", _match_fraction_unit),
    ("amount_unit", _match_amount_unit),
    ("to_taste", _match_to_taste),
    ("count_size", _match_count_size),
    ("trailing_quantity", _match_trailing_quantity),
    ("unit_scan", _match_unit_scan),
    ("numeral", _match_numeral),
    ("name_only", _match_name_only),
)


def match_ingredient(cleaned: str) -> tuple[str, Ingredient]:
    """Run the pattern cascade over an already-cleaned line.

    Returns:
        (pattern_name, ingredient) for the first pattern that matched
    """
    for pattern_name, matcher in INGREDIENT_PATTERNS:
        ingredient = matcher(cleaned)
        if ingredient is not None:
            return pattern_name, ingredient
    return "name_only", Ingredient(name=cleaned)


def parse_ingredient(line: str) -> Optional[Ingredient]:
    """
    Parse an ingredient line into amount, unit, and name.

    Never drops a non-empty line: when no structure is found the whole
    cleaned line becomes the name. The name may come out empty for
    malformed lines such as a lone unit word.

    Args:
        line: A raw ingredient line

    Returns:
        Ingredient, or None if nothing is left after cleaning
    """
    cleaned = clean_ingredient_line(line)
    if not cleaned:
        return None

    _, ingredient = match_ingredient(cleaned)
    ingredient.optional = "optional" in cleaned.lower()
    return ingredient
