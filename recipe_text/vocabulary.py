"""Closed vocabularies shared by the line classifier, ingredient parser and metadata scans.

Everything here is read-only module data. Patterns are compiled once at import.
"""

import re

# Unicode vulgar fractions -> textual form
FRACTION_GLYPHS = {
    "½": "1/2",
    "¼": "1/4",
    "¾": "3/4",
    "⅓": "1/3",
    "⅔": "2/3",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
}

_GLYPH_CLASS = "[" + "".join(FRACTION_GLYPHS) + "]"
_GLYPH_PATTERN = re.compile(r"(\d?)(" + _GLYPH_CLASS + ")")

# Measurement units recognized as whole words
VOLUME_UNITS = (
    "cup", "cups",
    "tbsp", "tablespoon", "tablespoons",
    "tsp", "teaspoon", "teaspoons",
    "fl oz",
)
MASS_UNITS = (
    "oz", "ounce", "ounces",
    "lb", "lbs", "pound", "pounds",
    "g", "gram", "grams",
    "kg",
)
COUNT_UNITS = (
    "clove", "cloves",
    "slice", "slices",
    "piece", "pieces",
    "can", "cans",
    "jar", "jars",
    "bottle", "bottles",
    "package", "packages",
    "bunch", "bunches",
)
UNITS = VOLUME_UNITS + MASS_UNITS + COUNT_UNITS


def _word_alternation(words) -> str:
    # Longest first so "fl oz" wins over "oz" and "cups" over "cup"
    ordered = sorted(words, key=len, reverse=True)
    return "|".join(re.escape(w).replace(r"\ ", r"\s+") for w in ordered)


UNIT_ALTERNATION = _word_alternation(UNITS)
UNIT_PATTERN = re.compile(r"\b(" + UNIT_ALTERNATION + r")\b", re.IGNORECASE)

SIZE_ADJECTIVES = ("small", "medium", "large")

COOKING_VERBS = (
    "cook", "bake", "fry", "sauté", "saute", "boil", "simmer", "mix", "stir",
    "add", "combine", "heat", "preheat", "season", "serve", "garnish",
    "slice", "dice", "chop", "prepare",
)
COOKING_VERB_PATTERN = re.compile(r"\b(" + _word_alternation(COOKING_VERBS) + r")\b", re.IGNORECASE)

INGREDIENT_NOUNS = (
    "salt", "pepper", "oil", "butter", "flour", "sugar", "milk", "cheese",
    "onion", "garlic", "tomato", "wine", "basil", "pasta", "sausage",
    "bell pepper", "red pepper", "carrot", "potato", "celery", "lemon", "lime",
    "parsley", "cilantro", "mushroom", "spinach", "zucchini", "ginger",
    "scallion", "shallot", "cucumber", "avocado",
)
# Plural forms count too: tomato/tomatoes, onion/onions
INGREDIENT_NOUN_PATTERN = re.compile(
    r"\b(?:" + _word_alternation(INGREDIENT_NOUNS) + r")(?:es|s)?\b", re.IGNORECASE
)

# Tag vocabularies, keyed by category
TAG_VOCABULARIES = {
    "cuisine": (
        "italian", "mexican", "chinese", "indian", "thai", "french",
        "american", "mediterranean", "asian",
    ),
    "meal_type": ("breakfast", "lunch", "dinner", "dessert", "snack", "appetizer"),
    "cooking_method": ("baked", "fried", "grilled", "roasted", "steamed"),
    "dietary": ("vegetarian", "vegan", "gluten-free", "dairy-free", "keto", "low-carb"),
}

ALL_TAGS = frozenset(tag for tags in TAG_VOCABULARIES.values() for tag in tags)


def normalize_fractions(text: str) -> str:
    """Replace unicode fraction glyphs with their numerator/denominator text.

    A glyph glued to a whole number ("1½") becomes a mixed number ("1 1/2").
    Characters that are not mapped glyphs pass through unchanged.

    Args:
        text: Any string

    Returns:
        The string with every mapped glyph spelled out
    """
    if not text:
        return text

    def _replace(match):
        whole, glyph = match.groups()
        fraction = FRACTION_GLYPHS[glyph]
        return f"{whole} {fraction}" if whole else fraction

    return _GLYPH_PATTERN.sub(_replace, text)


def is_unit(word: str) -> bool:
    """Check whether a word is in the unit vocabulary (case-insensitive)."""
    if not word:
        return False
    return UNIT_PATTERN.fullmatch(word.strip()) is not None
