"""Heuristic line classifier - ingredient, instruction or prose"""

import re
from enum import Enum

from recipe_text.metadata import is_metadata_line
from recipe_text.vocabulary import (
    COOKING_VERBS,
    COOKING_VERB_PATTERN,
    INGREDIENT_NOUN_PATTERN,
    UNIT_PATTERN,
    normalize_fractions,
)

# Lines longer than this with no ingredient signal read as instructions
LONG_LINE_THRESHOLD = 30

# Serving/closing phrases that never make a line an ingredient
NON_INGREDIENT_PHRASES = ("serve", "enjoy")

LEADING_MARKER_PATTERN = re.compile(r"^[•·▪◦\-\*–\d\.\)]")
FRACTION_PATTERN = re.compile(r"\d+/\d+")
LEADING_NUMBER_PATTERN = re.compile(r"^\d+(?:/\d+)?\s")
STEP_MARKER_PATTERN = re.compile(r"^\d+\s*[\.\)]")
TO_TASTE_PATTERN = re.compile(r"to taste", re.IGNORECASE)


class LineKind(str, Enum):
    """What a single line of pasted text reads as."""

    INGREDIENT = "ingredient"
    INSTRUCTION = "instruction"
    PROSE = "prose"


def has_ingredient_structure(line: str) -> bool:
    """Check the structural ingredient cues: leading marker, unit word, or amount.

    Vocabulary hits (ingredient nouns) are not structural and are ignored here.
    """
    if not line:
        return False

    if LEADING_MARKER_PATTERN.match(line):
        return True
    if UNIT_PATTERN.search(line):
        return True

    normalized = normalize_fractions(line)
    return bool(FRACTION_PATTERN.search(normalized) or LEADING_NUMBER_PATTERN.match(normalized))


def starts_with_cooking_verb(line: str) -> bool:
    """Check whether the first word is a cooking verb ("Cook pasta until tender")."""
    words = line.split(None, 1)
    if not words:
        return False
    first_word = words[0].lower().strip(',.:;!')
    return first_word in COOKING_VERBS


def _looks_like_ingredient(line: str) -> bool:
    line_lower = line.lower()
    if any(phrase in line_lower for phrase in NON_INGREDIENT_PHRASES):
        return False

    if has_ingredient_structure(line):
        return True
    if INGREDIENT_NOUN_PATTERN.search(line):
        return True
    return bool(TO_TASTE_PATTERN.search(line))


def _looks_like_instruction(line: str) -> bool:
    if STEP_MARKER_PATTERN.match(line):
        return True
    if COOKING_VERB_PATTERN.search(line):
        return True
    return len(line) > LONG_LINE_THRESHOLD


def classify_line(line: str) -> LineKind:
    """Classify one trimmed line of recipe text.

    Structural cues (bullets, units, fractions, leading amounts) win over
    vocabulary hits, and vocabulary hits win over line length.

    Args:
        line: A single line, already trimmed

    Returns:
        LineKind.INGREDIENT, LineKind.INSTRUCTION or LineKind.PROSE
    """
    if not line or not line.strip():
        return LineKind.PROSE

    line = line.strip()

    # Servings/timing lines belong to the metadata scan
    if is_metadata_line(line):
        return LineKind.PROSE

    if _looks_like_ingredient(line):
        return LineKind.INGREDIENT
    if _looks_like_instruction(line):
        return LineKind.INSTRUCTION
    return LineKind.PROSE
