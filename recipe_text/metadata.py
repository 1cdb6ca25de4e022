"""Whole-text metadata scans: servings, prep/cook times and tags.

These run over the full pasted text, independent of the line-by-line section walk.
"""

import math
import re
from fractions import Fraction

from recipe_text.vocabulary import TAG_VOCABULARIES

# Share of a total time assigned to prep when only a total is given
PREP_SHARE = Fraction(3, 10)
COOK_SHARE = Fraction(7, 10)

_DURATION = r"(\d+)\s*(mins?|minutes?|hrs?|hours?)\b(?:\s*(?:and\s*)?(\d+)\s*(?:mins?|minutes?)\b)?"
_DURATION_TEXT = r"\d+\s*(?:mins?|minutes?|hrs?|hours?)(?:\s*(?:and\s*)?\d+\s*(?:mins?|minutes?))?"

PREP_PATTERN = re.compile(r"\bprep(?:aration)?(?:\s+time)?\s*:?\s*" + _DURATION, re.IGNORECASE)
COOK_PATTERN = re.compile(r"\bcook(?:ing)?(?:\s+time)?\s*:?\s*" + _DURATION, re.IGNORECASE)
TOTAL_PATTERN = re.compile(r"\btotal(?:\s+time)?\s*:?\s*" + _DURATION, re.IGNORECASE)

# Checked in order, first hit wins
SERVINGS_PATTERNS = (
    re.compile(r"\bserves?\s*:?\s*(\d+)", re.IGNORECASE),
    re.compile(r"\byields?\s*:?\s*(\d+)", re.IGNORECASE),
    re.compile(r"(\d+)\s*portions?\b", re.IGNORECASE),
    re.compile(r"\bservings?\s*:?\s*(\d+)", re.IGNORECASE),
    re.compile(r"(\d+)\s*servings?\b", re.IGNORECASE),
)

_METADATA_SEGMENT = re.compile(
    r"(?:prep(?:aration)?|cook(?:ing)?|total)(?:\s+time)?\s*:?\s*" + _DURATION_TEXT
    + r"|(?:serves|yields?|servings?|makes)\s*:?\s*\d+(?:\s*-\s*\d+)?(?:\s+[a-z]+)?"
    + r"|\d+(?:\s*-\s*\d+)?\s*(?:servings?|portions?)",
    re.IGNORECASE,
)
_SEGMENT_SEPARATORS = re.compile(r"[|;,•·]")


def is_metadata_line(line: str) -> bool:
    """Check if a line only carries servings or timing labels.

    Examples that match: "Serves 4", "Prep time: 10 minutes",
    "Prep: 15 min | Cook: 30 min", "6 portions".
    """
    if not line or not line.strip():
        return False

    segments = [s.strip().rstrip('.') for s in _SEGMENT_SEPARATORS.split(line)]
    segments = [s for s in segments if s]
    if not segments:
        return False

    return all(_METADATA_SEGMENT.fullmatch(s) for s in segments)


def extract_servings(text: str) -> int | None:
    """Find the serving count in free text.

    Args:
        text: Full recipe text

    Returns:
        Positive serving count, or None if no pattern matched
    """
    if not text:
        return None

    for pattern in SERVINGS_PATTERNS:
        match = pattern.search(text)
        if match:
            servings = int(match.group(1))
            return servings if servings > 0 else None

    return None


def _duration_minutes(match: re.Match) -> int:
    """Convert a duration match (amount, unit, optional extra minutes) to minutes."""
    amount, unit, extra_minutes = match.group(1), match.group(2), match.group(3)
    minutes = int(amount)
    if unit.lower().startswith('h'):
        minutes *= 60
    if extra_minutes:
        minutes += int(extra_minutes)
    return minutes


def _round_half_up(value: Fraction) -> int:
    return math.floor(value + Fraction(1, 2))


def extract_times(text: str) -> tuple[int | None, int | None]:
    """Find prep and cook times (in minutes) in free text.

    Prep and cook labels are matched independently. When neither is present
    but a total time is, the total is split 30/70 between prep and cook.

    Args:
        text: Full recipe text

    Returns:
        (prep_minutes, cook_minutes), either may be None
    """
    if not text:
        return None, None

    prep_match = PREP_PATTERN.search(text)
    cook_match = COOK_PATTERN.search(text)

    prep = _duration_minutes(prep_match) if prep_match else None
    cook = _duration_minutes(cook_match) if cook_match else None

    if prep_match is None and cook_match is None:
        total_match = TOTAL_PATTERN.search(text)
        if total_match:
            total = _duration_minutes(total_match)
            prep = _round_half_up(total * PREP_SHARE)
            cook = _round_half_up(total * COOK_SHARE)

    return prep, cook


def extract_tags(text: str) -> set[str]:
    """Collect every vocabulary tag mentioned anywhere in the text."""
    if not text:
        return set()

    text_lower = text.lower()
    tags = set()
    for vocabulary in TAG_VOCABULARIES.values():
        for tag in vocabulary:
            if tag in text_lower:
                tags.add(tag)
    return tags
