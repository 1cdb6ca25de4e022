"""Pasted recipe text -> RecipeDraft

Entry point for the extraction engine. Pure and synchronous: the same text
always yields the same draft, and nothing is kept between calls.
"""

import re
from typing import Optional

from recipe_text.fallback import apply_fallback
from recipe_text.metadata import extract_servings, extract_tags, extract_times
from recipe_text.models import DEFAULT_TITLE, RecipeDraft
from recipe_text.section_parser import walk_sections

RECIPE_BREAK_PATTERN = re.compile(r"--\s*RECIPE\s*BREAK\s*--", re.IGNORECASE)
BYTE_ORDER_MARK = "\ufeff"


def split_lines(text: str) -> list[str]:
    """Split on newlines, trim each line and drop the blank ones."""
    if not text:
        return []
    text = text.replace(BYTE_ORDER_MARK, "")
    return [line.strip() for line in text.split('\n') if line.strip()]


def parse_recipe_text(text: str) -> Optional[RecipeDraft]:
    """Extract a structured recipe draft from free-form text.

    Args:
        text: Pasted text, newline separated

    Returns:
        RecipeDraft, or None if the text has no non-whitespace content
    """
    lines = split_lines(text)
    if not lines:
        return None

    text = text.replace(BYTE_ORDER_MARK, "")

    walked = walk_sections(lines)

    prep, cook = extract_times(text)

    ingredients, instructions = apply_fallback(
        text.split('\n'),
        list(walked.ingredients),
        list(walked.instructions),
    )

    return RecipeDraft(
        title=walked.title or DEFAULT_TITLE,
        description=walked.description,
        ingredients=ingredients,
        instructions=instructions,
        servings=extract_servings(text),
        prep_time_minutes=prep,
        cook_time_minutes=cook,
        tags=extract_tags(text),
    )


def split_recipes(text: str) -> list[str]:
    """Split a multi-recipe paste on --RECIPE BREAK-- markers."""
    if not text:
        return []
    return [block for block in RECIPE_BREAK_PATTERN.split(text) if block.strip()]


def parse_recipe_batch(text: str) -> list[RecipeDraft]:
    """Parse several recipes pasted together, separated by --RECIPE BREAK--.

    Blocks that contain nothing parseable are skipped.
    """
    drafts = []
    for block in split_recipes(text):
        draft = parse_recipe_text(block)
        if draft is not None:
            drafts.append(draft)
    return drafts
