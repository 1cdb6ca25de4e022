"""Review checks for parsed drafts before the user saves them.

The parser never rejects a line, so malformed rows end up in the draft.
These checks point them out for manual correction. Nothing here mutates
the draft.
"""

from recipe_text.models import DEFAULT_TITLE, Ingredient, RecipeDraft

MIN_TITLE_LENGTH = 3
MAX_TITLE_LENGTH = 100
MIN_INSTRUCTION_LENGTH = 10
MIN_INGREDIENT_COUNT = 2
MAX_INGREDIENT_COUNT = 50
MAX_INSTRUCTION_COUNT = 30


def is_incomplete_ingredient(ing: Ingredient) -> bool:
    """Detect ingredient rows that need a look.

    Detects:
    - Empty name (e.g., a line that was only a unit word)
    - No amount detected ("to taste" counts as an amount)

    Args:
        ing: Parsed ingredient

    Returns:
        True if the row should be reviewed
    """
    if not ing.name.strip():
        return True
    return not ing.amount.strip()


def review_draft(draft: RecipeDraft) -> list[str]:
    """Collect warnings about a parsed draft.

    Args:
        draft: Draft returned by parse_recipe_text

    Returns:
        List of warning messages, empty when nothing looks off
    """
    warnings = []

    if draft.title == DEFAULT_TITLE:
        warnings.append("No title found")
    elif len(draft.title) < MIN_TITLE_LENGTH:
        warnings.append(f'Title is very short: "{draft.title}"')
    elif len(draft.title) > MAX_TITLE_LENGTH:
        warnings.append(f"Title is very long ({len(draft.title)} chars)")

    if not draft.ingredients:
        warnings.append("No ingredients found")
    if not draft.instructions:
        warnings.append("No instructions found")

    for index, ing in enumerate(draft.ingredients, 1):
        if not is_incomplete_ingredient(ing):
            continue
        if not ing.name.strip():
            warnings.append(f"Ingredient {index} has no name")
        elif not ing.amount.strip():
            warnings.append(f'Ingredient "{ing.name}" has no amount specified')

    for inst in draft.instructions:
        if len(inst.text) < MIN_INSTRUCTION_LENGTH:
            warnings.append(f'Very short instruction: "{inst.text}"')

    ingredient_count = len(draft.ingredients)
    if 0 < ingredient_count < MIN_INGREDIENT_COUNT:
        warnings.append(f"Very few ingredients ({ingredient_count})")
    if ingredient_count > MAX_INGREDIENT_COUNT:
        warnings.append(f"Very high ingredient count ({ingredient_count})")
    if len(draft.instructions) > MAX_INSTRUCTION_COUNT:
        warnings.append(f"Very high instruction count ({len(draft.instructions)})")

    return warnings


def needs_review(draft: RecipeDraft) -> bool:
    """True if review_draft has anything to say about the draft."""
    return bool(review_draft(draft))


def format_review(warnings: list[str]) -> str:
    """Render warnings for terminal output."""
    if not warnings:
        return "No issues found"
    lines = [f"Review recommended ({len(warnings)} warning(s)):"]
    lines.extend(f"  - {warning}" for warning in warnings)
    return "\n".join(lines)
