"""Section-agnostic salvage pass for text with no discoverable structure."""

from recipe_text.ingredient_parser import parse_ingredient
from recipe_text.instruction_parser import parse_instruction
from recipe_text.line_classifier import LineKind, classify_line
from recipe_text.models import Ingredient, Instruction


def extract_fallback_ingredients(lines: list[str]) -> list[Ingredient]:
    """Parse every line that classifies as an ingredient, ignoring sections."""
    ingredients = []
    for line in lines:
        trimmed = line.strip()
        if trimmed and classify_line(trimmed) is LineKind.INGREDIENT:
            ingredient = parse_ingredient(trimmed)
            if ingredient is not None:
                ingredients.append(ingredient)
    return ingredients


def extract_fallback_instructions(lines: list[str]) -> list[Instruction]:
    """Parse every line that classifies as an instruction, numbering from 1."""
    instructions = []
    for line in lines:
        trimmed = line.strip()
        if trimmed and classify_line(trimmed) is LineKind.INSTRUCTION:
            instruction = parse_instruction(trimmed, len(instructions))
            if instruction is not None:
                instructions.append(instruction)
    return instructions


def apply_fallback(
    lines: list[str],
    ingredients: list[Ingredient],
    instructions: list[Instruction],
) -> tuple[list[Ingredient], list[Instruction]]:
    """Fill whichever list came out of the section walk empty.

    Each list is checked on its own; a non-empty list is returned untouched.

    Args:
        lines: Every line of the original text
        ingredients: Ingredients found by the section walk
        instructions: Instructions found by the section walk

    Returns:
        (ingredients, instructions) after the salvage pass
    """
    if not ingredients:
        ingredients = extract_fallback_ingredients(lines)
    if not instructions:
        instructions = extract_fallback_instructions(lines)
    return ingredients, instructions
