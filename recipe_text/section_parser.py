"""Line-by-line section walk over pasted recipe text.

Tracks which block the walk is in (title, undetermined preamble, ingredients,
instructions) and routes each line to the ingredient or instruction parser.
"""

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from recipe_text.ingredient_parser import parse_ingredient
from recipe_text.instruction_parser import parse_instruction
from recipe_text.line_classifier import (
    LineKind,
    STEP_MARKER_PATTERN,
    classify_line,
    has_ingredient_structure,
    starts_with_cooking_verb,
)
from recipe_text.metadata import is_metadata_line
from recipe_text.models import Ingredient, Instruction

MIN_DESCRIPTION_LENGTH = 10

INGREDIENT_HEADING_PATTERN = re.compile(
    r"^(?:ingredients?|shopping\s+list|what\s+you.?ll\s+need)\s*:?$", re.IGNORECASE
)
INSTRUCTION_HEADING_PATTERN = re.compile(
    r"^(?:instructions?|directions?|method|steps?|preparation|how\s+to\s+make)\s*:?$",
    re.IGNORECASE,
)
HEADER_WORDS_PATTERN = re.compile(r"ingredient|instruction|direction|method", re.IGNORECASE)


class Section(Enum):
    """Where the walk currently is in the document."""

    SEEKING_TITLE = "seeking_title"
    UNDETERMINED = "undetermined"
    IN_INGREDIENTS = "in_ingredients"
    IN_INSTRUCTIONS = "in_instructions"


@dataclass(frozen=True)
class SectionResult:
    """State carried through the walk; the final value is the walk's output."""
    section: Section = Section.SEEKING_TITLE
    header_seen: bool = False
    title: Optional[str] = None
    description: Optional[str] = None
    ingredients: tuple[Ingredient, ...] = field(default_factory=tuple)
    instructions: tuple[Instruction, ...] = field(default_factory=tuple)


def clean_title(text: str) -> str:
    """Strip a leading "Recipe:" label and a trailing "recipe" word."""
    title = re.sub(r"^recipe\s*:?\s*", "", text.strip(), flags=re.IGNORECASE)
    title = re.sub(r"\s*recipe$", "", title, flags=re.IGNORECASE)
    return title.strip()


def detect_header(line: str) -> Optional[Section]:
    """Return the section a header line opens, or None for ordinary lines.

    "Ingredients:" / "Ingredients" open the ingredient block;
    "Instructions:", "Directions:", "Method:", "Steps" open the instruction block.
    """
    line_lower = line.lower()

    if ("ingredient" in line_lower and ":" in line) or INGREDIENT_HEADING_PATTERN.match(line):
        return Section.IN_INGREDIENTS

    has_instruction_word = any(word in line_lower for word in ("instruction", "direction", "method"))
    if (has_instruction_word and ":" in line) or INSTRUCTION_HEADING_PATTERN.match(line):
        return Section.IN_INSTRUCTIONS

    return None


def looks_like_header(line: str) -> bool:
    """Loose check used for the first line: mentions a section word at all."""
    return bool(HEADER_WORDS_PATTERN.search(line))


def _add_ingredient(state: SectionResult, line: str) -> SectionResult:
    ingredient = parse_ingredient(line)
    if ingredient is None:
        return state
    return replace(state, ingredients=state.ingredients + (ingredient,))


def _add_instruction(state: SectionResult, line: str) -> SectionResult:
    instruction = parse_instruction(line, len(state.instructions))
    if instruction is None:
        return state
    return replace(state, instructions=state.instructions + (instruction,))


def _ends_implicit_ingredients(line: str) -> bool:
    """Whether a line closes an ingredient block that had no header.

    Only a cooking-verb line ("Cook pasta", "1. Heat the oil") does. Long
    ingredient lines with no unit stay in the block.
    """
    body = STEP_MARKER_PATTERN.sub("", line, count=1).strip()
    return starts_with_cooking_verb(body) and not has_ingredient_structure(body)


def _step_undetermined(state: SectionResult, line: str) -> SectionResult:
    kind = classify_line(line)

    if kind is LineKind.INGREDIENT:
        state = replace(state, section=Section.IN_INGREDIENTS)
        return _add_ingredient(state, line)

    if kind is LineKind.INSTRUCTION:
        state = replace(state, section=Section.IN_INSTRUCTIONS)
        return _add_instruction(state, line)

    if (
        state.title
        and state.description is None
        and len(line) > MIN_DESCRIPTION_LENGTH
        and not is_metadata_line(line)
    ):
        return replace(state, description=line)

    return state


def step(state: SectionResult, line: str) -> SectionResult:
    """Advance the walk by one non-empty, trimmed line."""
    if state.section is Section.SEEKING_TITLE:
        state = replace(state, section=Section.UNDETERMINED)
        if not looks_like_header(line):
            title = clean_title(line)
            if title:
                return replace(state, title=title)

    header = detect_header(line)
    if header is not None:
        return replace(state, section=header, header_seen=True)

    if state.section is Section.IN_INGREDIENTS:
        if is_metadata_line(line):
            return state
        if not state.header_seen and _ends_implicit_ingredients(line):
            state = replace(state, section=Section.IN_INSTRUCTIONS)
            return _add_instruction(state, line)
        return _add_ingredient(state, line)

    if state.section is Section.IN_INSTRUCTIONS:
        if is_metadata_line(line):
            return state
        return _add_instruction(state, line)

    return _step_undetermined(state, line)


def walk_sections(lines: list[str]) -> SectionResult:
    """Fold the section state machine over the document's lines.

    Args:
        lines: Trimmed, non-empty lines in document order

    Returns:
        Final SectionResult with title, description, ingredients, instructions
    """
    state = SectionResult()
    for line in lines:
        state = step(state, line)
    return state
