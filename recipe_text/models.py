"""Recipe draft data types produced by the text parser."""

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_TITLE = "Pasted Recipe"
SOURCE_LABEL = "Pasted Recipe"


class Difficulty(str, Enum):
    """Recipe difficulty. Parsed drafts always start at MEDIUM."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass
class Ingredient:
    """One ingredient row: amount, unit and name as written."""
    name: str
    amount: str = ""
    unit: str = ""
    optional: bool = False

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "optional": self.optional,
        }


@dataclass
class Instruction:
    """One numbered step."""
    step: int
    text: str

    def to_dict(self) -> dict:
        return {"step": self.step, "text": self.text}


@dataclass
class RecipeDraft:
    """Structured, user-editable recipe extracted from pasted text."""
    title: str = DEFAULT_TITLE
    description: str | None = None
    ingredients: list[Ingredient] = field(default_factory=list)
    instructions: list[Instruction] = field(default_factory=list)
    servings: int | None = None
    prep_time_minutes: int | None = None
    cook_time_minutes: int | None = None
    difficulty: Difficulty = Difficulty.MEDIUM
    tags: set[str] = field(default_factory=set)
    source: str = SOURCE_LABEL

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": [inst.to_dict() for inst in self.instructions],
            "servings": self.servings,
            "prep_time_minutes": self.prep_time_minutes,
            "cook_time_minutes": self.cook_time_minutes,
            "difficulty": self.difficulty.value,
            "tags": sorted(self.tags),
            "source": self.source,
        }
