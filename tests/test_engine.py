"""Tests for the recipe text engine"""

import pytest

from recipe_text.engine import parse_recipe_batch, parse_recipe_text, split_lines, split_recipes
from recipe_text.models import DEFAULT_TITLE, SOURCE_LABEL, Difficulty, RecipeDraft
from recipe_text.vocabulary import ALL_TAGS

TOMATO_SOUP = """Tomato Soup
Ingredients:
2 cups tomato
1 tsp salt
Instructions:
1. Simmer tomatoes
2. Add salt
"""

GARLIC_BREAD = """Garlic Bread
• 1/2 lb Italian sausage
• 8 oz pappardelle
Cook pasta until tender
Brown the sausage in a pan
"""

MESSY_PASTE = """Recipe: Weeknight Chili
A hearty vegetarian dinner
Serves 4 | Prep: 15 min | Cook: 30 min

What you'll need
- 1 can black beans, drained
- 2 cloves garlic
- ½ cup corn (optional)
- Salt to taste

Directions:
1) Heat the oil in a large pot
3) Add garlic and cook for 1 minute
7) Stir in beans and corn, simmer 20 minutes
Enjoy!
"""


class TestScenarios:
    """End-to-end parsing scenarios"""

    def test_explicit_headers(self):
        """Header-delimited text parses into both lists"""
        draft = parse_recipe_text(TOMATO_SOUP)

        assert draft.title == "Tomato Soup"
        assert [(i.amount, i.unit, i.name) for i in draft.ingredients] == [
            ("2", "cups", "tomato"),
            ("1", "tsp", "salt"),
        ]
        assert [i.step for i in draft.instructions] == [1, 2]
        assert draft.servings is None

    def test_bullets_without_headers(self):
        """Bulleted ingredients and verb-led instructions are found without headers"""
        draft = parse_recipe_text(GARLIC_BREAD)

        assert draft.title == "Garlic Bread"
        assert [(i.amount, i.unit, i.name) for i in draft.ingredients] == [
            ("1/2", "lb", "Italian sausage"),
            ("8", "oz", "pappardelle"),
        ]
        assert [(i.step, i.text) for i in draft.instructions] == [
            (1, "Cook pasta until tender"),
            (2, "Brown the sausage in a pan"),
        ]

    def test_metadata_only(self):
        """Metadata is read while both lists stay empty"""
        draft = parse_recipe_text("Serves 6\nPrep time: 10 minutes\nCook time: 20 minutes")

        assert draft.servings == 6
        assert draft.prep_time_minutes == 10
        assert draft.cook_time_minutes == 20
        assert draft.ingredients == []
        assert draft.instructions == []

    def test_total_time_split(self):
        """Total time alone is split 30/70"""
        draft = parse_recipe_text("Total time: 40 minutes")

        assert draft.prep_time_minutes == 12
        assert draft.cook_time_minutes == 28

    @pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n", " \n ", "\ufeff", "\ufeff \n"])
    def test_empty_input(self, text):
        """Empty or whitespace-only text returns None"""
        assert parse_recipe_text(text) is None

    def test_messy_paste(self):
        """Realistic paste with labels, bare heading, metadata and gaps in numbering"""
        draft = parse_recipe_text(MESSY_PASTE)

        assert draft.title == "Weeknight Chili"
        assert draft.description == "A hearty vegetarian dinner"
        assert draft.servings == 4
        assert draft.prep_time_minutes == 15
        assert draft.cook_time_minutes == 30
        assert draft.tags == {"vegetarian", "dinner"}

        assert [(i.amount, i.unit, i.name) for i in draft.ingredients] == [
            ("1", "can", "black beans, drained"),
            ("2", "cloves", "garlic"),
            ("1/2", "cup", "corn (optional)"),
            ("to taste", "", "Salt"),
        ]
        assert [i.optional for i in draft.ingredients] == [False, False, True, False]

        assert [i.step for i in draft.instructions] == [1, 2, 3, 4]
        assert draft.instructions[0].text == "Heat the oil in a large pot"
        assert draft.instructions[-1].text == "Enjoy!"


class TestDraftDefaults:
    """Tests for defaults on the assembled draft"""

    def test_defaults(self):
        """Difficulty and source are constants"""
        draft = parse_recipe_text(TOMATO_SOUP)
        assert draft.difficulty == Difficulty.MEDIUM
        assert draft.source == SOURCE_LABEL

    def test_placeholder_title(self):
        """A header on the first line leaves the placeholder title"""
        draft = parse_recipe_text("Ingredients:\n2 cups flour")
        assert draft.title == DEFAULT_TITLE

    def test_lists_never_none(self):
        """Lists are always present, even when empty"""
        draft = parse_recipe_text("Just a title")
        assert draft.ingredients == []
        assert draft.instructions == []

    def test_to_dict(self):
        """Drafts serialize to plain JSON-ready dicts"""
        data = parse_recipe_text(MESSY_PASTE).to_dict()
        assert data["title"] == "Weeknight Chili"
        assert data["difficulty"] == "medium"
        assert data["tags"] == ["dinner", "vegetarian"]
        assert data["instructions"][0] == {"step": 1, "text": "Heat the oil in a large pot"}
        assert data["ingredients"][2]["optional"] is True


class TestFallback:
    """Tests for the salvage pass"""

    def test_fallback_fills_missing_ingredients(self):
        """Ingredients swallowed by an instruction block are recovered"""
        draft = parse_recipe_text("Instructions:\n2 cups water\nBoil the water")

        assert [(i.amount, i.unit, i.name) for i in draft.ingredients] == [("2", "cups", "water")]
        assert len(draft.instructions) == 2

    def test_fallback_fills_missing_instructions(self):
        """A long unlabelled line under an ingredient header becomes a step"""
        text = "Pesto\nIngredients:\n2 cups basil\n1/2 cup olive oil\nBlend everything until smooth and creamy"
        draft = parse_recipe_text(text)

        assert len(draft.ingredients) == 3
        assert [(i.step, i.text) for i in draft.instructions] == [
            (1, "Blend everything until smooth and creamy"),
        ]


class TestProperties:
    """Properties that hold for any input"""

    SAMPLES = [TOMATO_SOUP, GARLIC_BREAD, MESSY_PASTE, "x", "Serves 2", "1.\n2.\n3. Stir it all"]

    @pytest.mark.parametrize("text", SAMPLES)
    def test_deterministic(self, text):
        """Same text, same draft"""
        assert parse_recipe_text(text) == parse_recipe_text(text)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_step_contiguity(self, text):
        """Steps always run 1..n"""
        draft = parse_recipe_text(text)
        assert [i.step for i in draft.instructions] == list(range(1, len(draft.instructions) + 1))

    @pytest.mark.parametrize("text", SAMPLES)
    def test_tag_closure(self, text):
        """Tags always come from the fixed vocabulary"""
        assert parse_recipe_text(text).tags <= ALL_TAGS

    def test_non_empty_input_never_none(self):
        """Any non-blank text produces a draft"""
        for text in ("x", "???", "  1  ", "Ingredients:"):
            assert isinstance(parse_recipe_text(text), RecipeDraft)

    def test_renumbered_steps(self):
        """Source numbering with gaps comes out contiguous"""
        draft = parse_recipe_text("Stew\nDirections:\n1. Brown beef\n5. Add stock\n9. Simmer for 2 hours")
        assert [i.step for i in draft.instructions] == [1, 2, 3]


class TestBatch:
    """Tests for multi-recipe pastes"""

    def test_split_recipes(self):
        """Blocks are split on the break marker, blank blocks dropped"""
        text = "A\n--RECIPE BREAK--\nB\n-- recipe break --\n  \n"
        assert [block.strip() for block in split_recipes(text)] == ["A", "B"]

    def test_parse_batch(self):
        """Each block becomes its own draft"""
        text = TOMATO_SOUP + "--RECIPE BREAK--\n" + GARLIC_BREAD + "--RECIPE BREAK--\n"
        drafts = parse_recipe_batch(text)
        assert [d.title for d in drafts] == ["Tomato Soup", "Garlic Bread"]

    def test_empty_batch(self):
        """Nothing to parse -> empty list"""
        assert parse_recipe_batch("") == []
        assert parse_recipe_batch("--RECIPE BREAK--") == []


def test_split_lines():
    """Lines are trimmed and blank lines dropped"""
    assert split_lines("  a \n\n b\r\n") == ["a", "b"]


def test_byte_order_mark_stripped():
    """A leading byte-order mark does not end up in the title"""
    assert split_lines("\ufeffa\nb") == ["a", "b"]
    assert parse_recipe_text("\ufeff" + TOMATO_SOUP).title == "Tomato Soup"
