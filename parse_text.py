#!/usr/bin/env python3
"""
Pasted Recipe Parser
Turns free-form recipe text (copied from a message, website or document)
into a structured recipe draft.

Usage:
    python parse_text.py recipe.txt              # Readable summary
    python parse_text.py recipe.txt --json       # JSON output
    pbpaste | python parse_text.py --review      # Read stdin, show warnings
    python parse_text.py recipes.txt --batch     # Split on --RECIPE BREAK--
"""

import argparse
import json
import sys
from pathlib import Path

from recipe_text.draft_validator import format_review, review_draft
from recipe_text.engine import parse_recipe_batch, parse_recipe_text
from recipe_text.models import RecipeDraft


def read_input(file_arg: str | None) -> str:
    """Read recipe text from a file path, or stdin when no path is given."""
    if file_arg is None or file_arg == '-':
        return sys.stdin.read()
    return Path(file_arg).read_text(encoding='utf-8-sig')


def format_draft_summary(draft: RecipeDraft) -> str:
    """Plain-text summary of a draft for terminal output."""
    lines = [draft.title]
    if draft.description:
        lines.append(draft.description)

    details = []
    if draft.servings:
        details.append(f"Serves {draft.servings}")
    if draft.prep_time_minutes is not None:
        details.append(f"Prep {draft.prep_time_minutes} min")
    if draft.cook_time_minutes is not None:
        details.append(f"Cook {draft.cook_time_minutes} min")
    if details:
        lines.append(" | ".join(details))
    if draft.tags:
        lines.append("Tags: " + ", ".join(sorted(draft.tags)))

    lines.append("")
    lines.append(f"Ingredients ({len(draft.ingredients)}):")
    for ing in draft.ingredients:
        qty = " ".join(part for part in (ing.amount, ing.unit) if part)
        entry = f"{qty} {ing.name}".strip() if qty else ing.name
        if ing.optional:
            entry += " [optional]"
        lines.append(f"  - {entry}")

    lines.append("")
    lines.append(f"Instructions ({len(draft.instructions)}):")
    for inst in draft.instructions:
        lines.append(f"  {inst.step}. {inst.text}")

    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Parse pasted recipe text into a structured draft")
    parser.add_argument("file", nargs="?", help="Text file to parse (default: stdin)")
    parser.add_argument("--batch", action="store_true",
                        help="Split the text on --RECIPE BREAK-- and parse each recipe")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a summary")
    parser.add_argument("--review", action="store_true", help="Show review warnings for each draft")
    args = parser.parse_args(argv)

    try:
        text = read_input(args.file)
    except OSError as e:
        print(f"Error: Could not read {args.file}: {e}", file=sys.stderr)
        return 1

    if args.batch:
        drafts = parse_recipe_batch(text)
    else:
        draft = parse_recipe_text(text)
        drafts = [draft] if draft is not None else []

    if not drafts:
        print("Error: No recipe text found.", file=sys.stderr)
        return 1

    if args.json:
        payload = []
        for draft in drafts:
            entry = draft.to_dict()
            if args.review:
                entry["warnings"] = review_draft(draft)
            payload.append(entry)
        output = payload if args.batch else payload[0]
        print(json.dumps(output, indent=2, ensure_ascii=False))
        return 0

    for index, draft in enumerate(drafts):
        if index:
            print("\n" + "-" * 40 + "\n")
        print(format_draft_summary(draft))
        if args.review:
            print()
            print(format_review(review_draft(draft)))

    return 0


if __name__ == "__main__":
    sys.exit(main())
