"""Instruction line normalizer - strips step markers and renumbers"""

import re
from typing import Optional

from recipe_text.models import Instruction

MIN_INSTRUCTION_LENGTH = 3

STEP_PREFIX_PATTERN = re.compile(r"^[\d\.\)\s•·▪◦\-\*–]+")
LABEL_PATTERNS = (
    re.compile(r"^instructions?\b\s*:?\s*", re.IGNORECASE),
    re.compile(r"^directions?\b\s*:?\s*", re.IGNORECASE),
    re.compile(r"^method\b\s*:?\s*", re.IGNORECASE),
    re.compile(r"^step\b\s*\d*\s*[:.)]?\s*", re.IGNORECASE),
)


def clean_instruction_line(line: str) -> str:
    """Remove leading numbering, bullets and section/step labels."""
    if not line:
        return ""

    cleaned = STEP_PREFIX_PATTERN.sub("", line.strip())
    for pattern in LABEL_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    return cleaned.strip()


def parse_instruction(line: str, existing_count: int) -> Optional[Instruction]:
    """Parse one instruction line into the next sequential step.

    Source numbering is discarded: the step is always existing_count + 1,
    so "1." followed by "5." comes out as steps 1 and 2.

    Args:
        line: Raw instruction line (e.g., "2) Add salt")
        existing_count: Number of instructions collected so far

    Returns:
        Instruction, or None if under 3 characters remain after cleaning
    """
    cleaned = clean_instruction_line(line)
    if len(cleaned) < MIN_INSTRUCTION_LENGTH:
        return None

    return Instruction(step=existing_count + 1, text=cleaned)
