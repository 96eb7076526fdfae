"""
Quality gate for candidate-facing follow-up questions.

Filters obviously generic or robotic model output. A rejected question is
replaced by the deterministic fallback, so false positives are cheap.
"""

import re

MIN_QUESTION_LENGTH = 12

# HR-cliche vocabulary
CLICHE_PATTERN = re.compile(
    r"(alignment|passion|culture fit|weaknesses|strengths|why should we hire|tell me about yourself)",
    re.IGNORECASE,
)

# Robotic lead-ins
LEAD_IN_PATTERN = re.compile(
    r"^(you did|i see|based on|it seems|from your resume)",
    re.IGNORECASE,
)


def is_too_generic(question: str) -> bool:
    """
    Return True when a generated question should be discarded.

    Rejects questions that are too short, do not end with "?", use
    HR-cliche phrasing, or open with a robotic lead-in.
    """
    text = (question or "").strip()

    if len(text) < MIN_QUESTION_LENGTH:
        return True
    if not text.endswith("?"):
        return True
    if CLICHE_PATTERN.search(text):
        return True
    if LEAD_IN_PATTERN.match(text):
        return True

    return False
