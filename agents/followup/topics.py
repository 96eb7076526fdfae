"""
Covered-topic extraction.

Pulls tech/company/project-looking tokens out of the conversation so the
prompt can tell the model what has already been discussed. Heuristic only:
the tokens are advisory and nothing is excluded programmatically.
"""

import re
from typing import Iterable, List, Mapping, Optional

MAX_COVERED_TOPICS = 120

TOKEN_PATTERN = re.compile(r"[a-z0-9][a-z0-9+.\-_]{2,}")

STOPWORDS = frozenset({"the", "and", "for", "with", "you", "your", "this", "that", "from"})


def build_covered_topics(
    history: Optional[Iterable[Mapping[str, str]]],
    limit: int = MAX_COVERED_TOPICS,
) -> List[str]:
    """
    Derive already-discussed tokens from question/answer history.

    Args:
        history: Sequence of {"question", "answer"} pairs
        limit: Maximum number of tokens to return

    Returns:
        Unique lowercase tokens in discovery order, at most ``limit``
    """
    text = " ".join(
        f"{qa.get('question') or ''} {qa.get('answer') or ''}".lower()
        for qa in (history or [])
    )

    tokens = {}
    for match in TOKEN_PATTERN.finditer(text):
        word = match.group(0)
        if word in STOPWORDS:
            continue
        tokens.setdefault(word, None)

    return list(tokens)[:limit]
