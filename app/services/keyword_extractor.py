import re
from typing import Set

from app.models.schemas import UserJourney

STOP_WORDS = frozenset({"the", "and", "for", "with", "from", "can", "user", "should", "will", "that", "this"})
MIN_KEYWORD_LENGTH = 3

_NON_WORD = re.compile(r"[^a-z0-9\s]")


def journey_text(journey: UserJourney) -> str:
    return f"{journey.name} {journey.description} {' '.join(journey.steps)}"


def extract_keywords(text: str) -> Set[str]:
    """Significant lower-case words of ``text``: alphanumeric, 3+ chars, not a stop word."""
    cleaned = _NON_WORD.sub(" ", text.lower())
    return {
        word
        for word in cleaned.split()
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOP_WORDS
    }
