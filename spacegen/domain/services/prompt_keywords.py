"""Prompt keyword extraction for the `prompt_keywords` event."""

import re
from dataclasses import dataclass
from functools import lru_cache

from spacegen.domain.entities.workspace import UnderstandingProfile

MAX_KEYWORDS = 8

STOP_WORDS = frozenset(
    {
        "and", "the", "for", "who", "want", "wants", "with", "that", "this", "have",
        "has", "from", "into", "are", "was", "but", "not", "you", "your", "our",
        "they", "them", "their", "she", "her", "his", "him", "its", "can", "will",
        "would", "should", "could", "need", "needs", "like", "some", "also", "just",
        "place", "let", "lets", "make", "help", "about", "all", "any", "get", "where",
        "what", "when", "how", "out", "more", "very", "i'm", "i've", "im",
    }
)

_WORD_RE = re.compile(r"[a-z][a-z'\-]*[a-z]")


@dataclass(frozen=True)
class PromptKeywords:
    """Keywords pulled from the raw prompt plus a one-line interpretation."""

    keywords: tuple[str, ...]
    interpretation: str

    def to_payload(self) -> dict:
        return {"keywords": list(self.keywords), "interpretation": self.interpretation}


@lru_cache(maxsize=128)
def extract_keywords(prompt: str) -> tuple[str, ...]:
    """Distinct content words (len > 2, no stop words) in order of first appearance."""
    seen: list[str] = []
    for word in _WORD_RE.findall((prompt or "").lower()):
        if len(word) <= 2 or word in STOP_WORDS or word in seen:
            continue
        seen.append(word)
        if len(seen) == MAX_KEYWORDS:
            break
    return tuple(seen)


def interpret(profile: UnderstandingProfile) -> str:
    """'<profession> focused on <primary goal>', degrading to whatever is known."""
    profession = profile.identity.profession or "creative professional"
    if profile.goals.primary:
        return f"{profession} focused on {profile.goals.primary}"
    if profile.identity.niche:
        return f"{profession} working in {profile.identity.niche}"
    return profession


def build_prompt_keywords(prompt: str, profile: UnderstandingProfile) -> PromptKeywords:
    return PromptKeywords(keywords=extract_keywords(prompt), interpretation=interpret(profile))
