"""Text normalisation into index terms.

Lowercases, strips punctuation, drops one-character tokens and common
English function words. Used for both chunk text and queries, so the
two sides of a similarity comparison always share one vocabulary.
"""

from __future__ import annotations

import re

STOP_WORDS: frozenset[str] = frozenset({
    "a", "an", "the", "is", "it", "in", "on", "at", "to", "of", "for",
    "and", "or", "not", "with", "this", "that", "from", "by", "as", "be",
    "was", "are", "were", "been", "has", "have", "had", "do", "does", "did",
    "will", "can", "could", "would", "should", "may", "might", "i", "you",
    "we", "they", "he", "she", "my", "your", "our", "its", "me", "us",
    "if", "so", "but", "no", "yes", "what", "how", "when", "where", "who",
    "which", "am", "up", "out", "about", "also", "just", "all", "more",
})

MIN_TERM_LENGTH = 2

_NON_TERM_CHARS = re.compile(r"[^a-z0-9\s]")


def tokenize(text: str) -> list[str]:
    """Split text into index terms.

    Args:
        text: Raw chunk or query text.

    Returns:
        Terms in their original order, duplicates kept. Empty when the
        text holds nothing but punctuation, stop words or single letters.
    """
    normalized = _NON_TERM_CHARS.sub(" ", text.lower())
    return [
        term
        for term in normalized.split()
        if len(term) >= MIN_TERM_LENGTH and term not in STOP_WORDS
    ]
