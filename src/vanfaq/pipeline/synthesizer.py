"""Heuristic answer synthesis from ranked chunks.

No generation: the answer is the cleaned top passage, optionally joined
with a strong supporting passage from a different document.
"""

from __future__ import annotations

import logging
import math
import re

from vanfaq.pipeline.schemas import FAQAnswer, SourceRef
from vanfaq.pipeline.suggestions import DEFAULT_FOLLOW_UPS, suggest_follow_ups
from vanfaq.retrieval.schemas import ScoredChunk

logger = logging.getLogger(__name__)

FALLBACK_ANSWER = (
    "I'm sorry, I couldn't find an answer to that question. "
    "Try asking about bookings, pricing, our fleet, or your account."
)

ADDITIONALLY_JOINER = "\n\nAdditionally: "

_HEADING_LINE = re.compile(r"^[ \t]*#{1,6}[ \t]+.*$\n?", re.MULTILINE)
_HEADING_MARKER = re.compile(r"^[ \t]*#{1,6}[ \t]*", re.MULTILINE)
_BOLD = re.compile(r"\*\*|__")
_BULLET = re.compile(r"^[ \t]*[-*+][ \t]+", re.MULTILINE)
_EXTRA_BLANK_LINES = re.compile(r"\n{3,}")


def clean_chunk_text(text: str) -> str:
    """Strip markdown headings, bold markers and bullet prefixes.

    A chunk that is nothing but a heading keeps the heading text.
    """
    cleaned = _HEADING_LINE.sub("", text)
    cleaned = _BOLD.sub("", cleaned)
    cleaned = _BULLET.sub("", cleaned)
    cleaned = _EXTRA_BLANK_LINES.sub("\n\n", cleaned).strip()
    if cleaned:
        return cleaned
    return _BOLD.sub("", _HEADING_MARKER.sub("", text)).strip()


def to_percent(score: float) -> int:
    """Score in [0, 1] as a whole percentage, halves rounded up."""
    return math.floor(score * 100 + 0.5)


class AnswerSynthesizer:
    """Turns ranked retrieval results into a user-facing answer."""

    def __init__(
        self,
        high_confidence_score: float = 0.4,
        secondary_min_score: float = 0.15,
        source_preview_chars: int = 200,
    ):
        self.high_confidence_score = high_confidence_score
        self.secondary_min_score = secondary_min_score
        self.source_preview_chars = source_preview_chars

    def compose(self, results: list[ScoredChunk]) -> str:
        """Build the answer text from results sorted best-first."""
        if not results:
            return FALLBACK_ANSWER

        top = results[0]
        primary = clean_chunk_text(top.text)

        if top.score > self.high_confidence_score or len(results) == 1:
            return primary

        second = results[1]
        if second.score > self.secondary_min_score and second.source != top.source:
            return f"{primary}{ADDITIONALLY_JOINER}{clean_chunk_text(second.text)}"

        return primary

    def synthesize(self, question: str, results: list[ScoredChunk]) -> FAQAnswer:
        """Answer, cited sources, confidence and follow-up suggestions."""
        if not results:
            return FAQAnswer(
                question=question,
                answer=FALLBACK_ANSWER,
                confidence=0,
                follow_up=list(DEFAULT_FOLLOW_UPS),
            )

        answer = self.compose(results)
        sources = [
            SourceRef(
                text=r.text[: self.source_preview_chars],
                source=r.source,
                score=to_percent(r.score),
            )
            for r in results
        ]

        logger.info(
            "Synthesized answer from %d results (top=%s, score=%.3f)",
            len(results), results[0].source, results[0].score,
        )

        return FAQAnswer(
            question=question,
            answer=answer,
            sources=sources,
            confidence=to_percent(results[0].score),
            follow_up=suggest_follow_ups(question, answer),
        )
