"""Data models for the FAQ answering pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SourceRef:
    """A retrieved passage cited alongside an answer."""

    text: str
    source: str
    score: int  # 0-100


@dataclass
class FAQAnswer:
    """Output of the FAQ pipeline."""

    question: str
    answer: str
    sources: list[SourceRef] = field(default_factory=list)
    confidence: int = 0
    follow_up: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Render the wire shape used by the HTTP layer."""
        return {
            "answer": self.answer,
            "sources": [
                {"text": s.text, "source": s.source, "score": s.score}
                for s in self.sources
            ],
            "confidence": self.confidence,
            "followUp": list(self.follow_up),
        }


@dataclass
class IngestResult:
    """Result of loading a document directory into the index."""

    directory: str
    files_loaded: int
    chunks_created: int
    vocabulary_size: int = 0
    warnings: list[str] = field(default_factory=list)
