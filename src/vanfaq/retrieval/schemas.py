"""Data models for retrieval operations."""

from __future__ import annotations

from dataclasses import dataclass, field

from vanfaq.chunking.schemas import Chunk


@dataclass
class RetrievalConfig:
    """Configuration for a retrieval operation."""

    top_k: int = 3
    min_score: float = 0.05


@dataclass(frozen=True)
class ScoredChunk:
    """A chunk paired with its cosine similarity to the query."""

    chunk: Chunk
    score: float

    @property
    def text(self) -> str:
        return self.chunk.text

    @property
    def source(self) -> str:
        return self.chunk.source


@dataclass
class RetrievalResult:
    """Result of a retrieval operation."""

    query: str
    results: list[ScoredChunk] = field(default_factory=list)
    total_candidates: int = 0
