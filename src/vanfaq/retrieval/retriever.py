"""Retriever — tokenize query, embed, rank every chunk by cosine similarity."""

from __future__ import annotations

import logging

from vanfaq.retrieval.schemas import RetrievalConfig, RetrievalResult, ScoredChunk
from vanfaq.tokenizer import tokenize
from vanfaq.vectorstore.tfidf import cosine_similarity
from vanfaq.vectorstore.tfidf_store import TfidfStore

logger = logging.getLogger(__name__)


class Retriever:
    """Ranks the chunks of a ``TfidfStore`` against a query string."""

    def __init__(self, vector_store: TfidfStore):
        self.vector_store = vector_store

    def retrieve(
        self,
        query: str,
        config: RetrievalConfig | None = None,
    ) -> RetrievalResult:
        """Run a full retrieval: tokenize → embed → score → floor → top_k.

        Args:
            query: The user's question.
            config: Retrieval settings (top_k, relevance floor).

        Returns:
            A ``RetrievalResult``; empty if the index is not loaded or no
            chunk scores above the floor.
        """
        cfg = config or RetrievalConfig()

        # One snapshot for the whole call so a reload cannot interleave
        snapshot = self.vector_store.snapshot()
        if not snapshot.initialized or not snapshot.chunks:
            return RetrievalResult(query=query)

        query_vec = snapshot.embed(tokenize(query))

        scored = [
            ScoredChunk(chunk=chunk, score=cosine_similarity(query_vec, snapshot.embed(chunk.tokens)))
            for chunk in snapshot.chunks
        ]
        scored.sort(key=lambda r: (-r.score, r.chunk.id))

        results = [r for r in scored if r.score > cfg.min_score][: cfg.top_k]

        logger.info(
            "Retrieved %d results for query (candidates=%d, top=%.3f)",
            len(results),
            len(scored),
            results[0].score if results else 0.0,
        )

        return RetrievalResult(
            query=query,
            results=results,
            total_candidates=len(scored),
        )

    def search(self, query: str, top_k: int = 3) -> list[ScoredChunk]:
        """Ranked ``(chunk, score)`` pairs with the default relevance floor."""
        return self.retrieve(query, RetrievalConfig(top_k=top_k)).results
