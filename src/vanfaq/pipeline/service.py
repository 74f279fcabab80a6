"""FAQ service — lazy single-flight index loading plus question answering.

The host application constructs one ``FAQService`` at startup and shares it
across request handlers. The index is loaded on first use:

    uninitialized → loading → ready        (first ensure_ready())
    ready → loading → ready                (reload())

Concurrent callers during ``loading`` all await the same load task, so the
document directory is read exactly once per load cycle.
"""

from __future__ import annotations

import asyncio
import logging
from enum import StrEnum
from typing import Any

from vanfaq.chunking.markdown_chunker import MarkdownChunker
from vanfaq.config import Settings
from vanfaq.documents.loader import DocumentLoader
from vanfaq.pipeline.ingest import IngestPipeline
from vanfaq.pipeline.schemas import FAQAnswer, IngestResult
from vanfaq.pipeline.synthesizer import AnswerSynthesizer
from vanfaq.retrieval.retriever import Retriever
from vanfaq.retrieval.schemas import RetrievalConfig
from vanfaq.vectorstore.schemas import IndexStats
from vanfaq.vectorstore.tfidf_store import TfidfStore

logger = logging.getLogger(__name__)


class ServiceState(StrEnum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


class FAQService:
    """Owns the index and answers FAQ questions against it."""

    def __init__(
        self,
        settings: Settings | None = None,
        vector_store: TfidfStore | None = None,
        loader: DocumentLoader | None = None,
        synthesizer: AnswerSynthesizer | None = None,
    ):
        self.settings = settings or Settings()
        self.vector_store = vector_store or TfidfStore(
            chunker=MarkdownChunker(max_chunk_chars=self.settings.chunking.max_chunk_chars),
        )
        self.loader = loader or DocumentLoader(extensions=self.settings.documents.extensions)
        self.ingest = IngestPipeline(vector_store=self.vector_store)
        self.retriever = Retriever(vector_store=self.vector_store)
        self.synthesizer = synthesizer or AnswerSynthesizer(
            high_confidence_score=self.settings.synthesis.high_confidence_score,
            secondary_min_score=self.settings.synthesis.secondary_min_score,
            source_preview_chars=self.settings.synthesis.source_preview_chars,
        )

        self._lock = asyncio.Lock()
        self._load_task: asyncio.Task[IngestResult | None] | None = None
        # Bumped by reload(); a load from an older generation never publishes
        self._generation = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def state(self) -> ServiceState:
        if self.vector_store.initialized:
            return ServiceState.READY
        if self._load_task is not None:
            return ServiceState.LOADING
        return ServiceState.UNINITIALIZED

    async def ensure_ready(self) -> None:
        """Load the index unless already loaded, joining any in-flight load.

        Raises:
            OSError: If reading the document directory fails. Every caller
                waiting on the same load receives the error; the next call
                starts a fresh attempt.
        """
        while not self.vector_store.initialized:
            async with self._lock:
                if self.vector_store.initialized:
                    return
                task = self._load_task or self._start_load()

            # shield: a cancelled caller must not cancel the shared load
            await asyncio.shield(task)

    async def reload(self) -> IndexStats:
        """Drop the index and load the document directory again."""
        async with self._lock:
            self._generation += 1
            self.vector_store.clear()
            self._start_load()
        logger.info("FAQService reload requested (generation %d)", self._generation)
        return await self.stats()

    def _start_load(self) -> asyncio.Task[IngestResult | None]:
        """Schedule a load for the current generation. Caller holds ``_lock``."""
        self._load_task = asyncio.create_task(self._load(self._generation))
        self._load_task.add_done_callback(self._on_load_done)
        return self._load_task

    async def _load(self, generation: int) -> IngestResult | None:
        directory = self.settings.documents.directory
        loaded = await self.loader.aload_directory(directory)

        if generation != self._generation:
            logger.warning(
                "FAQService discarded stale load of %s (generation %d, current %d)",
                directory, generation, self._generation,
            )
            return None

        return self.ingest.index(loaded)

    def _on_load_done(self, task: asyncio.Task[IngestResult | None]) -> None:
        if self._load_task is task:
            self._load_task = None
        if not task.cancelled() and task.exception() is not None:
            logger.warning("FAQService load failed: %s", task.exception())

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def answer(self, question: str) -> FAQAnswer:
        """Answer a question from the FAQ corpus."""
        await self.ensure_ready()

        retrieval = self.retriever.retrieve(
            question,
            RetrievalConfig(
                top_k=self.settings.retrieval.top_k,
                min_score=self.settings.retrieval.min_score,
            ),
        )
        return self.synthesizer.synthesize(question, retrieval.results)

    async def stats(self) -> IndexStats:
        await self.ensure_ready()
        return self.vector_store.stats()

    async def health(self) -> dict[str, Any]:
        """Readiness summary for health checks."""
        stats = await self.stats()
        return {
            "status": "ready" if stats.initialized else "not_initialized",
            "documentCount": stats.document_count,
            "vocabularySize": stats.vocabulary_size,
        }
