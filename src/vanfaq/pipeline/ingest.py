"""Ingestion pipeline — loaded documents → chunk → tokenize → index.

Always a full build: the corpus is read in one pass and handed to the
store as a whole.
"""

from __future__ import annotations

import logging

from vanfaq.documents.schemas import LoadResult
from vanfaq.pipeline.schemas import IngestResult
from vanfaq.vectorstore.tfidf_store import TfidfStore

logger = logging.getLogger(__name__)


class IngestPipeline:
    """Orchestrates corpus ingestion into a ``TfidfStore``."""

    def __init__(self, vector_store: TfidfStore):
        self.vector_store = vector_store

    def index(self, loaded: LoadResult) -> IngestResult:
        """Index an already-read ``LoadResult``.

        Raises:
            RuntimeError: If the store is already loaded.
        """
        chunk_count = self.vector_store.load(loaded.documents)
        stats = self.vector_store.stats()

        logger.info(
            "Ingested %s: %d files → %d chunks",
            loaded.directory,
            len(loaded.documents),
            chunk_count,
        )

        return IngestResult(
            directory=loaded.directory or "",
            files_loaded=len(loaded.documents),
            chunks_created=chunk_count,
            vocabulary_size=stats.vocabulary_size,
            warnings=list(loaded.warnings),
        )
