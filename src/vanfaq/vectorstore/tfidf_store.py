"""In-memory TF-IDF vector store — no embeddings model, no persistence.

The store publishes its chunk list and IDF table together as one immutable
``IndexSnapshot``. Loading builds a complete new snapshot before swapping
the reference, so readers see either the old corpus or the new one, never
a mix of the two.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from vanfaq.chunking.base import BaseChunker
from vanfaq.chunking.markdown_chunker import MarkdownChunker
from vanfaq.chunking.schemas import Chunk
from vanfaq.documents.schemas import SourceDocument
from vanfaq.tokenizer import tokenize
from vanfaq.vectorstore.schemas import IndexStats, SparseVector
from vanfaq.vectorstore.tfidf import compute_idf, cosine_similarity, tfidf_vector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexSnapshot:
    """Chunks and the IDF table computed over exactly those chunks."""

    chunks: tuple[Chunk, ...] = ()
    idf: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    initialized: bool = False

    def embed(self, tokens: Iterable[str]) -> SparseVector:
        return tfidf_vector(tokens, self.idf)

    def stats(self) -> IndexStats:
        return IndexStats(
            initialized=self.initialized,
            document_count=len(self.chunks),
            vocabulary_size=len(self.idf),
        )


_EMPTY = IndexSnapshot()


class TfidfStore:
    """TF-IDF vector space index over chunked FAQ documents."""

    def __init__(self, chunker: BaseChunker | None = None):
        self.chunker = chunker or MarkdownChunker()
        self._snapshot = _EMPTY

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def initialized(self) -> bool:
        return self._snapshot.initialized

    def load(self, documents: Iterable[SourceDocument]) -> int:
        """Chunk, tokenize and index a full document set.

        Args:
            documents: Every document of the corpus.

        Returns:
            Number of chunks indexed.

        Raises:
            RuntimeError: If the store is already loaded; call ``clear()``
                first.
        """
        if self._snapshot.initialized:
            raise RuntimeError("TfidfStore is already loaded; call clear() before loading again")

        chunks: list[Chunk] = []
        doc_count = 0
        for document in documents:
            doc_count += 1
            for text in self.chunker.chunk(document.text):
                chunks.append(Chunk(
                    id=len(chunks),
                    text=text,
                    tokens=tuple(tokenize(text)),
                    source=document.source_id,
                ))

        idf = compute_idf([c.tokens for c in chunks])
        self._snapshot = IndexSnapshot(
            chunks=tuple(chunks),
            idf=MappingProxyType(idf),
            initialized=True,
        )

        logger.info(
            "TfidfStore loaded %d chunks from %d documents (vocabulary: %d)",
            len(chunks), doc_count, len(idf),
        )
        return len(chunks)

    def clear(self) -> None:
        self._snapshot = _EMPTY

    # ------------------------------------------------------------------
    # Read API
    # ------------------------------------------------------------------

    def snapshot(self) -> IndexSnapshot:
        """Return the current snapshot; hold on to it for a consistent read."""
        return self._snapshot

    def embed(self, tokens: Iterable[str]) -> SparseVector:
        return self._snapshot.embed(tokens)

    @staticmethod
    def similarity(vec_a: Mapping[str, float], vec_b: Mapping[str, float]) -> float:
        return cosine_similarity(vec_a, vec_b)

    def idf(self, term: str) -> float | None:
        """IDF weight of a corpus term, ``None`` if the corpus lacks it."""
        return self._snapshot.idf.get(term)

    def count(self) -> int:
        return len(self._snapshot.chunks)

    def stats(self) -> IndexStats:
        return self._snapshot.stats()
