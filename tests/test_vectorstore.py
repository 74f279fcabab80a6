"""Tests for the TF-IDF math and the in-memory store."""

from __future__ import annotations

import math

import pytest

from vanfaq.chunking.markdown_chunker import MarkdownChunker
from vanfaq.documents.schemas import SourceDocument
from vanfaq.vectorstore.schemas import IndexStats
from vanfaq.vectorstore.tfidf import compute_idf, cosine_similarity, tfidf_vector
from vanfaq.vectorstore.tfidf_store import TfidfStore

# ---------------------------------------------------------------------------
# IDF
# ---------------------------------------------------------------------------


class TestComputeIdf:
    def test_formula(self):
        idf = compute_idf([["van", "book"], ["van"], ["price"]])
        assert idf["van"] == pytest.approx(math.log(4 / 3) + 1)
        assert idf["book"] == pytest.approx(math.log(4 / 2) + 1)
        assert idf["price"] == pytest.approx(math.log(4 / 2) + 1)

    def test_term_in_every_document_stays_positive(self):
        idf = compute_idf([["van"], ["van"], ["van"]])
        assert idf["van"] == pytest.approx(1.0)

    def test_rarer_terms_score_higher(self):
        idf = compute_idf([
            ["van", "camper", "deposit"],
            ["van", "camper"],
            ["van"],
        ])
        assert idf["deposit"] > idf["camper"] > idf["van"]

    def test_duplicates_count_once_per_document(self):
        idf = compute_idf([["van", "van", "van"], ["price"]])
        assert idf["van"] == idf["price"]

    def test_empty_corpus(self):
        assert compute_idf([]) == {}


# ---------------------------------------------------------------------------
# TF-IDF vectors
# ---------------------------------------------------------------------------


class TestTfidfVector:
    def test_max_tf_normalisation(self):
        vec = tfidf_vector(["book", "book", "van"], {"book": 2.0, "van": 3.0})
        assert vec == {"book": pytest.approx(2.0), "van": pytest.approx(1.5)}

    def test_unseen_terms_weigh_one(self):
        vec = tfidf_vector(["zebra"], {"van": 3.0})
        assert vec == {"zebra": 1.0}

    def test_empty_tokens(self):
        assert tfidf_vector([], {"van": 2.0}) == {}

    def test_repetition_does_not_inflate_weights(self):
        idf = {"van": 2.0}
        assert tfidf_vector(["van"] * 50, idf) == tfidf_vector(["van"], idf)

    def test_sparse(self):
        vec = tfidf_vector(["van"], {"van": 2.0, "book": 1.5, "price": 1.2})
        assert set(vec) == {"van"}


# ---------------------------------------------------------------------------
# Cosine similarity
# ---------------------------------------------------------------------------


class TestCosineSimilarity:
    def test_identical_vectors(self):
        vec = {"van": 1.4, "book": 0.7, "dates": 0.3}
        assert cosine_similarity(vec, vec) == pytest.approx(1.0)

    def test_disjoint_vectors(self):
        assert cosine_similarity({"van": 1.0}, {"price": 1.0}) == 0.0

    def test_partial_overlap(self):
        score = cosine_similarity({"van": 1.0, "book": 1.0}, {"van": 1.0})
        assert score == pytest.approx(1 / math.sqrt(2))

    def test_symmetric(self):
        a = {"van": 1.0, "book": 2.0}
        b = {"van": 0.5, "price": 3.0, "book": 0.1}
        assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(b, a))

    def test_zero_vector_left(self):
        assert cosine_similarity({}, {"van": 1.0}) == 0

    def test_zero_vector_right(self):
        assert cosine_similarity({"van": 1.0}, {}) == 0

    def test_both_empty(self):
        assert cosine_similarity({}, {}) == 0

    def test_never_exceeds_one(self):
        vec = {f"t{i}": 0.1 * (i + 1) for i in range(50)}
        assert cosine_similarity(vec, dict(vec)) <= 1.0


# ---------------------------------------------------------------------------
# TfidfStore
# ---------------------------------------------------------------------------


class TestTfidfStore:
    @pytest.fixture
    def store(self, faq_documents: list[SourceDocument]) -> TfidfStore:
        s = TfidfStore()
        s.load(faq_documents)
        return s

    def test_empty_store(self):
        store = TfidfStore()
        assert not store.initialized
        assert store.count() == 0
        assert store.stats() == IndexStats()

    def test_load_assigns_sequential_ids(self, store: TfidfStore):
        chunks = store.snapshot().chunks
        assert [c.id for c in chunks] == list(range(len(chunks)))

    def test_load_records_source_and_tokens(self, store: TfidfStore):
        chunk = next(c for c in store.snapshot().chunks if "book a van" in c.text)
        assert chunk.source == "faq.md"
        assert chunk.tokens[:2] == ("booking", "book")

    def test_load_returns_chunk_count(self, faq_documents: list[SourceDocument]):
        store = TfidfStore()
        assert store.load(faq_documents) == store.count() > 0

    def test_stats(self, store: TfidfStore):
        stats = store.stats()
        assert stats.initialized
        assert stats.document_count == store.count()
        assert stats.vocabulary_size == len(store.snapshot().idf)
        assert stats.to_dict() == {
            "initialized": True,
            "documentCount": store.count(),
            "vocabularySize": stats.vocabulary_size,
        }

    def test_idf_covers_every_chunk_term(self, store: TfidfStore):
        terms = {t for c in store.snapshot().chunks for t in c.tokens}
        assert set(store.snapshot().idf) == terms

    def test_idf_lookup(self, store: TfidfStore):
        assert store.idf("deposit") is not None
        assert store.idf("spaceship") is None

    def test_self_similarity(self, store: TfidfStore):
        for chunk in store.snapshot().chunks:
            if not chunk.tokens:
                continue
            vec = store.embed(chunk.tokens)
            assert store.similarity(vec, vec) == pytest.approx(1.0)

    def test_double_load_rejected(self, store: TfidfStore, faq_documents):
        with pytest.raises(RuntimeError, match="clear"):
            store.load(faq_documents)

    def test_clear(self, store: TfidfStore):
        store.clear()
        assert not store.initialized
        assert store.count() == 0
        assert store.stats().vocabulary_size == 0

    def test_clear_is_always_safe(self):
        store = TfidfStore()
        store.clear()
        store.clear()
        assert not store.initialized

    def test_clear_then_load_renumbers(self, store: TfidfStore):
        store.clear()
        store.load([SourceDocument("new.md", "## New\n\nOnly one chunk here.")])
        chunks = store.snapshot().chunks
        assert [(c.id, c.source) for c in chunks] == [(0, "new.md")]

    def test_load_empty_corpus_is_ready(self):
        store = TfidfStore()
        assert store.load([]) == 0
        assert store.initialized
        assert store.stats() == IndexStats(initialized=True)

    def test_snapshot_unaffected_by_reload(self, store: TfidfStore):
        before = store.snapshot()
        old_count = len(before.chunks)
        store.clear()
        store.load([SourceDocument("new.md", "## New\n\nReplacement corpus.")])
        # An old snapshot keeps its own chunks and IDF table together
        assert len(before.chunks) == old_count
        assert "deposit" in before.idf
        assert "deposit" not in store.snapshot().idf

    def test_idf_table_is_read_only(self, store: TfidfStore):
        with pytest.raises(TypeError):
            store.snapshot().idf["van"] = 0.0  # type: ignore[index]

    def test_custom_chunker(self, faq_documents):
        store = TfidfStore(chunker=MarkdownChunker(max_chunk_chars=50))
        store.load(faq_documents)
        assert store.count() > 0
