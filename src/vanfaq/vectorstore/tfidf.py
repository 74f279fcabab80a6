"""TF-IDF weighting and cosine similarity over sparse vectors."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from vanfaq.vectorstore.schemas import SparseVector

# Weight used for terms the corpus has never seen (query-only terms)
UNSEEN_TERM_IDF = 1.0


def compute_idf(token_lists: Sequence[Iterable[str]]) -> dict[str, float]:
    """Smoothed inverse document frequency over a full chunk set.

    ``idf(t) = ln((N + 1) / (df(t) + 1)) + 1``, which stays positive even
    for terms that appear in every chunk.
    """
    doc_count = len(token_lists)
    doc_freq: Counter[str] = Counter()
    for tokens in token_lists:
        doc_freq.update(set(tokens))

    return {
        term: math.log((doc_count + 1) / (freq + 1)) + 1
        for term, freq in doc_freq.items()
    }


def tfidf_vector(tokens: Iterable[str], idf: Mapping[str, float]) -> SparseVector:
    """Max-tf normalised TF-IDF weights for a token sequence.

    Term frequency is divided by the largest term frequency in the same
    sequence, so it lies in (0, 1] regardless of chunk length.
    """
    tf = Counter(tokens)
    max_tf = max(tf.values(), default=1)
    return {
        term: (count / max_tf) * idf.get(term, UNSEEN_TERM_IDF)
        for term, count in tf.items()
    }


def cosine_similarity(vec_a: Mapping[str, float], vec_b: Mapping[str, float]) -> float:
    """Cosine of the angle between two sparse vectors.

    Returns 0.0 when either vector has zero norm.
    """
    if len(vec_a) > len(vec_b):
        vec_a, vec_b = vec_b, vec_a

    dot = sum(weight * vec_b[term] for term, weight in vec_a.items() if term in vec_b)
    norm_a = math.sqrt(sum(w * w for w in vec_a.values()))
    norm_b = math.sqrt(sum(w * w for w in vec_b.values()))

    denom = norm_a * norm_b
    if denom == 0:
        return 0.0
    # Clamp rounding drift on near-identical vectors
    return min(dot / denom, 1.0)
