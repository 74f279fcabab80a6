"""In-memory TF-IDF vector space index."""

from vanfaq.vectorstore.schemas import IndexStats, SparseVector
from vanfaq.vectorstore.tfidf import compute_idf, cosine_similarity, tfidf_vector
from vanfaq.vectorstore.tfidf_store import IndexSnapshot, TfidfStore

__all__ = [
    "IndexSnapshot",
    "IndexStats",
    "SparseVector",
    "TfidfStore",
    "compute_idf",
    "cosine_similarity",
    "tfidf_vector",
]
