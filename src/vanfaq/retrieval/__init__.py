"""Retrieval — cosine similarity ranking over the TF-IDF index."""

from vanfaq.retrieval.retriever import Retriever
from vanfaq.retrieval.schemas import RetrievalConfig, RetrievalResult, ScoredChunk

__all__ = ["Retriever", "RetrievalConfig", "RetrievalResult", "ScoredChunk"]
