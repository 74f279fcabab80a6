"""Data models for the vector space index."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Sparse term -> weight mapping; only terms present carry a weight
SparseVector = dict[str, float]


@dataclass(frozen=True)
class IndexStats:
    """Point-in-time summary of the index."""

    initialized: bool = False
    document_count: int = 0
    vocabulary_size: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Render the wire shape used by the HTTP layer."""
        return {
            "initialized": self.initialized,
            "documentCount": self.document_count,
            "vocabularySize": self.vocabulary_size,
        }
