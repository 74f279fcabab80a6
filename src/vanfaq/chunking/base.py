"""Abstract base class for all chunkers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseChunker(ABC):
    """Interface for document chunking strategies."""

    @abstractmethod
    def chunk(self, text: str) -> list[str]:
        """Split a raw document into passage texts.

        Args:
            text: Full document text.

        Returns:
            Chunk texts in document order.
        """
