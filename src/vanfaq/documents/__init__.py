"""Document loading — FAQ markdown files from a directory."""

from vanfaq.documents.loader import DocumentLoader
from vanfaq.documents.schemas import LoadResult, SourceDocument

__all__ = ["DocumentLoader", "LoadResult", "SourceDocument"]
