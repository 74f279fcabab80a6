"""Markdown-aware document chunking."""

from vanfaq.chunking.base import BaseChunker
from vanfaq.chunking.markdown_chunker import MarkdownChunker, chunk_markdown
from vanfaq.chunking.schemas import Chunk

__all__ = ["BaseChunker", "Chunk", "MarkdownChunker", "chunk_markdown"]
