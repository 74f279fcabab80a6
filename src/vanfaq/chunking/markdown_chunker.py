"""Section and Q&A aware chunker for FAQ markdown.

Documents use ``## `` section headers and optional question/answer bullets
of the form ``- **Question?** Answer``. Each Q&A bullet becomes its own
chunk prefixed with the section title; other sections are kept whole or
packed paragraph by paragraph up to ``max_chunk_chars``.
"""

from __future__ import annotations

import logging
import re

from vanfaq.chunking.base import BaseChunker

logger = logging.getLogger(__name__)

MAX_CHUNK_CHARS = 500

_SECTION_SPLIT = re.compile(r"^(?=## )", re.MULTILINE)
_QA_ITEM_SPLIT = re.compile(r"\n(?=- \*\*)")
_PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")


class MarkdownChunker(BaseChunker):
    """Chunker for FAQ and policy documents written in light markdown."""

    def __init__(self, max_chunk_chars: int = MAX_CHUNK_CHARS):
        self.max_chunk_chars = max_chunk_chars

    def chunk(self, text: str) -> list[str]:
        chunks: list[str] = []

        for section in _SECTION_SPLIT.split(text):
            section = section.strip()
            if not section:
                continue

            items = _QA_ITEM_SPLIT.split(section)
            if len(items) > 1:
                chunks.extend(self._split_qa(items))
            elif len(section) <= self.max_chunk_chars:
                chunks.append(section)
            else:
                chunks.extend(self._pack_paragraphs(section))

        logger.debug(
            "MarkdownChunker produced %d chunks from %d chars", len(chunks), len(text),
        )
        return chunks

    @staticmethod
    def _split_qa(items: list[str]) -> list[str]:
        """One chunk per Q&A bullet, each carrying the section title."""
        head, *qa_items = (item.strip() for item in items)
        if head.startswith("- **"):
            # Untitled section that opens directly with a Q&A bullet
            qa_items.insert(0, head)
            head = ""

        title, _, intro = head.partition("\n")
        prefix = f"{title}\n" if title else ""
        intro = intro.strip()

        chunks: list[str] = []
        if intro:
            chunks.append(f"{prefix}{intro}")
        chunks.extend(f"{prefix}{item}" for item in qa_items if item)
        return chunks

    def _pack_paragraphs(self, section: str) -> list[str]:
        """Greedily pack blank-line separated paragraphs.

        A paragraph longer than the limit is emitted whole.
        """
        chunks: list[str] = []
        current = ""

        for para in _PARAGRAPH_SPLIT.split(section):
            para = para.strip()
            if not para:
                continue

            if current and len(f"{current}\n\n{para}") > self.max_chunk_chars:
                chunks.append(current)
                current = para
            else:
                current = f"{current}\n\n{para}" if current else para

        if current:
            chunks.append(current)
        return chunks


def chunk_markdown(text: str, max_chunk_chars: int = MAX_CHUNK_CHARS) -> list[str]:
    """Chunk a markdown document with a one-off ``MarkdownChunker``."""
    return MarkdownChunker(max_chunk_chars=max_chunk_chars).chunk(text)
