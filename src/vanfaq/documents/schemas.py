"""Data models for document loading."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SourceDocument:
    """A raw FAQ document as read from storage."""

    source_id: str
    text: str


@dataclass
class LoadResult:
    """Result of scanning a document directory.

    Attributes:
        documents: One entry per readable file, ordered by file name.
        directory: Resolved directory that was scanned.
        files_scanned: Number of files matching the configured extensions.
        warnings: Non-fatal issues encountered during loading.
    """

    documents: list[SourceDocument] = field(default_factory=list)
    directory: str | None = None
    files_scanned: int = 0
    warnings: list[str] = field(default_factory=list)
