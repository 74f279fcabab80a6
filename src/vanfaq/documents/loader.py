"""Directory loader for FAQ documents.

Reads every markdown file in the corpus directory. A missing directory is
not an error: the index simply comes up empty.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from vanfaq.documents.schemas import LoadResult, SourceDocument

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".md",)


class DocumentLoader:
    """Load FAQ documents into ``SourceDocument`` records."""

    def __init__(self, extensions: list[str] | tuple[str, ...] = DEFAULT_EXTENSIONS):
        self.extensions = {ext.lower() for ext in extensions}

    def load_directory(self, directory: str | Path) -> LoadResult:
        """Load every supported file in a directory, sorted by name.

        Args:
            directory: Corpus directory; resolved against the cwd.

        Returns:
            A ``LoadResult``. Empty (with a warning) if the directory
            does not exist.
        """
        resolved = Path(directory).resolve()
        if not resolved.is_dir():
            message = f"Directory not found: {resolved}"
            logger.warning("DocumentLoader: %s", message)
            return LoadResult(directory=str(resolved), warnings=[message])

        paths = sorted(
            p for p in resolved.iterdir()
            if p.is_file() and p.suffix.lower() in self.extensions
        )

        result = LoadResult(directory=str(resolved), files_scanned=len(paths))
        for path in paths:
            document, warnings = self._read(path.read_bytes(), path.name)
            result.documents.append(document)
            result.warnings.extend(warnings)

        logger.info(
            "DocumentLoader read %d files from %s", len(paths), resolved,
        )
        return result

    async def aload_directory(self, directory: str | Path) -> LoadResult:
        """Same as ``load_directory`` with the file reads off the event loop."""
        return await asyncio.to_thread(self.load_directory, directory)

    def load_file(self, path: str | Path) -> SourceDocument:
        """Load a single document from a filesystem path."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        document, _ = self._read(path.read_bytes(), path.name)
        return document

    def load_bytes(self, data: bytes, filename: str) -> SourceDocument:
        """Load a document from in-memory bytes."""
        document, _ = self._read(data, filename)
        return document

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    @staticmethod
    def _read(data: bytes, source_id: str) -> tuple[SourceDocument, list[str]]:
        for encoding in ("utf-8", "cp1252"):
            try:
                return SourceDocument(source_id=source_id, text=data.decode(encoding)), []
            except UnicodeDecodeError:
                continue
        # latin-1 maps every byte, so this never fails
        warning = f"{source_id}: encoding detection fell back to latin-1"
        logger.warning("DocumentLoader: %s", warning)
        return SourceDocument(source_id=source_id, text=data.decode("latin-1")), [warning]
