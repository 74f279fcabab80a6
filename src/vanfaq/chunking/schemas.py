"""Data models for chunks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Chunk:
    """A single retrievable passage of a source document.

    ``id`` is assigned sequentially at load time and restarts from zero
    on every full reload.
    """

    id: int
    text: str
    tokens: tuple[str, ...]
    source: str
