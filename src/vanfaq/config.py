"""Application settings loaded from YAML with environment variable overrides."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Settings sections
# ---------------------------------------------------------------------------


class DocumentSettings(BaseModel):
    directory: str = "docs/faq-and-docs"
    extensions: list[str] = Field(default_factory=lambda: [".md"])


class ChunkingSettings(BaseModel):
    max_chunk_chars: int = Field(default=500, gt=0)


class RetrievalSettings(BaseModel):
    top_k: int = Field(default=3, gt=0)
    # Relevance floor: results scoring at or below this are dropped
    min_score: float = Field(default=0.05, ge=0.0, le=1.0)


class SynthesisSettings(BaseModel):
    high_confidence_score: float = Field(default=0.4, ge=0.0, le=1.0)
    secondary_min_score: float = Field(default=0.15, ge=0.0, le=1.0)
    source_preview_chars: int = Field(default=200, gt=0)


class APISettings(BaseModel):
    max_question_chars: int = Field(default=500, gt=0)


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------


class Settings(BaseModel):
    documents: DocumentSettings = Field(default_factory=DocumentSettings)
    chunking: ChunkingSettings = Field(default_factory=ChunkingSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)
    synthesis: SynthesisSettings = Field(default_factory=SynthesisSettings)
    api: APISettings = Field(default_factory=APISettings)


def _find_settings_file() -> Path | None:
    """Walk up from cwd looking for settings.yaml."""
    profile = os.getenv("VANFAQ_PROFILE", "")
    names = [f"settings-{profile}.yaml", "settings.yaml"] if profile else ["settings.yaml"]

    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        for name in names:
            candidate = parent / name
            if candidate.exists():
                return candidate
    return None


def _apply_env_overrides(settings: Settings) -> Settings:
    docs_dir = os.getenv("VANFAQ_DOCS_DIR")
    if docs_dir:
        settings.documents.directory = docs_dir
    return settings


def load_settings() -> Settings:
    """Load settings from YAML file, falling back to defaults."""
    path = _find_settings_file()
    if path is None:
        return _apply_env_overrides(Settings())

    with open(path, encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}

    return _apply_env_overrides(Settings(**raw))
