"""CLI entry point — Typer app for vanfaq commands.

Usage:
    vanfaq ask "How do I book a van?"
    vanfaq stats --docs-dir docs/faq-and-docs
    vanfaq chunks docs/faq-and-docs/faq.md
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="vanfaq",
    help="Van rental FAQ retrieval — ask, inspect, reload.",
    no_args_is_help=True,
)

console = Console()

_CHUNK_PATH = typer.Argument(..., help="Markdown document to chunk")
_DOCS_DIR = typer.Option("--docs-dir", "-d", help="Override the document directory")


def _build_service(docs_dir: Path | None):
    from vanfaq.config import load_settings
    from vanfaq.pipeline.service import FAQService

    settings = load_settings()
    if docs_dir is not None:
        settings.documents.directory = str(docs_dir)
    return FAQService(settings=settings)


def _print_stats(stats) -> None:
    table = Table(title="Index")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Initialized", str(stats.initialized))
    table.add_row("Chunks", str(stats.document_count))
    table.add_row("Vocabulary", str(stats.vocabulary_size))
    console.print(table)


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to ask"),
    docs_dir: Annotated[Path | None, _DOCS_DIR] = None,
) -> None:
    """Answer a question from the FAQ documents."""
    service = _build_service(docs_dir)
    result = asyncio.run(service.answer(question))

    console.print(f"\n[bold]Q:[/] {result.question}")
    console.print(f"\n[bold green]A:[/] {result.answer}")
    console.print(f"\n[dim]Confidence: {result.confidence}%[/]")

    if result.sources:
        table = Table(title="Sources")
        table.add_column("Source", style="cyan")
        table.add_column("Score", justify="right")
        table.add_column("Passage")
        for s in result.sources:
            table.add_row(s.source, str(s.score), s.text.replace("\n", " ")[:80])
        console.print(table)

    if result.follow_up:
        console.print("\n[bold]You might also ask:[/]")
        for suggestion in result.follow_up:
            console.print(f"  • {suggestion}")


@app.command()
def stats(
    docs_dir: Annotated[Path | None, _DOCS_DIR] = None,
) -> None:
    """Load the corpus and show index statistics."""
    service = _build_service(docs_dir)
    _print_stats(asyncio.run(service.stats()))


@app.command()
def reload(
    docs_dir: Annotated[Path | None, _DOCS_DIR] = None,
) -> None:
    """Load the corpus, drop it, and load it again."""
    service = _build_service(docs_dir)

    async def _run():
        await service.ensure_ready()
        return await service.reload()

    reloaded = asyncio.run(_run())
    console.print("[bold green]Vector store reloaded[/]")
    _print_stats(reloaded)


@app.command()
def chunks(
    path: Annotated[Path, _CHUNK_PATH],
    max_chars: int = typer.Option(
        500, "--max-chars", "-m", help="Soft chunk size limit",
    ),
) -> None:
    """Show how a document is split into retrievable chunks."""
    from vanfaq.chunking.markdown_chunker import chunk_markdown
    from vanfaq.documents.loader import DocumentLoader
    from vanfaq.tokenizer import tokenize

    document = DocumentLoader().load_file(path)
    texts = chunk_markdown(document.text, max_chunk_chars=max_chars)

    table = Table(title=f"{document.source_id}: {len(texts)} chunks")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Chars", justify="right")
    table.add_column("Terms", justify="right")
    table.add_column("Text")

    for i, text in enumerate(texts):
        table.add_row(
            str(i), str(len(text)), str(len(tokenize(text))), text.replace("\n", " ")[:70],
        )

    console.print(table)


if __name__ == "__main__":
    app()
