"""CLI commands for drawing verses and summarizing the corpus."""

from __future__ import annotations

import random
import uuid
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from random_verse.adapters.corpus_source import default_corpus_source, load_corpus
from random_verse.core.exceptions import CorpusLoadError, EmptyContainerError
from random_verse.core.logging import get_logger, run_id_context
from random_verse.core.models import Corpus
from random_verse.services.formatting import format_verse
from random_verse.services.selection import select_random_verse

app = typer.Typer(name="random-verse", help="Print a random verse", no_args_is_help=True)
console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)

CorpusOption = typer.Option(None, "--corpus", "-c", help="Corpus file (defaults to bundled text)")
EncodingOption = typer.Option(None, "--encoding", "-e", help="Corpus text encoding")


def _load(corpus_path: Path | None, encoding: str | None) -> Corpus:
    try:
        return load_corpus(default_corpus_source(corpus_path, encoding))
    except CorpusLoadError as e:
        logger.error("Corpus load failed: %s", e)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


@app.command("verse")
def draw_verse(
    corpus_path: Path | None = CorpusOption,
    encoding: str | None = EncodingOption,
    seed: int | None = typer.Option(None, "--seed", "-s", help="Seed for a reproducible draw"),
) -> None:
    """Print one uniformly chosen verse with its citation."""
    with run_id_context(uuid.uuid4().hex):
        corpus = _load(corpus_path, encoding)
        # Without --seed the selector falls back to the configured seed
        rng = random.Random(seed) if seed is not None else None
        try:
            selected = select_random_verse(corpus, rng)
        except EmptyContainerError as e:
            logger.error("Verse selection aborted: %s", e)
            err_console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1) from e

        # Plain print: verse text may contain brackets rich would treat as markup
        print(format_verse(selected))


@app.command("stats")
def corpus_stats(
    corpus_path: Path | None = CorpusOption,
    encoding: str | None = EncodingOption,
) -> None:
    """Show chapter and verse counts per book."""
    with run_id_context(uuid.uuid4().hex):
        corpus = _load(corpus_path, encoding)

        if not corpus.books:
            console.print("[dim]No books found.[/dim]")
            return

        table = Table(title="Corpus")
        table.add_column("Book", style="cyan")
        table.add_column("Chapters", justify="right")
        table.add_column("Verses", justify="right")

        for book in corpus.books:
            table.add_row(escape(book.name), str(len(book.chapters)), str(book.verse_count))

        table.add_section()
        table.add_row(
            "[bold]Total[/bold]",
            str(corpus.chapter_count),
            str(corpus.verse_count),
        )
        console.print(table)


__all__ = ["app"]
