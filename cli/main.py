"""
Grantha - Main CLI Application

Command-line access to the reference engine and the analysis reshaper.
"""
import asyncio
import json
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from analysis.reshaper import reshape as reshape_text
from analysis.transliterator import transliterate as transliterate_word
from config import get_config
from core.errors import GranthaError
from data.books import CANON
from data.schemas import SourceScript
from integrations.bible_api import BibleApiClient
from observability.logging import LoggingConfig, get_logger, setup_logging, shutdown_logging
from pipeline.search import OutcomeKind, SearchRouter
from reference.canonicalizer import resolve_book
from reference.parser import resolve_multiple

app = typer.Typer(
    name="grantha",
    help="Grantha - bilingual scripture reference and interlinear tools",
    add_completion=False,
)

console = Console()
logger = get_logger("grantha.cli")


class OutputFormat(str, Enum):
    """Output format options."""
    JSON = "json"
    TABLE = "table"


def _verbose(enabled: bool) -> None:
    if enabled:
        shutdown_logging()
        setup_logging(LoggingConfig(level="DEBUG"))


@app.command()
def books(
    testament: Optional[str] = typer.Option(None, "--testament", "-t", help="OT or NT"),
):
    """List the canonical books with their Telugu titles."""
    table = Table(title="Canonical Books")
    table.add_column("#", justify="right")
    table.add_column("Book", style="cyan")
    table.add_column("Abbr.")
    table.add_column("Telugu")
    table.add_column("Chapters", justify="right")
    table.add_column("Genre")

    for book in CANON:
        if testament and book.testament.value != testament.upper():
            continue
        table.add_row(
            str(book.position + 1),
            book.name,
            book.abbreviation,
            book.secondary_name,
            str(book.chapter_count),
            book.genre.value,
        )
    console.print(table)


@app.command()
def resolve(
    names: List[str] = typer.Argument(..., help="Book names in any supported form"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Canonicalize book names and show which strategy matched."""
    _verbose(verbose)
    table = Table(title="Book Resolution")
    table.add_column("Input")
    table.add_column("Canonical", style="cyan")
    table.add_column("Strategy")

    for name in names:
        resolution = resolve_book(name)
        style = "green" if resolution.resolved else "red"
        table.add_row(name, f"[{style}]{resolution.name}[/{style}]", resolution.strategy.value)
    console.print(table)


@app.command()
def parse(
    text: str = typer.Argument(..., help="References, e.g. 'John 3:16; యోహాను 3:17'"),
    output: OutputFormat = typer.Option(OutputFormat.TABLE, "--output", "-o", help="Output format"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Parse one or more scripture references."""
    _verbose(verbose)
    results = resolve_multiple(text)

    if output == OutputFormat.JSON:
        payload = [
            r.value.to_dict() if r.is_success else {"error": r.error, "reason": r.reason.value}
            for r in results
        ]
        console.print_json(json.dumps(payload, ensure_ascii=False))
        return

    table = Table(title="Parsed References")
    table.add_column("Reference", style="cyan")
    table.add_column("Book")
    table.add_column("Chapter", justify="right")
    table.add_column("Verses")

    for result in results:
        if result.is_success:
            ref = result.value
            verses = f"{ref.start_verse}-{ref.end_verse}" if ref.end_verse else str(ref.start_verse)
            table.add_row(ref.label, ref.book, str(ref.chapter), verses)
        else:
            table.add_row(f"[red]{result.error}[/red]", "", "", result.reason.value)
    console.print(table)

    if not results:
        console.print("[yellow]No references found[/yellow]")


@app.command()
def reshape(
    input_file: Path = typer.Argument(..., help="File holding generated interlinear text"),
    telugu: bool = typer.Option(False, "--telugu", help="Telugu headers and transliteration"),
    script: Optional[SourceScript] = typer.Option(None, "--script", help="Source script (detected if omitted)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Reshape a generated interlinear analysis."""
    _verbose(verbose)
    if not input_file.exists():
        console.print(f"[red]Error: Input file not found: {input_file}[/red]")
        raise typer.Exit(1)

    raw = input_file.read_text(encoding="utf-8")
    console.print(
        reshape_text(raw, is_secondary_script_source=telugu, source_script=script),
        markup=False,
        emoji=False,
    )


@app.command()
def transliterate(
    words: List[str] = typer.Argument(..., help="ASCII transliterated words"),
):
    """Render ASCII transliterations in Telugu script (best effort)."""
    table = Table(title="Transliteration")
    table.add_column("ASCII")
    table.add_column("Telugu", style="cyan")
    for word in words:
        table.add_row(word, transliterate_word(word))
    console.print(table)


@app.command()
def fetch(
    query: str = typer.Argument(..., help="Reference(s) or book and chapter, e.g. 'John 3'"),
    chapter: Optional[int] = typer.Option(None, "--chapter", "-c", help="Fetch a whole chapter of QUERY"),
    output: OutputFormat = typer.Option(OutputFormat.TABLE, "--output", "-o", help="Output format"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Fetch verse text from the verse service."""
    _verbose(verbose)
    try:
        rows = asyncio.run(_fetch(query, chapter))
    except GranthaError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)

    if output == OutputFormat.JSON:
        console.print_json(json.dumps(rows, ensure_ascii=False))
        return

    if not rows:
        console.print(f'[yellow]No verses found for "{query}".[/yellow]')
        return

    for row in rows:
        body = "\n".join(f"[bold]{code}[/bold] {text}" for code, text in row["text"].items())
        console.print(Panel(body, title=row["reference"], border_style="blue"))


async def _fetch(query: str, chapter: Optional[int]) -> List[dict]:
    config = get_config()
    async with BibleApiClient(config.bible_api) as client:
        if chapter is not None:
            book = resolve_book(query).name
            verses = await client.fetch_chapter(book, chapter)
            return [
                {"reference": f"{book} {chapter}:{v.verse}", "text": v.text.as_translation_map()}
                for v in verses
            ]

        outcome = await SearchRouter(client).search(query)
        if outcome.kind == OutcomeKind.ERROR:
            raise GranthaError(outcome.message or "Fetch failed")
        if outcome.kind == OutcomeKind.NAVIGATE:
            verses = await client.fetch_verses(outcome.references)
        else:
            verses = outcome.verses
        return [{"reference": v.label, "text": v.text.as_translation_map()} for v in verses]


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
