"""Search and parse commands."""

import json
from pathlib import Path

import typer
from rich.table import Table

from daumdic.cli.utils.async_runner import run_async
from daumdic.cli.utils.console import console, error_console
from daumdic.errors import DaumdicError
from daumdic.models import Search
from daumdic.parser import parse
from daumdic.service import DictionaryService


def build_words_table(result: Search) -> Table:
    """Build a table with one row per word."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Word", style="word")
    table.add_column("Lang", style="lang")
    table.add_column("Pronunciation", style="dim")
    table.add_column("Meaning")

    for word in result.words:
        table.add_row(
            word.word,
            word.lang_label,
            word.pronounce or "",
            ", ".join(word.meaning),
        )
    return table


def print_result(result: Search, as_json: bool = False, first_only: bool = False) -> None:
    if first_only:
        result = Search(words=result.words[:1], alternatives=result.alternatives)

    if as_json:
        # Plain print, no rich wrapping
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    if result.words:
        console.print(build_words_table(result))
    if result.alternatives:
        console.print(f"[warning]Did you mean:[/] {', '.join(result.alternatives)}")
    if result.is_empty:
        console.print("[dim]No results[/]")


def search(
    term: str = typer.Argument(..., help="Word to look up"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    first_only: bool = typer.Option(False, "--first", help="Only show the best match"),
) -> None:
    """Look up a word in Daum dictionary."""
    service = DictionaryService()
    try:
        result = run_async(service.search_async(term))
    except DaumdicError as e:
        error_console.print(f"[error]{e}[/]")
        raise typer.Exit(1) from None

    print_result(result, as_json=as_json, first_only=first_only)


def parse_file(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Saved result page"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Parse a saved Daum dictionary result page."""
    try:
        result = parse(path.read_text(encoding="utf-8"))
    except DaumdicError as e:
        error_console.print(f"[error]{e}[/]")
        raise typer.Exit(1) from None

    print_result(result, as_json=as_json)
