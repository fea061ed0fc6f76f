"""Command-line interface for darktriad."""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from darktriad.config import get_settings
from darktriad.models import FullResult, MatchEntry, TraitMatches, TraitScores
from darktriad.utils.logging import get_logger, setup_logging

app = typer.Typer(
    name="darktriad",
    help="Analyse the dark triad (narcissism, Machiavellianism, psychopathy) of text",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


def init_app():
    """Initialize the application."""
    settings = get_settings()
    setup_logging(settings.log_level)


def _scores_table(scores: TraitScores) -> Table:
    table = Table(title="Lexical Values")
    table.add_column("Trait", style="cyan")
    table.add_column("Value", justify="right")

    for trait, value in scores.model_dump().items():
        table.add_row(trait, "-" if value is None else f"{value}")

    return table


def _matches_table(trait: str, entries: List[MatchEntry]) -> Table:
    table = Table(title=f"{trait} matches")
    table.add_column("Word", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Weight", justify="right")
    table.add_column("Value", justify="right")

    for entry in entries:
        table.add_row(entry.word, str(entry.count), f"{entry.weight}", f"{entry.value}")

    return table


@app.command("analyze")
def analyze_text(
    text: Optional[str] = typer.Argument(None, help="Text to analyse"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read text from a file"),
    output: str = typer.Option("lex", "--output", "-o", help="lex, matches or full"),
    encoding: str = typer.Option("freq", "--encoding", "-e", help="binary, freq or percent"),
    locale: str = typer.Option("US", "--locale", "-l", help="US or GB spelling"),
    min_weight: Optional[float] = typer.Option(None, "--min", help="Exclusive lower weight bound"),
    max_weight: Optional[float] = typer.Option(None, "--max", help="Exclusive upper weight bound"),
    n_grams: str = typer.Option("2,3", "--ngrams", help="Comma-separated n-gram sizes, 0 to disable"),
    no_int: bool = typer.Option(False, "--no-int", help="Drop the trait intercepts"),
    places: int = typer.Option(9, "--places", "-p", help="Decimal places"),
    sort_by: str = typer.Option("freq", "--sort-by", "-s", help="freq, lex or weight"),
    wc_grams: bool = typer.Option(False, "--wc-grams", help="Count n-grams in the word count"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables"),
):
    """Analyse the dark triad of a string."""
    init_app()

    from darktriad.traits import analyze

    if file:
        try:
            text = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[red]Error: Could not read {escape(str(file))}: {escape(str(e))}[/red]")
            raise typer.Exit(1)
    elif text is None:
        console.print("[red]Error: Specify TEXT or --file[/red]")
        raise typer.Exit(1)

    result = analyze(
        text,
        {
            "output": output,
            "encoding": encoding,
            "locale": locale,
            "min": min_weight,
            "max": max_weight,
            "nGrams": n_grams,
            "noInt": no_int,
            "places": places,
            "sortBy": sort_by,
            "wcGrams": wc_grams,
        },
    )

    if result is None:
        console.print("[yellow]Nothing to analyse: no tokens found.[/yellow]")
        raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps(result.model_dump(mode="json")))
        return

    if isinstance(result, FullResult):
        scores, matches = result.values, result.matches
    elif isinstance(result, TraitMatches):
        scores, matches = None, result
    else:
        scores, matches = result, None

    if scores is not None:
        console.print(_scores_table(scores))
    if matches is not None:
        for trait in TraitMatches.model_fields:
            entries = getattr(matches, trait)
            if entries:
                console.print(_matches_table(trait, entries))
            else:
                console.print(f"[dim]{trait}: no matches[/dim]")


@app.command("lexicons")
def list_lexicons():
    """List the scored traits, their intercepts and lexicon sizes."""
    init_app()

    from darktriad.traits import get_lexicon_store, get_trait_catalog

    catalog = get_trait_catalog()
    store = get_lexicon_store()

    table = Table(title="Trait Lexica")
    table.add_column("Trait", style="cyan")
    table.add_column("Name")
    table.add_column("Intercept", justify="right")
    table.add_column("Entries", justify="right")

    for trait in catalog.get_all_traits():
        table.add_row(
            trait.id.value,
            trait.name,
            f"{trait.intercept}",
            str(len(store.get(trait.id))),
        )

    console.print(table)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
