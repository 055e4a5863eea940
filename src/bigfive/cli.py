"""Command-line interface for bigfive."""

import json
import sys
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from bigfive.config import get_settings
from bigfive.errors import LexiconError
from bigfive.traits.analyzer import TraitAnalyzer
from bigfive.traits.catalog import get_trait_catalog
from bigfive.traits.lexicon import Lexicon
from bigfive.traits.models import FullOutput, MatchRow, TraitScores
from bigfive.traits.options import AnalysisConfig
from bigfive.utils.logging import get_logger, setup_logging

app = typer.Typer(
    name="bigfive",
    help="Score text against weighted Big Five personality lexica",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


def init_app():
    """Initialize the application."""
    settings = get_settings()
    setup_logging(settings.log_level)


def parse_ngrams(value: str) -> List[int]:
    """Parse "2,3" into [2, 3]; "none" or "" means no n-grams."""
    value = value.strip().lower()
    if value in ("", "none", "0", "false"):
        return []
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise typer.BadParameter(f"Expected comma-separated integers, got {value!r}")


def load_lexicon(path: Optional[Path]) -> Lexicon:
    """Load a lexicon, exiting with an error message on failure."""
    try:
        return Lexicon.load_from_file(path)
    except LexiconError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def read_input(text: Optional[str], file: Optional[Path]) -> str:
    """Get input text from the argument, a file, or stdin."""
    if text is not None:
        return text
    if file is not None:
        try:
            return file.read_text(encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Error: cannot read {file}: {e}[/red]")
            raise typer.Exit(1)
    if not sys.stdin.isatty():
        return sys.stdin.read()

    console.print("[red]Error: Specify TEXT, --file, or pipe text on stdin[/red]")
    raise typer.Exit(1)


def scores_table(scores: TraitScores) -> Table:
    """Render trait scores as a table."""
    catalog = get_trait_catalog()
    table = Table(title="Trait Scores")
    table.add_column("Trait", style="cyan")
    table.add_column("Name")
    table.add_column("Score", justify="right")

    for trait_id, score in scores.as_dict().items():
        table.add_row(trait_id, catalog.get_name(trait_id), f"{score:g}")

    return table


def matches_table(trait_id: str, rows: List[MatchRow]) -> Table:
    """Render one trait's matches as a table."""
    name = get_trait_catalog().get_name(trait_id)
    table = Table(title=f"{name} Matches")
    table.add_column("Term", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Weight", justify="right")
    table.add_column("Lexical Value", justify="right")

    for row in rows:
        table.add_row(row.term, str(row.count), f"{row.weight:g}", f"{row.lexical_value:g}")

    return table


def to_jsonable(result) -> dict:
    """Convert any analysis result to plain JSON data."""
    if isinstance(result, (TraitScores, FullOutput)):
        return result.model_dump()
    return {trait_id: [row.model_dump() for row in rows] for trait_id, rows in result.items()}


@app.command("analyze")
def analyze_command(
    text: Optional[str] = typer.Argument(None, help="Text to analyze"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Path to a text file"),
    encoding: str = typer.Option(
        "binary", "--encoding", "-e", help="binary, frequency or percent"
    ),
    min_weight: Optional[float] = typer.Option(None, "--min", help="Drop terms weighted below this"),
    max_weight: Optional[float] = typer.Option(None, "--max", help="Drop terms weighted above this"),
    ngrams: str = typer.Option("2,3", "--ngrams", "-n", help='N-gram sizes, e.g. "2,3" or "none"'),
    wc_grams: bool = typer.Option(False, "--wc-grams", help="Count n-grams toward word count"),
    output: str = typer.Option("lex", "--output", "-o", help="lex, matches or full"),
    places: int = typer.Option(9, "--places", "-p", help="Decimal places to round to"),
    sort_by: str = typer.Option("freq", "--sort-by", "-s", help="freq, weight or lex"),
    locale: str = typer.Option("US", "--locale", "-l", help="US, or GB to translate spellings"),
    lexicon_path: Optional[Path] = typer.Option(None, "--lexicon", help="Lexicon JSON file"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables"),
):
    """Analyze text and print Big Five scores and/or matches."""
    init_app()

    try:
        config = AnalysisConfig(
            encoding=encoding,
            min_weight=min_weight,
            max_weight=max_weight,
            ngrams=parse_ngrams(ngrams),
            wc_grams=wc_grams,
            output=output,
            places=places,
            sort_by=sort_by,
            locale=locale,
        )
    except ValidationError as e:
        console.print(f"[red]Invalid options:[/red] {e}")
        raise typer.Exit(1)

    source = read_input(text, file)
    analyzer = TraitAnalyzer(lexicon=load_lexicon(lexicon_path), config=config)
    result = analyzer.analyze(source)

    if as_json:
        typer.echo(json.dumps(to_jsonable(result), indent=2))
        return

    if isinstance(result, TraitScores):
        console.print(scores_table(result))
        return

    if isinstance(result, FullOutput):
        console.print(scores_table(result.scores))
        result = result.matches

    for trait_id, rows in result.items():
        if rows:
            console.print(matches_table(trait_id, rows))
        else:
            console.print(f"[yellow]No {get_trait_catalog().get_name(trait_id)} matches[/yellow]")


@app.command("lexicon-info")
def lexicon_info(
    lexicon_path: Optional[Path] = typer.Option(None, "--lexicon", help="Lexicon JSON file"),
):
    """Show term counts and weight ranges for a lexicon."""
    init_app()

    lexicon = load_lexicon(lexicon_path)
    catalog = get_trait_catalog()

    table = Table(title="Lexicon")
    table.add_column("Trait", style="cyan")
    table.add_column("Terms", justify="right")
    table.add_column("N-grams", justify="right")
    table.add_column("Min Weight", justify="right")
    table.add_column("Max Weight", justify="right")
    table.add_column("Intercept", justify="right")

    for trait_id, stats in lexicon.stats().items():
        table.add_row(
            catalog.get_name(trait_id),
            str(stats.terms),
            str(stats.ngrams),
            "-" if stats.min_weight is None else f"{stats.min_weight:g}",
            "-" if stats.max_weight is None else f"{stats.max_weight:g}",
            f"{stats.intercept:g}",
        )

    console.print(table)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
