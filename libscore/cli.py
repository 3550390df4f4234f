"""CLI interface for libscore."""

import json
import logging
from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from libscore.consts import SCORE_FAIR, SCORE_GOOD
from libscore.evaluators.quality import MAX_POSSIBLE_SCORE, MIN_POSSIBLE_SCORE, MODIFIERS
from libscore.evaluators.registry import EvaluatorRegistry
from libscore.models.common import _as_utc
from libscore.models.model_library import Library

app = typer.Typer(
    name="libscore",
    help="libscore - Quality and trending scores for package directory entries",
)

console = Console()


def _get_score_color(score: float) -> str:
    """Get color for score display."""
    if score >= SCORE_GOOD:
        return "green"
    elif score >= SCORE_FAIR:
        return "yellow"
    else:
        return "red"


def _truncate(text: str, max_len: int = 60) -> str:
    """Truncate text with ellipsis."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def load_libraries(path: Path) -> list[Library]:
    """Load library records from a JSON file.

    Accepts either a list of records or an object with a "libraries" list.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the JSON is invalid or a record fails validation.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict) and "libraries" in data:
        data = data["libraries"]
    if not isinstance(data, list):
        msg = "Expected a list of libraries or an object with a 'libraries' list"
        raise ValueError(msg)
    return [Library.model_validate(item) for item in data]


@app.command()
def score(
    input_path: Path = typer.Argument(..., help="JSON file with library records"),
    output: str = typer.Option(None, "--output", "-o", help="Write scored records to this JSON file"),
    now: str = typer.Option(
        None, "--now", help="Reference time in ISO 8601 (defaults to current time)"
    ),
    limit: int = typer.Option(None, "--limit", "-l", help="Only score the first N records"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Compute quality and trending scores for library records."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    current_time = None
    if now:
        try:
            current_time = _as_utc(datetime.fromisoformat(now))
        except ValueError:
            console.print(f"[red]Error:[/red] Invalid --now value '{escape(now)}'. Use ISO 8601.")
            raise typer.Exit(1)

    try:
        libraries = load_libraries(input_path)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] Could not load {input_path}: {escape(str(e))}")
        raise typer.Exit(1)

    if limit:
        libraries = libraries[:limit]

    if not libraries:
        console.print("[yellow]No libraries found.[/yellow]")
        return

    registry = EvaluatorRegistry()
    scored = registry.evaluate_batch(libraries, current_time)

    table = Table(title=f"Scores ({len(scored)} libraries)")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Score", justify="right")
    table.add_column("Popularity", justify="right", style="magenta")
    table.add_column("Modifiers", style="dim")

    for library in scored:
        score_color = _get_score_color(library.score or 0)
        table.add_row(
            _truncate(library.display_name, 40),
            f"[{score_color}]{library.score}[/{score_color}]",
            f"{library.popularity:.3f}",
            ", ".join(library.matching_score_modifiers or []),
        )

    console.print(table)

    if output:
        output_path = Path(output)
        data = [library.model_dump(mode="json", by_alias=True) for library in scored]
        try:
            output_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Error writing output:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        console.print(f"[green]Wrote {len(scored)} scored libraries to {output_path}[/green]")


@app.command()
def modifiers() -> None:
    """Show the quality score modifier table."""
    table = Table(title="Quality Score Modifiers")
    table.add_column("Modifier", style="cyan")
    table.add_column("Value", justify="right")

    for modifier in MODIFIERS:
        color = "green" if modifier.value > 0 else "red"
        table.add_row(modifier.name, f"[{color}]{modifier.value:+d}[/{color}]")

    console.print(table)
    console.print(f"\nRaw score range: {MIN_POSSIBLE_SCORE} to {MAX_POSSIBLE_SCORE}")


if __name__ == "__main__":
    app()
