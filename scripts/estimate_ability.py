#!/usr/bin/env python
"""
Estimate a candidate's ability from a CSV of item responses.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from ability_service.core.data import load_csv_to_responses
from ability_service.irt import estimate_ability_detailed, target_difficulty

console = Console(force_terminal=True, legacy_windows=True)
app = typer.Typer()


@app.command()
def main(
    input_path: Path = typer.Argument(
        ...,
        help="Path to CSV file with one row per answered item "
        "(columns: is_correct, difficulty or difficulty_label, "
        "[discrimination], [guessing])",
    ),
    initial_ability: float = typer.Option(
        0.0,
        "-i",
        "--initial-ability",
        help="Starting value of theta for the Newton-Raphson search",
    ),
    output_path: Path | None = typer.Option(
        None,
        "-o",
        "--output",
        help="Optional path to write the estimate as JSON",
    ),
) -> None:
    """Estimate ability (theta) under the 3PL model."""

    # Validate input
    if not input_path.exists():
        console.print(f"[red]File not found: {input_path}[/red]")
        raise typer.Exit(1)
    if input_path.suffix != ".csv":
        console.print("[red]Only .csv files are supported[/red]")
        raise typer.Exit(1)

    console.print("[dim]Loading responses...[/dim]")
    try:
        responses = load_csv_to_responses(input_path)
    except ValueError as e:
        console.print(f"[red]Error loading CSV: {e}[/red]")
        raise typer.Exit(1) from e

    n_correct = sum(r.is_correct for r in responses)
    console.print(
        Panel(
            f"[bold]Estimate Ability[/bold]\n\n"
            f"Input: [cyan]{input_path}[/cyan]\n"
            f"Responses: [cyan]{len(responses)}[/cyan]\n"
            f"Correct: [cyan]{n_correct}[/cyan]\n"
            f"Initial ability: [cyan]{initial_ability}[/cyan]",
            title="Configuration",
        )
    )

    result = estimate_ability_detailed(responses, initial_ability)

    se = (
        f"{result.standard_error:.4f}"
        if result.standard_error is not None
        else "n/a"
    )
    console.print(
        Panel(
            f"Theta: [bold green]{result.theta:.4f}[/bold green]\n"
            f"Normalized: [cyan]{result.normalized_theta:.4f}[/cyan]\n"
            f"Standard error: [cyan]{se}[/cyan]\n"
            f"Status: [cyan]{result.convergence_status.value}[/cyan] "
            f"({result.n_iterations} iterations)\n"
            f"Next item difficulty: "
            f"[cyan]{target_difficulty(result.normalized_theta).value}[/cyan]",
            title="Estimate",
        )
    )

    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            f.write(result.model_dump_json(indent=4))
        console.print(f"[dim]Saved to {output_path}[/dim]")


if __name__ == "__main__":
    app()
