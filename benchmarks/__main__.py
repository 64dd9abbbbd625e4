"""Entry point for benchmarks CLI."""

from pathlib import Path
from typing import Annotated

import typer

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._pipeline import persist, run_pipeline
from ._registery import BENCHMARKS, CONSOLE

app = typer.Typer(help="Benchmarks for resultish developments.")


@app.command(name="list")
def list_benchmarks() -> None:
    """List registered benchmarks."""
    for b in BENCHMARKS:
        CONSOLE.print(f"{b.category}: {b.name}", style="cyan")


@app.command()
def run(
    *,
    debug: Annotated[
        bool, typer.Option("--dry", help="Don't persist results to disk.")
    ] = False,
    output: Annotated[
        Path | None, typer.Option("--output", help="ndjson file to write results to.")
    ] = None,
) -> None:
    """Run benchmarks and persist results."""
    CONSOLE.print("Running benchmarks...", style="bold blue")
    results = run_pipeline()
    CONSOLE.print(results)
    match debug:
        case True:
            CONSOLE.print("✓ Debug mode: results not persisted", style="bold yellow")
        case False:
            path = persist(results, output)
            CONSOLE.print(f"✓ Results written to {path}", style="bold green")


if __name__ == "__main__":
    app()
