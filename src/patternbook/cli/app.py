"""Main CLI application using Typer."""

import logging
import sys

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from patternbook import __version__

# Create Typer app
app = typer.Typer(
    name="patternbook",
    help="Patternbook - run and browse the classic GoF design pattern demos",
    no_args_is_help=True,
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Patternbook command line."""
    _configure_logging(verbose)


@app.command()
def version():
    """Show patternbook version."""
    console.print(f"patternbook version {__version__}")


@app.command("list")
def list_cmd(
    plain: bool = typer.Option(
        False, "--plain", "-p", help="Print 'Category: name' lines instead of a table"
    ),
):
    """List all registered patterns grouped by category."""
    from patternbook.cli.catalog_cmd import list_patterns

    list_patterns(plain=plain)


@app.command()
def run(
    name: str = typer.Argument(..., help="Pattern name, e.g. 'Singleton' or 'factory-method'"),
    output_format: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Output format (text, json, yaml)",
    ),
    timing: bool = typer.Option(False, "--timing", "-t", help="Show how long the demo took"),
):
    """Run a pattern demo and print its output."""
    from patternbook.cli.catalog_cmd import run_pattern
    from patternbook.config.schema import PatternbookConfig
    from patternbook.exceptions import UnsupportedFormatError
    from patternbook.reporter import OUTPUT_FORMATS

    try:
        config = PatternbookConfig(output_format=output_format, show_timing=timing)
    except ValidationError:
        error = UnsupportedFormatError(output_format, OUTPUT_FORMATS)
        Console(stderr=True).print(f"[red]Error: {escape(str(error))}[/red]")
        raise typer.Exit(1) from None

    run_pattern(name, config=config)


@app.command()
def show(
    name: str = typer.Argument(..., help="Pattern name"),
):
    """Show the category, intent and related patterns of a pattern."""
    from patternbook.cli.catalog_cmd import show_pattern

    show_pattern(name)


def main():
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
