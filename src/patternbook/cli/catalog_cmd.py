"""Catalog CLI commands: list, run and show."""

import logging
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from patternbook.catalog import PatternCatalog, load_builtin_catalog
from patternbook.config.schema import PatternbookConfig
from patternbook.exceptions import PatternbookError
from patternbook.reporter import Reporter, catalog_table, plain_listing, timing_line
from patternbook.runner import DemoRunner

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def _echo(text: str) -> None:
    """Print demo text as-is, without Rich markup, highlighting or wrapping."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _fail(error: Exception) -> NoReturn:
    err_console.print(f"[red]Error: {escape(str(error))}[/red]")
    raise typer.Exit(1) from None


def list_patterns(plain: bool = False, catalog: PatternCatalog | None = None) -> None:
    """Print every registered pattern grouped by category."""
    catalog = catalog if catalog is not None else load_builtin_catalog()

    if plain:
        for line in plain_listing(catalog):
            _echo(line)
        return

    console.print(catalog_table(catalog))
    console.print(f"[dim]{len(catalog)} patterns[/dim]")


def run_pattern(
    name: str,
    config: PatternbookConfig | None = None,
    catalog: PatternCatalog | None = None,
) -> None:
    """Run one demo and print its output."""
    config = config or PatternbookConfig()
    runner = DemoRunner(catalog)
    reporter = Reporter()

    try:
        result = runner.execute(name)
        output = reporter.render(result, config.output_format)
    except PatternbookError as e:
        logger.debug("Run of %r failed", name, exc_info=True)
        _fail(e)

    if output:
        _echo(output)
    if config.show_timing and config.output_format == "text":
        console.print(f"[dim]{escape(timing_line(result))}[/dim]")


def show_pattern(name: str, catalog: PatternCatalog | None = None) -> None:
    """Describe a pattern: family, intent and related patterns."""
    catalog = catalog if catalog is not None else load_builtin_catalog()

    try:
        entry = catalog.lookup(name)
    except PatternbookError as e:
        _fail(e)

    body = [f"[bold]Category:[/bold] {entry.category.value}"]
    if entry.summary:
        body.append(f"[bold]Intent:[/bold] {escape(entry.summary)}")
    if entry.related:
        body.append(f"[bold]Related:[/bold] {escape(', '.join(entry.related))}")

    console.print(Panel.fit(
        "\n".join(body),
        title=f"[bold cyan]{escape(entry.name)}[/bold cyan]",
        border_style="cyan",
    ))
