"""Formatting of demo output and catalog listings."""

import json
from collections.abc import Iterable

import yaml
from rich.table import Table

from patternbook.catalog import PatternCatalog
from patternbook.exceptions import UnsupportedFormatError
from patternbook.runner import DemoResult

OUTPUT_FORMATS = ("text", "json", "yaml")


class Reporter:
    """Turns captured demo lines into display text."""

    def format(self, lines: Iterable[str]) -> str:
        """Join *lines* with newlines. An empty sequence gives ``""``."""
        return "\n".join(lines)

    def render(self, result: DemoResult, output_format: str = "text") -> str:
        """Render a demo result as text, JSON or YAML.

        Raises:
            UnsupportedFormatError: If *output_format* is not one of ``OUTPUT_FORMATS``
        """
        if output_format == "text":
            return self.format(result.lines)
        if output_format == "json":
            return json.dumps(result.to_dict(), indent=2)
        if output_format == "yaml":
            return yaml.safe_dump(result.to_dict(), default_flow_style=False, sort_keys=False)
        raise UnsupportedFormatError(output_format, OUTPUT_FORMATS)


def _format_duration(ms: float) -> str:
    if ms < 1000:
        return f"{ms:.2f}ms"
    return f"{ms / 1000:.2f}s"


def timing_line(result: DemoResult) -> str:
    return f"{result.name} ran in {_format_duration(result.elapsed_ms)}"


def plain_listing(catalog: PatternCatalog) -> list[str]:
    """``Category: name`` lines, grouped by category."""
    return [
        f"{category.value}: {name}"
        for category, names in catalog.grouped().items()
        for name in names
    ]


def catalog_table(catalog: PatternCatalog) -> Table:
    """Rich table of the catalog, one row per pattern, grouped by category."""
    table = Table(title="Design Patterns", show_header=True, header_style="bold cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Pattern", style="bold")
    table.add_column("Intent", style="dim")

    for category, names in catalog.grouped().items():
        for index, name in enumerate(names):
            entry = catalog.lookup(name)
            table.add_row(category.value if index == 0 else "", name, entry.summary)
        table.add_section()

    return table
