"""Demo runner: look a pattern up, build its demo and run it."""

import logging
import time
from dataclasses import dataclass, field
from typing import Any

from patternbook.catalog import Category, PatternCatalog, load_builtin_catalog
from patternbook.exceptions import DemoConstructionError

logger = logging.getLogger(__name__)


@dataclass
class DemoResult:
    """Output of one demo run."""

    name: str
    category: Category
    lines: list[str] = field(default_factory=list)
    elapsed_ms: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "category": self.category.value,
            "lines": list(self.lines),
            "elapsed_ms": round(self.elapsed_ms, 3),
        }


class DemoRunner:
    """Runs demos from a catalog.

    The runner keeps no state between calls: each run builds a new demo
    instance from the entry's factory.
    """

    def __init__(self, catalog: PatternCatalog | None = None) -> None:
        self.catalog = catalog if catalog is not None else load_builtin_catalog()

    def run(self, name: str) -> list[str]:
        """Run the demo registered under *name* and return its output lines.

        Raises:
            PatternNotFoundError: If *name* is not in the catalog
            DemoConstructionError: If the demo factory fails
        """
        return self.execute(name).lines

    def execute(self, name: str) -> DemoResult:
        """Like :meth:`run`, but also report the category and elapsed time."""
        entry = self.catalog.lookup(name)

        try:
            demo = entry.factory()
        except Exception as e:
            logger.debug("Factory for %r failed: %s", entry.name, e)
            raise DemoConstructionError(entry.name, e) from e

        start = time.perf_counter()
        lines = demo.run()
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug("Ran %r: %d lines in %.3fms", entry.name, len(lines), elapsed_ms)

        return DemoResult(
            name=entry.name,
            category=entry.category,
            lines=lines,
            elapsed_ms=elapsed_ms,
        )

    def run_all(self) -> list[DemoResult]:
        """Run every registered demo in catalog order."""
        return [self.execute(entry.name) for entry in self.catalog]
