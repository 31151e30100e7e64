"""Pattern catalog and the decorator that records built-in demos.

Usage::

    from patternbook.catalog.registry import register_pattern, load_builtin_catalog

    @register_pattern("Observer", Category.BEHAVIORAL)
    class ObserverDemo(Demo):
        ...

    catalog = load_builtin_catalog()
    entry = catalog.lookup("observer")
"""

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from patternbook.exceptions import (
    DuplicatePatternError,
    InvalidPatternError,
    PatternNotFoundError,
)

from .models import Category, DemoFactory, PatternEntry

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s_\-]+")


def normalize_name(name: str) -> str:
    """Lookup key for *name*: case-folded, with spaces, hyphens and underscores unified."""
    return _SEPARATORS.sub(" ", name).strip().casefold()


class PatternCatalog:
    """Registry mapping pattern names to demo factories.

    Entries are kept in registration order. A catalog is filled once at
    start-up and only read afterwards, so it can be shared freely.
    """

    def __init__(self, entries: Iterable[PatternEntry] = ()) -> None:
        self._entries: dict[str, PatternEntry] = {}
        for entry in entries:
            self._add(entry)

    def register(
        self,
        name: str,
        category: Category,
        factory: DemoFactory,
        *,
        summary: str = "",
        related: Iterable[str] = (),
    ) -> PatternEntry:
        """Add a pattern to the catalog.

        Args:
            name: Display name, unique within the catalog
            category: Pattern family
            factory: Zero-argument callable returning a fresh demo
            summary: One-line intent of the pattern
            related: Names of patterns that are often compared with this one

        Returns:
            The stored entry

        Raises:
            InvalidPatternError: If the name is blank or the category is unknown
            DuplicatePatternError: If the name (after normalization) is taken
        """
        try:
            category = Category(category)
        except ValueError:
            raise InvalidPatternError(
                f"Unknown category {category!r} for pattern {name!r}"
            ) from None

        entry = PatternEntry(
            name=name,
            category=category,
            factory=factory,
            summary=summary,
            related=tuple(related),
        )
        self._add(entry)
        return entry

    def _add(self, entry: PatternEntry) -> None:
        key = normalize_name(entry.name)
        if not key:
            raise InvalidPatternError(f"Pattern name must not be blank: {entry.name!r}")
        if key in self._entries:
            raise DuplicatePatternError(entry.name)
        self._entries[key] = entry
        logger.debug("Registered pattern %r (%s)", entry.name, entry.category.value)

    def lookup(self, name: str) -> PatternEntry:
        """Return the entry registered under *name*.

        Raises:
            PatternNotFoundError: If nothing is registered under that name
        """
        try:
            return self._entries[normalize_name(name)]
        except KeyError:
            raise PatternNotFoundError(name, self.names()) from None

    def names(self) -> list[str]:
        """Registered names in registration order."""
        return [entry.name for entry in self._entries.values()]

    def entries(self) -> list[PatternEntry]:
        return list(self._entries.values())

    def grouped(self) -> dict[Category, list[str]]:
        """Names per category, categories in enum order, empty ones omitted."""
        groups: dict[Category, list[str]] = {}
        for category in Category:
            names = [e.name for e in self._entries.values() if e.category is category]
            if names:
                groups[category] = names
        return groups

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._entries

    def __iter__(self) -> Iterator[PatternEntry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)


@dataclass(frozen=True)
class _BuiltinDemo:
    name: str
    category: Category
    demo_cls: type
    summary: str
    related: tuple[str, ...]


_BUILTINS: list[_BuiltinDemo] = []


def register_pattern(
    name: str,
    category: Category,
    *,
    summary: str = "",
    related: Iterable[str] = (),
) -> Any:
    """Class decorator that records a built-in demo under *name*."""

    def decorator(cls: type) -> type:
        _BUILTINS.append(
            _BuiltinDemo(
                name=name,
                category=Category(category),
                demo_cls=cls,
                summary=summary,
                related=tuple(related),
            )
        )
        return cls

    return decorator


def load_builtin_catalog() -> PatternCatalog:
    """Build a new catalog holding every built-in demo.

    Raises:
        DuplicatePatternError: If two built-in demos share a name
    """
    # Importing the demos package fires the @register_pattern decorators
    import patternbook.demos  # noqa: F401

    catalog = PatternCatalog()
    for builtin in _BUILTINS:
        catalog.register(
            builtin.name,
            builtin.category,
            builtin.demo_cls,
            summary=builtin.summary,
            related=builtin.related,
        )
    logger.debug("Loaded %d built-in patterns", len(catalog))
    return catalog
