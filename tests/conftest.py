"""Pytest configuration and shared fixtures."""

import pytest

from patternbook.catalog import Category, PatternCatalog, load_builtin_catalog
from patternbook.demos.base import Demo
from patternbook.runner import DemoRunner


class EchoDemo(Demo):
    """Minimal demo used by catalog and runner tests."""

    def scenario(self) -> None:
        self.emit("hello")
        self.emit("world")


@pytest.fixture
def builtin_catalog() -> PatternCatalog:
    """Provide a fresh catalog with every built-in demo."""
    return load_builtin_catalog()


@pytest.fixture
def runner(builtin_catalog: PatternCatalog) -> DemoRunner:
    """Provide a runner over the built-in catalog."""
    return DemoRunner(builtin_catalog)


@pytest.fixture
def small_catalog() -> PatternCatalog:
    """Provide a two-entry catalog built from test demos."""
    catalog = PatternCatalog()
    catalog.register("Singleton", Category.CREATIONAL, EchoDemo, summary="one")
    catalog.register("Adapter", Category.STRUCTURAL, EchoDemo, related=("Bridge",))
    return catalog
