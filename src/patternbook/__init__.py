"""Patternbook - a runnable catalog of the classic GoF design patterns.

Every pattern ships with a small demo that can be run on its own and
returns the lines it printed, so patterns can be explored from the CLI or
asserted on in tests.

Key modules:

- :mod:`patternbook.catalog` - Pattern registry and built-in catalog loading
- :mod:`patternbook.demos` - The 23 demos (creational, structural, behavioral)
- :mod:`patternbook.runner` - Look up, construct and run a demo
- :mod:`patternbook.reporter` - Format demo output for display
- :mod:`patternbook.cli` - Typer command line interface
"""

__version__ = "0.1.0"
