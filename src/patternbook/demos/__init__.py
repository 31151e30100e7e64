"""Runnable demos for the 23 GoF design patterns.

Each demo is a :class:`Demo` subclass recorded with ``@register_pattern``.
Modules are imported in catalog order: creational, structural, behavioral.
"""

# Import demo modules to trigger registration
from . import creational, structural, behavioral  # noqa: F401, I001
from .base import Demo

__all__ = ["Demo"]
