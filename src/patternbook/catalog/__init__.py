"""Pattern catalog: names, families and demo factories."""

from .models import Category, DemoFactory, PatternEntry
from .registry import PatternCatalog, load_builtin_catalog, normalize_name, register_pattern

__all__ = [
    "Category",
    "DemoFactory",
    "PatternCatalog",
    "PatternEntry",
    "load_builtin_catalog",
    "normalize_name",
    "register_pattern",
]
