"""Data types stored in the pattern catalog."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from patternbook.demos.base import Demo


class Category(str, Enum):
    """GoF pattern family."""

    CREATIONAL = "Creational"
    STRUCTURAL = "Structural"
    BEHAVIORAL = "Behavioral"


DemoFactory = Callable[[], "Demo"]


@dataclass(frozen=True)
class PatternEntry:
    """A registered pattern: its name, family and how to build its demo."""

    name: str
    category: Category
    factory: DemoFactory
    summary: str = ""
    related: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "category": self.category.value,
            "summary": self.summary,
            "related": list(self.related),
        }
