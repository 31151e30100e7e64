"""Creational pattern demos: Singleton, Factory Method, Abstract Factory,
Builder and Prototype."""

import copy
from dataclasses import dataclass, field
from typing import Any

from patternbook.catalog.models import Category
from patternbook.catalog.registry import register_pattern

from .base import Demo

# -- Singleton --


class AppSettings:
    """The object there should only be one of per scope."""

    def __init__(self) -> None:
        self.values: dict[str, Any] = {}


class ServiceScope:
    """Owns one instance per requested type.

    Stands in for a module-level singleton: the scope is created by the
    caller and passed around, so the single instance never outlives it.
    """

    def __init__(self) -> None:
        self._instances: dict[type, Any] = {}

    def get(self, cls: type) -> Any:
        if cls not in self._instances:
            self._instances[cls] = cls()
        return self._instances[cls]


@register_pattern(
    "Singleton",
    Category.CREATIONAL,
    summary="Ensure a class has only one instance and give a single point of access to it.",
    related=("Abstract Factory", "Builder", "Prototype", "Facade"),
)
class SingletonDemo(Demo):
    def scenario(self) -> None:
        scope = ServiceScope()
        first = scope.get(AppSettings)
        first.values["theme"] = "dark"
        second = scope.get(AppSettings)

        self.emit(f"first reference sets theme={first.values['theme']}")
        self.emit(f"second reference reads theme={second.values['theme']}")
        self.emit("Same instance" if first is second else "Different instances")

        other = ServiceScope().get(AppSettings)
        self.emit(f"a new scope gets a fresh instance: {other is not first}")


# -- Factory Method --


class Document:
    kind = "document"

    def open(self) -> str:
        return f"opened {self.kind}"


class TextDocument(Document):
    kind = "text document"


class Spreadsheet(Document):
    kind = "spreadsheet"


class Editor:
    """Creator: ``new_document`` is the factory method subclasses override."""

    def new_document(self) -> Document:
        raise NotImplementedError

    def create(self) -> str:
        doc = self.new_document()
        return f"{type(self).__name__} {doc.open()}"


class TextEditor(Editor):
    def new_document(self) -> Document:
        return TextDocument()


class SpreadsheetEditor(Editor):
    def new_document(self) -> Document:
        return Spreadsheet()


@register_pattern(
    "Factory Method",
    Category.CREATIONAL,
    summary="Let subclasses decide which class to instantiate.",
    related=("Abstract Factory", "Template Method", "Prototype"),
)
class FactoryMethodDemo(Demo):
    def scenario(self) -> None:
        for editor in (TextEditor(), SpreadsheetEditor()):
            self.emit(editor.create())


# -- Abstract Factory --


class Dog:
    def speak(self) -> str:
        return "woof"

    def __str__(self) -> str:
        return "Dog"


class Cat:
    def speak(self) -> str:
        return "meow"

    def __str__(self) -> str:
        return "Cat"


class DogFactory:
    def get_pet(self) -> Dog:
        return Dog()

    def get_food(self) -> str:
        return "dog food"


class CatFactory:
    def get_pet(self) -> Cat:
        return Cat()

    def get_food(self) -> str:
        return "cat food"


class PetShop:
    def __init__(self, factory: DogFactory | CatFactory) -> None:
        self.factory = factory

    def describe(self) -> list[str]:
        pet = self.factory.get_pet()
        return [
            f"This is a lovely {pet}",
            f"It says {pet.speak()}",
            f"It eats {self.factory.get_food()}",
        ]


@register_pattern(
    "Abstract Factory",
    Category.CREATIONAL,
    summary="Create families of related objects without naming their concrete classes.",
    related=("Factory Method", "Prototype", "Singleton"),
)
class AbstractFactoryDemo(Demo):
    def scenario(self) -> None:
        for factory in (DogFactory(), CatFactory()):
            for line in PetShop(factory).describe():
                self.emit(line)


# -- Builder --


@dataclass
class Computer:
    cpu: str = ""
    memory_gb: int = 0
    storage: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        disks = ", ".join(self.storage) or "no storage"
        return f"Computer(cpu={self.cpu}, memory={self.memory_gb}GB, storage={disks})"


class ComputerBuilder:
    def __init__(self) -> None:
        self._computer = Computer()

    def cpu(self, model: str) -> "ComputerBuilder":
        self._computer.cpu = model
        return self

    def memory(self, gb: int) -> "ComputerBuilder":
        self._computer.memory_gb = gb
        return self

    def disk(self, description: str) -> "ComputerBuilder":
        self._computer.storage.append(description)
        return self

    def build(self) -> Computer:
        computer, self._computer = self._computer, Computer()
        return computer


class Director:
    """Knows the build steps for the standard configurations."""

    def __init__(self, builder: ComputerBuilder) -> None:
        self.builder = builder

    def office(self) -> Computer:
        return self.builder.cpu("4-core").memory(8).disk("256GB SSD").build()

    def workstation(self) -> Computer:
        return (
            self.builder.cpu("16-core")
            .memory(64)
            .disk("1TB NVMe")
            .disk("4TB HDD")
            .build()
        )


@register_pattern(
    "Builder",
    Category.CREATIONAL,
    summary="Separate the construction of a complex object from its representation.",
    related=("Abstract Factory", "Composite"),
)
class BuilderDemo(Demo):
    def scenario(self) -> None:
        director = Director(ComputerBuilder())
        self.emit(f"office: {director.office()}")
        self.emit(f"workstation: {director.workstation()}")


# -- Prototype --


class PrototypeRegistry:
    """Named prototypes that are cloned instead of constructed."""

    def __init__(self) -> None:
        self._objects: dict[str, Any] = {}

    def register(self, name: str, obj: Any) -> None:
        self._objects[name] = obj

    def clone(self, name: str, **attrs: Any) -> Any:
        obj = copy.deepcopy(self._objects[name])
        obj.__dict__.update(attrs)
        return obj


class Shape:
    def __init__(self, kind: str, color: str, points: list[tuple[int, int]]) -> None:
        self.kind = kind
        self.color = color
        self.points = points

    def __str__(self) -> str:
        return f"{self.color} {self.kind} with {len(self.points)} points"


@register_pattern(
    "Prototype",
    Category.CREATIONAL,
    summary="Create new objects by copying a prototypical instance.",
    related=("Abstract Factory", "Composite", "Decorator"),
)
class PrototypeDemo(Demo):
    def scenario(self) -> None:
        registry = PrototypeRegistry()
        original = Shape("triangle", "red", [(0, 0), (1, 0), (0, 1)])
        registry.register("triangle", original)

        clone = registry.clone("triangle", color="blue")
        clone.points.append((1, 1))

        self.emit(f"prototype: {original}")
        self.emit(f"clone: {clone}")
        self.emit(f"clone is a separate object: {clone is not original}")
