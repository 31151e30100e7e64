"""Behavioral pattern demos."""

import copy
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from patternbook.catalog.models import Category
from patternbook.catalog.registry import register_pattern

from .base import Demo

# -- Chain of Responsibility --


class Handler:
    def __init__(self, successor: "Handler | None" = None) -> None:
        self.successor = successor

    def handle(self, amount: int) -> str:
        if self.can_handle(amount):
            return f"{amount} approved by {type(self).__name__}"
        if self.successor is None:
            return f"{amount} rejected: nobody can approve it"
        return self.successor.handle(amount)

    def can_handle(self, amount: int) -> bool:
        raise NotImplementedError


class TeamLead(Handler):
    def can_handle(self, amount: int) -> bool:
        return amount <= 1_000


class Manager(Handler):
    def can_handle(self, amount: int) -> bool:
        return amount <= 10_000


class Director(Handler):
    def can_handle(self, amount: int) -> bool:
        return amount <= 100_000


@register_pattern(
    "Chain of Responsibility",
    Category.BEHAVIORAL,
    summary="Pass a request along a chain of handlers until one handles it.",
    related=("Composite", "Command"),
)
class ChainOfResponsibilityDemo(Demo):
    def scenario(self) -> None:
        chain = TeamLead(Manager(Director()))
        for amount in (500, 5_000, 50_000, 500_000):
            self.emit(chain.handle(amount))


# -- Command --


class Light:
    def __init__(self) -> None:
        self.level = 0


@dataclass
class Dim:
    light: Light
    level: int
    _previous: int = 0

    def execute(self) -> None:
        self._previous = self.light.level
        self.light.level = self.level

    def undo(self) -> None:
        self.light.level = self._previous


class RemoteControl:
    """Invoker: runs commands and keeps the history for undo."""

    def __init__(self) -> None:
        self.history: list[Dim] = []

    def submit(self, command: Dim) -> None:
        command.execute()
        self.history.append(command)

    def undo(self) -> None:
        if self.history:
            self.history.pop().undo()


@register_pattern(
    "Command",
    Category.BEHAVIORAL,
    summary="Encapsulate a request as an object so it can be queued, logged or undone.",
    related=("Composite", "Memento", "Prototype"),
)
class CommandDemo(Demo):
    def scenario(self) -> None:
        light = Light()
        remote = RemoteControl()
        for level in (30, 80):
            remote.submit(Dim(light, level))
            self.emit(f"execute: light at {light.level}%")
        remote.undo()
        self.emit(f"undo: light at {light.level}%")
        remote.undo()
        self.emit(f"undo: light at {light.level}%")


# -- Interpreter --


class Expression:
    def interpret(self, env: dict[str, int]) -> int:
        raise NotImplementedError


@dataclass
class Number(Expression):
    value: int

    def interpret(self, env: dict[str, int]) -> int:
        return self.value


@dataclass
class Variable(Expression):
    name: str

    def interpret(self, env: dict[str, int]) -> int:
        return env[self.name]


@dataclass
class Add(Expression):
    left: Expression
    right: Expression

    def interpret(self, env: dict[str, int]) -> int:
        return self.left.interpret(env) + self.right.interpret(env)


@dataclass
class Subtract(Expression):
    left: Expression
    right: Expression

    def interpret(self, env: dict[str, int]) -> int:
        return self.left.interpret(env) - self.right.interpret(env)


_TOKEN = re.compile(r"\s*(\d+|[a-z]+|[+-])")


def parse(source: str) -> Expression:
    """Parse a left-associative ``+``/``-`` expression of numbers and names.

    Raises ValueError if *source* holds no tokens.
    """
    tokens = _TOKEN.findall(source)
    if not tokens:
        raise ValueError(f"Empty expression: {source!r}")

    def operand(token: str) -> Expression:
        return Number(int(token)) if token.isdigit() else Variable(token)

    tree = operand(tokens[0])
    for op, token in zip(tokens[1::2], tokens[2::2]):
        node = Add if op == "+" else Subtract
        tree = node(tree, operand(token))
    return tree


@register_pattern(
    "Interpreter",
    Category.BEHAVIORAL,
    summary="Represent a grammar as classes and evaluate sentences in it.",
    related=("Composite", "Flyweight", "Iterator", "Visitor"),
)
class InterpreterDemo(Demo):
    def scenario(self) -> None:
        env = {"x": 5, "y": 3}
        for source in ("x + 10 - y", "100 - x - x"):
            self.emit(f"{source} = {parse(source).interpret(env)} with x=5, y=3")


# -- Iterator --


class Playlist:
    def __init__(self, songs: list[str]) -> None:
        self._songs = songs

    def __iter__(self) -> Iterator[str]:
        return iter(self._songs)

    def reverse(self) -> Iterator[str]:
        index = len(self._songs)
        while index > 0:
            index -= 1
            yield self._songs[index]


@register_pattern(
    "Iterator",
    Category.BEHAVIORAL,
    summary="Access the elements of an aggregate sequentially without exposing its structure.",
    related=("Composite", "Factory Method", "Memento"),
)
class IteratorDemo(Demo):
    def scenario(self) -> None:
        playlist = Playlist(["intro", "verse", "chorus"])
        self.emit("forward: " + ", ".join(playlist))
        self.emit("reverse: " + ", ".join(playlist.reverse()))


# -- Mediator --


class ChatRoom:
    """Mediator: members only talk to the room, never to each other."""

    def __init__(self, log: Callable[[str], None]) -> None:
        self._members: list[Member] = []
        self._log = log

    def join(self, member: "Member") -> None:
        self._members.append(member)
        member.room = self

    def broadcast(self, sender: "Member", message: str) -> None:
        for member in self._members:
            if member is not sender:
                self._log(f"{member.name} got {message!r} from {sender.name}")


class Member:
    def __init__(self, name: str) -> None:
        self.name = name
        self.room: ChatRoom | None = None

    def send(self, message: str) -> None:
        if self.room is not None:
            self.room.broadcast(self, message)


@register_pattern(
    "Mediator",
    Category.BEHAVIORAL,
    summary="Define an object that encapsulates how a set of objects interact.",
    related=("Facade", "Observer"),
)
class MediatorDemo(Demo):
    def scenario(self) -> None:
        room = ChatRoom(self.emit)
        alice, bob, carol = Member("alice"), Member("bob"), Member("carol")
        for member in (alice, bob, carol):
            room.join(member)
        alice.send("hi all")
        carol.send("hello")


# -- Memento --


@dataclass
class Editor:
    text: str = ""
    cursor: int = 0

    def write(self, words: str) -> None:
        self.text += words
        self.cursor = len(self.text)

    def save(self) -> "Snapshot":
        return Snapshot(copy.deepcopy(vars(self)))

    def restore(self, snapshot: "Snapshot") -> None:
        for name, value in snapshot.state.items():
            setattr(self, name, copy.deepcopy(value))


@dataclass(frozen=True)
class Snapshot:
    state: dict[str, object] = field(default_factory=dict)


@register_pattern(
    "Memento",
    Category.BEHAVIORAL,
    summary="Capture and restore an object's internal state without breaking encapsulation.",
    related=("Command", "Iterator"),
)
class MementoDemo(Demo):
    def scenario(self) -> None:
        editor = Editor()
        editor.write("Hello")
        checkpoint = editor.save()
        self.emit(f"saved: {editor.text!r} (cursor {editor.cursor})")
        editor.write(", world!!!")
        self.emit(f"edited: {editor.text!r} (cursor {editor.cursor})")
        editor.restore(checkpoint)
        self.emit(f"restored: {editor.text!r} (cursor {editor.cursor})")


# -- Observer --


class WeatherStation:
    """Subject that notifies observers in the order they were attached."""

    def __init__(self) -> None:
        self._observers: list[Display] = []
        self.temperature = 0

    def attach(self, observer: "Display") -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: "Display") -> None:
        self._observers.remove(observer)

    def set_temperature(self, value: int) -> None:
        self.temperature = value
        for observer in self._observers:
            observer.update(self)


class Display:
    def __init__(self, name: str, log: Callable[[str], None]) -> None:
        self.name = name
        self._log = log

    def update(self, station: WeatherStation) -> None:
        self._log(f"{self.name} notified: temperature={station.temperature}")


@register_pattern(
    "Observer",
    Category.BEHAVIORAL,
    summary="Notify all dependents automatically when an object changes state.",
    related=("Mediator", "Singleton"),
)
class ObserverDemo(Demo):
    def scenario(self) -> None:
        station = WeatherStation()
        station.attach(Display("phone", self.emit))
        station.attach(Display("dashboard", self.emit))
        station.set_temperature(21)


# -- State --


class TrafficLightState:
    name = ""
    duration = 0

    def next(self) -> "TrafficLightState":
        raise NotImplementedError


class Green(TrafficLightState):
    name = "green"
    duration = 30

    def next(self) -> TrafficLightState:
        return Yellow()


class Yellow(TrafficLightState):
    name = "yellow"
    duration = 5

    def next(self) -> TrafficLightState:
        return Red()


class Red(TrafficLightState):
    name = "red"
    duration = 20

    def next(self) -> TrafficLightState:
        return Green()


class TrafficLight:
    def __init__(self) -> None:
        self.state: TrafficLightState = Red()

    def tick(self) -> str:
        self.state = self.state.next()
        return f"light is {self.state.name} for {self.state.duration}s"


@register_pattern(
    "State",
    Category.BEHAVIORAL,
    summary="Let an object change its behavior when its internal state changes.",
    related=("Flyweight", "Singleton", "Strategy"),
)
class StateDemo(Demo):
    def scenario(self) -> None:
        light = TrafficLight()
        for _ in range(4):
            self.emit(light.tick())


# -- Strategy --


def by_distance(route: dict[str, int]) -> int:
    return route["km"]


def by_duration(route: dict[str, int]) -> int:
    return route["minutes"]


def by_tolls(route: dict[str, int]) -> int:
    return route["tolls"]


class Navigator:
    def __init__(self, strategy: Callable[[dict[str, int]], int]) -> None:
        self.strategy = strategy

    def best(self, routes: dict[str, dict[str, int]]) -> str:
        return min(routes, key=lambda name: self.strategy(routes[name]))


@register_pattern(
    "Strategy",
    Category.BEHAVIORAL,
    summary="Define a family of interchangeable algorithms and select one at run time.",
    related=("Flyweight", "State", "Template Method"),
)
class StrategyDemo(Demo):
    ROUTES = {
        "highway": {"km": 120, "minutes": 70, "tolls": 8},
        "coast road": {"km": 95, "minutes": 110, "tolls": 0},
        "mountain pass": {"km": 80, "minutes": 95, "tolls": 3},
    }

    def scenario(self) -> None:
        navigator = Navigator(by_distance)
        for strategy in (by_distance, by_duration, by_tolls):
            navigator.strategy = strategy
            self.emit(f"{strategy.__name__}: take the {navigator.best(self.ROUTES)}")


# -- Template Method --


class Report:
    """``render`` fixes the skeleton; subclasses fill in the steps."""

    def render(self, rows: list[tuple[str, int]]) -> list[str]:
        return [self.header(), *(self.row(name, value) for name, value in rows), self.footer(rows)]

    def header(self) -> str:
        raise NotImplementedError

    def row(self, name: str, value: int) -> str:
        raise NotImplementedError

    def footer(self, rows: list[tuple[str, int]]) -> str:
        return f"total: {sum(value for _, value in rows)}"


class CsvReport(Report):
    def header(self) -> str:
        return "name,value"

    def row(self, name: str, value: int) -> str:
        return f"{name},{value}"


class MarkdownReport(Report):
    def header(self) -> str:
        return "| name | value |"

    def row(self, name: str, value: int) -> str:
        return f"| {name} | {value} |"

    def footer(self, rows: list[tuple[str, int]]) -> str:
        return f"**{super().footer(rows)}**"


@register_pattern(
    "Template Method",
    Category.BEHAVIORAL,
    summary="Define the skeleton of an algorithm and defer some steps to subclasses.",
    related=("Factory Method", "Strategy"),
)
class TemplateMethodDemo(Demo):
    def scenario(self) -> None:
        rows = [("apples", 3), ("pears", 5)]
        for report in (CsvReport(), MarkdownReport()):
            for line in report.render(rows):
                self.emit(line)


# -- Visitor --


@dataclass
class Circle:
    radius: float

    def accept(self, visitor: "ShapeVisitor") -> str:
        return visitor.visit_circle(self)


@dataclass
class Rectangle:
    width: float
    height: float

    def accept(self, visitor: "ShapeVisitor") -> str:
        return visitor.visit_rectangle(self)


class ShapeVisitor:
    def visit_circle(self, shape: Circle) -> str:
        raise NotImplementedError

    def visit_rectangle(self, shape: Rectangle) -> str:
        raise NotImplementedError


class AreaVisitor(ShapeVisitor):
    def visit_circle(self, shape: Circle) -> str:
        return f"circle area {3.14159 * shape.radius ** 2:.2f}"

    def visit_rectangle(self, shape: Rectangle) -> str:
        return f"rectangle area {shape.width * shape.height:.2f}"


class SvgVisitor(ShapeVisitor):
    def visit_circle(self, shape: Circle) -> str:
        return f'<circle r="{shape.radius:g}"/>'

    def visit_rectangle(self, shape: Rectangle) -> str:
        return f'<rect width="{shape.width:g}" height="{shape.height:g}"/>'


@register_pattern(
    "Visitor",
    Category.BEHAVIORAL,
    summary="Add operations to an object structure without changing its classes.",
    related=("Composite", "Interpreter"),
)
class VisitorDemo(Demo):
    def scenario(self) -> None:
        shapes = [Circle(1.5), Rectangle(2, 4)]
        for visitor in (AreaVisitor(), SvgVisitor()):
            for shape in shapes:
                self.emit(shape.accept(visitor))
