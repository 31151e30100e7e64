"""Structural pattern demos."""

from collections.abc import Callable

from patternbook.catalog.models import Category
from patternbook.catalog.registry import register_pattern

from .base import Demo

# -- Adapter --


class EuropeanSocket:
    def voltage(self) -> int:
        return 230

    def live(self) -> int:
        return 1


class USPlug:
    """Interface the client expects."""

    def volts(self) -> int:
        raise NotImplementedError


class SocketAdapter(USPlug):
    def __init__(self, socket: EuropeanSocket) -> None:
        self.socket = socket

    def volts(self) -> int:
        # step-down transformer
        return self.socket.voltage() // 2


@register_pattern(
    "Adapter",
    Category.STRUCTURAL,
    summary="Convert the interface of a class into another interface clients expect.",
    related=("Bridge", "Decorator", "Proxy"),
)
class AdapterDemo(Demo):
    def scenario(self) -> None:
        socket = EuropeanSocket()
        self.emit(f"socket supplies {socket.voltage()}V")
        plug = SocketAdapter(socket)
        self.emit(f"adapter delivers {plug.volts()}V to the US device")


# -- Bridge --


class DrawingAPI:
    name = "api"

    def circle(self, x: float, y: float, radius: float) -> str:
        return f"{self.name}.circle at {x:g}:{y:g} radius {radius:g}"


class VectorAPI(DrawingAPI):
    name = "vector"


class RasterAPI(DrawingAPI):
    name = "raster"


class Circle:
    """Abstraction side; the drawing side is injected."""

    def __init__(self, x: float, y: float, radius: float, api: DrawingAPI) -> None:
        self.x = x
        self.y = y
        self.radius = radius
        self.api = api

    def draw(self) -> str:
        return self.api.circle(self.x, self.y, self.radius)

    def scale(self, factor: float) -> None:
        self.radius *= factor


@register_pattern(
    "Bridge",
    Category.STRUCTURAL,
    summary="Decouple an abstraction from its implementation so both can vary.",
    related=("Abstract Factory", "Adapter"),
)
class BridgeDemo(Demo):
    def scenario(self) -> None:
        shapes = [Circle(1, 2, 3, VectorAPI()), Circle(5, 7, 11, RasterAPI())]
        for shape in shapes:
            shape.scale(2.5)
            self.emit(shape.draw())


# -- Composite --


class Node:
    def __init__(self, name: str, size: int = 0) -> None:
        self.name = name
        self._size = size
        self.children: list[Node] = []

    def add(self, child: "Node") -> "Node":
        self.children.append(child)
        return child

    def size(self) -> int:
        return self._size + sum(child.size() for child in self.children)

    def render(self, depth: int = 0) -> list[str]:
        lines = [f"{'  ' * depth}{self.name} ({self.size()})"]
        for child in self.children:
            lines.extend(child.render(depth + 1))
        return lines


@register_pattern(
    "Composite",
    Category.STRUCTURAL,
    summary="Compose objects into trees and treat single objects and groups uniformly.",
    related=("Chain of Responsibility", "Decorator", "Flyweight", "Iterator", "Visitor"),
)
class CompositeDemo(Demo):
    def scenario(self) -> None:
        root = Node("project")
        src = root.add(Node("src"))
        src.add(Node("main.py", 120))
        src.add(Node("util.py", 40))
        root.add(Node("README.md", 15))
        for line in root.render():
            self.emit(line)


# -- Decorator --


class Coffee:
    def cost(self) -> float:
        return 2.0

    def description(self) -> str:
        return "coffee"


class CoffeeDecorator(Coffee):
    extra = 0.0
    label = ""

    def __init__(self, inner: Coffee) -> None:
        self.inner = inner

    def cost(self) -> float:
        return self.inner.cost() + self.extra

    def description(self) -> str:
        return f"{self.inner.description()} + {self.label}"


class Milk(CoffeeDecorator):
    extra = 0.5
    label = "milk"


class Caramel(CoffeeDecorator):
    extra = 0.75
    label = "caramel"


@register_pattern(
    "Decorator",
    Category.STRUCTURAL,
    summary="Attach additional responsibilities to an object dynamically.",
    related=("Adapter", "Composite", "Strategy"),
)
class DecoratorDemo(Demo):
    def scenario(self) -> None:
        drink: Coffee = Coffee()
        self.emit(f"{drink.description()}: ${drink.cost():.2f}")
        drink = Caramel(Milk(drink))
        self.emit(f"{drink.description()}: ${drink.cost():.2f}")


# -- Facade --


class CPU:
    def freeze(self) -> str:
        return "cpu: freeze"

    def jump(self, address: int) -> str:
        return f"cpu: jump to {address:#06x}"

    def execute(self) -> str:
        return "cpu: execute"


class Memory:
    def load(self, address: int, data: str) -> str:
        return f"memory: load {data!r} at {address:#06x}"


class HardDrive:
    def read(self, sector: int, size: int) -> str:
        return f"boot sector {sector}/{size}"


class ComputerFacade:
    BOOT_ADDRESS = 0x7C00

    def __init__(self) -> None:
        self.cpu = CPU()
        self.memory = Memory()
        self.drive = HardDrive()

    def start(self) -> list[str]:
        data = self.drive.read(0, 512)
        return [
            self.cpu.freeze(),
            self.memory.load(self.BOOT_ADDRESS, data),
            self.cpu.jump(self.BOOT_ADDRESS),
            self.cpu.execute(),
        ]


@register_pattern(
    "Facade",
    Category.STRUCTURAL,
    summary="Provide a single simplified interface to a set of interfaces in a subsystem.",
    related=("Abstract Factory", "Mediator", "Singleton"),
)
class FacadeDemo(Demo):
    def scenario(self) -> None:
        for line in ComputerFacade().start():
            self.emit(line)


# -- Flyweight --


class Glyph:
    """Intrinsic state only; position is supplied by the caller."""

    def __init__(self, char: str, font: str) -> None:
        self.char = char
        self.font = font

    def draw(self, x: int) -> str:
        return f"{self.char}@{x}"


class GlyphFactory:
    def __init__(self) -> None:
        self._pool: dict[tuple[str, str], Glyph] = {}

    def get(self, char: str, font: str = "mono") -> Glyph:
        key = (char, font)
        if key not in self._pool:
            self._pool[key] = Glyph(char, font)
        return self._pool[key]

    def __len__(self) -> int:
        return len(self._pool)


@register_pattern(
    "Flyweight",
    Category.STRUCTURAL,
    summary="Share fine-grained objects to support large numbers of them efficiently.",
    related=("Composite", "State", "Strategy"),
)
class FlyweightDemo(Demo):
    def scenario(self) -> None:
        factory = GlyphFactory()
        text = "abracadabra"
        glyphs = [factory.get(char) for char in text]
        self.emit(" ".join(glyph.draw(x) for x, glyph in enumerate(glyphs)))
        self.emit(f"{len(text)} characters drawn with {len(factory)} shared glyphs")
        self.emit(f"first and last 'a' share one object: {glyphs[0] is glyphs[-1]}")


# -- Proxy --


class Image:
    def __init__(self, filename: str, log: Callable[[str], None]) -> None:
        self.filename = filename
        log(f"loading {filename} from disk")

    def display(self) -> str:
        return f"displaying {self.filename}"


class LazyImage:
    """Virtual proxy: defers the expensive load until first use."""

    def __init__(self, filename: str, log: Callable[[str], None]) -> None:
        self.filename = filename
        self._log = log
        self._image: Image | None = None

    def display(self) -> str:
        if self._image is None:
            self._image = Image(self.filename, self._log)
        return self._image.display()


@register_pattern(
    "Proxy",
    Category.STRUCTURAL,
    summary="Provide a surrogate that controls access to another object.",
    related=("Adapter", "Decorator"),
)
class ProxyDemo(Demo):
    def scenario(self) -> None:
        image = LazyImage("photo.png", self.emit)
        self.emit("proxy created, nothing loaded yet")
        self.emit(image.display())
        self.emit(image.display())
