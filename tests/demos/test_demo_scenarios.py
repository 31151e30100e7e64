"""Tests for the built-in pattern demos."""

import pytest

from patternbook.demos.base import Demo
from patternbook.demos.behavioral import WeatherStation, parse
from patternbook.demos.creational import AppSettings, ComputerBuilder, ServiceScope
from patternbook.demos.structural import GlyphFactory, LazyImage


class TestDemoBase:
    def test_scenario_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Demo().run()

    def test_run_returns_a_copy_and_resets(self):
        class Counting(Demo):
            def scenario(self) -> None:
                self.emit("one")

        demo = Counting()
        first = demo.run()
        first.append("mutated")
        assert demo.run() == ["one"]


class TestEveryDemo:
    def test_every_demo_produces_output(self, builtin_catalog, runner):
        for name in builtin_catalog.names():
            lines = runner.run(name)
            assert lines, f"{name} produced no output"
            assert all(isinstance(line, str) for line in lines)

    def test_runs_are_repeatable(self, builtin_catalog, runner):
        for name in builtin_catalog.names():
            assert runner.run(name) == runner.run(name), name


class TestCreational:
    def test_singleton_reports_same_instance(self, runner):
        lines = runner.run("Singleton")
        assert "Same instance" in lines
        assert lines == [
            "first reference sets theme=dark",
            "second reference reads theme=dark",
            "Same instance",
            "a new scope gets a fresh instance: True",
        ]

    def test_service_scope_is_per_scope(self):
        scope = ServiceScope()
        assert scope.get(AppSettings) is scope.get(AppSettings)
        assert ServiceScope().get(AppSettings) is not scope.get(AppSettings)

    def test_factory_method(self, runner):
        assert runner.run("Factory Method") == [
            "TextEditor opened text document",
            "SpreadsheetEditor opened spreadsheet",
        ]

    def test_abstract_factory(self, runner):
        assert runner.run("Abstract Factory") == [
            "This is a lovely Dog",
            "It says woof",
            "It eats dog food",
            "This is a lovely Cat",
            "It says meow",
            "It eats cat food",
        ]

    def test_builder(self, runner):
        assert runner.run("Builder") == [
            "office: Computer(cpu=4-core, memory=8GB, storage=256GB SSD)",
            "workstation: Computer(cpu=16-core, memory=64GB, storage=1TB NVMe, 4TB HDD)",
        ]

    def test_builder_resets_after_build(self):
        builder = ComputerBuilder()
        builder.cpu("8-core").disk("SSD").build()
        assert str(builder.build()) == "Computer(cpu=, memory=0GB, storage=no storage)"

    def test_prototype_clone_is_independent(self, runner):
        assert runner.run("Prototype") == [
            "prototype: red triangle with 3 points",
            "clone: blue triangle with 4 points",
            "clone is a separate object: True",
        ]


class TestStructural:
    def test_adapter(self, runner):
        assert runner.run("Adapter") == [
            "socket supplies 230V",
            "adapter delivers 115V to the US device",
        ]

    def test_bridge(self, runner):
        assert runner.run("Bridge") == [
            "vector.circle at 1:2 radius 7.5",
            "raster.circle at 5:7 radius 27.5",
        ]

    def test_composite_sizes_roll_up(self, runner):
        assert runner.run("Composite") == [
            "project (175)",
            "  src (160)",
            "    main.py (120)",
            "    util.py (40)",
            "  README.md (15)",
        ]

    def test_decorator(self, runner):
        assert runner.run("Decorator") == [
            "coffee: $2.00",
            "coffee + milk + caramel: $3.25",
        ]

    def test_facade(self, runner):
        assert runner.run("Facade") == [
            "cpu: freeze",
            "memory: load 'boot sector 0/512' at 0x7c00",
            "cpu: jump to 0x7c00",
            "cpu: execute",
        ]

    def test_flyweight_shares_glyphs(self, runner):
        lines = runner.run("Flyweight")
        assert lines[1] == "11 characters drawn with 5 shared glyphs"
        assert lines[2] == "first and last 'a' share one object: True"

    def test_glyph_factory_pool(self):
        factory = GlyphFactory()
        assert factory.get("a") is factory.get("a")
        assert factory.get("a") is not factory.get("a", font="serif")
        assert len(factory) == 2

    def test_proxy_loads_once(self, runner):
        assert runner.run("Proxy") == [
            "proxy created, nothing loaded yet",
            "loading photo.png from disk",
            "displaying photo.png",
            "displaying photo.png",
        ]

    def test_lazy_image_defers_load(self):
        log: list[str] = []
        image = LazyImage("a.png", log.append)
        assert log == []
        image.display()
        image.display()
        assert log == ["loading a.png from disk"]


class TestBehavioral:
    def test_chain_of_responsibility(self, runner):
        assert runner.run("Chain of Responsibility") == [
            "500 approved by TeamLead",
            "5000 approved by Manager",
            "50000 approved by Director",
            "500000 rejected: nobody can approve it",
        ]

    def test_command_undo(self, runner):
        assert runner.run("Command") == [
            "execute: light at 30%",
            "execute: light at 80%",
            "undo: light at 30%",
            "undo: light at 0%",
        ]

    def test_interpreter(self, runner):
        assert runner.run("Interpreter") == [
            "x + 10 - y = 12 with x=5, y=3",
            "100 - x - x = 90 with x=5, y=3",
        ]

    def test_parse_is_left_associative(self):
        assert parse("10 - 3 - 2").interpret({}) == 5
        assert parse("a").interpret({"a": 7}) == 7

    @pytest.mark.parametrize("source", ["", "   "])
    def test_parse_rejects_empty_expression(self, source):
        with pytest.raises(ValueError, match="Empty expression"):
            parse(source)

    def test_iterator(self, runner):
        assert runner.run("Iterator") == [
            "forward: intro, verse, chorus",
            "reverse: chorus, verse, intro",
        ]

    def test_mediator_skips_sender(self, runner):
        assert runner.run("Mediator") == [
            "bob got 'hi all' from alice",
            "carol got 'hi all' from alice",
            "alice got 'hello' from carol",
            "bob got 'hello' from carol",
        ]

    def test_memento_restores_state(self, runner):
        assert runner.run("Memento") == [
            "saved: 'Hello' (cursor 5)",
            "edited: 'Hello, world!!!' (cursor 15)",
            "restored: 'Hello' (cursor 5)",
        ]

    def test_observer_notifies_in_attachment_order(self, runner):
        lines = runner.run("Observer")
        notifications = [line for line in lines if "notified" in line]
        assert len(notifications) == 2
        assert notifications == [
            "phone notified: temperature=21",
            "dashboard notified: temperature=21",
        ]

    def test_weather_station_attach_is_idempotent(self):
        seen: list[str] = []

        class Recorder:
            def update(self, station: WeatherStation) -> None:
                seen.append(f"t={station.temperature}")

        station = WeatherStation()
        recorder = Recorder()
        station.attach(recorder)  # type: ignore[arg-type]
        station.attach(recorder)  # type: ignore[arg-type]
        station.set_temperature(5)
        station.detach(recorder)  # type: ignore[arg-type]
        station.set_temperature(6)
        assert seen == ["t=5"]

    def test_state_cycles(self, runner):
        assert runner.run("State") == [
            "light is green for 30s",
            "light is yellow for 5s",
            "light is red for 20s",
            "light is green for 30s",
        ]

    def test_strategy_changes_choice(self, runner):
        assert runner.run("Strategy") == [
            "by_distance: take the mountain pass",
            "by_duration: take the highway",
            "by_tolls: take the coast road",
        ]

    def test_template_method(self, runner):
        assert runner.run("Template Method") == [
            "name,value",
            "apples,3",
            "pears,5",
            "total: 8",
            "| name | value |",
            "| apples | 3 |",
            "| pears | 5 |",
            "**total: 8**",
        ]

    def test_visitor(self, runner):
        assert runner.run("Visitor") == [
            "circle area 7.07",
            "rectangle area 8.00",
            '<circle r="1.5"/>',
            '<rect width="2" height="4"/>',
        ]
