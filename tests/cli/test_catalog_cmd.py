"""Tests for CLI catalog commands."""

import pytest
import typer

from patternbook.catalog import Category, PatternCatalog
from patternbook.cli.catalog_cmd import list_patterns, run_pattern, show_pattern
from patternbook.config.schema import PatternbookConfig
from patternbook.demos.base import Demo


class BracketDemo(Demo):
    def scenario(self) -> None:
        self.emit("[bold]not markup[/bold] :smile:")


def _bracket_catalog() -> PatternCatalog:
    catalog = PatternCatalog()
    catalog.register("Brackets", Category.STRUCTURAL, BracketDemo, summary="raw text")
    return catalog


def test_run_prints_lines_verbatim(capsys):
    """Test demo output is not interpreted as Rich markup or emoji."""
    run_pattern("Brackets", catalog=_bracket_catalog())
    assert "[bold]not markup[/bold] :smile:" in capsys.readouterr().out


def test_run_with_config_json(capsys, small_catalog):
    config = PatternbookConfig(output_format="json")
    run_pattern("Singleton", config=config, catalog=small_catalog)
    out = capsys.readouterr().out
    assert '"name": "Singleton"' in out
    assert '"hello"' in out


def test_run_unknown_raises_exit(capsys, small_catalog):
    """Test an unknown name is reported on stderr only, with exit code 1."""
    with pytest.raises(typer.Exit) as exc_info:
        run_pattern("Visitor", catalog=small_catalog)
    assert exc_info.value.exit_code == 1

    captured = capsys.readouterr()
    assert "Unknown pattern: 'Visitor'" in captured.err
    assert captured.out == ""


def test_run_construction_failure_raises_exit(capsys):
    def broken() -> Demo:
        raise RuntimeError("no parts")

    catalog = PatternCatalog()
    catalog.register("Broken", Category.CREATIONAL, broken)

    with pytest.raises(typer.Exit):
        run_pattern("Broken", catalog=catalog)
    assert "no parts" in capsys.readouterr().err


def test_list_plain_with_catalog(capsys, small_catalog):
    list_patterns(plain=True, catalog=small_catalog)
    assert capsys.readouterr().out.splitlines() == [
        "Creational: Singleton",
        "Structural: Adapter",
    ]


def test_list_table_with_catalog(capsys, small_catalog):
    list_patterns(catalog=small_catalog)
    out = capsys.readouterr().out
    assert "Singleton" in out
    assert "2 patterns" in out


def test_show_pattern(capsys, small_catalog):
    show_pattern("adapter", catalog=small_catalog)
    out = capsys.readouterr().out
    assert "Adapter" in out
    assert "Structural" in out
    assert "Bridge" in out


def test_show_unknown_raises_exit(capsys, small_catalog):
    with pytest.raises(typer.Exit):
        show_pattern("Visitor", catalog=small_catalog)
    captured = capsys.readouterr()
    assert "Unknown pattern" in captured.err
    assert captured.out == ""
