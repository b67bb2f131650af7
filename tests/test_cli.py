"""Tests for the command-line interface."""

import io
import json

import pytest

from tagparse import __version__
from tagparse.cli.commands.bench import (
    BenchResult,
    generate_sample_input,
    run_benchmark,
)
from tagparse.cli.main import cli
from tagparse.engine.parser import parse_tag


@pytest.fixture(autouse=True)
def quiet(clean_env):
    return clean_env


def test_parse_text(capsys):
    assert cli(["parse", '<a href="https://adamchalmers.com" >']) == 0
    out = capsys.readouterr().out
    assert out == "a\n  href = https://adamchalmers.com\n"


def test_parse_sample(capsys):
    assert cli(["parse"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["div", "  height = 30", "  width = 40"]


def test_parse_json(capsys):
    assert cli(["parse", "--format", "json", '<div width="40", height="30">']) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["name"] == "div"
    assert data["attributes"] == {"width": "40", "height": "30"}


def test_parse_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO('<div width="40" >\n'))
    assert cli(["parse", "-", "--mapping", "ordered"]) == 0
    assert capsys.readouterr().out == "div\n  width = 40\n"


def test_parse_error(capsys):
    assert cli(["parse", "<div>"]) == 1
    err = capsys.readouterr().err
    assert "Error: expected ' ' at line 1:5" in err


def test_unknown_mapping_from_env(capsys, monkeypatch):
    monkeypatch.setenv("TAGPARSE_PARSER_MAPPING", "fast")
    assert cli(["parse", "<div >"]) == 1
    assert "Unknown mapping strategy" in capsys.readouterr().err


def test_debug_logging_from_env(capsys, monkeypatch):
    monkeypatch.setenv("TAGPARSE_LOG_LEVEL", "info")
    monkeypatch.setenv("TAGPARSE_LOG_COLORS", "false")
    assert cli(["parse", '<div width="40">']) == 0
    err = capsys.readouterr().err
    assert "Parsed tag" in err
    assert "name=div" in err


def test_config_file(tmp_path, capsys):
    path = tmp_path / "settings.py"
    path.write_text('config = {"log": {"level": "info", "format": "json"}}\n')
    assert cli(["--config", str(path), "parse", "<div >"]) == 0
    record = json.loads(capsys.readouterr().err.splitlines()[-1])
    assert record["message"] == "Parsed tag"
    assert record["context"]["command"] == "parse"


def test_no_command(capsys):
    assert cli([]) == 0
    assert "usage: tagparse" in capsys.readouterr().out


def test_version(capsys):
    with pytest.raises(SystemExit):
        cli(["--version"])
    assert __version__ in capsys.readouterr().out


def test_bench(capsys):
    assert cli(["bench", "--sizes", "2", "4", "--iterations", "3"]) == 0
    out = capsys.readouterr().out
    assert "Parse HTML div (3 iterations, dict mapping)" in out
    rows = [line.split() for line in out.splitlines()[3:]]
    assert [row[0] for row in rows] == ["2", "4"]


def test_bench_zero_iterations_is_rejected(capsys):
    assert cli(["bench", "--sizes", "2", "--iterations", "0"]) == 1
    captured = capsys.readouterr()
    assert "iterations must be positive" in captured.err
    assert captured.out == ""


def test_bench_settings_used_when_flags_omitted(capsys, monkeypatch):
    monkeypatch.setenv("TAGPARSE_BENCH_ITERATIONS", "2")
    monkeypatch.setenv("TAGPARSE_BENCH_SIZES", "[3]")
    assert cli(["bench"]) == 0
    out = capsys.readouterr().out
    assert "(2 iterations" in out
    assert out.splitlines()[3].split()[0] == "3"


def test_generate_sample_input():
    source = generate_sample_input(3)
    assert source == '<div width="40", width="40", width="40">'
    assert dict(parse_tag(source).attributes) == {"width": "40"}


def test_run_benchmark_with_fake_clock():
    ticks = iter([0.0, 0.5, 1.0, 3.0])
    results = run_benchmark([2, 8], 100, clock=lambda: next(ticks))
    assert results == [
        BenchResult(size=2, iterations=100, seconds=0.5),
        BenchResult(size=8, iterations=100, seconds=2.0),
    ]
    assert results[0].parses_per_second == 200
    assert results[1].attributes_per_second == 400


def test_run_benchmark_rejects_zero_iterations():
    with pytest.raises(ValueError):
        run_benchmark([2], 0)
