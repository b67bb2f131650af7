"""Tests for layered configuration."""

import pytest

from tagparse.core.config import Config, load_config


def test_defaults():
    config = Config()
    assert config.get("log.level") == "warning"
    assert config.get("parser.mapping") == "dict"
    assert config.get_int("bench.iterations") == 1000
    assert config.get_list("bench.sizes")[0] == 2


def test_missing_key_returns_default():
    config = Config()
    assert config.get("log.missing", "x") == "x"
    assert config.get("nope.deeper") is None
    assert "nope" not in config
    with pytest.raises(KeyError):
        config["nope"]


def test_runtime_set_overrides():
    config = Config()
    assert config.get("log.level") == "warning"
    config.set("log.level", "debug")
    assert config.get("log.level") == "debug"
    # Siblings survive the deep merge
    assert config.get("log.format") == "text"


def test_priority_order():
    config = Config(defaults=False)
    config.add_source("high", {"a": {"b": 2}}, priority=50)
    config.add_source("low", {"a": {"b": 1, "c": 3}}, priority=5)
    assert config.get("a.b") == 2
    assert config.get("a.c") == 3
    assert config.section("a") == {"b": 2, "c": 3}


def test_env_overrides():
    config = Config()
    config.load_env_overrides(
        {
            "TAGPARSE_LOG_LEVEL": "debug",
            "TAGPARSE_BENCH_ITERATIONS": "25",
            "TAGPARSE_BENCH_SIZES": "[1, 3]",
            "TAGPARSE_LOG_COLORS": "false",
            "OTHER": "ignored",
        }
    )
    assert config.get("log.level") == "debug"
    assert config.get_int("bench.iterations") == 25
    assert config.get_list("bench.sizes") == [1, 3]
    assert config.get_bool("log.colors", True) is False
    assert config.get("other") is None


def test_load_file(tmp_path):
    path = tmp_path / "settings.py"
    path.write_text('config = {"parser": {"mapping": "ordered"}}\n')
    config = Config()
    config.load_file(path)
    assert config.get("parser.mapping") == "ordered"
    assert config.get("log.level") == "warning"


def test_load_file_module_names(tmp_path):
    path = tmp_path / "settings.py"
    path.write_text('bench = {"iterations": 7}\n_private = 1\n')
    config = Config()
    config.load_file(path)
    assert config.get_int("bench.iterations") == 7
    assert config.get("_private") is None


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config().load_file(tmp_path / "absent.py")


def test_env_beats_file(tmp_path):
    path = tmp_path / "settings.py"
    path.write_text('config = {"log": {"level": "info"}}\n')
    config = load_config(path, environ={"TAGPARSE_LOG_LEVEL": "error"})
    assert config.get("log.level") == "error"


def test_get_int_falls_back():
    config = Config()
    config.set("bench.iterations", "many")
    assert config.get_int("bench.iterations", 5) == 5


def test_values_are_copies():
    config = Config()
    sizes = config.get_list("bench.sizes")
    sizes.append(999)
    config.get("bench")["iterations"] = 1
    config.section("log")["level"] = "debug"
    assert 999 not in config.get_list("bench.sizes")
    assert config.get_int("bench.iterations") == 1000
    assert config.get("log.level") == "warning"


def test_sources_are_copied_on_add():
    data = {"parser": {"mapping": "ordered"}}
    config = Config()
    config.add_source("extra", data, priority=5)
    data["parser"]["mapping"] = "dict"
    assert config.get("parser.mapping") == "ordered"
