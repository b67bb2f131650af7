"""
tagparse Configuration
======================

Layered settings for the command-line tools.

Layers, highest priority first:
1. Runtime values (``Config.set``)
2. TAGPARSE_* environment variables
3. A Python config file defining a ``config`` dict
4. Built-in defaults

Example:
    # settings.py
    config = {"log": {"level": "info"}, "parser": {"mapping": "ordered"}}

    cfg = load_config("settings.py")
    cfg.get("log.level")              # "info"
    cfg.get_int("bench.iterations")   # 1000
"""

from __future__ import annotations

import copy
import importlib.util
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

ENV_PREFIX = "TAGPARSE_"

DEFAULTS: Dict[str, Any] = {
    "log": {"level": "warning", "format": "text", "colors": True},
    "parser": {"mapping": "dict"},
    "bench": {"iterations": 1000, "sizes": [2, 4, 16, 32, 64, 128, 256]},
}

_MISSING = object()


@dataclass
class ConfigSource:
    """One named layer of settings."""
    name: str
    data: Dict[str, Any] = field(default_factory=dict)
    priority: int = 0


def _merge_into(target: Dict[str, Any], layer: Mapping[str, Any]) -> None:
    for key, value in layer.items():
        if isinstance(value, Mapping) and isinstance(target.get(key), dict):
            _merge_into(target[key], value)
        else:
            target[key] = copy.deepcopy(value)


def _nest(dotted: str, value: Any) -> Dict[str, Any]:
    """``_nest("log.level", "x")`` -> ``{"log": {"level": "x"}}``."""
    for part in reversed(dotted.split(".")):
        value = {part: value}
    return value


def _env_value(raw: str) -> Any:
    """Read numbers, booleans and lists as JSON, anything else as text."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


class Config:
    """
    Dot-notation view over prioritised layers.

    Values handed out by ``get`` are copies, so callers cannot change the
    configuration by mutating them.
    """

    def __init__(self, defaults: bool = True) -> None:
        self._sources: List[ConfigSource] = []
        self._merged: Optional[Dict[str, Any]] = None
        if defaults:
            self.add_source("defaults", DEFAULTS, priority=0)

    def add_source(self, name: str, data: Mapping[str, Any], priority: int = 0) -> None:
        self._sources.append(ConfigSource(name, copy.deepcopy(dict(data)), priority))
        self._merged = None

    def load_file(self, path: Union[str, Path]) -> None:
        """
        Add a Python config file as a layer.

        The file's ``config`` dict is used if present, otherwise its public
        module-level names.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {path}")

        spec = importlib.util.spec_from_file_location("tagparse_settings", path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load config file: {path}")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        data = getattr(module, "config", None)
        if data is None:
            data = {k: v for k, v in vars(module).items() if not k.startswith("_")}
        self.add_source(f"file:{path}", data, priority=10)

    def load_env_overrides(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Add TAGPARSE_* variables as a layer; TAGPARSE_LOG_LEVEL sets log.level."""
        environ = os.environ if environ is None else environ
        layer: Dict[str, Any] = {}
        for name, raw in environ.items():
            if name.startswith(ENV_PREFIX):
                dotted = name[len(ENV_PREFIX):].lower().replace("_", ".")
                _merge_into(layer, _nest(dotted, _env_value(raw)))
        if layer:
            self.add_source("env", layer, priority=100)

    def _tree(self) -> Dict[str, Any]:
        if self._merged is None:
            merged: Dict[str, Any] = {}
            for source in sorted(self._sources, key=lambda s: s.priority):
                _merge_into(merged, source.data)
            self._merged = merged
        return self._merged

    def _lookup(self, key: str) -> Any:
        node: Any = self._tree()
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return _MISSING
            node = node[part]
        return node

    def get(self, key: str, default: Any = None) -> Any:
        """Value at a dotted key such as ``"log.level"``, or ``default``."""
        value = self._lookup(key)
        if value is _MISSING:
            return default
        return copy.deepcopy(value) if isinstance(value, (dict, list)) else value

    def get_int(self, key: str, default: int = 0) -> int:
        try:
            return int(self.get(key, default))
        except (TypeError, ValueError):
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.get(key, default)
        if isinstance(value, str):
            return value.lower() in ("true", "yes", "on", "1")
        return bool(value)

    def get_list(self, key: str, default: Optional[List[Any]] = None) -> List[Any]:
        value = self.get(key)
        if value is None:
            return list(default or [])
        return value if isinstance(value, list) else [value]

    def section(self, prefix: str) -> Dict[str, Any]:
        value = self.get(prefix)
        return value if isinstance(value, dict) else {}

    def set(self, key: str, value: Any) -> None:
        """Set a runtime value; runtime values override every other layer."""
        runtime = next((s for s in self._sources if s.name == "runtime"), None)
        if runtime is None:
            runtime = ConfigSource("runtime", priority=1000)
            self._sources.append(runtime)
        _merge_into(runtime.data, _nest(key, value))
        self._merged = None

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def __getitem__(self, key: str) -> Any:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __contains__(self, key: str) -> bool:
        return self.has(key)


def load_config(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Config:
    """Defaults, then an optional config file, then the environment."""
    config = Config()
    if path is not None:
        config.load_file(path)
    config.load_env_overrides(environ)
    return config
