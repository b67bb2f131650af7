"""Shared fixtures."""

import os

import pytest

from tagparse.utils import logger as logger_module


@pytest.fixture(autouse=True)
def reset_logger(monkeypatch):
    """Each test starts from the unconfigured default logger."""
    monkeypatch.setattr(logger_module, "_default", None)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove TAGPARSE_* variables from the environment."""
    for key in list(os.environ):
        if key.startswith("TAGPARSE_"):
            monkeypatch.delenv(key)
    return monkeypatch
