from __future__ import annotations

import logging

import pytest

from porutham.boot import configure_logging
from porutham.boot.logging import resolve_level


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    engine = logging.getLogger("porutham.engine")
    saved = (root.level, list(root.handlers), engine.level)
    yield
    root.setLevel(saved[0])
    root.handlers[:] = saved[1]
    engine.setLevel(saved[2])


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, logging.INFO),
        ("", logging.INFO),
        ("debug", logging.DEBUG),
        ("Warning", logging.WARNING),
        ("15", 15),
        (logging.ERROR, logging.ERROR),
        ("chatty", logging.INFO),
    ],
)
def test_resolve_level(value, expected):
    assert resolve_level(value) == expected


def test_environment_precedence(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.setenv("PORUTHAM_LOG_LEVEL", "DEBUG")
    assert configure_logging() == logging.DEBUG

    monkeypatch.delenv("PORUTHAM_LOG_LEVEL")
    assert configure_logging() == logging.ERROR
    assert logging.getLogger().level == logging.ERROR


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setenv("PORUTHAM_LOG_LEVEL", "DEBUG")
    assert configure_logging(level="WARNING") == logging.WARNING


def test_engine_level_is_separate(monkeypatch):
    monkeypatch.delenv("PORUTHAM_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    configure_logging(engine_level="ERROR")
    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("porutham.engine").level == logging.ERROR
