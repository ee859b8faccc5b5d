from __future__ import annotations

import io
import logging
import os

import pytest
from rich.console import Console


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep stray `.env` files and FORMATTED_OUTPUT_* variables out of tests."""

    for key in list(os.environ):
        if key.upper().startswith("FORMATTED_OUTPUT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(buffer: io.StringIO) -> Console:
    return Console(file=buffer, width=40, highlight=False, emoji=False)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """The CLI reconfigures the root logger; put it back after each test."""

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
