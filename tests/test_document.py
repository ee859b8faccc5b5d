"""Tests for core.document: the full document, end to end."""

from __future__ import annotations

from core.config import AppSettings
from core.document import print_document
from expected import DOCUMENT


def test_reproduces_reference_document(console, buffer) -> None:
    print_document(console)
    assert buffer.getvalue() == DOCUMENT


def test_explicit_default_settings_match(console, buffer) -> None:
    print_document(console, AppSettings())
    assert buffer.getvalue() == DOCUMENT


def test_bullet_setting_applies_to_every_bullet(console, buffer) -> None:
    print_document(console, AppSettings(bullet="*"))
    output = buffer.getvalue()
    assert "•" not in output
    assert output.count("\n  * ") == 7


def test_rule_width_setting(console, buffer) -> None:
    print_document(console, AppSettings(rule_width=20))
    lines = buffer.getvalue().split("\n")
    assert lines[1] == "*" * 20
    assert lines[-2] == "-" * 20
