"""Text decorator functions.

Each function wraps a piece of text with fixed-width decorations (rules of
`*`, `-` or `~`) and writes the resulting lines to a Rich console.

Why `console.file`:
- Lines go to the console's stream unchanged. Rich rendering would expand
  tabs and drop control characters, so rule lengths would stop matching.
- Tests can hand in a console backed by `io.StringIO`.
"""

from __future__ import annotations

from rich.console import Console

DEFAULT_BULLET = "•"
DEFAULT_RULE_WIDTH = 50

_INDENT = "  "


def _line(console: Console, text: str = "") -> None:
    console.file.write(f"{text}\n")


def print_rule(console: Console, char: str, width: int) -> None:
    """Writes `char` repeated `width` times."""

    _line(console, char * width)


def print_title(console: Console, title: str, *, rule_width: int = DEFAULT_RULE_WIDTH) -> None:
    """Prints the title between two rules of asterisks.

    The title is right-aligned in a field of `rule_width // 2 + len(title) // 2`
    characters. This only approximates centering; wider titles are never
    truncated.
    """

    field = rule_width // 2 + len(title) // 2
    _line(console)
    print_rule(console, "*", rule_width)
    _line(console, title.rjust(field))
    print_rule(console, "*", rule_width)


def print_section(console: Console, section: str) -> None:
    _line(console)
    _line(console, section)
    print_rule(console, "-", len(section))


def print_subsection(console: Console, subsection: str) -> None:
    _line(console)
    _line(console, f"{_INDENT}{subsection}")
    _line(console, _INDENT + "~" * len(subsection))


def print_bullet_point(console: Console, point: str, *, bullet: str = DEFAULT_BULLET) -> None:
    _line(console, f"{_INDENT}{bullet} {point}")


def print_numbered_point(console: Console, num: int, point: str) -> None:
    _line(console, f"{_INDENT}{num}. {point}")


def print_paragraph(console: Console, *lines: str) -> None:
    """Prints a blank separator line followed by the paragraph lines."""

    _line(console)
    for text in lines:
        _line(console, text)
