"""Rich consoles for the CLI.

Why separate:
- Keeps command logic apart from output details.
- The consoles are built per invocation so they bind to the current
  `sys.stdout`/`sys.stderr` (Typer's test runner swaps them).
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


def build_stdout_console() -> Console:
    """Console for the document itself."""

    return Console(highlight=False, emoji=False, soft_wrap=True)


def build_stderr_console() -> Console:
    return Console(stderr=True, highlight=False)


def print_config_error(console: Console, message: str) -> None:
    console.print(f"[red]Invalid configuration:[/red] {escape(message)}")
