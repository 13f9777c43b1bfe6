"""Shared utility functions for UI Wizards.

Provides command execution for the optional dependency install, name
validation, and Rich-based output helpers.  Every output helper accepts an
optional ``out`` console so sessions can direct output to their own
``Console`` (tests pass one that writes to a string buffer).
"""

from __future__ import annotations

import re
import subprocess
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Command execution
# ---------------------------------------------------------------------------


def run_command(
    cmd: Sequence[str],
    cwd: str | Path | None = None,
    timeout: int = 600,
) -> tuple[int, str, str]:
    """Run a command and wait for it to finish.

    Args:
        cmd: List of arguments (the executable first).
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  A timeout yields ``-1`` and
        a missing executable yields ``127``; neither raises.
    """
    try:
        completed = subprocess.run(
            list(cmd),
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")
    except FileNotFoundError:
        return (127, "", f"Command not found: {cmd[0] if cmd else ''}")

    return (
        completed.returncode,
        (completed.stdout or "").strip(),
        (completed.stderr or "").strip(),
    )


# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------

PROJECT_NAME_PATTERN = r"^[a-zA-Z0-9_-]+$"


def slugify(text: str) -> str:
    """Convert text to a URL/filename-safe slug (hyphenated)."""
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower().strip())
    return slug.strip("-")


def to_pascal(name: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    parts = re.split(r"[-_\s]+", name)
    return "".join(word.capitalize() for word in parts if word)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str, color: str = "bright_cyan", out: Console | None = None) -> None:
    """Print a full-width rule with *title* in the middle."""
    target = out or console
    target.print()
    target.print(Rule(f"[bold {color}] {escape(title)} [/bold {color}]", style=color))
    target.print()


def print_summary_table(
    data: Mapping[str, object],
    title: str = "Summary",
    out: Console | None = None,
) -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
        out: Console to print to (defaults to the shared console).
    """
    target = out or console
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(str(key)), escape(str(value)))

    target.print(table)
    target.print()


def print_bullets(
    lines: Iterable[str],
    style: str = "cyan",
    bullet: str = "•",
    out: Console | None = None,
) -> None:
    """Print one styled bullet line per entry."""
    target = out or console
    for line in lines:
        target.print(f"[{style}]{bullet} {escape(line)}[/{style}]")


def print_swatches(colors: Iterable[str], out: Console | None = None) -> None:
    """Print a colored block followed by the hex code for every color."""
    target = out or console
    for color in colors:
        target.print(f"[{color}]██████[/{color}] {color}")


def print_success(message: str, out: Console | None = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str, out: Console | None = None) -> None:
    """Print a red error message."""
    (out or console).print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str, out: Console | None = None) -> None:
    """Print a yellow warning message."""
    (out or console).print(f"[bold yellow]{escape(message)}[/bold yellow]")
