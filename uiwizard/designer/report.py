"""Report-mode emitter for the design-prompt wizard.

Renders answer records as plain-text reports and saves them under a
millisecond-stamped file name.  Rendering is deterministic: the only clock
read happens in :func:`save_report`.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape

from uiwizard import utils
from uiwizard.designer import recommendations as rec
from uiwizard.designer.questions import DESIGN_FIELDS, WEBSITE_SECTIONS

DESIGN_PROMPT_PREFIX = "ui-design-prompt"
WEBSITE_REPORT_PREFIX = "website-design-report"

NOT_SPECIFIED = "(not specified)"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _value(answers: Mapping[str, Any], key: str) -> str:
    text = str(answers.get(key, "")).strip()
    return text or NOT_SPECIFIED


def _heading(sections: list[str], title: str, underline: bool = True) -> None:
    sections.append(title)
    if underline:
        sections.append("-" * len(title))


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_design_prompt(answers: Mapping[str, Any]) -> str:
    """Render the UI/UX design prompt for a design-wizard record.

    Every answered field is listed in question order; a field whose question
    was not asked is left out.
    """
    tag = str(answers.get("interface_type", ""))
    sections: list[str] = ["UI/UX DESIGN PROMPT", "=" * 50, ""]

    for key, label in DESIGN_FIELDS:
        if key in answers:
            sections.append(f"{label}: {_value(answers, key)}")
    sections.append("")

    sections.append("DESIGN RECOMMENDATIONS:")
    sections.extend(f"- {line}" for line in rec.design_recommendations(tag))
    sections.append("")

    sections.append("IMPLEMENTATION SUGGESTIONS:")
    sections.extend(f"- {line}" for line in rec.implementation_suggestions(tag))
    sections.append("")

    sections.append("WIREFRAME TEMPLATE:")
    sections.append(rec.wireframe_template(tag))
    sections.append("")

    return "\n".join(sections)


def render_website_report(answers: Mapping[str, Any]) -> str:
    """Render the comprehensive website design report."""
    sections: list[str] = ["COMPREHENSIVE WEBSITE DESIGN REPORT", "=" * 60, ""]

    for title, fields in WEBSITE_SECTIONS:
        _heading(sections, title)
        for key, label in fields:
            sections.append(f"{label}: {_value(answers, key)}")
        sections.append("")

    if answers.get("main_pages"):
        _heading(sections, "SITE MAP")
        sections.append(rec.render_site_map(str(answers["main_pages"])))
        sections.append("")

    _heading(sections, "SELECTED COLOR PALETTE")
    sections.extend(rec.website_palette(str(answers.get("color_scheme", ""))))
    sections.append("")

    _heading(sections, "RECOMMENDED NEXT STEPS")
    sections.extend(f"{i}. {step}" for i, step in enumerate(rec.NEXT_STEPS, 1))
    sections.append("")

    return "\n".join(sections)


# ---------------------------------------------------------------------------
# Saving
# ---------------------------------------------------------------------------


def report_filename(prefix: str, now: datetime) -> str:
    """``<prefix>-<epoch milliseconds>.txt``."""
    return f"{prefix}-{int(now.timestamp() * 1000)}.txt"


def save_report(
    text: str,
    prefix: str,
    directory: str | Path = ".",
    now: Optional[datetime] = None,
) -> Path:
    """Write *text* followed by a ``Generated on:`` line.

    Two saves in the same millisecond map to the same file name and the
    second write replaces the first.

    Raises:
        OSError: The directory could not be created or the file written.
    """
    now = now or datetime.now()
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)

    path = folder / report_filename(prefix, now)
    content = f"{text.rstrip()}\n\nGenerated on: {now.strftime(TIMESTAMP_FORMAT)}\n"
    path.write_text(content, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Console output
# ---------------------------------------------------------------------------


def print_report(text: str, out: Optional[Console] = None) -> None:
    """Print a rendered report, highlighting its section headings."""
    target = out or utils.console
    lines = text.splitlines()
    for i, line in enumerate(lines):
        following = lines[i + 1] if i + 1 < len(lines) else ""
        if _is_rule(line):
            target.print(f"[dim]{line}[/dim]")
        elif _is_rule(following) or (line.endswith(":") and line.isupper()):
            target.print(f"[bold green]{escape(line)}[/bold green]")
        else:
            target.print(escape(line), highlight=False)


def _is_rule(line: str) -> bool:
    return bool(line) and set(line) <= {"=", "-"}
