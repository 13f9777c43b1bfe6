"""Shared pytest fixtures for the UI Wizards test suite.

Provides reusable fixtures for:
- Rich consoles that write to a string buffer
- Prompt sequencers fed from scripted input lines
- A configuration pointing at temporary directories
- Sample scaffold and design answer records
"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console

from uiwizard.config import Config
from uiwizard.prompts import PromptSequencer


# ---------------------------------------------------------------------------
# Console & input
# ---------------------------------------------------------------------------


@pytest.fixture
def out_console() -> Console:
    """Console that records plain text into an in-memory buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture
def console_text(out_console: Console) -> Callable[[], str]:
    """Return everything printed to ``out_console`` so far."""

    def _text() -> str:
        return out_console.file.getvalue()

    return _text


@pytest.fixture
def make_sequencer(out_console: Console) -> Callable[[Iterable[str]], PromptSequencer]:
    """Factory for a sequencer that answers with the given input lines."""

    def _make(lines: Iterable[str]) -> PromptSequencer:
        script = "".join(f"{line}\n" for line in lines)
        return PromptSequencer(console=out_console, stream=io.StringIO(script))

    return _make


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Config writing projects and reports under ``tmp_path``; no installs."""
    return Config(
        output_dir=tmp_path / "projects",
        report_dir=tmp_path / "reports",
        install_dependencies=False,
    )


# ---------------------------------------------------------------------------
# Sample answers
# ---------------------------------------------------------------------------


@pytest.fixture
def vanilla_answers() -> dict[str, Any]:
    return {
        "ui_type": "landing",
        "style": "dark",
        "design_style": "modern",
        "ecosystem": "vanilla",
        "css": "plain",
        "project_name": "demo",
    }


@pytest.fixture
def react_redux_answers() -> dict[str, Any]:
    return {
        "ui_type": "dashboard",
        "style": "light",
        "design_style": "modern",
        "ecosystem": "react",
        "css": "plain",
        "project_name": "shop",
        "routing": False,
        "state_management": True,
        "state_manager": "redux",
    }


@pytest.fixture
def design_answers() -> dict[str, Any]:
    return {
        "interface_type": "Mobile Application",
        "purpose": "Track daily habits",
        "target_users": "Busy professionals",
        "screen_count": "5",
        "features": "Reminders, streaks, stats",
        "design_style": "Modern & Vibrant",
        "color_preference": "",
        "additional_requirements": "Offline support",
    }


@pytest.fixture
def website_answers() -> dict[str, Any]:
    keys = (
        "purpose", "business_goals", "target_audience", "user_personas", "geography",
        "competitors", "inspiration", "industry", "trends",
        "main_pages", "sub_pages", "user_flows", "navigation",
        "layout", "content_priority", "cta_elements",
        "typography", "imagery", "brand_guidelines",
        "design_tool", "design_system", "responsive_breakpoints",
        "testing_methods", "testing_tools", "feedback_sources",
        "tech_stack", "developer", "timeline",
    )
    answers: dict[str, Any] = {key: f"{key} answer" for key in keys}
    answers["main_pages"] = "Home, About, Services, Contact"
    answers["color_scheme"] = "Bold Red & Black"
    return answers
