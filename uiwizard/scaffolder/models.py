"""Pydantic v2 models for the scaffold wizard.

Defines the closed choice enumerations, the typed view of a scaffold
``AnswerRecord`` and the ``ContentBundle`` produced by the resolver.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from uiwizard.utils import PROJECT_NAME_PATTERN

MANIFEST_PATH = "package.json"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class BundleConflictError(Exception):
    """Raised when two artifact generators produce the same path."""


class EmitError(Exception):
    """Raised when a bundle cannot be written to its destination."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class UIType(str, Enum):
    """Kind of interface the generated project starts from."""

    LANDING = "landing"
    DASHBOARD = "dashboard"
    PORTFOLIO = "portfolio"
    ECOMMERCE = "ecommerce"
    BLOG = "blog"
    CUSTOM = "custom"


class ColorTheme(str, Enum):
    """Color palette written into the stylesheet's CSS variables."""

    LIGHT = "light"
    DARK = "dark"
    PASTEL = "pastel"
    NEON = "neon"
    CUSTOM = "custom"


class DesignStyle(str, Enum):
    """Visual style rules appended to the stylesheet."""

    MINIMAL = "minimal"
    MODERN = "modern"
    MATERIAL = "material"
    GLASS = "glass"
    BRUTALIST = "brutalist"


class Ecosystem(str, Enum):
    """Target frontend ecosystem."""

    REACT = "react"
    VUE = "vue"
    SVELTE = "svelte"
    VANILLA = "vanilla"


class CssFramework(str, Enum):
    """CSS framework or utility library addon."""

    TAILWIND = "tailwind"
    BOOTSTRAP = "bootstrap"
    MUI = "mui"
    CHAKRA = "chakra"
    PLAIN = "plain"


class StateManager(str, Enum):
    """State-management library."""

    REDUX = "redux"
    ZUSTAND = "zustand"
    RECOIL = "recoil"
    PINIA = "pinia"
    VUEX = "vuex"


UI_TYPE_LABELS: dict[UIType, str] = {
    UIType.LANDING: "Landing Page",
    UIType.DASHBOARD: "Dashboard",
    UIType.PORTFOLIO: "Portfolio Website",
    UIType.ECOMMERCE: "E-commerce App",
    UIType.BLOG: "Blog Interface",
    UIType.CUSTOM: "Custom Application",
}

COLOR_THEME_LABELS: dict[ColorTheme, str] = {
    ColorTheme.LIGHT: "Light Theme",
    ColorTheme.DARK: "Dark Theme",
    ColorTheme.PASTEL: "Pastel Colors",
    ColorTheme.NEON: "Neon/Vibrant",
    ColorTheme.CUSTOM: "Custom Colors",
}

DESIGN_STYLE_LABELS: dict[DesignStyle, str] = {
    DesignStyle.MINIMAL: "Minimalistic",
    DesignStyle.MODERN: "Modern",
    DesignStyle.MATERIAL: "Material Design",
    DesignStyle.GLASS: "Glassmorphism",
    DesignStyle.BRUTALIST: "Brutalist",
}

ECOSYSTEM_LABELS: dict[Ecosystem, str] = {
    Ecosystem.REACT: "React.js",
    Ecosystem.VUE: "Vue.js",
    Ecosystem.SVELTE: "Svelte",
    Ecosystem.VANILLA: "Plain HTML/CSS/JS",
}

CSS_FRAMEWORK_LABELS: dict[CssFramework, str] = {
    CssFramework.TAILWIND: "Tailwind CSS",
    CssFramework.BOOTSTRAP: "Bootstrap",
    CssFramework.MUI: "Material UI",
    CssFramework.CHAKRA: "Chakra UI",
    CssFramework.PLAIN: "Plain CSS",
}

STATE_MANAGER_LABELS: dict[StateManager, str] = {
    StateManager.REDUX: "Redux Toolkit",
    StateManager.ZUSTAND: "Zustand",
    StateManager.RECOIL: "Recoil",
    StateManager.PINIA: "Pinia",
    StateManager.VUEX: "Vuex",
}


# ---------------------------------------------------------------------------
# Choices
# ---------------------------------------------------------------------------


class ScaffoldChoices(BaseModel):
    """Typed view of a scaffold ``AnswerRecord``.

    Keys missing from the record take the same defaults the questions offer,
    so a partial record still resolves to a complete bundle.
    """

    ui_type: UIType = Field(default=UIType.LANDING)
    style: ColorTheme = Field(default=ColorTheme.LIGHT, description="Color theme")
    design_style: DesignStyle = Field(default=DesignStyle.MODERN)
    ecosystem: Ecosystem = Field(default=Ecosystem.REACT)
    css: CssFramework = Field(default=CssFramework.PLAIN)
    project_name: str = Field(default="my-ui-project", pattern=PROJECT_NAME_PATTERN)
    routing: bool = Field(default=False)
    state_management: bool = Field(default=False)
    state_manager: Optional[StateManager] = Field(default=None)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "ScaffoldChoices":
        """Validate the known keys of *record*; unknown keys are ignored."""
        known = {key: record[key] for key in cls.model_fields if key in record}
        return cls.model_validate(known)

    @property
    def wants_state_management(self) -> bool:
        return self.state_management and self.state_manager is not None


# ---------------------------------------------------------------------------
# Bundle
# ---------------------------------------------------------------------------


class ContentBundle(BaseModel):
    """Resolved output of the scaffold wizard.

    ``files`` maps a POSIX-style path relative to the project root to its
    literal content.  ``directories`` lists the relative directories to
    create before any file is written.
    """

    project_name: str
    files: dict[str, str] = Field(default_factory=dict)
    directories: list[str] = Field(default_factory=list)

    @property
    def manifest(self) -> Optional[str]:
        """The ``package.json`` content, or ``None`` when there is none."""
        return self.files.get(MANIFEST_PATH)

    @property
    def needs_install(self) -> bool:
        return MANIFEST_PATH in self.files
