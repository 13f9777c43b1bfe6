"""Question list for the scaffold wizard."""

from __future__ import annotations

from uiwizard.prompts import Choice, Question, QuestionKind
from uiwizard.scaffolder.manifest import STATE_MANAGERS
from uiwizard.scaffolder.models import (
    COLOR_THEME_LABELS,
    CSS_FRAMEWORK_LABELS,
    DESIGN_STYLE_LABELS,
    ECOSYSTEM_LABELS,
    STATE_MANAGER_LABELS,
    UI_TYPE_LABELS,
    ColorTheme,
    CssFramework,
    DesignStyle,
    Ecosystem,
    UIType,
)
from uiwizard.utils import PROJECT_NAME_PATTERN


def _choices(labels: dict) -> list[Choice]:
    return [Choice(label=label, value=member.value) for member, label in labels.items()]


def _state_manager_question(ecosystem: Ecosystem) -> Question:
    managers = STATE_MANAGERS[ecosystem]
    return Question(
        key="state_manager",
        message="Which state management library?",
        kind=QuestionKind.CHOICE,
        choices=[Choice(label=STATE_MANAGER_LABELS[m], value=m.value) for m in managers],
        default=managers[0].value,
        visible_when=lambda a, eco=ecosystem.value: (
            a.get("ecosystem") == eco and bool(a.get("state_management"))
        ),
        depends_on=["ecosystem", "state_management"],
    )


SCAFFOLD_QUESTIONS: list[Question] = [
    Question(
        key="ui_type",
        message="1. What type of UI do you want to build?",
        kind=QuestionKind.CHOICE,
        choices=_choices(UI_TYPE_LABELS),
        default=UIType.LANDING.value,
    ),
    Question(
        key="style",
        message="2. Choose a color theme for your UI:",
        kind=QuestionKind.CHOICE,
        choices=_choices(COLOR_THEME_LABELS),
        default=ColorTheme.LIGHT.value,
    ),
    Question(
        key="design_style",
        message="3. What design style would you prefer?",
        kind=QuestionKind.CHOICE,
        choices=_choices(DESIGN_STYLE_LABELS),
        default=DesignStyle.MODERN.value,
    ),
    Question(
        key="ecosystem",
        message="4. Select a frontend framework to use:",
        kind=QuestionKind.CHOICE,
        choices=_choices(ECOSYSTEM_LABELS),
        default=Ecosystem.REACT.value,
    ),
    Question(
        key="css",
        message="5. Choose a CSS framework or utility library:",
        kind=QuestionKind.CHOICE,
        choices=_choices(CSS_FRAMEWORK_LABELS),
        default=CssFramework.PLAIN.value,
    ),
    Question(
        key="project_name",
        message="6. What should be the name of your project folder?",
        kind=QuestionKind.TEXT,
        default="my-ui-project",
        required=True,
        pattern=PROJECT_NAME_PATTERN,
        pattern_error="Project name can only contain letters, numbers, hyphens, and underscores",
    ),
    Question(
        key="routing",
        message="7. Include routing setup?",
        kind=QuestionKind.CONFIRM,
        default=True,
        visible_when=lambda a: a.get("ecosystem") != Ecosystem.VANILLA.value,
        depends_on=["ecosystem"],
    ),
    Question(
        key="state_management",
        message="8. Include state management?",
        kind=QuestionKind.CONFIRM,
        default=False,
        visible_when=lambda a: a.get("ecosystem") in (Ecosystem.REACT.value, Ecosystem.VUE.value),
        depends_on=["ecosystem"],
    ),
    _state_manager_question(Ecosystem.REACT),
    _state_manager_question(Ecosystem.VUE),
]
