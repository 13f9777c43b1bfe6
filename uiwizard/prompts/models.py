"""Question and answer models shared by both wizards.

A wizard is declared as an ordered list of :class:`Question` objects.  The
:class:`~uiwizard.prompts.sequencer.PromptSequencer` walks that list and
collects the answers in an :class:`AnswerRecord`, which is then handed,
frozen, to the resolver or report renderer.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class AnswerRecordError(Exception):
    """Raised on an illegal write to an :class:`AnswerRecord`."""


class QuestionOrderError(Exception):
    """Raised when a visibility predicate depends on a later or unknown key."""


class WizardCancelled(Exception):
    """Raised when the user declines to proceed.

    This is a cancellation outcome, not a failure: the CLI reports it and
    exits with status 0.
    """


# ---------------------------------------------------------------------------
# AnswerRecord
# ---------------------------------------------------------------------------


class AnswerRecord(Mapping[str, Any]):
    """Accumulated answers for one wizard session.

    Each key can be written once.  After :meth:`freeze` the record is
    read-only; :meth:`reset` clears it for a fresh run.  A key that is
    absent means "not applicable", which is different from an empty string.
    """

    def __init__(self, initial: Mapping[str, Any] | None = None, *, frozen: bool = False) -> None:
        self._data: dict[str, Any] = dict(initial or {})
        self._frozen = frozen

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"AnswerRecord({self._data!r}, {state})"

    @property
    def frozen(self) -> bool:
        return self._frozen

    def set(self, key: str, value: Any) -> None:
        """Store the answer for *key*.

        Raises:
            AnswerRecordError: If the record is frozen or *key* already has
                an answer.
        """
        if self._frozen:
            raise AnswerRecordError(f"Cannot set '{key}': record is frozen")
        if key in self._data:
            raise AnswerRecordError(f"Answer for '{key}' is already set")
        self._data[key] = value

    def freeze(self) -> "AnswerRecord":
        """Make the record read-only and return it."""
        self._frozen = True
        return self

    def reset(self) -> None:
        """Discard every answer and reopen the record."""
        self._data.clear()
        self._frozen = False

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dict copy of the answers."""
        return dict(self._data)


# ---------------------------------------------------------------------------
# Questions
# ---------------------------------------------------------------------------


class QuestionKind(str, Enum):
    """How a question is answered."""

    CHOICE = "choice"
    TEXT = "text"
    CONFIRM = "confirm"


class Choice(BaseModel):
    """One entry of a single-choice list."""

    label: str = Field(..., description="Text shown to the user")
    value: Any = Field(..., description="Value stored in the AnswerRecord")


Predicate = Callable[[Mapping[str, Any]], bool]


class Question(BaseModel):
    """A single prompt in a wizard."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    key: str = Field(..., description="AnswerRecord key the answer is stored under")
    message: str = Field(..., description="Prompt text")
    kind: QuestionKind = Field(default=QuestionKind.TEXT)
    choices: list[Choice] = Field(default_factory=list)
    default: Any = Field(default=None, description="Value used when the input is empty")
    required: bool = Field(default=False, description="Reject empty free-text answers")
    pattern: Optional[str] = Field(default=None, description="Regex a free-text answer must match")
    pattern_error: str = Field(default="Invalid value.")
    visible_when: Optional[Predicate] = Field(
        default=None, description="Predicate over earlier answers; None means always asked"
    )
    depends_on: list[str] = Field(
        default_factory=list, description="Keys read by the visibility predicate"
    )

    @model_validator(mode="after")
    def _check_shape(self) -> "Question":
        if self.kind is QuestionKind.CHOICE:
            if not self.choices:
                raise ValueError(f"Choice question '{self.key}' has no choices")
            if self.default is not None and self.default not in self.choice_values():
                raise ValueError(f"Default for '{self.key}' is not one of its choices")
        if self.visible_when is not None and not self.depends_on:
            raise ValueError(f"Question '{self.key}' has a predicate but no depends_on keys")
        return self

    def choice_values(self) -> list[Any]:
        return [choice.value for choice in self.choices]

    def label_for(self, value: Any) -> str:
        """Return the display label for a stored choice value."""
        for choice in self.choices:
            if choice.value == value:
                return choice.label
        return str(value)

    def is_visible(self, answers: Mapping[str, Any]) -> bool:
        if self.visible_when is None:
            return True
        return bool(self.visible_when(answers))


def validate_question_order(questions: list[Question]) -> None:
    """Check that every predicate only reads keys set by earlier questions.

    Raises:
        QuestionOrderError: On a forward reference or an unknown key.
    """
    seen: set[str] = set()
    for question in questions:
        for key in question.depends_on:
            if key not in seen:
                raise QuestionOrderError(
                    f"Question '{question.key}' depends on '{key}', "
                    "which is not set by an earlier question"
                )
        seen.add(question.key)
