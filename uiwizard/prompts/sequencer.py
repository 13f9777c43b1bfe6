"""Line-oriented prompt sequencer.

Asks an ordered list of questions on a Rich console, skipping questions
whose visibility predicate is false, and returns a frozen
:class:`~uiwizard.prompts.models.AnswerRecord`.  Invalid input is answered
with an error message and the same question is asked again; retries are a
plain loop so a long session never grows the call stack.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from uiwizard.prompts.models import (
    AnswerRecord,
    Choice,
    Question,
    QuestionKind,
    WizardCancelled,
    validate_question_order,
)
from uiwizard.utils import print_error, print_summary_table

_YES = ("y", "yes")
_NO = ("n", "no")


class PromptSequencer:
    """Asks questions and collects answers.

    Args:
        console: Console used for every prompt and message.
        stream: Input stream.  ``None`` reads from standard input.
    """

    def __init__(self, console: Optional[Console] = None, stream: Optional[TextIO] = None) -> None:
        self.console = console or Console()
        self.stream = stream

    # -- Public API --------------------------------------------------------

    def run(
        self,
        questions: Sequence[Question],
        record: Optional[AnswerRecord] = None,
        *,
        confirm: Optional[str] = None,
        summary_title: str = "Summary of Your Choices",
        freeze: bool = True,
    ) -> AnswerRecord:
        """Ask every visible question in order and return the record.

        Args:
            questions: Questions in declaration order.
            record: Record to extend (a new one is created when omitted).
            confirm: When given, print a summary and ask this yes/no question
                after the last answer.
            summary_title: Title of the summary table.
            freeze: Freeze the record before returning it.  Pass ``False``
                to keep filling the same record from several question lists.

        Raises:
            WizardCancelled: The confirmation was declined.
        """
        validate_question_order(list(questions))
        answers = record if record is not None else AnswerRecord()

        for question in questions:
            if not question.is_visible(answers):
                continue
            answers.set(question.key, self.ask(question))

        if confirm is not None:
            print_summary_table(self.summarize(questions, answers), title=summary_title, out=self.console)
            if not self.confirm(confirm, default=True):
                raise WizardCancelled("Cancelled before generation")

        return answers.freeze() if freeze else answers

    def ask(self, question: Question) -> Any:
        """Ask a single question until a valid answer is given."""
        if question.kind is QuestionKind.CHOICE:
            return self._ask_choice(question)
        if question.kind is QuestionKind.CONFIRM:
            default = bool(question.default) if question.default is not None else None
            return self._ask_yes_no(question.message, default)
        return self._ask_text(question)

    def confirm(self, message: str, default: bool = True) -> bool:
        """Ask a yes/no question."""
        return self._ask_yes_no(message, default)

    def select(self, message: str, choices: Sequence[Choice]) -> Any:
        """Show a numbered menu and return the value of the picked entry."""
        question = Question(
            key="_menu", message=message, kind=QuestionKind.CHOICE, choices=list(choices)
        )
        return self._ask_choice(question)

    def pause(self, message: str = "Press Enter to continue...") -> None:
        """Block until a line of input is received."""
        self._read(f"[dim]{escape(message)}[/dim] ")

    def summarize(self, questions: Sequence[Question], answers: Mapping[str, Any]) -> dict[str, str]:
        """Map each answered question's message to a display value."""
        summary: dict[str, str] = {}
        for question in questions:
            if question.key not in answers or not question.is_visible(answers):
                continue
            value = answers[question.key]
            if question.kind is QuestionKind.CHOICE:
                shown = question.label_for(value)
            elif question.kind is QuestionKind.CONFIRM:
                shown = "Yes" if value else "No"
            else:
                shown = value or "-"
            summary[_short_label(question.message)] = shown
        return summary

    # -- Question kinds ----------------------------------------------------

    def _ask_choice(self, question: Question) -> Any:
        values = question.choice_values()
        count = len(values)
        default_index = values.index(question.default) + 1 if question.default is not None else None

        self.console.print(f"\n[bold]{escape(question.message)}[/bold]")
        table = Table(show_header=False, box=None)
        for i, choice in enumerate(question.choices, 1):
            table.add_row(f"[cyan]{i}.[/cyan]", escape(choice.label))
        self.console.print(table)

        hint = f"Enter your choice (1-{count})"
        if default_index is not None:
            hint += f" \\[{default_index}]"

        while True:
            raw = self._read(f"[green]{hint}:[/green] ").strip()
            if not raw and default_index is not None:
                return values[default_index - 1]
            try:
                index = int(raw)
            except ValueError:
                index = None
            if index is not None and 1 <= index <= count:
                return values[index - 1]
            print_error(f"Invalid choice. Please select 1-{count}.", out=self.console)

    def _ask_text(self, question: Question) -> str:
        prompt = escape(question.message)
        if question.default:
            prompt += f" \\[{escape(str(question.default))}]"

        while True:
            raw = self._read(f"[cyan]{prompt}:[/cyan] ").strip()
            if not raw and question.default is not None:
                raw = str(question.default)
            if not raw:
                if question.required:
                    print_error("This field is required.", out=self.console)
                    continue
                return raw
            if question.pattern and not re.match(question.pattern, raw):
                print_error(question.pattern_error, out=self.console)
                continue
            return raw

    def _ask_yes_no(self, message: str, default: Optional[bool]) -> bool:
        if default is None:
            hint = "y/n"
        else:
            hint = "Y/n" if default else "y/N"

        while True:
            raw = self._read(f"[yellow]{escape(message)} ({hint}):[/yellow] ").strip().lower()
            if not raw and default is not None:
                return default
            if raw in _YES:
                return True
            if raw in _NO:
                return False
            print_error("Please answer 'y' or 'n'.", out=self.console)

    # -- Input -------------------------------------------------------------

    def _read(self, prompt: str) -> str:
        """Read one line, raising ``EOFError`` when input is exhausted."""
        line = self.console.input(prompt, stream=self.stream)
        if self.stream is not None and line == "":
            raise EOFError("Input stream exhausted")
        return line


def _short_label(message: str) -> str:
    """Strip a leading step number and trailing punctuation from a prompt."""
    label = re.sub(r"^\s*\d+[.)]\s*", "", message)
    return label.rstrip(" ?:")
