"""Tests for PromptSequencer (uiwizard.prompts.sequencer)."""

from __future__ import annotations

import pytest

from uiwizard.prompts import (
    AnswerRecord,
    Choice,
    Question,
    QuestionKind,
    QuestionOrderError,
    WizardCancelled,
)

pytestmark = pytest.mark.unit


COLORS = Question(
    key="color",
    message="Pick a color:",
    kind=QuestionKind.CHOICE,
    choices=[
        Choice(label="Red", value="red"),
        Choice(label="Green", value="green"),
        Choice(label="Blue", value="blue"),
    ],
)

NAME = Question(
    key="name",
    message="Project name",
    kind=QuestionKind.TEXT,
    required=True,
    pattern=r"^[a-z-]+$",
    pattern_error="Lowercase letters and hyphens only",
)

EXTRA = Question(
    key="extra",
    message="Add extras?",
    kind=QuestionKind.CONFIRM,
    default=False,
    visible_when=lambda a: a.get("color") == "blue",
    depends_on=["color"],
)


# ---------------------------------------------------------------------------
# Choice questions
# ---------------------------------------------------------------------------


class TestChoice:
    def test_numeric_choice(self, make_sequencer):
        assert make_sequencer(["2"]).ask(COLORS) == "green"

    @pytest.mark.parametrize("bad", ["0", "4", "abc", "-1", "1.5", "²", "①"])
    def test_out_of_range_reprompts(self, make_sequencer, console_text, bad):
        sequencer = make_sequencer([bad, "3"])
        assert sequencer.ask(COLORS) == "blue"
        assert console_text().count("Invalid choice. Please select 1-3.") == 1

    def test_empty_input_without_default_reprompts(self, make_sequencer, console_text):
        assert make_sequencer(["", "1"]).ask(COLORS) == "red"
        assert "Invalid choice" in console_text()

    def test_empty_input_takes_default(self, make_sequencer):
        question = COLORS.model_copy(update={"default": "green"})
        assert make_sequencer([""]).ask(question) == "green"

    def test_menu_lists_labels(self, make_sequencer, console_text):
        make_sequencer(["1"]).ask(COLORS)
        text = console_text()
        assert "Pick a color:" in text
        assert "1." in text and "Red" in text
        assert "3." in text and "Blue" in text

    def test_select(self, make_sequencer):
        value = make_sequencer(["2"]).select("Next?", [Choice(label="A", value=1), Choice(label="B", value=2)])
        assert value == 2


# ---------------------------------------------------------------------------
# Text questions
# ---------------------------------------------------------------------------


class TestText:
    def test_required_reprompts_on_empty(self, make_sequencer, console_text):
        assert make_sequencer(["", "demo"]).ask(NAME) == "demo"
        assert "This field is required." in console_text()

    def test_pattern_reprompts_on_mismatch(self, make_sequencer, console_text):
        assert make_sequencer(["My Project!", "my-project"]).ask(NAME) == "my-project"
        assert "Lowercase letters and hyphens only" in console_text()

    def test_default_on_empty(self, make_sequencer):
        question = NAME.model_copy(update={"default": "my-ui-project"})
        assert make_sequencer([""]).ask(question) == "my-ui-project"

    def test_optional_empty_answer_kept(self, make_sequencer):
        question = Question(key="notes", message="Notes (optional)")
        assert make_sequencer([""]).ask(question) == ""

    def test_answer_is_stripped(self, make_sequencer):
        question = Question(key="notes", message="Notes")
        assert make_sequencer(["  hello  "]).ask(question) == "hello"


# ---------------------------------------------------------------------------
# Yes/no questions
# ---------------------------------------------------------------------------


class TestConfirm:
    @pytest.mark.parametrize("raw, expected", [("y", True), ("YES", True), ("n", False), ("No", False)])
    def test_answers(self, make_sequencer, raw, expected):
        assert make_sequencer([raw]).confirm("Proceed?") is expected

    def test_empty_takes_default(self, make_sequencer):
        assert make_sequencer([""]).confirm("Proceed?", default=False) is False
        assert make_sequencer([""]).confirm("Proceed?", default=True) is True

    def test_invalid_reprompts(self, make_sequencer, console_text):
        assert make_sequencer(["maybe", "y"]).confirm("Proceed?") is True
        assert "Please answer 'y' or 'n'." in console_text()


# ---------------------------------------------------------------------------
# run()
# ---------------------------------------------------------------------------


class TestRun:
    def test_returns_frozen_record(self, make_sequencer):
        record = make_sequencer(["1", "demo"]).run([COLORS, NAME])
        assert record.to_dict() == {"color": "red", "name": "demo"}
        assert record.frozen

    def test_hidden_question_is_absent(self, make_sequencer):
        record = make_sequencer(["1", "demo"]).run([COLORS, EXTRA, NAME])
        assert "extra" not in record

    def test_visible_question_is_asked(self, make_sequencer):
        record = make_sequencer(["3", "y", "demo"]).run([COLORS, EXTRA, NAME])
        assert record["extra"] is True

    def test_confirm_declined_raises(self, make_sequencer):
        with pytest.raises(WizardCancelled):
            make_sequencer(["1", "demo", "n"]).run([COLORS, NAME], confirm="Proceed?")

    def test_confirm_prints_summary(self, make_sequencer, console_text):
        make_sequencer(["2", "demo", "y"]).run([COLORS, NAME], confirm="Proceed?", summary_title="Choices")
        text = console_text()
        assert "Choices" in text
        assert "Green" in text

    def test_extends_open_record(self, make_sequencer):
        record = AnswerRecord()
        sequencer = make_sequencer(["2", "demo"])
        sequencer.run([COLORS], record, freeze=False)
        assert not record.frozen
        sequencer.run([NAME], record)
        assert record.to_dict() == {"color": "green", "name": "demo"}
        assert record.frozen

    def test_invalid_order_rejected_before_asking(self, make_sequencer):
        with pytest.raises(QuestionOrderError):
            make_sequencer([]).run([EXTRA, COLORS])

    def test_exhausted_input_raises_eof(self, make_sequencer):
        with pytest.raises(EOFError):
            make_sequencer(["1"]).run([COLORS, NAME])

    def test_pause_consumes_a_line(self, make_sequencer):
        sequencer = make_sequencer(["", "2"])
        sequencer.pause()
        assert sequencer.ask(COLORS) == "green"


# ---------------------------------------------------------------------------
# summarize()
# ---------------------------------------------------------------------------


class TestSummarize:
    def test_labels_and_values(self, make_sequencer):
        summary = make_sequencer([]).summarize([COLORS, NAME, EXTRA], {"color": "blue", "name": "x", "extra": False})
        assert summary == {"Pick a color": "Blue", "Project name": "x", "Add extras": "No"}

    def test_skips_hidden_and_missing(self, make_sequencer):
        summary = make_sequencer([]).summarize([COLORS, EXTRA, NAME], {"color": "red", "extra": True})
        assert summary == {"Pick a color": "Red"}

    def test_strips_step_numbers(self, make_sequencer):
        question = Question(key="q", message="6. What should be the name of your project folder?")
        summary = make_sequencer([]).summarize([question], {"q": "demo"})
        assert summary == {"What should be the name of your project folder": "demo"}
