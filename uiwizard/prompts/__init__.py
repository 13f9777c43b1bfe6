"""Interactive question/answer flow shared by both wizards.

Quick usage::

    from uiwizard.prompts import PromptSequencer, Question, QuestionKind

    questions = [Question(key="name", message="Project name", required=True)]
    record = PromptSequencer().run(questions, confirm="Proceed?")
"""

from uiwizard.prompts.models import (
    AnswerRecord,
    AnswerRecordError,
    Choice,
    Question,
    QuestionKind,
    QuestionOrderError,
    WizardCancelled,
    validate_question_order,
)
from uiwizard.prompts.sequencer import PromptSequencer

__all__ = [
    "AnswerRecord",
    "AnswerRecordError",
    "Choice",
    "PromptSequencer",
    "Question",
    "QuestionKind",
    "QuestionOrderError",
    "WizardCancelled",
    "validate_question_order",
]
