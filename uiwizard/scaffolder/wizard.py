"""Scaffold wizard: questions -> bundle -> project folder."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from rich.console import Console

from uiwizard.config import Config
from uiwizard.prompts import AnswerRecord, PromptSequencer
from uiwizard.scaffolder.emitter import EmitResult, EmitStatus, emit_bundle
from uiwizard.scaffolder.models import ContentBundle, Ecosystem, ScaffoldChoices
from uiwizard.scaffolder.questions import SCAFFOLD_QUESTIONS
from uiwizard.scaffolder.resolver import DEV_PORTS, START_COMMANDS, resolve_bundle
from uiwizard.utils import console, print_bullets, print_header, print_success, print_warning


@dataclass
class ScaffoldOutcome:
    """Everything one scaffold run produced."""

    record: AnswerRecord
    choices: ScaffoldChoices
    bundle: ContentBundle
    result: EmitResult

    @property
    def cancelled(self) -> bool:
        return self.result.status is EmitStatus.CANCELLED


def run_scaffold(
    config: Config,
    sequencer: PromptSequencer,
    answers: Optional[Mapping[str, Any]] = None,
) -> ScaffoldOutcome:
    """Run the scaffold wizard end to end.

    Args:
        config: Output location and install settings.
        sequencer: Prompt sequencer bound to the session's console and input.
        answers: Pre-filled answers.  When given, no questions are asked and
            the final confirmation is skipped; the overwrite confirmation is
            still asked if the destination exists.

    Raises:
        WizardCancelled: The user declined the final confirmation.
        pydantic.ValidationError: *answers* contains an unknown choice value.
        EmitError: The project could not be written.
    """
    out = sequencer.console
    print_header("Frontend UI Builder", out=out)

    if answers is None:
        out.print("[dim]Answer a few questions and get your complete frontend UI ready![/dim]")
        record = sequencer.run(SCAFFOLD_QUESTIONS, confirm="Proceed with project generation?")
    else:
        record = AnswerRecord(answers).freeze()

    choices = ScaffoldChoices.from_record(record)
    bundle = resolve_bundle(choices)

    out.print("\n[blue]Generating your project...[/blue]")
    destination = config.project_path(choices.project_name)
    result = emit_bundle(
        bundle,
        destination,
        confirm_overwrite=lambda path: sequencer.confirm(
            f'Directory "{path.name}" already exists. Overwrite?', default=False
        ),
        install=config.install_dependencies,
        install_command=config.install_command,
        install_timeout=config.install_timeout,
        console=out,
    )

    if result.status is EmitStatus.CANCELLED:
        print_warning("Project generation cancelled.", out=out)
    else:
        print_next_steps(choices, result, out=out)

    return ScaffoldOutcome(record=record, choices=choices, bundle=bundle, result=result)


def next_steps(choices: ScaffoldChoices, installed: bool = False) -> list[str]:
    """Numbered follow-up instructions for a freshly written project."""
    steps = [f"cd {choices.project_name}"]
    if choices.ecosystem is Ecosystem.VANILLA:
        steps.append(START_COMMANDS[choices.ecosystem])
    else:
        if not installed:
            steps.append("npm install")
        steps.append(START_COMMANDS[choices.ecosystem])
        steps.append(f"Visit http://localhost:{DEV_PORTS[choices.ecosystem]}")
    return [f"{i}. {step}" for i, step in enumerate(steps, 1)]


def print_next_steps(choices: ScaffoldChoices, result: EmitResult, out: Optional[Console] = None) -> None:
    print_success("\nProject generated successfully!", out=out)
    target = out or console
    target.print(f"[cyan]Project location:[/cyan] {result.path.resolve()}")
    target.print(f"[cyan]Files written:[/cyan] {len(result.files_written)}")
    target.print("\n[cyan]Next steps:[/cyan]")
    print_bullets(next_steps(choices, result.installed), style="white", bullet=" ", out=out)
    target.print("\n[yellow]Tips:[/yellow]")
    print_bullets(
        [
            "Check the README.md for detailed instructions",
            "Customize colors in the CSS variables",
            "Add your content and functionality",
        ],
        style="dim",
        out=out,
    )
