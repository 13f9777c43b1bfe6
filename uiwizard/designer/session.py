"""Interactive design-prompt session.

Asks the design questions, prints the prompt report, then loops over a
follow-up menu until the user exits.  The answer record is passed from one
handler to the next; the session object only holds its collaborators.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Any, Optional

from uiwizard.config import Config
from uiwizard.designer import recommendations as rec
from uiwizard.designer.questions import DESIGN_QUESTIONS, WEBSITE_STEPS, WebsiteStep
from uiwizard.designer.report import (
    DESIGN_PROMPT_PREFIX,
    WEBSITE_REPORT_PREFIX,
    print_report,
    render_design_prompt,
    render_website_report,
    save_report,
)
from uiwizard.prompts import AnswerRecord, Choice, PromptSequencer
from uiwizard.utils import (
    print_bullets,
    print_error,
    print_header,
    print_success,
    print_swatches,
)


class MenuAction(IntEnum):
    CREATE_ANOTHER = 1
    SAVE = 2
    PALETTE = 3
    MOBILE_GUIDELINES = 4
    ACCESSIBILITY = 5
    WEBSITE = 6
    EXIT = 7


MENU_LABELS: dict[MenuAction, str] = {
    MenuAction.CREATE_ANOTHER: "Create another design",
    MenuAction.SAVE: "Save current prompt to file",
    MenuAction.PALETTE: "Generate color palette suggestions",
    MenuAction.MOBILE_GUIDELINES: "View mobile-specific guidelines",
    MenuAction.ACCESSIBILITY: "View web accessibility checklist",
    MenuAction.WEBSITE: "Create full website design",
    MenuAction.EXIT: "Exit",
}

MENU_CHOICES = [Choice(label=MENU_LABELS[action], value=action) for action in MenuAction]


@dataclass
class WebsiteOutcome:
    """Result of one pass through the website workflow."""

    record: AnswerRecord
    report: str
    saved: Optional[Path] = None


class DesignerSession:
    """Design-prompt wizard with its follow-up menu.

    Args:
        config: Supplies the directory reports are saved to.
        sequencer: Prompt sequencer bound to the session's console and input.
    """

    def __init__(self, config: Config, sequencer: PromptSequencer) -> None:
        self.config = config
        self.sequencer = sequencer
        self.out = sequencer.console

    # -- Entry points ------------------------------------------------------

    def run(self) -> list[Path]:
        """Run the wizard and the menu loop.

        Returns:
            Paths of every report saved during the session.
        """
        print_header("UI/UX Designer CLI", color="blue", out=self.out)
        self.out.print("[dim]Create professional design prompts for any interface.[/dim]")

        record = self.sequencer.run(DESIGN_QUESTIONS)
        self.show_prompt(record)

        saved: list[Path] = []
        while True:
            action = self.sequencer.select("What would you like to do next?", MENU_CHOICES)

            if action is MenuAction.EXIT:
                break
            if action is MenuAction.CREATE_ANOTHER:
                record.reset()
                print_header("UI/UX Designer CLI", color="blue", out=self.out)
                self.sequencer.run(DESIGN_QUESTIONS, record)
                self.show_prompt(record)
            elif action is MenuAction.SAVE:
                path = self.offer_save(
                    render_design_prompt(record),
                    DESIGN_PROMPT_PREFIX,
                    "Would you like to save this design prompt to a file?",
                )
                if path is not None:
                    saved.append(path)
            elif action is MenuAction.PALETTE:
                self.show_palette(record)
            elif action is MenuAction.MOBILE_GUIDELINES:
                self.out.print("\n[bold]MOBILE-SPECIFIC GUIDELINES:[/bold]")
                print_bullets(rec.MOBILE_GUIDELINES, out=self.out)
            elif action is MenuAction.ACCESSIBILITY:
                self.out.print("\n[bold]WEB ACCESSIBILITY CHECKLIST:[/bold]")
                print_bullets(rec.ACCESSIBILITY_CHECKLIST, style="green", out=self.out)
            elif action is MenuAction.WEBSITE:
                outcome = self.run_website_workflow()
                if outcome.saved is not None:
                    saved.append(outcome.saved)

        print_success("\nThank you for using UI Designer CLI!", out=self.out)
        return saved

    def run_website_workflow(self) -> WebsiteOutcome:
        """Walk the eight website design steps and print the final report."""
        print_header("Comprehensive Website Design Workflow", color="blue", out=self.out)
        self.out.print("[dim]Following the complete 8-step process for professional website design[/dim]")

        record = AnswerRecord()
        for step in WEBSITE_STEPS:
            self._run_step(step, record)
        record.freeze()

        report = render_website_report(record)
        print_header("Comprehensive Website Design Report", color="blue", out=self.out)
        print_report(report, out=self.out)
        self.out.print("\n[bold]Selected color palette:[/bold]")
        print_swatches(rec.website_palette(record.get("color_scheme", "")), out=self.out)

        saved = self.offer_save(
            report,
            WEBSITE_REPORT_PREFIX,
            "Would you like to save this comprehensive report to a file?",
        )
        return WebsiteOutcome(record=record, report=report, saved=saved)

    # -- Menu handlers -----------------------------------------------------

    def show_prompt(self, record: AnswerRecord) -> None:
        self.out.print("\n[green]Generating your UI/UX design prompt...[/green]\n")
        print_report(render_design_prompt(record), out=self.out)

    def show_palette(self, record: AnswerRecord) -> None:
        style = record.get("design_style", rec.DEFAULT_DESIGN_PALETTE)
        self.out.print("\n[bold]COLOR PALETTE SUGGESTIONS:[/bold]")
        self.out.print(f"For {style} style:", highlight=False)
        print_swatches(rec.color_palette(style), out=self.out)

    def offer_save(self, text: str, prefix: str, question: str) -> Optional[Path]:
        """Ask whether to save *text*; return the written path, if any.

        A write failure is reported and the session continues.
        """
        if not self.sequencer.confirm(question, default=False):
            return None
        try:
            path = save_report(text, prefix, self.config.report_dir)
        except OSError as exc:
            print_error(f"Could not save report: {exc}", out=self.out)
            return None
        print_success(f"Saved to: {path.name}", out=self.out)
        return path

    # -- Website steps -----------------------------------------------------

    def _run_step(self, step: WebsiteStep, record: AnswerRecord) -> None:
        self.out.print(f"\n[bold yellow]STEP {step.number}: {step.title}[/bold yellow]\n")
        self.sequencer.run(step.questions, record, freeze=False)

        self._show_step_extras(step, record)
        if step.tips:
            self.out.print(f"\n[bold cyan]{step.tips_title}:[/bold cyan]")
            bullet = "□" if step.checklist else "•"
            print_bullets(step.tips, bullet=bullet, out=self.out)

        print_success(f"\nStep {step.number} Complete: {step.complete}", out=self.out)
        if step.number < len(WEBSITE_STEPS):
            self.sequencer.pause(f"Press Enter to continue to Step {step.number + 1}...")
        else:
            self.sequencer.pause("Press Enter to generate final report...")

    def _show_step_extras(self, step: WebsiteStep, record: AnswerRecord) -> None:
        """Diagrams and palettes that follow particular steps."""
        answers: dict[str, Any] = record.to_dict()
        if step.number == 3:
            self.out.print("\n[bold cyan]GENERATED SITE MAP STRUCTURE:[/bold cyan]")
            self.out.print(rec.render_site_map(answers.get("main_pages", "")), markup=False, highlight=False)
        elif step.number == 4:
            self.out.print("\n[bold cyan]HOMEPAGE WIREFRAME:[/bold cyan]")
            self.out.print(
                rec.render_homepage_wireframe(answers.get("content_priority", "")),
                markup=False,
                highlight=False,
            )
        elif step.number == 5:
            scheme = answers.get("color_scheme", rec.DEFAULT_WEBSITE_PALETTE)
            self.out.print(f"\n[bold]Selected Color Scheme: {scheme}[/bold]", highlight=False)
            print_swatches(rec.website_palette(scheme), out=self.out)
