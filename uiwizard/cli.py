"""Command-line entry point for ``uiwizard``.

Two subcommands::

    uiwizard scaffold [--output DIR] [--answers FILE] [--no-install] [--config FILE] [--save-config FILE]
    uiwizard design [--website] [--config FILE] [--save-config FILE]

Cancelling (declining a confirmation, Ctrl+C, end of input) exits with
status 0.  Configuration errors, write failures and unexpected errors are
printed and exit with status 1.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from uiwizard import __version__, utils
from uiwizard.config import Config
from uiwizard.designer import DesignerSession
from uiwizard.prompts import PromptSequencer, WizardCancelled
from uiwizard.scaffolder import EmitError, run_scaffold
from uiwizard.utils import print_error, print_success, print_warning


def _add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="JSON configuration file")
    parser.add_argument(
        "--save-config",
        default=None,
        metavar="FILE",
        help="Write the effective configuration (after flag overrides) to FILE",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uiwizard",
        description="UI Wizards -- frontend scaffolder and UI/UX design-prompt generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  uiwizard scaffold\n"
            "  uiwizard scaffold -o ./projects --answers answers.json --no-install\n"
            "  uiwizard design\n"
            "  uiwizard design --website\n"
            "  uiwizard scaffold -o ./projects --save-config uiwizard.json\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scaffold = subparsers.add_parser("scaffold", help="Generate a frontend project")
    scaffold.add_argument(
        "--output", "-o",
        default=None,
        help="Parent directory for the new project (default: current directory)",
    )
    scaffold.add_argument(
        "--answers",
        default=None,
        help="JSON file with pre-filled answers; skips the questions",
    )
    scaffold.add_argument(
        "--no-install",
        action="store_true",
        help="Do not run the dependency install after writing the project",
    )
    _add_config_arguments(scaffold)

    design = subparsers.add_parser("design", help="Generate a UI/UX design prompt")
    design.add_argument(
        "--website",
        action="store_true",
        help="Go straight to the 8-step website design workflow",
    )
    _add_config_arguments(design)

    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Config file (or environment), then command-line overrides."""
    config = Config.load(Path(args.config)) if args.config else Config.from_env()

    overrides: dict[str, Any] = {}
    if getattr(args, "output", None):
        overrides["output_dir"] = Path(args.output)
    if getattr(args, "no_install", False):
        overrides["install_dependencies"] = False
    return config.model_copy(update=overrides) if overrides else config


def load_answers(path: str | Path) -> dict[str, Any]:
    """Read a pre-filled answers file.

    Raises:
        OSError: The file cannot be read.
        ValueError: The file is not a JSON object.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Answers file must contain a JSON object: {path}")
    return data


def _scaffold(args: argparse.Namespace, config: Config, sequencer: PromptSequencer) -> int:
    answers = load_answers(args.answers) if args.answers else None
    run_scaffold(config, sequencer, answers)
    return 0


def _design(args: argparse.Namespace, config: Config, sequencer: PromptSequencer) -> int:
    session = DesignerSession(config, sequencer)
    if args.website:
        session.run_website_workflow()
    else:
        session.run()
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Parse arguments, run a wizard and return the exit status."""
    args = build_parser().parse_args(argv)
    out = utils.console

    try:
        config = load_config(args)
        if args.save_config:
            saved = config.save(Path(args.save_config))
            print_success(f"Configuration saved to {saved}", out=out)
        sequencer = PromptSequencer(console=out)
        if args.command == "scaffold":
            return _scaffold(args, config, sequencer)
        return _design(args, config, sequencer)
    except WizardCancelled as exc:
        print_warning(f"{exc}.", out=out)
        return 0
    except (KeyboardInterrupt, EOFError):
        print_warning("\nCancelled.", out=out)
        return 0
    except EmitError as exc:
        print_error(f"Error: could not write project: {exc}", out=out)
        return 1
    except ValidationError as exc:
        print_error(f"Error: invalid configuration or answers:\n{exc}", out=out)
        return 1
    except (ValueError, OSError) as exc:
        print_error(f"Error: {exc}", out=out)
        return 1
    except Exception as exc:
        print_error(f"Unexpected error: {exc}", out=out)
        return 1


if __name__ == "__main__":
    sys.exit(main())
