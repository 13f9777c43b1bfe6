"""Tests for the command-line entry point (uiwizard.cli)."""

from __future__ import annotations

import io
import json
import os
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from rich.console import Console

from uiwizard import utils
from uiwizard.cli import build_parser, load_answers, load_config, main
from uiwizard.config import Config
from uiwizard.prompts import WizardCancelled
from uiwizard.scaffolder import EmitError


@pytest.fixture
def cli_console(monkeypatch: pytest.MonkeyPatch) -> Console:
    """Route the CLI's shared console into a buffer."""
    console = Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)
    monkeypatch.setattr(utils, "console", console)
    return console


@pytest.fixture
def stdin(monkeypatch: pytest.MonkeyPatch):
    """Replace standard input with scripted lines."""

    def _feed(lines: list[str]) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("".join(f"{line}\n" for line in lines)))

    return _feed


@pytest.fixture(autouse=True)
def clean_env():
    with patch.dict(os.environ, {}, clear=True):
        yield


def _write_answers(tmp_path: Path, answers: dict[str, Any]) -> Path:
    path = tmp_path / "answers.json"
    path.write_text(json.dumps(answers), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Argument parsing & configuration
# ---------------------------------------------------------------------------


class TestParser:
    @pytest.mark.unit
    def test_scaffold_arguments(self):
        args = build_parser().parse_args(["scaffold", "-o", "out", "--answers", "a.json", "--no-install"])
        assert args.command == "scaffold"
        assert args.output == "out"
        assert args.answers == "a.json"
        assert args.no_install is True

    @pytest.mark.unit
    def test_design_arguments(self):
        args = build_parser().parse_args(["design", "--website"])
        assert args.command == "design"
        assert args.website is True

    @pytest.mark.unit
    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    @pytest.mark.unit
    def test_flags_override_config_file(self, tmp_path: Path):
        config_path = Config(output_dir=tmp_path / "from-file", install_dependencies=True).save(
            tmp_path / "config.json"
        )
        args = build_parser().parse_args(
            ["scaffold", "--config", str(config_path), "-o", str(tmp_path / "flag"), "--no-install"]
        )
        config = load_config(args)
        assert config.output_dir == tmp_path / "flag"
        assert config.install_dependencies is False

    @pytest.mark.unit
    def test_environment_used_without_config_file(self):
        with patch.dict(os.environ, {"UIW_REPORT_DIR": "/tmp/reports"}):
            config = load_config(build_parser().parse_args(["design"]))
        assert config.report_dir == Path("/tmp/reports")

    @pytest.mark.unit
    def test_save_config_argument(self):
        args = build_parser().parse_args(["design", "--save-config", "uiwizard.json"])
        assert args.save_config == "uiwizard.json"
        assert build_parser().parse_args(["scaffold"]).save_config is None

    @pytest.mark.unit
    def test_answers_must_be_an_object(self, tmp_path: Path):
        path = tmp_path / "answers.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError):
            load_answers(path)


# ---------------------------------------------------------------------------
# Scaffold command
# ---------------------------------------------------------------------------


@pytest.mark.integration
class TestScaffoldCommand:
    def test_prefilled_answers(self, tmp_path: Path, cli_console, vanilla_answers):
        answers = _write_answers(tmp_path, vanilla_answers)

        code = main(["scaffold", "-o", str(tmp_path / "out"), "--answers", str(answers), "--no-install"])

        assert code == 0
        assert (tmp_path / "out" / "demo" / "index.html").is_file()
        assert not (tmp_path / "out" / "demo" / "package.json").exists()

    def test_interactive(self, tmp_path: Path, cli_console, stdin):
        stdin(["1", "2", "2", "4", "5", "demo", "y"])
        code = main(["scaffold", "-o", str(tmp_path), "--no-install"])
        assert code == 0
        assert (tmp_path / "demo" / "css" / "main.css").is_file()

    def test_declined_confirmation_exits_zero(self, tmp_path: Path, cli_console, stdin):
        stdin(["1", "2", "2", "4", "5", "demo", "n"])
        code = main(["scaffold", "-o", str(tmp_path), "--no-install"])
        assert code == 0
        assert not (tmp_path / "demo").exists()
        assert "Cancelled" in cli_console.file.getvalue()

    def test_end_of_input_exits_zero(self, tmp_path: Path, cli_console, stdin):
        stdin(["1"])
        assert main(["scaffold", "-o", str(tmp_path), "--no-install"]) == 0

    def test_keyboard_interrupt_exits_zero(self, tmp_path: Path, cli_console):
        with patch("uiwizard.cli.run_scaffold", side_effect=KeyboardInterrupt):
            assert main(["scaffold", "-o", str(tmp_path)]) == 0

    def test_wizard_cancelled_exits_zero(self, tmp_path: Path, cli_console):
        with patch("uiwizard.cli.run_scaffold", side_effect=WizardCancelled("Cancelled before generation")):
            assert main(["scaffold", "-o", str(tmp_path)]) == 0

    def test_emit_error_exits_one(self, tmp_path: Path, cli_console):
        with patch("uiwizard.cli.run_scaffold", side_effect=EmitError("/x/index.html", "Permission denied")):
            code = main(["scaffold", "-o", str(tmp_path)])
        assert code == 1
        assert "Permission denied" in cli_console.file.getvalue()

    def test_invalid_answers_exit_one(self, tmp_path: Path, cli_console):
        answers = _write_answers(tmp_path, {"ecosystem": "angular"})
        assert main(["scaffold", "-o", str(tmp_path), "--answers", str(answers)]) == 1

    def test_malformed_json_exits_one(self, tmp_path: Path, cli_console):
        path = tmp_path / "answers.json"
        path.write_text("{not json", encoding="utf-8")
        assert main(["scaffold", "-o", str(tmp_path), "--answers", str(path)]) == 1

    def test_missing_answers_file_exits_one(self, tmp_path: Path, cli_console):
        assert main(["scaffold", "--answers", str(tmp_path / "missing.json")]) == 1

    def test_missing_config_file_exits_one(self, tmp_path: Path, cli_console):
        assert main(["scaffold", "--config", str(tmp_path / "missing.json")]) == 1

    def test_save_config_writes_effective_config(self, tmp_path: Path, cli_console):
        config_path = tmp_path / "conf" / "uiwizard.json"
        with patch("uiwizard.cli.run_scaffold"):
            code = main(
                ["scaffold", "-o", str(tmp_path / "out"), "--no-install", "--save-config", str(config_path)]
            )

        assert code == 0
        saved = Config.load(config_path)
        assert saved.output_dir == tmp_path / "out"
        assert saved.install_dependencies is False
        assert "Configuration saved to" in cli_console.file.getvalue()

    def test_saved_config_is_loaded_back(self, tmp_path: Path, cli_console):
        config_path = tmp_path / "uiwizard.json"
        with patch("uiwizard.cli.run_scaffold"):
            main(["scaffold", "-o", str(tmp_path / "out"), "--no-install", "--save-config", str(config_path)])
        with patch("uiwizard.cli.run_scaffold") as run:
            assert main(["scaffold", "--config", str(config_path)]) == 0
        config = run.call_args.args[0]
        assert config.output_dir == tmp_path / "out"
        assert config.install_dependencies is False

    def test_unexpected_error_exits_one(self, tmp_path: Path, cli_console):
        with patch("uiwizard.cli.run_scaffold", side_effect=RuntimeError("boom")):
            code = main(["scaffold", "-o", str(tmp_path)])
        assert code == 1
        assert "Unexpected error: boom" in cli_console.file.getvalue()


# ---------------------------------------------------------------------------
# Design command
# ---------------------------------------------------------------------------


@pytest.mark.integration
class TestDesignCommand:
    def test_design_then_exit(self, tmp_path: Path, cli_console, stdin):
        stdin(["1", "Sell shoes", "Shoppers", "4", "Cart, search", "1", "", "", "7"])
        code = main(["design"])
        assert code == 0
        assert "Project Type: Web Application" in cli_console.file.getvalue()

    def test_website_flag_runs_workflow(self, tmp_path: Path, cli_console):
        with patch("uiwizard.cli.DesignerSession") as session_cls:
            code = main(["design", "--website"])
        assert code == 0
        session_cls.return_value.run_website_workflow.assert_called_once_with()
        session_cls.return_value.run.assert_not_called()
