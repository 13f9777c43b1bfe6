"""Tests for the file-mode emitter (uiwizard.scaffolder.emitter)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from uiwizard.scaffolder.emitter import EmitError, EmitStatus, emit_bundle
from uiwizard.scaffolder.models import ContentBundle

pytestmark = pytest.mark.unit


@pytest.fixture
def bundle() -> ContentBundle:
    return ContentBundle(
        project_name="demo",
        files={
            "index.html": "<h1>demo</h1>\n",
            "css/main.css": ":root {}\n",
            "js/main.js": "console.log('hi');\n",
        },
        directories=["css", "js", "images"],
    )


@pytest.fixture
def npm_bundle() -> ContentBundle:
    return ContentBundle(
        project_name="app",
        files={"package.json": "{}\n", "src/index.js": "\n"},
        directories=["src"],
    )


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


class TestWrite:
    def test_writes_files_and_directories(self, tmp_path: Path, bundle: ContentBundle):
        dest = tmp_path / "demo"
        confirm = MagicMock(return_value=True)

        result = emit_bundle(bundle, dest, confirm_overwrite=confirm)

        assert result.status is EmitStatus.WRITTEN
        assert result.files_written == list(bundle.files)
        assert (dest / "images").is_dir()
        assert (dest / "css" / "main.css").read_text(encoding="utf-8") == ":root {}\n"
        confirm.assert_not_called()

    def test_content_written_verbatim(self, tmp_path: Path):
        content = "line one\r\nünïcödé ✓\n\n"
        bundle = ContentBundle(project_name="x", files={"README.md": content})
        emit_bundle(bundle, tmp_path / "x", confirm_overwrite=lambda p: True)
        assert (tmp_path / "x" / "README.md").read_bytes() == content.encode("utf-8")

    def test_parent_directories_created_for_undeclared_paths(self, tmp_path: Path):
        bundle = ContentBundle(project_name="x", files={"a/b/c.txt": "c"})
        emit_bundle(bundle, tmp_path / "x", confirm_overwrite=lambda p: True)
        assert (tmp_path / "x" / "a" / "b" / "c.txt").read_text(encoding="utf-8") == "c"


# ---------------------------------------------------------------------------
# Existing destination
# ---------------------------------------------------------------------------


class TestExistingDestination:
    def test_declined_overwrite_changes_nothing(self, tmp_path: Path, bundle: ContentBundle):
        dest = tmp_path / "demo"
        dest.mkdir()
        (dest / "keep.txt").write_text("original", encoding="utf-8")
        before = _snapshot(tmp_path)

        result = emit_bundle(bundle, dest, confirm_overwrite=lambda p: False)

        assert result.status is EmitStatus.CANCELLED
        assert result.files_written == []
        assert _snapshot(tmp_path) == before

    def test_confirm_receives_destination(self, tmp_path: Path, bundle: ContentBundle):
        dest = tmp_path / "demo"
        dest.mkdir()
        confirm = MagicMock(return_value=False)
        emit_bundle(bundle, dest, confirm_overwrite=confirm)
        confirm.assert_called_once_with(dest)

    def test_accepted_overwrite_replaces_tree(self, tmp_path: Path, bundle: ContentBundle):
        dest = tmp_path / "demo"
        dest.mkdir()
        (dest / "stale.txt").write_text("old", encoding="utf-8")

        result = emit_bundle(bundle, dest, confirm_overwrite=lambda p: True)

        assert result.status is EmitStatus.WRITTEN
        assert not (dest / "stale.txt").exists()
        assert set(_snapshot(dest)) == set(bundle.files)

    def test_existing_file_replaced_by_directory(self, tmp_path: Path, bundle: ContentBundle):
        dest = tmp_path / "demo"
        dest.write_text("not a directory", encoding="utf-8")
        result = emit_bundle(bundle, dest, confirm_overwrite=lambda p: True)
        assert result.status is EmitStatus.WRITTEN
        assert dest.is_dir()


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestFailures:
    def test_write_failure_names_path(self, tmp_path: Path, bundle: ContentBundle):
        with patch.object(Path, "write_text", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(EmitError) as excinfo:
                emit_bundle(bundle, tmp_path / "demo", confirm_overwrite=lambda p: True)
        assert excinfo.value.path.endswith("index.html")
        assert "Permission denied" in str(excinfo.value)

    def test_mkdir_failure(self, tmp_path: Path, bundle: ContentBundle):
        with patch.object(Path, "mkdir", side_effect=OSError(28, "No space left on device")):
            with pytest.raises(EmitError, match="No space left"):
                emit_bundle(bundle, tmp_path / "demo", confirm_overwrite=lambda p: True)


# ---------------------------------------------------------------------------
# Dependency install
# ---------------------------------------------------------------------------


class TestInstall:
    def test_install_runs_in_project_root(self, tmp_path: Path, npm_bundle: ContentBundle, out_console):
        with patch("uiwizard.scaffolder.emitter.run_command", return_value=(0, "", "")) as run:
            result = emit_bundle(
                npm_bundle,
                tmp_path / "app",
                confirm_overwrite=lambda p: True,
                install=True,
                install_command=["pnpm", "install"],
                install_timeout=30,
                console=out_console,
            )
        run.assert_called_once_with(["pnpm", "install"], cwd=tmp_path / "app", timeout=30)
        assert result.installed
        assert result.warnings == []

    @pytest.mark.parametrize("returncode", [1, -1, 127])
    def test_install_failure_is_a_warning(self, tmp_path: Path, npm_bundle: ContentBundle, out_console, console_text, returncode):
        with patch("uiwizard.scaffolder.emitter.run_command", return_value=(returncode, "", "boom")):
            result = emit_bundle(
                npm_bundle,
                tmp_path / "app",
                confirm_overwrite=lambda p: True,
                install=True,
                console=out_console,
            )
        assert result.status is EmitStatus.WRITTEN
        assert not result.installed
        assert len(result.warnings) == 1
        assert "npm install" in result.warnings[0]
        assert "Failed to install dependencies" in console_text()

    def test_no_install_without_manifest(self, tmp_path: Path, bundle: ContentBundle):
        with patch("uiwizard.scaffolder.emitter.run_command") as run:
            result = emit_bundle(bundle, tmp_path / "demo", confirm_overwrite=lambda p: True, install=True)
        run.assert_not_called()
        assert not result.installed

    def test_no_install_when_disabled(self, tmp_path: Path, npm_bundle: ContentBundle):
        with patch("uiwizard.scaffolder.emitter.run_command") as run:
            emit_bundle(npm_bundle, tmp_path / "app", confirm_overwrite=lambda p: True, install=False)
        run.assert_not_called()
