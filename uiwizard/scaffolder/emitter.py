"""File-mode emitter: writes a ``ContentBundle`` under a destination folder.

The emitter is the only part of the scaffold wizard with filesystem side
effects.  It never prompts by itself; the overwrite decision is delegated to
the ``confirm_overwrite`` callback supplied by the caller.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable, Sequence
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from rich.console import Console

from uiwizard import utils
from uiwizard.scaffolder.models import ContentBundle, EmitError
from uiwizard.utils import print_warning, run_command

__all__ = ["EmitError", "EmitResult", "EmitStatus", "emit_bundle"]


class EmitStatus(str, Enum):
    WRITTEN = "written"
    CANCELLED = "cancelled"


class EmitResult(BaseModel):
    """Outcome of :func:`emit_bundle`."""

    status: EmitStatus
    path: Path
    files_written: list[str] = Field(default_factory=list)
    installed: bool = Field(default=False, description="Dependency install ran and succeeded")
    warnings: list[str] = Field(default_factory=list)


def emit_bundle(
    bundle: ContentBundle,
    destination: str | Path,
    *,
    confirm_overwrite: Callable[[Path], bool],
    install: bool = False,
    install_command: Sequence[str] = ("npm", "install"),
    install_timeout: int = 600,
    console: Optional[Console] = None,
) -> EmitResult:
    """Write *bundle* to *destination*.

    Args:
        bundle: Resolved project content.
        destination: Project root folder.  Created if missing.
        confirm_overwrite: Asked with the destination path when it already
            exists.  Returning ``False`` cancels without touching the disk.
        install: Run *install_command* in the project root afterwards when
            the bundle has a manifest.
        install_command: Dependency install command.
        install_timeout: Seconds before the install is abandoned.
        console: Console for progress and warnings.

    Returns:
        An :class:`EmitResult`.  Install failures are reported as warnings;
        the status stays ``WRITTEN``.

    Raises:
        EmitError: Removing, creating or writing a path failed.  Files
            written before the failure are left in place.
    """
    root = Path(destination)

    if root.exists():
        if not confirm_overwrite(root):
            return EmitResult(status=EmitStatus.CANCELLED, path=root)
        _remove(root)

    # 1. Directories first
    _mkdir(root)
    for directory in bundle.directories:
        _mkdir(root / directory)

    # 2. Files, verbatim
    written: list[str] = []
    for rel_path, content in bundle.files.items():
        target = root / rel_path
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise EmitError(str(target), exc.strerror or str(exc)) from exc
        written.append(rel_path)

    result = EmitResult(status=EmitStatus.WRITTEN, path=root, files_written=written)

    # 3. Optional dependency install
    if install and bundle.needs_install:
        (console or utils.console).print("[blue]Installing dependencies...[/blue]")
        rc, _out, err = run_command(install_command, cwd=root, timeout=install_timeout)
        if rc == 0:
            result.installed = True
        else:
            command = " ".join(install_command)
            message = f"Failed to install dependencies automatically. Please run '{command}' manually."
            if err:
                message += f" ({err.splitlines()[-1]})"
            result.warnings.append(message)
            print_warning(message, out=console)

    return result


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _remove(path: Path) -> None:
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as exc:
        raise EmitError(str(path), exc.strerror or str(exc)) from exc


def _mkdir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise EmitError(str(path), exc.strerror or str(exc)) from exc
