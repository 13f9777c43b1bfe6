"""UI Wizards configuration.

Centralised, typed configuration for both wizards. Settings use Pydantic v2
models so they are validated at construction time and can be serialised
to/from JSON or read from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
import shlex
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


class Config(BaseModel):
    """Global UI Wizards configuration.

    Instances are created once by the CLI entry point and passed to the
    scaffold wizard and the designer session.
    """

    output_dir: Path = Field(
        default=Path("."),
        description="Parent directory in which scaffolded projects are created",
    )
    report_dir: Path = Field(
        default=Path("."),
        description="Directory where saved design reports are written",
    )
    install_dependencies: bool = Field(
        default=True,
        description="Run the install command after writing a project with a manifest",
    )
    install_command: list[str] = Field(
        default_factory=lambda: ["npm", "install"],
        description="Command used to install the generated project's dependencies",
    )
    install_timeout: int = Field(
        default=600, ge=10, description="Install command timeout in seconds"
    )

    @field_validator("install_command", mode="before")
    @classmethod
    def _split_command(cls, value: Any) -> Any:
        if isinstance(value, str):
            return shlex.split(value)
        return value

    @field_validator("install_command")
    @classmethod
    def _non_empty_command(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("install_command must not be empty")
        return value

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def project_path(self, project_name: str) -> Path:
        """Destination directory for a scaffolded project."""
        return self.output_dir / project_name

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            UIW_OUTPUT_DIR, UIW_REPORT_DIR, UIW_SKIP_INSTALL,
            UIW_INSTALL_COMMAND, UIW_INSTALL_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("UIW_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["UIW_OUTPUT_DIR"])
        if os.environ.get("UIW_REPORT_DIR"):
            kwargs["report_dir"] = Path(os.environ["UIW_REPORT_DIR"])
        if os.environ.get("UIW_SKIP_INSTALL"):
            skip = os.environ["UIW_SKIP_INSTALL"].strip().lower()
            kwargs["install_dependencies"] = skip not in ("1", "true", "yes", "on")
        if os.environ.get("UIW_INSTALL_COMMAND"):
            kwargs["install_command"] = os.environ["UIW_INSTALL_COMMAND"]
        if os.environ.get("UIW_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(os.environ["UIW_INSTALL_TIMEOUT"])
        return cls(**kwargs)
