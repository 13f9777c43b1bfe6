"""Frontend project scaffolder.

Resolves scaffold answers to a ``ContentBundle`` of rendered files and
writes it to disk.

Quick usage::

    from uiwizard.scaffolder import ScaffoldChoices, emit_bundle, resolve_bundle

    choices = ScaffoldChoices(ecosystem="vue", ui_type="dashboard", project_name="demo")
    bundle = resolve_bundle(choices)
    emit_bundle(bundle, "/tmp/demo", confirm_overwrite=lambda path: False)
"""

from uiwizard.scaffolder.emitter import EmitResult, EmitStatus, emit_bundle
from uiwizard.scaffolder.manifest import build_manifest, render_manifest
from uiwizard.scaffolder.models import (
    BundleConflictError,
    ContentBundle,
    EmitError,
    ScaffoldChoices,
)
from uiwizard.scaffolder.resolver import resolve_bundle
from uiwizard.scaffolder.templates import TemplateRenderer
from uiwizard.scaffolder.wizard import ScaffoldOutcome, run_scaffold

__all__ = [
    "BundleConflictError",
    "ContentBundle",
    "EmitError",
    "EmitResult",
    "EmitStatus",
    "ScaffoldChoices",
    "ScaffoldOutcome",
    "TemplateRenderer",
    "build_manifest",
    "emit_bundle",
    "render_manifest",
    "resolve_bundle",
    "run_scaffold",
]
