"""``package.json`` generation.

The manifest is assembled from independent fragments: the ecosystem's base
runtime, the CSS addon, routing and state management.  Each fragment is a
static table lookup so the same choices always produce the same manifest.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Optional

from uiwizard.scaffolder.models import (
    CssFramework,
    Ecosystem,
    ScaffoldChoices,
    StateManager,
)

# name -> version, split by dependency section
Deps = dict[str, str]

# ---------------------------------------------------------------------------
# Static tables
# ---------------------------------------------------------------------------

_BASE: dict[Ecosystem, dict[str, Any]] = {
    Ecosystem.REACT: {
        "version": "0.1.0",
        "scripts": {
            "start": "react-scripts start",
            "build": "react-scripts build",
            "test": "react-scripts test",
            "eject": "react-scripts eject",
        },
        "dependencies": {
            "react": "^18.2.0",
            "react-dom": "^18.2.0",
            "react-scripts": "5.0.1",
        },
        "devDependencies": {},
    },
    Ecosystem.VUE: {
        "version": "0.0.0",
        "scripts": {
            "dev": "vite",
            "build": "vite build",
            "preview": "vite preview",
        },
        "dependencies": {
            "vue": "^3.3.0",
        },
        "devDependencies": {
            "@vitejs/plugin-vue": "^4.2.0",
            "vite": "^4.3.0",
        },
    },
    Ecosystem.SVELTE: {
        "version": "0.0.1",
        "scripts": {
            "dev": "vite dev",
            "build": "vite build",
            "preview": "vite preview",
        },
        "dependencies": {},
        "devDependencies": {
            "@sveltejs/adapter-auto": "^2.0.0",
            "@sveltejs/kit": "^1.20.4",
            "svelte": "^4.0.5",
            "vite": "^4.4.2",
        },
    },
}

_TAILWIND_RUNTIME: Deps = {"tailwindcss": "^3.3.0"}
_TAILWIND_TOOLING: Deps = {"autoprefixer": "^10.4.14", "postcss": "^8.4.24"}
_EMOTION: Deps = {"@emotion/react": "^11.11.0", "@emotion/styled": "^11.11.0"}

# Addons keyed by framework: (dependencies, devDependencies).  React-only
# addons are absent from the other ecosystems' rows.
_CSS_ADDONS: dict[Ecosystem, dict[CssFramework, tuple[Deps, Deps]]] = {
    Ecosystem.REACT: {
        CssFramework.TAILWIND: (_TAILWIND_RUNTIME, _TAILWIND_TOOLING),
        CssFramework.BOOTSTRAP: ({"bootstrap": "^5.3.0"}, {}),
        CssFramework.MUI: ({"@mui/material": "^5.13.0", **_EMOTION}, {}),
        CssFramework.CHAKRA: (
            {"@chakra-ui/react": "^2.7.0", **_EMOTION, "framer-motion": "^10.12.0"},
            {},
        ),
    },
    Ecosystem.VUE: {
        CssFramework.TAILWIND: ({}, {**_TAILWIND_RUNTIME, **_TAILWIND_TOOLING}),
        CssFramework.BOOTSTRAP: ({"bootstrap": "^5.3.0"}, {}),
    },
    Ecosystem.SVELTE: {
        CssFramework.TAILWIND: ({}, {**_TAILWIND_RUNTIME, **_TAILWIND_TOOLING}),
        CssFramework.BOOTSTRAP: ({"bootstrap": "^5.3.0"}, {}),
    },
}

_ROUTING: dict[Ecosystem, Deps] = {
    Ecosystem.REACT: {"react-router-dom": "^6.11.0"},
    Ecosystem.VUE: {"vue-router": "^4.2.0"},
}

_STATE_PACKAGES: dict[StateManager, Deps] = {
    StateManager.REDUX: {"@reduxjs/toolkit": "^1.9.0"},
    StateManager.ZUSTAND: {"zustand": "^4.3.0"},
    StateManager.RECOIL: {"recoil": "^0.7.0"},
    StateManager.PINIA: {"pinia": "^2.1.0"},
    StateManager.VUEX: {"vuex": "^4.1.0"},
}

# Allowed managers per ecosystem; the first entry is the fallback.
STATE_MANAGERS: dict[Ecosystem, tuple[StateManager, ...]] = {
    Ecosystem.REACT: (StateManager.REDUX, StateManager.ZUSTAND, StateManager.RECOIL),
    Ecosystem.VUE: (StateManager.PINIA, StateManager.VUEX),
}

STATE_PACKAGE_NAMES = frozenset(name for deps in _STATE_PACKAGES.values() for name in deps)
ROUTING_PACKAGE_NAMES = frozenset(name for deps in _ROUTING.values() for name in deps)


# ---------------------------------------------------------------------------
# Resolution helpers
# ---------------------------------------------------------------------------


def resolve_state_manager(choices: ScaffoldChoices) -> Optional[StateManager]:
    """Return the state manager that applies to *choices*, or ``None``.

    A manager that does not belong to the chosen ecosystem is replaced with
    that ecosystem's default.  Ecosystems without managers return ``None``.
    """
    if not choices.wants_state_management:
        return None
    allowed = STATE_MANAGERS.get(choices.ecosystem)
    if not allowed:
        return None
    if choices.state_manager in allowed:
        return choices.state_manager
    return allowed[0]


def uses_routing(choices: ScaffoldChoices) -> bool:
    """Return ``True`` if a router package is wired into the project."""
    return choices.routing and choices.ecosystem in _ROUTING


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_manifest(choices: ScaffoldChoices) -> Optional[dict[str, Any]]:
    """Build the ``package.json`` document for *choices*.

    Returns ``None`` for plain HTML projects, which have no manifest.
    """
    base = _BASE.get(choices.ecosystem)
    if base is None:
        return None

    dependencies: Deps = dict(base["dependencies"])
    dev_dependencies: Deps = dict(base["devDependencies"])

    addon = _CSS_ADDONS.get(choices.ecosystem, {}).get(choices.css)
    if addon is not None:
        runtime, tooling = addon
        dependencies.update(runtime)
        dev_dependencies.update(tooling)

    if uses_routing(choices):
        dependencies.update(_ROUTING[choices.ecosystem])

    manager = resolve_state_manager(choices)
    if manager is not None:
        dependencies.update(_STATE_PACKAGES[manager])

    manifest: dict[str, Any] = {
        "name": choices.project_name,
        "version": base["version"],
        "private": True,
        "scripts": dict(base["scripts"]),
        "dependencies": dependencies,
    }
    if dev_dependencies:
        manifest["devDependencies"] = dev_dependencies
    return manifest


def render_manifest(choices: ScaffoldChoices) -> Optional[str]:
    """Serialise :func:`build_manifest` as 2-space indented JSON."""
    manifest = build_manifest(choices)
    if manifest is None:
        return None
    return json.dumps(manifest, indent=2) + "\n"


def _dependency_names(manifest: Mapping[str, Any] | str) -> list[str]:
    if isinstance(manifest, str):
        manifest = json.loads(manifest)
    names: list[str] = []
    for section in ("dependencies", "devDependencies"):
        names.extend(manifest.get(section, {}))
    return names


def state_management_packages(manifest: Mapping[str, Any] | str) -> list[str]:
    """List the state-management packages declared in *manifest*."""
    return [name for name in _dependency_names(manifest) if name in STATE_PACKAGE_NAMES]


def routing_packages(manifest: Mapping[str, Any] | str) -> list[str]:
    """List the router packages declared in *manifest*."""
    return [name for name in _dependency_names(manifest) if name in ROUTING_PACKAGE_NAMES]
