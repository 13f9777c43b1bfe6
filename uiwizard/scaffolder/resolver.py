"""Selection resolver: scaffold choices -> ``ContentBundle``.

Each artifact generator looks up its own templates from the choices and
returns a ``{path: content}`` mapping.  Generators share no state; the
resolver merges their outputs into one bundle and rejects duplicate paths.
Nothing here touches the output directory.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, Optional, Union

from uiwizard.scaffolder.manifest import render_manifest, resolve_state_manager, uses_routing
from uiwizard.scaffolder.models import (
    COLOR_THEME_LABELS,
    CSS_FRAMEWORK_LABELS,
    DESIGN_STYLE_LABELS,
    ECOSYSTEM_LABELS,
    MANIFEST_PATH,
    STATE_MANAGER_LABELS,
    UI_TYPE_LABELS,
    BundleConflictError,
    ColorTheme,
    ContentBundle,
    CssFramework,
    DesignStyle,
    Ecosystem,
    ScaffoldChoices,
    UIType,
)
from uiwizard.scaffolder.templates import TemplateRenderer

Artifacts = dict[str, str]
ArtifactGenerator = Callable[[ScaffoldChoices, dict[str, Any], TemplateRenderer], Artifacts]

# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

THEME_COLORS: dict[ColorTheme, dict[str, str]] = {
    ColorTheme.LIGHT: {
        "primary-color": "#3b82f6",
        "secondary-color": "#64748b",
        "background-color": "#ffffff",
        "text-color": "#1f2937",
        "border-color": "#e5e7eb",
    },
    ColorTheme.DARK: {
        "primary-color": "#60a5fa",
        "secondary-color": "#94a3b8",
        "background-color": "#111827",
        "text-color": "#f9fafb",
        "border-color": "#374151",
    },
    ColorTheme.PASTEL: {
        "primary-color": "#fbbf24",
        "secondary-color": "#f472b6",
        "background-color": "#fef3c7",
        "text-color": "#374151",
        "border-color": "#fde68a",
    },
    ColorTheme.NEON: {
        "primary-color": "#10b981",
        "secondary-color": "#8b5cf6",
        "background-color": "#000000",
        "text-color": "#00ff88",
        "border-color": "#00ff88",
    },
    ColorTheme.CUSTOM: {
        "primary-color": "#4f46e5",
        "secondary-color": "#7c3aed",
        "background-color": "#ffffff",
        "text-color": "#1f2937",
        "border-color": "#d1d5db",
    },
}

ECOSYSTEM_DIRECTORIES: dict[Ecosystem, tuple[str, ...]] = {
    Ecosystem.REACT: ("src", "src/components", "src/pages", "src/styles", "src/assets", "public"),
    Ecosystem.VUE: ("src", "src/components", "src/views", "src/assets", "src/styles", "public"),
    Ecosystem.SVELTE: ("src", "src/components", "src/routes", "src/lib", "static"),
    Ecosystem.VANILLA: ("css", "js", "images", "assets"),
}

# (output path, template) pairs rendered for every project of the ecosystem
_ENTRY_TEMPLATES: dict[Ecosystem, tuple[tuple[str, str], ...]] = {
    Ecosystem.REACT: (
        ("src/App.js", "react/App.js.j2"),
        ("src/index.js", "react/index.js.j2"),
        ("src/index.css", "react/index.css.j2"),
        ("src/components/Header.js", "react/Header.js.j2"),
        ("public/index.html", "react/index.html.j2"),
    ),
    Ecosystem.VUE: (
        ("src/App.vue", "vue/App.vue.j2"),
        ("src/main.js", "vue/main.js.j2"),
        ("src/components/Header.vue", "vue/Header.vue.j2"),
        ("index.html", "vue/index.html.j2"),
        ("vite.config.js", "vue/vite.config.js.j2"),
    ),
    Ecosystem.SVELTE: (
        ("src/App.svelte", "svelte/App.svelte.j2"),
        ("src/main.js", "svelte/main.js.j2"),
        ("src/components/Header.svelte", "svelte/Header.svelte.j2"),
        ("src/app.html", "svelte/app.html.j2"),
        ("vite.config.js", "svelte/vite.config.js.j2"),
    ),
    Ecosystem.VANILLA: (
        ("index.html", "vanilla/index.html.j2"),
        ("js/main.js", "vanilla/main.js.j2"),
    ),
}

STYLESHEET_PATHS: dict[Ecosystem, str] = {
    Ecosystem.REACT: "src/App.css",
    Ecosystem.VUE: "src/style.css",
    Ecosystem.SVELTE: "src/app.css",
    Ecosystem.VANILLA: "css/main.css",
}

TAILWIND_CONTENT: dict[Ecosystem, tuple[str, ...]] = {
    Ecosystem.REACT: ("./src/**/*.{js,jsx}", "./public/index.html"),
    Ecosystem.VUE: ("./index.html", "./src/**/*.{vue,js}"),
    Ecosystem.SVELTE: ("./src/**/*.{html,svelte,js}",),
}

START_COMMANDS: dict[Ecosystem, str] = {
    Ecosystem.REACT: "npm start",
    Ecosystem.VUE: "npm run dev",
    Ecosystem.SVELTE: "npm run dev",
    Ecosystem.VANILLA: "Open index.html in your browser",
}

DEV_PORTS: dict[Ecosystem, Optional[int]] = {
    Ecosystem.REACT: 3000,
    Ecosystem.VUE: 5173,
    Ecosystem.SVELTE: 5173,
    Ecosystem.VANILLA: None,
}

_STRUCTURES: dict[Ecosystem, str] = {
    Ecosystem.REACT: """\
{name}/
├── public/
│   └── index.html
├── src/
│   ├── components/
│   ├── pages/
│   ├── styles/
│   ├── App.js
│   └── index.js
├── package.json
└── README.md""",
    Ecosystem.VUE: """\
{name}/
├── public/
├── src/
│   ├── components/
│   ├── views/
│   ├── assets/
│   ├── App.vue
│   └── main.js
├── index.html
├── package.json
└── README.md""",
    Ecosystem.SVELTE: """\
{name}/
├── src/
│   ├── components/
│   ├── routes/
│   ├── lib/
│   ├── app.html
│   └── App.svelte
├── static/
├── package.json
└── README.md""",
    Ecosystem.VANILLA: """\
{name}/
├── css/
├── js/
├── images/
├── index.html
└── README.md""",
}

NPM_ECOSYSTEMS = frozenset({Ecosystem.REACT, Ecosystem.VUE, Ecosystem.SVELTE})

_DEFAULT_LAYOUT = UIType.CUSTOM
_DEFAULT_PALETTE = ColorTheme.CUSTOM
_DEFAULT_DESIGN = DesignStyle.MODERN


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------


def theme_colors(theme: ColorTheme) -> dict[str, str]:
    """Return the CSS variables for *theme*, falling back to the custom palette."""
    return dict(THEME_COLORS.get(theme, THEME_COLORS[_DEFAULT_PALETTE]))


def build_context(choices: ScaffoldChoices) -> dict[str, Any]:
    """Template context shared by every artifact generator."""
    colors = theme_colors(choices.style)
    manager = resolve_state_manager(choices)
    ecosystem = choices.ecosystem
    return {
        "project_name": choices.project_name,
        "ui_type": choices.ui_type.value,
        "ui_type_label": UI_TYPE_LABELS[choices.ui_type],
        "ecosystem": ecosystem.value,
        "ecosystem_label": ECOSYSTEM_LABELS[ecosystem],
        "css": choices.css.value,
        "css_label": CSS_FRAMEWORK_LABELS[choices.css],
        "theme_label": COLOR_THEME_LABELS[choices.style],
        "design_style_label": DESIGN_STYLE_LABELS[choices.design_style],
        "colors": list(colors.items()),
        "primary_color": colors["primary-color"],
        "routing": uses_routing(choices),
        "state_manager": manager.value if manager else None,
        "state_manager_label": STATE_MANAGER_LABELS[manager] if manager else "",
        "needs_install": ecosystem in NPM_ECOSYSTEMS,
        "start_command": START_COMMANDS[ecosystem],
        "dev_port": DEV_PORTS[ecosystem],
        "structure": _STRUCTURES[ecosystem].format(name=choices.project_name),
        "stylesheet_path": STYLESHEET_PATHS[ecosystem],
        "tailwind_directives": (
            choices.css is CssFramework.TAILWIND
            and ecosystem in (Ecosystem.VUE, Ecosystem.SVELTE)
        ),
    }


def _layout_kind(ecosystem: Ecosystem) -> str:
    return "jsx" if ecosystem is Ecosystem.REACT else "html"


def render_layout(choices: ScaffoldChoices, context: dict[str, Any], renderer: TemplateRenderer) -> str:
    """Render the page body for the chosen UI type (custom layout as fallback)."""
    kind = _layout_kind(choices.ecosystem)
    return renderer.render_first(
        [
            f"layouts/{kind}/{choices.ui_type.value}.j2",
            f"layouts/{kind}/{_DEFAULT_LAYOUT.value}.j2",
        ],
        context,
    )


def render_design_rules(choices: ScaffoldChoices, context: dict[str, Any], renderer: TemplateRenderer) -> str:
    """Render the style rules for the chosen design style (modern as fallback)."""
    return renderer.render_first(
        [
            f"styles/design/{choices.design_style.value}.css.j2",
            f"styles/design/{_DEFAULT_DESIGN.value}.css.j2",
        ],
        context,
    )


# ---------------------------------------------------------------------------
# Artifact generators
# ---------------------------------------------------------------------------


def manifest_artifact(choices: ScaffoldChoices, context: dict[str, Any], renderer: TemplateRenderer) -> Artifacts:
    manifest = render_manifest(choices)
    return {MANIFEST_PATH: manifest} if manifest is not None else {}


def entry_artifacts(choices: ScaffoldChoices, context: dict[str, Any], renderer: TemplateRenderer) -> Artifacts:
    return {
        path: renderer.render(template, context)
        for path, template in _ENTRY_TEMPLATES[choices.ecosystem]
    }


def stylesheet_artifact(choices: ScaffoldChoices, context: dict[str, Any], renderer: TemplateRenderer) -> Artifacts:
    return {STYLESHEET_PATHS[choices.ecosystem]: renderer.render("styles/main.css.j2", context)}


def page_artifacts(choices: ScaffoldChoices, context: dict[str, Any], renderer: TemplateRenderer) -> Artifacts:
    """Extra static pages; only plain HTML landing pages get one."""
    if choices.ecosystem is Ecosystem.VANILLA and choices.ui_type is UIType.LANDING:
        return {"about.html": renderer.render("vanilla/about.html.j2", context)}
    return {}


def tailwind_artifacts(choices: ScaffoldChoices, context: dict[str, Any], renderer: TemplateRenderer) -> Artifacts:
    """Tailwind and PostCSS configs for npm projects using the Tailwind addon."""
    globs = TAILWIND_CONTENT.get(choices.ecosystem)
    if choices.css is not CssFramework.TAILWIND or globs is None:
        return {}
    tailwind_context = {**context, "content_globs": list(globs)}
    return {
        "tailwind.config.js": renderer.render("tailwind/tailwind.config.js.j2", tailwind_context),
        "postcss.config.js": renderer.render("tailwind/postcss.config.js.j2", tailwind_context),
    }


def docs_artifacts(choices: ScaffoldChoices, context: dict[str, Any], renderer: TemplateRenderer) -> Artifacts:
    return {
        "README.md": renderer.render("common/README.md.j2", context),
        ".gitignore": renderer.render("common/gitignore.j2", context),
    }


ARTIFACT_GENERATORS: tuple[ArtifactGenerator, ...] = (
    manifest_artifact,
    entry_artifacts,
    stylesheet_artifact,
    page_artifacts,
    tailwind_artifacts,
    docs_artifacts,
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def merge_artifacts(parts: Iterable[Artifacts]) -> Artifacts:
    """Merge generator outputs in order.

    Raises:
        BundleConflictError: If two generators produce the same path.
    """
    files: Artifacts = {}
    for part in parts:
        for path, content in part.items():
            if path in files:
                raise BundleConflictError(f"Path generated twice: {path}")
            files[path] = content
    return files


def resolve_bundle(
    selection: Union[ScaffoldChoices, Mapping[str, Any]],
    renderer: Optional[TemplateRenderer] = None,
) -> ContentBundle:
    """Resolve a scaffold ``AnswerRecord`` (or parsed choices) to a bundle.

    Args:
        selection: A ``ScaffoldChoices`` or any mapping of scaffold answers.
        renderer: Template renderer; the packaged templates are used when
            omitted.

    Returns:
        A new ``ContentBundle``.  The same selection always yields an equal
        bundle.
    """
    choices = (
        selection if isinstance(selection, ScaffoldChoices) else ScaffoldChoices.from_record(selection)
    )
    renderer = renderer or TemplateRenderer()

    context = build_context(choices)
    context["layout"] = render_layout(choices, context, renderer)
    context["design_rules"] = render_design_rules(choices, context, renderer).strip()

    files = merge_artifacts(
        generator(choices, context, renderer) for generator in ARTIFACT_GENERATORS
    )
    return ContentBundle(
        project_name=choices.project_name,
        files=files,
        directories=list(ECOSYSTEM_DIRECTORIES[choices.ecosystem]),
    )
