"""Tests for TemplateRenderer (uiwizard.scaffolder.templates)."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from uiwizard.scaffolder.models import DesignStyle, UIType
from uiwizard.scaffolder.templates import TemplateRenderer

pytestmark = pytest.mark.unit


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    (tmp_path / "layouts").mkdir()
    (tmp_path / "layouts" / "custom.j2").write_text("custom {{ name }}\n", encoding="utf-8")
    (tmp_path / "layouts" / "landing.j2").write_text("landing {{ name | pascal_case }}\n", encoding="utf-8")
    (tmp_path / "slug.j2").write_text("{{ name | slugify }}", encoding="utf-8")
    return tmp_path


class TestRendering:
    def test_render(self, template_dir: Path):
        renderer = TemplateRenderer(template_dir)
        assert renderer.render("layouts/custom.j2", {"name": "x"}) == "custom x\n"

    def test_custom_filters(self, template_dir: Path):
        renderer = TemplateRenderer(template_dir)
        assert renderer.render("layouts/landing.j2", {"name": "my-shop"}) == "landing MyShop\n"
        assert renderer.render("slug.j2", {"name": "My Shop!"}) == "my-shop"

    def test_undefined_variable_raises(self, template_dir: Path):
        renderer = TemplateRenderer(template_dir)
        with pytest.raises(UndefinedError):
            renderer.render("layouts/custom.j2", {})

    def test_missing_template_raises(self, template_dir: Path):
        with pytest.raises(TemplateNotFound):
            TemplateRenderer(template_dir).render("nope.j2", {})

    def test_render_first_prefers_specific(self, template_dir: Path):
        renderer = TemplateRenderer(template_dir)
        text = renderer.render_first(["layouts/landing.j2", "layouts/custom.j2"], {"name": "a"})
        assert text == "landing A\n"

    def test_render_first_falls_back(self, template_dir: Path):
        renderer = TemplateRenderer(template_dir)
        text = renderer.render_first(["layouts/blog.j2", "layouts/custom.j2"], {"name": "a"})
        assert text == "custom a\n"


class TestPackagedTemplates:
    @pytest.mark.parametrize("kind", ["jsx", "html"])
    def test_layout_for_every_ui_type(self, kind: str):
        renderer = TemplateRenderer()
        for ui_type in UIType:
            assert (renderer.template_dir / "layouts" / kind / f"{ui_type.value}.j2").is_file()

    def test_rules_for_every_design_style(self):
        renderer = TemplateRenderer()
        for style in DesignStyle:
            assert (renderer.template_dir / "styles" / "design" / f"{style.value}.css.j2").is_file()
