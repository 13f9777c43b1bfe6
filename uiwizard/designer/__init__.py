"""UI/UX design-prompt wizard.

Quick usage::

    from uiwizard.config import Config
    from uiwizard.designer import DesignerSession
    from uiwizard.prompts import PromptSequencer

    DesignerSession(Config(), PromptSequencer()).run()
"""

from uiwizard.designer.recommendations import (
    color_palette,
    design_recommendations,
    implementation_suggestions,
    website_palette,
    wireframe_template,
)
from uiwizard.designer.report import (
    render_design_prompt,
    render_website_report,
    save_report,
)
from uiwizard.designer.session import DesignerSession, MenuAction, WebsiteOutcome

__all__ = [
    "DesignerSession",
    "MenuAction",
    "WebsiteOutcome",
    "color_palette",
    "design_recommendations",
    "implementation_suggestions",
    "render_design_prompt",
    "render_website_report",
    "save_report",
    "website_palette",
    "wireframe_template",
]
