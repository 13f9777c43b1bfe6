"""Questions asked by the design-prompt wizard and the website workflow."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from uiwizard.designer import recommendations as rec
from uiwizard.prompts import Choice, Question, QuestionKind

INTERFACE_TYPES: tuple[str, ...] = (
    "Web Application",
    "Mobile Application",
    "Desktop Software",
    "Command Line Tool",
    "Smartwatch App",
    "Other",
)

DESIGN_STYLES: tuple[str, ...] = (
    "Minimal & Clean",
    "Modern & Vibrant",
    "Playful & Fun",
    "Professional & Corporate",
    "Dark & Sleek",
    "Nature & Organic",
    "Futuristic & Tech",
    "Classic & Traditional",
)

COLOR_SCHEMES: tuple[str, ...] = tuple(rec.WEBSITE_PALETTES)


def _options(values: tuple[str, ...]) -> list[Choice]:
    return [Choice(label=value, value=value) for value in values]


def _text(key: str, message: str) -> Question:
    return Question(key=key, message=message, kind=QuestionKind.TEXT)


# ---------------------------------------------------------------------------
# Design prompt
# ---------------------------------------------------------------------------

DESIGN_QUESTIONS: list[Question] = [
    Question(
        key="interface_type",
        message="What type of interface would you like to design?",
        kind=QuestionKind.CHOICE,
        choices=_options(INTERFACE_TYPES),
    ),
    _text("purpose", "What is the main purpose of your app?"),
    _text("target_users", "Who are your target users? (e.g., teenagers, professionals, elderly)"),
    Question(
        key="screen_count",
        message="How many screens/pages do you need?",
        kind=QuestionKind.TEXT,
        visible_when=lambda a: a.get("interface_type") != "Command Line Tool",
        depends_on=["interface_type"],
    ),
    _text("features", "What are the key features? (separate with commas)"),
    Question(
        key="design_style",
        message="Select your preferred design style:",
        kind=QuestionKind.CHOICE,
        choices=_options(DESIGN_STYLES),
    ),
    _text("color_preference", "Any color preferences? (optional)"),
    _text("additional_requirements", "Any additional requirements or constraints? (optional)"),
]

# Display labels for the design prompt, in declaration order
DESIGN_FIELDS: tuple[tuple[str, str], ...] = (
    ("interface_type", "Project Type"),
    ("purpose", "Purpose"),
    ("target_users", "Target Users"),
    ("screen_count", "Screen Count"),
    ("features", "Key Features"),
    ("design_style", "Design Style"),
    ("color_preference", "Color Preferences"),
    ("additional_requirements", "Additional Requirements"),
)


# ---------------------------------------------------------------------------
# Website design workflow
# ---------------------------------------------------------------------------


class WebsiteStep(BaseModel):
    """One step of the website design workflow."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    questions: list[Question]
    tips_title: str
    tips: tuple[str, ...]
    checklist: bool = Field(default=False, description="Render tips as checkboxes")
    complete: str


WEBSITE_STEPS: list[WebsiteStep] = [
    WebsiteStep(
        number=1,
        title="DEFINE OBJECTIVES AND AUDIENCE",
        questions=[
            _text("purpose", "What is the primary purpose of the website?"),
            _text("business_goals", "What are the main business goals? (e.g., increase sales, brand awareness)"),
            _text("target_audience", "Describe your target audience in detail"),
            _text("user_personas", "List 2-3 key user personas (e.g., Young Professional, Retiree, Student)"),
            _text("geography", "Geographic target (local, national, global)"),
        ],
        tips_title="",
        tips=(),
        complete="Objectives and Audience Defined",
    ),
    WebsiteStep(
        number=2,
        title="RESEARCH AND GATHER INSPIRATION",
        questions=[
            _text("competitors", "List 3-5 competitor websites for analysis"),
            _text("inspiration", "Any websites you admire for design/functionality?"),
            _text("industry", "What industry/sector is this for?"),
            _text("trends", "Any specific design trends you want to incorporate?"),
        ],
        tips_title="RESEARCH RECOMMENDATIONS",
        tips=rec.RESEARCH_TIPS,
        complete="Research and Inspiration Gathered",
    ),
    WebsiteStep(
        number=3,
        title="CREATE SITE MAP",
        questions=[
            _text("main_pages", "List all main pages needed (e.g., Home, About, Services, Contact)"),
            _text("sub_pages", "Any sub-pages or categories?"),
            _text("user_flows", "Describe key user journeys (e.g., visitor to customer)"),
            _text("navigation", "Navigation style preference (header menu, sidebar, mega menu)"),
        ],
        tips_title="",
        tips=(),
        complete="Site Map Created",
    ),
    WebsiteStep(
        number=4,
        title="DESIGN WIREFRAMES",
        questions=[
            _text("layout", "Preferred layout structure (header/sidebar/footer, full-width, grid)"),
            _text("content_priority", "What content should be most prominent on homepage?"),
            _text("cta_elements", "Main call-to-action elements needed"),
        ],
        tips_title="WIREFRAME TOOLS RECOMMENDATIONS",
        tips=rec.WIREFRAME_TOOLS,
        complete="Wireframes Designed",
    ),
    WebsiteStep(
        number=5,
        title="SELECT VISUAL STYLE",
        questions=[
            Question(
                key="color_scheme",
                message="Select your website color scheme:",
                kind=QuestionKind.CHOICE,
                choices=_options(COLOR_SCHEMES),
            ),
            _text("typography", "Typography preference (modern, classic, playful, minimal)"),
            _text("imagery", "Imagery style (photography, illustrations, icons, mixed)"),
            _text("brand_guidelines", "Do you have existing brand guidelines? (y/n)"),
        ],
        tips_title="VISUAL STYLE RECOMMENDATIONS",
        tips=rec.VISUAL_STYLE_RECOMMENDATIONS,
        complete="Visual Style Selected",
    ),
    WebsiteStep(
        number=6,
        title="DEVELOP HIGH-FIDELITY DESIGNS",
        questions=[
            _text("design_tool", "Preferred design tool (Figma, Sketch, Adobe XD, other)"),
            _text("design_system", "Will you create a design system/component library? (y/n)"),
            _text("responsive_breakpoints", "Target breakpoints (desktop, tablet, mobile specific sizes)"),
        ],
        tips_title="HIGH-FIDELITY DESIGN CHECKLIST",
        tips=rec.HIGH_FIDELITY_CHECKLIST,
        checklist=True,
        complete="High-Fidelity Designs Planned",
    ),
    WebsiteStep(
        number=7,
        title="TEST AND ITERATE",
        questions=[
            _text("testing_methods", "Preferred testing methods (user testing, A/B testing, surveys)"),
            _text("testing_tools", "Testing tools you plan to use (optional)"),
            _text("feedback_sources", "Who will provide feedback (stakeholders, users, team)"),
        ],
        tips_title="TESTING RECOMMENDATIONS",
        tips=rec.TESTING_RECOMMENDATIONS,
        complete="Testing Strategy Defined",
    ),
    WebsiteStep(
        number=8,
        title="HANDOFF TO DEVELOPMENT",
        questions=[
            _text("tech_stack", "Planned technology stack (React, WordPress, etc.)"),
            _text("developer", "Who will develop this (in-house, freelancer, agency)"),
            _text("timeline", "Development timeline/deadline"),
        ],
        tips_title="DEVELOPMENT HANDOFF CHECKLIST",
        tips=rec.HANDOFF_CHECKLIST,
        checklist=True,
        complete="Development Handoff Prepared",
    ),
]

# Report sections: (title, ((key, label), ...))
WEBSITE_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "PROJECT OVERVIEW",
        (
            ("purpose", "Purpose"),
            ("business_goals", "Business Goals"),
            ("target_audience", "Target Audience"),
            ("user_personas", "User Personas"),
            ("geography", "Geographic Target"),
        ),
    ),
    (
        "RESEARCH & INSPIRATION",
        (
            ("industry", "Industry"),
            ("competitors", "Competitors"),
            ("inspiration", "Inspiration"),
            ("trends", "Design Trends"),
        ),
    ),
    (
        "SITE STRUCTURE",
        (
            ("main_pages", "Main Pages"),
            ("sub_pages", "Sub Pages"),
            ("navigation", "Navigation Style"),
            ("user_flows", "User Flows"),
            ("content_priority", "Homepage Priority"),
            ("cta_elements", "Calls to Action"),
        ),
    ),
    (
        "VISUAL DESIGN",
        (
            ("color_scheme", "Color Scheme"),
            ("typography", "Typography"),
            ("imagery", "Imagery Style"),
            ("brand_guidelines", "Brand Guidelines"),
            ("layout", "Layout Structure"),
        ),
    ),
    (
        "DEVELOPMENT DETAILS",
        (
            ("design_tool", "Design Tool"),
            ("design_system", "Design System"),
            ("responsive_breakpoints", "Breakpoints"),
            ("tech_stack", "Tech Stack"),
            ("developer", "Developer"),
            ("timeline", "Timeline"),
        ),
    ),
    (
        "TESTING STRATEGY",
        (
            ("testing_methods", "Testing Methods"),
            ("testing_tools", "Testing Tools"),
            ("feedback_sources", "Feedback Sources"),
        ),
    ),
)
