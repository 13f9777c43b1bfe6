"""Static design advice, palettes and ASCII diagrams.

Every lookup is keyed by an open category tag (the answer text the user
picked) and falls back to a generic entry for tags it does not know, so a
lookup never fails and never returns an empty result.  Tables are immutable
tuples; callers always receive a fresh list.
"""

from __future__ import annotations

from collections.abc import Sequence

# ---------------------------------------------------------------------------
# Design recommendations & implementation suggestions
# ---------------------------------------------------------------------------

DESIGN_RECOMMENDATIONS: dict[str, tuple[str, ...]] = {
    "Web Application": (
        "Use responsive grid layout (12-column system)",
        "Implement consistent navigation patterns",
        "Focus on accessibility (WCAG guidelines)",
        "Optimize for both desktop and mobile views",
    ),
    "Mobile Application": (
        "Use thumb-friendly touch targets (minimum 44px)",
        "Follow platform-specific guidelines (Material Design/Human Interface)",
        "Implement intuitive gesture controls",
        "Consider offline functionality",
    ),
    "Desktop Software": (
        "Utilize available screen space effectively",
        "Implement keyboard shortcuts",
        "Use familiar desktop UI patterns",
        "Consider multi-window workflows",
    ),
    "Command Line Tool": (
        "Design clear command structure",
        "Provide helpful error messages",
        "Include comprehensive help documentation",
        "Use consistent parameter naming",
    ),
    "Smartwatch App": (
        "Keep interactions minimal and quick",
        "Use large, easily tappable elements",
        "Leverage voice commands and haptic feedback",
        "Design for glanceable information",
    ),
}

GENERIC_RECOMMENDATIONS: tuple[str, ...] = (
    "Focus on user experience and usability",
    "Maintain consistency throughout the interface",
    "Test with real users early and often",
    "Keep the design simple and intuitive",
)

IMPLEMENTATION_SUGGESTIONS: dict[str, tuple[str, ...]] = {
    "Web Application": (
        "Framework: React, Vue.js, or Angular",
        "CSS Framework: Tailwind CSS, Bootstrap, or Material-UI",
        "Tools: Figma for design, Storybook for components",
    ),
    "Mobile Application": (
        "Native: Swift (iOS), Kotlin (Android)",
        "Cross-platform: React Native, Flutter, or Xamarin",
        "Design Tools: Sketch, Figma, or Adobe XD",
    ),
    "Desktop Software": (
        "Framework: Electron, .NET, or Qt",
        "Design Tools: Figma, Sketch, or Adobe XD",
        "Consider platform-specific guidelines",
    ),
    "Command Line Tool": (
        "Language: Python (Click), Node.js (Commander), or Go (Cobra)",
        "Focus on clear documentation and help text",
        "Consider auto-completion features",
    ),
    "Smartwatch App": (
        "Platform: WatchOS (Swift), Wear OS (Kotlin/Java)",
        "Focus on quick interactions and notifications",
        "Test on actual devices for accuracy",
    ),
}

GENERIC_SUGGESTIONS: tuple[str, ...] = (
    "Choose appropriate technology stack",
    "Plan for scalability and maintenance",
    "Document design decisions and rationale",
)


def design_recommendations(tag: str) -> list[str]:
    """Advice lines for an interface type."""
    return list(DESIGN_RECOMMENDATIONS.get(tag, GENERIC_RECOMMENDATIONS))


def implementation_suggestions(tag: str) -> list[str]:
    """Technology suggestions for an interface type."""
    return list(IMPLEMENTATION_SUGGESTIONS.get(tag, GENERIC_SUGGESTIONS))


# ---------------------------------------------------------------------------
# Palettes
# ---------------------------------------------------------------------------

DEFAULT_DESIGN_PALETTE = "Minimal & Clean"
DEFAULT_WEBSITE_PALETTE = "Corporate Blue & White"

DESIGN_PALETTES: dict[str, tuple[str, ...]] = {
    "Minimal & Clean": ("#FFFFFF", "#F8F9FA", "#E9ECEF", "#6C757D", "#212529"),
    "Modern & Vibrant": ("#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEAA7"),
    "Professional & Corporate": ("#2C3E50", "#34495E", "#3498DB", "#E74C3C", "#F39C12"),
    "Dark & Sleek": ("#1A1A1A", "#2D2D2D", "#404040", "#0066CC", "#00CC66"),
    "Nature & Organic": ("#2ECC71", "#27AE60", "#F1C40F", "#E67E22", "#8B4513"),
}

WEBSITE_PALETTES: dict[str, tuple[str, ...]] = {
    "Corporate Blue & White": ("#0066CC", "#FFFFFF", "#F8F9FA", "#E9ECEF", "#6C757D"),
    "Nature Green & Earth Tones": ("#2ECC71", "#27AE60", "#F1C40F", "#E67E22", "#8B4513"),
    "Bold Red & Black": ("#E74C3C", "#C0392B", "#2C3E50", "#FFFFFF", "#BDC3C7"),
    "Modern Purple & Gray": ("#9B59B6", "#8E44AD", "#34495E", "#ECF0F1", "#95A5A6"),
    "Warm Orange & Yellow": ("#F39C12", "#E67E22", "#F1C40F", "#FFF3CD", "#856404"),
    "Monochrome Black & White": ("#000000", "#2C3E50", "#FFFFFF", "#ECF0F1", "#BDC3C7"),
    "Custom Color Palette": ("#4A90E2", "#7ED321", "#F5A623", "#D0021B", "#9013FE"),
}


def color_palette(design_style: str) -> list[str]:
    """Hex colors suggested for a design style."""
    return list(DESIGN_PALETTES.get(design_style, DESIGN_PALETTES[DEFAULT_DESIGN_PALETTE]))


def website_palette(color_scheme: str) -> list[str]:
    """Hex colors for a website color scheme."""
    return list(WEBSITE_PALETTES.get(color_scheme, WEBSITE_PALETTES[DEFAULT_WEBSITE_PALETTE]))


# ---------------------------------------------------------------------------
# Static lists
# ---------------------------------------------------------------------------

MOBILE_GUIDELINES: tuple[str, ...] = (
    "Minimum touch target size: 44px (iOS) / 48dp (Android)",
    "Use native navigation patterns",
    "Optimize for one-handed use",
    "Consider thumb-friendly zones",
    "Implement swipe gestures appropriately",
    "Use system fonts when possible",
    "Test on various screen sizes",
    "Consider battery usage in design decisions",
)

ACCESSIBILITY_CHECKLIST: tuple[str, ...] = (
    "Ensure sufficient color contrast (4.5:1 ratio)",
    "Provide alternative text for images",
    "Use semantic HTML elements",
    "Ensure keyboard navigation support",
    "Include focus indicators",
    "Use descriptive link text",
    "Provide captions for videos",
    "Test with screen readers",
    "Support browser zoom up to 200%",
    "Use ARIA labels when necessary",
)

RESEARCH_TIPS: tuple[str, ...] = (
    "Analyze competitor user flows and navigation",
    "Study industry-specific design patterns",
    "Research current web design trends",
    "Review accessibility standards in your industry",
    "Analyze user reviews of competitor sites",
    "Study successful sites outside your industry for inspiration",
)

WIREFRAME_TOOLS: tuple[str, ...] = (
    "Figma - Free, collaborative, web-based",
    "Sketch - Mac-only, industry standard",
    "Adobe XD - Cross-platform, comprehensive",
    "Balsamiq - Quick, low-fidelity mockups",
    "Whimsical - Simple, fast wireframing",
    "Pen & Paper - Quick ideation phase",
)

VISUAL_STYLE_RECOMMENDATIONS: tuple[str, ...] = (
    "Maintain consistent visual hierarchy",
    "Use whitespace effectively for readability",
    "Ensure color contrast meets WCAG standards",
    "Choose fonts that reflect brand personality",
    "Optimize images for web performance",
    "Create a cohesive visual language",
    "Consider mobile-first design approach",
)

HIGH_FIDELITY_CHECKLIST: tuple[str, ...] = (
    "Create pixel-perfect layouts for all breakpoints",
    "Define interactive states (hover, active, focus)",
    "Specify exact typography scales and spacing",
    "Design error states and loading animations",
    "Create component variations and states",
    "Ensure accessibility compliance",
    "Test designs with real content",
    "Create style guide and documentation",
)

TESTING_RECOMMENDATIONS: tuple[str, ...] = (
    "Conduct usability testing with 5-8 users",
    "Test on multiple devices and browsers",
    "Validate accessibility with screen readers",
    "Check loading performance on slow connections",
    "Test form submissions and error handling",
    "Validate mobile touch interactions",
    "Review content readability and clarity",
    "Test conversion funnel effectiveness",
)

HANDOFF_CHECKLIST: tuple[str, ...] = (
    "Export all design assets (images, icons, fonts)",
    "Provide design specifications document",
    "Create component library/style guide",
    "Document interaction animations",
    "Specify responsive behavior guidelines",
    "Include accessibility requirements",
    "Provide content strategy document",
    "Set up design review checkpoints",
)

NEXT_STEPS: tuple[str, ...] = (
    "Create detailed wireframes in chosen design tool",
    "Develop high-fidelity mockups for all pages",
    "Build component library and style guide",
    "Conduct user testing on key pages",
    "Prepare development assets and documentation",
    "Set up regular review cycles with stakeholders",
    "Plan analytics and conversion tracking",
    "Execute development and launch strategy",
)


# ---------------------------------------------------------------------------
# Diagrams
# ---------------------------------------------------------------------------


def _frame(rows: Sequence[str], width: int, title: str = "") -> str:
    """Draw a box of inner *width*; a ``"---"`` row becomes a divider."""
    top = f" {title} ".center(width, "─") if title else "─" * width
    lines = [f"┌{top}┐"]
    for row in rows:
        if row == "---":
            lines.append(f"├{'─' * width}┤")
        else:
            lines.append(f"│{row:<{width}}│")
    lines.append(f"└{'─' * width}┘")
    return "\n".join(lines)


def _web_wireframe() -> str:
    inner = 27
    side = ("Sidebar", "", "• Feature1", "• Feature2", "• Feature3", "")
    main = (
        "Main Content",
        "",
        f"┌{'─' * inner}┐",
        f"│{'Content Area':^{inner}}│",
        f"│{'':{inner}}│",
        f"└{'─' * inner}┘",
    )
    rows = [
        f"  {'Logo    Navigation Menu':<36}{'User Profile':<17}",
        "---",
        "",
        f"  ┌{'─' * 13}┐  ┌{'─' * 33}┐",
        *(f"  │ {s:<12}│  │ {m:<32}│" for s, m in zip(side, main)),
        f"  └{'─' * 13}┘  └{'─' * 33}┘",
        "",
        "---",
        f"{'FOOTER':^55}",
    ]
    return _frame(rows, 55, title="HEADER")


def _mobile_wireframe() -> str:
    feature = ("  ┌───────────┐", "  │  Feature  │", "  └───────────┘")
    rows = [
        f"{'Status Bar':^17}",
        "---",
        " ← Title       ≡",
        "---",
        "",
        f"{'Main Content':^17}",
        "",
        *feature,
        "",
        *feature,
        "",
        "---",
        f"{'Tab Navigation':^17}",
        " [⌂] [☰] [⚙] [☺]",
    ]
    return _frame(rows, 17)


def _desktop_wireframe() -> str:
    side = ("Project", "Explorer", "", "• Folder1", "• Folder2", "  • File1", "  • File2")
    main = ("Workspace", "", "Main editing/working area", "", "", "", "")
    rows = [
        f"{' File  Edit  View  Tools  Help':<55}□ ─ ✕",
        "---",
        " Toolbar: [New] [Open] [Save] [Cut] [Copy] [Paste]",
        "---",
        "",
        f" ┌{'─' * 13}┐  ┌{'─' * 41}┐",
        *(f" │ {s:<12}│  │ {m:<40}│" for s, m in zip(side, main)),
        f" └{'─' * 13}┘  └{'─' * 41}┘",
        "",
        "---",
        " Status Bar: Ready | Line 1, Col 1 | 100% | UTF-8",
    ]
    return _frame(rows, 61)


def _generic_wireframe() -> str:
    rows = [
        f"{'Header':^37}",
        "---",
        "",
        f"{'Main Content':^37}",
        "",
        "---",
        f"{'Footer':^37}",
    ]
    return _frame(rows, 37)


WIREFRAMES: dict[str, str] = {
    "Web Application": _web_wireframe(),
    "Mobile Application": _mobile_wireframe(),
    "Desktop Software": _desktop_wireframe(),
}

GENERIC_WIREFRAME = _generic_wireframe()


def wireframe_template(tag: str) -> str:
    """ASCII wireframe for an interface type."""
    return WIREFRAMES.get(tag, GENERIC_WIREFRAME)


def render_site_map(main_pages: str) -> str:
    """Draw the site map tree for a comma-separated page list.

    The home page is always the root; a "Home" entry in the list is not
    repeated as a child.
    """
    pages = [page.strip() for page in main_pages.split(",")]
    children = [page for page in pages if page and page.lower() != "home"]

    lines = [
        f"┌{'─' * 37}┐",
        f"│{'HOME PAGE':^37}│",
        f"└{'─' * 17}┬{'─' * 19}┘",
    ]
    indent = " " * 18
    if children:
        lines.append(f"{indent}│")
    for i, page in enumerate(children):
        connector = "└" if i == len(children) - 1 else "├"
        lines.append(f"{indent}{connector}─── {page.upper()}")
    return "\n".join(lines)


def render_homepage_wireframe(content_priority: str = "") -> str:
    """Homepage wireframe with the prioritised content in the main area."""
    text = content_priority.strip() or "Key Content"
    if len(text) > 32:
        text = text[:29] + "..."
    rows = [
        f"{'HEADER':^64}",
        f"  {'[LOGO]  [Nav Menu]':<41}[Search] [CTA Button]",
        "---",
        "",
        f"{'HERO SECTION':^64}",
        f"{'[Main Headline & Subtext]':^64}",
        f"{'[Primary CTA Button]':^64}",
        "",
        "---",
        "",
        "  [Feature 1]      [Feature 2]      [Feature 3]",
        "   Content          Content          Content",
        "",
        "---",
        "",
        f"{'MAIN CONTENT AREA':^64}",
        f"  ┌{'─' * 17}┐  ┌{'─' * 34}┐",
        f"  │{'   Sidebar/':<17}│  │{'  Primary Content':<34}│",
        f"  │{'   Navigation':<17}│  │{'':<34}│",
        f"  │{'':<17}│  │  {text:<32}│",
        f"  └{'─' * 17}┘  └{'─' * 34}┘",
        "",
        "---",
        f"{'FOOTER':^64}",
        f"{'[Links] [Contact] [Social Media] [Newsletter Signup]':^64}",
    ]
    return _frame(rows, 64)
