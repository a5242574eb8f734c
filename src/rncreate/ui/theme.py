"""Terminal theme for rn-create-template.

One accent color per artifact kind, plus a few shared styles for
banners, status lines and errors.
"""

from dataclasses import dataclass
from typing import Callable

from rich.markup import escape
from rich.style import Style
from rich.theme import Theme

# Wraps a plain string for display on the shared console.
Styler = Callable[[str], str]


@dataclass
class TemplateTheme:
    """Color palette."""

    # Brand
    PRIMARY = "#6C63FF"      # Title purple
    SECONDARY = "#00C9A7"    # Subtitle teal
    BANNER_BG = "#1b1f3b"    # Farewell background

    # Artifact kinds
    COMPONENT = "bright_cyan"
    SCREEN = "bright_magenta"
    HOOK = "bright_green"
    NAVIGATION = "bright_yellow"

    # Status
    SUCCESS = "bright_green"
    ERROR = "red"

    # Text
    TEXT = "white"
    TEXT_DIM = "grey50"


THEME = Theme({
    # Banner
    "title": Style(color=TemplateTheme.PRIMARY, bold=True),
    "subtitle": Style(color=TemplateTheme.SECONDARY, italic=True),
    "farewell": Style(color=TemplateTheme.TEXT, bgcolor=TemplateTheme.BANNER_BG, bold=True),

    # Artifact kinds
    "kind.component": Style(color=TemplateTheme.COMPONENT),
    "kind.screen": Style(color=TemplateTheme.SCREEN),
    "kind.hook": Style(color=TemplateTheme.HOOK),
    "kind.navigation": Style(color=TemplateTheme.NAVIGATION),

    # Status
    "success": Style(color=TemplateTheme.SUCCESS, bold=True),
    "interrupted": Style(color=TemplateTheme.TEXT, bgcolor=TemplateTheme.ERROR, bold=True),

    # Text
    "text": Style(color=TemplateTheme.TEXT),
    "text.dim": Style(color=TemplateTheme.TEXT_DIM),
})


class Symbols:
    """Terminal symbols."""

    STEP = "›"
    SPARKLES = "✨"
    RULE = "─"

    # Menu labels
    COMPONENT = "🎨"
    SCREEN = "📱"
    HOOK = "🪝"
    NAVIGATION = "🧭"
    EXIT = "🚪"


def styled(style: str) -> Styler:
    """Build a styling function that wraps text in theme markup.

    The text itself is escaped, so names containing ``[`` never turn
    into markup.
    """
    def apply(text: str) -> str:
        return f"[{style}]{escape(text)}[/]"

    return apply


def plain(text: str) -> str:
    """Styling function that leaves text untouched."""
    return text


# Shared stylers
PRIMARY = styled("kind.component")
MUTED = styled("text.dim")
