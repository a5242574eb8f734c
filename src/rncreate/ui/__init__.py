"""Terminal UI for rn-create-template: theme, console, prompts, banners."""

from rncreate.ui.theme import TemplateTheme, THEME, Styler, Symbols, styled, plain
from rncreate.ui.console import console
from rncreate.ui.prompts import PromptService, EXIT_CHOICE

__all__ = [
    "TemplateTheme",
    "THEME",
    "Styler",
    "Symbols",
    "styled",
    "plain",
    "console",
    "PromptService",
    "EXIT_CHOICE",
]
