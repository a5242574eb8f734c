"""Shared rich console."""

from rich.console import Console

from rncreate.ui.theme import THEME

console = Console(theme=THEME, highlight=False, soft_wrap=True)
