"""Interactive prompts.

Thin wrapper over ``click.prompt`` that turns an aborted prompt
(Ctrl-C or end of input) into ``UserCancelledError``.
"""

from typing import Dict

import click

from rncreate.core.errors import UserCancelledError
from rncreate.ui.console import console
from rncreate.ui.theme import Symbols

EXIT_CHOICE = "exit"


def _non_blank(value: str) -> str:
    if not value.strip():
        raise click.UsageError("Please provide a valid name.")
    return value


class PromptService:
    """Asks the user for an artifact kind or a name."""

    def choose_kind(self, labels: Dict[str, str]) -> str:
        """Show the kind menu and return the chosen key (or ``exit``).

        Args:
            labels: Kind value -> menu label (rich markup allowed)
        """
        console.print("[bold]What would you like to create?[/]")
        for key, label in labels.items():
            console.print(f"  [bold]{key:<12}[/] {label}")
        console.print(f"  [text.dim]{Symbols.RULE * 12}[/]")
        console.print(f"  [bold]{EXIT_CHOICE:<12}[/] [red]{Symbols.EXIT} Exit[/]")

        choices = list(labels) + [EXIT_CHOICE]
        return self._prompt("Choice", type=click.Choice(choices), show_choices=False)

    def ask_name(self, message: str = "Which name should we use?") -> str:
        """Ask for a name, re-asking while it is blank."""
        return self._prompt(message, value_proc=_non_blank)

    def _prompt(self, text: str, **kwargs) -> str:
        try:
            return click.prompt(text, **kwargs)
        except click.Abort as e:
            raise UserCancelledError("Prompt cancelled by user") from e
