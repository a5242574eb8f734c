"""Welcome and farewell banners for the interactive shell."""

from rncreate.core.progress import sleep
from rncreate.ui.console import console
from rncreate.ui.theme import Symbols

TITLE = "React Native Create Template CLI"
SUBTITLE = "MoriWare - https://www.moriware.dev"


def show_welcome(delay_ms: int = 600) -> None:
    """Clear the screen and print the title, subtitle and usage tip."""
    console.clear()
    rule = Symbols.RULE * 45

    console.print(f"[text.dim]{rule}[/]")
    console.print(f"  [title]{TITLE}[/]")
    console.print(f"  [subtitle]{SUBTITLE}[/]")
    console.print(f"[text.dim]{rule}[/]\n")

    console.print(
        "[text]Pick an option from the menu to generate components, screens, "
        "hooks and navigation for your design system.[/]"
    )
    console.print("[text.dim]Tip: use lowerCamelCase names and we take care of the rest!\n[/]")
    if delay_ms > 0:
        sleep(delay_ms)


def show_farewell() -> None:
    console.print("\n[farewell]Thanks for using RN Create Template! See you next time 👋[/]\n")


def show_interrupted() -> None:
    console.print("\n[interrupted]Interrupted by user. Exiting...[/]\n")
