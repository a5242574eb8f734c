"""Paced progress output.

Each step prints one styled line and then pauses briefly so the
console reads as a sequence of discrete steps.
"""

import time

from rncreate.ui.console import console
from rncreate.ui.theme import PRIMARY, Styler, Symbols

DEFAULT_STEP_DELAY_MS = 420


def sleep(ms: int = 450) -> None:
    """Pause the current flow for ``ms`` milliseconds."""
    time.sleep(ms / 1000)


def progress_step(
    message: str,
    style: Styler = PRIMARY,
    delay_ms: int = DEFAULT_STEP_DELAY_MS,
) -> None:
    """Print ``› message`` through ``style`` and wait ``delay_ms``."""
    console.print(style(f"{Symbols.STEP} {message}"))
    if delay_ms > 0:
        sleep(delay_ms)
