"""Main CLI entry point for rn-create-template."""

import logging
from dataclasses import replace
from typing import Optional

import click
from rich.table import Table

from rncreate import __version__
from rncreate.core.config import load_config, save_config
from rncreate.core.errors import UserCancelledError
from rncreate.core.models import ArtifactKind
from rncreate.core.progress import progress_step
from rncreate.core.staging import INDEX_FILENAME
from rncreate.flow import RETURN_DELAY_MS, handle_creation_flow
from rncreate.registry import KIND_DIRECTORIES, Registry, build_registry
from rncreate.ui.banner import show_farewell, show_interrupted, show_welcome
from rncreate.ui.console import console
from rncreate.ui.prompts import EXIT_CHOICE, PromptService
from rncreate.ui.theme import MUTED

logger = logging.getLogger(__name__)


@click.command()
@click.argument("kind", required=False)
@click.argument("name", required=False)
@click.option("--list", "list_kinds", is_flag=True, help="List artifact kinds and exit")
@click.option("--init-config", is_flag=True, help="Write the current settings to .rncreate/config.json and exit")
@click.option("--no-delay", is_flag=True, help="Skip the pauses between progress steps")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="rn-create-template")
def main(
    kind: Optional[str],
    name: Optional[str],
    list_kinds: bool,
    init_config: bool,
    no_delay: bool,
    verbose: bool,
):
    """rn-create-template - scaffold React Native artifacts.

    KIND is one of component, screen, hook or navigation.
    NAME is the artifact name (lowerCamelCase recommended).

    \b
    Usage:
      rn-create-template component userCard   Generate src/components/userCard
      rn-create-template screen               Ask for a name, then generate
      rn-create-template                      Interactive menu
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = load_config()
    if init_config:
        path = save_config(config)
        console.print(f"[green]✓[/] Config written to [cyan]{path}[/]")
        return

    if no_delay:
        config = replace(config, step_delay_ms=0, welcome_delay_ms=0)

    registry = build_registry(config)

    if list_kinds:
        _show_kinds(registry, config.source_root)
        return

    prompts = PromptService()
    return_delay = RETURN_DELAY_MS if config.step_delay_ms > 0 else 0
    known = kind in ArtifactKind.values()

    try:
        if kind and name and known:
            handle_creation_flow(kind, name, registry, delay_ms=return_delay)
        elif kind and known and not name:
            name = prompts.ask_name("Type the name")
            handle_creation_flow(kind, name, registry, delay_ms=return_delay)
        else:
            if kind:
                logger.debug("Unrecognized kind %r, falling back to the menu", kind)
            _run_interactive(
                registry,
                prompts,
                config.step_delay_ms,
                config.welcome_delay_ms,
                return_delay,
            )
    except UserCancelledError:
        show_interrupted()
        raise SystemExit(0)


def _run_interactive(
    registry: Registry,
    prompts: PromptService,
    step_delay_ms: int,
    welcome_delay_ms: int,
    return_delay_ms: int,
) -> None:
    """Menu loop: pick a kind, pick a name, generate, repeat until exit."""
    show_welcome(welcome_delay_ms)
    labels = {kind.value: generator.label for kind, generator in registry.items()}

    while True:
        choice = prompts.choose_kind(labels)
        if choice == EXIT_CHOICE:
            break

        name = prompts.ask_name()
        progress_step("Hang on... getting everything ready.", MUTED, step_delay_ms)
        handle_creation_flow(choice, name, registry, delay_ms=return_delay_ms)

    show_farewell()


def _show_kinds(registry: Registry, source_root: str) -> None:
    """Show available artifact kinds."""
    console.print("\n[bold]Available Kinds[/]\n")

    table = Table()
    table.add_column("Kind", style="cyan")
    table.add_column("Directory")
    table.add_column("Files (for 'sample')")

    for kind, generator in registry.items():
        has_index = generator.config.index_kind is not None
        directory = f"{source_root}/{KIND_DIRECTORIES[kind]}"
        if has_index:
            directory += "/<name>"
        files = [f.filename for f in generator.config.build_files("sample")]
        if has_index:
            files.append(INDEX_FILENAME)
        table.add_row(kind.value, directory, ", ".join(files))

    console.print(table, soft_wrap=False)

    console.print("\n[bold]Usage:[/]")
    console.print("  rn-create-template component userCard")
    console.print("  rn-create-template hook")


if __name__ == "__main__":
    main()
