"""Generator registry: one configured ``ArtifactGenerator`` per kind."""

from pathlib import Path
from typing import Dict, Optional

from rncreate.core.config import ScaffoldConfig
from rncreate.core.generator import ArtifactGenerator
from rncreate.core.models import ArtifactKind, GeneratorConfig
from rncreate.naming import capitalize_first_letter
from rncreate.templates import BUILDERS
from rncreate.ui.theme import Symbols, styled

Registry = Dict[ArtifactKind, ArtifactGenerator]

# Subdirectory of the source root, per kind
KIND_DIRECTORIES = {
    ArtifactKind.COMPONENT: "components",
    ArtifactKind.SCREEN: "screens",
    ArtifactKind.HOOK: "hooks",
    ArtifactKind.NAVIGATION: "navigation",
}


def _success(text: str) -> str:
    return styled("success")(f"{Symbols.SPARKLES} {text}")


def build_registry(config: Optional[ScaffoldConfig] = None) -> Registry:
    """Wire every artifact kind to its generator.

    Base paths are resolved against the working directory at generate
    time, not at registry build time.
    """
    config = config or ScaffoldConfig()
    root = config.source_root

    def kind_root(kind: ArtifactKind) -> Path:
        return Path.cwd() / root / KIND_DIRECTORIES[kind]

    def under_root(kind: ArtifactKind) -> str:
        return f"{root}/{KIND_DIRECTORIES[kind]}"

    configs = {
        ArtifactKind.COMPONENT: GeneratorConfig(
            label=f"[kind.component]{Symbols.COMPONENT} Component[/]",
            style=styled("kind.component"),
            resolve_base_path=lambda name: kind_root(ArtifactKind.COMPONENT) / name,
            build_files=BUILDERS[ArtifactKind.COMPONENT],
            index_kind=ArtifactKind.COMPONENT,
            success_message=lambda name: _success(
                f"Component {capitalize_first_letter(name)} ready at "
                f"{under_root(ArtifactKind.COMPONENT)}/{name}"
            ),
        ),
        ArtifactKind.SCREEN: GeneratorConfig(
            label=f"[kind.screen]{Symbols.SCREEN} Screen[/]",
            style=styled("kind.screen"),
            resolve_base_path=lambda name: kind_root(ArtifactKind.SCREEN) / name,
            build_files=BUILDERS[ArtifactKind.SCREEN],
            index_kind=ArtifactKind.SCREEN,
            success_message=lambda name: _success(
                f"Screen {capitalize_first_letter(name)} ready at "
                f"{under_root(ArtifactKind.SCREEN)}/{name}"
            ),
        ),
        ArtifactKind.HOOK: GeneratorConfig(
            label=f"[kind.hook]{Symbols.HOOK} Hook[/]",
            style=styled("kind.hook"),
            resolve_base_path=lambda name: kind_root(ArtifactKind.HOOK) / name,
            build_files=BUILDERS[ArtifactKind.HOOK],
            index_kind=ArtifactKind.HOOK,
            success_message=lambda name: _success(
                f"Hook use{capitalize_first_letter(name)} ready at "
                f"{under_root(ArtifactKind.HOOK)}/{name}"
            ),
        ),
        ArtifactKind.NAVIGATION: GeneratorConfig(
            label=f"[kind.navigation]{Symbols.NAVIGATION} Navigation[/]",
            style=styled("kind.navigation"),
            resolve_base_path=lambda name: kind_root(ArtifactKind.NAVIGATION),
            build_files=BUILDERS[ArtifactKind.NAVIGATION],
            index_kind=None,
            success_message=lambda name: _success(
                f"Navigation {capitalize_first_letter(name)} ready at "
                f"{under_root(ArtifactKind.NAVIGATION)}/"
                f"{capitalize_first_letter(name)}Navigation.tsx"
            ),
        ),
    }

    return {
        kind: ArtifactGenerator(cfg, delay_ms=config.step_delay_ms)
        for kind, cfg in configs.items()
    }


GENERATORS: Registry = build_registry()
