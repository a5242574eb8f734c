"""Template builders, one per artifact kind.

Builders are pure: ``name -> list[FileDescriptor]``. They never touch
the filesystem and never validate the name.
"""

from typing import Callable, Dict, List

from rncreate.core.models import ArtifactKind, FileDescriptor
from rncreate.templates.component import build_component_files
from rncreate.templates.screen import build_screen_files
from rncreate.templates.hook import build_hook_files
from rncreate.templates.navigation import build_navigation_files

Builder = Callable[[str], List[FileDescriptor]]

BUILDERS: Dict[ArtifactKind, Builder] = {
    ArtifactKind.COMPONENT: build_component_files,
    ArtifactKind.SCREEN: build_screen_files,
    ArtifactKind.HOOK: build_hook_files,
    ArtifactKind.NAVIGATION: build_navigation_files,
}

__all__ = [
    "BUILDERS",
    "Builder",
    "build_component_files",
    "build_screen_files",
    "build_hook_files",
    "build_navigation_files",
]
