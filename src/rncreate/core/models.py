"""Data model for artifact generation.

Everything here is configuration or transient output: generator configs
are built once per process, file descriptors are built per ``generate``
call and dropped once written.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional

from rncreate.ui.theme import Styler


class ArtifactKind(Enum):
    """Kinds of artifact the tool can generate."""

    COMPONENT = "component"
    SCREEN = "screen"
    HOOK = "hook"
    NAVIGATION = "navigation"

    @classmethod
    def values(cls) -> List[str]:
        return [kind.value for kind in cls]

    @classmethod
    def parse(cls, value) -> Optional["ArtifactKind"]:
        """Return the matching kind, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class FileDescriptor:
    """One file to write, relative to the artifact's base path."""
    filename: str
    content: str
    message: str


@dataclass(frozen=True)
class GeneratorConfig:
    """Strategy values for one artifact kind.

    Attributes:
        label: Menu label shown in the interactive shell
        style: Styling function for this kind's progress lines
        resolve_base_path: Maps a name to the directory files go into
        build_files: Maps a name to the ordered files to write
        index_kind: Kind used to shape ``index.ts``; None skips it
        success_message: Maps a name to the final status line
    """
    label: str
    style: Styler
    resolve_base_path: Callable[[str], Path]
    build_files: Callable[[str], List[FileDescriptor]]
    index_kind: Optional[ArtifactKind]
    success_message: Callable[[str], str]
