"""Core modules for rn-create-template.

- models: artifact kinds, file descriptors, generator configs
- progress: paced console status lines
- staging: directory, file and index.ts writes
- generator: the configurable artifact generator
- config: .rncreate/config.json loading
"""

from rncreate.core.errors import (
    ScaffoldError,
    UnsupportedKindError,
    UserCancelledError,
)
from rncreate.core.models import ArtifactKind, FileDescriptor, GeneratorConfig
from rncreate.core.progress import progress_step, sleep
from rncreate.core.staging import (
    build_index_content,
    create_index_file,
    ensure_directory,
    generate_file,
)
from rncreate.core.generator import ArtifactGenerator
from rncreate.core.config import ScaffoldConfig, load_config, save_config

__all__ = [
    # Errors
    "ScaffoldError",
    "UnsupportedKindError",
    "UserCancelledError",
    # Models
    "ArtifactKind",
    "FileDescriptor",
    "GeneratorConfig",
    # Progress
    "progress_step",
    "sleep",
    # Staging
    "build_index_content",
    "create_index_file",
    "ensure_directory",
    "generate_file",
    # Generator
    "ArtifactGenerator",
    # Config
    "ScaffoldConfig",
    "load_config",
    "save_config",
]
