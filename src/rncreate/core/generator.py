"""Artifact generator.

A single generator type, configured per artifact kind with strategy
values (see ``GeneratorConfig``). The registry builds one instance per
kind; the instance itself never changes.
"""

import logging
from pathlib import Path
from typing import List

from rncreate.core.models import GeneratorConfig
from rncreate.core.progress import DEFAULT_STEP_DELAY_MS
from rncreate.core.staging import create_index_file, ensure_directory, generate_file
from rncreate.ui.console import console

logger = logging.getLogger(__name__)


class ArtifactGenerator:
    """Writes every file for one artifact kind.

    Steps run strictly in order. A failure part way through leaves the
    files already written in place.
    """

    def __init__(self, config: GeneratorConfig, delay_ms: int = DEFAULT_STEP_DELAY_MS):
        self.config = config
        self.delay_ms = delay_ms

    @property
    def label(self) -> str:
        return self.config.label

    def generate(self, name: str) -> List[Path]:
        """Generate the artifact called ``name``.

        Returns:
            Paths written, in write order (index.ts last when present)
        """
        cfg = self.config
        base_path = Path(cfg.resolve_base_path(name))
        logger.debug("Generating %r into %s", name, base_path)

        ensure_directory(base_path, cfg.style, self.delay_ms)

        written: List[Path] = []
        for file in cfg.build_files(name):
            file_path = base_path / file.filename
            generate_file(file_path, file.content, file.message, cfg.style, self.delay_ms)
            written.append(file_path)

        if cfg.index_kind:
            written.append(
                create_index_file(base_path, name, cfg.index_kind, cfg.style, self.delay_ms)
            )

        console.print(cfg.success_message(name))
        return written
