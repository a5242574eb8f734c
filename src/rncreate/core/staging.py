"""Filesystem staging: base directories, file writes and index.ts.

Writes overwrite without asking. Failures propagate as ``OSError``.
"""

import logging
from pathlib import Path
from typing import Optional

from rncreate.core.models import ArtifactKind
from rncreate.core.progress import DEFAULT_STEP_DELAY_MS, progress_step
from rncreate.ui.theme import Styler

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.ts"

# Module suffix re-exported from index.ts, per kind
_INDEX_SUFFIXES = {
    ArtifactKind.COMPONENT: "Component",
    ArtifactKind.SCREEN: "Screen",
}


def ensure_directory(
    base_path: Path,
    style: Styler,
    delay_ms: int = DEFAULT_STEP_DELAY_MS,
) -> None:
    """Create ``base_path`` (and parents) unless it already exists."""
    base_path = Path(base_path)
    if not base_path.exists():
        progress_step("Creating base directory", style, delay_ms)
        base_path.mkdir(parents=True, exist_ok=True)
        logger.debug("Created directory %s", base_path)
    else:
        progress_step("Directory found, updating files", style, delay_ms)


def generate_file(
    file_path: Path,
    content: str,
    message: str,
    style: Styler,
    delay_ms: int = DEFAULT_STEP_DELAY_MS,
) -> None:
    """Report ``message`` and write ``content`` to ``file_path``."""
    progress_step(message, style, delay_ms)
    Path(file_path).write_text(content, encoding="utf-8")
    logger.debug("Wrote %s (%d chars)", file_path, len(content))


def build_index_content(name: str, kind: Optional[ArtifactKind]) -> str:
    """Two re-export lines: the main module and its types."""
    suffix = _INDEX_SUFFIXES.get(ArtifactKind.parse(kind), "")
    return (
        f"export * from './{name}{suffix}';\n"
        f"export * from './{name}Types';\n"
    )


def create_index_file(
    base_path: Path,
    name: str,
    kind: Optional[ArtifactKind],
    style: Styler,
    delay_ms: int = DEFAULT_STEP_DELAY_MS,
) -> Path:
    """Write ``index.ts`` into ``base_path`` and return its path."""
    content = build_index_content(name, kind)
    progress_step(f"Linking exports in {INDEX_FILENAME}", style, delay_ms)
    index_path = Path(base_path) / INDEX_FILENAME
    index_path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s", index_path)
    return index_path
