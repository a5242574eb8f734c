"""Creation flow: validate the kind, normalize the name, generate."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from rncreate.core.errors import UnsupportedKindError
from rncreate.core.models import ArtifactKind
from rncreate.core.progress import progress_step
from rncreate.naming import lowercase_first_letter
from rncreate.registry import GENERATORS, Registry
from rncreate.ui.theme import MUTED

logger = logging.getLogger(__name__)

RETURN_DELAY_MS = 380


def handle_creation_flow(
    kind: Union[str, ArtifactKind],
    raw_name: str,
    registry: Optional[Registry] = None,
    delay_ms: int = RETURN_DELAY_MS,
) -> List[Path]:
    """Generate one artifact.

    Raises:
        UnsupportedKindError: ``kind`` is not a registered artifact kind
    """
    registry = GENERATORS if registry is None else registry
    parsed = ArtifactKind.parse(kind)
    generator = registry.get(parsed) if parsed else None
    if generator is None:
        raise UnsupportedKindError(getattr(kind, "value", kind))

    name = lowercase_first_letter(raw_name.strip())
    logger.debug("Creating %s %r", parsed.value, name)
    written = generator.generate(name)

    progress_step("Returning to main menu...", MUTED, delay_ms)
    return written
