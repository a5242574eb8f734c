"""Configuration for rn-create-template (stored in .rncreate/config.json)."""

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CONFIG_DIR = ".rncreate"
CONFIG_FILE = "config.json"


@dataclass
class ScaffoldConfig:
    """Tunable values, all optional in the config file."""
    # Pause after each progress line
    step_delay_ms: int = 420

    # Pause after the welcome banner
    welcome_delay_ms: int = 600

    # Directory (relative to cwd) holding components/, screens/, hooks/, navigation/
    source_root: str = "src"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "ScaffoldConfig":
        """Build a config from parsed JSON, ignoring unknown keys.

        Raises:
            TypeError: data is not an object, or a known key holds a value
                of the wrong type
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected an object, got {type(data).__name__}")
        values = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            # bool is an int subclass but never a valid delay
            if not isinstance(value, f.type) or isinstance(value, bool):
                raise TypeError(
                    f"{f.name} must be {f.type.__name__}, got {type(value).__name__}"
                )
            values[f.name] = value
        return cls(**values)


def get_config_path(workspace: Optional[Path] = None) -> Path:
    """Path of the config file for a workspace (defaults to cwd)."""
    return (workspace or Path.cwd()) / CONFIG_DIR / CONFIG_FILE


def load_config(workspace: Optional[Path] = None) -> ScaffoldConfig:
    """Load configuration, falling back to defaults.

    A missing file is normal. An unreadable one is logged and ignored.
    """
    config_file = get_config_path(workspace)
    if not config_file.exists():
        return ScaffoldConfig()

    try:
        data = json.loads(config_file.read_text(encoding="utf-8"))
        return ScaffoldConfig.from_dict(data)
    except (ValueError, TypeError) as e:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        logger.warning("Config file %s is invalid: %s. Using defaults.", config_file, e)
        return ScaffoldConfig()


def save_config(config: ScaffoldConfig, workspace: Optional[Path] = None) -> Path:
    """Write configuration to the workspace and return its path."""
    config_file = get_config_path(workspace)
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
    return config_file
