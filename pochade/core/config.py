"""Pochade runtime configuration and settings."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional

import yaml

from pochade.core.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).parent.parent / "templates"
DEFAULT_DEFAULTS_FILE = Path.home() / ".config" / "pochade" / "defaults.yml"


@dataclass
class PochadeConfig:
    """Runtime configuration for scaffold runs.

    Attributes:
        package_manager: Executable used to install dependencies (default: npm)
        template_dir: Directory holding one sub-directory per scaffold variant
        defaults_file: YAML file with answer defaults (e.g. author_name, license)
        warn_orphan_tokens: Warn about ``${...}`` left behind after substitution
    """

    package_manager: str = "npm"
    template_dir: Path = DEFAULT_TEMPLATE_DIR
    defaults_file: Path = DEFAULT_DEFAULTS_FILE
    warn_orphan_tokens: bool = False

    @classmethod
    def from_env(cls) -> "PochadeConfig":
        """Create config from environment variables.

        Environment variables:
            POCHADE_PACKAGE_MANAGER: Package manager executable
            POCHADE_TEMPLATE_DIR: Alternative template root
            POCHADE_DEFAULTS_FILE: Answer defaults YAML file
            POCHADE_WARN_ORPHAN_TOKENS: Set to 1 to warn about unresolved tokens

        Returns:
            PochadeConfig instance with values from environment or defaults
        """
        return cls(
            package_manager=os.getenv("POCHADE_PACKAGE_MANAGER", cls.package_manager),
            template_dir=Path(os.getenv("POCHADE_TEMPLATE_DIR", str(DEFAULT_TEMPLATE_DIR))),
            defaults_file=Path(os.getenv("POCHADE_DEFAULTS_FILE", str(DEFAULT_DEFAULTS_FILE))),
            warn_orphan_tokens=os.getenv("POCHADE_WARN_ORPHAN_TOKENS") == "1",
        )


# Global config instance (can be overridden)
_config: Optional[PochadeConfig] = None


def get_config() -> PochadeConfig:
    """Get the global Pochade configuration.

    Returns:
        PochadeConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = PochadeConfig.from_env()
    return _config


def set_config(config: Optional[PochadeConfig]):
    """Set the global Pochade configuration.

    Args:
        config: PochadeConfig instance to use globally, or None to reset
    """
    global _config
    _config = config


def load_answer_defaults(path: Path, known_keys: Iterable[str]) -> Dict[str, str]:
    """Load prompt default overrides from a YAML file.

    Only keys in ``known_keys`` are returned; values are coerced to strings.
    A missing file yields no overrides. An unreadable or malformed file is
    reported as a warning and ignored.
    """
    if not path.exists():
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Ignoring answer defaults in {path}: {e}")
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring answer defaults in {path}: expected a mapping")
        return {}

    keys = set(known_keys)
    overrides = {}
    for key, value in data.items():
        if key not in keys:
            logger.debug(f"Unknown answer default '{key}' in {path}")
            continue
        overrides[key] = "" if value is None else str(value)
    return overrides
