"""Configuration persistence manager for the painting animator.

This module handles loading and saving of animator configuration to/from JSON files.
"""

import json
import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Optional, Tuple

from models import CONFIG_FILE, AnimatorConfig

logger = logging.getLogger(__name__)

# Colors are fixed design values, not user settings
PERSISTED_FIELDS = tuple(
    f.name
    for f in fields(AnimatorConfig)
    if f.name not in ("background_color", "outline_color")
)


class ConfigManager:
    """Handles loading and saving of animator configuration."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.artreveal_config.json)
        """
        self.config_path = Path(config_path)

    def load(self) -> AnimatorConfig:
        """Load configuration from file, returning defaults if not found.

        Returns:
            AnimatorConfig with loaded or default values, clamped into range
        """
        config = AnimatorConfig()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("top-level JSON value is not an object")
                # Update config with loaded values (fallback to defaults)
                for name in PERSISTED_FIELDS:
                    if name in data:
                        setattr(config, name, data[name])
                config = config.clamped()
                logger.info(f"Loaded configuration from {self.config_path}")
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Could not load config file: {e}")
            config = AnimatorConfig()

        return config

    def save(self, config: AnimatorConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: AnimatorConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        data = {k: v for k, v in asdict(config).items() if k in PERSISTED_FIELDS}
        try:
            with open(self.config_path, "w") as f:
                json.dump(data, f, indent=2)
            return True, None
        except OSError as e:
            return False, str(e)
