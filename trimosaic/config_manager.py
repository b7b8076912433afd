"""Configuration persistence manager for the mosaic generator.

This module handles loading and saving of mosaic defaults to/from JSON files.
"""

import json
import logging
import math
from dataclasses import asdict, fields
from pathlib import Path
from typing import Optional, Tuple

from .models import CONFIG_FILE, MosaicConfig, RenderStyle

logger = logging.getLogger(__name__)


class ConfigManager:
    """Handles loading and saving of mosaic configuration."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.trimosaic_config.json)
        """
        self.config_path = Path(config_path)

    def load(self) -> MosaicConfig:
        """Load configuration from file, returning defaults if not found.

        Returns:
            MosaicConfig with loaded or default values
        """
        config = MosaicConfig()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                # Update config with loaded values (fallback to defaults)
                for config_field in fields(MosaicConfig):
                    if config_field.name in data:
                        setattr(config, config_field.name, data[config_field.name])
                config.render_style = RenderStyle(config.render_style)
                _check_values(config)
                logger.info("Loaded configuration from %s", self.config_path)
        except (OSError, ValueError, TypeError) as e:
            logger.warning("Could not load config file: %s", e)
            config = MosaicConfig()

        return config

    def save(self, config: MosaicConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: MosaicConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        data = asdict(config)
        data["render_style"] = config.render_style.value
        try:
            with open(self.config_path, "w") as f:
                json.dump(data, f, indent=2)
            return True, None
        except OSError as e:
            return False, str(e)


def _check_values(config: MosaicConfig) -> None:
    """Reject stored values the pipeline cannot use."""
    if isinstance(config.n_vertical, bool) or not isinstance(config.n_vertical, int):
        raise TypeError(f"n_vertical must be an integer, got {config.n_vertical!r}")
    if config.n_vertical <= 0:
        raise ValueError(f"n_vertical must be positive, got {config.n_vertical}")
    for name in ("triangle_height", "stroke_width"):
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{name} must be a number, got {value!r}")
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")
    if not isinstance(config.output_path, str) or not isinstance(
        config.outline_color, str
    ):
        raise TypeError("output_path and outline_color must be strings")
