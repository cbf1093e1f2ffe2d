"""
Global Configuration and Display Defaults.

This module centralizes the layout constants shared by the terminal views
and the optional per-project settings file (.narrator/config.yaml).
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from rich.errors import StyleSyntaxError
from rich.style import Style

logger = logging.getLogger(__name__)

# --- Animation ---
# Period of the overview's horizontal scroll animation
SCROLL_INTERVAL_SECONDS = 0.1

# --- Layout ---
# Maximum summary lines shown in the overview before clipping
SUMMARY_MAX_LINES = 6

# Header line + separator rule reserved at the top of the detail view
HEADER_HEIGHT = 2

# Key legend reserved at the bottom of the detail view
FOOTER_HEIGHT = 1

# --- Key legends (user-facing text) ---
OVERVIEW_LEGEND = " j/k select  enter view  esc close"
DETAIL_LEGEND = " j/k scroll  h/l scroll horiz  esc back  q close"

# --- Styling ---
# Theme names used by the views mapped to rich style strings
DEFAULT_PALETTE: Dict[str, str] = {
    "accent": "cyan",
    "dim": "dim",
    "highlight": "on grey23",
}

# --- Settings file ---
CONFIG_DIR_NAME = ".narrator"
CONFIG_FILE_NAME = "config.yaml"


class ConfigError(Exception):
    """Raised when the settings file cannot be read or validated."""


class Settings(BaseModel):
    """
    User-tunable display settings.

    Loaded from .narrator/config.yaml when present. Palette entries are
    merged over DEFAULT_PALETTE so a config only needs the overrides.
    """
    scroll_interval_ms: int = Field(default=int(SCROLL_INTERVAL_SECONDS * 1000), gt=0)
    color: bool = True
    palette: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_PALETTE))

    @field_validator("palette", mode="before")
    @classmethod
    def _merge_palette(cls, value: Any) -> Dict[str, str]:
        if value is None:
            return dict(DEFAULT_PALETTE)
        if not isinstance(value, dict):
            raise ValueError("palette must be a mapping of name to style")
        for name, definition in value.items():
            try:
                Style.parse(str(definition))
            except StyleSyntaxError as e:
                raise ValueError(f"palette.{name}: {e}") from e
        return {**DEFAULT_PALETTE, **value}

    @property
    def scroll_interval(self) -> float:
        """Animation period in seconds."""
        return self.scroll_interval_ms / 1000


def default_config_path(root_dir: Optional[Path] = None) -> Path:
    """Location of the settings file for a project directory."""
    root = root_dir if root_dir is not None else Path.cwd()
    return root / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def default_settings_dict() -> Dict[str, Any]:
    """Settings as a plain dict, suitable for writing a starter config."""
    return Settings().model_dump()


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Load display settings from a YAML file.

    Args:
        path: Settings file. Defaults to .narrator/config.yaml in the cwd.

    Returns:
        Settings: Parsed settings, or defaults if the file does not exist.

    Raises:
        ConfigError: If the file is not valid YAML or fails validation.
    """
    config_path = path if path is not None else default_config_path()

    if not config_path.exists():
        logger.debug(f"No config at {config_path}, using defaults")
        return Settings()

    try:
        data = yaml.safe_load(config_path.read_text()) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config in {config_path}: expected a mapping")

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_path}: {e}") from e

    logger.debug(f"Loaded settings from {config_path}")
    return settings
