"""
Theme configuration files.

A project can pin its theme in a ``[theme]`` table of a TOML file::

    [theme]
    preset = "jupiter"

    [theme.colors]
    primary = "purple-600"

or in a YAML file with the same shape (top-level ``theme:`` key optional).
``ThemeConfig.build_colors()`` turns the loaded configuration into a color
provider.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.color import ColorPalette, PaletteColors
from .errors import ErrorContext, ThemeConfigError
from .themes.presets import THEME_PRESETS
from .themes.resolver import resolve_theme

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "jupiter.toml"

_TOML_SUFFIXES = {".toml"}
_YAML_SUFFIXES = {".yaml", ".yml"}


class ThemeConfig(BaseModel):
    """Theme selection and palette overrides."""

    model_config = ConfigDict(extra="forbid")

    preset: str = "vibe"
    colors: dict[str, str] = Field(default_factory=dict)

    @field_validator("preset")
    @classmethod
    def _known_preset(cls, value: str) -> str:
        if value not in THEME_PRESETS:
            raise ValueError(f"unknown preset '{value}', expected one of: {', '.join(THEME_PRESETS)}")
        return value

    @field_validator("colors")
    @classmethod
    def _known_colors(cls, value: dict[str, str]) -> dict[str, str]:
        unknown = sorted(set(value) - set(ColorPalette.model_fields))
        if unknown:
            raise ValueError(f"unknown palette field(s): {', '.join(unknown)}")
        return value

    def build_colors(self, overrides: dict[str, str] | None = None) -> PaletteColors:
        """Resolve this configuration (plus optional call-site overrides) to a provider."""
        return resolve_theme(self.preset, config_overrides=self.colors, overrides=overrides)


# =============================================================================
# Loading
# =============================================================================


def _read_raw(path: Path) -> Any:
    """Read a config file into plain Python data, dispatching on suffix."""
    suffix = path.suffix.lower()
    content = path.read_text(encoding="utf-8")

    if suffix in _TOML_SUFFIXES:
        try:
            return tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            raise ThemeConfigError(f"Invalid TOML: {e}", ErrorContext(path)) from e

    if suffix in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ThemeConfigError(f"Invalid YAML: {e}", ErrorContext(path)) from e

    raise ThemeConfigError(f"Unsupported config format '{suffix}'", ErrorContext(path))


def load_theme_config(path: Path | None = None, *, use_defaults: bool = True) -> ThemeConfig:
    """Load a ThemeConfig from a TOML or YAML file.

    TOML files are read from their ``[theme]`` table only, so other tables in
    a shared project file are ignored. YAML files may nest the config under
    ``theme:`` or put it at the top level.

    Args:
        path: Config file path (``.toml``, ``.yaml`` or ``.yml``). Defaults to
            ``jupiter.toml`` in the current directory.
        use_defaults: If True, return the default config when the file is
            missing or empty.

    Returns:
        ThemeConfig instance.

    Raises:
        ThemeConfigError: If the file is missing (when use_defaults=False),
            unparsable, or fails validation.
    """
    if path is None:
        path = Path(DEFAULT_CONFIG_FILE)

    if not path.exists():
        if use_defaults:
            logger.debug("No theme config at %s, using defaults", path)
            return ThemeConfig()
        raise ThemeConfigError("Theme config not found", ErrorContext(path))

    data = _read_raw(path)
    if path.suffix.lower() in _TOML_SUFFIXES:
        if "theme" not in data:
            logger.debug("No [theme] table in %s, using defaults", path)
            return ThemeConfig()
        data = data["theme"]
    elif isinstance(data, dict) and "theme" in data:
        data = data["theme"]

    if not data:
        if use_defaults:
            logger.warning("Empty theme config at %s, using defaults", path)
            return ThemeConfig()
        raise ThemeConfigError("Empty theme config", ErrorContext(path))

    if not isinstance(data, dict):
        raise ThemeConfigError("Theme config must be a mapping", ErrorContext(path, "theme"))

    try:
        return ThemeConfig.model_validate(data)
    except ValidationError as e:
        raise ThemeConfigError(f"Invalid theme config: {e}", ErrorContext(path, "theme")) from e


def save_theme_config(path: Path, config: ThemeConfig) -> Path:
    """Save a ThemeConfig as YAML.

    Args:
        path: Destination file (``.yaml`` or ``.yml``).
        config: Configuration to write.

    Returns:
        Path to the saved file.

    Raises:
        ThemeConfigError: If the destination is not a YAML path.
    """
    if path.suffix.lower() not in _YAML_SUFFIXES:
        raise ThemeConfigError("Theme config can only be saved as YAML", ErrorContext(path))

    data = {"theme": config.model_dump(mode="json")}
    path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info("Saved theme config to %s", path)
    return path
