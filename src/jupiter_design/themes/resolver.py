"""
Theme resolver for the Jupiter design system.

Resolves the final color provider by merging:
1. Base preset (from preset name)
2. Configuration file overrides
3. Call-site overrides (highest precedence)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ..core.color import PaletteColors
from ..errors import UnknownTokenError
from .presets import THEME_PRESETS

logger = logging.getLogger(__name__)


def resolve_theme(
    preset_name: str = "vibe",
    config_overrides: Mapping[str, str] | None = None,
    overrides: Mapping[str, str] | None = None,
) -> PaletteColors:
    """
    Resolve a color provider by merging a preset with palette overrides.

    Args:
        preset_name: Name of the base preset ("vibe", "jupiter", ...)
        config_overrides: Palette field overrides from a theme config file
        overrides: Palette field overrides from the caller

    Returns:
        A new provider of the preset's class with all overrides applied

    Raises:
        UnknownTokenError: If the preset or an override field is unknown
    """
    preset_cls = THEME_PRESETS.get(preset_name)
    if preset_cls is None:
        raise UnknownTokenError(
            f"Unknown theme preset '{preset_name}'. Available: {', '.join(THEME_PRESETS)}"
        )

    merged = _merge_overrides(config_overrides or {}, overrides or {})
    if not merged:
        return preset_cls()

    logger.debug("Resolving theme %s with overrides for %s", preset_name, sorted(merged))
    return preset_cls.with_overrides(**merged)


def _merge_overrides(
    config_overrides: Mapping[str, str],
    overrides: Mapping[str, str],
) -> dict[str, str]:
    """
    Merge override layers.

    Precedence: call-site > config
    """
    merged = dict(config_overrides)
    merged.update(overrides)
    return merged
