"""
Theme presets, resolution and CSS generation.
"""

from .css_generator import generate_palette_css
from .presets import (
    THEME_PRESETS,
    JupiterColors,
    LlasiColors,
    PsychedelicColors,
    VibeDarkColors,
    get_theme_preset,
    list_theme_presets,
)
from .resolver import resolve_theme

__all__ = [
    "THEME_PRESETS",
    "JupiterColors",
    "LlasiColors",
    "PsychedelicColors",
    "VibeDarkColors",
    "generate_palette_css",
    "get_theme_preset",
    "list_theme_presets",
    "resolve_theme",
]
