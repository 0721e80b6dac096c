"""Core design tokens, color providers and scales."""

from .color import ColorPalette, ColorProvider, PaletteColors, VibeColors
from .scale import DEFAULT_SCALE, DesignScale
from .tokens import Breakpoint, Color, FontFamily, FontWeight, Size, Spacing, Typography

__all__ = [
    "Breakpoint",
    "Color",
    "ColorPalette",
    "ColorProvider",
    "DEFAULT_SCALE",
    "DesignScale",
    "FontFamily",
    "FontWeight",
    "PaletteColors",
    "Size",
    "Spacing",
    "Typography",
    "VibeColors",
]
