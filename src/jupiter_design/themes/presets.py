"""
Built-in theme presets.

Each preset is a ``PaletteColors`` subclass with its own default palette.
The registry maps preset names to classes so every lookup returns a fresh,
independent provider.
"""

from __future__ import annotations

from ..core.color import ColorPalette, PaletteColors, VibeColors
from ..core.tokens import Color


class VibeDarkColors(PaletteColors):
    """Dark variant of the Water & Wellness palette."""

    name = "Water & Wellness Dark"

    @classmethod
    def default_palette(cls) -> ColorPalette:
        return ColorPalette(
            primary="water-blue-400",
            secondary="water-green-400",
            accent="cyan-400",
            success="green-400",
            warning="amber-400",
            error="red-400",
            info="blue-400",
            surface="gray-800",
            background="gray-900",
            foreground="gray-50",
            border="gray-700",
            text_primary="gray-50",
            text_secondary="gray-300",
            text_tertiary="gray-500",
            text_inverse="gray-900",
            interactive="water-blue-400",
            interactive_hover="water-blue-300",
            interactive_active="water-blue-200",
            interactive_disabled="gray-600",
        )


class JupiterColors(PaletteColors):
    """Jupiter Software palette: planetary orange with tech blue."""

    name = "Jupiter Software"
    hex_values = {
        Color.PRIMARY: "#FF6B35",
        Color.SECONDARY: "#4A90E2",
        Color.ACCENT: "#4A90E2",
        Color.SUCCESS: "#10B981",
        Color.WARNING: "#F59E0B",
        Color.ERROR: "#EF4444",
        Color.INFO: "#4A90E2",
        Color.SURFACE: "#F8FAFC",
        Color.BACKGROUND: "#FFFFFF",
        Color.FOREGROUND: "#1A202C",
        Color.BORDER: "#E2E8F0",
        Color.TEXT_PRIMARY: "#1A202C",
        Color.TEXT_SECONDARY: "#374151",
        Color.TEXT_TERTIARY: "#64748B",
        Color.TEXT_INVERSE: "#FFFFFF",
        Color.INTERACTIVE: "#FF6B35",
        Color.INTERACTIVE_HOVER: "#F49D37",
        Color.INTERACTIVE_ACTIVE: "#E8944A",
        Color.INTERACTIVE_DISABLED: "#CBD5E1",
    }

    @classmethod
    def default_palette(cls) -> ColorPalette:
        return ColorPalette(
            primary="jupiter-orange-500",
            secondary="jupiter-blue-500",
            accent="jupiter-blue-400",
            success="green-500",
            warning="amber-500",
            error="red-500",
            info="jupiter-blue-500",
            surface="jupiter-gray-50",
            background="white",
            foreground="jupiter-gray-900",
            border="jupiter-gray-200",
            text_primary="jupiter-gray-900",
            text_secondary="jupiter-gray-700",
            text_tertiary="jupiter-gray-500",
            text_inverse="white",
            interactive="jupiter-orange-500",
            interactive_hover="jupiter-orange-600",
            interactive_active="jupiter-orange-700",
            interactive_disabled="jupiter-gray-300",
        )


class LlasiColors(PaletteColors):
    """LLASI minimalist luxury palette: deep charcoal on warm cream."""

    name = "LLASI"
    # Only the tokens the brand guidelines define.
    hex_values = {
        Color.PRIMARY: "#212121",
        Color.SECONDARY: "#6B6B6B",
        Color.ACCENT: "#8E8E8E",
        Color.ERROR: "#C60C0C",
        Color.SURFACE: "#FFFFFF",
        Color.BACKGROUND: "#F4EEDA",
        Color.FOREGROUND: "#F7F7F7",
        Color.BORDER: "#E6E6E6",
        Color.TEXT_PRIMARY: "#212121",
        Color.TEXT_SECONDARY: "#6B6B6B",
        Color.TEXT_TERTIARY: "#E5E5E5",
        Color.TEXT_INVERSE: "#FFFFFF",
        Color.INTERACTIVE: "#212121",
        Color.INTERACTIVE_HOVER: "#000000",
        Color.INTERACTIVE_ACTIVE: "#000000",
        Color.INTERACTIVE_DISABLED: "#E5E5E5",
    }

    @classmethod
    def default_palette(cls) -> ColorPalette:
        return ColorPalette(
            primary="slate-900",
            secondary="slate-600",
            accent="neutral-400",
            success="emerald-600",
            warning="amber-600",
            error="red-600",
            info="blue-600",
            surface="white",
            background="amber-50",
            foreground="slate-50",
            border="slate-200",
            text_primary="slate-900",
            text_secondary="slate-600",
            text_tertiary="slate-400",
            text_inverse="white",
            interactive="slate-900",
            interactive_hover="black",
            interactive_active="black",
            interactive_disabled="slate-300",
        )


class PsychedelicColors(PaletteColors):
    """High-energy palette: electric magenta and lime on black."""

    name = "Psychedelic"

    @classmethod
    def default_palette(cls) -> ColorPalette:
        return ColorPalette(
            primary="fuchsia-500",
            secondary="lime-400",
            accent="cyan-400",
            success="emerald-400",
            warning="orange-400",
            error="rose-400",
            info="violet-400",
            surface="slate-900",
            background="black",
            foreground="white",
            border="purple-500",
            text_primary="white",
            text_secondary="gray-200",
            text_tertiary="gray-400",
            text_inverse="black",
            interactive="fuchsia-500",
            interactive_hover="fuchsia-400",
            interactive_active="fuchsia-600",
            interactive_disabled="gray-600",
        )


THEME_PRESETS: dict[str, type[PaletteColors]] = {
    "vibe": VibeColors,
    "vibe-dark": VibeDarkColors,
    "jupiter": JupiterColors,
    "llasi": LlasiColors,
    "psychedelic": PsychedelicColors,
}


def get_theme_preset(name: str) -> PaletteColors | None:
    """Get a fresh provider for a preset name, or None if unknown."""
    preset_cls = THEME_PRESETS.get(name)
    if preset_cls is None:
        return None
    return preset_cls()


def list_theme_presets() -> list[str]:
    """List available preset names."""
    return list(THEME_PRESETS)
