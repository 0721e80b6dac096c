"""
Jupiter Design System - semantic design tokens and Tailwind class builders.

Components describe what they mean (primary action, muted caption, raised
card) and a theme decides which utility classes that turns into.
"""

from __future__ import annotations

from ._version import get_version
from .builders import (
    ActionSemantics,
    ButtonStyles,
    CardStyles,
    FocusManagement,
    InteractionStyles,
    InteractiveStyles,
    LayoutStyles,
    StateStyles,
    TextStyles,
    action_semantics,
    button_styles,
    card_styles,
    focus_management,
    interaction_styles,
    interactive_button,
    interactive_element,
    interactive_input,
    layout_styles,
    state_styles,
    text_styles,
)
from .config import ThemeConfig, load_theme_config, save_theme_config
from .core import Color, ColorPalette, ColorProvider, PaletteColors, Size, Spacing, Typography, VibeColors
from .errors import JupiterError, ThemeConfigError, TokenCoverageError, UnknownTokenError
from .themes import generate_palette_css, get_theme_preset, list_theme_presets, resolve_theme

__version__ = get_version()

__all__ = [
    "__version__",
    # Tokens and themes
    "Color",
    "ColorPalette",
    "ColorProvider",
    "PaletteColors",
    "Size",
    "Spacing",
    "Typography",
    "VibeColors",
    "generate_palette_css",
    "get_theme_preset",
    "list_theme_presets",
    "resolve_theme",
    # Builders
    "ActionSemantics",
    "ButtonStyles",
    "CardStyles",
    "FocusManagement",
    "InteractionStyles",
    "InteractiveStyles",
    "LayoutStyles",
    "StateStyles",
    "TextStyles",
    "action_semantics",
    "button_styles",
    "card_styles",
    "focus_management",
    "interaction_styles",
    "interactive_button",
    "interactive_element",
    "interactive_input",
    "layout_styles",
    "state_styles",
    "text_styles",
    # Configuration
    "ThemeConfig",
    "load_theme_config",
    "save_theme_config",
    # Errors
    "JupiterError",
    "ThemeConfigError",
    "TokenCoverageError",
    "UnknownTokenError",
]
