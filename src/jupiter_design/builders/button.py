"""
Button styling builder.

Usage::

    from jupiter_design import VibeColors, button_styles

    classes = button_styles(VibeColors()).primary().large().wide().classes()
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Self

from ..core.color import ColorProvider
from ..core.tokens import SIZE_ALIASES, Color, Size, require_complete
from .classes import StyleBuilder, lookup_alias


class ButtonVariant(StrEnum):
    """Visual intent of a button."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    GHOST = "ghost"
    LINK = "link"


class ButtonState(StrEnum):
    """Interaction state of a button."""

    DEFAULT = "default"
    HOVER = "hover"
    ACTIVE = "active"
    DISABLED = "disabled"
    LOADING = "loading"


_BASE_CLASSES = (
    "inline-flex items-center justify-center font-medium transition-colors duration-200 "
    "disabled:opacity-50 disabled:cursor-not-allowed"
)

_SIZE_CLASSES: Mapping[Size, str] = require_complete(
    {
        Size.XSMALL: "px-2 py-1 text-xs rounded",
        Size.SMALL: "px-3 py-1.5 text-sm rounded",
        Size.MEDIUM: "px-4 py-2 text-sm rounded-md",
        Size.LARGE: "px-6 py-3 text-base rounded-md",
        Size.XLARGE: "px-8 py-4 text-lg rounded-lg",
    },
    Size,
    "button size classes",
)

_STATE_CLASSES: Mapping[ButtonState, str] = require_complete(
    {
        ButtonState.DEFAULT: "",
        ButtonState.HOVER: "hover:scale-105",
        ButtonState.ACTIVE: "active:scale-95",
        ButtonState.DISABLED: "opacity-50 cursor-not-allowed",
        ButtonState.LOADING: "cursor-wait",
    },
    ButtonState,
    "button state classes",
)

_VARIANT_CLASSES: Mapping[ButtonVariant, Callable[[ColorProvider], str]] = require_complete(
    {
        ButtonVariant.PRIMARY: lambda c: (
            f"{c.bg_class(Color.PRIMARY)} {c.text_class(Color.TEXT_INVERSE)} "
            f"hover:{c.bg_class(Color.INTERACTIVE_HOVER)}"
        ),
        ButtonVariant.SECONDARY: lambda c: (
            f"{c.bg_class(Color.SURFACE)} {c.text_class(Color.TEXT_PRIMARY)} "
            f"{c.border_class(Color.BORDER)} border"
        ),
        ButtonVariant.SUCCESS: lambda c: (
            f"{c.bg_class(Color.SUCCESS)} {c.text_class(Color.TEXT_INVERSE)} hover:bg-green-600"
        ),
        ButtonVariant.WARNING: lambda c: (
            f"{c.bg_class(Color.WARNING)} {c.text_class(Color.TEXT_INVERSE)} hover:bg-amber-600"
        ),
        ButtonVariant.ERROR: lambda c: (
            f"{c.bg_class(Color.ERROR)} {c.text_class(Color.TEXT_INVERSE)} hover:bg-red-600"
        ),
        ButtonVariant.GHOST: lambda c: (
            f"bg-transparent {c.text_class(Color.TEXT_PRIMARY)} hover:{c.bg_class(Color.BACKGROUND)}"
        ),
        ButtonVariant.LINK: lambda c: (
            f"bg-transparent {c.text_class(Color.PRIMARY)} hover:underline"
        ),
    },
    ButtonVariant,
    "button variant classes",
)

# String props accepted by button_classes_from_strings
VARIANT_ALIASES: dict[str, ButtonVariant] = {
    **{variant.value: variant for variant in ButtonVariant},
    "outline": ButtonVariant.SECONDARY,
    "danger": ButtonVariant.ERROR,
    "water": ButtonVariant.PRIMARY,
}


@dataclass(frozen=True, kw_only=True)
class ButtonStyles(StyleBuilder):
    """Chainable button class builder.

    Defaults: primary variant, medium size, default state.
    """

    variant: ButtonVariant = ButtonVariant.PRIMARY
    size: Size = Size.MEDIUM
    state: ButtonState = ButtonState.DEFAULT
    full_width: bool = False
    with_icon: bool = False

    # Variant

    def with_variant(self, variant: ButtonVariant) -> Self:
        return replace(self, variant=variant)

    def primary(self) -> Self:
        return self.with_variant(ButtonVariant.PRIMARY)

    def secondary(self) -> Self:
        return self.with_variant(ButtonVariant.SECONDARY)

    def success(self) -> Self:
        return self.with_variant(ButtonVariant.SUCCESS)

    def warning(self) -> Self:
        return self.with_variant(ButtonVariant.WARNING)

    def error(self) -> Self:
        return self.with_variant(ButtonVariant.ERROR)

    def ghost(self) -> Self:
        return self.with_variant(ButtonVariant.GHOST)

    def link(self) -> Self:
        return self.with_variant(ButtonVariant.LINK)

    # Size

    def with_size(self, size: Size) -> Self:
        return replace(self, size=size)

    def extra_small(self) -> Self:
        return self.with_size(Size.XSMALL)

    def small(self) -> Self:
        return self.with_size(Size.SMALL)

    def medium(self) -> Self:
        return self.with_size(Size.MEDIUM)

    def large(self) -> Self:
        return self.with_size(Size.LARGE)

    def extra_large(self) -> Self:
        return self.with_size(Size.XLARGE)

    # State

    def with_state(self, state: ButtonState) -> Self:
        return replace(self, state=state)

    def hover(self) -> Self:
        return self.with_state(ButtonState.HOVER)

    def active(self) -> Self:
        return self.with_state(ButtonState.ACTIVE)

    def disabled(self) -> Self:
        return self.with_state(ButtonState.DISABLED)

    def loading(self) -> Self:
        return self.with_state(ButtonState.LOADING)

    # Modifiers

    def wide(self, enabled: bool = True) -> Self:
        """Stretch the button to the container width."""
        return replace(self, full_width=enabled)

    def icon(self, enabled: bool = True) -> Self:
        """Add spacing for a leading or trailing icon."""
        return replace(self, with_icon=enabled)

    def _fragments(self) -> Iterator[str]:
        yield _BASE_CLASSES
        yield _SIZE_CLASSES[self.size]
        yield _VARIANT_CLASSES[self.variant](self.colors)
        yield _STATE_CLASSES[self.state]
        if self.full_width:
            yield "w-full"
        if self.with_icon:
            yield "space-x-2"


def button_styles(colors: ColorProvider) -> ButtonStyles:
    """Create a button builder with default settings."""
    return ButtonStyles(colors)


def button_classes_from_strings(
    colors: ColorProvider,
    variant: str,
    size: str,
    disabled: bool = False,
    loading: bool = False,
    full_width: bool = False,
) -> str:
    """
    Build button classes from string props in one call.

    Unknown variants fall back to primary, unknown sizes to medium. Loading
    takes precedence over disabled.

    Examples:
        >>> button_classes_from_strings(VibeColors(), "danger", "lg", loading=True)
    """
    builder = ButtonStyles(
        colors,
        variant=lookup_alias(VARIANT_ALIASES, variant, ButtonVariant.PRIMARY, "button variant"),
        size=lookup_alias(SIZE_ALIASES, size, Size.MEDIUM, "button size"),
        full_width=full_width,
    )
    if loading:
        builder = builder.loading()
    elif disabled:
        builder = builder.disabled()
    return builder.classes()
