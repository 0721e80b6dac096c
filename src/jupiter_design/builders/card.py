"""
Card styling builder.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Self

from ..core.color import ColorProvider
from ..core.tokens import Color, require_complete
from .classes import StyleBuilder, lookup_alias


class CardElevation(StrEnum):
    FLAT = "flat"
    SUBTLE = "subtle"
    RAISED = "raised"
    FLOATING = "floating"
    MODAL = "modal"


class CardSurface(StrEnum):
    STANDARD = "standard"
    ELEVATED = "elevated"
    BRANDED = "branded"
    GLASS = "glass"
    DARK = "dark"
    TRANSPARENT = "transparent"


class CardSpacing(StrEnum):
    NONE = "none"
    COMPACT = "compact"
    STANDARD = "standard"
    COMFORTABLE = "comfortable"
    SPACIOUS = "spacious"


class CardInteraction(StrEnum):
    STATIC = "static"
    HOVERABLE = "hoverable"
    CLICKABLE = "clickable"
    SELECTABLE = "selectable"
    DRAGGABLE = "draggable"


_BASE_CLASSES = "rounded-lg border transition-all duration-300"

_ELEVATION_CLASSES: Mapping[CardElevation, str] = require_complete(
    {
        CardElevation.FLAT: "shadow-none",
        CardElevation.SUBTLE: "shadow-sm",
        CardElevation.RAISED: "shadow-md",
        CardElevation.FLOATING: "shadow-lg",
        CardElevation.MODAL: "shadow-2xl",
    },
    CardElevation,
    "card elevation classes",
)

# One shadow step up on hover, for hoverable and clickable cards
_HOVER_ELEVATION: Mapping[CardElevation, str] = {
    CardElevation.SUBTLE: "hover:shadow-md",
    CardElevation.RAISED: "hover:shadow-lg",
    CardElevation.FLOATING: "hover:shadow-xl",
}

_SPACING_CLASSES: Mapping[CardSpacing, str] = require_complete(
    {
        CardSpacing.NONE: "p-0",
        CardSpacing.COMPACT: "p-3",
        CardSpacing.STANDARD: "p-5",
        CardSpacing.COMFORTABLE: "p-6",
        CardSpacing.SPACIOUS: "p-8",
    },
    CardSpacing,
    "card spacing classes",
)

_SURFACE_CLASSES: Mapping[CardSurface, Callable[[ColorProvider], str]] = require_complete(
    {
        CardSurface.STANDARD: lambda c: " ".join(
            (c.bg_class(Color.SURFACE), c.text_class(Color.TEXT_PRIMARY), c.border_class(Color.BORDER))
        ),
        CardSurface.ELEVATED: lambda c: " ".join(
            (c.bg_class(Color.BACKGROUND), c.text_class(Color.TEXT_PRIMARY), c.border_class(Color.BORDER))
        ),
        CardSurface.BRANDED: lambda c: (
            "bg-gradient-to-br from-jupiter-navy-900/80 to-jupiter-blue-900/80 "
            "border-white/10 text-white"
        ),
        CardSurface.GLASS: lambda c: "bg-white/10 backdrop-blur-md border-white/20 text-white",
        CardSurface.DARK: lambda c: "bg-gray-900 border-gray-700 text-white",
        CardSurface.TRANSPARENT: lambda c: "bg-transparent border-transparent",
    },
    CardSurface,
    "card surface classes",
)

_INTERACTION_CLASSES: Mapping[CardInteraction, str] = require_complete(
    {
        CardInteraction.STATIC: "",
        CardInteraction.HOVERABLE: "hover:scale-101 hover:shadow-sm",
        CardInteraction.CLICKABLE: (
            "cursor-pointer hover:scale-105 active:scale-95 "
            "focus:outline-none focus:ring-2 focus:ring-offset-2"
        ),
        CardInteraction.SELECTABLE: (
            "cursor-pointer hover:scale-101 focus:outline-none focus:ring-2 focus:ring-offset-2"
        ),
        CardInteraction.DRAGGABLE: "cursor-move hover:scale-105 active:scale-95",
    },
    CardInteraction,
    "card interaction classes",
)

ELEVATION_ALIASES: dict[str, CardElevation] = {
    **{e.value: e for e in CardElevation},
    "none": CardElevation.FLAT,
    "low": CardElevation.SUBTLE,
    "standard": CardElevation.RAISED,
    "high": CardElevation.FLOATING,
    "highest": CardElevation.MODAL,
}

SURFACE_ALIASES: dict[str, CardSurface] = {
    **{s.value: s for s in CardSurface},
    "white": CardSurface.STANDARD,
    "theme": CardSurface.BRANDED,
    "clear": CardSurface.TRANSPARENT,
}

SPACING_ALIASES: dict[str, CardSpacing] = {
    **{s.value: s for s in CardSpacing},
    "sm": CardSpacing.COMPACT,
    "md": CardSpacing.STANDARD,
    "lg": CardSpacing.COMFORTABLE,
    "xl": CardSpacing.SPACIOUS,
}

INTERACTION_ALIASES: dict[str, CardInteraction] = {
    **{i.value: i for i in CardInteraction},
    "none": CardInteraction.STATIC,
    "hover": CardInteraction.HOVERABLE,
    "click": CardInteraction.CLICKABLE,
    "select": CardInteraction.SELECTABLE,
    "drag": CardInteraction.DRAGGABLE,
}


@dataclass(frozen=True, kw_only=True)
class CardStyles(StyleBuilder):
    """Chainable card class builder."""

    elevation: CardElevation = CardElevation.SUBTLE
    surface: CardSurface = CardSurface.STANDARD
    spacing: CardSpacing = CardSpacing.STANDARD
    interaction: CardInteraction = CardInteraction.STATIC
    selected: bool = False

    def with_elevation(self, elevation: CardElevation) -> Self:
        return replace(self, elevation=elevation)

    def flat_elevation(self) -> Self:
        return self.with_elevation(CardElevation.FLAT)

    def subtle_elevation(self) -> Self:
        return self.with_elevation(CardElevation.SUBTLE)

    def raised_elevation(self) -> Self:
        return self.with_elevation(CardElevation.RAISED)

    def floating_elevation(self) -> Self:
        return self.with_elevation(CardElevation.FLOATING)

    def modal_elevation(self) -> Self:
        return self.with_elevation(CardElevation.MODAL)

    def with_surface(self, surface: CardSurface) -> Self:
        return replace(self, surface=surface)

    def standard_surface(self) -> Self:
        return self.with_surface(CardSurface.STANDARD)

    def elevated_surface(self) -> Self:
        return self.with_surface(CardSurface.ELEVATED)

    def branded_surface(self) -> Self:
        return self.with_surface(CardSurface.BRANDED)

    def glass_surface(self) -> Self:
        return self.with_surface(CardSurface.GLASS)

    def dark_surface(self) -> Self:
        return self.with_surface(CardSurface.DARK)

    def transparent_surface(self) -> Self:
        return self.with_surface(CardSurface.TRANSPARENT)

    def with_spacing(self, spacing: CardSpacing) -> Self:
        return replace(self, spacing=spacing)

    def no_spacing(self) -> Self:
        return self.with_spacing(CardSpacing.NONE)

    def compact_spacing(self) -> Self:
        return self.with_spacing(CardSpacing.COMPACT)

    def standard_spacing(self) -> Self:
        return self.with_spacing(CardSpacing.STANDARD)

    def comfortable_spacing(self) -> Self:
        return self.with_spacing(CardSpacing.COMFORTABLE)

    def spacious_spacing(self) -> Self:
        return self.with_spacing(CardSpacing.SPACIOUS)

    def with_interaction(self, interaction: CardInteraction) -> Self:
        return replace(self, interaction=interaction)

    def static_interaction(self) -> Self:
        return self.with_interaction(CardInteraction.STATIC)

    def hoverable_interaction(self) -> Self:
        return self.with_interaction(CardInteraction.HOVERABLE)

    def clickable_interaction(self) -> Self:
        return self.with_interaction(CardInteraction.CLICKABLE)

    def selectable_interaction(self) -> Self:
        return self.with_interaction(CardInteraction.SELECTABLE)

    def draggable_interaction(self) -> Self:
        return self.with_interaction(CardInteraction.DRAGGABLE)

    def with_selected(self, selected: bool = True) -> Self:
        return replace(self, selected=selected)

    def _fragments(self) -> Iterator[str]:
        yield _BASE_CLASSES
        yield _ELEVATION_CLASSES[self.elevation]
        yield _SURFACE_CLASSES[self.surface](self.colors)
        yield _SPACING_CLASSES[self.spacing]
        yield _INTERACTION_CLASSES[self.interaction]
        if self.selected:
            yield "ring-2 ring-offset-2"
            yield self.colors.ring_class(Color.PRIMARY)
        if self.interaction in (CardInteraction.HOVERABLE, CardInteraction.CLICKABLE):
            yield _HOVER_ELEVATION.get(self.elevation, "")


def card_styles(colors: ColorProvider) -> CardStyles:
    """Create a card builder with default settings."""
    return CardStyles(colors)


def card_classes_from_strings(
    colors: ColorProvider,
    surface: str,
    elevation: str,
    spacing: str,
    interaction: str,
    selected: bool = False,
) -> str:
    """
    Build card classes from string props in one call.

    Examples:
        >>> card_classes_from_strings(VibeColors(), "elevated", "raised", "comfortable", "clickable")
    """
    return CardStyles(
        colors,
        surface=lookup_alias(SURFACE_ALIASES, surface, CardSurface.STANDARD, "card surface"),
        elevation=lookup_alias(ELEVATION_ALIASES, elevation, CardElevation.SUBTLE, "card elevation"),
        spacing=lookup_alias(SPACING_ALIASES, spacing, CardSpacing.STANDARD, "card spacing"),
        interaction=lookup_alias(
            INTERACTION_ALIASES, interaction, CardInteraction.STATIC, "card interaction"
        ),
        selected=selected,
    ).classes()
