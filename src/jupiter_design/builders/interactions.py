"""
Interaction behavior builder.

Where ``InteractiveStyles`` collects arbitrary classes per pseudo-class, this
builder describes behavior: which effects an element supports (hover, press,
focus), how strong they are, and which state it is currently in.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Self

from ..core.color import ColorProvider
from ..core.tokens import Color, require_complete
from .classes import StyleBuilder


class InteractionState(StrEnum):
    DEFAULT = "default"
    HOVER = "hover"
    ACTIVE = "active"
    FOCUSED = "focused"
    DISABLED = "disabled"
    LOADING = "loading"


class InteractionIntensity(StrEnum):
    GENTLE = "gentle"
    STANDARD = "standard"
    PROMINENT = "prominent"


_HOVER_EFFECTS: Mapping[InteractionIntensity, str] = require_complete(
    {
        InteractionIntensity.GENTLE: "hover:scale-101 hover:shadow-sm",
        InteractionIntensity.STANDARD: "hover:scale-105 hover:shadow-md",
        InteractionIntensity.PROMINENT: "hover:scale-110 hover:shadow-lg",
    },
    InteractionIntensity,
    "hover effects",
)

_PRESS_EFFECTS: Mapping[InteractionIntensity, str] = require_complete(
    {
        InteractionIntensity.GENTLE: "active:scale-100",
        InteractionIntensity.STANDARD: "active:scale-95",
        InteractionIntensity.PROMINENT: "active:scale-95",
    },
    InteractionIntensity,
    "press effects",
)


@dataclass(frozen=True, kw_only=True)
class InteractionStyles(StyleBuilder):
    """Chainable interaction behavior builder.

    Disabled elements drop their hover and press effects.
    """

    state: InteractionState = InteractionState.DEFAULT
    intensity: InteractionIntensity = InteractionIntensity.STANDARD
    hoverable: bool = False
    focusable: bool = False
    pressable: bool = False

    def with_state(self, state: InteractionState) -> Self:
        return replace(self, state=state)

    def default(self) -> Self:
        return self.with_state(InteractionState.DEFAULT)

    def hover(self) -> Self:
        return self.with_state(InteractionState.HOVER)

    def active(self) -> Self:
        return self.with_state(InteractionState.ACTIVE)

    def focused(self) -> Self:
        return self.with_state(InteractionState.FOCUSED)

    def disabled(self) -> Self:
        return self.with_state(InteractionState.DISABLED)

    def loading(self) -> Self:
        return self.with_state(InteractionState.LOADING)

    def with_intensity(self, intensity: InteractionIntensity) -> Self:
        return replace(self, intensity=intensity)

    def gentle(self) -> Self:
        return self.with_intensity(InteractionIntensity.GENTLE)

    def standard(self) -> Self:
        return self.with_intensity(InteractionIntensity.STANDARD)

    def prominent(self) -> Self:
        return self.with_intensity(InteractionIntensity.PROMINENT)

    def with_hoverable(self, enabled: bool = True) -> Self:
        return replace(self, hoverable=enabled)

    def with_focusable(self, enabled: bool = True) -> Self:
        return replace(self, focusable=enabled)

    def with_pressable(self, enabled: bool = True) -> Self:
        return replace(self, pressable=enabled)

    def _cursor(self) -> str:
        match self.state:
            case InteractionState.DISABLED:
                return "cursor-not-allowed"
            case InteractionState.LOADING:
                return "cursor-wait"
            case _ if self.hoverable or self.pressable:
                return "cursor-pointer"
            case _:
                return ""

    def _fragments(self) -> Iterator[str]:
        if self.hoverable or self.focusable or self.pressable:
            yield "transition-all duration-200 ease-in-out"
        yield self._cursor()

        enabled = self.state is not InteractionState.DISABLED
        if self.hoverable and enabled:
            yield _HOVER_EFFECTS[self.intensity]
        if self.pressable and enabled:
            yield _PRESS_EFFECTS[self.intensity]
        if self.focusable:
            yield "focus:outline-none focus:ring-2 focus:ring-offset-2"
            yield f"focus:{self.colors.ring_class(Color.PRIMARY)}"

        match self.state:
            case InteractionState.FOCUSED if self.focusable:
                yield "ring-2 ring-offset-2"
                yield self.colors.ring_class(Color.PRIMARY)
            case InteractionState.DISABLED:
                yield "opacity-50 pointer-events-none"
            case InteractionState.LOADING:
                yield "opacity-75"
            case _:
                pass


def interaction_styles(colors: ColorProvider) -> InteractionStyles:
    """Create an interaction builder with no effects enabled."""
    return InteractionStyles(colors)
