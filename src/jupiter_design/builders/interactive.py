"""
Interactive element builder with pseudo-class scopes.

``hover()``, ``focus()``, ``active()`` and ``disabled()`` switch the scope
that following additions go to. Additions in a scope are emitted with the
matching Tailwind variant prefix::

    interactive_input(colors).standard_style()
        .hover().border_primary().shadow_md()
        .focus().ring_primary().outline_none()
        .disabled().opacity_50()
        .classes()
    # -> "... hover:border-water-blue-500 hover:shadow-md focus:ring-2 ..."
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Self

from ..core.color import ColorProvider
from ..core.tokens import Color, require_complete
from .classes import StyleBuilder, split_classes


class PseudoState(StrEnum):
    """Scope an addition applies to. ``BASE`` has no prefix."""

    BASE = "base"
    HOVER = "hover"
    FOCUS = "focus"
    ACTIVE = "active"
    DISABLED = "disabled"


class InteractiveVariant(StrEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    GHOST = "ghost"


class InputStyle(StrEnum):
    BASE = "base"
    STANDARD = "standard"


_BUTTON_BASE = "inline-flex items-center justify-center px-4 py-2 font-medium rounded-md transition-colors"
_INPUT_BASE = "w-full px-4 py-3 rounded-md transition-colors focus:outline-none"

_PREFIXES: Mapping[PseudoState, str] = require_complete(
    {
        PseudoState.BASE: "",
        PseudoState.HOVER: "hover:",
        PseudoState.FOCUS: "focus:",
        PseudoState.ACTIVE: "active:",
        PseudoState.DISABLED: "disabled:",
    },
    PseudoState,
    "pseudo-class prefixes",
)


@dataclass(frozen=True, kw_only=True)
class InteractiveStyles(StyleBuilder):
    """Builder for elements with hover/focus/active/disabled styling."""

    scope: PseudoState = PseudoState.BASE
    entries: tuple[tuple[PseudoState, str], ...] = ()

    # Scopes

    def base(self, classes: str = "") -> Self:
        """Switch back to unprefixed classes, optionally adding some."""
        return replace(self, scope=PseudoState.BASE).add(classes)

    def hover(self) -> Self:
        return replace(self, scope=PseudoState.HOVER)

    def focus(self) -> Self:
        return replace(self, scope=PseudoState.FOCUS)

    def active(self) -> Self:
        return replace(self, scope=PseudoState.ACTIVE)

    def disabled(self) -> Self:
        return replace(self, scope=PseudoState.DISABLED)

    def add(self, classes: str) -> Self:
        """Add space-separated classes to the current scope."""
        added = tuple((self.scope, token) for token in split_classes(classes))
        return replace(self, entries=self.entries + added)

    # Helpers

    def border_primary(self) -> Self:
        return self.add(self.colors.border_class(Color.PRIMARY))

    def bg_primary(self) -> Self:
        return self.add(self.colors.bg_class(Color.PRIMARY))

    def darken(self) -> Self:
        return self.add(self.colors.bg_class(Color.INTERACTIVE_HOVER))

    def ring_primary(self) -> Self:
        return self.add(f"ring-2 ring-offset-2 {self.colors.ring_class(Color.PRIMARY)}")

    def outline_none(self) -> Self:
        return self.add("outline-none")

    def scale_105(self) -> Self:
        return self.add("scale-105")

    def scale_95(self) -> Self:
        return self.add("scale-95")

    def shadow_md(self) -> Self:
        return self.add("shadow-md")

    def shadow_lg(self) -> Self:
        return self.add("shadow-lg")

    def opacity_50(self) -> Self:
        return self.add("opacity-50")

    def cursor_not_allowed(self) -> Self:
        return self.add("cursor-not-allowed")

    def _style_fragments(self) -> Iterator[str]:
        return iter(())

    def _fragments(self) -> Iterator[str]:
        yield from self._style_fragments()
        for state in PseudoState:
            prefix = _PREFIXES[state]
            yield " ".join(prefix + token for scope, token in self.entries if scope is state)


@dataclass(frozen=True, kw_only=True)
class InteractiveInput(InteractiveStyles):
    """Text input with an optional preset base style."""

    input_style: InputStyle | None = None

    def base_style(self) -> Self:
        return replace(self, input_style=InputStyle.BASE)

    def standard_style(self) -> Self:
        return replace(self, input_style=InputStyle.STANDARD)

    def _style_fragments(self) -> Iterator[str]:
        match self.input_style:
            case InputStyle.BASE:
                yield f"{_INPUT_BASE} border"
            case InputStyle.STANDARD:
                yield _INPUT_BASE
                yield self.colors.border_class(Color.BORDER)
                yield self.colors.bg_class(Color.SURFACE)
            case None:
                pass


@dataclass(frozen=True, kw_only=True)
class InteractiveButton(InteractiveStyles):
    """Button with a color variant; the last variant call wins."""

    variant: InteractiveVariant | None = None

    def primary(self) -> Self:
        return replace(self, variant=InteractiveVariant.PRIMARY)

    def secondary(self) -> Self:
        return replace(self, variant=InteractiveVariant.SECONDARY)

    def ghost(self) -> Self:
        return replace(self, variant=InteractiveVariant.GHOST)

    def _style_fragments(self) -> Iterator[str]:
        match self.variant:
            case InteractiveVariant.PRIMARY:
                yield _BUTTON_BASE
                yield self.colors.bg_class(Color.PRIMARY)
                yield self.colors.text_class(Color.TEXT_INVERSE)
            case InteractiveVariant.SECONDARY:
                yield f"{_BUTTON_BASE} border"
                yield self.colors.bg_class(Color.SURFACE)
                yield self.colors.text_class(Color.TEXT_PRIMARY)
                yield self.colors.border_class(Color.BORDER)
            case InteractiveVariant.GHOST:
                yield f"{_BUTTON_BASE} bg-transparent"
                yield self.colors.text_class(Color.TEXT_PRIMARY)
            case None:
                pass


def interactive_element(colors: ColorProvider) -> InteractiveStyles:
    """Create a bare interactive builder."""
    return InteractiveStyles(colors)


def interactive_input(colors: ColorProvider) -> InteractiveInput:
    return InteractiveInput(colors)


def interactive_button(colors: ColorProvider) -> InteractiveButton:
    return InteractiveButton(colors)
