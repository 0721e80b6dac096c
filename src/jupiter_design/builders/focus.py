"""
Focus and accessibility builder.

Produces focus ring classes plus the matching ``tabindex``/``role``/ARIA
attributes for an element that behaves like a button, link, menu item, tab,
toggle or disclosure.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Self

from ..core.color import ColorProvider
from ..core.tokens import Color, require_complete
from .classes import StyleBuilder


class FocusBehavior(StrEnum):
    STANDARD = "standard"
    SUBTLE = "subtle"
    PROMINENT = "prominent"
    NONE = "none"
    CUSTOM = "custom"


class KeyboardPattern(StrEnum):
    BUTTON = "button"
    LINK = "link"
    MENU_ITEM = "menu-item"
    TAB = "tab"
    TOGGLE = "toggle"
    EXPANDABLE = "expandable"


class ScreenReaderPattern(StrEnum):
    BUTTON = "button"
    LINK = "link"
    MENU_ITEM = "menu-item"
    TAB = "tab"
    TOGGLE_BUTTON = "toggle-button"
    EXPANDABLE = "expandable"


def _ring(width: str, offset: str, color: str) -> str:
    return f"focus:ring-{width} focus:ring-offset-{offset} focus:{color}"


_FOCUS_RING: Mapping[FocusBehavior, Callable[[ColorProvider], str]] = require_complete(
    {
        FocusBehavior.STANDARD: lambda c: _ring("2", "2", c.ring_class(Color.PRIMARY)),
        FocusBehavior.SUBTLE: lambda c: _ring("1", "1", c.ring_class(Color.BORDER)),
        FocusBehavior.PROMINENT: lambda c: _ring("4", "2", c.ring_class(Color.PRIMARY)),
        FocusBehavior.NONE: lambda c: "focus:ring-0",
        FocusBehavior.CUSTOM: lambda c: "",
    },
    FocusBehavior,
    "focus ring classes",
)

_ROLES: Mapping[ScreenReaderPattern, str] = require_complete(
    {
        ScreenReaderPattern.BUTTON: "button",
        ScreenReaderPattern.LINK: "link",
        ScreenReaderPattern.MENU_ITEM: "menuitem",
        ScreenReaderPattern.TAB: "tab",
        ScreenReaderPattern.TOGGLE_BUTTON: "button",
        ScreenReaderPattern.EXPANDABLE: "button",
    },
    ScreenReaderPattern,
    "screen reader roles",
)

# Initial ARIA state for patterns that carry one
_ARIA_STATE: Mapping[ScreenReaderPattern, tuple[str, str]] = {
    ScreenReaderPattern.TOGGLE_BUTTON: ("aria-pressed", "false"),
    ScreenReaderPattern.EXPANDABLE: ("aria-expanded", "false"),
}


@dataclass(frozen=True, kw_only=True)
class FocusManagement(StyleBuilder):
    """Chainable focus ring and accessibility attribute builder.

    ``classes()`` returns the focus ring; ``data_attributes()`` returns the
    markup attributes as ``(name, value)`` pairs in a fixed order.
    """

    focus_behavior: FocusBehavior = FocusBehavior.STANDARD
    keyboard_pattern: KeyboardPattern | None = None
    screen_reader_pattern: ScreenReaderPattern | None = None
    focusable: bool = True
    tab_index: int | None = None

    def with_focus_behavior(self, behavior: FocusBehavior) -> Self:
        return replace(self, focus_behavior=behavior)

    def with_focusable(self, focusable: bool = True) -> Self:
        return replace(self, focusable=focusable)

    def with_tab_index(self, tab_index: int | None) -> Self:
        return replace(self, tab_index=tab_index)

    def _pattern(
        self,
        keyboard: KeyboardPattern,
        screen_reader: ScreenReaderPattern,
        behavior: FocusBehavior = FocusBehavior.STANDARD,
    ) -> Self:
        return replace(
            self,
            keyboard_pattern=keyboard,
            screen_reader_pattern=screen_reader,
            focus_behavior=behavior,
        )

    def button(self) -> Self:
        return self._pattern(KeyboardPattern.BUTTON, ScreenReaderPattern.BUTTON)

    def link(self) -> Self:
        return self._pattern(KeyboardPattern.LINK, ScreenReaderPattern.LINK)

    def menu_item(self) -> Self:
        return self._pattern(
            KeyboardPattern.MENU_ITEM, ScreenReaderPattern.MENU_ITEM, FocusBehavior.SUBTLE
        )

    def tab(self) -> Self:
        return self._pattern(KeyboardPattern.TAB, ScreenReaderPattern.TAB)

    def toggle(self) -> Self:
        return self._pattern(KeyboardPattern.TOGGLE, ScreenReaderPattern.TOGGLE_BUTTON)

    def expandable(self) -> Self:
        return self._pattern(KeyboardPattern.EXPANDABLE, ScreenReaderPattern.EXPANDABLE)

    def _fragments(self) -> Iterator[str]:
        if not self.focusable:
            return
        yield "focus:outline-none"
        yield _FOCUS_RING[self.focus_behavior](self.colors)

    def data_attributes(self) -> tuple[tuple[str, str], ...]:
        """Markup attributes for this element.

        An explicit ``tab_index`` always wins; otherwise focusable elements
        get ``tabindex="0"``.

        Examples:
            >>> focus_management(VibeColors()).toggle().data_attributes()
            (('tabindex', '0'), ('role', 'button'), ('aria-pressed', 'false'))
        """
        attrs: list[tuple[str, str]] = []
        if self.tab_index is not None:
            attrs.append(("tabindex", str(self.tab_index)))
        elif self.focusable:
            attrs.append(("tabindex", "0"))

        pattern = self.screen_reader_pattern
        if pattern is not None:
            attrs.append(("role", _ROLES[pattern]))
            if pattern in _ARIA_STATE:
                attrs.append(_ARIA_STATE[pattern])
        return tuple(attrs)


def focus_management(colors: ColorProvider) -> FocusManagement:
    """Create a focus builder with a standard ring and no pattern."""
    return FocusManagement(colors)
