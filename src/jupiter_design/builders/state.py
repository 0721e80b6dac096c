"""
Styling builder for loading, empty, error and other status states.

Besides classes, a state builder suggests an icon name and an action label
so that components render consistent placeholders.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Self

from ..core.color import ColorProvider
from ..core.tokens import SIZE_ALIASES, Color, Size, require_complete
from .classes import StyleBuilder, lookup_alias


class StateIntent(StrEnum):
    INFORMATIONAL = "informational"
    LOADING = "loading"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    EMPTY = "empty"


class StateProminence(StrEnum):
    SUBTLE = "subtle"
    STANDARD = "standard"
    PROMINENT = "prominent"


class StateAlignment(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class StateActionRequirement(StrEnum):
    NONE = "none"
    OPTIONAL = "optional"
    RECOMMENDED = "recommended"
    REQUIRED = "required"


class LoadingVariant(StrEnum):
    SPINNER = "spinner"
    DOTS = "dots"
    PULSE = "pulse"
    BARS = "bars"
    SKELETON = "skeleton"


_ALIGNMENT_CLASSES: Mapping[StateAlignment, str] = require_complete(
    {
        StateAlignment.LEFT: "flex flex-col items-start text-left",
        StateAlignment.CENTER: "flex flex-col items-center text-center",
        StateAlignment.RIGHT: "flex flex-col items-end text-right",
    },
    StateAlignment,
    "state alignment classes",
)

_PADDING_CLASSES: Mapping[Size, str] = require_complete(
    {
        Size.XSMALL: "px-4 py-8",
        Size.SMALL: "px-6 py-12",
        Size.MEDIUM: "px-8 py-16",
        Size.LARGE: "px-12 py-20",
        Size.XLARGE: "px-16 py-24",
    },
    Size,
    "state padding classes",
)

# (text color, background color) per intent
_INTENT_COLORS: Mapping[StateIntent, tuple[Color, Color]] = require_complete(
    {
        StateIntent.INFORMATIONAL: (Color.TEXT_PRIMARY, Color.BACKGROUND),
        StateIntent.LOADING: (Color.PRIMARY, Color.BACKGROUND),
        StateIntent.SUCCESS: (Color.SUCCESS, Color.BACKGROUND),
        StateIntent.WARNING: (Color.WARNING, Color.BACKGROUND),
        StateIntent.ERROR: (Color.ERROR, Color.BACKGROUND),
        StateIntent.EMPTY: (Color.TEXT_SECONDARY, Color.BACKGROUND),
    },
    StateIntent,
    "state intent colors",
)

_LOADING_CLASSES: Mapping[LoadingVariant, str] = require_complete(
    {
        LoadingVariant.SPINNER: "animate-spin border-4 border-t-transparent rounded-full",
        LoadingVariant.DOTS: "animate-bounce rounded-full",
        LoadingVariant.PULSE: "animate-pulse rounded-full",
        LoadingVariant.BARS: "animate-pulse rounded-sm",
        LoadingVariant.SKELETON: "animate-pulse rounded",
    },
    LoadingVariant,
    "loading variant classes",
)

_ICONS: Mapping[StateIntent, str] = require_complete(
    {
        StateIntent.INFORMATIONAL: "info",
        StateIntent.LOADING: "loader",
        StateIntent.SUCCESS: "check-circle",
        StateIntent.WARNING: "alert-triangle",
        StateIntent.ERROR: "alert-circle",
        StateIntent.EMPTY: "inbox",
    },
    StateIntent,
    "state icons",
)

_ACTION_TEXT: Mapping[tuple[StateIntent, StateActionRequirement], str] = {
    (StateIntent.ERROR, StateActionRequirement.RECOMMENDED): "Try Again",
    (StateIntent.EMPTY, StateActionRequirement.OPTIONAL): "Refresh",
    (StateIntent.EMPTY, StateActionRequirement.RECOMMENDED): "Add Item",
    (StateIntent.WARNING, StateActionRequirement.REQUIRED): "Take Action",
}

_CONTENT_SIZE: Mapping[Size, str] = require_complete(
    {
        Size.XSMALL: "text-lg",
        Size.SMALL: "text-xl",
        Size.MEDIUM: "text-2xl",
        Size.LARGE: "text-3xl",
        Size.XLARGE: "text-4xl",
    },
    Size,
    "state content sizes",
)

_DESCRIPTION_SIZE: Mapping[Size, str] = require_complete(
    {
        Size.XSMALL: "text-sm",
        Size.SMALL: "text-base",
        Size.MEDIUM: "text-lg",
        Size.LARGE: "text-xl",
        Size.XLARGE: "text-2xl",
    },
    Size,
    "state description sizes",
)

_ICON_SIZE: Mapping[Size, str] = require_complete(
    {
        Size.XSMALL: "w-8 h-8",
        Size.SMALL: "w-12 h-12",
        Size.MEDIUM: "w-16 h-16",
        Size.LARGE: "w-20 h-20",
        Size.XLARGE: "w-24 h-24",
    },
    Size,
    "state icon sizes",
)

_SPINNER_SIZE: Mapping[Size, str] = require_complete(
    {
        Size.XSMALL: "w-6 h-6",
        Size.SMALL: "w-8 h-8",
        Size.MEDIUM: "w-12 h-12",
        Size.LARGE: "w-16 h-16",
        Size.XLARGE: "w-20 h-20",
    },
    Size,
    "spinner sizes",
)

_DOT_SIZE: Mapping[Size, str] = require_complete(
    {
        Size.XSMALL: "w-2 h-2",
        Size.SMALL: "w-3 h-3",
        Size.MEDIUM: "w-4 h-4",
        Size.LARGE: "w-5 h-5",
        Size.XLARGE: "w-6 h-6",
    },
    Size,
    "loading dot sizes",
)

INTENT_ALIASES: dict[str, StateIntent] = {
    **{i.value: i for i in StateIntent},
    "info": StateIntent.INFORMATIONAL,
    "warn": StateIntent.WARNING,
}
PROMINENCE_ALIASES: dict[str, StateProminence] = {p.value: p for p in StateProminence}
ALIGNMENT_ALIASES: dict[str, StateAlignment] = {a.value: a for a in StateAlignment}
LOADING_ALIASES: dict[str, LoadingVariant] = {v.value: v for v in LoadingVariant}


@dataclass(frozen=True, kw_only=True)
class StateStyles(StyleBuilder):
    """Chainable state class builder."""

    intent: StateIntent = StateIntent.INFORMATIONAL
    prominence: StateProminence = StateProminence.STANDARD
    size: Size = Size.MEDIUM
    alignment: StateAlignment = StateAlignment.CENTER
    action: StateActionRequirement = StateActionRequirement.NONE
    loading_variant: LoadingVariant | None = None
    fullscreen: bool = False

    # Intent

    def with_intent(self, intent: StateIntent) -> Self:
        return replace(self, intent=intent)

    def informational(self) -> Self:
        return self.with_intent(StateIntent.INFORMATIONAL)

    def loading(self) -> Self:
        return self.with_intent(StateIntent.LOADING)

    def success(self) -> Self:
        return self.with_intent(StateIntent.SUCCESS)

    def warning(self) -> Self:
        return self.with_intent(StateIntent.WARNING)

    def error(self) -> Self:
        return self.with_intent(StateIntent.ERROR)

    def empty(self) -> Self:
        return self.with_intent(StateIntent.EMPTY)

    # Prominence

    def with_prominence(self, prominence: StateProminence) -> Self:
        return replace(self, prominence=prominence)

    def subtle(self) -> Self:
        return self.with_prominence(StateProminence.SUBTLE)

    def standard(self) -> Self:
        return self.with_prominence(StateProminence.STANDARD)

    def prominent(self) -> Self:
        return self.with_prominence(StateProminence.PROMINENT)

    # Size

    def with_size(self, size: Size) -> Self:
        return replace(self, size=size)

    def xs(self) -> Self:
        return self.with_size(Size.XSMALL)

    def sm(self) -> Self:
        return self.with_size(Size.SMALL)

    def md(self) -> Self:
        return self.with_size(Size.MEDIUM)

    def lg(self) -> Self:
        return self.with_size(Size.LARGE)

    def xl(self) -> Self:
        return self.with_size(Size.XLARGE)

    # Alignment

    def with_alignment(self, alignment: StateAlignment) -> Self:
        return replace(self, alignment=alignment)

    def left_aligned(self) -> Self:
        return self.with_alignment(StateAlignment.LEFT)

    def center_aligned(self) -> Self:
        return self.with_alignment(StateAlignment.CENTER)

    def right_aligned(self) -> Self:
        return self.with_alignment(StateAlignment.RIGHT)

    # Action

    def with_action(self, action: StateActionRequirement) -> Self:
        return replace(self, action=action)

    def no_action(self) -> Self:
        return self.with_action(StateActionRequirement.NONE)

    def optional_action(self) -> Self:
        return self.with_action(StateActionRequirement.OPTIONAL)

    def recommended_action(self) -> Self:
        return self.with_action(StateActionRequirement.RECOMMENDED)

    def required_action(self) -> Self:
        return self.with_action(StateActionRequirement.REQUIRED)

    # Loading indicator

    def with_loading_variant(self, variant: LoadingVariant | None) -> Self:
        return replace(self, loading_variant=variant)

    def spinner(self) -> Self:
        return self.with_loading_variant(LoadingVariant.SPINNER)

    def dots(self) -> Self:
        return self.with_loading_variant(LoadingVariant.DOTS)

    def pulse(self) -> Self:
        return self.with_loading_variant(LoadingVariant.PULSE)

    def bars(self) -> Self:
        return self.with_loading_variant(LoadingVariant.BARS)

    def skeleton(self) -> Self:
        return self.with_loading_variant(LoadingVariant.SKELETON)

    def with_fullscreen(self, fullscreen: bool = True) -> Self:
        return replace(self, fullscreen=fullscreen)

    # Content hints

    def suggested_icon(self) -> str:
        """Icon name matching the intent (lucide naming)."""
        return _ICONS[self.intent]

    def suggested_action_text(self) -> str | None:
        """Label for the call-to-action, if this intent and requirement warrant one."""
        return _ACTION_TEXT.get((self.intent, self.action))

    def content_size_classes(self) -> str:
        return _CONTENT_SIZE[self.size]

    def description_size_classes(self) -> str:
        return _DESCRIPTION_SIZE[self.size]

    def icon_size_classes(self) -> str:
        return _ICON_SIZE[self.size]

    def loading_size_classes(self) -> str:
        match self.loading_variant:
            case LoadingVariant.SPINNER:
                return _SPINNER_SIZE[self.size]
            case LoadingVariant.DOTS:
                return _DOT_SIZE[self.size]
            case _:
                return "w-8 h-8"

    def _fragments(self) -> Iterator[str]:
        yield "state-pattern"
        yield _ALIGNMENT_CLASSES[self.alignment]
        if self.fullscreen:
            yield "min-h-screen justify-center"
        yield _PADDING_CLASSES[self.size]
        text, background = _INTENT_COLORS[self.intent]
        yield self.colors.text_class(text)
        yield self.colors.bg_class(background)
        if self.loading_variant is not None:
            yield _LOADING_CLASSES[self.loading_variant]


def state_styles(colors: ColorProvider) -> StateStyles:
    """Create a state builder with default settings."""
    return StateStyles(colors)


def loading_state_styles(colors: ColorProvider) -> StateStyles:
    return StateStyles(colors).loading().standard().center_aligned().spinner().no_action()


def empty_state_styles(colors: ColorProvider) -> StateStyles:
    return StateStyles(colors).empty().standard().center_aligned().optional_action()


def error_state_styles(colors: ColorProvider) -> StateStyles:
    return StateStyles(colors).error().prominent().center_aligned().recommended_action()


def success_state_styles(colors: ColorProvider) -> StateStyles:
    return StateStyles(colors).success().standard().center_aligned().no_action()


def state_classes_from_strings(
    colors: ColorProvider,
    intent: str,
    prominence: str,
    size: str,
    alignment: str,
    loading_variant: str | None = None,
    fullscreen: bool = False,
) -> str:
    """
    Build state classes from string props in one call.

    Unknown loading variants mean no loading indicator.
    """
    builder = StateStyles(
        colors,
        intent=lookup_alias(INTENT_ALIASES, intent, StateIntent.INFORMATIONAL, "state intent"),
        prominence=lookup_alias(
            PROMINENCE_ALIASES, prominence, StateProminence.STANDARD, "state prominence"
        ),
        size=lookup_alias(SIZE_ALIASES, size, Size.MEDIUM, "state size"),
        alignment=lookup_alias(ALIGNMENT_ALIASES, alignment, StateAlignment.CENTER, "state alignment"),
        fullscreen=fullscreen,
    )
    if loading_variant is not None:
        builder = builder.with_loading_variant(
            lookup_alias(LOADING_ALIASES, loading_variant, None, "loading variant")
        )
    return builder.classes()
