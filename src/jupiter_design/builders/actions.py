"""
Action semantics builder.

Describes what an action means (intent), how prominent it is (hierarchy) and
where it sits (context), and turns that into color and visual weight classes.
Components that render actions differently can share one vocabulary.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Self

from ..core.color import ColorProvider
from ..core.tokens import Color, require_complete
from .classes import StyleBuilder


class ActionIntent(StrEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    CONSTRUCTIVE = "constructive"
    DESTRUCTIVE = "destructive"
    NAVIGATION = "navigation"
    INFORMATIONAL = "informational"


class ActionHierarchy(StrEnum):
    HERO = "hero"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    MINIMAL = "minimal"


class ActionContext(StrEnum):
    STANDALONE = "standalone"
    FORM = "form"
    NAVIGATION = "navigation"
    INLINE = "inline"
    TOOLBAR = "toolbar"
    FLOATING = "floating"


_INTENT_CLASSES: Mapping[ActionIntent, Callable[[ColorProvider], str]] = require_complete(
    {
        ActionIntent.PRIMARY: lambda c: (
            f"{c.bg_class(Color.PRIMARY)} {c.text_class(Color.TEXT_INVERSE)} "
            f"hover:{c.bg_class(Color.INTERACTIVE_HOVER)}"
        ),
        ActionIntent.SECONDARY: lambda c: (
            f"{c.bg_class(Color.SURFACE)} {c.text_class(Color.TEXT_PRIMARY)} "
            f"{c.border_class(Color.BORDER)} border"
        ),
        ActionIntent.CONSTRUCTIVE: lambda c: (
            f"{c.bg_class(Color.SUCCESS)} {c.text_class(Color.TEXT_INVERSE)} hover:bg-green-600"
        ),
        ActionIntent.DESTRUCTIVE: lambda c: (
            f"{c.bg_class(Color.ERROR)} {c.text_class(Color.TEXT_INVERSE)} hover:bg-red-600"
        ),
        ActionIntent.NAVIGATION: lambda c: (
            f"bg-transparent {c.text_class(Color.TEXT_PRIMARY)} hover:{c.bg_class(Color.BACKGROUND)}"
        ),
        ActionIntent.INFORMATIONAL: lambda c: (
            f"bg-transparent {c.text_class(Color.TEXT_SECONDARY)} hover:underline"
        ),
    },
    ActionIntent,
    "action intent classes",
)

_HIERARCHY_CLASSES: Mapping[ActionHierarchy, str] = require_complete(
    {
        ActionHierarchy.HERO: "text-xl font-bold px-8 py-4 rounded-lg shadow-lg",
        ActionHierarchy.PRIMARY: "text-base font-semibold px-6 py-3 rounded-md shadow-md",
        ActionHierarchy.SECONDARY: "text-sm font-medium px-4 py-2 rounded-md shadow-sm",
        ActionHierarchy.TERTIARY: "text-sm font-normal px-3 py-1.5 rounded",
        ActionHierarchy.MINIMAL: "text-xs font-normal px-2 py-1 rounded",
    },
    ActionHierarchy,
    "action hierarchy classes",
)

_CONTEXT_CLASSES: Mapping[ActionContext, str] = require_complete(
    {
        ActionContext.STANDALONE: "",
        ActionContext.FORM: "min-w-24",
        ActionContext.NAVIGATION: "w-full justify-start",
        ActionContext.INLINE: "inline underline-offset-2",
        ActionContext.TOOLBAR: "h-8 px-2 text-xs",
        ActionContext.FLOATING: "rounded-full w-14 h-14 shadow-xl",
    },
    ActionContext,
    "action context classes",
)


@dataclass(frozen=True, kw_only=True)
class ActionSemantics(StyleBuilder):
    """Chainable action semantics builder.

    Output order is intent colors, hierarchy weight, context adjustments,
    urgency, then custom classes.

    Examples:
        >>> action_semantics(VibeColors()).hero().classes()
        'bg-water-blue-500 text-white hover:bg-water-blue-600 text-xl font-bold px-8 py-4 rounded-lg shadow-lg'
    """

    intent: ActionIntent = ActionIntent.SECONDARY
    hierarchy: ActionHierarchy = ActionHierarchy.SECONDARY
    context: ActionContext = ActionContext.STANDALONE
    urgent: bool = False

    def with_intent(self, intent: ActionIntent) -> Self:
        return replace(self, intent=intent)

    def with_hierarchy(self, hierarchy: ActionHierarchy) -> Self:
        return replace(self, hierarchy=hierarchy)

    def with_context(self, context: ActionContext) -> Self:
        return replace(self, context=context)

    def with_urgent(self, urgent: bool = True) -> Self:
        """Mark the action as time-sensitive (pulses)."""
        return replace(self, urgent=urgent)

    def primary(self) -> Self:
        return replace(self, intent=ActionIntent.PRIMARY, hierarchy=ActionHierarchy.PRIMARY)

    def secondary(self) -> Self:
        return replace(self, intent=ActionIntent.SECONDARY, hierarchy=ActionHierarchy.SECONDARY)

    def hero(self) -> Self:
        return replace(self, intent=ActionIntent.PRIMARY, hierarchy=ActionHierarchy.HERO)

    def constructive(self) -> Self:
        return self.with_intent(ActionIntent.CONSTRUCTIVE)

    def destructive(self) -> Self:
        return self.with_intent(ActionIntent.DESTRUCTIVE)

    def informational(self) -> Self:
        return self.with_intent(ActionIntent.INFORMATIONAL)

    def navigation(self) -> Self:
        return replace(self, intent=ActionIntent.NAVIGATION, context=ActionContext.NAVIGATION)

    def _fragments(self) -> Iterator[str]:
        yield _INTENT_CLASSES[self.intent](self.colors)
        yield _HIERARCHY_CLASSES[self.hierarchy]
        yield _CONTEXT_CLASSES[self.context]
        if self.urgent:
            yield "animate-pulse"


def action_semantics(colors: ColorProvider) -> ActionSemantics:
    """Create an action semantics builder (secondary, standalone)."""
    return ActionSemantics(colors)
