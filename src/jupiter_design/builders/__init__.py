"""
Fluent component style builders.

Each builder resolves semantic tokens through a color provider and returns a
Tailwind class string from ``classes()``.
"""

from .actions import ActionContext, ActionHierarchy, ActionIntent, ActionSemantics, action_semantics
from .button import (
    ButtonState,
    ButtonStyles,
    ButtonVariant,
    button_classes_from_strings,
    button_styles,
)
from .card import (
    CardElevation,
    CardInteraction,
    CardSpacing,
    CardStyles,
    CardSurface,
    card_classes_from_strings,
    card_styles,
)
from .classes import StyleBuilder, merge_classes
from .focus import (
    FocusBehavior,
    FocusManagement,
    KeyboardPattern,
    ScreenReaderPattern,
    focus_management,
)
from .interactions import InteractionIntensity, InteractionState, InteractionStyles, interaction_styles
from .interactive import (
    InteractiveButton,
    InteractiveInput,
    InteractiveStyles,
    InteractiveVariant,
    PseudoState,
    interactive_button,
    interactive_element,
    interactive_input,
)
from .layout import (
    LayoutAlignment,
    LayoutDirection,
    LayoutDivider,
    LayoutStyles,
    card_content_styles,
    card_footer_styles,
    card_header_styles,
    layout_styles,
)
from .state import (
    LoadingVariant,
    StateActionRequirement,
    StateAlignment,
    StateIntent,
    StateProminence,
    StateStyles,
    empty_state_styles,
    error_state_styles,
    loading_state_styles,
    state_classes_from_strings,
    state_styles,
    success_state_styles,
)
from .text import (
    TextAlignment,
    TextColor,
    TextHierarchy,
    TextOverflow,
    TextSize,
    TextStyles,
    TextWeight,
    text_classes_from_strings,
    text_element_from_hierarchy,
    text_styles,
)

__all__ = [
    # Shared
    "StyleBuilder",
    "merge_classes",
    # Button
    "ButtonState",
    "ButtonStyles",
    "ButtonVariant",
    "button_classes_from_strings",
    "button_styles",
    # Card
    "CardElevation",
    "CardInteraction",
    "CardSpacing",
    "CardStyles",
    "CardSurface",
    "card_classes_from_strings",
    "card_styles",
    # Text
    "TextAlignment",
    "TextColor",
    "TextHierarchy",
    "TextOverflow",
    "TextSize",
    "TextStyles",
    "TextWeight",
    "text_classes_from_strings",
    "text_element_from_hierarchy",
    "text_styles",
    # Layout
    "LayoutAlignment",
    "LayoutDirection",
    "LayoutDivider",
    "LayoutStyles",
    "card_content_styles",
    "card_footer_styles",
    "card_header_styles",
    "layout_styles",
    # State
    "LoadingVariant",
    "StateActionRequirement",
    "StateAlignment",
    "StateIntent",
    "StateProminence",
    "StateStyles",
    "empty_state_styles",
    "error_state_styles",
    "loading_state_styles",
    "state_classes_from_strings",
    "state_styles",
    "success_state_styles",
    # Interactive
    "InteractiveButton",
    "InteractiveInput",
    "InteractiveStyles",
    "InteractiveVariant",
    "PseudoState",
    "interactive_button",
    "interactive_element",
    "interactive_input",
    # Actions
    "ActionContext",
    "ActionHierarchy",
    "ActionIntent",
    "ActionSemantics",
    "action_semantics",
    # Focus
    "FocusBehavior",
    "FocusManagement",
    "KeyboardPattern",
    "ScreenReaderPattern",
    "focus_management",
    # Interactions
    "InteractionIntensity",
    "InteractionState",
    "InteractionStyles",
    "interaction_styles",
]
