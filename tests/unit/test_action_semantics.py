"""
Unit tests for the action semantics builder.
"""

import pytest

from jupiter_design import VibeColors, action_semantics
from jupiter_design.builders import ActionContext, ActionHierarchy, ActionIntent, ActionSemantics


class TestActionDefaults:
    """Tests for the default action."""

    def test_default_is_secondary_standalone(self, vibe_colors):
        """Test the default action is a bordered secondary action."""
        assert action_semantics(vibe_colors).classes() == (
            "bg-white text-gray-900 border-gray-200 border "
            "text-sm font-medium px-4 py-2 rounded-md shadow-sm"
        )

    def test_default_fields(self, vibe_colors):
        """Test the builder starts from secondary/secondary/standalone."""
        builder = ActionSemantics(vibe_colors)
        assert builder.intent is ActionIntent.SECONDARY
        assert builder.hierarchy is ActionHierarchy.SECONDARY
        assert builder.context is ActionContext.STANDALONE
        assert builder.urgent is False


class TestActionShortcuts:
    """Tests for semantic shortcuts."""

    def test_hero(self, vibe_colors):
        """Test hero is a primary intent with the heaviest weight."""
        assert action_semantics(vibe_colors).hero().classes() == (
            "bg-water-blue-500 text-white hover:bg-water-blue-600 "
            "text-xl font-bold px-8 py-4 rounded-lg shadow-lg"
        )

    def test_primary_sets_intent_and_hierarchy(self, vibe_colors):
        """Test primary sets both intent and hierarchy."""
        builder = action_semantics(vibe_colors).primary()
        assert builder.intent is ActionIntent.PRIMARY
        assert builder.hierarchy is ActionHierarchy.PRIMARY
        assert "font-semibold" in builder.classes().split()

    def test_destructive_keeps_hierarchy(self, vibe_colors):
        """Test destructive changes only the intent."""
        builder = action_semantics(vibe_colors).hero().destructive()
        classes = builder.classes().split()
        assert builder.hierarchy is ActionHierarchy.HERO
        assert {"bg-red-500", "text-white", "hover:bg-red-600", "font-bold"} <= set(classes)

    def test_navigation_sets_context(self, vibe_colors):
        """Test navigation sets the navigation context."""
        classes = action_semantics(vibe_colors).navigation().classes().split()
        assert {"bg-transparent", "hover:bg-gray-50", "w-full", "justify-start"} <= set(classes)

    def test_constructive_uses_success_color(self):
        """Test constructive actions follow the success token."""
        colors = VibeColors.with_overrides(success="emerald-500")
        assert "bg-emerald-500" in action_semantics(colors).constructive().classes().split()

    def test_informational(self, vibe_colors):
        """Test informational actions are muted links."""
        classes = action_semantics(vibe_colors).informational().classes().split()
        assert {"text-gray-600", "hover:underline"} <= set(classes)


class TestActionContextAndUrgency:
    """Tests for context adjustments and urgency."""

    @pytest.mark.parametrize(
        "context,expected",
        [
            (ActionContext.FORM, "min-w-24"),
            (ActionContext.INLINE, "underline-offset-2"),
            (ActionContext.TOOLBAR, "h-8"),
            (ActionContext.FLOATING, "rounded-full"),
        ],
    )
    def test_context_classes(self, vibe_colors, context, expected):
        """Test each context adds its adjustment."""
        assert expected in action_semantics(vibe_colors).with_context(context).classes().split()

    def test_urgent_pulses_before_custom(self, vibe_colors):
        """Test urgency adds a pulse ahead of custom classes."""
        classes = action_semantics(vibe_colors).with_urgent().custom("uppercase").classes().split()
        assert classes[-2:] == ["animate-pulse", "uppercase"]

    def test_urgent_can_be_cleared(self, vibe_colors):
        """Test urgency takes an explicit flag."""
        classes = action_semantics(vibe_colors).with_urgent().with_urgent(False).classes()
        assert "animate-pulse" not in classes
