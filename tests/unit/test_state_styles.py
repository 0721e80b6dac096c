"""
Unit tests for the state style builder.
"""

import pytest

from jupiter_design import Size, VibeColors, state_styles
from jupiter_design.builders import (
    LoadingVariant,
    StateActionRequirement,
    StateIntent,
    StateStyles,
    empty_state_styles,
    error_state_styles,
    loading_state_styles,
    state_classes_from_strings,
    success_state_styles,
)


class TestStateClasses:
    """Tests for generated classes."""

    def test_default_classes(self, vibe_colors):
        """Test the default informational state."""
        assert state_styles(vibe_colors).classes() == (
            "state-pattern flex flex-col items-center text-center px-8 py-16 text-gray-900 bg-gray-50"
        )

    @pytest.mark.parametrize(
        "method,expected",
        [
            ("left_aligned", "items-start"),
            ("center_aligned", "items-center"),
            ("right_aligned", "items-end"),
        ],
    )
    def test_alignment(self, vibe_colors, method, expected):
        """Test alignment shorthands."""
        assert expected in getattr(state_styles(vibe_colors), method)().classes().split()

    @pytest.mark.parametrize(
        "method,expected",
        [("xs", "py-8"), ("sm", "py-12"), ("md", "py-16"), ("lg", "py-20"), ("xl", "py-24")],
    )
    def test_size_padding(self, vibe_colors, method, expected):
        """Test size shorthands set the padding."""
        assert expected in getattr(state_styles(vibe_colors), method)().classes().split()

    def test_fullscreen(self, vibe_colors):
        """Test fullscreen states fill the viewport."""
        classes = state_styles(vibe_colors).with_fullscreen().classes().split()
        assert {"min-h-screen", "justify-center"} <= set(classes)

    @pytest.mark.parametrize(
        "method,expected",
        [
            ("success", "text-green-500"),
            ("warning", "text-amber-500"),
            ("error", "text-red-500"),
            ("loading", "text-water-blue-500"),
            ("empty", "text-gray-600"),
        ],
    )
    def test_intent_colors(self, vibe_colors, method, expected):
        """Test every intent resolves its text color through the provider."""
        assert expected in getattr(state_styles(vibe_colors), method)().classes().split()

    def test_status_colors_follow_theme(self):
        """Test status intents follow an overridden palette."""
        colors = VibeColors.with_overrides(error="rose-700")
        assert "text-rose-700" in state_styles(colors).error().classes().split()

    @pytest.mark.parametrize(
        "method,expected",
        [
            ("spinner", "animate-spin"),
            ("dots", "animate-bounce"),
            ("pulse", "animate-pulse"),
            ("bars", "rounded-sm"),
            ("skeleton", "rounded"),
        ],
    )
    def test_loading_variants(self, vibe_colors, method, expected):
        """Test loading indicator classes."""
        assert expected in getattr(state_styles(vibe_colors), method)().classes().split()


class TestStateHints:
    """Tests for icon, action and size helpers."""

    @pytest.mark.parametrize(
        "intent,icon",
        [
            (StateIntent.INFORMATIONAL, "info"),
            (StateIntent.LOADING, "loader"),
            (StateIntent.SUCCESS, "check-circle"),
            (StateIntent.WARNING, "alert-triangle"),
            (StateIntent.ERROR, "alert-circle"),
            (StateIntent.EMPTY, "inbox"),
        ],
    )
    def test_suggested_icon(self, vibe_colors, intent, icon):
        """Test the icon for each intent."""
        assert StateStyles(vibe_colors, intent=intent).suggested_icon() == icon

    @pytest.mark.parametrize(
        "intent,action,text",
        [
            (StateIntent.ERROR, StateActionRequirement.RECOMMENDED, "Try Again"),
            (StateIntent.EMPTY, StateActionRequirement.OPTIONAL, "Refresh"),
            (StateIntent.EMPTY, StateActionRequirement.RECOMMENDED, "Add Item"),
            (StateIntent.WARNING, StateActionRequirement.REQUIRED, "Take Action"),
            (StateIntent.SUCCESS, StateActionRequirement.REQUIRED, None),
            (StateIntent.ERROR, StateActionRequirement.NONE, None),
        ],
    )
    def test_suggested_action_text(self, vibe_colors, intent, action, text):
        """Test action labels for intent and requirement pairs."""
        assert StateStyles(vibe_colors, intent=intent, action=action).suggested_action_text() == text

    def test_size_helpers(self, vibe_colors):
        """Test content, description and icon sizes follow the state size."""
        builder = state_styles(vibe_colors).lg()
        assert builder.content_size_classes() == "text-3xl"
        assert builder.description_size_classes() == "text-xl"
        assert builder.icon_size_classes() == "w-20 h-20"

    @pytest.mark.parametrize(
        "variant,size,expected",
        [
            (LoadingVariant.SPINNER, Size.XSMALL, "w-6 h-6"),
            (LoadingVariant.SPINNER, Size.XLARGE, "w-20 h-20"),
            (LoadingVariant.DOTS, Size.MEDIUM, "w-4 h-4"),
            (LoadingVariant.PULSE, Size.LARGE, "w-8 h-8"),
            (None, Size.MEDIUM, "w-8 h-8"),
        ],
    )
    def test_loading_size(self, vibe_colors, variant, size, expected):
        """Test loading indicator sizes."""
        builder = StateStyles(vibe_colors, loading_variant=variant, size=size)
        assert builder.loading_size_classes() == expected


class TestStatePresets:
    """Tests for the preset state builders."""

    def test_loading_preset(self, vibe_colors):
        """Test the loading preset shows a spinner without an action."""
        builder = loading_state_styles(vibe_colors)
        assert builder.intent is StateIntent.LOADING
        assert builder.loading_variant is LoadingVariant.SPINNER
        assert builder.suggested_action_text() is None

    def test_empty_preset(self, vibe_colors):
        """Test the empty preset suggests a refresh."""
        assert empty_state_styles(vibe_colors).suggested_action_text() == "Refresh"

    def test_error_preset(self, vibe_colors):
        """Test the error preset is prominent and suggests a retry."""
        builder = error_state_styles(vibe_colors)
        assert builder.suggested_action_text() == "Try Again"
        assert "text-red-500" in builder.classes().split()

    def test_success_preset(self, vibe_colors):
        """Test the success preset uses the success icon."""
        assert success_state_styles(vibe_colors).suggested_icon() == "check-circle"


class TestStateClassesFromStrings:
    """Tests for the one-shot string helper."""

    def test_aliases(self, vibe_colors):
        """Test info and warn aliases."""
        assert state_classes_from_strings(vibe_colors, "info", "standard", "md", "center") == (
            state_styles(vibe_colors).classes()
        )
        warn = state_classes_from_strings(vibe_colors, "warn", "standard", "md", "center").split()
        assert "text-amber-500" in warn

    def test_loading_variant(self, vibe_colors):
        """Test the optional loading variant."""
        classes = state_classes_from_strings(vibe_colors, "loading", "subtle", "sm", "left", "dots", True)
        assert {"animate-bounce", "min-h-screen", "items-start", "py-12"} <= set(classes.split())

    def test_unknown_loading_variant(self, vibe_colors):
        """Test an unknown loading variant means no indicator."""
        classes = state_classes_from_strings(vibe_colors, "loading", "standard", "md", "center", "swirl")
        assert "animate" not in classes
