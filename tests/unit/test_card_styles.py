"""
Unit tests for the card style builder.
"""

import pytest

from jupiter_design import card_styles
from jupiter_design.builders import (
    CardElevation,
    CardInteraction,
    CardSpacing,
    CardStyles,
    CardSurface,
    card_classes_from_strings,
)


class TestCardDefaults:
    """Tests for the default card."""

    def test_default_classes(self, vibe_colors):
        """Test a default card is a subtle standard card."""
        assert card_styles(vibe_colors).classes() == (
            "rounded-lg border transition-all duration-300 shadow-sm "
            "bg-white text-gray-900 border-gray-200 p-5"
        )


class TestCardOptions:
    """Tests for elevation, surface, spacing and interaction."""

    @pytest.mark.parametrize(
        "method,expected",
        [
            ("flat_elevation", "shadow-none"),
            ("subtle_elevation", "shadow-sm"),
            ("raised_elevation", "shadow-md"),
            ("floating_elevation", "shadow-lg"),
            ("modal_elevation", "shadow-2xl"),
        ],
    )
    def test_elevation(self, vibe_colors, method, expected):
        """Test elevation shorthands."""
        assert expected in getattr(card_styles(vibe_colors), method)().classes().split()

    @pytest.mark.parametrize(
        "method,expected",
        [
            ("no_spacing", "p-0"),
            ("compact_spacing", "p-3"),
            ("standard_spacing", "p-5"),
            ("comfortable_spacing", "p-6"),
            ("spacious_spacing", "p-8"),
        ],
    )
    def test_spacing(self, vibe_colors, method, expected):
        """Test spacing shorthands."""
        assert expected in getattr(card_styles(vibe_colors), method)().classes().split()

    def test_elevated_surface_uses_background(self, vibe_colors):
        """Test the elevated surface resolves the background color."""
        classes = card_styles(vibe_colors).elevated_surface().classes().split()
        assert "bg-gray-50" in classes

    @pytest.mark.parametrize(
        "method,expected",
        [
            ("glass_surface", "backdrop-blur-md"),
            ("dark_surface", "bg-gray-900"),
            ("transparent_surface", "border-transparent"),
            ("branded_surface", "bg-gradient-to-br"),
        ],
    )
    def test_fixed_surfaces(self, vibe_colors, method, expected):
        """Test surfaces with fixed classes."""
        assert expected in getattr(card_styles(vibe_colors), method)().classes().split()

    def test_surface_follows_theme(self, llasi_colors):
        """Test the standard surface resolves through the provider."""
        classes = card_styles(llasi_colors).classes().split()
        assert "text-slate-900" in classes
        assert "border-slate-200" in classes

    def test_clickable_interaction(self, vibe_colors):
        """Test clickable cards get pointer and focus ring classes."""
        classes = card_styles(vibe_colors).clickable_interaction().classes().split()
        assert "cursor-pointer" in classes
        assert "focus:ring-2" in classes
        assert "active:scale-95" in classes

    def test_draggable_interaction(self, vibe_colors):
        """Test draggable cards get a move cursor."""
        classes = card_styles(vibe_colors).draggable_interaction().classes().split()
        assert "cursor-move" in classes


class TestCardHoverElevation:
    """Tests for the extra hover shadow step."""

    @pytest.mark.parametrize(
        "elevation,expected",
        [
            (CardElevation.SUBTLE, "hover:shadow-md"),
            (CardElevation.RAISED, "hover:shadow-lg"),
            (CardElevation.FLOATING, "hover:shadow-xl"),
        ],
    )
    @pytest.mark.parametrize("interaction", [CardInteraction.HOVERABLE, CardInteraction.CLICKABLE])
    def test_hover_step(self, vibe_colors, elevation, interaction, expected):
        """Test hoverable and clickable cards lift one shadow step."""
        builder = CardStyles(vibe_colors, elevation=elevation, interaction=interaction)
        assert expected in builder.classes().split()

    def test_static_card_has_no_hover_shadow(self, vibe_colors):
        """Test static cards do not lift."""
        classes = card_styles(vibe_colors).raised_elevation().classes()
        assert "hover:shadow" not in classes

    def test_modal_has_no_hover_step(self, vibe_colors):
        """Test modal cards keep their shadow on hover."""
        classes = card_styles(vibe_colors).modal_elevation().clickable_interaction().classes()
        assert "hover:shadow" not in classes


class TestCardSelection:
    """Tests for the selected state."""

    def test_selected_ring(self, vibe_colors):
        """Test selected cards get a primary ring."""
        classes = card_styles(vibe_colors).with_selected().classes().split()
        assert {"ring-2", "ring-offset-2", "ring-water-blue-500"} <= set(classes)

    def test_selected_ring_follows_override(self, purple_colors):
        """Test the ring color follows the overridden primary."""
        classes = card_styles(purple_colors).with_selected().classes().split()
        assert "ring-purple-600" in classes

    def test_unselected(self, vibe_colors):
        """Test with_selected(False) removes the ring."""
        classes = card_styles(vibe_colors).with_selected().with_selected(False).classes().split()
        assert "ring-2" not in classes


class TestCardClassesFromStrings:
    """Tests for the one-shot string helper."""

    def test_aliases(self, vibe_colors):
        """Test string aliases map onto the same builder."""
        expected = CardStyles(
            vibe_colors,
            surface=CardSurface.ELEVATED,
            elevation=CardElevation.RAISED,
            spacing=CardSpacing.COMFORTABLE,
            interaction=CardInteraction.CLICKABLE,
        ).classes()
        assert card_classes_from_strings(vibe_colors, "elevated", "standard", "lg", "click") == expected

    def test_fallbacks(self, vibe_colors):
        """Test unknown strings fall back to the defaults."""
        assert card_classes_from_strings(vibe_colors, "x", "y", "z", "w") == card_styles(vibe_colors).classes()

    def test_selected(self, vibe_colors):
        """Test the selected flag."""
        classes = card_classes_from_strings(vibe_colors, "white", "low", "md", "none", selected=True)
        assert "ring-offset-2" in classes.split()
