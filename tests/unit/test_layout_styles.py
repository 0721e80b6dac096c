"""
Unit tests for the layout style builder.
"""

import pytest

from jupiter_design import Spacing, layout_styles
from jupiter_design.builders import card_content_styles, card_footer_styles, card_header_styles
from jupiter_design.core import DesignScale


class TestLayoutStyles:
    """Tests for layout options."""

    def test_default_padding(self, vibe_colors):
        """Test the default layout is medium padding only."""
        assert layout_styles(vibe_colors).classes() == "p-4"

    @pytest.mark.parametrize(
        "method,expected",
        [
            ("spacing_xs", "p-1"),
            ("spacing_sm", "p-2"),
            ("spacing_md", "p-4"),
            ("spacing_lg", "p-6"),
            ("spacing_xl", "p-8"),
            ("spacing_xl2", "p-12"),
        ],
    )
    def test_spacing(self, vibe_colors, method, expected):
        """Test spacing shorthands resolve through the scale."""
        assert getattr(layout_styles(vibe_colors), method)().classes() == expected

    def test_spacing_none(self, vibe_colors):
        """Test no spacing emits no padding class."""
        assert layout_styles(vibe_colors).spacing_none().classes() == ""

    @pytest.mark.parametrize("side", ["top", "bottom", "left", "right"])
    def test_dividers(self, vibe_colors, side):
        """Test dividers add a border side in the border color."""
        classes = getattr(layout_styles(vibe_colors), f"divider_{side}")().classes().split()
        assert f"border-{side[0]}" in classes
        assert "border-gray-200" in classes

    def test_direction_and_alignment(self, vibe_colors):
        """Test flex direction and alignment classes."""
        classes = layout_styles(vibe_colors).direction_vertical().alignment_end().classes().split()
        assert {"flex", "flex-col", "items-end", "justify-end"} <= set(classes)

    @pytest.mark.parametrize("method", ["between", "around", "evenly"])
    def test_distribution_alignment_centers_items(self, vibe_colors, method):
        """Test distribution alignments center items on the cross axis."""
        classes = getattr(layout_styles(vibe_colors), f"alignment_{method}")().classes().split()
        assert "items-center" in classes
        assert f"justify-{method}" in classes

    def test_gap(self, vibe_colors):
        """Test a gap token resolves through the scale."""
        assert "gap-6" in layout_styles(vibe_colors).with_gap(Spacing.LARGE).classes().split()

    def test_custom_scale(self, vibe_colors):
        """Test a custom scale changes the padding."""
        scale = DesignScale(spacing={s: "px" for s in Spacing})
        assert layout_styles(vibe_colors).with_scale(scale).classes() == "p-px"


class TestCardSectionPresets:
    """Tests for the card section presets."""

    def test_header(self, vibe_colors):
        """Test the header has a bottom divider and padding."""
        assert card_header_styles(vibe_colors).classes() == "border-b border-gray-200 p-4"

    def test_content(self, vibe_colors):
        """Test the content has padding and vertical rhythm."""
        assert card_content_styles(vibe_colors).classes() == "p-4 space-y-4"

    def test_footer(self, vibe_colors):
        """Test the footer is a spaced row with a top divider."""
        assert card_footer_styles(vibe_colors).classes() == (
            "border-t border-gray-200 p-4 flex flex-row items-center justify-between"
        )

    def test_presets_are_builders(self, vibe_colors):
        """Test presets can be refined further."""
        classes = card_footer_styles(vibe_colors).alignment_end().classes().split()
        assert "justify-end" in classes
        assert "justify-between" not in classes
