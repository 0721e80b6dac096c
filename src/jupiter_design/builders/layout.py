"""
Layout styling builder for card sections and flex containers.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Self

from ..core.color import ColorProvider
from ..core.scale import DEFAULT_SCALE, DesignScale
from ..core.tokens import Color, Spacing, require_complete
from .classes import StyleBuilder


class LayoutDivider(StrEnum):
    NONE = "none"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class LayoutDirection(StrEnum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class LayoutAlignment(StrEnum):
    START = "start"
    CENTER = "center"
    END = "end"
    BETWEEN = "between"
    AROUND = "around"
    EVENLY = "evenly"


_DIVIDER_SIDES: Mapping[LayoutDivider, str] = require_complete(
    {
        LayoutDivider.NONE: "",
        LayoutDivider.TOP: "border-t",
        LayoutDivider.BOTTOM: "border-b",
        LayoutDivider.LEFT: "border-l",
        LayoutDivider.RIGHT: "border-r",
    },
    LayoutDivider,
    "layout divider classes",
)

_DIRECTION_CLASSES: Mapping[LayoutDirection, str] = require_complete(
    {
        LayoutDirection.VERTICAL: "flex flex-col",
        LayoutDirection.HORIZONTAL: "flex flex-row",
    },
    LayoutDirection,
    "layout direction classes",
)

_ALIGNMENT_CLASSES: Mapping[LayoutAlignment, str] = require_complete(
    {
        LayoutAlignment.START: "items-start justify-start",
        LayoutAlignment.CENTER: "items-center justify-center",
        LayoutAlignment.END: "items-end justify-end",
        LayoutAlignment.BETWEEN: "items-center justify-between",
        LayoutAlignment.AROUND: "items-center justify-around",
        LayoutAlignment.EVENLY: "items-center justify-evenly",
    },
    LayoutAlignment,
    "layout alignment classes",
)


@dataclass(frozen=True, kw_only=True)
class LayoutStyles(StyleBuilder):
    """Chainable layout class builder.

    Padding and gap come from ``scale``; ``Spacing.NONE`` emits no padding.
    """

    divider: LayoutDivider = LayoutDivider.NONE
    spacing: Spacing = Spacing.MEDIUM
    direction: LayoutDirection | None = None
    alignment: LayoutAlignment | None = None
    gap: Spacing | None = None
    scale: DesignScale = DEFAULT_SCALE

    def with_divider(self, divider: LayoutDivider) -> Self:
        return replace(self, divider=divider)

    def divider_none(self) -> Self:
        return self.with_divider(LayoutDivider.NONE)

    def divider_top(self) -> Self:
        return self.with_divider(LayoutDivider.TOP)

    def divider_bottom(self) -> Self:
        return self.with_divider(LayoutDivider.BOTTOM)

    def divider_left(self) -> Self:
        return self.with_divider(LayoutDivider.LEFT)

    def divider_right(self) -> Self:
        return self.with_divider(LayoutDivider.RIGHT)

    def with_spacing(self, spacing: Spacing) -> Self:
        return replace(self, spacing=spacing)

    def spacing_none(self) -> Self:
        return self.with_spacing(Spacing.NONE)

    def spacing_xs(self) -> Self:
        return self.with_spacing(Spacing.XSMALL)

    def spacing_sm(self) -> Self:
        return self.with_spacing(Spacing.SMALL)

    def spacing_md(self) -> Self:
        return self.with_spacing(Spacing.MEDIUM)

    def spacing_lg(self) -> Self:
        return self.with_spacing(Spacing.LARGE)

    def spacing_xl(self) -> Self:
        return self.with_spacing(Spacing.XLARGE)

    def spacing_xl2(self) -> Self:
        return self.with_spacing(Spacing.XXLARGE)

    def with_direction(self, direction: LayoutDirection | None) -> Self:
        return replace(self, direction=direction)

    def direction_vertical(self) -> Self:
        return self.with_direction(LayoutDirection.VERTICAL)

    def direction_horizontal(self) -> Self:
        return self.with_direction(LayoutDirection.HORIZONTAL)

    def with_alignment(self, alignment: LayoutAlignment | None) -> Self:
        return replace(self, alignment=alignment)

    def alignment_start(self) -> Self:
        return self.with_alignment(LayoutAlignment.START)

    def alignment_center(self) -> Self:
        return self.with_alignment(LayoutAlignment.CENTER)

    def alignment_end(self) -> Self:
        return self.with_alignment(LayoutAlignment.END)

    def alignment_between(self) -> Self:
        return self.with_alignment(LayoutAlignment.BETWEEN)

    def alignment_around(self) -> Self:
        return self.with_alignment(LayoutAlignment.AROUND)

    def alignment_evenly(self) -> Self:
        return self.with_alignment(LayoutAlignment.EVENLY)

    def with_gap(self, gap: Spacing | None) -> Self:
        return replace(self, gap=gap)

    def with_scale(self, scale: DesignScale) -> Self:
        return replace(self, scale=scale)

    def _fragments(self) -> Iterator[str]:
        side = _DIVIDER_SIDES[self.divider]
        if side:
            yield side
            yield self.colors.border_class(Color.BORDER)
        if self.spacing is not Spacing.NONE:
            yield self.scale.padding_class(self.spacing)
        if self.direction is not None:
            yield _DIRECTION_CLASSES[self.direction]
        if self.alignment is not None:
            yield _ALIGNMENT_CLASSES[self.alignment]
        if self.gap is not None:
            yield self.scale.gap_class(self.gap)


def layout_styles(colors: ColorProvider) -> LayoutStyles:
    """Create a layout builder with default settings."""
    return LayoutStyles(colors)


def card_header_styles(colors: ColorProvider) -> LayoutStyles:
    """Card header: bottom divider, medium padding."""
    return LayoutStyles(colors).divider_bottom().spacing_md()


def card_content_styles(colors: ColorProvider) -> LayoutStyles:
    """Card body: medium padding with vertical rhythm between children."""
    return LayoutStyles(colors).spacing_md().custom("space-y-4")


def card_footer_styles(colors: ColorProvider) -> LayoutStyles:
    """Card footer: top divider, horizontal row spread across the width."""
    return LayoutStyles(colors).divider_top().spacing_md().direction_horizontal().alignment_between()
