"""
Text styling builder.

Typography classes are derived from a semantic hierarchy. Size and weight
overrides replace the hierarchy's defaults; the ``AUTO`` color picks a text
color appropriate to the hierarchy.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import NamedTuple, Self

from ..core.color import ColorProvider
from ..core.tokens import Color, Typography, require_complete
from .classes import StyleBuilder, lookup_alias


class TextHierarchy(StrEnum):
    TITLE = "title"
    HEADING = "heading"
    SUBHEADING = "subheading"
    H4 = "h4"
    BODY = "body"
    BODY_LARGE = "body-large"
    BODY_SMALL = "body-small"
    CAPTION = "caption"
    OVERLINE = "overline"
    CODE = "code"


class TextSize(StrEnum):
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"
    XL3 = "3xl"
    XL4 = "4xl"


class TextWeight(StrEnum):
    LIGHT = "light"
    NORMAL = "normal"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    EXTRABOLD = "extrabold"


class TextColor(StrEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"
    MUTED = "muted"
    DISABLED = "disabled"
    WHITE = "white"
    BLACK = "black"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"
    AUTO = "auto"


class TextAlignment(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class TextOverflow(StrEnum):
    NORMAL = "normal"
    TRUNCATE = "truncate"
    CLAMP = "clamp"


class _HierarchyStyle(NamedTuple):
    base: str
    size: TextSize
    weight: TextWeight | None
    auto_color: Color
    element: str


_HIERARCHY: Mapping[TextHierarchy, _HierarchyStyle] = require_complete(
    {
        TextHierarchy.TITLE: _HierarchyStyle(
            "tracking-tight", TextSize.XL4, TextWeight.BOLD, Color.TEXT_PRIMARY, "h1"
        ),
        TextHierarchy.HEADING: _HierarchyStyle(
            "tracking-tight", TextSize.XL3, TextWeight.BOLD, Color.TEXT_PRIMARY, "h2"
        ),
        TextHierarchy.SUBHEADING: _HierarchyStyle(
            "tracking-tight", TextSize.XL2, TextWeight.BOLD, Color.TEXT_PRIMARY, "h3"
        ),
        TextHierarchy.H4: _HierarchyStyle(
            "tracking-tight", TextSize.XL, TextWeight.BOLD, Color.TEXT_PRIMARY, "h4"
        ),
        TextHierarchy.BODY: _HierarchyStyle(
            "", TextSize.MD, TextWeight.NORMAL, Color.TEXT_PRIMARY, "p"
        ),
        TextHierarchy.BODY_LARGE: _HierarchyStyle(
            "", TextSize.LG, TextWeight.NORMAL, Color.TEXT_PRIMARY, "p"
        ),
        TextHierarchy.BODY_SMALL: _HierarchyStyle(
            "", TextSize.SM, TextWeight.NORMAL, Color.TEXT_PRIMARY, "p"
        ),
        TextHierarchy.CAPTION: _HierarchyStyle(
            "", TextSize.SM, TextWeight.MEDIUM, Color.TEXT_SECONDARY, "span"
        ),
        TextHierarchy.OVERLINE: _HierarchyStyle(
            "uppercase tracking-wider", TextSize.XS, TextWeight.MEDIUM, Color.TEXT_TERTIARY, "span"
        ),
        # Code keeps the inherited weight
        TextHierarchy.CODE: _HierarchyStyle(
            "font-mono bg-gray-100 px-1 py-0.5 rounded", TextSize.SM, None, Color.TEXT_PRIMARY, "code"
        ),
    },
    TextHierarchy,
    "text hierarchy styles",
)

_SIZE_CLASSES: Mapping[TextSize, str] = require_complete(
    {
        TextSize.XS: "text-xs",
        TextSize.SM: "text-sm",
        TextSize.MD: "text-base",
        TextSize.LG: "text-lg",
        TextSize.XL: "text-xl",
        TextSize.XL2: "text-2xl",
        TextSize.XL3: "text-3xl",
        TextSize.XL4: "text-4xl",
    },
    TextSize,
    "text size classes",
)

_WEIGHT_CLASSES: Mapping[TextWeight, str] = require_complete(
    {weight: f"font-{weight.value}" for weight in TextWeight},
    TextWeight,
    "text weight classes",
)

_COLOR_TOKENS: Mapping[TextColor, Color | None] = require_complete(
    {
        TextColor.PRIMARY: Color.PRIMARY,
        TextColor.SECONDARY: Color.SECONDARY,
        TextColor.ACCENT: Color.ACCENT,
        TextColor.MUTED: Color.TEXT_SECONDARY,
        TextColor.DISABLED: Color.INTERACTIVE_DISABLED,
        TextColor.WHITE: Color.TEXT_INVERSE,
        TextColor.BLACK: Color.FOREGROUND,
        TextColor.SUCCESS: Color.SUCCESS,
        TextColor.WARNING: Color.WARNING,
        TextColor.ERROR: Color.ERROR,
        TextColor.INFO: Color.INFO,
        TextColor.AUTO: None,
    },
    TextColor,
    "text color tokens",
)

_ALIGNMENT_CLASSES: Mapping[TextAlignment, str] = require_complete(
    {alignment: f"text-{alignment.value}" for alignment in TextAlignment},
    TextAlignment,
    "text alignment classes",
)

# Core typography tokens onto a hierarchy plus an optional size override
_TYPOGRAPHY: Mapping[Typography, tuple[TextHierarchy, TextSize | None]] = require_complete(
    {
        Typography.HEADING1: (TextHierarchy.TITLE, None),
        Typography.HEADING2: (TextHierarchy.HEADING, None),
        Typography.HEADING3: (TextHierarchy.SUBHEADING, None),
        Typography.HEADING4: (TextHierarchy.H4, None),
        Typography.HEADING5: (TextHierarchy.H4, TextSize.LG),
        Typography.HEADING6: (TextHierarchy.H4, TextSize.MD),
        Typography.BODY: (TextHierarchy.BODY, None),
        Typography.BODY_SMALL: (TextHierarchy.BODY_SMALL, None),
        Typography.CAPTION: (TextHierarchy.CAPTION, None),
        Typography.LABEL: (TextHierarchy.OVERLINE, None),
    },
    Typography,
    "typography hierarchy mapping",
)

HIERARCHY_ALIASES: dict[str, TextHierarchy] = {h.value: h for h in TextHierarchy}
SIZE_ALIASES: dict[str, TextSize] = {s.value: s for s in TextSize}
WEIGHT_ALIASES: dict[str, TextWeight] = {w.value: w for w in TextWeight}
COLOR_ALIASES: dict[str, TextColor] = {c.value: c for c in TextColor}
ALIGNMENT_ALIASES: dict[str, TextAlignment] = {a.value: a for a in TextAlignment}


@dataclass(frozen=True, kw_only=True)
class TextStyles(StyleBuilder):
    """Chainable typography class builder.

    Defaults to body text with an automatic color and no overrides.
    """

    hierarchy: TextHierarchy = TextHierarchy.BODY
    size: TextSize | None = None
    weight: TextWeight | None = None
    color: TextColor = TextColor.AUTO
    alignment: TextAlignment | None = None
    overflow: TextOverflow = TextOverflow.NORMAL
    clamp_lines: int = 0

    # Hierarchy

    def with_hierarchy(self, hierarchy: TextHierarchy) -> Self:
        return replace(self, hierarchy=hierarchy)

    def typography(self, token: Typography) -> Self:
        """Apply a core typography token."""
        hierarchy, size = _TYPOGRAPHY[token]
        return replace(self, hierarchy=hierarchy, size=size)

    def title(self) -> Self:
        return self.with_hierarchy(TextHierarchy.TITLE)

    def heading(self) -> Self:
        return self.with_hierarchy(TextHierarchy.HEADING)

    def subheading(self) -> Self:
        return self.with_hierarchy(TextHierarchy.SUBHEADING)

    def h4(self) -> Self:
        return self.with_hierarchy(TextHierarchy.H4)

    def body(self) -> Self:
        return self.with_hierarchy(TextHierarchy.BODY)

    def body_large(self) -> Self:
        return self.with_hierarchy(TextHierarchy.BODY_LARGE)

    def body_small(self) -> Self:
        return self.with_hierarchy(TextHierarchy.BODY_SMALL)

    def caption(self) -> Self:
        return self.with_hierarchy(TextHierarchy.CAPTION)

    def overline(self) -> Self:
        return self.with_hierarchy(TextHierarchy.OVERLINE)

    def code(self) -> Self:
        return self.with_hierarchy(TextHierarchy.CODE)

    # Size and weight

    def with_size(self, size: TextSize | None) -> Self:
        return replace(self, size=size)

    def extra_small(self) -> Self:
        return self.with_size(TextSize.XS)

    def small(self) -> Self:
        return self.with_size(TextSize.SM)

    def medium(self) -> Self:
        return self.with_size(TextSize.MD)

    def large(self) -> Self:
        return self.with_size(TextSize.LG)

    def extra_large(self) -> Self:
        return self.with_size(TextSize.XL)

    def with_weight(self, weight: TextWeight | None) -> Self:
        return replace(self, weight=weight)

    def light(self) -> Self:
        return self.with_weight(TextWeight.LIGHT)

    def normal(self) -> Self:
        return self.with_weight(TextWeight.NORMAL)

    def medium_weight(self) -> Self:
        return self.with_weight(TextWeight.MEDIUM)

    def semibold(self) -> Self:
        return self.with_weight(TextWeight.SEMIBOLD)

    def bold(self) -> Self:
        return self.with_weight(TextWeight.BOLD)

    def extrabold(self) -> Self:
        return self.with_weight(TextWeight.EXTRABOLD)

    # Color

    def with_color(self, color: TextColor) -> Self:
        return replace(self, color=color)

    def primary(self) -> Self:
        return self.with_color(TextColor.PRIMARY)

    def secondary(self) -> Self:
        return self.with_color(TextColor.SECONDARY)

    def accent(self) -> Self:
        return self.with_color(TextColor.ACCENT)

    def muted(self) -> Self:
        return self.with_color(TextColor.MUTED)

    def disabled(self) -> Self:
        return self.with_color(TextColor.DISABLED)

    def white(self) -> Self:
        return self.with_color(TextColor.WHITE)

    def black(self) -> Self:
        return self.with_color(TextColor.BLACK)

    def success(self) -> Self:
        return self.with_color(TextColor.SUCCESS)

    def warning(self) -> Self:
        return self.with_color(TextColor.WARNING)

    def error(self) -> Self:
        return self.with_color(TextColor.ERROR)

    def info(self) -> Self:
        return self.with_color(TextColor.INFO)

    # Alignment and overflow

    def with_alignment(self, alignment: TextAlignment | None) -> Self:
        return replace(self, alignment=alignment)

    def left(self) -> Self:
        return self.with_alignment(TextAlignment.LEFT)

    def center(self) -> Self:
        return self.with_alignment(TextAlignment.CENTER)

    def right(self) -> Self:
        return self.with_alignment(TextAlignment.RIGHT)

    def justify(self) -> Self:
        return self.with_alignment(TextAlignment.JUSTIFY)

    def truncate(self) -> Self:
        return replace(self, overflow=TextOverflow.TRUNCATE, clamp_lines=0)

    def clamp(self, lines: int) -> Self:
        """Clamp to ``lines`` lines. Applied through ``clamp_style()``, not a class."""
        return replace(self, overflow=TextOverflow.CLAMP, clamp_lines=lines)

    def element(self) -> str:
        """Semantic HTML tag for the current hierarchy."""
        return _HIERARCHY[self.hierarchy].element

    def clamp_style(self) -> str:
        """Inline CSS for line clamping, or an empty string when not clamped."""
        if self.overflow is not TextOverflow.CLAMP:
            return ""
        return (
            f"display: -webkit-box; -webkit-line-clamp: {self.clamp_lines}; "
            "-webkit-box-orient: vertical; overflow: hidden;"
        )

    def _fragments(self) -> Iterator[str]:
        style = _HIERARCHY[self.hierarchy]
        yield "leading-relaxed"
        yield style.base
        yield _SIZE_CLASSES[self.size or style.size]

        weight = self.weight or style.weight
        if weight is not None:
            yield _WEIGHT_CLASSES[weight]

        token = _COLOR_TOKENS[self.color] or style.auto_color
        yield self.colors.text_class(token)

        if self.alignment is not None:
            yield _ALIGNMENT_CLASSES[self.alignment]
        if self.overflow is TextOverflow.TRUNCATE:
            yield "truncate"


def text_styles(colors: ColorProvider) -> TextStyles:
    """Create a text builder with default settings."""
    return TextStyles(colors)


def text_classes_from_strings(
    colors: ColorProvider,
    hierarchy: str,
    size: str | None = None,
    weight: str | None = None,
    color: str | None = None,
    alignment: str | None = None,
    truncate: bool = False,
    clamp_lines: int | None = None,
    custom_classes: str | None = None,
) -> str:
    """
    Build text classes from string props in one call.

    An unknown hierarchy falls back to body; unknown optional props leave the
    hierarchy defaults in place.
    """
    builder = TextStyles(
        colors,
        hierarchy=lookup_alias(HIERARCHY_ALIASES, hierarchy, TextHierarchy.BODY, "text hierarchy"),
    )
    if size is not None:
        builder = builder.with_size(lookup_alias(SIZE_ALIASES, size, None, "text size"))
    if weight is not None:
        builder = builder.with_weight(lookup_alias(WEIGHT_ALIASES, weight, None, "text weight"))
    if color is not None:
        builder = builder.with_color(lookup_alias(COLOR_ALIASES, color, TextColor.AUTO, "text color"))
    if alignment is not None:
        builder = builder.with_alignment(
            lookup_alias(ALIGNMENT_ALIASES, alignment, None, "text alignment")
        )
    if truncate:
        builder = builder.truncate()
    if clamp_lines is not None:
        builder = builder.clamp(clamp_lines)
    if custom_classes:
        builder = builder.custom_classes(custom_classes)
    return builder.classes()


def text_element_from_hierarchy(hierarchy: str) -> str:
    """HTML tag for a hierarchy name; unknown names map to ``p``."""
    found = HIERARCHY_ALIASES.get(hierarchy.strip().lower())
    return _HIERARCHY[found].element if found else "p"
