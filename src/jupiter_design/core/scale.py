"""
Spacing, typography and sizing scales.

A ``DesignScale`` maps the non-color tokens onto Tailwind scale steps. The
default scale follows Tailwind's stock spacing and type ramps; a custom
scale can be built by passing replacement tables. Tables are copied into
read-only mappings on construction.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .tokens import Breakpoint, FontFamily, FontWeight, Size, Spacing, Typography, require_complete

DEFAULT_SPACING: Mapping[Spacing, str] = MappingProxyType(
    {
        Spacing.NONE: "0",
        Spacing.XSMALL: "1",
        Spacing.SMALL: "2",
        Spacing.MEDIUM: "4",
        Spacing.LARGE: "6",
        Spacing.XLARGE: "8",
        Spacing.XXLARGE: "12",
    }
)

DEFAULT_TYPOGRAPHY: Mapping[Typography, str] = MappingProxyType(
    {
        Typography.HEADING1: "4xl",
        Typography.HEADING2: "3xl",
        Typography.HEADING3: "2xl",
        Typography.HEADING4: "xl",
        Typography.HEADING5: "lg",
        Typography.HEADING6: "base",
        Typography.BODY: "base",
        Typography.BODY_SMALL: "sm",
        Typography.CAPTION: "sm",
        Typography.LABEL: "xs",
    }
)

DEFAULT_SIZES: Mapping[Size, str] = MappingProxyType(
    {
        Size.XSMALL: "4",
        Size.SMALL: "6",
        Size.MEDIUM: "8",
        Size.LARGE: "12",
        Size.XLARGE: "16",
    }
)

# Tailwind responsive prefixes; mobile is the unprefixed base.
BREAKPOINT_PREFIXES: Mapping[Breakpoint, str] = MappingProxyType(
    {
        Breakpoint.MOBILE: "",
        Breakpoint.TABLET: "md:",
        Breakpoint.DESKTOP: "lg:",
        Breakpoint.LARGE: "xl:",
    }
)

require_complete(DEFAULT_SPACING, Spacing, "DEFAULT_SPACING")
require_complete(DEFAULT_TYPOGRAPHY, Typography, "DEFAULT_TYPOGRAPHY")
require_complete(DEFAULT_SIZES, Size, "DEFAULT_SIZES")
require_complete(BREAKPOINT_PREFIXES, Breakpoint, "BREAKPOINT_PREFIXES")


@dataclass(frozen=True)
class DesignScale:
    """Resolves spacing, typography and size tokens to utility classes."""

    spacing: Mapping[Spacing, str] = field(default_factory=lambda: DEFAULT_SPACING)
    typography: Mapping[Typography, str] = field(default_factory=lambda: DEFAULT_TYPOGRAPHY)
    sizes: Mapping[Size, str] = field(default_factory=lambda: DEFAULT_SIZES)

    def __post_init__(self) -> None:
        object.__setattr__(self, "spacing", MappingProxyType(dict(self.spacing)))
        object.__setattr__(self, "typography", MappingProxyType(dict(self.typography)))
        object.__setattr__(self, "sizes", MappingProxyType(dict(self.sizes)))
        require_complete(self.spacing, Spacing, "DesignScale.spacing")
        require_complete(self.typography, Typography, "DesignScale.typography")
        require_complete(self.sizes, Size, "DesignScale.sizes")

    def resolve_spacing(self, spacing: Spacing) -> str:
        return self.spacing[spacing]

    def padding_class(self, spacing: Spacing) -> str:
        return f"p-{self.resolve_spacing(spacing)}"

    def margin_class(self, spacing: Spacing) -> str:
        return f"m-{self.resolve_spacing(spacing)}"

    def gap_class(self, spacing: Spacing) -> str:
        return f"gap-{self.resolve_spacing(spacing)}"

    def resolve_typography(self, typography: Typography) -> str:
        return self.typography[typography]

    def typography_class(self, typography: Typography) -> str:
        return f"text-{self.resolve_typography(typography)}"

    def font_weight_class(self, weight: FontWeight) -> str:
        return f"font-{weight.value}"

    def font_family_class(self, family: FontFamily) -> str:
        return f"font-{family.value}"

    def resolve_size(self, size: Size) -> str:
        return self.sizes[size]

    def width_class(self, size: Size) -> str:
        return f"w-{self.resolve_size(size)}"

    def height_class(self, size: Size) -> str:
        return f"h-{self.resolve_size(size)}"

    def responsive(self, breakpoint: Breakpoint, utility: str) -> str:
        """Scope a utility class to a breakpoint, e.g. ``md:flex-row``."""
        return f"{BREAKPOINT_PREFIXES[breakpoint]}{utility}"


DEFAULT_SCALE = DesignScale()
