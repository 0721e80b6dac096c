"""
Semantic design tokens.

Every token is a closed ``StrEnum``. Values are stable identifiers: for
``Color`` the value is the name of the palette field that holds the
concrete color, so ``Color.TEXT_PRIMARY == "text_primary"``.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import TypeVar

from ..errors import TokenCoverageError

E = TypeVar("E", bound=StrEnum)
V = TypeVar("V")


class Color(StrEnum):
    """Semantic color tokens."""

    # Brand
    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"

    # Status
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"

    # Neutral
    SURFACE = "surface"
    BACKGROUND = "background"
    FOREGROUND = "foreground"
    BORDER = "border"

    # Text
    TEXT_PRIMARY = "text_primary"
    TEXT_SECONDARY = "text_secondary"
    TEXT_TERTIARY = "text_tertiary"
    TEXT_INVERSE = "text_inverse"

    # Interactive states
    INTERACTIVE = "interactive"
    INTERACTIVE_HOVER = "interactive_hover"
    INTERACTIVE_ACTIVE = "interactive_active"
    INTERACTIVE_DISABLED = "interactive_disabled"


class Size(StrEnum):
    """Component size tokens."""

    XSMALL = "xs"
    SMALL = "sm"
    MEDIUM = "md"
    LARGE = "lg"
    XLARGE = "xl"


class Spacing(StrEnum):
    """Spacing tokens, resolved to Tailwind spacing steps by a scale."""

    NONE = "none"
    XSMALL = "xs"
    SMALL = "sm"
    MEDIUM = "md"
    LARGE = "lg"
    XLARGE = "xl"
    XXLARGE = "2xl"


class Typography(StrEnum):
    """Typography role tokens."""

    HEADING1 = "h1"
    HEADING2 = "h2"
    HEADING3 = "h3"
    HEADING4 = "h4"
    HEADING5 = "h5"
    HEADING6 = "h6"
    BODY = "body"
    BODY_SMALL = "body-small"
    CAPTION = "caption"
    LABEL = "label"


class FontWeight(StrEnum):
    LIGHT = "light"
    NORMAL = "normal"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"


class FontFamily(StrEnum):
    SANS = "sans"
    SERIF = "serif"
    MONO = "mono"


class Breakpoint(StrEnum):
    """Responsive breakpoints."""

    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"
    LARGE = "large"


# Aliases accepted by the string helpers, shared by every builder with a Size.
SIZE_ALIASES: dict[str, Size] = {
    "xs": Size.XSMALL,
    "extra_small": Size.XSMALL,
    "sm": Size.SMALL,
    "small": Size.SMALL,
    "md": Size.MEDIUM,
    "medium": Size.MEDIUM,
    "lg": Size.LARGE,
    "large": Size.LARGE,
    "xl": Size.XLARGE,
    "extra_large": Size.XLARGE,
}


def require_complete(table: Mapping[E, V], enum_cls: type[E], name: str) -> Mapping[E, V]:
    """Check that ``table`` has an entry for every member of ``enum_cls``.

    Called at module import for every enum-keyed lookup table, so a token
    added without a matching entry fails on import instead of producing a
    silently missing class.

    Args:
        table: Lookup table keyed by enum members
        enum_cls: The enum the table must cover
        name: Table name used in the error message

    Returns:
        The table, unchanged

    Raises:
        TokenCoverageError: If any member is missing
    """
    missing = [member.name for member in enum_cls if member not in table]
    if missing:
        raise TokenCoverageError(
            f"{name} has no entry for {enum_cls.__name__} member(s): {', '.join(missing)}"
        )
    return table
