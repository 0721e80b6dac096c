"""
Color palettes and the color provider capability.

A color provider owns exactly one ``ColorPalette`` and resolves semantic
``Color`` tokens to the concrete Tailwind color names stored in it. The
``*_class`` helpers wrap a resolved value in a utility prefix::

    >>> colors = VibeColors()
    >>> colors.bg_class(Color.PRIMARY)
    'bg-water-blue-500'

Providers are immutable once constructed: they keep a private copy of their
palette and only ever hand out copies.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, ClassVar, Protocol, Self, assert_never, runtime_checkable

from pydantic import BaseModel, ConfigDict

from ..errors import TokenCoverageError, UnknownTokenError
from .tokens import Color


class ColorPalette(BaseModel):
    """Concrete color values, one field per ``Color`` token.

    Defaults are the Water & Wellness palette used by ``VibeColors``.
    """

    model_config = ConfigDict(extra="forbid")

    # Brand
    primary: str = "water-blue-500"
    secondary: str = "water-green-500"
    accent: str = "cyan-500"

    # Status
    success: str = "green-500"
    warning: str = "amber-500"
    error: str = "red-500"
    info: str = "blue-500"

    # Neutral
    surface: str = "white"
    background: str = "gray-50"
    foreground: str = "gray-900"
    border: str = "gray-200"

    # Text
    text_primary: str = "gray-900"
    text_secondary: str = "gray-600"
    text_tertiary: str = "gray-400"
    text_inverse: str = "white"

    # Interactive states
    interactive: str = "water-blue-500"
    interactive_hover: str = "water-blue-600"
    interactive_active: str = "water-blue-700"
    interactive_disabled: str = "gray-300"


def _check_palette_fields() -> None:
    """Fail on import if ``ColorPalette`` and ``Color`` have drifted apart."""
    fields = set(ColorPalette.model_fields)
    tokens = {member.value for member in Color}
    if fields != tokens:
        raise TokenCoverageError(
            "ColorPalette fields do not match Color tokens: "
            f"missing={sorted(tokens - fields)} extra={sorted(fields - tokens)}"
        )


_check_palette_fields()


@runtime_checkable
class ColorProvider(Protocol):
    """Anything that can resolve semantic colors into utility classes."""

    @property
    def palette(self) -> ColorPalette:
        """A copy of the palette in use."""
        ...

    def resolve_color(self, color: Color) -> str:
        """Resolve a semantic color to its concrete color name."""
        ...

    def text_class(self, color: Color) -> str: ...

    def bg_class(self, color: Color) -> str: ...

    def border_class(self, color: Color) -> str: ...

    def ring_class(self, color: Color) -> str: ...

    def hex_color(self, color: Color) -> str | None:
        """Hex value for non-CSS contexts, if the palette publishes one."""
        ...


class PaletteColors:
    """Color provider backed by a ``ColorPalette``.

    Subclasses pick a display ``name``, a ``default_palette`` and optionally
    a table of brand ``hex_values``.
    """

    name: ClassVar[str] = "Custom"
    hex_values: ClassVar[Mapping[Color, str]] = {}

    def __init__(self, palette: ColorPalette | None = None) -> None:
        source = palette if palette is not None else self.default_palette()
        self._palette = source.model_copy()

    @classmethod
    def default_palette(cls) -> ColorPalette:
        return ColorPalette()

    @classmethod
    def default(cls) -> Self:
        return cls()

    @classmethod
    def with_overrides(
        cls,
        mutator: Callable[[ColorPalette], Any] | None = None,
        /,
        **fields: str,
    ) -> Self:
        """Create a provider from this class's defaults with some fields replaced.

        Keyword overrides are applied first, then ``mutator`` is called with a
        private working copy of the palette. Fields that are not touched keep
        their default values. Values are not validated.

        Args:
            mutator: Optional callable that edits the palette in place
            **fields: Palette field overrides, e.g. ``primary="purple-600"``

        Returns:
            A new provider of the same class

        Raises:
            UnknownTokenError: If a keyword names a field the palette lacks

        Examples:
            >>> VibeColors.with_overrides(primary="purple-600").resolve_color(Color.PRIMARY)
            'purple-600'
        """
        unknown = sorted(set(fields) - set(ColorPalette.model_fields))
        if unknown:
            raise UnknownTokenError(f"Unknown palette field(s): {', '.join(unknown)}")
        palette = cls.default_palette().model_copy(update=fields)
        if mutator is not None:
            mutator(palette)
        return cls(palette)

    @property
    def palette(self) -> ColorPalette:
        return self._palette.model_copy()

    def resolve_color(self, color: Color) -> str:
        p = self._palette
        match color:
            case Color.PRIMARY:
                return p.primary
            case Color.SECONDARY:
                return p.secondary
            case Color.ACCENT:
                return p.accent
            case Color.SUCCESS:
                return p.success
            case Color.WARNING:
                return p.warning
            case Color.ERROR:
                return p.error
            case Color.INFO:
                return p.info
            case Color.SURFACE:
                return p.surface
            case Color.BACKGROUND:
                return p.background
            case Color.FOREGROUND:
                return p.foreground
            case Color.BORDER:
                return p.border
            case Color.TEXT_PRIMARY:
                return p.text_primary
            case Color.TEXT_SECONDARY:
                return p.text_secondary
            case Color.TEXT_TERTIARY:
                return p.text_tertiary
            case Color.TEXT_INVERSE:
                return p.text_inverse
            case Color.INTERACTIVE:
                return p.interactive
            case Color.INTERACTIVE_HOVER:
                return p.interactive_hover
            case Color.INTERACTIVE_ACTIVE:
                return p.interactive_active
            case Color.INTERACTIVE_DISABLED:
                return p.interactive_disabled
            case _:
                assert_never(color)

    def text_class(self, color: Color) -> str:
        return f"text-{self.resolve_color(color)}"

    def bg_class(self, color: Color) -> str:
        return f"bg-{self.resolve_color(color)}"

    def border_class(self, color: Color) -> str:
        return f"border-{self.resolve_color(color)}"

    def ring_class(self, color: Color) -> str:
        return f"ring-{self.resolve_color(color)}"

    def hex_color(self, color: Color) -> str | None:
        """Brand hex value for ``color``, or None when the palette overrides it."""
        if getattr(self._palette, color.value) != getattr(self.default_palette(), color.value):
            return None
        return self.hex_values.get(color)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PaletteColors):
            return NotImplemented
        return type(self) is type(other) and self._palette == other._palette

    def __hash__(self) -> int:
        return hash((type(self), tuple(self._palette.model_dump().items())))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(primary={self._palette.primary!r})"


class VibeColors(PaletteColors):
    """Default Water & Wellness color provider."""

    name = "Water & Wellness"
