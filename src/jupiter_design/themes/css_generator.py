"""
CSS generator for Jupiter themes.

Generates CSS custom properties from a provider's brand hex values, for
stylesheets and non-Tailwind contexts that need the raw colors.
"""

from __future__ import annotations

from ..core.color import ColorProvider
from ..core.tokens import Color


def generate_palette_css(colors: ColorProvider, prefix: str = "jds") -> str:
    """
    Generate a ``:root`` block of CSS custom properties.

    Only tokens with a published hex value are emitted. Token names use
    dashes, so ``Color.TEXT_PRIMARY`` becomes ``--jds-text-primary``.

    Args:
        colors: Color provider to read hex values from
        prefix: Custom property namespace

    Returns:
        CSS string with a header comment and one :root block
    """
    name = getattr(colors, "name", type(colors).__name__)
    lines: list[str] = []

    lines.append(f"/* Jupiter Theme: {name} */")
    lines.append("/* Auto-generated - do not edit */")
    lines.append("")

    lines.append(":root {")
    lines.extend(_generate_color_lines(colors, prefix, indent=2))
    lines.append("}")
    lines.append("")

    return "\n".join(lines)


def _generate_color_lines(colors: ColorProvider, prefix: str, indent: int = 0) -> list[str]:
    """Generate one custom property line per hex-mapped color token."""
    lines: list[str] = []
    pad = " " * indent

    for color in Color:
        value = colors.hex_color(color)
        if value is None:
            continue
        lines.append(f"{pad}--{prefix}-{_css_name(color)}: {value};")

    return lines


def _css_name(color: Color) -> str:
    return color.value.replace("_", "-")
