# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
CSS string serializer.

Renders a Color as ``#rrggbb``, ``rgba(R, G, B, A)`` or
``hsla(H, S%, L%, A)``. ``to_css_string`` picks the notation from whatever
representation the color already has, so printing a color never triggers a
conversion it does not need.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tinct.convert.colorspace import round_half_up
from tinct.runtime.serializers.base import CSSFormat, format_number

if TYPE_CHECKING:
    from tinct.color import Color


# Decimal places kept for HSL degrees and percentages
HSLA_PRECISION = 4


def to_css_hex(color: Color) -> str:
    """``#1177aa``"""
    return "#" + color.hex


def to_css_rgba(color: Color) -> str:
    """``rgba(17, 119, 170, 1)``"""
    rgb = color.rgb
    channels = ", ".join(format_number(v) for v in (rgb.r, rgb.g, rgb.b))
    return f"rgba({channels}, {format_number(color.alpha)})"


def to_css_hsla(color: Color) -> str:
    """
    ``hsla(200, 81.8182%, 36.6667%, 1)``

    Hue is rendered in degrees; saturation and lightness as percentages.
    All three are rounded half-up to four decimal places.
    """
    hsl = color.hsl
    h = round_half_up(hsl.h * 360, HSLA_PRECISION)
    s = round_half_up(hsl.s * 100, HSLA_PRECISION)
    l = round_half_up(hsl.l * 100, HSLA_PRECISION)

    return (
        f"hsla({format_number(h)}, {format_number(s)}%, "
        f"{format_number(l)}%, {format_number(color.alpha)})"
    )


def to_css_string(color: Color) -> str:
    """
    Render using the representation the color already holds.

    Priority: HSL → ``hsla()``, RGB → ``rgba()``, hex → ``#hex``. If none of
    those is known yet (a YUV-backed color), HSL is computed.
    """
    if color.cached("hsl") is not None:
        return to_css_hsla(color)
    if color.cached("rgb") is not None:
        return to_css_rgba(color)
    if color.cached("hex") is not None:
        return to_css_hex(color)
    return to_css_hsla(color)


_RENDERERS = {
    CSSFormat.HEX: to_css_hex,
    CSSFormat.RGBA: to_css_rgba,
    CSSFormat.HSLA: to_css_hsla,
}


def to_css(color: Color, format: CSSFormat = CSSFormat.HSLA) -> str:
    """Render a color in an explicit CSS notation."""
    return _RENDERERS[format](color)
