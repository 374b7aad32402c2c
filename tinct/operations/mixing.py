# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Blending two colors.

Two deliberately different algorithms live here:

- ``mix``: SCSS ``mix()``. Works on hex byte pairs and floors the result.
  Alpha is blended with the same weight.
- ``shade_blend``: linear shade/blend on the packed 24-bit value with
  half-up rounding. Alpha is ignored.

They give visibly different results for the same inputs.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional

from tinct.convert.colorspace import round_half_up

if TYPE_CHECKING:
    from tinct.color import Color


def mix(color1: Color, color2: Color, weight: float = 50) -> Color:
    """
    Mix two colors like SCSS's ``mix()``.

    Args:
        color1: First color
        color2: Second color
        weight: Percentage from 0 to 100. 100 yields ``color1``,
            0 yields ``color2``.

    Returns:
        New color. Alpha is ``alpha2 + (alpha1 - alpha2) * weight / 100``.
    """
    from tinct.color import Color

    fraction = weight / 100.0
    hex1 = color1.hex
    hex2 = color2.hex

    final_hex = ""
    for i in range(0, 6, 2):
        value1 = int(hex1[i:i + 2], 16)
        value2 = int(hex2[i:i + 2], 16)

        combined = math.floor(value2 + (value1 - value2) * fraction)
        final_hex += f"{combined:02x}"

    alpha = color2.alpha + (color1.alpha - color2.alpha) * fraction

    return Color.from_hex(final_hex).with_alpha(alpha)


def shade_blend(p: float, c0: Color, c1: Optional[Color] = None) -> Color:
    """
    Shade or blend a color.

    Args:
        p: Blend amount from -1 to 1. Negative values move towards black
            (or ``c1``), positive values towards white (or ``c1``).
        c0: Color to start from
        c1: Color to blend towards. Defaults to black/white depending on
            the sign of ``p``.

    Returns:
        New opaque color.
    """
    from tinct.color import Color

    n = abs(p)

    if c1 is not None:
        target_hex = c1.hex
    else:
        target_hex = "000000" if p < 0 else "ffffff"

    f = int(c0.hex, 16)
    t = int(target_hex, 16)

    r1, g1, b1 = f >> 16, f >> 8 & 0xFF, f & 0xFF
    r2, g2, b2 = t >> 16, t >> 8 & 0xFF, t & 0xFF

    r = round_half_up((r2 - r1) * n) + r1
    g = round_half_up((g2 - g1) * n) + g1
    b = round_half_up((b2 - b1) * n) + b1

    packed = 0x1000000 + r * 0x10000 + g * 0x100 + b
    return Color.from_hex(f"{packed:x}"[1:])
