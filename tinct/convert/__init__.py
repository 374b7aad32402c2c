# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Pure conversion functions between hex, RGB, HSL and YUV.

Nothing in this package touches the Color type; Color composes these
functions into its lazy conversion chains.
"""

from tinct.convert.hexcode import hex_to_rgb, normalize_hex, rgb_to_hex
from tinct.convert.colorspace import (
    hex_to_hsl,
    hsl_to_rgb,
    np_hsl_to_rgb,
    np_rgb_to_hsl,
    np_rgb_to_yuv,
    np_yuv_to_rgb,
    rgb_to_hsl,
    rgb_to_yuv,
    round_half_up,
    yuv_to_rgb,
)

__all__ = [
    # Hex
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "hex_to_hsl",
    # RGB ↔ HSL
    "rgb_to_hsl",
    "hsl_to_rgb",
    # RGB ↔ YUV
    "rgb_to_yuv",
    "yuv_to_rgb",
    # Batch
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    "np_rgb_to_yuv",
    "np_yuv_to_rgb",
    # Rounding
    "round_half_up",
]
