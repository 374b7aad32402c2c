# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion graph: hex ↔ RGB ↔ HSL, RGB ↔ YUV

Scalar functions work on the component dataclasses and are what Color uses.
The ``np_*`` functions are vectorized equivalents over arrays of shape
(..., 3) for batch work on pixels; they agree with the scalar versions
element-wise.

Rounding is half-up everywhere a channel is rounded, matching CSS tooling.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from tinct.convert.hexcode import hex_to_rgb
from tinct.schema.components import HSL, RGB, YUV


# =============================================================================
# Rounding
# =============================================================================


def round_half_up(value: float, places: int = 0) -> float:
    """
    Round halves away from negative infinity (2.5 → 3, -2.5 → -2).

    Python's ``round`` rounds halves to even, which shifts channel values
    by one on exact halves. With ``places == 0`` an ``int`` is returned.
    """
    if places == 0:
        return math.floor(value + 0.5)
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


# =============================================================================
# RGB ↔ HSL
# =============================================================================


def rgb_to_hsl(rgb: RGB) -> HSL:
    """
    Convert RGB (0-255) to HSL (0-1).

    Achromatic colors (all channels equal) get hue and saturation 0.
    """
    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2

    if max_c == min_c:
        return HSL(h=0, s=0, l=l)

    d = max_c - min_c
    s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)

    if max_c == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif max_c == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4

    return HSL(h=h / 6, s=s, l=l)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    """Evaluate one RGB channel at hue offset ``t``."""
    t %= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSL) -> RGB:
    """
    Convert HSL (0-1) to RGB (0-255, integers).
    """
    if hsl.s == 0:
        r = g = b = hsl.l  # achromatic
    else:
        q = hsl.l * (1 + hsl.s) if hsl.l < 0.5 else hsl.l + hsl.s - hsl.l * hsl.s
        p = 2 * hsl.l - q

        r = _hue_to_rgb(p, q, hsl.h + 1 / 3)
        g = _hue_to_rgb(p, q, hsl.h)
        b = _hue_to_rgb(p, q, hsl.h - 1 / 3)

    return RGB(
        r=round_half_up(r * 255),
        g=round_half_up(g * 255),
        b=round_half_up(b * 255),
    )


def hex_to_hsl(hex_color: str) -> HSL:
    """
    Convert a hex string (with or without leading ``#``) to HSL.

    An empty string yields black (0, 0, 0).
    """
    if not hex_color:
        return HSL(h=0, s=0, l=0)
    return rgb_to_hsl(hex_to_rgb(hex_color))


# =============================================================================
# RGB ↔ YUV
# =============================================================================


def rgb_to_yuv(rgb: RGB) -> YUV:
    """
    Convert RGB (0-255) to YUV.

    Channels are normalized to [0, 1] before applying the BT.601 weights,
    so the result sits just above the 16/128/128 offsets.
    """
    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255

    return YUV(
        y=0.257 * r + 0.504 * g + 0.098 * b + 16,
        u=-0.148 * r - 0.291 * g + 0.439 * b + 128,
        v=0.439 * r - 0.368 * g - 0.071 * b + 128,
    )


def yuv_to_rgb(yuv: YUV) -> RGB:
    """
    Convert YUV back to RGB (0-255, integers).

    Inverse of ``rgb_to_yuv``. The absolute value folds tiny negative
    rounding artifacts back to zero; it is not a gamut clamp.
    """
    y = yuv.y - 16
    u = yuv.u - 128
    v = yuv.v - 128

    return RGB(
        r=abs(round_half_up((1.164 * y + 1.596 * v) * 255)),
        g=abs(round_half_up((1.164 * y - 0.392 * u - 0.813 * v) * 255)),
        b=abs(round_half_up((1.164 * y + 2.017 * u) * 255)),
    )


# =============================================================================
# Vectorized (NumPy) variants
# =============================================================================


def np_round_half_up(values: NDArray[np.float64]) -> NDArray[np.int64]:
    """Vectorized ``round_half_up`` to integers."""
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5).astype(np.int64)


def np_rgb_to_hsl(rgb: NDArray) -> NDArray[np.float64]:
    """
    Convert RGB (0-255) to HSL (0-1).

    Args:
        rgb: Array of shape (..., 3) with RGB values

    Returns:
        Array of shape (..., 3) with HSL values
    """
    rgb = np.asarray(rgb, dtype=np.float64) / 255.0
    r = rgb[..., 0]
    g = rgb[..., 1]
    b = rgb[..., 2]

    max_c = np.max(rgb, axis=-1)
    min_c = np.min(rgb, axis=-1)
    l = (max_c + min_c) / 2.0

    d = max_c - min_c
    chromatic = d != 0
    # Avoid division by zero; achromatic entries are overwritten below
    d_safe = np.where(chromatic, d, 1.0)

    s = np.where(
        l > 0.5,
        d_safe / np.where(chromatic, 2.0 - max_c - min_c, 1.0),
        d_safe / np.where(chromatic, max_c + min_c, 1.0),
    )

    is_r = max_c == r
    is_g = ~is_r & (max_c == g)
    h = np.where(
        is_r,
        (g - b) / d_safe + np.where(g < b, 6.0, 0.0),
        np.where(is_g, (b - r) / d_safe + 2.0, (r - g) / d_safe + 4.0),
    ) / 6.0

    h = np.where(chromatic, h, 0.0)
    s = np.where(chromatic, s, 0.0)

    return np.stack([h, s, l], axis=-1)


def _np_hue_to_rgb(p: NDArray, q: NDArray, t: NDArray) -> NDArray[np.float64]:
    t = np.mod(t, 1.0)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )


def np_hsl_to_rgb(hsl: NDArray) -> NDArray[np.int64]:
    """
    Convert HSL (0-1) to RGB (0-255, integers).

    Args:
        hsl: Array of shape (..., 3) with HSL values

    Returns:
        Integer array of shape (..., 3) with RGB values
    """
    hsl = np.asarray(hsl, dtype=np.float64)
    h = hsl[..., 0]
    s = hsl[..., 1]
    l = hsl[..., 2]

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    r = _np_hue_to_rgb(p, q, h + 1 / 3)
    g = _np_hue_to_rgb(p, q, h)
    b = _np_hue_to_rgb(p, q, h - 1 / 3)

    achromatic = s == 0
    rgb = np.stack([
        np.where(achromatic, l, r),
        np.where(achromatic, l, g),
        np.where(achromatic, l, b),
    ], axis=-1)

    return np_round_half_up(rgb * 255)


def np_rgb_to_yuv(rgb: NDArray) -> NDArray[np.float64]:
    """
    Convert RGB (0-255) to YUV.

    Args:
        rgb: Array of shape (..., 3) with RGB values

    Returns:
        Array of shape (..., 3) with YUV values
    """
    rgb = np.asarray(rgb, dtype=np.float64) / 255.0
    r = rgb[..., 0]
    g = rgb[..., 1]
    b = rgb[..., 2]

    y = 0.257 * r + 0.504 * g + 0.098 * b + 16
    u = -0.148 * r - 0.291 * g + 0.439 * b + 128
    v = 0.439 * r - 0.368 * g - 0.071 * b + 128

    return np.stack([y, u, v], axis=-1)


def np_yuv_to_rgb(yuv: NDArray) -> NDArray[np.int64]:
    """
    Convert YUV to RGB (0-255, integers).

    Args:
        yuv: Array of shape (..., 3) with YUV values

    Returns:
        Integer array of shape (..., 3) with RGB values
    """
    yuv = np.asarray(yuv, dtype=np.float64)
    y = yuv[..., 0] - 16
    u = yuv[..., 1] - 128
    v = yuv[..., 2] - 128

    rgb = np.stack([
        1.164 * y + 1.596 * v,
        1.164 * y - 0.392 * u - 0.813 * v,
        1.164 * y + 2.017 * u,
    ], axis=-1)

    return np.abs(np_round_half_up(rgb * 255))
