# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Scalar measures over colors: perceived brightness, contrast and similarity.

None of these look at alpha.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from tinct.color import Color


# ITU-R BT.709 luma weights
_LUMA_R = 0.2126
_LUMA_G = 0.7152
_LUMA_B = 0.0722


def perceived_brightness(color: Color) -> float:
    """
    Brightness between 0 and 255 as perceived by a human, ignoring alpha.
    """
    rgb = color.rgb
    return _LUMA_R * rgb.r + _LUMA_G * rgb.g + _LUMA_B * rgb.b


def np_perceived_brightness(rgb: NDArray) -> NDArray[np.float64]:
    """
    Vectorized perceived brightness.

    Args:
        rgb: Array of shape (..., 3) with RGB values (0-255)

    Returns:
        Array of shape (...,) with brightness values (0-255)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return _LUMA_R * rgb[..., 0] + _LUMA_G * rgb[..., 1] + _LUMA_B * rgb[..., 2]


def contrast(c0: Color, c1: Color) -> float:
    """
    WCAG-style contrast ratio between two colors.

    Uses perceived brightness in place of relative luminance, so the result
    is ordered like the WCAG ratio but not numerically identical to it.
    Equal brightness gives exactly 1.0.
    """
    lum0 = perceived_brightness(c0)
    lum1 = perceived_brightness(c1)
    brightest = max(lum0, lum1)
    darkest = min(lum0, lum1)

    return (brightest + 0.05) / (darkest + 0.05)


def are_similar(color1: Color, color2: Color, accuracy: float = 0.99) -> bool:
    """
    Check whether two colors are close in YUV space.

    Args:
        color1: First color
        color2: Second color
        accuracy: How close the colors have to be, 0-1. Every YUV channel
            may differ by at most ``1 - accuracy``.

    Returns:
        True if all three channel differences are within the threshold.
    """
    yuv1 = color1.yuv
    yuv2 = color2.yuv
    threshold = 1 - accuracy

    return (
        abs(yuv1.y - yuv2.y) <= threshold
        and abs(yuv1.u - yuv2.u) <= threshold
        and abs(yuv1.v - yuv2.v) <= threshold
    )
