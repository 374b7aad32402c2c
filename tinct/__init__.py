# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Tinct -- Color values with lazy hex/RGB/HSL/YUV conversion.

Build a color from any one representation, read it back in any other, and
transform it the way SCSS does (darken, lighten, saturate, mix, ...).

Quick start::

    from tinct import Color

    c = Color.from_string("#17a")
    c.rgb                       # RGB(r=17, g=119, b=170)
    c.darken(10).css_hsla       # 'hsla(200, 81.8182%, 26.6667%, 1)'
    c.contrast_to(Color.WHITE)  # ~2.52
    c.mix_with(Color.BLACK, 50).css_hex
"""

from __future__ import annotations

__version__ = "1.0.0"

from tinct.color import Color
from tinct.errors import ColorError, InvalidHexError, MissingComponentError
from tinct.operations import ClassifierConfig
from tinct.schema import HSL, RGB, YUV, ColorType

__all__ = [
    # Core API
    "Color",
    # Components
    "RGB",
    "HSL",
    "YUV",
    "ColorType",
    # Configuration
    "ClassifierConfig",
    # Errors
    "ColorError",
    "MissingComponentError",
    "InvalidHexError",
    # Version
    "__version__",
]
