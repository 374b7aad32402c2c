# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Component types for color values.

All components are immutable (frozen dataclasses). A Color never edits a
component in place; it builds a new one.
"""

from tinct.schema.components import (
    HSL,
    RGB,
    YUV,
    ColorType,
)

__all__ = [
    # Components
    "RGB",
    "HSL",
    "YUV",
    # String classification
    "ColorType",
]
