# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Boundary layer: parsing color strings and serializing colors.

Usage::

    from tinct.runtime import from_string, to_css_string, to_json_string

    color = from_string("hsla(204, 69%, 36.7%, 0.5)")
    to_css_string(color)    # 'hsla(204, 69%, 36.7%, 0.5)'
    to_json_string(color)   # '{"h": 0.5666..., "s": 0.69, "l": 0.367, "alpha": 0.5}'
"""

from tinct.runtime.parse import detect_type, from_string, parse_alpha
from tinct.runtime.serializers import (
    CSSFormat,
    from_json,
    to_css,
    to_css_hex,
    to_css_hsla,
    to_css_rgba,
    to_css_string,
    to_json_dict,
    to_json_string,
)

__all__ = [
    # Parsing
    "detect_type",
    "parse_alpha",
    "from_string",
    # CSS
    "CSSFormat",
    "to_css",
    "to_css_hex",
    "to_css_rgba",
    "to_css_hsla",
    "to_css_string",
    # JSON
    "to_json_dict",
    "to_json_string",
    "from_json",
]
