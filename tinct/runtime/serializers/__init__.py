# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Serializers for Color values.

Each serializer renders a color from representations it already holds
where possible; none of them modify the color's components.
"""

from tinct.runtime.serializers.base import CSSFormat, format_number
from tinct.runtime.serializers.css import (
    to_css,
    to_css_hex,
    to_css_hsla,
    to_css_rgba,
    to_css_string,
)
from tinct.runtime.serializers.payload import from_json, to_json_dict, to_json_string

__all__ = [
    "CSSFormat",
    "format_number",
    "to_css",
    "to_css_hex",
    "to_css_rgba",
    "to_css_hsla",
    "to_css_string",
    "to_json_dict",
    "to_json_string",
    "from_json",
]
