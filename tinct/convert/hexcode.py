# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Hex string handling.

Hex values are stored as exactly six hex digits with no leading ``#``.
The ``#`` only appears at the boundary (input, and ``Color.css_hex``).
"""

from __future__ import annotations

import re
from typing import Any, Optional

from tinct.schema.components import RGB


_HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]+")


def normalize_hex(source: Any) -> Optional[str]:
    """
    Normalize a hex color into six hex digits without a leading ``#``.

    Accepted forms (with or without a single leading ``#``):
    - ``ab``     → ``ababab``
    - ``17a``    → ``1177aa``
    - ``17a7df`` → ``17a7df``

    Args:
        source: Candidate hex string. Anything that is not a string is invalid.

    Returns:
        The normalized hex string, or None if the input is not a valid hex color.
    """
    if not isinstance(source, str) or not source:
        return None

    normalized = source[1:] if source.startswith("#") else source

    # A single digit cannot be expanded into a color
    if len(normalized) < 2:
        return None

    if not _HEX_DIGITS_RE.fullmatch(normalized):
        return None

    if len(normalized) == 2:
        return normalized * 3
    if len(normalized) == 3:
        r, g, b = normalized
        return r + r + g + g + b + b
    if len(normalized) == 6:
        return normalized

    return None


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Convert a six-digit hex string (with or without leading ``#``) to RGB.

    The input is not normalized; pass it through ``normalize_hex`` first if
    it may be a short form.
    """
    hex_color = hex_color.lstrip("#")

    return RGB(
        r=int(hex_color[0:2], 16),
        g=int(hex_color[2:4], 16),
        b=int(hex_color[4:6], 16),
    )


def rgb_to_hex(rgb: RGB) -> str:
    """
    Convert RGB to a lowercase hex string without leading ``#``.

    Each channel becomes exactly two zero-padded hex digits.
    """
    return f"{int(rgb.r):02x}{int(rgb.g):02x}{int(rgb.b):02x}"
