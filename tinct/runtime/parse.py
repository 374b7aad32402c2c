# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
CSS-like string parsing.

Detection is an ordered dispatch: hex first (it has no reserved prefix),
then the literal prefixes ``rgba``, ``rgb``, ``hsla``, ``hsl``. Longer
prefixes are tested before their shorter counterparts.

Malformed input is expected here (user and stylesheet strings), so parse
failures return None instead of raising.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

from tinct.color import Color
from tinct.convert.hexcode import normalize_hex
from tinct.schema.components import HSL, RGB, ColorType


logger = logging.getLogger(__name__)


# =============================================================================
# Patterns
# =============================================================================

_NUM = r"(\d+(?:\.\d*)?|\.\d+)"
_INT = r"(\d+)"
_ALPHA = r"(\d+(?:\.\d*)?%?|\.\d+%?)"
_SEP = r", ?"

_RGB_RE = re.compile(rf"rgb\({_INT}{_SEP}{_INT}{_SEP}{_INT}\)")
_RGBA_RE = re.compile(rf"rgba\({_INT}{_SEP}{_INT}{_SEP}{_INT}{_SEP}{_ALPHA}\)")
_HSL_RE = re.compile(rf"hsl\({_NUM}{_SEP}{_NUM}%{_SEP}{_NUM}%\)")
_HSLA_RE = re.compile(rf"hsla\({_NUM}{_SEP}{_NUM}%{_SEP}{_NUM}%{_SEP}{_ALPHA}\)")

# Checked in order; more specific prefixes first
_PREFIXES = (
    ("rgba", ColorType.RGBA),
    ("rgb", ColorType.RGB),
    ("hsla", ColorType.HSLA),
    ("hsl", ColorType.HSL),
)


# =============================================================================
# Detection
# =============================================================================


def detect_type(value: Any) -> Optional[ColorType]:
    """
    Detect which color notation a string uses.

    Returns:
        The detected ColorType, ``ColorType.STR`` for anything unrecognized
        (named colors, gradients, ``url()``), or None for None.
    """
    if value is None:
        return None

    text = str(value)

    if normalize_hex(text):
        return ColorType.HEX

    for prefix, color_type in _PREFIXES:
        if text.startswith(prefix):
            return color_type

    return ColorType.STR


def parse_alpha(text: str) -> float:
    """
    Parse an alpha value: ``"0.5"`` → 0.5, ``"10%"`` → 0.1.
    """
    if text.endswith("%"):
        return float(text[:-1]) / 100
    return float(text)


def _parse_hue(text: str) -> float:
    """Whole degrees, wrapped to one turn, as a fraction of the circle."""
    return (int(float(text)) % 360) / 360


# =============================================================================
# Parsing
# =============================================================================


def _parse_rgb(text: str, with_alpha: bool) -> Optional[Color]:
    match = (_RGBA_RE if with_alpha else _RGB_RE).search(text)
    if not match:
        return None

    rgb = RGB(
        r=int(match.group(1)),
        g=int(match.group(2)),
        b=int(match.group(3)),
    )
    alpha = parse_alpha(match.group(4)) if with_alpha else 1
    return Color.from_rgb(rgb, alpha)


def _parse_hsl(text: str, with_alpha: bool) -> Optional[Color]:
    match = (_HSLA_RE if with_alpha else _HSL_RE).search(text)
    if not match:
        return None

    hsl = HSL(
        h=_parse_hue(match.group(1)),
        s=float(match.group(2)) / 100,
        l=float(match.group(3)) / 100,
    )
    alpha = parse_alpha(match.group(4)) if with_alpha else 1
    return Color.from_hsl(hsl, alpha)


def from_string(value: Any) -> Optional[Color]:
    """
    Create a color from a CSS-like string.

    Supported notations:
    - hex, with or without ``#``: ``#17a``, ``1177aa``
    - ``rgb(17, 119, 170)``, ``rgba(17, 119, 170, 0.5)``
    - ``hsl(200, 82%, 37%)``, ``hsla(200, 82%, 37%, 50%)``

    Alpha may be a fraction or a percentage.

    Args:
        value: String to parse. A Color is returned unchanged.

    Returns:
        The parsed Color, or None if ``value`` is None, not a string, or
        not in a supported notation.
    """
    if value is None:
        return None

    if isinstance(value, Color):
        return value

    if not isinstance(value, str):
        logger.debug("Cannot parse color from %s: %r", type(value).__name__, value)
        return None

    color_type = detect_type(value)

    if color_type is ColorType.HEX:
        color = Color.from_hex(value)
    elif color_type in (ColorType.RGB, ColorType.RGBA):
        color = _parse_rgb(value, with_alpha=color_type is ColorType.RGBA)
    elif color_type in (ColorType.HSL, ColorType.HSLA):
        color = _parse_hsl(value, with_alpha=color_type is ColorType.HSLA)
    else:
        color = None

    if color is None:
        logger.debug("Unrecognized color string %r (detected %s)", value, color_type)

    return color
