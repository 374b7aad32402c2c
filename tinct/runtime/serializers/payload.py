# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
JSON serializer.

A color is emitted as a flat dict built from the representation it already
holds: ``{r, g, b, alpha}``, ``{h, s, l, alpha}`` or ``{hex}``. Reading goes
the other way by key presence.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from tinct.color import Color


logger = logging.getLogger(__name__)


def to_json_dict(color: Color) -> dict:
    """
    JSON-ready dict for a color.

    Priority: cached RGB → ``{r, g, b, alpha}``, cached HSL →
    ``{h, s, l, alpha}``, otherwise ``{hex}``. The hex form carries no alpha.
    """
    rgb = color.cached("rgb")
    if rgb is not None:
        return {**rgb.to_dict(), "alpha": color.alpha}

    hsl = color.cached("hsl")
    if hsl is not None:
        return {**hsl.to_dict(), "alpha": color.alpha}

    return {"hex": color.hex}


def to_json_string(color: Color, *, indent: Optional[int] = None) -> str:
    """``to_json_dict`` encoded as a JSON string."""
    return json.dumps(to_json_dict(color), indent=indent)


def from_json(data: Union[str, Mapping[str, Any], None]) -> Optional[Color]:
    """
    Create a color from ``to_json_dict`` output or its JSON string.

    Keys are checked in order ``hex``, ``h``, ``r``. An empty ``hex`` value is
    skipped; ``h`` and ``r`` match by presence, so a hue of 0 is recognized.
    An ``alpha`` key next to the HSL or RGB channels becomes the color's
    alpha (default 1).

    Args:
        data: Dict or JSON string.

    Returns:
        The color, or None for empty input or a structure without a known key.

    Raises:
        json.JSONDecodeError: If ``data`` is a string that is not valid JSON.
        ValueError: If a matched HSL or RGB structure lacks one of its channel
            keys, or ``hex`` is not a valid hex color (``InvalidHexError``).
    """
    if not data:
        return None

    parsed = json.loads(data) if isinstance(data, str) else data

    if not isinstance(parsed, Mapping):
        logger.debug("Cannot read color from JSON %s: %r", type(parsed).__name__, parsed)
        return None

    if parsed.get("hex"):
        return Color.from_hex(parsed["hex"])
    if "h" in parsed:
        return Color.from_hsl(parsed, parsed.get("alpha", 1))
    if "r" in parsed:
        return Color.from_rgb(parsed, parsed.get("alpha", 1))

    logger.debug("No hex/h/r key in color JSON %r", parsed)
    return None
