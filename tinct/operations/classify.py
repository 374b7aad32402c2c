# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Categorical predicates: dark/light, redish/greenish, white/black.

Thresholds are collected in ``ClassifierConfig`` so callers can tune them
without touching the predicates. Hue values are fractions of the 360° circle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from tinct.operations.metrics import perceived_brightness

if TYPE_CHECKING:
    from tinct.color import Color


@dataclass(frozen=True)
class ClassifierConfig:
    """Thresholds for color classification."""

    # Perceived brightness (0-255) at or below which a color is dark
    dark_threshold: float = 120

    # Outside [min_lightness, max_lightness) no hue is really discernible
    min_lightness: float = 0.2
    max_lightness: float = 0.96

    # Hue only counts when saturation is strictly above this
    min_saturation: float = 0.201

    # Red wraps around 0°: [0°, ~26°] and [~336°, 360°]
    redish_hue_low: float = 0.072
    redish_hue_high: float = 0.933

    # Roughly 83° to 169°
    greenish_hue_min: float = 0.23
    greenish_hue_max: float = 0.469


_DEFAULT_CONFIG = ClassifierConfig()


def is_dark(color: Color, config: Optional[ClassifierConfig] = None) -> bool:
    """Is this color darker than the configured limit according to human perception?"""
    cfg = config or _DEFAULT_CONFIG
    return perceived_brightness(color) <= cfg.dark_threshold


def is_light(color: Color, config: Optional[ClassifierConfig] = None) -> bool:
    """Is this color lighter than the configured limit according to human perception?"""
    return not is_dark(color, config)


def is_darker_than(color: Color, other: Color) -> bool:
    """True if ``color`` is perceived as strictly darker than ``other``."""
    return perceived_brightness(color) < perceived_brightness(other)


def is_lighter_than(color: Color, other: Color) -> bool:
    """True if ``color`` is perceived as strictly lighter than ``other``."""
    return perceived_brightness(color) > perceived_brightness(other)


def _has_discernible_hue(color: Color, cfg: ClassifierConfig) -> bool:
    light = color.hsl.l
    return cfg.min_lightness <= light < cfg.max_lightness


def is_redish(color: Color, config: Optional[ClassifierConfig] = None) -> bool:
    """
    Does the color look red to a human?

    Requires lightness within the discernible window, a hue in either red
    band and saturation above the floor.
    """
    cfg = config or _DEFAULT_CONFIG
    if not _has_discernible_hue(color, cfg):
        return False

    hue = color.hsl.h
    redish_hue = 0 <= hue <= cfg.redish_hue_low or hue >= cfg.redish_hue_high

    return redish_hue and color.hsl.s > cfg.min_saturation


def is_greenish(color: Color, config: Optional[ClassifierConfig] = None) -> bool:
    """Does the color look green to a human?"""
    cfg = config or _DEFAULT_CONFIG
    if not _has_discernible_hue(color, cfg):
        return False

    hue = color.hsl.h
    greenish_hue = cfg.greenish_hue_min <= hue <= cfg.greenish_hue_max

    return greenish_hue and color.hsl.s > cfg.min_saturation


def is_white(color: Color) -> bool:
    """Exactly white: lightness 1 with saturation 0 or 1."""
    hsl = color.hsl
    return hsl.s in (0, 1) and hsl.l == 1


def is_black(color: Color) -> bool:
    """Exactly black: lightness 0 with saturation 0 or 1."""
    hsl = color.hsl
    return hsl.s in (0, 1) and hsl.l == 0
