# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
The Color value type.

A Color is built from exactly one source representation (hex, RGB, HSL or
YUV) plus an alpha value. Every other representation is computed on first
access and memoized for the lifetime of the instance:

    hex ← RGB            (RGB computed and cached first if needed)
    RGB ← hex | HSL | YUV
    HSL ← RGB | hex
    YUV ← RGB            (RGB computed and cached first if needed)

Components are immutable dataclasses and no operation edits a Color's
components in place: every transformation (darken, with_hue, mix, ...)
returns a new Color. Populating a memo cell is idempotent, so a cached value
can never go stale.

Quick start::

    from tinct import Color

    c = Color.from_hex("#17a")
    c.css_hex                                  # '#1177aa'
    c.darken(10).saturate(5).with_alpha(0.5)   # chained, each step a new Color
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import Any, ClassVar, Optional, Union

import numpy as np

from tinct.convert.colorspace import (
    hex_to_hsl,
    hsl_to_rgb,
    rgb_to_hsl,
    rgb_to_yuv,
    yuv_to_rgb,
)
from tinct.convert.hexcode import hex_to_rgb, normalize_hex, rgb_to_hex
from tinct.errors import ColorError, InvalidHexError, MissingComponentError
from tinct.operations import classify, metrics, mixing
from tinct.schema.components import HSL, RGB, YUV, ColorType


ComponentInput = Union[RGB, HSL, YUV, Mapping[str, Any], tuple]


def _clamp01(value: float) -> float:
    return max(min(value, 1), 0)


class Color:
    """
    A color value with lazily computed hex/RGB/HSL/YUV views.

    Construct through the factories (``from_hex``, ``from_rgb``,
    ``from_hsl``, ``from_yuv``, ``from_string``, ``from_json``, ``random``)
    rather than the constructor.

    Attributes:
        alpha: Opacity, nominally 0-1. Stored verbatim, never clamped.
    """

    __slots__ = ("_hex", "_rgb", "_hsl", "_yuv", "alpha")

    # Public API constant only; is_dark/is_light use ClassifierConfig.dark_threshold
    PERCEIVED_BRIGHTNESS_THRESHOLD: ClassVar[int] = 155

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    TRANSPARENT: ClassVar[Color]

    def __init__(
        self,
        hex_code: Optional[str] = None,
        rgb: Optional[ComponentInput] = None,
        hsl: Optional[ComponentInput] = None,
        yuv: Optional[ComponentInput] = None,
        alpha: float = 1,
    ) -> None:
        """
        Create a color from one representation.

        If several are given, the first of hex, rgb, hsl, yuv wins and the
        rest are ignored.

        Raises:
            MissingComponentError: If no representation is given.
            InvalidHexError: If ``hex_code`` is not a valid hex color.
        """
        self._hex: Optional[str] = None
        self._rgb: Optional[RGB] = None
        self._hsl: Optional[HSL] = None
        self._yuv: Optional[YUV] = None

        if hex_code:
            normalized = normalize_hex(hex_code)
            if normalized is None:
                raise InvalidHexError(hex_code)
            self._hex = normalized
        elif rgb is not None:
            self._rgb = RGB.coerce(rgb)
        elif hsl is not None:
            self._hsl = HSL.coerce(hsl)
        elif yuv is not None:
            self._yuv = YUV.coerce(yuv)
        else:
            raise MissingComponentError("One component must be set")

        self.alpha = alpha

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def from_hex(cls, hex_code: str) -> Color:
        """
        Create a color from a hex string, with or without leading ``#``.

        Accepts 2, 3 and 6 digit forms (see ``normalize_hex``).

        Raises:
            InvalidHexError: If the string is not a valid hex color.
        """
        normalized = normalize_hex(hex_code)
        if not normalized:
            raise InvalidHexError(hex_code)
        return cls(hex_code=normalized)

    @classmethod
    def from_rgb(cls, rgb: ComponentInput, alpha: float = 1) -> Color:
        """Create a color from RGB (0-255)."""
        return cls(rgb=rgb, alpha=alpha)

    @classmethod
    def from_hsl(cls, hsl: ComponentInput, alpha: float = 1) -> Color:
        """Create a color from HSL (0-1)."""
        return cls(hsl=hsl, alpha=alpha)

    @classmethod
    def from_yuv(cls, yuv: ComponentInput, alpha: float = 1) -> Color:
        """Create a color from YUV."""
        return cls(yuv=yuv, alpha=alpha)

    @classmethod
    def from_string(cls, value: Any) -> Optional[Color]:
        """
        Create a color from a CSS-like string.

        Supported notations: hex (with or without ``#``), ``rgb()``,
        ``rgba()``, ``hsl()``, ``hsla()``. A Color is returned unchanged.

        Returns:
            The color, or None for None, non-strings and unrecognized strings.
        """
        from tinct.runtime.parse import from_string
        return from_string(value)

    @classmethod
    def from_json(cls, data: Union[str, Mapping[str, Any], None]) -> Optional[Color]:
        """
        Create a color from ``to_json()`` output or its JSON string.

        Returns:
            The color, or None if ``data`` is empty or has no known keys.
        """
        from tinct.runtime.serializers.payload import from_json
        return from_json(data)

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> Color:
        """
        A random opaque color, each RGB channel uniform in 0-255.

        Args:
            rng: Random generator to draw from. Defaults to a fresh
                ``numpy.random.default_rng()``.
        """
        if rng is None:
            rng = np.random.default_rng()
        r, g, b = (int(v) for v in rng.integers(0, 256, size=3))
        return cls.from_rgb(RGB(r=r, g=g, b=b))

    @classmethod
    def mix(cls, color1: Color, color2: Color, weight: float = 50) -> Color:
        """Mix two colors like SCSS's ``mix()``. See ``tinct.operations.mixing.mix``."""
        return mixing.mix(color1, color2, weight)

    @classmethod
    def shade_blend(cls, p: float, c0: Color, c1: Optional[Color] = None) -> Color:
        """Shade or blend a color. See ``tinct.operations.mixing.shade_blend``."""
        return mixing.shade_blend(p, c0, c1)

    @staticmethod
    def contrast(c0: Color, c1: Color) -> float:
        """WCAG-style contrast ratio between two colors."""
        return metrics.contrast(c0, c1)

    @staticmethod
    def are_similar(color1: Color, color2: Color, accuracy: float = 0.99) -> bool:
        """Check whether two colors are close in YUV space."""
        return metrics.are_similar(color1, color2, accuracy)

    @staticmethod
    def normalize_hex(source: Any) -> Optional[str]:
        """Normalize a hex color into six digits without ``#``."""
        return normalize_hex(source)

    @staticmethod
    def detect_type(value: Any) -> Optional[ColorType]:
        """Classify a color string."""
        from tinct.runtime.parse import detect_type
        return detect_type(value)

    def clone(self) -> Color:
        """
        A new instance with the same representations and alpha.

        Components are immutable, so sharing them between the two instances
        is safe.
        """
        twin = object.__new__(type(self))
        for name in Color.__slots__:
            setattr(twin, name, getattr(self, name))
        return twin

    # =========================================================================
    # Lazy Representations
    # =========================================================================

    def _has_source(self) -> bool:
        return any(
            cell is not None for cell in (self._hex, self._rgb, self._hsl, self._yuv)
        )

    def cached(self, name: str) -> Union[str, RGB, HSL, YUV, None]:
        """
        Peek at a representation without computing it.

        Args:
            name: One of ``"hex"``, ``"rgb"``, ``"hsl"``, ``"yuv"``

        Returns:
            The stored value, or None if it has not been computed yet.
        """
        if name not in ("hex", "rgb", "hsl", "yuv"):
            raise KeyError(f"Unknown representation '{name}'")
        return getattr(self, "_" + name)

    @property
    def hex(self) -> str:
        """Six hex digits without leading ``#``."""
        if self._hex is None:
            if not self._has_source():
                raise ColorError("Could not calculate hex value")
            self._hex = rgb_to_hex(self.rgb)
        return self._hex

    @property
    def rgb(self) -> RGB:
        if self._rgb is None:
            if self._hex is not None:
                self._rgb = hex_to_rgb(self._hex)
            elif self._hsl is not None:
                self._rgb = hsl_to_rgb(self._hsl)
            elif self._yuv is not None:
                self._rgb = yuv_to_rgb(self._yuv)
            else:
                raise ColorError("Could not calculate RGB values")
        return self._rgb

    @property
    def hsl(self) -> HSL:
        if self._hsl is None:
            if self._rgb is not None:
                self._hsl = rgb_to_hsl(self._rgb)
            elif self._hex is not None:
                self._hsl = hex_to_hsl(self._hex)
            elif self._yuv is not None:
                self._hsl = rgb_to_hsl(self.rgb)
            else:
                raise ColorError("Could not calculate HSL values")
        return self._hsl

    @property
    def yuv(self) -> YUV:
        if self._yuv is None:
            if not self._has_source():
                raise ColorError("Could not calculate YUV values")
            self._yuv = rgb_to_yuv(self.rgb)
        return self._yuv

    # =========================================================================
    # Derived Views
    # =========================================================================

    @property
    def css_hex(self) -> str:
        """Hex string with leading ``#``, e.g. ``#1177aa``."""
        from tinct.runtime.serializers.css import to_css_hex
        return to_css_hex(self)

    @property
    def css_rgba(self) -> str:
        """CSS string like ``rgba(17, 119, 170, 1)``."""
        from tinct.runtime.serializers.css import to_css_rgba
        return to_css_rgba(self)

    @property
    def css_hsla(self) -> str:
        """CSS string like ``hsla(200, 81.8182%, 36.6667%, 1)``."""
        from tinct.runtime.serializers.css import to_css_hsla
        return to_css_hsla(self)

    @property
    def rgb_array(self) -> tuple[float, float, float]:
        """(R, G, B)"""
        return self.rgb.as_tuple()

    @property
    def rgb_string(self) -> str:
        """
        ``"R, G, B"``, for splicing into a CSS ``rgba()`` with a custom alpha.
        """
        rgb = self.rgb
        return f"{rgb.r}, {rgb.g}, {rgb.b}"

    @property
    def hsl_array(self) -> tuple[float, float, float]:
        """(H, S, L)"""
        return self.hsl.as_tuple()

    @property
    def perceived_brightness(self) -> float:
        """Brightness between 0 and 255 as perceived by a human, ignoring alpha."""
        return metrics.perceived_brightness(self)

    # =========================================================================
    # Transformations
    # =========================================================================

    def darken(self, percentage: float) -> Color:
        """Darken by a percentage (0-100), just like in SCSS."""
        return self.with_lightness(_clamp01(self.hsl.l - percentage / 100))

    def lighten(self, percentage: float) -> Color:
        """Lighten by a percentage (0-100), just like in SCSS."""
        return self.darken(-percentage)

    def saturate(self, percentage: float) -> Color:
        """Saturate by a percentage (0-100), just like in SCSS."""
        return self.with_saturation(_clamp01(self.hsl.s + percentage / 100))

    def desaturate(self, percentage: float) -> Color:
        """Desaturate by a percentage (0-100), just like in SCSS."""
        return self.saturate(-percentage)

    def shift_hue(self, amount: float) -> Color:
        """
        Shift the hue by ``amount`` (a fraction of the hue circle).

        The result wraps into [0, 1), also for negative shifts.
        """
        return self.with_hue((self.hsl.h + amount) % 1)

    def with_alpha(self, alpha: float = 1) -> Color:
        """A copy of this color with a different alpha (0-1)."""
        twin = self.clone()
        twin.alpha = alpha
        return twin

    def with_hue(self, hue: float = 0) -> Color:
        """A copy of this color with a different hue (0-1)."""
        return self.from_hsl(replace(self.hsl, h=hue), self.alpha)

    def with_saturation(self, saturation: float = 1) -> Color:
        """A copy of this color with a different saturation (0-1)."""
        return self.from_hsl(replace(self.hsl, s=saturation), self.alpha)

    def with_lightness(self, lightness: float = 1) -> Color:
        """A copy of this color with a different lightness (0-1)."""
        return self.from_hsl(replace(self.hsl, l=lightness), self.alpha)

    def mix_with(self, color: Color, weight: float = 50) -> Color:
        """
        Mix this color with another one.

        Args:
            color: Other color
            weight: Share of this color, 0-100, like SCSS
        """
        return mixing.mix(self, color, weight)

    # =========================================================================
    # Comparisons & Predicates
    # =========================================================================

    def contrast_to(self, color: Color) -> float:
        """WCAG-style contrast ratio to another color."""
        return metrics.contrast(self, color)

    def is_similar_to(self, color: Color, accuracy: float = 0.99) -> bool:
        """
        Is this color similar to another color?

        Args:
            color: Other color
            accuracy: How close the colors have to be, 0-1
        """
        return metrics.are_similar(self, color, accuracy)

    def is_dark(self, config: Optional[classify.ClassifierConfig] = None) -> bool:
        return classify.is_dark(self, config)

    def is_light(self, config: Optional[classify.ClassifierConfig] = None) -> bool:
        return classify.is_light(self, config)

    def is_darker_than(self, color: Color) -> bool:
        return classify.is_darker_than(self, color)

    def is_lighter_than(self, color: Color) -> bool:
        return classify.is_lighter_than(self, color)

    def is_redish(self, config: Optional[classify.ClassifierConfig] = None) -> bool:
        return classify.is_redish(self, config)

    def is_greenish(self, config: Optional[classify.ClassifierConfig] = None) -> bool:
        return classify.is_greenish(self, config)

    def is_white(self) -> bool:
        return classify.is_white(self)

    def is_black(self) -> bool:
        return classify.is_black(self)

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_json(self) -> dict:
        """
        JSON-ready dict built from whichever representation is already known.

        See ``tinct.runtime.serializers.payload.to_json_dict``.
        """
        from tinct.runtime.serializers.payload import to_json_dict
        return to_json_dict(self)

    def __str__(self) -> str:
        from tinct.runtime.serializers.css import to_css_string
        return to_css_string(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


Color.WHITE = Color.from_hex("#ffffff")
Color.BLACK = Color.from_hex("#000000")
Color.TRANSPARENT = Color.from_hsl(HSL(h=0, s=0, l=0), 0)
