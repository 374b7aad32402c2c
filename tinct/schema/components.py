# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Color component types.

Design principles:
- Immutable: RGB, HSL and YUV are frozen dataclasses
- Lenient: channel ranges are documented, not enforced
- Serializable: every component round-trips through a plain dict

Channel ranges:
- RGB: r, g, b are 0-255 (integers in practice)
- HSL: h, s, l are 0-1; h is a fraction of the 360° hue circle
- YUV: y is 16-235, u and v are 16-240 (BT.601-style offsets)
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


# =============================================================================
# Color Types
# =============================================================================


class ColorType(Enum):
    """
    Classification of a color string.

    Produced by ``tinct.runtime.parse.detect_type`` and consumed by
    ``Color.from_string``.
    """
    RGB = "rgb"     # rgb(255, 128, 0)
    RGBA = "rgba"   # rgba(255, 128, 0, 0.42)
    HSL = "hsl"     # hsl(160, 96%, 42%)
    HSLA = "hsla"   # hsla(160, 96%, 42%, 0.1337)
    HEX = "hex"     # #17a7df, 17a, 7f
    STR = "str"     # named colors, url(), gradients: not parsed


# =============================================================================
# Shared Helpers
# =============================================================================


class _Component:
    """Mixin giving the three-channel components dict/tuple coercion."""

    __slots__ = ()

    channels: ClassVar[tuple[str, str, str]]

    def as_tuple(self) -> tuple[float, float, float]:
        """Channel values in declaration order."""
        return tuple(getattr(self, name) for name in self.channels)  # type: ignore[return-value]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {name: getattr(self, name) for name in self.channels}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        """
        Deserialize from dictionary.

        Keys other than the three channels (e.g. ``alpha``) are ignored.
        """
        missing = [name for name in cls.channels if name not in data]
        if missing:
            raise ValueError(
                f"{cls.__name__} expects keys {cls.channels}, missing {tuple(missing)}"
            )
        return cls(*(data[name] for name in cls.channels))

    @classmethod
    def coerce(cls, value: Any):
        """
        Build a component from an instance, a mapping or a 3-sequence.

        Args:
            value: ``cls`` instance (returned as-is), mapping with the channel
                keys, or a sequence of exactly three numbers.

        Raises:
            ValueError: If the value has none of the accepted shapes.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        if isinstance(value, Sequence) and not isinstance(value, str):
            if len(value) != 3:
                raise ValueError(
                    f"{cls.__name__} expects 3 channels, got {len(value)}"
                )
            return cls(*value)
        raise ValueError(
            f"Cannot build {cls.__name__} from {type(value).__name__}"
        )


# =============================================================================
# Components
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGB(_Component):
    """
    An RGB color.

    Attributes:
        r: Red, 0 to 255
        g: Green, 0 to 255
        b: Blue, 0 to 255
    """
    r: float
    g: float
    b: float

    channels: ClassVar[tuple[str, str, str]] = ("r", "g", "b")


@dataclass(frozen=True, slots=True)
class HSL(_Component):
    """
    An HSL color.

    Attributes:
        h: Hue, 0 to 1 relative to 360°
        s: Saturation, 0 to 1
        l: Lightness, 0 to 1
    """
    h: float
    s: float
    l: float

    channels: ClassVar[tuple[str, str, str]] = ("h", "s", "l")

    @property
    def degrees(self) -> float:
        """Hue in degrees (0-360)."""
        return self.h * 360


@dataclass(frozen=True, slots=True)
class YUV(_Component):
    """
    A YUV (YPbPr) color.

    Only used as a perceptual-difference space for similarity checks.

    Attributes:
        y: Luma, 16 to 235
        u: Blue minus luma, 16 to 240
        v: Red minus luma, 16 to 240
    """
    y: float
    u: float
    v: float

    channels: ClassVar[tuple[str, str, str]] = ("y", "u", "v")
