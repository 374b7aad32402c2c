# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from enum import Enum


class CSSFormat(Enum):
    """CSS notation to render a color in."""

    HEX = "hex"
    RGBA = "rgba"
    HSLA = "hsla"


def format_number(value: float) -> str:
    """
    Render a number the way it is written in CSS.

    Integral values drop the fractional part (``1.0`` → ``"1"``); everything
    else uses the shortest round-tripping representation (``0.1`` → ``"0.1"``).
    """
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)
