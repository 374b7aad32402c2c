# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Exceptions raised by Tinct.

All of them are ``ValueError`` subclasses, so callers that already guard
against bad input with ``except ValueError`` keep working.
"""


class ColorError(ValueError):
    """Base class for color construction and conversion failures."""


class MissingComponentError(ColorError):
    """A Color was constructed without any hex/RGB/HSL/YUV representation."""


class InvalidHexError(ColorError):
    """A hex string could not be normalized to six hex digits."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid hex value: {value}")
        self.value = value
