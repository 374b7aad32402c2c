# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Operations built on top of resolved color representations.

Mixing, contrast, similarity, perceived brightness and categorical
predicates. Every function takes Color instances and returns either a new
Color or a plain value; inputs are never modified.
"""

from tinct.operations.classify import (
    ClassifierConfig,
    is_black,
    is_dark,
    is_darker_than,
    is_greenish,
    is_light,
    is_lighter_than,
    is_redish,
    is_white,
)
from tinct.operations.metrics import (
    are_similar,
    contrast,
    np_perceived_brightness,
    perceived_brightness,
)
from tinct.operations.mixing import mix, shade_blend

__all__ = [
    # Mixing
    "mix",
    "shade_blend",
    # Metrics
    "perceived_brightness",
    "np_perceived_brightness",
    "contrast",
    "are_similar",
    # Classification
    "ClassifierConfig",
    "is_dark",
    "is_light",
    "is_darker_than",
    "is_lighter_than",
    "is_redish",
    "is_greenish",
    "is_white",
    "is_black",
]
