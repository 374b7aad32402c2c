# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for mixing, contrast, similarity and perceived brightness."""

import numpy as np
import pytest

from tinct import RGB, Color
from tinct.operations import (
    are_similar,
    contrast,
    mix,
    np_perceived_brightness,
    perceived_brightness,
    shade_blend,
)


def c(value):
    return Color.from_string(value)


# =============================================================================
# Mixing
# =============================================================================


class TestMix:

    def test_black_and_white_to_grey(self):
        mixed = c("#000").mix_with(c("#fff"), 50)
        assert isinstance(mixed, Color)
        assert mixed.rgb == RGB(127, 127, 127)
        assert mixed.alpha == 1.0

    @pytest.mark.parametrize("weight, alpha", [(25, 0.25), (50, 0.5), (75, 0.75)])
    def test_alpha_blends_with_weight(self, weight, alpha):
        opaque = c("#000").with_alpha(1.0)
        transparent = c("#000").with_alpha(0.0)
        mixed = opaque.mix_with(transparent, weight)
        assert mixed.rgb == RGB(0, 0, 0)
        assert mixed.alpha == alpha

    def test_blue_and_red(self):
        mixed = c("#0000ff").mix_with(c("#ff0000"), 50)
        assert mixed.rgb == RGB(127, 0, 127)
        assert mixed.alpha == 1.0

    def test_transparent_green_and_blue(self):
        mixed = c("#00ff00").with_alpha(0.0).mix_with(c("#0000ff").with_alpha(0.0), 50)
        assert mixed.rgb == RGB(0, 127, 127)
        assert mixed.alpha == 0.0

    def test_weight_extremes(self):
        first, second = c("#17a"), c("#8dbb36")
        assert mix(first, second, 100).hex == first.hex
        assert mix(first, second, 0).hex == second.hex

    def test_default_weight(self):
        assert Color.mix(Color.BLACK, Color.WHITE).hex == "7f7f7f"

    def test_inputs_untouched(self):
        first, second = c("#000"), c("#fff")
        mix(first, second, 30)
        assert first.hex == "000000"
        assert second.hex == "ffffff"


class TestShadeBlend:

    def test_towards_white(self):
        assert shade_blend(0.5, Color.BLACK).hex == "808080"

    def test_towards_black(self):
        assert shade_blend(-0.5, Color.WHITE).hex == "808080"

    def test_full_amount_reaches_target(self):
        assert shade_blend(1.0, c("#17a")).hex == "ffffff"
        assert shade_blend(-1.0, c("#17a")).hex == "000000"

    def test_zero_is_identity(self):
        assert shade_blend(0, c("#17a")).hex == "1177aa"

    def test_explicit_target(self):
        assert Color.shade_blend(0.5, c("#ff0000"), c("#0000ff")).hex == "800080"

    def test_differs_from_mix(self):
        # mix floors, shade_blend rounds half-up
        red, blue = c("#ff0000"), c("#0000ff")
        assert mix(blue, red, 50).hex == "7f007f"
        assert shade_blend(0.5, red, blue).hex == "800080"

    def test_alpha_ignored(self):
        assert shade_blend(0.5, Color.BLACK.with_alpha(0.2)).alpha == 1


# =============================================================================
# Metrics
# =============================================================================


class TestPerceivedBrightness:

    def test_extremes(self):
        assert perceived_brightness(Color.BLACK) == 0
        assert perceived_brightness(Color.WHITE) == pytest.approx(255)

    def test_ignores_alpha(self):
        color = c("#17a")
        assert perceived_brightness(color.with_alpha(0)) == perceived_brightness(color)

    def test_batch_matches_scalar(self):
        pixels = np.random.RandomState(42).randint(0, 256, size=(64, 3))
        expected = [perceived_brightness(Color.from_rgb(RGB(*map(int, p)))) for p in pixels]
        np.testing.assert_allclose(np_perceived_brightness(pixels), expected)


class TestContrast:

    def test_black_white(self):
        assert contrast(Color.BLACK, Color.WHITE) > 10

    def test_same_color(self):
        assert contrast(c("#17a"), c("#17a")) == 1.0

    def test_symmetric(self):
        assert contrast(c("#17a"), Color.WHITE) == contrast(Color.WHITE, c("#17a"))

    def test_blue_on_white(self):
        assert c("#17a").contrast_to(Color.WHITE) == pytest.approx(2.52, abs=0.01)

    def test_static_alias(self):
        assert Color.contrast(Color.BLACK, Color.WHITE) == contrast(Color.BLACK, Color.WHITE)


class TestSimilarity:

    @pytest.mark.parametrize("first, second, accuracy", [
        ("#000", "#000", 1.0),
        ("#000", "#010101", 0.9),
        ("#000", "#050505", 0.9),
        ("#000", "#080808", 0.9),
        ("#ff0000", "#fe0000", 0.9),
        ("#ff0000", "#aa0000", 0.8),
        ("#0000ff", "#000055", 0.6),
    ])
    def test_similar(self, first, second, accuracy):
        assert c(first).is_similar_to(c(second), accuracy)

    @pytest.mark.parametrize("first, second, accuracy", [
        ("#000", "#080808", 1.0),
        ("#000", "#090909", 0.98),
        ("#ff00ff", "#00ff55", 0.3),
        ("#ff0000", "#00ffff", 0.2),
        ("#000", "#fff", 0.15),
    ])
    def test_not_similar(self, first, second, accuracy):
        assert not c(first).is_similar_to(c(second), accuracy)

    def test_default_accuracy(self):
        assert are_similar(c("#17a"), c("#17a"))
        assert not are_similar(c("#000"), c("#080808"))
        assert Color.are_similar(c("#17a"), c("#17a"))
