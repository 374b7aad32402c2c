# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for categorical predicates (dark/light, redish/greenish, white/black)."""

import dataclasses

import pytest

from tinct import ClassifierConfig, Color


def c(value):
    return Color.from_string(value)


DARK = ["#000", "#2b2b2b", "#777", "#17a"]
LIGHT = ["#fff", "#e0e0e0", "#99aaff"]

ORDERED_PAIRS = [
    ("#000", "#fff"),
    ("#272727", "#c0c0c0"),
    ("#17a", "#1489c4"),
]


class TestDarkLight:

    @pytest.mark.parametrize("value", DARK)
    def test_dark(self, value):
        assert c(value).is_dark()
        assert not c(value).is_light()

    @pytest.mark.parametrize("value", LIGHT)
    def test_light(self, value):
        assert c(value).is_light()
        assert not c(value).is_dark()

    def test_threshold_is_inclusive(self):
        color = c("#17a")
        config = ClassifierConfig(dark_threshold=color.perceived_brightness)
        assert color.is_dark(config)

    def test_custom_threshold(self):
        config = ClassifierConfig(dark_threshold=200)
        assert c("#99aaff").is_dark(config)
        assert not c("#fff").is_dark(config)


class TestDarkerLighterThan:

    @pytest.mark.parametrize("darker, lighter", ORDERED_PAIRS)
    def test_darker_than(self, darker, lighter):
        assert c(darker).is_darker_than(c(lighter))
        assert not c(lighter).is_darker_than(c(darker))

    @pytest.mark.parametrize("darker, lighter", ORDERED_PAIRS)
    def test_lighter_than(self, darker, lighter):
        assert c(lighter).is_lighter_than(c(darker))
        assert not c(darker).is_lighter_than(c(lighter))

    def test_equal_is_neither(self):
        assert not c("#17a").is_darker_than(c("#17a"))
        assert not c("#17a").is_lighter_than(c("#17a"))


class TestRedish:

    @pytest.mark.parametrize("value", [
        "hsl(340, 100%, 50%)",
        "hsl(350, 100%, 50%)",
        "hsl(0, 100%, 50%)",
        "hsl(20, 100%, 50%)",
        "hsl(22, 100%, 50%)",
        "hsl(0, 100%, 90%)",
        "hsl(0, 100%, 80%)",
        "hsl(0, 100%, 70%)",
        "hsl(0, 100%, 60%)",
        "hsl(0, 100%, 25%)",
        "hsl(0, 100%, 20%)",
        "hsl(0, 50%, 20%)",
        "hsl(0, 30%, 20%)",
    ])
    def test_redish(self, value):
        assert c(value).is_redish()

    @pytest.mark.parametrize("value", [
        "hsl(40, 100%, 50%)",
        "hsl(60, 100%, 50%)",
        "hsl(80, 100%, 50%)",
        "hsl(120, 100%, 50%)",
        "hsl(160, 100%, 50%)",
        "hsl(200, 100%, 50%)",
        "hsl(240, 100%, 50%)",
        "hsl(280, 100%, 50%)",
        "hsl(320, 100%, 50%)",
        "hsl(330, 100%, 50%)",
        "hsl(0, 100%, 96%)",
        "hsl(0, 100%, 99%)",
        "hsl(0, 100%, 100%)",
        "hsl(0, 5%, 80%)",
        "hsl(0, 5%, 40%)",
        "hsl(0, 5%, 0%)",
    ])
    def test_not_redish(self, value):
        assert not c(value).is_redish()

    def test_custom_saturation_floor(self):
        config = ClassifierConfig(min_saturation=0.01)
        assert c("hsl(0, 5%, 40%)").is_redish(config)


class TestGreenish:

    @pytest.mark.parametrize("value", [
        "hsl(90, 100%, 50%)",
        "hsl(100, 100%, 50%)",
        "hsl(120, 100%, 50%)",
        "hsl(130, 100%, 50%)",
        "hsl(140, 100%, 50%)",
        "hsl(150, 100%, 50%)",
        "hsl(160, 100%, 50%)",
    ])
    def test_greenish(self, value):
        assert c(value).is_greenish()

    @pytest.mark.parametrize("value", [
        "hsl(180, 100%, 50%)",
        "hsl(240, 100%, 50%)",
        "hsl(300, 100%, 50%)",
        "hsl(350, 100%, 50%)",
        "hsl(00, 100%, 50%)",
        "hsl(40, 100%, 50%)",
        "hsl(80, 100%, 50%)",
        "hsl(120, 100%, 99%)",
        "hsl(120, 100%, 100%)",
        "hsl(120, 5%, 80%)",
        "hsl(120, 5%, 20%)",
        "hsl(120, 5%, 0%)",
    ])
    def test_not_greenish(self, value):
        assert not c(value).is_greenish()


class TestWhiteBlack:

    @pytest.mark.parametrize("color", [
        c("#fff"),
        c("rgba(255, 255, 255, 0.5)"),
        c("hsl(0, 0%, 100%)"),
        c("#000").lighten(100),
    ], ids=["hex", "rgba", "hsl", "lightened"])
    def test_white(self, color):
        assert color.is_white()

    @pytest.mark.parametrize("color", [
        c("#000"),
        c("#17a"),
        c("hsl(24, 99%, 99%)"),
        c("#fff").darken(10),
    ], ids=["black", "blue", "near-white", "darkened"])
    def test_not_white(self, color):
        assert not color.is_white()

    @pytest.mark.parametrize("color", [
        c("#000"),
        c("rgba(0, 0, 0, 0.5)"),
        c("hsl(0, 0%, 0%)"),
        c("#fff").darken(100),
    ], ids=["hex", "rgba", "hsl", "darkened"])
    def test_black(self, color):
        assert color.is_black()

    @pytest.mark.parametrize("color", [
        c("#fff"),
        c("#17a"),
        c("hsl(24, 0.5%, 1.5%)"),
        c("#000").lighten(10),
    ], ids=["white", "blue", "near-black", "lightened"])
    def test_not_black(self, color):
        assert not color.is_black()


class TestClassifierConfig:

    def test_defaults(self):
        config = ClassifierConfig()
        assert config.dark_threshold == 120
        assert config.min_saturation == 0.201

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ClassifierConfig().dark_threshold = 1
