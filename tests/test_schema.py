# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for color component types and their dict forms."""

import dataclasses

import pytest

from tinct.schema import HSL, RGB, YUV, ColorType


class TestRGB:

    def test_fields(self):
        c = RGB(r=17, g=119, b=170)
        assert (c.r, c.g, c.b) == (17, 119, 170)
        assert c.as_tuple() == (17, 119, 170)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            RGB(0, 0, 0).r = 1

    def test_value_equality(self):
        assert RGB(1, 2, 3) == RGB(1, 2, 3)
        assert RGB(1, 2, 3) != RGB(3, 2, 1)

    def test_to_dict_roundtrip(self):
        c = RGB(17, 119, 170)
        assert c.to_dict() == {"r": 17, "g": 119, "b": 170}
        assert RGB.from_dict(c.to_dict()) == c

    def test_from_dict_ignores_extra_keys(self):
        assert RGB.from_dict({"r": 1, "g": 2, "b": 3, "alpha": 0.5}) == RGB(1, 2, 3)

    def test_from_dict_missing_key(self):
        with pytest.raises(ValueError, match="missing"):
            RGB.from_dict({"r": 1, "g": 2})


class TestHSL:

    def test_degrees(self):
        assert HSL(0.5, 1, 0.5).degrees == 180

    def test_to_dict(self):
        assert HSL(0.5, 0.25, 1).to_dict() == {"h": 0.5, "s": 0.25, "l": 1}


class TestYUV:

    def test_channels(self):
        assert YUV.channels == ("y", "u", "v")
        assert YUV(16, 128, 128).as_tuple() == (16, 128, 128)


class TestCoerce:

    def test_instance_passthrough(self):
        c = RGB(1, 2, 3)
        assert RGB.coerce(c) is c

    def test_mapping(self):
        assert HSL.coerce({"h": 0.1, "s": 0.2, "l": 0.3}) == HSL(0.1, 0.2, 0.3)

    def test_sequence(self):
        assert RGB.coerce([1, 2, 3]) == RGB(1, 2, 3)
        assert YUV.coerce((16, 128, 128)) == YUV(16, 128, 128)

    def test_wrong_length(self):
        with pytest.raises(ValueError, match="3 channels"):
            RGB.coerce((1, 2, 3, 4))

    @pytest.mark.parametrize("value", ["123", 42, None])
    def test_unsupported(self, value):
        with pytest.raises(ValueError, match="Cannot build RGB"):
            RGB.coerce(value)


class TestColorType:

    def test_values(self):
        assert ColorType("rgba") is ColorType.RGBA
        assert {t.value for t in ColorType} == {"rgb", "rgba", "hsl", "hsla", "hex", "str"}
