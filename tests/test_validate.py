# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Tests for raw input validation."""

import math

import numpy as np
import pytest

from tincture.errors import InvalidInputError, UnknownSpaceError
from tincture.schema import ANSI16, ANSI256, HSL, RGB, ColorSpace, Hex
from tincture.convert.validate import normalize, parse_hex


class TestParseHex:

    @pytest.mark.parametrize("text,expected", [
        ("#663399", "#663399"),
        ("663399", "#663399"),
        ("#ABCDEF", "#abcdef"),
        ("#fff", "#ffffff"),
        ("0aF", "#00aaff"),
        ("  #663399 ", "#663399"),
    ])
    def test_valid(self, text, expected):
        assert parse_hex(text) == Hex(expected)

    @pytest.mark.parametrize("text", ["", "#", "#12345", "#1234567", "#ggg", "##fff", "rgb(0,0,0)"])
    def test_invalid(self, text):
        with pytest.raises(InvalidInputError, match="hex"):
            parse_hex(text)

    def test_not_a_string(self):
        with pytest.raises(InvalidInputError):
            parse_hex(0x663399)


class TestNormalizeShapes:

    def test_mapping_with_field_names(self):
        rgb = normalize("rgb", {"red": 102, "green": 51, "blue": 153})
        assert rgb == RGB(102.0, 51.0, 153.0)

    def test_mapping_with_aliases(self):
        assert normalize("rgb", {"r": 102, "g": 51, "b": 153}) == RGB(102.0, 51.0, 153.0)

    def test_sequence(self):
        assert normalize(ColorSpace.HSL, (270, 50, 40)) == HSL(270.0, 50.0, 40.0)

    def test_numpy_array(self):
        assert normalize("rgb", np.array([1, 2, 3])) == RGB(1.0, 2.0, 3.0)

    def test_numpy_scalars(self):
        raw = {"red": np.float64(1.5), "green": np.int64(2), "blue": np.uint8(3)}
        assert normalize("rgb", raw) == RGB(1.5, 2.0, 3.0)

    def test_instance_is_revalidated(self):
        assert normalize("rgb", RGB(1.0, 2.0, 3.0)) == RGB(1.0, 2.0, 3.0)
        with pytest.raises(InvalidInputError):
            normalize("rgb", RGB(-1.0, 2.0, 3.0))

    def test_values_are_floats(self):
        rgb = normalize("rgb", (1, 2, 3))
        assert all(isinstance(c, float) for c in rgb.as_tuple())

    def test_case_insensitive_space(self):
        assert normalize("RGB", (1, 2, 3)) == RGB(1.0, 2.0, 3.0)

    def test_hex_string(self):
        assert normalize("hex", "#FFF") == Hex("#ffffff")

    def test_hex_mapping(self):
        assert normalize("hex", {"hex": "663399"}) == Hex("#663399")

    def test_hex_instance_is_normalized(self):
        assert normalize("hex", Hex("ABC")) == Hex("#aabbcc")

    def test_working_space_uses_rgb_fields(self):
        assert normalize("adobe_98_rgb", (10, 20, 30)) == RGB(10.0, 20.0, 30.0)

    @pytest.mark.parametrize("space,raw,expected", [
        ("ansi256", 196, ANSI256(196)),
        ("ansi256", 0, ANSI256(0)),
        ("ansi256", np.int64(21), ANSI256(21)),
        ("ansi16", 31, ANSI16(31)),
        ("ansi16", 97.0, ANSI16(97)),
    ])
    def test_bare_number_for_single_field_space(self, space, raw, expected):
        assert normalize(space, raw) == expected


class TestNormalizeRejects:

    def test_rgb_out_of_range(self):
        with pytest.raises(InvalidInputError, match="red"):
            normalize("rgb", {"red": -49, "green": 135, "blue": 166})

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            normalize("rgb", (256, 0, 0))

    def test_error_names_space(self):
        with pytest.raises(InvalidInputError) as exc_info:
            normalize("cmyk", (0, 0, 0, 101))
        assert exc_info.value.space == "cmyk"
        assert "key" in str(exc_info.value)

    @pytest.mark.parametrize("bad", [True, "12", None, math.nan, math.inf, -math.inf])
    def test_non_numbers(self, bad):
        with pytest.raises(InvalidInputError):
            normalize("rgb", (bad, 0, 0))

    def test_missing_field(self):
        with pytest.raises(InvalidInputError, match="missing"):
            normalize("rgb", {"red": 1, "green": 2})

    def test_unknown_field(self):
        with pytest.raises(InvalidInputError, match="unknown field"):
            normalize("rgb", {"red": 1, "green": 2, "blue": 3, "alpha": 1})

    def test_duplicate_field_via_alias(self):
        with pytest.raises(InvalidInputError, match="more than once"):
            normalize("rgb", {"red": 1, "r": 1, "green": 2, "blue": 3})

    def test_wrong_arity(self):
        with pytest.raises(InvalidInputError, match="expected 3 components"):
            normalize("rgb", (1, 2))

    def test_string_is_not_a_sequence(self):
        with pytest.raises(InvalidInputError, match="unsupported"):
            normalize("rgb", "123")

    def test_bare_number_still_range_checked(self):
        with pytest.raises(InvalidInputError, match="whole number"):
            normalize("ansi256", 3.5)
        with pytest.raises(InvalidInputError, match="30-37 or 90-97"):
            normalize("ansi16", 40)

    def test_bare_bool_rejected(self):
        with pytest.raises(InvalidInputError, match="unsupported"):
            normalize("ansi256", True)

    def test_bare_number_needs_single_field_space(self):
        with pytest.raises(InvalidInputError, match="unsupported"):
            normalize("rgb", 128)

    def test_wrong_value_class(self):
        with pytest.raises(InvalidInputError, match="expected HSL"):
            normalize("hsl", RGB(1.0, 2.0, 3.0))

    def test_hue_is_half_open(self):
        assert normalize("hsl", (359.9, 0, 0)).hue == 359.9
        with pytest.raises(InvalidInputError, match="hue"):
            normalize("hsl", (360, 0, 0))

    def test_ansi16_gap(self):
        assert normalize("ansi16", (31,)) == ANSI16(31)
        with pytest.raises(InvalidInputError, match="30-37 or 90-97"):
            normalize("ansi16", (40,))

    def test_ansi256_integral(self):
        assert normalize("ansi256", {"code": 3.0}) == ANSI256(3)
        with pytest.raises(InvalidInputError, match="whole number"):
            normalize("ansi256", {"code": 3.5})

    def test_unknown_space(self):
        with pytest.raises(UnknownSpaceError):
            normalize("oklab", (0.5, 0.0, 0.0))

    def test_unknown_space_is_key_error(self):
        with pytest.raises(KeyError):
            normalize(42, (1, 2, 3))
