# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Tests for RGB-canonical color models."""

import numpy as np
import pytest

from tincture.schema import (
    ANSI16,
    ANSI256,
    CMYK,
    HSL,
    HWB,
    RGB,
    RYB,
    Hex,
)
from tincture.convert import rgb_models
from tincture.convert.rgb_models import (
    ansi16_to_rgb,
    ansi256_to_rgb,
    cmyk_to_rgb,
    hex_to_rgb,
    hsl_to_rgb,
    hwb_to_rgb,
    is_web_safe,
    rgb_to_ansi16,
    rgb_to_ansi256,
    rgb_to_cmy,
    rgb_to_cmyk,
    rgb_to_hcg,
    rgb_to_hex,
    rgb_to_hsi,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hwb,
    rgb_to_ryb,
    rgb_to_tsl,
    rgb_to_ycbcr_bt601,
    rgb_to_ycbcr_bt709,
    rgb_to_ycbcr_bt2020,
    rgb_to_ycocg,
    rgb_to_yccbccrc,
    rgb_to_ydbdr,
    rgb_to_yiq,
    rgb_to_ypbpr,
    ryb_to_rgb,
)


REBECCA = RGB(102.0, 51.0, 153.0)
WHITE = RGB(255.0, 255.0, 255.0)
BLACK = RGB(0.0, 0.0, 0.0)

SAMPLES = [
    REBECCA,
    WHITE,
    BLACK,
    RGB(255.0, 0.0, 0.0),
    RGB(0.0, 255.0, 0.0),
    RGB(12.0, 200.0, 77.0),
    RGB(128.0, 128.0, 128.0),
    RGB(250.0, 180.0, 5.0),
]

LOSSLESS_PAIRS = [
    (rgb_models.rgb_to_cmy, rgb_models.cmy_to_rgb),
    (rgb_models.rgb_to_cmyk, rgb_models.cmyk_to_rgb),
    (rgb_models.rgb_to_hsl, rgb_models.hsl_to_rgb),
    (rgb_models.rgb_to_hsv, rgb_models.hsv_to_rgb),
    (rgb_models.rgb_to_hwb, rgb_models.hwb_to_rgb),
    (rgb_models.rgb_to_hcg, rgb_models.hcg_to_rgb),
    (rgb_models.rgb_to_hsi, rgb_models.hsi_to_rgb),
    (rgb_models.rgb_to_hcy, rgb_models.hcy_to_rgb),
    (rgb_models.rgb_to_tsl, rgb_models.tsl_to_rgb),
    (rgb_models.rgb_to_ryb, rgb_models.ryb_to_rgb),
    (rgb_models.rgb_to_ycbcr_bt601, rgb_models.ycbcr_bt601_to_rgb),
    (rgb_models.rgb_to_ycbcr_bt709, rgb_models.ycbcr_bt709_to_rgb),
    (rgb_models.rgb_to_ycbcr_bt2020, rgb_models.ycbcr_bt2020_to_rgb),
    (rgb_models.rgb_to_xvycc, rgb_models.xvycc_to_rgb),
    (rgb_models.rgb_to_ypbpr, rgb_models.ypbpr_to_rgb),
    (rgb_models.rgb_to_ydbdr, rgb_models.ydbdr_to_rgb),
    (rgb_models.rgb_to_yiq, rgb_models.yiq_to_rgb),
    (rgb_models.rgb_to_ycocg, rgb_models.ycocg_to_rgb),
    (rgb_models.rgb_to_yccbccrc, rgb_models.yccbccrc_to_rgb),
]


class TestRoundtrip:
    """from_rgb then to_rgb must reproduce the input."""

    @pytest.mark.parametrize("forward,backward", LOSSLESS_PAIRS, ids=lambda f: f.__name__)
    def test_roundtrip(self, forward, backward):
        for rgb in SAMPLES:
            recovered = backward(forward(rgb))
            np.testing.assert_allclose(
                recovered.as_tuple(), rgb.as_tuple(), atol=1e-6,
                err_msg=f"{forward.__name__} failed for {rgb}",
            )

    def test_hex_roundtrip(self):
        for rgb in SAMPLES:
            assert hex_to_rgb(rgb_to_hex(rgb)) == rgb


class TestHex:

    def test_rebecca_purple(self):
        assert rgb_to_hex(REBECCA) == Hex("#663399")

    def test_lowercase(self):
        assert rgb_to_hex(RGB(171.0, 205.0, 239.0)).code == "#abcdef"

    def test_rounds_and_clamps(self):
        assert rgb_to_hex(RGB(300.0, -5.0, 127.5)).code == "#ff0080"

    def test_parse(self):
        assert hex_to_rgb(Hex("#663399")) == REBECCA

    def test_web_safe(self):
        assert is_web_safe(RGB(51.0, 102.0, 255.0))
        assert not is_web_safe(RGB(100.0, 51.0, 153.0))


class TestHexcone:

    def test_hsl_rebecca(self):
        hsl = rgb_to_hsl(REBECCA)
        assert hsl.hue == pytest.approx(270.0)
        assert hsl.saturation == pytest.approx(50.0)
        assert hsl.lightness == pytest.approx(40.0)

    def test_hsl_red(self):
        assert rgb_to_hsl(RGB(255.0, 0.0, 0.0)).as_tuple() == pytest.approx((0.0, 100.0, 50.0))

    def test_hsl_gray_has_zero_hue_and_saturation(self):
        hsl = rgb_to_hsl(RGB(128.0, 128.0, 128.0))
        assert hsl.hue == 0.0
        assert hsl.saturation == 0.0

    def test_hsl_to_rgb(self):
        rgb = hsl_to_rgb(HSL(270.0, 50.0, 40.0))
        np.testing.assert_allclose(rgb.as_tuple(), REBECCA.as_tuple(), atol=1e-9)

    def test_hsv_rebecca(self):
        hsv = rgb_to_hsv(REBECCA)
        assert hsv.as_tuple() == pytest.approx((270.0, 200.0 / 3.0, 60.0))

    def test_hwb_rebecca(self):
        assert rgb_to_hwb(REBECCA).as_tuple() == pytest.approx((270.0, 20.0, 40.0))

    def test_hwb_gray_when_saturated(self):
        """Whiteness + blackness >= 100 yields the gray w / (w + b)."""
        rgb = hwb_to_rgb(HWB(123.0, 60.0, 60.0))
        assert rgb.as_tuple() == pytest.approx((127.5, 127.5, 127.5))

    def test_hcg_pure_red(self):
        assert rgb_to_hcg(RGB(255.0, 0.0, 0.0)).as_tuple() == pytest.approx((0.0, 100.0, 0.0))

    def test_hsi_red(self):
        assert rgb_to_hsi(RGB(255.0, 0.0, 0.0)).as_tuple() == pytest.approx((0.0, 100.0, 100.0 / 3.0))

    def test_hsi_blue_hue(self):
        assert rgb_to_hsi(RGB(0.0, 0.0, 255.0)).hue == pytest.approx(240.0)


class TestCMYK:

    def test_black(self):
        assert rgb_to_cmyk(BLACK) == CMYK(0.0, 0.0, 0.0, 100.0)

    def test_red(self):
        assert rgb_to_cmyk(RGB(255.0, 0.0, 0.0)).as_tuple() == pytest.approx((0.0, 100.0, 100.0, 0.0))

    def test_rebecca(self):
        cmyk = rgb_to_cmyk(REBECCA)
        assert cmyk.as_tuple() == pytest.approx((100.0 / 3.0, 200.0 / 3.0, 0.0, 40.0))

    def test_cmyk_to_rgb(self):
        rgb = cmyk_to_rgb(CMYK(0.0, 0.0, 0.0, 50.0))
        assert rgb.as_tuple() == pytest.approx((127.5, 127.5, 127.5))

    def test_cmy_white(self):
        assert rgb_to_cmy(WHITE).as_tuple() == pytest.approx((0.0, 0.0, 0.0))


class TestTSL:

    def test_black(self):
        assert rgb_to_tsl(BLACK).as_tuple() == (0.0, 0.0, 0.0)

    def test_gray_has_no_saturation(self):
        tsl = rgb_to_tsl(RGB(128.0, 128.0, 128.0))
        assert tsl.saturation == pytest.approx(0.0)
        assert tsl.lightness == pytest.approx(128.0 / 255.0)

    def test_tint_in_unit_turn(self):
        for rgb in SAMPLES:
            assert 0.0 <= rgb_to_tsl(rgb).tint < 1.0


class TestRYB:

    def test_red_is_red(self):
        assert rgb_to_ryb(RGB(255.0, 0.0, 0.0)).as_tuple() == pytest.approx((255.0, 0.0, 0.0))

    def test_green_is_yellow_plus_blue(self):
        assert rgb_to_ryb(RGB(0.0, 255.0, 0.0)).as_tuple() == pytest.approx((0.0, 255.0, 255.0))

    def test_yellow_plus_blue_is_green(self):
        assert ryb_to_rgb(RYB(0.0, 255.0, 255.0)).as_tuple() == pytest.approx((0.0, 255.0, 0.0))


class TestANSI:

    @pytest.mark.parametrize("code", [30, 31, 34, 37, 91, 92, 97])
    def test_ansi16_palette_roundtrip(self, code):
        assert rgb_to_ansi16(ansi16_to_rgb(ANSI16(code))) == ANSI16(code)

    def test_ansi16_bright_red(self):
        assert rgb_to_ansi16(RGB(255.0, 0.0, 0.0)) == ANSI16(91)

    def test_ansi16_dim_red(self):
        assert rgb_to_ansi16(RGB(128.0, 0.0, 0.0)) == ANSI16(31)

    def test_ansi16_black(self):
        assert rgb_to_ansi16(RGB(10.0, 10.0, 10.0)) == ANSI16(30)

    @pytest.mark.parametrize("code", [16, 21, 196, 231, 232, 240, 244])
    def test_ansi256_palette_roundtrip(self, code):
        assert rgb_to_ansi256(ansi256_to_rgb(ANSI256(code))) == ANSI256(code)

    def test_ansi256_system_colors(self):
        assert ansi256_to_rgb(ANSI256(9)) == ansi16_to_rgb(ANSI16(91))

    def test_ansi256_red(self):
        assert rgb_to_ansi256(RGB(255.0, 0.0, 0.0)) == ANSI256(196)


class TestVideo:

    @pytest.mark.parametrize("forward", [rgb_to_ycbcr_bt601, rgb_to_ycbcr_bt709, rgb_to_ycbcr_bt2020])
    def test_ycbcr_studio_swing(self, forward):
        assert forward(WHITE).as_tuple() == pytest.approx((235.0, 128.0, 128.0))
        assert forward(BLACK).as_tuple() == pytest.approx((16.0, 128.0, 128.0))

    def test_ycbcr_601_red(self):
        ycbcr = rgb_to_ycbcr_bt601(RGB(255.0, 0.0, 0.0))
        assert ycbcr.y == pytest.approx(16.0 + 219.0 * 0.299)
        assert ycbcr.cr == pytest.approx(240.0)

    def test_ypbpr_white(self):
        assert rgb_to_ypbpr(WHITE).as_tuple() == pytest.approx((1.0, 0.0, 0.0), abs=1e-12)

    def test_ycocg_white(self):
        assert rgb_to_ycocg(WHITE).as_tuple() == pytest.approx((1.0, 0.0, 0.0))

    def test_ydbdr_white(self):
        assert rgb_to_ydbdr(WHITE).as_tuple() == pytest.approx((1.0, 0.0, 0.0), abs=1e-12)

    def test_yiq_white(self):
        assert rgb_to_yiq(WHITE).as_tuple() == pytest.approx((1.0, 0.0, 0.0), abs=1e-3)

    def test_yccbccrc_white_and_black(self):
        assert rgb_to_yccbccrc(WHITE).as_tuple() == pytest.approx((1.0, 0.0, 0.0), abs=1e-9)
        assert rgb_to_yccbccrc(BLACK).as_tuple() == pytest.approx((0.0, 0.0, 0.0), abs=1e-12)

    def test_yccbccrc_chroma_bounds(self):
        """Full blue and full red hit the top of the chroma range."""
        assert rgb_to_yccbccrc(RGB(0.0, 0.0, 255.0)).cbc == pytest.approx(0.5, abs=1e-3)
        assert rgb_to_yccbccrc(RGB(255.0, 0.0, 0.0)).crc == pytest.approx(0.5, abs=1e-3)
