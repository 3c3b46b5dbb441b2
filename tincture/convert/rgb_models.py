# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
RGB-canonical color models.

Every space here is defined directly in terms of gamma-encoded sRGB and
converts to and from the RGB hub with a closed-form formula. Each function
takes one value and returns one value; none reads any other leaf space.

Channel convention: RGB values are 0-255; formulas work on [0, 1].
"""

from __future__ import annotations

import math

import numpy as np

from tincture.schema import (
    ANSI16,
    ANSI256,
    CMY,
    CMYK,
    HCG,
    HCY,
    HSI,
    HSL,
    HSV,
    HWB,
    RGB,
    RYB,
    TSL,
    YIQ,
    Hex,
    XvYCC,
    YCbCr,
    YcCbcCrc,
    YCoCg,
    YDbDr,
    YPbPr,
)
from tincture.convert.colorspace import linear_to_srgb, srgb_to_linear
from tincture.convert.matrix import as_matrix, invert, matrix_vector_multiply


# =============================================================================
# Helpers
# =============================================================================


def _unit(rgb: RGB) -> tuple[float, float, float]:
    return rgb.red / 255.0, rgb.green / 255.0, rgb.blue / 255.0


def _from_unit(r: float, g: float, b: float) -> RGB:
    return RGB(red=r * 255.0, green=g * 255.0, blue=b * 255.0)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _byte(value: float) -> int:
    """Round to the nearest integer and clamp to 0-255."""
    return min(255, max(0, _round_half_up(value)))


def _hexcone_hue(r: float, g: float, b: float) -> float:
    """Hue in degrees [0, 360) shared by the HSL/HSV/HWB/HCG/HCY family."""
    cmax = max(r, g, b)
    delta = cmax - min(r, g, b)
    if delta == 0:
        return 0.0
    if cmax == r:
        sector = ((g - b) / delta) % 6.0
    elif cmax == g:
        sector = (b - r) / delta + 2.0
    else:
        sector = (r - g) / delta + 4.0
    return (60.0 * sector) % 360.0


def _hue_to_rgb(hue: float, chroma: float) -> tuple[float, float, float]:
    """Fully saturated RGB triple with the given hue and chroma (min channel = 0)."""
    h = (hue % 360.0) / 60.0
    x = chroma * (1.0 - abs(h % 2.0 - 1.0))
    return (
        (chroma, x, 0.0),
        (x, chroma, 0.0),
        (0.0, chroma, x),
        (0.0, x, chroma),
        (x, 0.0, chroma),
        (chroma, 0.0, x),
    )[min(int(h), 5)]


# =============================================================================
# Hex
# =============================================================================


def rgb_to_hex(rgb: RGB) -> Hex:
    """
    Convert RGB to a lowercase ``#rrggbb`` code.

    Channels are rounded half-up and clamped to 0-255.
    """
    return Hex(f"#{_byte(rgb.red):02x}{_byte(rgb.green):02x}{_byte(rgb.blue):02x}")


def hex_to_rgb(value: Hex) -> RGB:
    """Convert a normalized ``#rrggbb`` code to RGB."""
    code = value.code.lstrip("#")
    return RGB(
        red=float(int(code[0:2], 16)),
        green=float(int(code[2:4], 16)),
        blue=float(int(code[4:6], 16)),
    )


def is_web_safe(rgb: RGB) -> bool:
    """True if every rounded channel is one of the 216 web-safe levels (multiples of 51)."""
    return all(_byte(c) % 51 == 0 for c in rgb.as_tuple())


# =============================================================================
# CMY / CMYK
# =============================================================================


def rgb_to_cmy(rgb: RGB) -> CMY:
    r, g, b = _unit(rgb)
    return CMY(cyan=(1.0 - r) * 100.0, magenta=(1.0 - g) * 100.0, yellow=(1.0 - b) * 100.0)


def cmy_to_rgb(cmy: CMY) -> RGB:
    return _from_unit(1.0 - cmy.cyan / 100.0, 1.0 - cmy.magenta / 100.0, 1.0 - cmy.yellow / 100.0)


def rgb_to_cmyk(rgb: RGB) -> CMYK:
    """
    Convert RGB to CMYK (percentages).

    Pure black has no defined ink mix; it is reported as K=100 with zero CMY.
    """
    r, g, b = _unit(rgb)
    key = 1.0 - max(r, g, b)
    if key >= 1.0:
        return CMYK(cyan=0.0, magenta=0.0, yellow=0.0, key=100.0)
    scale = 1.0 - key
    return CMYK(
        cyan=(1.0 - r - key) / scale * 100.0,
        magenta=(1.0 - g - key) / scale * 100.0,
        yellow=(1.0 - b - key) / scale * 100.0,
        key=key * 100.0,
    )


def cmyk_to_rgb(cmyk: CMYK) -> RGB:
    white = 1.0 - cmyk.key / 100.0
    return _from_unit(
        (1.0 - cmyk.cyan / 100.0) * white,
        (1.0 - cmyk.magenta / 100.0) * white,
        (1.0 - cmyk.yellow / 100.0) * white,
    )


# =============================================================================
# Hexcone Models (HSL, HSV, HWB, HCG, HCY)
# =============================================================================


def rgb_to_hsl(rgb: RGB) -> HSL:
    r, g, b = _unit(rgb)
    cmax, cmin = max(r, g, b), min(r, g, b)
    lightness = (cmax + cmin) / 2.0
    delta = cmax - cmin
    saturation = 0.0 if delta == 0 else delta / (1.0 - abs(2.0 * lightness - 1.0))
    return HSL(
        hue=_hexcone_hue(r, g, b),
        saturation=saturation * 100.0,
        lightness=lightness * 100.0,
    )


def hsl_to_rgb(hsl: HSL) -> RGB:
    s, l = hsl.saturation / 100.0, hsl.lightness / 100.0
    chroma = (1.0 - abs(2.0 * l - 1.0)) * s
    m = l - chroma / 2.0
    r, g, b = _hue_to_rgb(hsl.hue, chroma)
    return _from_unit(r + m, g + m, b + m)


def rgb_to_hsv(rgb: RGB) -> HSV:
    r, g, b = _unit(rgb)
    cmax = max(r, g, b)
    delta = cmax - min(r, g, b)
    saturation = 0.0 if cmax == 0 else delta / cmax
    return HSV(hue=_hexcone_hue(r, g, b), saturation=saturation * 100.0, value=cmax * 100.0)


def hsv_to_rgb(hsv: HSV) -> RGB:
    s, v = hsv.saturation / 100.0, hsv.value / 100.0
    chroma = v * s
    m = v - chroma
    r, g, b = _hue_to_rgb(hsv.hue, chroma)
    return _from_unit(r + m, g + m, b + m)


def rgb_to_hwb(rgb: RGB) -> HWB:
    r, g, b = _unit(rgb)
    return HWB(
        hue=_hexcone_hue(r, g, b),
        whiteness=min(r, g, b) * 100.0,
        blackness=(1.0 - max(r, g, b)) * 100.0,
    )


def hwb_to_rgb(hwb: HWB) -> RGB:
    """
    Convert HWB to RGB.

    When whiteness + blackness >= 100 the color is the gray w / (w + b).
    """
    w, bk = hwb.whiteness / 100.0, hwb.blackness / 100.0
    if w + bk >= 1.0:
        gray = w / (w + bk)
        return _from_unit(gray, gray, gray)
    value = 1.0 - bk
    return hsv_to_rgb(HSV(hue=hwb.hue, saturation=(1.0 - w / value) * 100.0, value=value * 100.0))


def rgb_to_hcg(rgb: RGB) -> HCG:
    r, g, b = _unit(rgb)
    cmax, cmin = max(r, g, b), min(r, g, b)
    chroma = cmax - cmin
    grayscale = cmin / (1.0 - chroma) if chroma < 1.0 else 0.0
    return HCG(hue=_hexcone_hue(r, g, b), chroma=chroma * 100.0, grayscale=grayscale * 100.0)


def hcg_to_rgb(hcg: HCG) -> RGB:
    c, gray = hcg.chroma / 100.0, hcg.grayscale / 100.0
    if c == 0:
        return _from_unit(gray, gray, gray)
    pure = _hue_to_rgb(hcg.hue, 1.0)
    base = (1.0 - c) * gray
    return _from_unit(*(c * p + base for p in pure))


_LUMA_601 = (0.299, 0.587, 0.114)


def _luma_601(r: float, g: float, b: float) -> float:
    return _LUMA_601[0] * r + _LUMA_601[1] * g + _LUMA_601[2] * b


def rgb_to_hcy(rgb: RGB) -> HCY:
    r, g, b = _unit(rgb)
    chroma = max(r, g, b) - min(r, g, b)
    return HCY(hue=_hexcone_hue(r, g, b), chroma=chroma * 100.0, luma=_luma_601(r, g, b) * 100.0)


def hcy_to_rgb(hcy: HCY) -> RGB:
    r, g, b = _hue_to_rgb(hcy.hue, hcy.chroma / 100.0)
    m = hcy.luma / 100.0 - _luma_601(r, g, b)
    return _from_unit(r + m, g + m, b + m)


# =============================================================================
# HSI (geometric hue)
# =============================================================================


def rgb_to_hsi(rgb: RGB) -> HSI:
    r, g, b = _unit(rgb)
    intensity = (r + g + b) / 3.0
    saturation = 0.0 if intensity == 0 else 1.0 - min(r, g, b) / intensity

    numerator = 0.5 * ((r - g) + (r - b))
    denominator = math.sqrt((r - g) ** 2 + (r - b) * (g - b))
    if denominator == 0:
        hue = 0.0
    else:
        theta = math.degrees(math.acos(max(-1.0, min(1.0, numerator / denominator))))
        hue = 360.0 - theta if b > g else theta

    return HSI(hue=hue % 360.0, saturation=saturation * 100.0, intensity=intensity * 100.0)


def hsi_to_rgb(hsi: HSI) -> RGB:
    h = hsi.hue % 360.0
    s, i = hsi.saturation / 100.0, hsi.intensity / 100.0

    sector = int(h // 120.0)
    angle = math.radians(h - 120.0 * sector)
    low = i * (1.0 - s)
    high = i * (1.0 + s * math.cos(angle) / math.cos(math.radians(60.0) - angle))
    rest = 3.0 * i - (low + high)

    if sector == 0:
        return _from_unit(high, rest, low)
    if sector == 1:
        return _from_unit(low, high, rest)
    return _from_unit(rest, low, high)


# =============================================================================
# TSL
# =============================================================================


def rgb_to_tsl(rgb: RGB) -> TSL:
    """
    Convert RGB to tint / saturation / lightness.

    Tint is the polar angle of the normalized chromaticity, in turns [0, 1).
    Black has no chromaticity and maps to (0, 0, 0).
    """
    r, g, b = _unit(rgb)
    total = r + g + b
    if total == 0:
        return TSL(tint=0.0, saturation=0.0, lightness=0.0)

    r_prime = r / total - 1.0 / 3.0
    g_prime = g / total - 1.0 / 3.0
    saturation = math.sqrt(9.0 / 5.0 * (r_prime ** 2 + g_prime ** 2))
    if saturation == 0:
        tint = 0.0
    else:
        tint = (math.atan2(r_prime, g_prime) / (2.0 * math.pi) + 0.25) % 1.0
    return TSL(tint=tint, saturation=saturation, lightness=_luma_601(r, g, b))


def tsl_to_rgb(tsl: TSL) -> RGB:
    if tsl.lightness == 0:
        return _from_unit(0.0, 0.0, 0.0)

    radius = tsl.saturation * math.sqrt(5.0) / 3.0
    angle = 2.0 * math.pi * (tsl.tint - 0.25)
    r_norm = radius * math.sin(angle) + 1.0 / 3.0
    g_norm = radius * math.cos(angle) + 1.0 / 3.0
    b_norm = 1.0 - r_norm - g_norm

    total = tsl.lightness / _luma_601(r_norm, g_norm, b_norm)
    return _from_unit(r_norm * total, g_norm * total, b_norm * total)


# =============================================================================
# RYB (painter's wheel)
# =============================================================================


def rgb_to_ryb(rgb: RGB) -> RYB:
    """
    Convert RGB to RYB by removing white, moving green into yellow/blue and
    renormalizing to the original peak. Exactly invertible by ryb_to_rgb.
    """
    r, g, b = rgb.as_tuple()
    white = min(r, g, b)
    r, g, b = r - white, g - white, b - white
    peak_green = max(r, g, b)

    yellow = min(r, g)
    r -= yellow
    g -= yellow
    if b > 0 and g > 0:
        b /= 2.0
        g /= 2.0
    yellow += g
    b += g

    peak_yellow = max(r, yellow, b)
    if peak_yellow > 0:
        n = peak_green / peak_yellow
        r, yellow, b = r * n, yellow * n, b * n

    return RYB(red=r + white, yellow=yellow + white, blue=b + white)


def ryb_to_rgb(ryb: RYB) -> RGB:
    r, y, b = ryb.as_tuple()
    white = min(r, y, b)
    r, y, b = r - white, y - white, b - white
    peak_yellow = max(r, y, b)

    g = min(y, b)
    y -= g
    b -= g
    if b > 0 and g > 0:
        b *= 2.0
        g *= 2.0
    r += y
    g += y

    peak_green = max(r, g, b)
    if peak_green > 0:
        n = peak_yellow / peak_green
        r, g, b = r * n, g * n, b * n

    return RGB(red=r + white, green=g + white, blue=b + white)


# =============================================================================
# ANSI Terminal Palettes
# =============================================================================


def rgb_to_ansi16(rgb: RGB) -> ANSI16:
    """Nearest ANSI 16-color foreground code (30-37, bright 90-97)."""
    r, g, b = (_byte(c) / 255.0 for c in rgb.as_tuple())
    value = _round_half_up(_round_half_up(max(r, g, b) * 100.0) / 50.0)
    if value == 0:
        return ANSI16(30)
    code = 30 + ((_round_half_up(b) << 2) | (_round_half_up(g) << 1) | _round_half_up(r))
    if value == 2:
        code += 60
    return ANSI16(code)


def ansi16_to_rgb(ansi: ANSI16) -> RGB:
    color = ansi.code % 10
    bright = ansi.code > 50

    if color in (0, 7):
        level = (color + (3.5 if bright else 0.0)) / 10.5 * 255.0
        return RGB(red=level, green=level, blue=level)

    scale = (1.0 if bright else 0.5) * 255.0
    return RGB(
        red=(color & 1) * scale,
        green=((color >> 1) & 1) * scale,
        blue=((color >> 2) & 1) * scale,
    )


def rgb_to_ansi256(rgb: RGB) -> ANSI256:
    """Nearest xterm-256 index: grayscale ramp for neutrals, 6×6×6 cube otherwise."""
    r, g, b = (_byte(c) for c in rgb.as_tuple())
    if r == g == b:
        if r < 8:
            return ANSI256(16)
        if r > 248:
            return ANSI256(231)
        return ANSI256(_round_half_up((r - 8) / 247.0 * 24.0) + 232)
    return ANSI256(
        16
        + 36 * _round_half_up(r / 255.0 * 5.0)
        + 6 * _round_half_up(g / 255.0 * 5.0)
        + _round_half_up(b / 255.0 * 5.0)
    )


def ansi256_to_rgb(ansi: ANSI256) -> RGB:
    code = ansi.code
    if code < 8:
        return ansi16_to_rgb(ANSI16(30 + code))
    if code < 16:
        return ansi16_to_rgb(ANSI16(90 + code - 8))
    if code >= 232:
        level = (code - 232) * 10.0 + 8.0
        return RGB(red=level, green=level, blue=level)

    code -= 16
    remainder = code % 36
    return RGB(
        red=(code // 36) / 5.0 * 255.0,
        green=(remainder // 6) / 5.0 * 255.0,
        blue=(remainder % 6) / 5.0 * 255.0,
    )


# =============================================================================
# Luma / Color-Difference Video Encodings
# =============================================================================

# (Kr, Kb) per ITU-R recommendation
_BT601 = (0.299, 0.114)
_BT709 = (0.2126, 0.0722)
_BT2020 = (0.2627, 0.0593)


def _luma_chroma(rgb: RGB, kr: float, kb: float) -> tuple[float, float, float]:
    """Analog Y'PbPr components: Y 0-1, Pb/Pr -0.5-0.5."""
    r, g, b = _unit(rgb)
    y = kr * r + (1.0 - kr - kb) * g + kb * b
    return y, (b - y) / (2.0 * (1.0 - kb)), (r - y) / (2.0 * (1.0 - kr))


def _from_luma_chroma(y: float, pb: float, pr: float, kr: float, kb: float) -> RGB:
    r = y + 2.0 * (1.0 - kr) * pr
    b = y + 2.0 * (1.0 - kb) * pb
    g = (y - kr * r - kb * b) / (1.0 - kr - kb)
    return _from_unit(r, g, b)


def _to_studio(y: float, pb: float, pr: float) -> tuple[float, float, float]:
    return 16.0 + 219.0 * y, 128.0 + 224.0 * pb, 128.0 + 224.0 * pr


def _from_studio(y: float, cb: float, cr: float) -> tuple[float, float, float]:
    return (y - 16.0) / 219.0, (cb - 128.0) / 224.0, (cr - 128.0) / 224.0


def rgb_to_ycbcr_bt601(rgb: RGB) -> YCbCr:
    return YCbCr(*_to_studio(*_luma_chroma(rgb, *_BT601)))


def ycbcr_bt601_to_rgb(ycbcr: YCbCr) -> RGB:
    return _from_luma_chroma(*_from_studio(*ycbcr.as_tuple()), *_BT601)


def rgb_to_ycbcr_bt709(rgb: RGB) -> YCbCr:
    return YCbCr(*_to_studio(*_luma_chroma(rgb, *_BT709)))


def ycbcr_bt709_to_rgb(ycbcr: YCbCr) -> RGB:
    return _from_luma_chroma(*_from_studio(*ycbcr.as_tuple()), *_BT709)


def rgb_to_ycbcr_bt2020(rgb: RGB) -> YCbCr:
    return YCbCr(*_to_studio(*_luma_chroma(rgb, *_BT2020)))


def ycbcr_bt2020_to_rgb(ycbcr: YCbCr) -> RGB:
    return _from_luma_chroma(*_from_studio(*ycbcr.as_tuple()), *_BT2020)


def rgb_to_xvycc(rgb: RGB) -> XvYCC:
    """xvYCC: BT.709 studio coding, but values outside 16-235/240 are legal."""
    return XvYCC(*_to_studio(*_luma_chroma(rgb, *_BT709)))


def xvycc_to_rgb(xvycc: XvYCC) -> RGB:
    return _from_luma_chroma(*_from_studio(*xvycc.as_tuple()), *_BT709)


def rgb_to_ypbpr(rgb: RGB) -> YPbPr:
    """Analog component video, BT.709 coefficients."""
    return YPbPr(*_luma_chroma(rgb, *_BT709))


def ypbpr_to_rgb(ypbpr: YPbPr) -> RGB:
    return _from_luma_chroma(*ypbpr.as_tuple(), *_BT709)


_RGB_TO_YDBDR = as_matrix([
    [0.299, 0.587, 0.114],
    [-0.450, -0.883, 1.333],
    [-1.333, 1.116, 0.217],
])
_YDBDR_TO_RGB = invert(_RGB_TO_YDBDR)

_RGB_TO_YIQ = as_matrix([
    [0.299, 0.587, 0.114],
    [0.5959, -0.2746, -0.3213],
    [0.2115, -0.5227, 0.3112],
])
_YIQ_TO_RGB = invert(_RGB_TO_YIQ)


def rgb_to_ydbdr(rgb: RGB) -> YDbDr:
    y, db, dr = matrix_vector_multiply(_RGB_TO_YDBDR, _unit(rgb))
    return YDbDr(y=float(y), db=float(db), dr=float(dr))


def ydbdr_to_rgb(ydbdr: YDbDr) -> RGB:
    return _from_unit(*(float(c) for c in matrix_vector_multiply(_YDBDR_TO_RGB, ydbdr.as_tuple())))


def rgb_to_yiq(rgb: RGB) -> YIQ:
    y, i, q = matrix_vector_multiply(_RGB_TO_YIQ, _unit(rgb))
    return YIQ(y=float(y), i=float(i), q=float(q))


def yiq_to_rgb(yiq: YIQ) -> RGB:
    return _from_unit(*(float(c) for c in matrix_vector_multiply(_YIQ_TO_RGB, yiq.as_tuple())))


def rgb_to_ycocg(rgb: RGB) -> YCoCg:
    r, g, b = _unit(rgb)
    return YCoCg(
        y=r / 4.0 + g / 2.0 + b / 4.0,
        co=r / 2.0 - b / 2.0,
        cg=-r / 4.0 + g / 2.0 - b / 4.0,
    )


def ycocg_to_rgb(ycocg: YCoCg) -> RGB:
    base = ycocg.y - ycocg.cg
    return _from_unit(base + ycocg.co, ycocg.y + ycocg.cg, base - ycocg.co)


# BT.2020 transfer function constants
_BT2020_ALPHA = 1.09929682680944
_BT2020_BETA = 0.018053968510807


def _bt2020_oetf(linear: float) -> float:
    if linear < _BT2020_BETA:
        return 4.5 * linear
    return _BT2020_ALPHA * linear ** 0.45 - (_BT2020_ALPHA - 1.0)


def _bt2020_eotf(encoded: float) -> float:
    if encoded < 4.5 * _BT2020_BETA:
        return encoded / 4.5
    return ((encoded + _BT2020_ALPHA - 1.0) / _BT2020_ALPHA) ** (1.0 / 0.45)


def rgb_to_yccbccrc(rgb: RGB) -> YcCbcCrc:
    """
    BT.2020 constant-luminance coding.

    Luminance is formed in linear light, then encoded; chroma uses
    sign-dependent divisors.
    """
    r, g, b = (float(c) for c in srgb_to_linear(np.array(_unit(rgb))))
    yc = _bt2020_oetf(_BT2020[0] * r + (1.0 - _BT2020[0] - _BT2020[1]) * g + _BT2020[1] * b)

    db = _bt2020_oetf(b) - yc
    dr = _bt2020_oetf(r) - yc
    return YcCbcCrc(
        yc=yc,
        cbc=db / 1.9404 if db <= 0 else db / 1.5816,
        crc=dr / 1.7184 if dr <= 0 else dr / 0.9936,
    )


def yccbccrc_to_rgb(value: YcCbcCrc) -> RGB:
    b_encoded = value.yc + value.cbc * (1.9404 if value.cbc <= 0 else 1.5816)
    r_encoded = value.yc + value.crc * (1.7184 if value.crc <= 0 else 0.9936)

    luminance = _bt2020_eotf(value.yc)
    r = _bt2020_eotf(r_encoded)
    b = _bt2020_eotf(b_encoded)
    g = (luminance - _BT2020[0] * r - _BT2020[1] * b) / (1.0 - _BT2020[0] - _BT2020[1])

    return _from_unit(*(float(c) for c in linear_to_srgb(np.array([r, g, b]))))
