# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
XYZ-canonical CIE models.

All formulas use the D65 reference white on the Y = 100 scale, matching the
XYZ hub. Each function converts one value to or from XYZ and never reads
another leaf space.

References:
- http://brucelindbloom.com/Eqn_XYZ_to_Lab.html
- http://brucelindbloom.com/Eqn_XYZ_to_Luv.html
"""

from __future__ import annotations

import math

from tincture.schema import LAB, LCH, LMS, LUV, UVW, XYY, XYZ, HunterLab
from tincture.convert.constants import CIE_E, CIE_K, D65_WHITE, LMS_TO_XYZ, XYZ_TO_LMS
from tincture.convert.matrix import matrix_vector_multiply, matrix_vector_multiply_xyz

_XN, _YN, _ZN = D65_WHITE


def _uv_prime(x: float, y: float, z: float) -> tuple[float, float]:
    """CIE 1976 UCS chromaticity (u', v')."""
    denominator = x + 15.0 * y + 3.0 * z
    return 4.0 * x / denominator, 9.0 * y / denominator


_UN_PRIME, _VN_PRIME = _uv_prime(_XN, _YN, _ZN)


def _neutral(y: float) -> XYZ:
    """The D65 gray with luminance ``y``."""
    return XYZ(x=y * _XN / _YN, y=y, z=y * _ZN / _YN)


def _polar(lightness: float, p: float, q: float) -> LCH:
    chroma = math.hypot(p, q)
    hue = math.degrees(math.atan2(q, p)) % 360.0 if chroma > 0 else 0.0
    return LCH(lightness=lightness, chroma=chroma, hue=hue)


def _cartesian(lch: LCH) -> tuple[float, float, float]:
    angle = math.radians(lch.hue)
    return lch.lightness, lch.chroma * math.cos(angle), lch.chroma * math.sin(angle)


# =============================================================================
# CIE L*a*b* / LCHab
# =============================================================================


def _lab_f(t: float) -> float:
    return math.pow(t, 1.0 / 3.0) if t > CIE_E else (CIE_K * t + 16.0) / 116.0


def xyz_to_lab(xyz: XYZ) -> LAB:
    fx = _lab_f(xyz.x / _XN)
    fy = _lab_f(xyz.y / _YN)
    fz = _lab_f(xyz.z / _ZN)
    return LAB(luminance=116.0 * fy - 16.0, a=500.0 * (fx - fy), b=200.0 * (fy - fz))


def lab_to_xyz(lab: LAB) -> XYZ:
    fy = (lab.luminance + 16.0) / 116.0
    fx = lab.a / 500.0 + fy
    fz = fy - lab.b / 200.0

    xr = fx ** 3 if fx ** 3 > CIE_E else (116.0 * fx - 16.0) / CIE_K
    yr = fy ** 3 if lab.luminance > CIE_K * CIE_E else lab.luminance / CIE_K
    zr = fz ** 3 if fz ** 3 > CIE_E else (116.0 * fz - 16.0) / CIE_K
    return XYZ(x=xr * _XN, y=yr * _YN, z=zr * _ZN)


def xyz_to_lch_ab(xyz: XYZ) -> LCH:
    lab = xyz_to_lab(xyz)
    return _polar(lab.luminance, lab.a, lab.b)


def lch_ab_to_xyz(lch: LCH) -> XYZ:
    luminance, a, b = _cartesian(lch)
    return lab_to_xyz(LAB(luminance=luminance, a=a, b=b))


# =============================================================================
# CIE L*u*v* / LCHuv
# =============================================================================


def xyz_to_luv(xyz: XYZ) -> LUV:
    if xyz.x + 15.0 * xyz.y + 3.0 * xyz.z == 0:
        return LUV(lightness=0.0, u=0.0, v=0.0)

    yr = xyz.y / _YN
    lightness = 116.0 * math.pow(yr, 1.0 / 3.0) - 16.0 if yr > CIE_E else CIE_K * yr
    u_prime, v_prime = _uv_prime(xyz.x, xyz.y, xyz.z)
    return LUV(
        lightness=lightness,
        u=13.0 * lightness * (u_prime - _UN_PRIME),
        v=13.0 * lightness * (v_prime - _VN_PRIME),
    )


def luv_to_xyz(luv: LUV) -> XYZ:
    if luv.lightness == 0:
        return XYZ(x=0.0, y=0.0, z=0.0)

    if luv.lightness > CIE_K * CIE_E:
        y = ((luv.lightness + 16.0) / 116.0) ** 3 * _YN
    else:
        y = luv.lightness / CIE_K * _YN

    u_prime = luv.u / (13.0 * luv.lightness) + _UN_PRIME
    v_prime = luv.v / (13.0 * luv.lightness) + _VN_PRIME
    if v_prime == 0:
        return _neutral(y)
    return XYZ(
        x=y * 9.0 * u_prime / (4.0 * v_prime),
        y=y,
        z=y * (12.0 - 3.0 * u_prime - 20.0 * v_prime) / (4.0 * v_prime),
    )


def xyz_to_lch_uv(xyz: XYZ) -> LCH:
    luv = xyz_to_luv(xyz)
    return _polar(luv.lightness, luv.u, luv.v)


def lch_uv_to_xyz(lch: LCH) -> XYZ:
    lightness, u, v = _cartesian(lch)
    return luv_to_xyz(LUV(lightness=lightness, u=u, v=v))


# =============================================================================
# CIE 1964 U*V*W*
# =============================================================================


_WHITE_DENOMINATOR = _XN + 15.0 * _YN + 3.0 * _ZN
_UN_1960 = 4.0 * _XN / _WHITE_DENOMINATOR
_VN_1960 = 6.0 * _YN / _WHITE_DENOMINATOR


def _uv_1960(x: float, y: float, z: float) -> tuple[float, float]:
    """CIE 1960 UCS chromaticity (u, v); black takes the white point's."""
    denominator = x + 15.0 * y + 3.0 * z
    if denominator == 0:
        return _UN_1960, _VN_1960
    return 4.0 * x / denominator, 6.0 * y / denominator


def xyz_to_uvw(xyz: XYZ) -> UVW:
    """
    Convert XYZ to U*V*W*.

    W* = 0 (Y ≈ 0.314) has no chromaticity; the inverse maps it to the
    neutral at that luminance.
    """
    w = 25.0 * math.pow(xyz.y, 1.0 / 3.0) - 17.0 if xyz.y > 0 else -17.0
    u, v = _uv_1960(xyz.x, xyz.y, xyz.z)
    return UVW(u=13.0 * w * (u - _UN_1960), v=13.0 * w * (v - _VN_1960), w=w)


def uvw_to_xyz(uvw: UVW) -> XYZ:
    y = ((uvw.w + 17.0) / 25.0) ** 3
    if y == 0:
        return XYZ(x=0.0, y=0.0, z=0.0)
    if uvw.w == 0:
        return _neutral(y)
    u = uvw.u / (13.0 * uvw.w) + _UN_1960
    v = uvw.v / (13.0 * uvw.w) + _VN_1960
    denominator = 6.0 * y / v
    x = u * denominator / 4.0
    return XYZ(x=x, y=y, z=(denominator - x - 15.0 * y) / 3.0)


# =============================================================================
# CIE xyY
# =============================================================================


def xyz_to_xyy(xyz: XYZ) -> XYY:
    """Black has no chromaticity; it takes the white point's (x, y)."""
    total = xyz.x + xyz.y + xyz.z
    if total == 0:
        white_total = _XN + _YN + _ZN
        return XYY(x=_XN / white_total, y=_YN / white_total, luminance=0.0)
    return XYY(x=xyz.x / total, y=xyz.y / total, luminance=xyz.y)


def xyy_to_xyz(xyy: XYY) -> XYZ:
    if xyy.y == 0:
        return XYZ(x=0.0, y=0.0, z=0.0)
    scale = xyy.luminance / xyy.y
    return XYZ(x=xyy.x * scale, y=xyy.luminance, z=(1.0 - xyy.x - xyy.y) * scale)


# =============================================================================
# LMS (Hunt-Pointer-Estevez)
# =============================================================================


def xyz_to_lms(xyz: XYZ) -> LMS:
    long, medium, short = matrix_vector_multiply(XYZ_TO_LMS, xyz)
    return LMS(long=float(long), medium=float(medium), short=float(short))


def lms_to_xyz(lms: LMS) -> XYZ:
    return matrix_vector_multiply_xyz(LMS_TO_XYZ, lms.as_tuple())


# =============================================================================
# Hunter Lab
# =============================================================================

_KA = 175.0 / 198.04 * (_XN + _YN)
_KB = 70.0 / 218.11 * (_YN + _ZN)


def xyz_to_hunter_lab(xyz: XYZ) -> HunterLab:
    yr = xyz.y / _YN
    if yr <= 0:
        return HunterLab(lightness=0.0, a=0.0, b=0.0)
    root = math.sqrt(yr)
    return HunterLab(
        lightness=100.0 * root,
        a=_KA * (xyz.x / _XN - yr) / root,
        b=_KB * (yr - xyz.z / _ZN) / root,
    )


def hunter_lab_to_xyz(hunter: HunterLab) -> XYZ:
    root = hunter.lightness / 100.0
    yr = root ** 2
    return XYZ(
        x=(hunter.a / _KA * root + yr) * _XN,
        y=yr * _YN,
        z=(yr - hunter.b / _KB * root) * _ZN,
    )
