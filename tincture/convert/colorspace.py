# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Hub transform: sRGB ↔ CIE XYZ (D65).

Conversion chain: sRGB [0,255] → sRGB [0,1] → Linear RGB → XYZ [Y = 100]

Nothing is clipped: out-of-gamut XYZ produces RGB channels outside 0-255,
so an RGB/XYZ pair stays mutually consistent in both directions.

All conversions are pure NumPy.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from tincture.schema import RGB, XYZ
from tincture.convert.constants import SRGB_TO_XYZ, XYZ_TO_SRGB
from tincture.convert.matrix import matrix_vector_multiply, matrix_vector_multiply_xyz


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For |values| <= 0.04045: linear/12.92
    - Otherwise: ((|value| + 0.055) / 1.055) ^ 2.4, sign preserved
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    magnitude = np.abs(srgb)
    linear = np.where(
        magnitude <= 0.04045,
        magnitude / 12.92,
        np.power((magnitude + 0.055) / 1.055, 2.4)
    )
    return np.sign(srgb) * linear


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Negative values mirror the positive curve.
    """
    linear = np.asarray(linear, dtype=np.float64)
    magnitude = np.abs(linear)
    srgb = np.where(
        magnitude <= 0.0031308,
        magnitude * 12.92,
        1.055 * np.power(magnitude, 1.0 / 2.4) - 0.055
    )
    return np.sign(linear) * srgb


# =============================================================================
# sRGB ↔ XYZ
# =============================================================================


def srgb_to_xyz(rgb: RGB) -> XYZ:
    """
    Convert sRGB (channels 0-255) to XYZ (D65, Y of white = 100).

    Example:
        >>> srgb_to_xyz(RGB(255, 255, 255))
        XYZ(x=95.047, y=100.0, z=108.883)
    """
    linear = srgb_to_linear(np.array(rgb.as_tuple(), dtype=np.float64) / 255.0)
    return matrix_vector_multiply_xyz(SRGB_TO_XYZ, linear * 100.0)


def xyz_to_srgb(xyz: XYZ) -> RGB:
    """Convert XYZ (D65, Y of white = 100) to sRGB (channels 0-255, unclipped)."""
    linear = matrix_vector_multiply(XYZ_TO_SRGB, xyz) / 100.0
    r, g, b = linear_to_srgb(linear) * 255.0
    return RGB(red=float(r), green=float(g), blue=float(b))
