# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Named RGB working spaces (Adobe RGB, ProPhoto RGB, ...).

Each space is defined by its primaries' chromaticities, its reference white
and its companding curve. The RGB → XYZ matrix is derived from the
primaries, then composed with the Bradford matrix from the space's own
white to D65 so that results land on the XYZ hub.

Reference: http://brucelindbloom.com/WorkingSpaceInfo.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

import numpy as np

from tincture.schema import RGB, XYZ, ColorSpace
from tincture.convert.adaptation import named_matrix, pair_name
from tincture.convert.constants import CIE_E, CIE_K, REFERENCE_WHITES, Illuminant
from tincture.convert.matrix import (
    Matrix3x3,
    as_matrix,
    invert,
    matrix_multiply,
    matrix_vector_multiply,
    matrix_vector_multiply_xyz,
)


def primaries_to_matrix(
    primaries: tuple[tuple[float, float], ...],
    white: tuple[float, float, float],
) -> Matrix3x3:
    """
    Linear RGB → XYZ matrix from primary chromaticities and a white XYZ.

    Args:
        primaries: ((xr, yr), (xg, yg), (xb, yb))
        white: Reference white XYZ (Y = 1)
    """
    columns = np.column_stack([
        np.array([x / y, 1.0, (1.0 - x - y) / y], dtype=np.float64)
        for x, y in primaries
    ])
    scale = np.linalg.solve(columns, np.asarray(white, dtype=np.float64))
    return as_matrix(columns * scale)


# =============================================================================
# Companding
# =============================================================================


def _gamma_expand(encoded: np.ndarray, gamma: float) -> np.ndarray:
    return np.sign(encoded) * np.abs(encoded) ** gamma


def _gamma_compress(linear: np.ndarray, gamma: float) -> np.ndarray:
    return np.sign(linear) * np.abs(linear) ** (1.0 / gamma)


def _lstar_expand(encoded: np.ndarray) -> np.ndarray:
    lightness = encoded * 100.0
    return np.where(
        lightness > CIE_K * CIE_E,
        ((lightness + 16.0) / 116.0) ** 3,
        lightness / CIE_K,
    )


def _lstar_compress(linear: np.ndarray) -> np.ndarray:
    lightness = np.where(
        linear > CIE_E,
        116.0 * np.cbrt(linear) - 16.0,
        linear * CIE_K,
    )
    return lightness / 100.0


# =============================================================================
# Working Space Definition
# =============================================================================


@dataclass(frozen=True)
class WorkingSpace:
    """
    An RGB working space tied to the XYZ (D65) hub.

    Attributes:
        space: ColorSpace tag
        primaries: Chromaticities ((xr, yr), (xg, yg), (xb, yb))
        white: Native reference white
        gamma: Power-law exponent, or None for L* companding
    """
    space: ColorSpace
    primaries: tuple[tuple[float, float], ...]
    white: Illuminant
    gamma: Optional[float] = 2.2
    to_xyz_matrix: Matrix3x3 = field(init=False, repr=False, compare=False)
    from_xyz_matrix: Matrix3x3 = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        native = primaries_to_matrix(self.primaries, REFERENCE_WHITES[self.white])
        if self.white is not Illuminant.D65:
            native = matrix_multiply(named_matrix(pair_name(self.white, Illuminant.D65)), native)
        to_xyz = as_matrix(native)
        object.__setattr__(self, "to_xyz_matrix", to_xyz)
        object.__setattr__(self, "from_xyz_matrix", invert(to_xyz))

    def _expand(self, encoded: np.ndarray) -> np.ndarray:
        if self.gamma is None:
            return _lstar_expand(encoded)
        return _gamma_expand(encoded, self.gamma)

    def _compress(self, linear: np.ndarray) -> np.ndarray:
        if self.gamma is None:
            return _lstar_compress(linear)
        return _gamma_compress(linear, self.gamma)

    def to_xyz(self, rgb: RGB) -> XYZ:
        """Working-space RGB (0-255) → XYZ (D65, Y = 100)."""
        linear = self._expand(np.array(rgb.as_tuple(), dtype=np.float64) / 255.0)
        return matrix_vector_multiply_xyz(self.to_xyz_matrix, linear * 100.0)

    def from_xyz(self, xyz: XYZ) -> RGB:
        """XYZ (D65, Y = 100) → working-space RGB (0-255, unclipped)."""
        linear = matrix_vector_multiply(self.from_xyz_matrix, xyz) / 100.0
        r, g, b = self._compress(linear) * 255.0
        return RGB(red=float(r), green=float(g), blue=float(b))


_DEFINITIONS = (
    WorkingSpace(ColorSpace.ADOBE_98_RGB, ((0.6400, 0.3300), (0.2100, 0.7100), (0.1500, 0.0600)), Illuminant.D65, 2.2),
    WorkingSpace(ColorSpace.APPLE_RGB, ((0.6250, 0.3400), (0.2800, 0.5950), (0.1550, 0.0700)), Illuminant.D65, 1.8),
    WorkingSpace(ColorSpace.BEST_RGB, ((0.7347, 0.2653), (0.2150, 0.7750), (0.1300, 0.0350)), Illuminant.D50, 2.2),
    WorkingSpace(ColorSpace.BETA_RGB, ((0.6888, 0.3112), (0.1986, 0.7551), (0.1265, 0.0352)), Illuminant.D50, 2.2),
    WorkingSpace(ColorSpace.BRUCE_RGB, ((0.6400, 0.3300), (0.2800, 0.6500), (0.1500, 0.0600)), Illuminant.D65, 2.2),
    WorkingSpace(ColorSpace.CIE_RGB, ((0.7350, 0.2650), (0.2740, 0.7170), (0.1670, 0.0090)), Illuminant.E, 2.2),
    WorkingSpace(ColorSpace.COLOR_MATCH_RGB, ((0.6300, 0.3400), (0.2950, 0.6050), (0.1500, 0.0750)), Illuminant.D50, 1.8),
    WorkingSpace(ColorSpace.DON_RGB_4, ((0.6960, 0.3000), (0.2150, 0.7650), (0.1300, 0.0350)), Illuminant.D50, 2.2),
    WorkingSpace(ColorSpace.ECI_RGB_V2, ((0.6700, 0.3300), (0.2100, 0.7100), (0.1400, 0.0800)), Illuminant.D50, None),
    WorkingSpace(ColorSpace.ETKA_SPACE_PS5, ((0.6950, 0.3050), (0.2600, 0.7000), (0.1100, 0.0050)), Illuminant.D50, 2.2),
    WorkingSpace(ColorSpace.NTSC_RGB, ((0.6700, 0.3300), (0.2100, 0.7100), (0.1400, 0.0800)), Illuminant.C, 2.2),
    WorkingSpace(ColorSpace.PAL_SECAM_RGB, ((0.6400, 0.3300), (0.2900, 0.6000), (0.1500, 0.0600)), Illuminant.D65, 2.2),
    WorkingSpace(ColorSpace.PRO_PHOTO_RGB, ((0.7347, 0.2653), (0.1596, 0.8404), (0.0366, 0.0001)), Illuminant.D50, 1.8),
    WorkingSpace(ColorSpace.SMPTE_C_RGB, ((0.6300, 0.3400), (0.3100, 0.5950), (0.1550, 0.0700)), Illuminant.D65, 2.2),
    WorkingSpace(ColorSpace.WIDE_GAMUT_RGB, ((0.7350, 0.2650), (0.1150, 0.8260), (0.1570, 0.0180)), Illuminant.D50, 2.2),
)

WORKING_SPACES = MappingProxyType({ws.space: ws for ws in _DEFINITIONS})
