# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Static constant tables: reference whites and fixed transform matrices.

References:
- Illuminants and adaptation: http://brucelindbloom.com/Eqn_ChromAdapt.html
- sRGB matrix: http://brucelindbloom.com/Eqn_RGB_XYZ_Matrix.html
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from tincture.convert.matrix import as_matrix, invert


# =============================================================================
# Reference Whites
# =============================================================================


class Illuminant(str, Enum):
    """The fixed catalogue of standard illuminants (CIE 1931 2° observer)."""

    A = "A"
    B = "B"
    C = "C"
    D50 = "D50"
    D55 = "D55"
    D65 = "D65"
    D75 = "D75"
    E = "E"
    F2 = "F2"
    F7 = "F7"
    F11 = "F11"


# XYZ of each white, normalized to Y = 1
REFERENCE_WHITES = MappingProxyType({
    Illuminant.A: (1.09850, 1.00000, 0.35585),
    Illuminant.B: (0.99072, 1.00000, 0.85223),
    Illuminant.C: (0.98074, 1.00000, 1.18232),
    Illuminant.D50: (0.96422, 1.00000, 0.82521),
    Illuminant.D55: (0.95682, 1.00000, 0.92149),
    Illuminant.D65: (0.95047, 1.00000, 1.08883),
    Illuminant.D75: (0.94972, 1.00000, 1.22638),
    Illuminant.E: (1.00000, 1.00000, 1.00000),
    Illuminant.F2: (0.99186, 1.00000, 0.67393),
    Illuminant.F7: (0.95041, 1.00000, 1.08747),
    Illuminant.F11: (1.00962, 1.00000, 0.64350),
})

# Reference white for every XYZ-canonical formula, on the Y = 100 scale
D65_WHITE = tuple(100.0 * v for v in REFERENCE_WHITES[Illuminant.D65])


# =============================================================================
# Cone Response Domain (Bradford)
# =============================================================================

# Column-vector convention: rho_gamma_beta = BRADFORD_MA · XYZ
BRADFORD_MA = as_matrix([
    [0.8951, 0.2664, -0.1614],
    [-0.7502, 1.7135, 0.0367],
    [0.0389, -0.0685, 1.0296],
])

BRADFORD_MA_INV = invert(BRADFORD_MA)


# =============================================================================
# sRGB (D65)
# =============================================================================

SRGB_TO_XYZ = as_matrix([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

XYZ_TO_SRGB = invert(SRGB_TO_XYZ)


# =============================================================================
# LMS (Hunt-Pointer-Estevez, normalized to D65)
# =============================================================================

XYZ_TO_LMS = as_matrix([
    [0.4002, 0.7076, -0.0808],
    [-0.2263, 1.1653, 0.0457],
    [0.0, 0.0, 0.9182],
])

LMS_TO_XYZ = invert(XYZ_TO_LMS)


# =============================================================================
# CIE Lab / Luv
# =============================================================================

CIE_E = 216.0 / 24389.0
CIE_K = 24389.0 / 27.0
