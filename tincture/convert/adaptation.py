# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Chromatic adaptation between reference whites (linear Bradford transform).

Given a source white Ws and a destination white Wd:

    1. Map both whites into the cone response domain: ρβγ = Ma · W
    2. Scale each cone channel independently: D = diag(ρd/ρs, βd/βs, γd/γs)
    3. Compose: M = Ma⁻¹ · D · Ma
    4. Apply: XYZ_dest = M · XYZ_source

The 110 directed matrices between the eleven catalogue illuminants are
built once at import time and are read-only afterwards.

Reference: http://brucelindbloom.com/Eqn_ChromAdapt.html
"""

from __future__ import annotations

import logging
from itertools import permutations
from types import MappingProxyType
from typing import Iterable, Mapping, Union

import numpy as np

from tincture.errors import UnknownIlluminantError
from tincture.schema import XYZ
from tincture.convert.constants import (
    BRADFORD_MA,
    BRADFORD_MA_INV,
    REFERENCE_WHITES,
    Illuminant,
)
from tincture.convert.matrix import (
    Matrix3x3,
    VectorLike,
    as_matrix,
    matrix_multiply,
    matrix_vector_multiply,
    matrix_vector_multiply_xyz,
)

logger = logging.getLogger(__name__)

WhiteLike = Union[Illuminant, str, XYZ, Iterable[float]]
PairLike = Union[str, tuple]


def illuminant(name: Union[Illuminant, str]) -> Illuminant:
    """
    Look up a catalogue illuminant by enum member or name (case-insensitive).

    Raises:
        UnknownIlluminantError: If the name is not in the catalogue
    """
    if isinstance(name, Illuminant):
        return name
    try:
        return Illuminant(str(name).upper())
    except ValueError:
        raise UnknownIlluminantError(name) from None


def white_point(white: WhiteLike) -> np.ndarray:
    """
    XYZ of a reference white as a 3-vector.

    Accepts a catalogue illuminant (enum or name) or any raw XYZ triple.
    Raw triples are not checked for degeneracy.
    """
    if isinstance(white, (Illuminant, str)):
        return np.asarray(REFERENCE_WHITES[illuminant(white)], dtype=np.float64)
    if isinstance(white, XYZ):
        white = white.as_tuple()
    vector = np.asarray(tuple(white), dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError(f"Reference white must be an XYZ triple, got shape {vector.shape}")
    return vector


def adaptation_matrix(source_white: WhiteLike, destination_white: WhiteLike) -> Matrix3x3:
    """
    Derive the 3×3 adaptation matrix from ``source_white`` to ``destination_white``.

    Identical whites give the identity (within floating-point tolerance)
    without any special case.
    """
    rgb_source = matrix_vector_multiply(BRADFORD_MA, white_point(source_white))
    rgb_destination = matrix_vector_multiply(BRADFORD_MA, white_point(destination_white))

    # Von Kries scaling, destination over source, so source white lands on
    # destination white. D65 → D50 reproduces Lindbloom's published matrix
    # ([[1.0478, 0.0229, -0.0501], ...]).
    scale = np.diag(rgb_destination / rgb_source)

    return as_matrix(matrix_multiply(matrix_multiply(BRADFORD_MA_INV, scale), BRADFORD_MA))


def pair_name(source: Union[Illuminant, str], destination: Union[Illuminant, str]) -> str:
    """Catalogue key for a directed pair, e.g. ``"D65_D50"``."""
    return f"{illuminant(source).value}_{illuminant(destination).value}"


def _build_catalogue() -> Mapping[str, Matrix3x3]:
    matrices = {
        pair_name(source, destination): adaptation_matrix(source, destination)
        for source, destination in permutations(Illuminant, 2)
    }
    logger.debug("Built %d adaptation matrices", len(matrices))
    return MappingProxyType(matrices)


# All 110 directed pairs of the catalogue, keyed "<SOURCE>_<DESTINATION>"
ADAPTATION_MATRICES: Mapping[str, Matrix3x3] = _build_catalogue()


def named_matrix(pair: PairLike) -> Matrix3x3:
    """
    Precomputed matrix for a catalogue pair.

    Args:
        pair: ``"D65_D50"`` or ``(Illuminant.D65, Illuminant.D50)``

    Raises:
        UnknownIlluminantError: If the pair is not one of the 110 catalogue pairs
    """
    if isinstance(pair, tuple):
        if len(pair) != 2:
            raise UnknownIlluminantError(pair)
        key = pair_name(*pair)
    else:
        key = str(pair).upper()
    try:
        return ADAPTATION_MATRICES[key]
    except KeyError:
        raise UnknownIlluminantError(pair) from None


def adapt(xyz: VectorLike, source_white: WhiteLike, destination_white: WhiteLike) -> XYZ:
    """
    Adapt XYZ values from one reference white to another (general path).

    Works for any two whites, in or out of the catalogue.

    Example:
        >>> adapt(XYZ(95.047, 100.0, 108.883), "D65", "D50")
        XYZ(x=96.42..., y=100.0..., z=82.52...)
    """
    matrix = adaptation_matrix(source_white, destination_white)
    return matrix_vector_multiply_xyz(matrix, xyz)


def adapt_with_matrix(xyz: VectorLike, matrix: Matrix3x3) -> XYZ:
    """Apply a precomputed adaptation matrix (fast path)."""
    return matrix_vector_multiply_xyz(matrix, xyz)


def adapt_named(xyz: VectorLike, pair: PairLike) -> XYZ:
    """Adapt XYZ values using one of the 110 precomputed catalogue matrices."""
    return adapt_with_matrix(xyz, named_matrix(pair))
