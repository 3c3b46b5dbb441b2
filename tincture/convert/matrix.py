# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Fixed-size 3×3 matrix and 3-vector arithmetic.

Everything that touches XYZ or linear RGB goes through these helpers.
Shapes are checked once, when a matrix or vector is built; the multiply
functions assume well-formed input.
"""

from __future__ import annotations

from typing import Iterable, Union

import numpy as np
from numpy.typing import NDArray

from tincture.schema import XYZ

Matrix3x3 = NDArray[np.float64]
Vector3 = NDArray[np.float64]

VectorLike = Union[Vector3, XYZ, Iterable[float]]


def as_matrix(rows: Iterable[Iterable[float]]) -> Matrix3x3:
    """
    Build a read-only 3×3 float64 matrix.

    Raises:
        ValueError: If ``rows`` is not 3×3
    """
    matrix = np.array(rows, dtype=np.float64)
    if matrix.shape != (3, 3):
        raise ValueError(f"Expected a 3x3 matrix, got shape {matrix.shape}")
    matrix.flags.writeable = False
    return matrix


def as_vector(values: VectorLike) -> Vector3:
    """Build a float64 3-vector from an array, an XYZ value or any 3 numbers."""
    if isinstance(values, XYZ):
        values = values.as_tuple()
    vector = np.asarray(values, dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError(f"Expected a 3-vector, got shape {vector.shape}")
    return vector


def matrix_multiply(a: Matrix3x3, b: Matrix3x3) -> Matrix3x3:
    """3×3 · 3×3."""
    return a @ b


def matrix_vector_multiply(matrix: Matrix3x3, vector: VectorLike) -> Vector3:
    """3×3 · 3-vector, returned as a plain vector."""
    return matrix @ as_vector(vector)


def matrix_vector_multiply_xyz(matrix: Matrix3x3, vector: VectorLike) -> XYZ:
    """3×3 · 3-vector, returned as an XYZ value."""
    x, y, z = matrix_vector_multiply(matrix, vector)
    return XYZ(x=float(x), y=float(y), z=float(z))


def invert(matrix: Matrix3x3) -> Matrix3x3:
    """Read-only inverse of a 3×3 matrix."""
    inverse = np.linalg.inv(matrix)
    inverse.flags.writeable = False
    return inverse
