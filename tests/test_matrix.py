# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Tests for 3×3 matrix and 3-vector primitives."""

import numpy as np
import pytest

from tincture.schema import XYZ
from tincture.convert.matrix import (
    as_matrix,
    as_vector,
    invert,
    matrix_multiply,
    matrix_vector_multiply,
    matrix_vector_multiply_xyz,
)


SAMPLE = [
    [2.0, 0.0, 1.0],
    [0.0, 1.0, 0.0],
    [1.0, 0.0, 1.0],
]


class TestConstruction:

    def test_matrix_is_float64(self):
        m = as_matrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
        assert m.dtype == np.float64
        assert m.shape == (3, 3)

    def test_matrix_is_read_only(self):
        m = as_matrix(SAMPLE)
        with pytest.raises(ValueError):
            m[0, 0] = 5.0

    def test_wrong_shape_rejected(self):
        with pytest.raises(ValueError, match="3x3"):
            as_matrix([[1.0, 2.0], [3.0, 4.0]])

    def test_vector_from_xyz(self):
        np.testing.assert_array_equal(as_vector(XYZ(1.0, 2.0, 3.0)), [1.0, 2.0, 3.0])

    def test_vector_wrong_length_rejected(self):
        with pytest.raises(ValueError, match="3-vector"):
            as_vector([1.0, 2.0])


class TestArithmetic:

    def test_identity_multiply(self):
        m = as_matrix(SAMPLE)
        np.testing.assert_allclose(matrix_multiply(np.eye(3), m), m)

    def test_matrix_multiply(self):
        a = as_matrix(SAMPLE)
        expected = np.array(SAMPLE) @ np.array(SAMPLE)
        np.testing.assert_allclose(matrix_multiply(a, a), expected)

    def test_matrix_vector_multiply(self):
        result = matrix_vector_multiply(as_matrix(SAMPLE), [1.0, 2.0, 3.0])
        np.testing.assert_allclose(result, [5.0, 2.0, 4.0])

    def test_xyz_variant_returns_xyz(self):
        result = matrix_vector_multiply_xyz(as_matrix(SAMPLE), XYZ(1.0, 2.0, 3.0))
        assert isinstance(result, XYZ)
        assert result.as_tuple() == pytest.approx((5.0, 2.0, 4.0))

    def test_invert(self):
        m = as_matrix(SAMPLE)
        inverse = invert(m)
        np.testing.assert_allclose(m @ inverse, np.eye(3), atol=1e-12)
        assert not inverse.flags.writeable
