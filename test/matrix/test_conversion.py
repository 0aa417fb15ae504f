################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for element conversion and numpy interop."""

from __future__ import annotations

from fractions import Fraction
from typing import Any

import numpy as np
import pytest

from oasis_matrix.matrix.conversion import convert_matrix
from oasis_matrix.matrix.conversion import from_numpy
from oasis_matrix.matrix.conversion import to_numpy
from oasis_matrix.matrix.matrix import Matrix
from oasis_matrix.matrix.matrix_errors import MatrixConversionError


def test_convert_int_to_float() -> None:
    """Conversion keeps shape and converts every cell."""
    mat: Matrix[int] = Matrix.from_iter(2, 3, range(6))
    converted: Matrix[Any] = convert_matrix(mat, float)
    assert converted.shape == (2, 3)
    assert converted.kind is float
    assert converted == mat
    assert mat.kind is int


def test_convert_to_fraction() -> None:
    """Float cells convert exactly to fractions."""
    mat: Matrix[float] = Matrix.new([[0.5, 0.25]])
    converted: Matrix[Any] = convert_matrix(mat, Fraction)
    assert converted.to_list() == [[Fraction(1, 2), Fraction(1, 4)]]


def test_convert_failure() -> None:
    """Cells that cannot be converted raise a conversion error."""
    mat: Matrix[float] = Matrix.new([[1.0, float("nan")]])
    with pytest.raises(MatrixConversionError):
        convert_matrix(mat, int)
    with pytest.raises(MatrixConversionError):
        convert_matrix(Matrix.new([[float("inf")]]), int)


def test_to_numpy() -> None:
    """Export produces a (rows, cols) array."""
    mat: Matrix[int] = Matrix.from_iter(2, 3, range(6))
    array: np.ndarray = to_numpy(mat, dtype=np.float64)
    assert array.shape == (2, 3)
    assert array.dtype == np.float64
    assert np.array_equal(array, np.arange(6, dtype=np.float64).reshape(2, 3))


def test_from_numpy_native_cells() -> None:
    """Import stores native Python scalars in row-major order."""
    mat: Matrix[Any] = from_numpy(np.array([[1.5, 2.5], [3.5, 4.5]]))
    assert mat.shape == (2, 2)
    assert mat.get(1, 0) == 3.5
    assert type(mat[0, 0]) is float


def test_numpy_roundtrip_inverse() -> None:
    """An imported matrix inverts like numpy does."""
    array: np.ndarray = np.array([[4.0, 7.0], [2.0, 6.0]])
    inverse: Matrix[Any] | None = from_numpy(array).inverse()
    assert inverse is not None
    assert np.allclose(to_numpy(inverse), np.linalg.inv(array))


def test_from_numpy_rejects_bad_shapes() -> None:
    """Only non-empty 2D input is accepted."""
    with pytest.raises(MatrixConversionError):
        from_numpy(np.arange(3))
    with pytest.raises(MatrixConversionError):
        from_numpy(np.zeros((0, 3)))
