################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for Gauss-Jordan matrix inversion."""

from __future__ import annotations

import logging
from fractions import Fraction
from typing import Any

import numpy as np
import pytest

from oasis_matrix.config.matrix_params import InversionParams
from oasis_matrix.config.matrix_params import MatrixParamsError
from oasis_matrix.matrix.inversion import GaussJordan
from oasis_matrix.matrix.matrix import Matrix
from oasis_matrix.matrix.matrix_errors import SingularMatrixError


INVERSION_LOGGER: str = "oasis_matrix.matrix.inversion"


def _as_array(matrix: Matrix[Any]) -> np.ndarray:
    return np.array(matrix.to_list(), dtype=float)


def test_inverse_sparse_4x4() -> None:
    """A 4x4 matrix needing row elimination inverts to the known result."""
    mat: Matrix[float] = Matrix.new(
        [
            [1.0, 0.0, 2.0, 0.0],
            [0.0, 3.0, 0.0, 4.0],
            [5.0, 0.0, 6.0, 0.0],
            [0.0, 7.0, 0.0, 8.0],
        ]
    )
    expected: np.ndarray = np.array(
        [
            [-1.5, 0.0, 0.5, 0.0],
            [0.0, -2.0, 0.0, 1.0],
            [1.25, 0.0, -0.25, 0.0],
            [0.0, 1.75, 0.0, -0.75],
        ]
    )
    inverse: Matrix[float] | None = mat.inverse()
    assert inverse is not None
    assert inverse.shape == (4, 4)
    assert np.allclose(_as_array(inverse), expected, atol=0.01)


def test_inverse_integer_cells() -> None:
    """Integer cells are divided with true division."""
    mat: Matrix[int] = Matrix.new(
        [[1, 0, 2, 0], [0, 3, 0, 4], [5, 0, 6, 0], [0, 7, 0, 8]]
    )
    inverse: Matrix[Any] | None = mat.inverse()
    assert inverse is not None
    assert np.allclose(_as_array(mat @ inverse), np.eye(4), atol=1e-9)


def test_inverse_exact_with_fractions() -> None:
    """Exact cells give an exact inverse."""
    mat: Matrix[Fraction] = Matrix.new(
        [
            [Fraction(2), Fraction(1), Fraction(1)],
            [Fraction(1), Fraction(3), Fraction(2)],
            [Fraction(1), Fraction(0), Fraction(0)],
        ]
    )
    inverse: Matrix[Fraction] | None = mat.inverse()
    assert inverse is not None
    assert all(isinstance(value, Fraction) for value in inverse)
    assert mat @ inverse == Matrix.identity(3, Fraction)
    assert inverse @ mat == Matrix.identity(3, Fraction)


def test_inverse_requires_row_swap() -> None:
    """A zero in the leading position is handled by swapping rows."""
    mat: Matrix[Fraction] = Matrix.new(
        [[Fraction(0), Fraction(1)], [Fraction(1), Fraction(0)]]
    )
    inverse: Matrix[Fraction] | None = mat.inverse()
    assert inverse == mat


def test_inverse_1x1() -> None:
    """A single cell inverts to its reciprocal."""
    inverse: Matrix[float] | None = Matrix.new([[4.0]]).inverse()
    assert inverse is not None
    assert inverse.to_list() == [[0.25]]


def test_inverse_leaves_input_unchanged() -> None:
    """Inversion works on a copy of the input."""
    mat: Matrix[float] = Matrix.new([[0.0, 2.0], [3.0, 1.0]])
    before: Matrix[float] = mat.copy()
    mat.inverse()
    assert mat == before


def test_inverse_non_square_returns_none() -> None:
    """Non-square input is not applicable."""
    mat: Matrix[int] = Matrix.from_iter(2, 3, range(6))
    assert mat.inverse() is None
    assert GaussJordan.invert(mat.transpose()) is None


def test_singular_degenerate_policy(caplog: pytest.LogCaptureFixture) -> None:
    """By default singular input still returns a result and logs a warning."""
    mat: Matrix[Fraction] = Matrix.new(
        [[Fraction(1), Fraction(2)], [Fraction(2), Fraction(4)]]
    )
    with caplog.at_level(logging.WARNING, logger=INVERSION_LOGGER):
        inverse: Matrix[Fraction] | None = mat.inverse()
    assert inverse is not None
    assert inverse.shape == (2, 2)
    assert mat @ inverse != Matrix.identity(2, Fraction)
    assert "singular" in caplog.text


def test_singular_none_policy() -> None:
    """The none policy reports singular input as absent."""
    mat: Matrix[int] = Matrix.new([[1, 2], [2, 4]])
    params: InversionParams = InversionParams(singular_policy="none")
    assert mat.inverse(params) is None


def test_singular_raise_policy() -> None:
    """The raise policy turns singular input into an error."""
    mat: Matrix[int] = Matrix.new([[0, 0], [0, 0]])
    params: InversionParams = InversionParams(singular_policy="raise")
    with pytest.raises(SingularMatrixError):
        mat.inverse(params)
    with pytest.raises(ArithmeticError):
        GaussJordan.invert(mat, params)


def test_pivot_tolerance_detects_near_singular() -> None:
    """A pivot tolerance treats round-off residue as zero."""
    mat: Matrix[float] = Matrix.new([[1.0, 2.0], [2.0, 4.0 + 1e-14]])
    exact: Matrix[float] | None = mat.inverse(
        InversionParams(singular_policy="raise")
    )
    assert exact is not None
    with pytest.raises(SingularMatrixError):
        mat.inverse(InversionParams(pivot_tolerance=1e-9, singular_policy="raise"))


def test_invalid_params_rejected() -> None:
    """Inversion validates its parameters before running."""
    mat: Matrix[int] = Matrix.identity(2)
    with pytest.raises(MatrixParamsError):
        mat.inverse(InversionParams(pivot_tolerance=-1.0))
    with pytest.raises(MatrixParamsError):
        mat.inverse(InversionParams(singular_policy="ignore"))


def test_pivot_search_exhausts_columns(caplog: pytest.LogCaptureFixture) -> None:
    """Elimination stops early when no column is left to pivot on."""
    mat: Matrix[float] = Matrix.new([[1.0, 0.0], [0.0, 1.0]])

    # Every cell of [A | I] is within tolerance of zero
    wide: InversionParams = InversionParams(pivot_tolerance=10.0)
    with caplog.at_level(logging.DEBUG, logger=INVERSION_LOGGER):
        inverse: Matrix[float] | None = mat.inverse(wide)
    assert inverse is not None
    assert inverse.shape == (2, 2)
    assert inverse.to_list() == [[1.0, 0.0], [0.0, 1.0]]
    assert "Pivot columns exhausted" in caplog.text
    assert "singular" in caplog.text

    assert (
        mat.inverse(InversionParams(pivot_tolerance=10.0, singular_policy="none"))
        is None
    )
    with pytest.raises(SingularMatrixError, match="rank 0"):
        mat.inverse(InversionParams(pivot_tolerance=10.0, singular_policy="raise"))
