################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Element kind conversion and numpy interop for dense matrices."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray

from oasis_matrix.matrix.matrix import Matrix
from oasis_matrix.matrix.matrix_errors import MatrixConversionError
from oasis_matrix.matrix.scalar_traits import ScalarKind


_LOG: logging.Logger = logging.getLogger(__name__)


def convert_matrix(matrix: Matrix[Any], kind: ScalarKind) -> Matrix[Any]:
    """Return a matrix with every cell converted to another element kind.

    Args:
        matrix: Source matrix, left unchanged
        kind: Target element kind, called once per cell

    Returns:
        New matrix with the same shape

    Raises:
        MatrixConversionError: If a cell cannot be converted
    """
    try:
        cells: list[Any] = [kind(value) for value in matrix]
    except (TypeError, ValueError, ArithmeticError) as exc:
        raise MatrixConversionError(
            f"cannot convert cells to {kind!r}: {exc}"
        ) from exc
    return Matrix.from_iter(matrix.rows, matrix.cols, cells)


def to_numpy(matrix: Matrix[Any], dtype: DTypeLike = None) -> NDArray[Any]:
    """Return the cells as a 2D numpy array of shape (rows, cols)."""
    try:
        array: NDArray[Any] = np.asarray(matrix.data, dtype=dtype)
    except (TypeError, ValueError) as exc:
        raise MatrixConversionError(f"cannot build array: {exc}") from exc
    _LOG.debug("Exported %dx%d matrix as %s", matrix.rows, matrix.cols, array.dtype)
    return array.reshape(matrix.shape)


def from_numpy(array: Any) -> Matrix[Any]:
    """Construct a matrix from a non-empty 2D array-like.

    Cells are stored as native Python scalars, so ``float64`` becomes
    ``float`` and integer dtypes become ``int``.

    Raises:
        MatrixConversionError: If the input is not a non-empty 2D array
    """
    values: NDArray[Any] = np.asarray(array)
    if values.ndim != 2:
        raise MatrixConversionError(f"array must be 2D, got {values.ndim}D")
    if values.size == 0:
        raise MatrixConversionError("array must be non-empty")
    rows: int = int(values.shape[0])
    cols: int = int(values.shape[1])
    _LOG.debug("Importing %dx%d %s array", rows, cols, values.dtype)
    return Matrix.from_iter(rows, cols, values.ravel().tolist())
