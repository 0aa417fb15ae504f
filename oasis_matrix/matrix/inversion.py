################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Matrix inversion by Gauss-Jordan elimination."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any

from oasis_matrix.config.matrix_params import SINGULAR_POLICY_NONE
from oasis_matrix.config.matrix_params import SINGULAR_POLICY_RAISE
from oasis_matrix.config.matrix_params import InversionParams
from oasis_matrix.matrix.matrix_errors import SingularMatrixError
from oasis_matrix.matrix.scalar_traits import FieldT
from oasis_matrix.matrix.scalar_traits import ScalarKind
from oasis_matrix.matrix.scalar_traits import is_zero
from oasis_matrix.matrix.scalar_traits import one_of


if TYPE_CHECKING:
    from oasis_matrix.matrix.matrix import Matrix


_LOG: logging.Logger = logging.getLogger(__name__)


class GaussJordan:
    """Gauss-Jordan elimination with row pivoting.

    Responsibility:
        Invert a square matrix by reducing the augmented matrix [A | I] until
        its left half is the identity. The right half is then A^-1.

    Inputs/outputs:
        - Input is an N x N matrix whose cells support subtraction,
          multiplication, division and a zero test.
        - Output is a new N x N matrix, or None for non-square input.

    Determinism and edge cases:
        - Pivots are the first non-zero entry at or below the current row.
          No magnitude-based pivot selection is performed.
        - Zero tests are exact unless ``pivot_tolerance`` is set. Exact tests
          are only meaningful for exact cell kinds such as ``int`` or
          ``Fraction``.
        - Singular input is detected when a pivot column falls outside the
          left half. What happens next is set by ``singular_policy``.
    """

    @staticmethod
    def invert(
        matrix: Matrix[FieldT], params: InversionParams | None = None
    ) -> Matrix[Any] | None:
        """Return the inverse of a square matrix.

        Args:
            matrix: Matrix to invert, left unchanged
            params: Inversion parameters, defaults when None

        Returns:
            The inverse, None for non-square input, or None for singular input
            under the "none" policy. Under the "degenerate" policy singular
            input still returns the elimination result.

        Raises:
            SingularMatrixError: If the matrix is singular under the "raise"
                policy
        """
        if not matrix.is_square():
            return None

        config: InversionParams = params or InversionParams()
        config.validate()

        size: int = matrix.rows
        augmented: Matrix[Any] = GaussJordan._augment(matrix, matrix.kind)
        pivot_cols: list[int] = GaussJordan._eliminate(
            augmented, config.pivot_tolerance
        )

        rank: int = sum(1 for col in pivot_cols if col < size)
        if rank < size:
            if config.singular_policy == SINGULAR_POLICY_RAISE:
                raise SingularMatrixError(
                    f"{size}x{size} matrix is singular (rank {rank})"
                )
            if config.singular_policy == SINGULAR_POLICY_NONE:
                _LOG.debug("Matrix is singular (rank %d of %d)", rank, size)
                return None
            _LOG.warning(
                "Inverting singular %dx%d matrix (rank %d), result is degenerate",
                size,
                size,
                rank,
            )

        return GaussJordan._right_half(augmented, size)

    @staticmethod
    def _augment(matrix: Matrix[FieldT], kind: ScalarKind) -> Matrix[Any]:
        """Return [matrix | identity] as a new N x 2N matrix."""
        size: int = matrix.rows
        augmented: Matrix[Any] = type(matrix).zero(size, 2 * size, kind)
        for i in range(size):
            for j in range(size):
                augmented[i, j] = matrix.get(i, j)
            augmented[i, i + size] = one_of(kind)
        return augmented

    @staticmethod
    def _eliminate(augmented: Matrix[FieldT], tolerance: float) -> list[int]:
        """Reduce the augmented matrix in place.

        Returns:
            The pivot column chosen for each processed row
        """
        rows: int = augmented.rows
        cols: int = augmented.cols
        pivot_cols: list[int] = []
        lead: int = 0

        for r in range(rows):
            if lead >= cols:
                break

            # Find a non-zero pivot, moving right when a column is exhausted
            i: int = r
            while is_zero(augmented[i, lead], tolerance):
                i += 1
                if i == rows:
                    _LOG.debug("No pivot in column %d at or below row %d", lead, r)
                    i = r
                    lead += 1
                    if lead == cols:
                        break
            if lead == cols:
                _LOG.debug("Pivot columns exhausted at row %d", r)
                break

            augmented.swap_rows(i, r)

            pivot: Any = augmented[r, lead]
            if not is_zero(pivot, tolerance):
                for j in range(cols):
                    augmented[r, j] = augmented[r, j] / pivot

            for k in range(rows):
                if k == r:
                    continue
                factor: Any = augmented[k, lead]
                for j in range(cols):
                    augmented[k, j] = augmented[k, j] - augmented[r, j] * factor

            pivot_cols.append(lead)
            lead += 1

        return pivot_cols

    @staticmethod
    def _right_half(augmented: Matrix[Any], size: int) -> Matrix[Any]:
        """Copy columns N..2N of the augmented matrix into a new matrix."""
        return type(augmented).from_iter(
            size,
            size,
            (augmented[i, j + size] for i in range(size) for j in range(size)),
        )
