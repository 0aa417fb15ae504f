################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Arithmetic on dense matrices

Each operation has explicit entry points instead of relying on operator
resolution:

    - Borrowing (``add``, ``sub``, ``neg``, ``matmul``): operands are left
      untouched and the result gets a freshly allocated backing list
    - Consuming (``add_consume``, ``sub_consume``, ``neg_consume``): the result
      takes over the left operand's backing list, so no cells are copied. The
      operands must not be used after the call
    - In-place (``add_assign``, ``sub_assign``): the left operand is mutated
      and returned

Shapes are checked before any cell is written, so a failed call never leaves
a partially updated operand.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING
from typing import Any
from typing import Callable
from typing import Iterator
from typing import TypeVar

from oasis_matrix.matrix.matrix_errors import MatrixShapeError
from oasis_matrix.matrix.matrix_views import ColView
from oasis_matrix.matrix.matrix_views import RowView
from oasis_matrix.matrix.scalar_traits import AddT
from oasis_matrix.matrix.scalar_traits import NegT
from oasis_matrix.matrix.scalar_traits import RingT
from oasis_matrix.matrix.scalar_traits import SubT


if TYPE_CHECKING:
    from oasis_matrix.matrix.matrix import Matrix


T = TypeVar("T")


def _require_same_shape(lhs: Matrix[Any], rhs: Matrix[Any], name: str) -> None:
    if lhs.rows != rhs.rows or lhs.cols != rhs.cols:
        raise MatrixShapeError(
            f"{name} requires matching shapes, got "
            f"{lhs.rows}x{lhs.cols} and {rhs.rows}x{rhs.cols}"
        )


def _zip_cells(
    lhs: Matrix[T], rhs: Matrix[T], op: Callable[[T, T], T]
) -> Iterator[T]:
    return (op(a, b) for a, b in zip(lhs._data, rhs._data))


def add(lhs: Matrix[AddT], rhs: Matrix[AddT]) -> Matrix[AddT]:
    """Return the element-wise sum of two matrices.

    Args:
        lhs: Left operand
        rhs: Right operand with the same shape as ``lhs``

    Returns:
        New matrix ``lhs + rhs``

    Raises:
        MatrixShapeError: If the shapes differ
    """
    _require_same_shape(lhs, rhs, "add")
    data: list[AddT] = list(_zip_cells(lhs, rhs, operator.add))
    return type(lhs)._adopt(lhs.rows, lhs.cols, data)


def sub(lhs: Matrix[SubT], rhs: Matrix[SubT]) -> Matrix[SubT]:
    """Return the element-wise difference of two matrices.

    Args:
        lhs: Left operand
        rhs: Right operand with the same shape as ``lhs``

    Returns:
        New matrix ``lhs - rhs``

    Raises:
        MatrixShapeError: If the shapes differ
    """
    _require_same_shape(lhs, rhs, "sub")
    data: list[SubT] = list(_zip_cells(lhs, rhs, operator.sub))
    return type(lhs)._adopt(lhs.rows, lhs.cols, data)


def neg(matrix: Matrix[NegT]) -> Matrix[NegT]:
    """Return a new matrix with every cell negated."""
    data: list[NegT] = [-value for value in matrix._data]
    return type(matrix)._adopt(matrix.rows, matrix.cols, data)


def matmul(lhs: Matrix[RingT], rhs: Matrix[RingT]) -> Matrix[RingT]:
    """Return the matrix product of two matrices.

    Each output cell is the dot product of a row of ``lhs`` and a column of
    ``rhs``. The sum starts from the first product and accumulates left to
    right, which fixes the rounding order for floating point cells.

    Args:
        lhs: Left operand with shape (n, k)
        rhs: Right operand with shape (k, m)

    Returns:
        New matrix with shape (n, m)

    Raises:
        MatrixShapeError: If ``lhs.cols`` does not match ``rhs.rows``
    """
    if lhs.cols != rhs.rows:
        raise MatrixShapeError(
            f"matmul requires lhs cols to match rhs rows, got "
            f"{lhs.rows}x{lhs.cols} and {rhs.rows}x{rhs.cols}"
        )
    data: list[RingT] = []
    for r in range(lhs.rows):
        row: RowView[RingT] = RowView(lhs, r)
        for c in range(rhs.cols):
            col: ColView[RingT] = ColView(rhs, c)
            pairs: Iterator[tuple[RingT, RingT]] = zip(row, col)
            a, b = next(pairs)
            acc: Any = a * b
            for a, b in pairs:
                acc = acc + a * b
            data.append(acc)
    return type(lhs)._adopt(lhs.rows, rhs.cols, data)


def add_consume(lhs: Matrix[AddT], rhs: Matrix[AddT]) -> Matrix[AddT]:
    """Sum two matrices, reusing the backing list of ``lhs``.

    This is the zero-copy variant of ``add``. Neither operand may be used
    after the call.

    Raises:
        MatrixShapeError: If the shapes differ
    """
    _require_same_shape(lhs, rhs, "add")
    data: list[AddT] = lhs._data
    for i, value in enumerate(rhs._data):
        data[i] = data[i] + value
    return type(lhs)._adopt(lhs.rows, lhs.cols, data)


def sub_consume(lhs: Matrix[SubT], rhs: Matrix[SubT]) -> Matrix[SubT]:
    """Subtract two matrices, reusing the backing list of ``lhs``.

    This is the zero-copy variant of ``sub``. Neither operand may be used
    after the call.

    Raises:
        MatrixShapeError: If the shapes differ
    """
    _require_same_shape(lhs, rhs, "sub")
    data: list[SubT] = lhs._data
    for i, value in enumerate(rhs._data):
        data[i] = data[i] - value
    return type(lhs)._adopt(lhs.rows, lhs.cols, data)


def neg_consume(matrix: Matrix[NegT]) -> Matrix[NegT]:
    """Negate a matrix, reusing its backing list."""
    data: list[NegT] = matrix._data
    for i, value in enumerate(data):
        data[i] = -value
    return type(matrix)._adopt(matrix.rows, matrix.cols, data)


def add_assign(lhs: Matrix[AddT], rhs: Matrix[AddT]) -> Matrix[AddT]:
    """Add ``rhs`` into ``lhs`` in place and return ``lhs``.

    Raises:
        MatrixShapeError: If the shapes differ
    """
    _require_same_shape(lhs, rhs, "add_assign")
    data: list[AddT] = lhs._data
    for i, value in enumerate(rhs._data):
        data[i] = data[i] + value
    return lhs


def sub_assign(lhs: Matrix[SubT], rhs: Matrix[SubT]) -> Matrix[SubT]:
    """Subtract ``rhs`` from ``lhs`` in place and return ``lhs``.

    Raises:
        MatrixShapeError: If the shapes differ
    """
    _require_same_shape(lhs, rhs, "sub_assign")
    data: list[SubT] = lhs._data
    for i, value in enumerate(rhs._data):
        data[i] = data[i] - value
    return lhs
