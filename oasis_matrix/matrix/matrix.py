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
Dense, fixed-size, row-major matrix container

Cells are kept in one flat list. Element (r, c) of a matrix with ``cols``
columns is stored at ``data[c + r * cols]``. The list always holds exactly
``rows * cols`` cells and both dimensions are strictly positive. A matrix is
never resized after construction.

Two access channels are provided:

    - Checked accessors (``get``, ``get_ref``, ``get_mut``, ``set``,
      ``get_row``, ``get_col``) return ``None`` or ``False`` for coordinates
      outside the matrix
    - Raw coordinate access (``m[r, c]``) treats a bad coordinate as a caller
      bug and raises ``MatrixIndexError``
"""

from __future__ import annotations

import copy
import itertools
from typing import Any
from typing import Callable
from typing import Generic
from typing import Iterable
from typing import Iterator
from typing import Sequence
from typing import TypeVar

from oasis_matrix.config.matrix_config import MatrixConfig
from oasis_matrix.config.matrix_params import DisplayParams
from oasis_matrix.config.matrix_params import InversionParams
from oasis_matrix.matrix import matrix_ops
from oasis_matrix.matrix.inversion import GaussJordan
from oasis_matrix.matrix.matrix_errors import MatrixConstructionError
from oasis_matrix.matrix.matrix_errors import MatrixIndexError
from oasis_matrix.matrix.matrix_views import CellRef
from oasis_matrix.matrix.matrix_views import ColView
from oasis_matrix.matrix.matrix_views import RowView
from oasis_matrix.matrix.scalar_traits import DEFAULT_KIND
from oasis_matrix.matrix.scalar_traits import AddT
from oasis_matrix.matrix.scalar_traits import FieldT
from oasis_matrix.matrix.scalar_traits import NegT
from oasis_matrix.matrix.scalar_traits import RingT
from oasis_matrix.matrix.scalar_traits import ScalarKind
from oasis_matrix.matrix.scalar_traits import SubT
from oasis_matrix.matrix.scalar_traits import kind_of
from oasis_matrix.matrix.scalar_traits import one_of
from oasis_matrix.matrix.scalar_traits import zero_of


T = TypeVar("T")


def _validate_dims(rows: int, cols: int) -> None:
    for dim in (rows, cols):
        if isinstance(dim, bool) or not isinstance(dim, int):
            raise MatrixConstructionError(
                f"rows and cols must be integers, got {rows!r}x{cols!r}"
            )
    if rows <= 0 or cols <= 0:
        raise MatrixConstructionError(
            f"rows and cols must be positive, got {rows}x{cols}"
        )


class Matrix(Generic[T]):
    """A two-dimensional, non-resizable container of numeric cells."""

    # Matrices are mutable
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, cols: int, data: Iterable[T]) -> None:
        """Fill a rows x cols matrix row by row from an iterable.

        Exactly ``rows * cols`` items are taken from ``data``, which may be
        unbounded. Remaining items are left unconsumed.

        Raises:
            MatrixConstructionError: If a dimension is not positive or
                ``data`` runs out before the matrix is full
        """
        _validate_dims(rows, cols)
        size: int = rows * cols
        cells: list[T] = list(itertools.islice(data, size))
        if len(cells) != size:
            raise MatrixConstructionError(
                f"expected {size} values for {rows}x{cols}, got {len(cells)}"
            )
        self._rows: int = rows
        self._cols: int = cols
        self._data: list[T] = cells

    @classmethod
    def _adopt(cls, rows: int, cols: int, data: list[T]) -> Matrix[T]:
        """Wrap an already-sized list without copying it."""
        _validate_dims(rows, cols)
        if len(data) != rows * cols:
            raise MatrixConstructionError(
                f"expected {rows * cols} values for {rows}x{cols}, got {len(data)}"
            )
        matrix: Matrix[T] = cls.__new__(cls)
        matrix._rows = rows
        matrix._cols = cols
        matrix._data = data
        return matrix

    #
    # Construction
    #

    @classmethod
    def new(cls, values: Sequence[Sequence[T]]) -> Matrix[T]:
        """Construct a matrix from nested rows.

        Example:
            ``Matrix.new([[1, 2], [3, 4], [5, 6]])`` is a 3x2 matrix
        """
        if len(values) == 0 or len(values[0]) == 0:
            raise MatrixConstructionError("nested values must be non-empty")
        cols: int = len(values[0])
        for row in values:
            if len(row) != cols:
                raise MatrixConstructionError("nested values must be rectangular")
        return cls(len(values), cols, itertools.chain.from_iterable(values))

    @classmethod
    def from_iter(cls, rows: int, cols: int, data: Iterable[T]) -> Matrix[T]:
        """Construct a matrix row by row from a possibly unbounded iterable."""
        return cls(rows, cols, data)

    @classmethod
    def zero(
        cls, rows: int, cols: int, kind: ScalarKind = DEFAULT_KIND
    ) -> Matrix[Any]:
        """Construct a matrix where every cell is the zero of ``kind``."""
        _validate_dims(rows, cols)
        return cls._adopt(rows, cols, [zero_of(kind) for _ in range(rows * cols)])

    @classmethod
    def identity(cls, size: int, kind: ScalarKind = DEFAULT_KIND) -> Matrix[Any]:
        """Construct a size x size identity matrix of ``kind`` cells."""
        result: Matrix[Any] = cls.zero(size, size, kind)
        for i in range(size):
            result._data[i + i * size] = one_of(kind)
        return result

    def copy(self) -> Matrix[T]:
        """Return a matrix with its own backing list."""
        return type(self)._adopt(self._rows, self._cols, list(self._data))

    #
    # Shape
    #

    @property
    def rows(self) -> int:
        """Return the number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Return the number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """Return ``(rows, cols)``."""
        return (self._rows, self._cols)

    def is_square(self) -> bool:
        """Return True if rows equals cols."""
        return self._rows == self._cols

    @property
    def kind(self) -> ScalarKind:
        """Return the element kind of the first cell."""
        return kind_of(self._data[0])

    @property
    def data(self) -> tuple[T, ...]:
        """Return a read-only snapshot of the row-major cells."""
        return tuple(self._data)

    def to_list(self) -> list[list[T]]:
        """Return the cells as a list of row lists."""
        cols: int = self._cols
        return [self._data[r * cols : (r + 1) * cols] for r in range(self._rows)]

    #
    # Checked access
    #

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def get(self, row: int, col: int) -> T | None:
        """Return a copy of the cell, or None if out of range."""
        if not self._in_bounds(row, col):
            return None
        return copy.copy(self._data[col + row * self._cols])

    def get_ref(self, row: int, col: int) -> T | None:
        """Return the stored cell object, or None if out of range."""
        if not self._in_bounds(row, col):
            return None
        return self._data[col + row * self._cols]

    def get_mut(self, row: int, col: int) -> CellRef[T] | None:
        """Return a writable handle to the cell, or None if out of range."""
        if not self._in_bounds(row, col):
            return None
        return CellRef(self, col + row * self._cols)

    def set(self, row: int, col: int, value: T) -> bool:
        """Write a cell. Returns False and changes nothing if out of range."""
        cell: CellRef[T] | None = self.get_mut(row, col)
        if cell is None:
            return False
        cell.set(value)
        return True

    def get_row(self, row: int) -> RowView[T] | None:
        """Return a live view of one row, or None if out of range."""
        if not 0 <= row < self._rows:
            return None
        return RowView(self, row)

    def get_col(self, col: int) -> ColView[T] | None:
        """Return a live view of one column, or None if out of range."""
        if not 0 <= col < self._cols:
            return None
        return ColView(self, col)

    #
    # Raw access
    #

    def _offset(self, key: Any) -> int:
        try:
            row, col = key
        except (TypeError, ValueError):
            raise TypeError("matrix indices must be a (row, col) pair") from None
        if not self._in_bounds(row, col):
            raise MatrixIndexError(
                f"index ({row}, {col}) out of range for {self._rows}x{self._cols}"
            )
        return col + row * self._cols

    def __getitem__(self, key: tuple[int, int]) -> T:
        return self._data[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        self._data[self._offset(key)] = value

    #
    # Structural transforms
    #

    def _require_row(self, row: int) -> None:
        if not 0 <= row < self._rows:
            raise MatrixIndexError(f"row {row} out of range for {self._rows} rows")

    def _require_col(self, col: int) -> None:
        if not 0 <= col < self._cols:
            raise MatrixIndexError(f"col {col} out of range for {self._cols} cols")

    def swap_rows(self, row1: int, row2: int) -> None:
        """Swap two rows in place."""
        self._require_row(row1)
        self._require_row(row2)
        cols: int = self._cols
        data: list[T] = self._data
        for col in range(cols):
            a: int = col + row1 * cols
            b: int = col + row2 * cols
            data[a], data[b] = data[b], data[a]

    def swap_cols(self, col1: int, col2: int) -> None:
        """Swap two columns in place."""
        self._require_col(col1)
        self._require_col(col2)
        cols: int = self._cols
        data: list[T] = self._data
        for row in range(self._rows):
            a: int = col1 + row * cols
            b: int = col2 + row * cols
            data[a], data[b] = data[b], data[a]

    def transpose(self) -> Matrix[T]:
        """Return the cols x rows transpose.

        The source is read column by column, which is exactly the row-major
        order of the result.
        """
        data: list[T] = []
        for col in range(self._cols):
            data.extend(copy.copy(value) for value in ColView(self, col))
        return type(self)._adopt(self._cols, self._rows, data)

    def inverse(
        self: Matrix[FieldT], params: InversionParams | MatrixConfig | None = None
    ) -> Matrix[Any] | None:
        """Return the inverse of a square matrix, or None if not square.

        ``params`` may be inversion parameters or a full ``MatrixConfig``. See
        ``GaussJordan.invert`` for how singular input is reported.
        """
        if isinstance(params, MatrixConfig):
            return GaussJordan.invert(self, params.inversion_params())
        return GaussJordan.invert(self, params)

    #
    # Bulk cell functions
    #

    def apply(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every cell in row-major order."""
        for value in self._data:
            func(value)

    def apply_mut(self, func: Callable[[T], T]) -> None:
        """Replace every cell with ``func(cell)`` in row-major order."""
        data: list[T] = self._data
        for i, value in enumerate(data):
            data[i] = func(value)

    #
    # Sequence protocol
    #

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    #
    # Operators
    #

    def __add__(self: Matrix[AddT], other: Matrix[AddT]) -> Matrix[AddT]:
        return matrix_ops.add(self, other)

    def __sub__(self: Matrix[SubT], other: Matrix[SubT]) -> Matrix[SubT]:
        return matrix_ops.sub(self, other)

    def __neg__(self: Matrix[NegT]) -> Matrix[NegT]:
        return matrix_ops.neg(self)

    def __matmul__(self: Matrix[RingT], other: Matrix[RingT]) -> Matrix[RingT]:
        return matrix_ops.matmul(self, other)

    def __iadd__(self: Matrix[AddT], other: Matrix[AddT]) -> Matrix[AddT]:
        return matrix_ops.add_assign(self, other)

    def __isub__(self: Matrix[SubT], other: Matrix[SubT]) -> Matrix[SubT]:
        return matrix_ops.sub_assign(self, other)

    #
    # Display
    #

    def format_grid(self, params: DisplayParams | MatrixConfig | None = None) -> str:
        """Return the cells as one line per row."""
        if isinstance(params, MatrixConfig):
            params = params.display_params()
        precision: int | None = (params or DisplayParams()).precision
        lines: list[str] = []
        for row in self.to_list():
            cells: list[str] = []
            for value in row:
                if precision is not None and isinstance(value, float):
                    cells.append(f"{value:.{precision}f}")
                else:
                    cells.append(str(value))
            lines.append("[" + ", ".join(cells) + "]")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format_grid()

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, data={self._data!r})"
