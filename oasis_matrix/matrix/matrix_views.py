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
Live views into a matrix backing store

Views hold the owning matrix and a fixed row or column index, never a copy of
the cells. Every traversal re-reads the backing store, so a view created
before an edit reflects that edit when it is consumed later. Mutating the
matrix while a traversal is in progress is not supported.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING
from typing import Generic
from typing import Iterator
from typing import TypeVar
from typing import overload


if TYPE_CHECKING:
    from oasis_matrix.matrix.matrix import Matrix


T = TypeVar("T")


class CellRef(Generic[T]):
    """Mutable handle to a single cell of a matrix."""

    def __init__(self, matrix: Matrix[T], offset: int) -> None:
        self._matrix: Matrix[T] = matrix
        self._offset: int = offset

    @property
    def offset(self) -> int:
        """Return the flat row-major offset of the cell."""
        return self._offset

    def get(self) -> T:
        """Return the current value of the cell."""
        return self._matrix._data[self._offset]

    def set(self, value: T) -> None:
        """Write a value through to the backing store."""
        self._matrix._data[self._offset] = value

    def __repr__(self) -> str:
        return f"CellRef(offset={self._offset}, value={self.get()!r})"


class _LineView(Sequence[T]):
    """Shared behavior for row and column views."""

    def __init__(self, matrix: Matrix[T], index: int) -> None:
        self._matrix: Matrix[T] = matrix
        self._index: int = index

    @property
    def line_index(self) -> int:
        """Return the row or column index this view is bound to."""
        return self._index

    def _offset(self, position: int) -> int:
        raise NotImplementedError

    @overload
    def __getitem__(self, position: int) -> T: ...

    @overload
    def __getitem__(self, position: slice) -> list[T]: ...

    def __getitem__(self, position: int | slice) -> T | list[T]:
        if isinstance(position, slice):
            return [self[i] for i in range(*position.indices(len(self)))]
        if position < 0 or position >= len(self):
            raise IndexError("view position out of range")
        return self._matrix._data[self._offset(position)]

    def __iter__(self) -> Iterator[T]:
        data: list[T] = self._matrix._data
        for position in range(len(self)):
            yield data[self._offset(position)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self._index}, values={list(self)!r})"


class RowView(_LineView[T]):
    """Lazy sequence over the cells of one matrix row."""

    def __len__(self) -> int:
        return self._matrix.cols

    def _offset(self, position: int) -> int:
        return position + self._index * self._matrix.cols


class ColView(_LineView[T]):
    """Lazy sequence over the cells of one matrix column."""

    def __len__(self) -> int:
        return self._matrix.rows

    def _offset(self, position: int) -> int:
        return self._index + position * self._matrix.cols
