################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Exceptions raised by the dense matrix container."""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for matrix contract violations."""


class MatrixConstructionError(MatrixError, ValueError):
    """Raised when a matrix cannot be fully populated at construction."""


class MatrixIndexError(MatrixError, IndexError):
    """Raised when an unchecked coordinate falls outside the matrix."""


class MatrixShapeError(MatrixError, ValueError):
    """Raised when operand shapes are incompatible."""


class SingularMatrixError(MatrixError, ArithmeticError):
    """Raised when inverting a singular matrix under the raise policy."""


class MatrixConversionError(MatrixError, ValueError):
    """Raised when cells cannot be converted to another element kind."""
