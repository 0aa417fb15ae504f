################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense row-major matrix container and its operations."""

from __future__ import annotations

from oasis_matrix.matrix.matrix import Matrix
from oasis_matrix.matrix.matrix_errors import MatrixConstructionError
from oasis_matrix.matrix.matrix_errors import MatrixConversionError
from oasis_matrix.matrix.matrix_errors import MatrixError
from oasis_matrix.matrix.matrix_errors import MatrixIndexError
from oasis_matrix.matrix.matrix_errors import MatrixShapeError
from oasis_matrix.matrix.matrix_errors import SingularMatrixError
from oasis_matrix.matrix.matrix_views import CellRef
from oasis_matrix.matrix.matrix_views import ColView
from oasis_matrix.matrix.matrix_views import RowView


__all__ = [
    "CellRef",
    "ColView",
    "Matrix",
    "MatrixConstructionError",
    "MatrixConversionError",
    "MatrixError",
    "MatrixIndexError",
    "MatrixShapeError",
    "RowView",
    "SingularMatrixError",
]
