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
Configuration for dense matrix operations

A validated ``MatrixConfig`` can be passed directly to ``Matrix.inverse`` and
``Matrix.format_grid``. Each also accepts its own parameter section.
"""

from __future__ import annotations

from oasis_matrix.config.matrix_config import MatrixConfig
from oasis_matrix.config.matrix_config import MatrixConfigError
from oasis_matrix.config.matrix_params import DisplayParams
from oasis_matrix.config.matrix_params import InversionParams
from oasis_matrix.config.matrix_params import MatrixParams
from oasis_matrix.config.matrix_params import MatrixParamsError


__all__ = [
    "DisplayParams",
    "InversionParams",
    "MatrixConfig",
    "MatrixConfigError",
    "MatrixParams",
    "MatrixParamsError",
]
