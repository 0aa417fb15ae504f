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
Generic dense matrices with element-wise arithmetic, transposition and
Gauss-Jordan inversion
"""

from __future__ import annotations

from oasis_matrix.matrix.matrix import Matrix


__all__ = ["Matrix"]
