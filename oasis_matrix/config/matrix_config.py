################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper for matrix operations."""

from __future__ import annotations

from dataclasses import dataclass

from .matrix_params import DisplayParams
from .matrix_params import InversionParams
from .matrix_params import MatrixParams
from .matrix_params import MatrixParamsError


class MatrixConfigError(Exception):
    """Raised when matrix configuration validation fails."""


@dataclass(frozen=True)
class MatrixConfig:
    """Convenience wrapper around matrix parameters."""

    params: MatrixParams

    def __init__(self, params: MatrixParams) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(self, "params", params)
        self.validate()

    @classmethod
    def defaults(cls) -> MatrixConfig:
        """Return a configuration built from default parameters."""
        return cls(MatrixParams.defaults())

    def validate(self) -> None:
        """Validate parameter invariants."""
        try:
            self.params.validate()
        except MatrixParamsError as exc:
            raise MatrixConfigError(str(exc)) from exc

    def inversion_params(self) -> InversionParams:
        """Return the configured inversion parameters."""
        return self.params.inversion

    def display_params(self) -> DisplayParams:
        """Return the configured display parameters."""
        return self.params.display
