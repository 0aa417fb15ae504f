################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for dense matrix operations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Magnitude at or below which a pivot counts as zero (0.0 is an exact test)
INVERSION_PIVOT_TOLERANCE: float = 0.0
# Behavior when the matrix being inverted is singular
INVERSION_SINGULAR_POLICY: str = "degenerate"

# Digits printed after the decimal point for float cells (None uses str())
DISPLAY_PRECISION: int | None = None

# Return the degenerate elimination result
SINGULAR_POLICY_DEGENERATE: str = "degenerate"
# Return None
SINGULAR_POLICY_NONE: str = "none"
# Raise SingularMatrixError
SINGULAR_POLICY_RAISE: str = "raise"

SINGULAR_POLICIES: frozenset[str] = frozenset(
    {
        SINGULAR_POLICY_DEGENERATE,
        SINGULAR_POLICY_NONE,
        SINGULAR_POLICY_RAISE,
    }
)


class MatrixParamsError(Exception):
    """Raised when matrix parameter validation fails."""


def _require_finite_non_negative(value: float, name: str) -> None:
    """Require a finite, non-negative value."""
    if not math.isfinite(value):
        raise MatrixParamsError(f"{name} must be finite")
    if value < 0.0:
        raise MatrixParamsError(f"{name} must be non-negative")


def _validate_optional_non_negative_int(value: int | None, name: str) -> None:
    """Validate an optional non-negative integer value."""
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise MatrixParamsError(f"{name} must be an int")
    if value < 0:
        raise MatrixParamsError(f"{name} must be non-negative")


@dataclass(frozen=True)
class InversionParams:
    """Gauss-Jordan inversion parameters."""

    # Pivot zero-test tolerance
    pivot_tolerance: float = INVERSION_PIVOT_TOLERANCE
    # One of "degenerate", "none" or "raise"
    singular_policy: str = INVERSION_SINGULAR_POLICY

    def validate(self) -> None:
        """Validate inversion parameters."""
        _require_finite_non_negative(
            self.pivot_tolerance, "inversion.pivot_tolerance"
        )
        if self.singular_policy not in SINGULAR_POLICIES:
            raise MatrixParamsError(
                "inversion.singular_policy must be degenerate, none, or raise"
            )


@dataclass(frozen=True)
class DisplayParams:
    """Text rendering parameters."""

    # Float precision for grid output
    precision: int | None = DISPLAY_PRECISION

    def validate(self) -> None:
        """Validate display parameters."""
        _validate_optional_non_negative_int(self.precision, "display.precision")


@dataclass(frozen=True)
class MatrixParams:
    """Complete configuration tree for matrix operations."""

    inversion: InversionParams
    display: DisplayParams

    @classmethod
    def defaults(cls) -> MatrixParams:
        """Return the default matrix parameter tree."""
        return cls(
            inversion=InversionParams(),
            display=DisplayParams(),
        )

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        self.inversion.validate()
        self.display.validate()

    def replace(self, **namespace_overrides: Any) -> MatrixParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
