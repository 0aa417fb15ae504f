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
Numeric capabilities required from matrix elements

Each matrix operation asks only for the capabilities it uses. Element-wise
addition needs ``Additive``, matrix products need ``RingLike`` (``Additive``
and ``Multiplicative``), and inversion needs the full ``FieldLike`` set. Zero and
one are produced from an element kind, which is any callable that accepts an
``int`` literal (``int``, ``float``, ``Fraction``, ``Decimal``, numpy scalar
types, ...).
"""

from __future__ import annotations

from typing import Any
from typing import Callable
from typing import Protocol
from typing import TypeVar
from typing import runtime_checkable


ScalarKind = Callable[[int], Any]

# Element kind used when none is given or can be inferred
DEFAULT_KIND: ScalarKind = int


@runtime_checkable
class Additive(Protocol):
    """Elements that support ``a + b``."""

    def __add__(self, other: Any, /) -> Any: ...


@runtime_checkable
class Subtractive(Protocol):
    """Elements that support ``a - b``."""

    def __sub__(self, other: Any, /) -> Any: ...


@runtime_checkable
class Negatable(Protocol):
    """Elements that support ``-a``."""

    def __neg__(self) -> Any: ...


@runtime_checkable
class Multiplicative(Protocol):
    """Elements that support ``a * b``."""

    def __mul__(self, other: Any, /) -> Any: ...


@runtime_checkable
class Divisible(Protocol):
    """Elements that support ``a / b``."""

    def __truediv__(self, other: Any, /) -> Any: ...


@runtime_checkable
class RingLike(Additive, Multiplicative, Protocol):
    """Elements usable by matrix products."""


@runtime_checkable
class FieldLike(Subtractive, Multiplicative, Divisible, Protocol):
    """Elements usable by Gauss-Jordan inversion."""


# Element types accepted by each family of operations
AddT = TypeVar("AddT", bound=Additive)
SubT = TypeVar("SubT", bound=Subtractive)
NegT = TypeVar("NegT", bound=Negatable)
RingT = TypeVar("RingT", bound=RingLike)
FieldT = TypeVar("FieldT", bound=FieldLike)


def zero_of(kind: ScalarKind) -> Any:
    """Return the additive identity of an element kind."""
    return kind(0)


def one_of(kind: ScalarKind) -> Any:
    """Return the multiplicative identity of an element kind."""
    return kind(1)


def kind_of(value: Any) -> ScalarKind:
    """Return the element kind of a value."""
    return type(value)


def is_zero(value: Any, tolerance: float = 0.0) -> bool:
    """Return True if a value is the additive identity.

    Args:
        value: Element to test
        tolerance: Magnitude at or below which a value counts as zero. The
            default of 0.0 is an exact test, which is only meaningful for
            exact element kinds.

    Returns:
        True if ``value`` is zero under the given tolerance
    """
    if tolerance == 0.0:
        return bool(value == zero_of(kind_of(value)))
    return bool(abs(value) <= tolerance)

