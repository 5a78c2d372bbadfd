"""
Supports
========

Sets on which a distribution places its probability.

- :class:`ContinuousSupport` — a 1D interval, e.g. ``[0, inf)``.
- :class:`IntegerRangeSupport` — the integers of a bounded interval
  ``{min_k, ..., max_k}``, e.g. hypergeometric outcomes.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import Protocol, cast, overload, runtime_checkable

import numpy as np

from ranvar_core.types import BoolArray, Interval1D, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    @property
    def lower(self) -> float: ...
    @property
    def upper(self) -> float: ...


class ContinuousSupport(Interval1D, Support):
    @property
    def lower(self) -> float:
        return self.left

    @property
    def upper(self) -> float:
        return self.right


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    @property
    def points(self) -> NumericArray: ...


@dataclass(frozen=True, slots=True)
class IntegerRangeSupport(DiscreteSupport):
    """
    Integers of the closed interval ``[min_k, max_k]``.

    Parameters
    ----------
    min_k : int
        Smallest support point.
    max_k : int
        Largest support point. ``max_k < min_k`` gives an empty support.
    """

    min_k: int
    max_k: int

    @property
    def lower(self) -> float:
        return float(self.min_k)

    @property
    def upper(self) -> float:
        return float(self.max_k)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        result = (xf == np.floor(xf)) & (xf >= self.min_k) & (xf <= self.max_k)

        if np.ndim(xf) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def points(self) -> NumericArray:
        """All support points in increasing order."""
        return cast(NumericArray, np.arange(self.min_k, self.max_k + 1))


def restrict_to_support(
    support: Support, x: Number | NumericArray, values: NumericArray, fill: float
) -> NumericArray:
    """
    Keep ``values`` at points of ``support`` and put ``fill`` everywhere else.

    Parameters
    ----------
    support : Support
        Support of the distribution.
    x : Number or NumericArray
        Evaluation points, ``values`` has the same shape.
    values : NumericArray
        Characteristic computed by its formula at ``x``.
    fill : float
        Value outside the support, e.g. 0 for a density, ``-inf`` for a
        log-density.

    Returns
    -------
    NumericArray
        Masked values. NaN points stay NaN.
    """
    x = np.asarray(x, dtype=np.float64)
    masked = np.where(support.contains(x), values, fill)
    return cast(NumericArray, np.where(np.isnan(x), np.nan, masked))


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerRangeSupport",
    "restrict_to_support",
]
