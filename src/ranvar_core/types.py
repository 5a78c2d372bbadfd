"""
Core Type Definitions
=====================

Descriptors, numeric aliases and characteristic names shared by every
ranvar-core module.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from math import inf
from typing import Any, TypeAlias, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Kind of a univariate distribution.

    Attributes
    ----------
    DISCRETE : str
        Probability mass concentrated on a countable set (``pmf``).
    CONTINUOUS : str
        Absolutely continuous distribution (``pdf``).
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """Base class for distribution type descriptors."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int
        Dimension of the sample space, 1 for univariate families.
    """

    kind: Kind
    dimension: int

    @property
    def is_discrete(self) -> bool:
        return self.kind is Kind.DISCRETE


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric scalars."""

Number = NumPyNumber | int | float
"""Type alias for all numeric scalars."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    1D interval with configurable closure.

    Infinite endpoints are always open: ``inf`` is a limit, not a point.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint.
    right : float, default=inf
        Right endpoint.
    left_closed : bool, default=True
        Whether ``left`` belongs to the interval.
    right_closed : bool, default=True
        Whether ``right`` belongs to the interval.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if self.left == -inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check whether point(s) lie in the interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            Scalar for scalar input, element-wise mask otherwise.
        """
        arr = np.asarray(x)

        above_left = (arr > self.left) | (self.left_closed & (arr >= self.left))
        below_right = (arr < self.right) | (self.right_closed & (arr <= self.right))
        result = above_left & below_right

        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))


GenericCharacteristicName: TypeAlias = str
"""Type alias for characteristic names (e.g., 'pdf', 'cdf')."""

ParametrizationName: TypeAlias = str
"""Type alias for parametrization names."""


class CharacteristicName(StrEnum):
    """
    Standard names of distribution characteristics.

    A family registers an analytical function under any subset of these
    names; a characteristic absent from the family is unsupported for it.
    ``SAMPLER`` is the family's direct sampling algorithm, it takes a random
    source instead of a point.
    """

    PDF = "pdf"
    LOG_PDF = "log_pdf"
    PMF = "pmf"
    LOG_PMF = "log_pmf"
    CDF = "cdf"
    PPF = "ppf"
    MEAN = "mean"
    VAR = "var"
    STD = "std"
    SKEW = "skewness"
    KURT = "kurtosis"
    MODE = "mode"
    MEDIAN = "median"
    ENTROPY = "entropy"
    SAMPLER = "sampler"


class FamilyName(StrEnum):
    HYPERGEOMETRIC = "Hypergeometric"
    RAYLEIGH = "Rayleigh"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "GenericCharacteristicName",
    "ParametrizationName",
    "DistributionType",
    "Interval1D",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "FamilyName",
]
