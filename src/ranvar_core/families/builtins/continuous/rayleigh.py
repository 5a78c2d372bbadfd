"""
Rayleigh distribution family implementation.

Contains the Rayleigh family with scale and mean parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from ranvar_core.distributions.strategies import DirectSamplingStrategy
from ranvar_core.distributions.support import ContinuousSupport, restrict_to_support
from ranvar_core.families.parametric_family import ParametricFamily
from ranvar_core.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from ranvar_core.families.registry import ParametricFamilyRegister
from ranvar_core.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from ranvar_core.random_source import RandomSource

EULER_MASCHERONI = 0.5772156649015329
SQRT_PI_OVER_2 = math.sqrt(math.pi / 2.0)

SKEWNESS = 2.0 * math.sqrt(math.pi) * (math.pi - 3.0) / (4.0 - math.pi) ** 1.5
EXCESS_KURTOSIS = -(6.0 * math.pi**2 - 24.0 * math.pi + 16.0) / (4.0 - math.pi) ** 2


def configure_rayleigh_family() -> None:
    """
    Configure and register the Rayleigh distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.RAYLEIGH):
        return

    RAYLEIGH_DOC = """
    Rayleigh distribution.

    Distribution of the magnitude of a 2D vector whose components are
    independent zero-mean normal variables with standard deviation sigma,
    e.g. wind speed from uncorrelated velocity components.

    Probability density function (scale parametrization):
        f(x) = (x / sigma^2) * exp(-x^2 / (2 * sigma^2)) for x >= 0
    """

    support = ContinuousSupport(left=0.0)

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Rayleigh distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - sigma: float (scale parameter)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Density values at points x, 0 for x < 0, NaN for NaN
        """
        parameters = cast(_Scale, parameters)
        sigma2 = parameters.sigma**2
        x = np.asarray(x, dtype=np.float64)

        with np.errstate(invalid="ignore", over="ignore"):
            density = (x / sigma2) * np.exp(-(x * x) / (2.0 * sigma2))
        return restrict_to_support(support, x, density, 0.0)

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Logarithm of the density, ``ln(x / sigma^2) - x^2 / (2 sigma^2)``.

        Evaluated directly rather than as ``log(pdf)`` so deep tails keep
        their precision after the density itself underflows.

        Returns
        -------
        NumericArray
            Log-density values, ``-inf`` for x <= 0
        """
        parameters = cast(_Scale, parameters)
        sigma2 = parameters.sigma**2
        x = np.asarray(x, dtype=np.float64)

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            value = np.log(x / sigma2) - (x * x) / (2.0 * sigma2)
        return restrict_to_support(support, x, value, -np.inf)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for Rayleigh distribution.

        Returns
        -------
        NumericArray
            ``1 - exp(-x^2 / (2 sigma^2))``, exactly 0 for x <= 0, NaN for NaN
        """
        parameters = cast(_Scale, parameters)
        sigma2 = parameters.sigma**2
        x = np.asarray(x, dtype=np.float64)

        with np.errstate(over="ignore"):
            value = -np.expm1(-(x * x) / (2.0 * sigma2))
        # NaN fails the comparison and keeps its NaN value
        return np.where(x <= 0, 0.0, value)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Rayleigh distribution.

        Parameters
        ----------
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            ``sigma * sqrt(-2 ln(1 - p))``: 0 at p = 0, inf at p = 1

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=np.float64)
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_Scale, parameters)
        with np.errstate(divide="ignore"):
            return parameters.sigma * np.sqrt(-2.0 * np.log1p(-p))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Rayleigh distribution, ``sigma sqrt(pi / 2)``."""
        parameters = cast(_Scale, parameters)
        return parameters.sigma * SQRT_PI_OVER_2

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Rayleigh distribution, ``(2 - pi / 2) sigma^2``."""
        parameters = cast(_Scale, parameters)
        return (2.0 - math.pi / 2.0) * parameters.sigma**2

    def std_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Scale, parameters)
        return math.sqrt(2.0 - math.pi / 2.0) * parameters.sigma

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """Differential entropy, ``1 + ln(sigma / sqrt(2)) + gamma / 2``."""
        parameters = cast(_Scale, parameters)
        return 1.0 + math.log(parameters.sigma / math.sqrt(2.0)) + EULER_MASCHERONI / 2.0

    def skew_func(_1: Parametrization, _2: Any) -> float:
        """Skewness of Rayleigh distribution (same for every sigma)."""
        return SKEWNESS

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        """Raw or excess kurtosis of Rayleigh distribution.

        Parameters
        ----------
        _1 : Parametrization
            Needed by architecture parameter
        excess : bool
            A value defines if there will be raw or excess kurtosis
            default is False

        Returns
        -------
        float
            Kurtosis value
        """
        return EXCESS_KURTOSIS if excess else EXCESS_KURTOSIS + 3.0

    def mode_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Scale, parameters)
        return float(parameters.sigma)

    def median_func(parameters: Parametrization, _: Any) -> float:
        """Median of Rayleigh distribution, ``sigma sqrt(ln 4)``."""
        parameters = cast(_Scale, parameters)
        return parameters.sigma * math.sqrt(math.log(4.0))

    def sampler(parameters: Parametrization, random_source: RandomSource) -> float:
        """
        Draw one value as ``sigma * sqrt(-2 ln U)``.

        ``U == 0`` is drawn again, so the logarithm is always finite.
        """
        parameters = cast(_Scale, parameters)
        u = random_source.next_uniform()
        while u == 0.0:
            u = random_source.next_uniform()
        return parameters.sigma * math.sqrt(-2.0 * math.log(u))

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Rayleigh distribution"""
        return support

    Rayleigh = ParametricFamily(
        name=FamilyName.RAYLEIGH,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["scale", "mean"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOG_PDF: log_pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.STD: std_func,
            CharacteristicName.ENTROPY: entropy_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.MEDIAN: median_func,
            CharacteristicName.SAMPLER: sampler,
        },
        sampling_strategy=DirectSamplingStrategy(),
        support_by_parametrization=_support,
    )
    Rayleigh.__doc__ = RAYLEIGH_DOC

    @parametrization(family=Rayleigh, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of Rayleigh distribution.

        Parameters
        ----------
        sigma : float
            Scale parameter (σ) of the distribution
        """

        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    @parametrization(family=Rayleigh, name="mean")
    class _Mean(Parametrization):
        """
        Mean parametrization of Rayleigh distribution.

        Parameters
        ----------
        mean : float
            Mean of the distribution, ``sigma * sqrt(pi / 2)``
        """

        mean: float

        @constraint(description="mean > 0")
        def check_mean_positive(self) -> bool:
            return self.mean > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Scale(sigma=self.mean / SQRT_PI_OVER_2)  # type: ignore[call-arg]

    ParametricFamilyRegister.register(Rayleigh)
