"""
Hypergeometric distribution family implementation.

Contains the Hypergeometric family: the number of successes in ``n`` draws
without replacement from a population of ``N`` items with ``K`` successes.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from numbers import Integral
from typing import TYPE_CHECKING, cast

import numpy as np

from ranvar_core.distributions.strategies import DirectSamplingStrategy
from ranvar_core.distributions.support import IntegerRangeSupport, restrict_to_support
from ranvar_core.families.parametric_family import ParametricFamily
from ranvar_core.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from ranvar_core.families.registry import ParametricFamilyRegister
from ranvar_core.special import binomial_ln
from ranvar_core.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

    from ranvar_core.random_source import RandomSource


def _is_integer(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def configure_hypergeometric_family() -> None:
    """
    Configure and register the Hypergeometric distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.HYPERGEOMETRIC):
        return

    HYPERGEOMETRIC_DOC = """
    Hypergeometric distribution.

    Counts the successes among ``draws`` (n) items taken without replacement
    from a population of ``population`` (N) items, ``successes`` (K) of which
    are successes.

    Probability mass function:
        P(X = k) = C(K, k) * C(N - K, n - k) / C(N, n)
        for max(0, n + K - N) <= k <= min(K, n)

    Binomial coefficients are handled in log-space throughout, so the mass and
    distribution functions stay finite for populations in the thousands.
    """

    def _support(parameters: Parametrization) -> IntegerRangeSupport:
        """Support of hypergeometric distribution"""
        parameters = cast(_Classic, parameters)
        population, successes, draws = (
            parameters.population,
            parameters.successes,
            parameters.draws,
        )
        return IntegerRangeSupport(
            min_k=max(0, draws + successes - population), max_k=min(successes, draws)
        )

    def _log_terms(parameters: _Classic, k: NumericArray) -> NumericArray:
        population, successes, draws = (
            parameters.population,
            parameters.successes,
            parameters.draws,
        )
        return cast(
            NumericArray,
            binomial_ln(successes, k)
            + binomial_ln(population - successes, draws - k)
            - binomial_ln(population, draws),
        )

    def log_pmf(parameters: Parametrization, k: NumericArray) -> NumericArray:
        """
        Logarithm of the probability mass function.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - population: int
            - successes: int
            - draws: int
        k : NumericArray
            Points at which to evaluate the log-mass

        Returns
        -------
        NumericArray
            ``ln P(X = k)``; ``-inf`` outside the support and for non-integer k,
            NaN for NaN
        """
        parameters = cast(_Classic, parameters)
        k_arr = np.asarray(k, dtype=np.float64)
        with np.errstate(invalid="ignore"):
            values = _log_terms(parameters, k_arr)
        return restrict_to_support(_support(parameters), k_arr, values, -np.inf)

    def pmf(parameters: Parametrization, k: NumericArray) -> NumericArray:
        """
        Probability mass function for hypergeometric distribution.

        Returns
        -------
        NumericArray
            ``P(X = k)``; exactly 0 outside the support and for non-integer k,
            NaN for NaN
        """
        return cast(NumericArray, np.exp(log_pmf(parameters, k)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for hypergeometric distribution.

        Each term ``exp(lnC(K,i) + lnC(N-K,n-i) - lnC(N,n))`` is formed in
        log-space before summing over ``i <= floor(x)``.

        Returns
        -------
        NumericArray
            ``P(X <= x)``: exactly 0 below the minimum, exactly 1 at or above
            the maximum, NaN for NaN
        """
        parameters = cast(_Classic, parameters)
        support = _support(parameters)
        lower, upper = support.min_k, support.max_k
        x_arr = np.asarray(x, dtype=np.float64)

        points = support.points.astype(np.float64)
        cumulative = np.cumsum(np.exp(_log_terms(parameters, points)))

        inner = np.where(np.isfinite(x_arr), x_arr, lower)
        idx = np.clip(np.floor(inner) - lower, 0, max(points.size - 1, 0)).astype(np.intp)
        body = cumulative[idx] if points.size else np.zeros_like(x_arr)

        result = np.where(x_arr < lower, 0.0, np.where(x_arr >= upper, 1.0, body))
        return cast(NumericArray, np.where(np.isnan(x_arr), np.nan, result))

    def sampler(parameters: Parametrization, random_source: RandomSource) -> int:
        """
        Draw one value by simulating the urn.

        Every draw removes one item from the population and is a success with
        probability ``successes_left / population_left``. Consumes exactly
        ``draws`` uniform variates.
        """
        parameters = cast(_Classic, parameters)
        population = parameters.population
        successes = parameters.successes
        draws = parameters.draws

        hits = 0
        while draws > 0:
            if random_source.next_uniform() < successes / population:
                hits += 1
                successes -= 1
            population -= 1
            draws -= 1
        return hits

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of hypergeometric distribution, ``K n / N``."""
        parameters = cast(_Classic, parameters)
        population = np.float64(parameters.population)
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(parameters.successes * parameters.draws / population)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """
        Variance of hypergeometric distribution.

        ``n K (N - K) (N - n) / (N^2 (N - 1))``, NaN for ``N <= 1``.
        """
        parameters = cast(_Classic, parameters)
        population = np.float64(parameters.population)
        successes = np.float64(parameters.successes)
        draws = np.float64(parameters.draws)
        with np.errstate(divide="ignore", invalid="ignore"):
            numerator = draws * successes * (population - successes) * (population - draws)
            return float(numerator / (population * population * (population - 1.0)))

    def std_func(parameters: Parametrization, _: Any) -> float:
        with np.errstate(invalid="ignore"):
            return float(np.sqrt(var_func(parameters, None)))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of hypergeometric distribution, NaN when degenerate."""
        parameters = cast(_Classic, parameters)
        population = np.float64(parameters.population)
        successes = np.float64(parameters.successes)
        draws = np.float64(parameters.draws)
        with np.errstate(divide="ignore", invalid="ignore"):
            numerator = (
                (population - 2.0 * successes)
                * np.sqrt(population - 1.0)
                * (population - 2.0 * draws)
            )
            spread = np.sqrt(
                draws * successes * (population - successes) * (population - draws)
            )
            return float(numerator / (spread * (population - 2.0)))

    def mode_func(parameters: Parametrization, _: Any) -> int:
        """Mode of hypergeometric distribution, ``floor((n+1)(K+1)/(N+2))``."""
        parameters = cast(_Classic, parameters)
        return (parameters.draws + 1) * (parameters.successes + 1) // (parameters.population + 2)

    Hypergeometric = ParametricFamily(
        name=FamilyName.HYPERGEOMETRIC,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["classic"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.LOG_PMF: log_pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.STD: std_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.SAMPLER: sampler,
        },
        sampling_strategy=DirectSamplingStrategy(),
        support_by_parametrization=_support,
    )
    Hypergeometric.__doc__ = HYPERGEOMETRIC_DOC

    @parametrization(family=Hypergeometric, name="classic")
    class _Classic(Parametrization):
        """
        Classic parametrization of hypergeometric distribution.

        Parameters
        ----------
        population : int
            Size of the population (N)
        successes : int
            Number of successes within the population (K)
        draws : int
            Number of draws without replacement (n)
        """

        population: int
        successes: int
        draws: int

        @constraint(description="population, successes and draws are integers")
        def check_integral(self) -> bool:
            return all(_is_integer(v) for v in (self.population, self.successes, self.draws))

        @constraint(description="population >= 0")
        def check_population_non_negative(self) -> bool:
            return self.population >= 0

        @constraint(description="0 <= successes <= population")
        def check_successes_in_population(self) -> bool:
            return 0 <= self.successes <= self.population

        @constraint(description="0 <= draws <= population")
        def check_draws_in_population(self) -> bool:
            return 0 <= self.draws <= self.population

    ParametricFamilyRegister.register(Hypergeometric)
