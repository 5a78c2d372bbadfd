"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, cast

import numpy as np

from ranvar_core.distributions.distribution import Distribution
from ranvar_core.families.registry import ParametricFamilyRegister
from ranvar_core.random_source import default_random_source
from ranvar_core.settings import parameter_checks_enabled
from ranvar_core.types import CharacteristicName, EuclideanDistributionType

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from ranvar_core.distributions.computation import AnalyticalComputation
    from ranvar_core.distributions.strategies import ComputationStrategy, SamplingStrategy
    from ranvar_core.distributions.support import Support
    from ranvar_core.families.parametric_family import ParametricFamily
    from ranvar_core.families.parametrizations import Parametrization
    from ranvar_core.random_source import RandomSource
    from ranvar_core.types import (
        DistributionType,
        GenericCharacteristicName,
        Number,
        NumericArray,
    )

logger = logging.getLogger(__name__)


def _unwrap(value: Any) -> Any:
    """Turn 0-d NumPy results into Python scalars, keep arrays as they are."""
    if isinstance(value, np.ndarray | np.generic) and np.ndim(value) == 0:
        return value.item()
    return value


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Parameters are replaced only through :meth:`set_parameters`, which
    validates the complete candidate tuple before committing it; a rejected
    update leaves the instance untouched.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parameters : Parametrization
        Parameter values for this distribution.
    _support : Support or None
        Support of this distribution.
    _random_source : RandomSource or None
        Source of uniform variates; ``None`` binds the process-wide default.
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    _support: Support | None
    _random_source: RandomSource | None = None
    _cache_key: Parametrization | None = field(default=None, init=False, repr=False, compare=False)
    _cache_val: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self._random_source is None:
            self._random_source = default_random_source()

    @property
    def distribution_type(self) -> DistributionType:
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """The parametric family this distribution belongs to."""
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parametrization_name(self) -> str:
        return self.parameters.name

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Analytical computations bound to the current parameters.

        Built lazily and cached until the parameters object is replaced.
        """
        if self._cache_key is not self.parameters or self._cache_val is None:
            self._cache_val = self.family._build_analytical_computations(self.parameters)
            self._cache_key = self.parameters
        return self._cache_val

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy:
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        return self._support

    @property
    def random_source(self) -> RandomSource:
        return cast("RandomSource", self._random_source)

    @random_source.setter
    def random_source(self, source: RandomSource | None) -> None:
        self._random_source = default_random_source() if source is None else source

    # ------------------------------------------------------------------
    # Parameter mutation
    # ------------------------------------------------------------------

    def set_parameters(self, **values: Any) -> None:
        """
        Replace some parameters, validating the complete resulting tuple.

        Parameters
        ----------
        **values
            New values keyed by parameter name of the current parametrization.

        Raises
        ------
        InvalidParametersError
            If the candidate tuple violates a constraint; nothing changes.
        TypeError
            If a name is not a parameter; nothing changes.
        """
        candidate = self.parameters.replace(**values)
        if parameter_checks_enabled():
            candidate.validate()

        support = self.family.support_resolver(candidate)
        self.parameters = candidate
        self._support = support
        logger.debug("%s parameters set to %s", self.family_name, candidate.parameters)

    def set_parameter(self, name: str, value: Any) -> None:
        """Replace a single parameter; see :meth:`set_parameters`."""
        self.set_parameters(**{name: value})

    # ------------------------------------------------------------------
    # Characteristics
    # ------------------------------------------------------------------

    def _characteristic(self, name: GenericCharacteristicName, value: Any = None, **options: Any) -> Any:
        return _unwrap(self.calculate_characteristic(name, value, **options))

    @property
    def mean(self) -> float:
        return self._characteristic(CharacteristicName.MEAN)  # type: ignore[no-any-return]

    @property
    def variance(self) -> float:
        return self._characteristic(CharacteristicName.VAR)  # type: ignore[no-any-return]

    @property
    def std(self) -> float:
        return self._characteristic(CharacteristicName.STD)  # type: ignore[no-any-return]

    @property
    def skewness(self) -> float:
        return self._characteristic(CharacteristicName.SKEW)  # type: ignore[no-any-return]

    @property
    def kurtosis(self) -> float:
        """Raw kurtosis."""
        return self._characteristic(CharacteristicName.KURT)  # type: ignore[no-any-return]

    @property
    def excess_kurtosis(self) -> float:
        return self._characteristic(CharacteristicName.KURT, excess=True)  # type: ignore[no-any-return]

    @property
    def mode(self) -> Number:
        return self._characteristic(CharacteristicName.MODE)  # type: ignore[no-any-return]

    @property
    def median(self) -> Number:
        return self._characteristic(CharacteristicName.MEDIAN)  # type: ignore[no-any-return]

    @property
    def entropy(self) -> float:
        return self._characteristic(CharacteristicName.ENTROPY)  # type: ignore[no-any-return]

    @property
    def _is_discrete(self) -> bool:
        distr_type = self._distribution_type
        return isinstance(distr_type, EuclideanDistributionType) and distr_type.is_discrete

    @property
    def minimum(self) -> Number:
        """Smallest point of the support."""
        lower = cast("Support", self._support).lower
        return int(lower) if self._is_discrete else lower

    @property
    def maximum(self) -> Number:
        """Largest point of the support (``inf`` for unbounded supports)."""
        upper = cast("Support", self._support).upper
        return int(upper) if self._is_discrete else upper

    def pdf(self, x: Number | NumericArray) -> float | NumericArray:
        return self._characteristic(CharacteristicName.PDF, x)  # type: ignore[no-any-return]

    def log_pdf(self, x: Number | NumericArray) -> float | NumericArray:
        return self._characteristic(CharacteristicName.LOG_PDF, x)  # type: ignore[no-any-return]

    def pmf(self, k: Number | NumericArray) -> float | NumericArray:
        return self._characteristic(CharacteristicName.PMF, k)  # type: ignore[no-any-return]

    def log_pmf(self, k: Number | NumericArray) -> float | NumericArray:
        return self._characteristic(CharacteristicName.LOG_PMF, k)  # type: ignore[no-any-return]

    def cdf(self, x: Number | NumericArray) -> float | NumericArray:
        return self._characteristic(CharacteristicName.CDF, x)  # type: ignore[no-any-return]

    def ppf(self, p: Number | NumericArray) -> float | NumericArray:
        return self._characteristic(CharacteristicName.PPF, p)  # type: ignore[no-any-return]

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.parameters.parameters.items())
        return f"{self.family_name}({params})"
