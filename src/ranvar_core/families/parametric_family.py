"""
Parametric family definitions and management infrastructure.

This module contains the main class for defining parametric families of
distributions: named parametrizations with joint constraints, analytical
characteristics, a support resolver, a sampling strategy, and factory and
stateless sampling methods.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import logging
from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from ranvar_core.distributions.computation import AnalyticalComputation
from ranvar_core.distributions.strategies import (
    AnalyticalComputationStrategy,
    InverseTransformSamplingStrategy,
)
from ranvar_core.families.distribution import ParametricFamilyDistribution
from ranvar_core.random_source import default_random_source
from ranvar_core.settings import parameter_checks_enabled
from ranvar_core.types import DistributionType

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from typing import Any, TypeAlias

    from ranvar_core.distributions.sampling import ArraySample
    from ranvar_core.distributions.strategies import ComputationStrategy, SamplingStrategy
    from ranvar_core.distributions.support import Support
    from ranvar_core.families.parametrizations import Parametrization
    from ranvar_core.random_source import RandomSource
    from ranvar_core.types import (
        GenericCharacteristicName,
        Number,
        ParametrizationName,
    )

    ParametrizedFunction: TypeAlias = Callable[[Parametrization, Any], Any]
    SupportArg: TypeAlias = Callable[[Parametrization], Support | None] | None
    SupportResolver: TypeAlias = Callable[[Parametrization], Support | None]
    Computations: TypeAlias = dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]

logger = logging.getLogger(__name__)


class ParametricFamily:
    """
    A family of distributions with one or more parametrizations.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : DistributionType or Callable[[Parametrization], DistributionType]
        Distribution type or function that infers type from base parametrization.
    distr_parametrizations : list[ParametrizationName]
        List of parametrization names (first is base parametrization).
    distr_characteristics : dict[str, dict[str, Callable] or Callable]
        Mapping from characteristic names to computation functions.
        Single functions are treated as defined for the base parametrization.
    sampling_strategy : SamplingStrategy, optional
        Strategy for sampling, inverse transform by default.
    computation_strategy : ComputationStrategy, optional
        Strategy for resolving characteristics, analytical-only by default.
    support_by_parametrization : Callable or None, optional
        Function that returns support for given parameters.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType | Callable[[Parametrization], DistributionType],
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[
            GenericCharacteristicName,
            dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ],
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy | None = None,
        support_by_parametrization: SupportArg = None,
    ):
        self._name = name
        self._distr_type: Callable[[Parametrization], DistributionType] = (
            (lambda params: distr_type) if isinstance(distr_type, DistributionType) else distr_type
        )

        self.computation_strategy = (
            AnalyticalComputationStrategy() if computation_strategy is None else computation_strategy
        )
        self.sampling_strategy = (
            InverseTransformSamplingStrategy() if sampling_strategy is None else sampling_strategy
        )

        self._support_resolver: SupportResolver = (
            (lambda _params: None) if support_by_parametrization is None else support_by_parametrization
        )

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]

        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        def _process_char_val(
            value: dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ) -> dict[ParametrizationName, ParametrizedFunction]:
            return value if isinstance(value, dict) else {self.base_parametrization_name: value}

        self.distr_characteristics: dict[
            GenericCharacteristicName, dict[ParametrizationName, ParametrizedFunction]
        ] = {key: _process_char_val(val) for key, val in distr_characteristics.items()}

        # For every parametrization: which form serves each characteristic
        self._analytical_plan: dict[
            ParametrizationName, dict[GenericCharacteristicName, ParametrizationName]
        ] = {}
        base_name = self.base_parametrization_name
        for pname in self.parametrization_names:
            plan_for_p: dict[GenericCharacteristicName, ParametrizationName] = {}
            for characteristic, forms in self.distr_characteristics.items():
                if pname in forms:
                    plan_for_p[characteristic] = pname
                elif base_name in forms:
                    plan_for_p[characteristic] = base_name
            self._analytical_plan[pname] = plan_for_p

    @property
    def name(self) -> str:
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Base parametrization class.

        Raises
        ------
        ValueError
            If base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    @property
    def support_resolver(self) -> SupportResolver:
        return self._support_resolver

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Raises
        ------
        ValueError
            If name is already registered.
        """
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        KeyError
            If name is not registered.
        """
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert parameters to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def parameters(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> Parametrization:
        """
        Build a parameter tuple and validate it jointly.

        Validation is skipped while parameter checks are disabled in
        :mod:`ranvar_core.settings`.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        TypeError
            If parameters are missing or unknown.
        InvalidParametersError
            If parameters don't satisfy constraints.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        if parameter_checks_enabled():
            parameters.validate()
        return parameters

    def _build_analytical_computations(self, parameters: Parametrization) -> Computations:
        """Bind every available characteristic to the given parameters."""
        plan = self._analytical_plan.get(parameters.name, {})
        result: Computations = {}
        base_params: Parametrization | None = None

        for characteristic, provider_name in plan.items():
            if provider_name == parameters.name:
                params_obj = parameters
            else:
                if base_params is None:
                    base_params = self.to_base(parameters)
                params_obj = base_params

            func_factory = self.distr_characteristics[characteristic][provider_name]
            result[characteristic] = AnalyticalComputation(
                target=characteristic,
                func=partial(func_factory, params_obj),
            )

        return result

    def distribution(
        self,
        parametrization_name: str | None = None,
        random_source: RandomSource | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization to use (defaults to base).
        random_source : RandomSource, optional
            Source bound to the instance; the process-wide default if omitted.
        **parameters_values
            Parameter values for the distribution.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        InvalidParametersError
            If parameters don't satisfy constraints.
        """
        parameters = self.parameters(parametrization_name, **parameters_values)
        distribution_type = self._distr_type(self.to_base(parameters))
        logger.debug("Creating %s distribution with %s", self.name, parameters.parameters)
        return ParametricFamilyDistribution(
            self.name,
            distribution_type,
            parameters,
            self.support_resolver(parameters),
            random_source,
        )

    __call__ = distribution

    # ------------------------------------------------------------------
    # Stateless sampling
    # ------------------------------------------------------------------

    def draw(
        self,
        random_source: RandomSource | None = None,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> Number:
        """
        Validate parameters and draw one value without creating an instance.

        Raises
        ------
        InvalidParametersError
            If parameters don't satisfy constraints.
        """
        parameters = self.parameters(parametrization_name, **parameters_values)
        source = default_random_source() if random_source is None else random_source
        return self.sampling_strategy.draw(self._build_analytical_computations(parameters), source)

    def sample(
        self,
        n: int,
        random_source: RandomSource | None = None,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ArraySample:
        """Validate parameters once and draw ``n`` values."""
        return self.sampling_strategy.sample(
            n,
            self._build_analytical_computations(
                self.parameters(parametrization_name, **parameters_values)
            ),
            default_random_source() if random_source is None else random_source,
        )

    def samples(
        self,
        random_source: RandomSource | None = None,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> Iterator[Number]:
        """
        Validate parameters and return a lazy infinite stream of draws.

        Validation happens here, before the first element is requested.

        Raises
        ------
        InvalidParametersError
            If parameters don't satisfy constraints.
        """
        parameters = self.parameters(parametrization_name, **parameters_values)
        source = default_random_source() if random_source is None else random_source
        return self.sampling_strategy.samples(
            self._build_analytical_computations(parameters), source
        )

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        Parameters
        ----------
        name : str
            Name of the parametrization.
        """
        from ranvar_core.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)
