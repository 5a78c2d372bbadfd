"""
Computation and Sampling Strategies
===================================

This module defines the pluggable strategy interfaces and default implementations:

- :class:`ComputationStrategy` — resolves characteristic methods.
- :class:`AnalyticalComputationStrategy` — returns the family's analytical
  implementation or reports the characteristic as unsupported.
- :class:`SamplingStrategy` — draws values from a distribution.
- :class:`InverseTransformSamplingStrategy` — applies ``ppf`` to a uniform
  variate.
- :class:`DirectSamplingStrategy` — runs the family's own ``sampler``
  algorithm against the random source.

Notes
-----
- Strategies are stateless and may be shared between families.
- Sampling strategies work on a mapping of analytical computations, so the
  same code serves distribution instances and stateless family sampling.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias

from ranvar_core.distributions.computation import AnalyticalComputation
from ranvar_core.exceptions import UnsupportedCharacteristicError
from ranvar_core.types import CharacteristicName, GenericCharacteristicName, Number

from .sampling import ArraySample

if TYPE_CHECKING:
    from ranvar_core.random_source import RandomSource

    from .distribution import Distribution

Computations: TypeAlias = Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]


class ComputationStrategy(Protocol):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> AnalyticalComputation[Any, Any]: ...


class AnalyticalComputationStrategy(ComputationStrategy):
    """
    Resolver restricted to analytical characteristics.

    Raises
    ------
    UnsupportedCharacteristicError
        If the distribution has no analytical implementation of ``state``.
    """

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> AnalyticalComputation[Any, Any]:
        computations = distr.analytical_computations
        if state not in computations:
            raise UnsupportedCharacteristicError(state, getattr(distr, "family_name", None))
        return computations[state]


class SamplingStrategy(Protocol):
    """
    Protocol for sampling strategies.

    Implementations provide :meth:`draw`; batch and stream sampling are
    derived from it.
    """

    def draw(self, computations: Computations, random_source: "RandomSource") -> Number: ...

    def samples(self, computations: Computations, random_source: "RandomSource") -> Iterator[Number]:
        """Lazy infinite stream of independent draws."""
        while True:
            yield self.draw(computations, random_source)

    def sample(
        self, n: int, computations: Computations, random_source: "RandomSource"
    ) -> ArraySample:
        """Draw ``n`` values into an ``(n, 1)`` sample."""
        return ArraySample.from_draws(self.samples(computations, random_source), n)


def _require(computations: Computations, name: GenericCharacteristicName) -> AnalyticalComputation[Any, Any]:
    try:
        return computations[name]
    except KeyError as exc:
        raise UnsupportedCharacteristicError(name) from exc


class InverseTransformSamplingStrategy(SamplingStrategy):
    """
    Univariate sampler using inverse transform sampling.

    One uniform ``U`` in ``[0, 1)`` is pulled per draw and mapped through the
    family's ``ppf``.
    """

    def draw(self, computations: Computations, random_source: "RandomSource") -> float:
        ppf = _require(computations, CharacteristicName.PPF)
        return float(ppf(random_source.next_uniform()))


class DirectSamplingStrategy(SamplingStrategy):
    """
    Sampler delegating to the family's ``sampler`` characteristic.

    Used by families whose exact sampling algorithm is not an inversion,
    e.g. the hypergeometric urn simulation.
    """

    def draw(self, computations: Computations, random_source: "RandomSource") -> Number:
        sampler = _require(computations, CharacteristicName.SAMPLER)
        return sampler(random_source)  # type: ignore[no-any-return]
