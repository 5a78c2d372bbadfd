"""
Distribution Interface
======================

The :class:`Distribution` protocol is the contract every distribution
implements: analytical characteristics resolved through a computation
strategy, a support, and sampling from a bound random source.

Notes
-----
- ``draw`` returns one value, ``sample(n)`` an ``(n, 1)`` array sample and
  ``samples()`` a lazy infinite iterator; all three use the same algorithm.
- The random source is shared by reference, never owned.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from typing import Any

    from ranvar_core.distributions.computation import AnalyticalComputation
    from ranvar_core.distributions.sampling import Sample
    from ranvar_core.distributions.strategies import (
        ComputationStrategy,
        SamplingStrategy,
    )
    from ranvar_core.distributions.support import Support
    from ranvar_core.random_source import RandomSource
    from ranvar_core.types import (
        DistributionType,
        GenericCharacteristicName,
        Number,
    )


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy: ...

    @property
    def support(self) -> Support | None: ...

    @property
    def random_source(self) -> RandomSource: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> AnalyticalComputation[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def draw(self) -> Number:
        return self.sampling_strategy.draw(self.analytical_computations, self.random_source)

    def sample(self, n: int) -> Sample:
        return self.sampling_strategy.sample(n, self.analytical_computations, self.random_source)

    def samples(self) -> Iterator[Number]:
        while True:
            yield self.draw()
