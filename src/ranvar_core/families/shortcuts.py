"""
Constructors for the built-in families.

Thin wrappers over the configured register, so that a distribution can be
created without looking its family up first::

    >>> urn = Hypergeometric(population=50, successes=5, draws=10)
    >>> wind = Rayleigh(sigma=2.0, random_source=NumpyRandomSource(7))
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from ranvar_core.families.configuration import configure_families_register
from ranvar_core.types import FamilyName

if TYPE_CHECKING:
    from ranvar_core.families.distribution import ParametricFamilyDistribution
    from ranvar_core.random_source import RandomSource


def Hypergeometric(  # noqa: N802
    population: int,
    successes: int,
    draws: int,
    random_source: RandomSource | None = None,
) -> ParametricFamilyDistribution:
    """
    Create a hypergeometric distribution.

    Parameters
    ----------
    population : int
        Population size N.
    successes : int
        Successes in the population K.
    draws : int
        Number of draws n.
    random_source : RandomSource, optional
        Source of uniform variates; the process-wide default if omitted.

    Raises
    ------
    InvalidParametersError
        If the parameters violate a constraint.
    """
    family = configure_families_register().get(FamilyName.HYPERGEOMETRIC)
    return family.distribution(
        random_source=random_source,
        population=population,
        successes=successes,
        draws=draws,
    )


def Rayleigh(  # noqa: N802
    sigma: float,
    random_source: RandomSource | None = None,
) -> ParametricFamilyDistribution:
    """Create a Rayleigh distribution with scale ``sigma``."""
    family = configure_families_register().get(FamilyName.RAYLEIGH)
    return family.distribution(random_source=random_source, sigma=sigma)


__all__ = [
    "Hypergeometric",
    "Rayleigh",
]
