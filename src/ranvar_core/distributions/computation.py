"""
Computation Primitives
======================

:class:`AnalyticalComputation` binds one characteristic of a family
(``pdf``, ``cdf``, ``mean``, ``sampler``, ...) to concrete parameters and
exposes it as a plain callable.

Notes
-----
- Point characteristics (``pdf``, ``pmf``, ``cdf``, ``ppf`` and their logs)
  accept scalars or NumPy arrays.
- Moment characteristics ignore their argument; call them with ``None``.
- ``sampler`` takes a :class:`~ranvar_core.random_source.RandomSource`.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from mypy_extensions import KwArg

from ranvar_core.types import GenericCharacteristicName

In = TypeVar("In")
Out = TypeVar("Out")


@dataclass(frozen=True, slots=True)
class AnalyticalComputation(Generic[In, Out]):
    """Analytical computation provided directly by a family.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Callable with the parameters already bound.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)
