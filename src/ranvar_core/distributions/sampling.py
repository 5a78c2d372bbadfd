"""
Sampling Containers
===================

Protocol and array-backed implementation for finite batches of draws.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from itertools import islice
from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from typing import Any

    import numpy.typing as npt

    from ranvar_core.types import Number


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample of shape ``(n, d)``.

    Parameters
    ----------
    data : numpy.ndarray
        1D array of ``n`` univariate draws (stored as ``(n, 1)``) or a 2D
        array of shape ``(n, d)``.

    Raises
    ------
    ValueError
        If data has more than two dimensions.
    """

    dimension: int
    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        data = np.asarray(data, dtype=np.float64)
        if data.ndim == 1:
            data = data.reshape(-1, 1)
        if data.ndim != 2:
            raise ValueError("ArraySample expects a 1D array or a 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    @classmethod
    def from_draws(cls, draws: Iterable[Number], n: int) -> ArraySample:
        """
        Collect the first ``n`` values of a (possibly infinite) draw stream.

        Raises
        ------
        ValueError
            If ``n`` is negative or the stream ends early.
        """
        if n < 0:
            raise ValueError("Sample size must be non-negative.")
        values = np.fromiter(islice(draws, n), dtype=np.float64, count=n)
        return cls(values)

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.floating[Any]]]:
        yield from self.data

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)

    def mean(self) -> float:
        """Sample mean of a univariate sample."""
        return float(self.data[:, 0].mean())

    def var(self, ddof: int = 0) -> float:
        """Sample variance of a univariate sample."""
        return float(self.data[:, 0].var(ddof=ddof))
