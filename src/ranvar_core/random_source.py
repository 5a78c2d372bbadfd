"""
Random Sources
==============

Uniform variate providers consumed by sampling strategies.

- :class:`RandomSource` protocol — a single ``next_uniform()`` returning a
  float in ``[0, 1)``. Nothing else of a generator is ever used.
- :class:`NumpyRandomSource` — adapter over :class:`numpy.random.Generator`.
- :class:`SynchronizedRandomSource` — lock-guarded wrapper for sharing one
  source between threads.
- :func:`default_random_source` — process-wide default source.

Notes
-----
A source is shared by reference and its state advances on every draw.
Distributions never lock; concurrent use of one source must go through
:class:`SynchronizedRandomSource` or use one source per thread.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import threading
from functools import lru_cache
from typing import Protocol, runtime_checkable

import numpy as np

logger = logging.getLogger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    """Provider of i.i.d. uniform variates in ``[0, 1)``."""

    def next_uniform(self) -> float: ...


class NumpyRandomSource(RandomSource):
    """
    Random source backed by :class:`numpy.random.Generator`.

    Parameters
    ----------
    seed : int, numpy.random.Generator or None, default None
        Seed for a fresh PCG64 generator, or an existing generator to adopt.
        ``None`` seeds from OS entropy.
    """

    __slots__ = ("_generator",)

    def __init__(self, seed: int | np.random.Generator | None = None) -> None:
        if isinstance(seed, np.random.Generator):
            self._generator = seed
        else:
            self._generator = np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        """Underlying NumPy generator."""
        return self._generator

    def next_uniform(self) -> float:
        return float(self._generator.random())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._generator!r})"


class SynchronizedRandomSource(RandomSource):
    """
    Thread-safe view of another random source.

    Parameters
    ----------
    source : RandomSource
        Wrapped source; every draw is serialized through one lock.
    """

    __slots__ = ("_lock", "_source")

    def __init__(self, source: RandomSource) -> None:
        self._source = source
        self._lock = threading.Lock()

    @property
    def source(self) -> RandomSource:
        return self._source

    def next_uniform(self) -> float:
        with self._lock:
            return self._source.next_uniform()


@lru_cache(maxsize=1)
def default_random_source() -> RandomSource:
    """
    Return the process-wide default random source.

    Returns
    -------
    RandomSource
        An entropy-seeded :class:`NumpyRandomSource`, created on first use.
    """
    logger.debug("Creating default random source")
    return NumpyRandomSource()


def reset_default_random_source() -> None:
    """Drop the cached default source (test helper)."""
    default_random_source.cache_clear()


__all__ = [
    "RandomSource",
    "NumpyRandomSource",
    "SynchronizedRandomSource",
    "default_random_source",
    "reset_default_random_source",
]
