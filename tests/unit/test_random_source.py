from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading

import numpy as np

from ranvar_core.random_source import (
    NumpyRandomSource,
    RandomSource,
    SynchronizedRandomSource,
    default_random_source,
    reset_default_random_source,
)
from tests.utils.mocks import SequenceRandomSource


class TestNumpyRandomSource:
    def test_values_are_in_unit_interval(self) -> None:
        source = NumpyRandomSource(seed=1)
        values = [source.next_uniform() for _ in range(1000)]

        assert all(isinstance(v, float) for v in values)
        assert min(values) >= 0.0
        assert max(values) < 1.0

    def test_fixed_seed_is_deterministic(self) -> None:
        first = NumpyRandomSource(seed=42)
        second = NumpyRandomSource(seed=42)

        assert [first.next_uniform() for _ in range(5)] == [
            second.next_uniform() for _ in range(5)
        ]

    def test_matches_numpy_generator_stream(self) -> None:
        source = NumpyRandomSource(seed=7)
        reference = np.random.default_rng(7)

        assert source.next_uniform() == float(reference.random())

    def test_adopts_existing_generator(self) -> None:
        generator = np.random.default_rng(3)
        source = NumpyRandomSource(generator)

        assert source.generator is generator
        assert isinstance(source, RandomSource)


class TestSynchronizedRandomSource:
    def test_delegates_to_wrapped_source(self) -> None:
        inner = SequenceRandomSource([0.1, 0.2])
        source = SynchronizedRandomSource(inner)

        assert source.source is inner
        assert source.next_uniform() == 0.1
        assert source.next_uniform() == 0.2

    def test_concurrent_draws_are_serialized(self) -> None:
        inner = SequenceRandomSource([i / 4000 for i in range(4000)])
        source = SynchronizedRandomSource(inner)
        results: list[float] = []
        results_lock = threading.Lock()

        def worker() -> None:
            local = [source.next_uniform() for _ in range(1000)]
            with results_lock:
                results.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        # Every scripted variate is handed out exactly once
        assert sorted(results) == [i / 4000 for i in range(4000)]
        assert inner.remaining == 0


class TestDefaultRandomSource:
    def test_is_shared_until_reset(self) -> None:
        source = default_random_source()
        assert default_random_source() is source

        reset_default_random_source()
        assert default_random_source() is not source

    def test_is_a_numpy_source(self) -> None:
        assert isinstance(default_random_source(), NumpyRandomSource)
