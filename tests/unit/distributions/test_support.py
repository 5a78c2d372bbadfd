from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf

import numpy as np
import pytest

from ranvar_core.distributions.support import (
    ContinuousSupport,
    DiscreteSupport,
    IntegerRangeSupport,
    Support,
    restrict_to_support,
)


class TestContinuousSupport:
    support_example = ContinuousSupport(left=0.0, right=1.0, left_closed=True, right_closed=False)

    @pytest.mark.parametrize(
        "point, expected_result",
        [
            (0, True),
            (1, False),
            (0.5, True),
            (-0.1, False),
            (inf, False),
            (-inf, False),
        ],
        ids=[
            "left_bound_closed",
            "right_bound_open",
            "inside_interval",
            "outside_interval",
            "+inf",
            "-inf",
        ],
    )
    def test_continuous_support_contains_scalar(self, point, expected_result):
        assert (point in self.support_example) is expected_result
        assert self.support_example.contains(point) is expected_result

    @pytest.mark.parametrize("infinity", [-inf, inf])
    def test_continuous_support_doesnt_contain_inf(self, infinity):
        # inf is a limit, not a point, even on the real line
        support = ContinuousSupport()
        assert infinity not in support
        assert support.contains(infinity) is False

    def test_continuous_support_contains_array(self):
        result = self.support_example.contains(np.array([-1.0, 0.0, 0.5, 1.0]))
        assert isinstance(result, np.ndarray)
        assert result.tolist() == [False, True, True, False]

    def test_bounds_of_right_ray(self):
        support = ContinuousSupport(left=0.0)
        assert support.lower == 0.0
        assert support.upper == inf
        assert not support.right_closed
        assert isinstance(support, Support)


class TestIntegerRangeSupport:
    support_example = IntegerRangeSupport(min_k=2, max_k=5)

    @pytest.mark.parametrize(
        "point, expected_result",
        [(2, True), (5, True), (3.0, True), (3.5, False), (1, False), (6, False), (inf, False)],
    )
    def test_contains_scalar(self, point, expected_result):
        assert self.support_example.contains(point) is expected_result
        assert (point in self.support_example) is expected_result

    def test_contains_array(self):
        result = self.support_example.contains(np.array([1, 2, 2.5, 5, 6]))
        assert result.tolist() == [False, True, False, True, False]

    def test_bounds_and_points(self):
        assert self.support_example.lower == 2.0
        assert self.support_example.upper == 5.0
        assert self.support_example.points.tolist() == [2, 3, 4, 5]
        assert isinstance(self.support_example, DiscreteSupport)

    def test_empty_range(self):
        support = IntegerRangeSupport(min_k=3, max_k=2)
        assert support.points.size == 0
        assert support.contains(3) is False

    def test_single_point(self):
        support = IntegerRangeSupport(min_k=0, max_k=0)
        assert support.points.tolist() == [0]
        assert 0 in support


class TestRestrictToSupport:
    def test_fills_points_outside_continuous_support(self):
        x = np.array([-1.0, 0.0, 2.0, inf])
        values = np.array([7.0, 7.0, 7.0, 7.0])

        result = restrict_to_support(ContinuousSupport(left=0.0), x, values, 0.0)
        assert result.tolist() == [0.0, 7.0, 7.0, 0.0]

    def test_fills_non_integer_points_of_integer_range(self):
        x = np.array([1.0, 2.0, 2.5, 6.0])
        values = np.zeros(4)

        result = restrict_to_support(IntegerRangeSupport(min_k=2, max_k=5), x, values, -inf)
        assert result.tolist() == [-inf, 0.0, -inf, -inf]

    @pytest.mark.parametrize(
        "support",
        [ContinuousSupport(left=0.0), IntegerRangeSupport(min_k=0, max_k=3)],
        ids=["continuous", "integer_range"],
    )
    def test_nan_points_stay_nan(self, support):
        result = restrict_to_support(support, np.array([np.nan, 1.0]), np.array([5.0, 5.0]), 0.0)
        assert np.isnan(result[0])
        assert result[1] == 5.0

    def test_scalar_point(self):
        result = restrict_to_support(ContinuousSupport(left=0.0), -1.0, np.float64(3.0), 0.0)
        assert float(result) == 0.0
