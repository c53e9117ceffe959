from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from itertools import islice
from math import inf, nan

import numpy as np
import pytest

from pysatl_stats.distributions.support import DiscreteSupport, IntegerIntervalSupport


class TestIntegerIntervalSupport:
    support_examples = {
        "boundless": IntegerIntervalSupport(),
        "bounded_left": IntegerIntervalSupport(min_k=1),
        "bounded_right": IntegerIntervalSupport(max_k=10),
        "full_bounded": IntegerIntervalSupport(min_k=0, max_k=10),
    }

    def test_is_discrete_support(self):
        assert isinstance(IntegerIntervalSupport(0, 3), DiscreteSupport)

    @pytest.mark.parametrize(
        "support_name, point, expected_result",
        [
            ("boundless", 1, True),
            ("boundless", 1.5, False),
            ("boundless", inf, False),
            ("boundless", nan, False),
            ("bounded_left", 0, False),
            ("bounded_left", 1, True),
            ("bounded_left", 1_000_000, True),
            ("bounded_right", -7, True),
            ("bounded_right", 11, False),
            ("full_bounded", 0, True),
            ("full_bounded", 10, True),
            ("full_bounded", 10.0, True),
            ("full_bounded", -1, False),
        ],
    )
    def test_contains_scalar(self, support_name, point, expected_result):
        support = self.support_examples[support_name]
        assert (point in support) is expected_result
        assert support.contains(point) is expected_result

    @pytest.mark.parametrize(
        "support_name, point, expected_result",
        [
            ("full_bounded", 10**400, False),
            ("full_bounded", -(10**400), False),
            ("bounded_left", 10**400, True),
            ("bounded_right", -(10**400), True),
            ("boundless", 10**400, True),
            ("full_bounded", np.int64(7), True),
            ("full_bounded", np.uint8(200), False),
        ],
    )
    def test_contains_integers_beyond_float_range(self, support_name, point, expected_result):
        support = self.support_examples[support_name]
        assert support.contains(point) is expected_result

    def test_contains_array_keeps_shape(self):
        support = self.support_examples["full_bounded"]
        points = np.array([[-1, 0, 5], [10, 11, 2.5]])

        result = support.contains(points)

        assert result.shape == points.shape
        np.testing.assert_array_equal(result, [[False, True, True], [True, False, False]])

    def test_bounds_flags(self):
        assert not self.support_examples["boundless"].is_left_bounded
        assert self.support_examples["bounded_left"].is_left_bounded
        assert not self.support_examples["bounded_left"].is_right_bounded
        assert self.support_examples["bounded_right"].is_right_bounded

    def test_first_last(self):
        support = self.support_examples["full_bounded"]
        assert support.first() == 0
        assert support.last() == 10
        assert self.support_examples["bounded_left"].last() is None

    def test_next_prev(self):
        support = self.support_examples["full_bounded"]
        assert support.next(3) == 4
        assert support.next(10) is None
        assert support.next(-5) == 0
        assert support.next(2.5) == 3
        assert support.prev(3) == 2
        assert support.prev(3.5) == 3
        assert support.prev(0) is None
        assert support.prev(100) == 10

    def test_iter_points_bounded(self):
        assert list(IntegerIntervalSupport(2, 5).iter_points()) == [2, 3, 4, 5]
        assert list(IntegerIntervalSupport(2, 5)) == [2, 3, 4, 5]

    def test_iter_points_right_unbounded_is_lazy(self):
        support = self.support_examples["bounded_left"]
        assert list(islice(support.iter_points(), 4)) == [1, 2, 3, 4]

    def test_iter_points_left_unbounded_raises(self):
        with pytest.raises(RuntimeError):
            list(self.support_examples["bounded_right"].iter_points())

    @pytest.mark.parametrize(
        "x, expected",
        [(-1, []), (0, [0]), (3, [0, 1, 2, 3]), (3.7, [0, 1, 2, 3]), (42, list(range(11)))],
    )
    def test_iter_leq(self, x, expected):
        assert list(self.support_examples["full_bounded"].iter_leq(x)) == expected

    def test_iter_leq_left_unbounded_raises(self):
        with pytest.raises(RuntimeError):
            list(self.support_examples["boundless"].iter_leq(0))

    def test_empty_support(self):
        support = IntegerIntervalSupport(min_k=5, max_k=2)

        assert support.is_empty
        assert support.first() is None
        assert support.last() is None
        assert list(support.iter_points()) == []
        assert list(support.iter_leq(10)) == []
        assert support.size == 0
        assert 3 not in support

    def test_size(self):
        assert IntegerIntervalSupport(0, 10).size == 11
        assert IntegerIntervalSupport(3, 3).size == 1
        assert self.support_examples["bounded_left"].size is None
