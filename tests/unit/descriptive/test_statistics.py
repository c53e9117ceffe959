"""
Tests for the Descriptive Statistics Engine

This module tests :class:`Statistics`: central tendency, dispersion,
population and sample variance, empty datasets and input validation.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import statistics as py_statistics
from fractions import Fraction

import numpy as np
import pytest
from scipy import stats as sps

from pysatl_stats.descriptive import Statistics
from pysatl_stats.errors import DomainError, EmptyDatasetError


class TestStatistics:
    """Test suite for Statistics."""

    CALCULATION_PRECISION = 1e-10

    def setup_method(self):
        """Setup before each test method."""
        self.values = [1, 2, 3, 4, 5]
        self.stats = Statistics(self.values)

    def test_sum_and_size(self):
        assert self.stats.calculate_sum() == 15.0
        assert self.stats.size() == 5
        assert len(self.stats) == 5

    def test_sum_with_function(self):
        assert self.stats.calculate_sum(lambda v: v**2) == 55.0

    def test_population_statistics(self):
        assert self.stats.mean() == 3.0
        assert self.stats.median() == 3.0
        assert self.stats.amplitude() == 4
        assert self.stats.variance() == pytest.approx(2.0)
        assert self.stats.standard_deviation() == pytest.approx(math.sqrt(2.0))
        assert self.stats.coefficient_of_variation() == pytest.approx(math.sqrt(2.0) / 3.0)

    def test_sample_statistics(self):
        stats = Statistics(self.values, population_data=False)

        assert stats.variance() == pytest.approx(2.5)
        assert stats.standard_deviation() == pytest.approx(math.sqrt(2.5))

    def test_variance_matches_numpy(self):
        data = [2.5, -1.0, 7.25, 3.0, 3.0, 0.5, 11.0]
        stats = Statistics(data)

        assert abs(stats.variance() - np.var(data)) < self.CALCULATION_PRECISION
        stats.set_population_data(False)
        assert abs(stats.variance() - np.var(data, ddof=1)) < self.CALCULATION_PRECISION
        assert abs(stats.coefficient_of_variation() - sps.variation(data, ddof=1)) < (
            self.CALCULATION_PRECISION
        )

    def test_median_even_count(self):
        assert Statistics([4, 1, 3, 2]).median() == 2.5

    def test_median_sorts_stored_values(self):
        stats = Statistics([5, 3, 1, 4, 2])

        assert stats.median() == 3.0
        assert stats.get_values() == [1, 2, 3, 4, 5]

    def test_mode(self):
        assert Statistics([1, 2, 2, 3, 3, 3]).mode() == 3

    def test_mode_tie_goes_to_first_seen(self):
        assert Statistics([4, 1, 1, 4, 7]).mode() == 4
        assert Statistics([1, 4, 4, 1, 7]).mode() == 1

    def test_mode_matches_standard_library(self):
        data = [3, 1, 2, 3, 1, 2, 2]
        assert Statistics(data).mode() == py_statistics.mode(data)

    def test_amplitude_keeps_element_type(self):
        assert Statistics([Fraction(1, 3), Fraction(5, 6)]).amplitude() == Fraction(1, 2)

    def test_narrow_unsigned_numpy_values_do_not_wrap(self):
        stats = Statistics(np.array([200, 100], dtype=np.uint8))

        assert stats.median() == 150.0
        assert stats.calculate_sum() == 300.0
        assert stats.get_values() == [100, 200]
        assert all(type(value) is int for value in stats.get_values())

    def test_narrow_signed_numpy_values_do_not_wrap(self):
        stats = Statistics(np.array([127, -128, 127], dtype=np.int8))

        assert stats.amplitude() == 255
        assert stats.median() == 127.0
        assert stats.mode() == 127

    def test_numpy_floats_stored_as_python_floats(self):
        stats = Statistics(np.array([1.5, 2.5], dtype=np.float32))

        assert stats.get_values() == [1.5, 2.5]
        assert all(type(value) is float for value in stats.get_values())

    def test_constant_data(self):
        stats = Statistics([7, 7, 7])

        assert stats.variance() == 0.0
        assert stats.amplitude() == 0

    def test_zero_mean_coefficient_of_variation(self):
        assert Statistics([-1, 1]).coefficient_of_variation() == 0.0

    @pytest.mark.parametrize(
        "values",
        [range(1, 6), (1, 2, 3, 4, 5), np.array([1, 2, 3, 4, 5]), (v for v in [1, 2, 3, 4, 5])],
        ids=["range", "tuple", "numpy_array", "generator"],
    )
    def test_accepts_any_iterable(self, values):
        assert Statistics(values).mean() == 3.0

    def test_input_is_copied(self):
        stats = Statistics(self.values)
        self.values.append(100)

        assert stats.size() == 5

    def test_get_values_returns_copy(self):
        values = self.stats.get_values()
        values.clear()

        assert self.stats.size() == 5

    def test_set_values_replaces_dataset(self):
        assert self.stats.set_values([10, 20]) is self.stats
        assert self.stats.mean() == 15.0

    def test_set_population_data(self):
        assert self.stats.is_population_data()
        assert self.stats.set_population_data(False) is self.stats
        assert not self.stats.is_population_data()
        self.stats.set_population_data()
        assert self.stats.is_population_data()

    @pytest.mark.parametrize(
        "bad_value",
        ["3", 1 + 2j, None],
        ids=["string", "complex", "none"],
    )
    def test_non_real_values_raise(self, bad_value):
        with pytest.raises(DomainError, match="not a real number") as exc_info:
            Statistics([1, 2, bad_value])

        assert exc_info.value.value == bad_value

    def test_failed_set_values_keeps_dataset(self):
        with pytest.raises(DomainError):
            self.stats.set_values([1, "x"])

        assert self.stats.get_values() == [1, 2, 3, 4, 5]


class TestEmptyStatistics:
    """Behaviour of every statistic on an empty dataset."""

    def setup_method(self):
        self.stats = Statistics()

    def test_lenient_statistics_return_zero(self):
        assert self.stats.size() == 0
        assert self.stats.calculate_sum() == 0.0
        assert self.stats.mean() == 0.0
        assert self.stats.variance() == 0.0
        assert self.stats.standard_deviation() == 0.0
        assert self.stats.coefficient_of_variation() == 0.0

    @pytest.mark.parametrize("operation", ["median", "mode", "amplitude"])
    def test_strict_statistics_raise(self, operation):
        with pytest.raises(EmptyDatasetError, match="dataset is empty") as exc_info:
            getattr(self.stats, operation)()

        assert exc_info.value.operation == operation

    def test_describe_empty(self):
        summary = self.stats.describe()

        assert summary["size"] == 0
        assert summary["median"] is None
        assert summary["mode"] is None
        assert summary["amplitude"] is None


class TestSingleValueSample:
    def test_sample_variance_warns_and_returns_nan(self):
        stats = Statistics([42], population_data=False)

        with pytest.warns(RuntimeWarning, match="single observation"):
            assert math.isnan(stats.variance())

    def test_population_variance_of_single_value(self):
        assert Statistics([42]).variance() == 0.0


def test_describe():
    summary = Statistics([2, 4, 4, 4, 5, 5, 7, 9]).describe()

    assert summary == {
        "size": 8,
        "sum": 40.0,
        "mean": 5.0,
        "median": 4.5,
        "mode": 4,
        "amplitude": 7,
        "variance": 4.0,
        "standard_deviation": 2.0,
        "coefficient_of_variation": 0.4,
    }


def test_repr():
    assert repr(Statistics([1, 2], population_data=False)) == (
        "Statistics(values=[1, 2], population_data=False)"
    )
