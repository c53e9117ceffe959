"""
Tests for Discrete Uniform Distribution Family

This module tests the functionality of the discrete uniform distribution
family, including the interval constraint and truncated moments.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import randint

from pysatl_stats.distributions.support import IntegerIntervalSupport
from pysatl_stats.errors import DomainError
from pysatl_stats.families import DiscreteUniform
from pysatl_stats.families.configuration import configure_families_register
from pysatl_stats.types import FamilyName

from .base import BaseDistributionTest


class TestDiscreteUniformFamily(BaseDistributionTest):
    """Test suite for DiscreteUniform distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.uniform_family = registry.get(FamilyName.DISCRETE_UNIFORM)
        self.uniform_dist_example = DiscreteUniform(1, 6)

    def test_family_properties(self):
        assert self.uniform_family.name == FamilyName.DISCRETE_UNIFORM
        assert self.uniform_family.parametrization_names == ["standard"]

    def test_family_factory_returns_discrete_uniform(self):
        dist = self.uniform_family(first_value=-2, last_value=2)

        assert isinstance(dist, DiscreteUniform)
        assert (dist.first_value, dist.last_value) == (-2, 2)
        assert repr(dist) == "DiscreteUniform(first_value=-2, last_value=2)"

    @pytest.mark.parametrize(
        "first, last",
        [(1, 6), (-3, 4), (0, 0), (10, 25)],
    )
    def test_pmf_matches_scipy(self, first, last):
        dist = DiscreteUniform(first, last)
        ks = np.arange(first - 2, last + 3)

        self.assert_arrays_almost_equal(dist.probabilities(ks), randint.pmf(ks, first, last + 1))

    def test_probabilities_sum_to_one(self):
        dist = DiscreteUniform(-4, 7)
        self.assert_total_mass(dist, dist.support)

    def test_die(self):
        dist = self.uniform_dist_example

        assert dist.get_probability(3) == pytest.approx(1 / 6)
        assert dist.get_probability(0) == 0.0
        assert dist.get_probability(7) == 0.0

    @pytest.mark.parametrize(
        "first, last, mean, variance",
        [
            (1, 6, 3.0, 2.0),
            (0, 0, 0.0, 0.0),
            (2, 4, 3.0, 0.0),
            (-6, -1, -3.0, 2.0),
            (-3, 0, -1.0, 1.0),
            (0, 10, 5.0, 10.0),
        ],
        ids=["die", "single_point", "short_interval", "negative", "rounds_toward_zero", "even_width"],
    )
    def test_truncated_moments(self, first, last, mean, variance):
        dist = DiscreteUniform(first, last)

        assert dist.mean() == mean
        assert dist.variance() == variance

    def test_single_point_interval(self):
        dist = DiscreteUniform(5, 5)

        assert dist.get_probability(5) == 1.0
        assert dist.cdf(5) == 1.0

    def test_cdf_matches_scipy(self):
        dist = DiscreteUniform(1, 6)
        for k in range(-1, 9):
            assert abs(dist.cdf(k) - randint.cdf(k, 1, 7)) < self.CALCULATION_PRECISION

    def test_support(self):
        assert self.uniform_dist_example.support == IntegerIntervalSupport(1, 6)
        assert self.uniform_dist_example.support.size == 6

    @pytest.mark.parametrize(
        "first, last, violated",
        [
            (6, 1, "first_value <= last_value"),
            (1.5, 6, "first_value is an integer"),
            (1, 6.5, "last_value is an integer"),
        ],
        ids=["reversed", "fractional_first", "fractional_last"],
    )
    def test_invalid_interval(self, first, last, violated):
        with pytest.raises(DomainError) as exc_info:
            DiscreteUniform(first, last)
        assert exc_info.value.constraint == violated

    def test_set_interval(self):
        dist = DiscreteUniform(1, 6)

        assert dist.set_interval(0, 3) is dist
        assert dist.get_probability(0) == pytest.approx(0.25)
        assert dist.get_probability(6) == 0.0

    def test_failed_set_interval_keeps_state(self):
        dist = DiscreteUniform(1, 6)

        with pytest.raises(DomainError):
            dist.set_interval(6, 1)

        assert (dist.first_value, dist.last_value) == (1, 6)
        assert dist.get_probability(6) == pytest.approx(1 / 6)
