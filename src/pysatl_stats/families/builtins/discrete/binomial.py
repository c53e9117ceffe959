"""
Binomial distribution family implementation.

Contains the Binomial family and the :class:`Binomial` distribution class.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from numbers import Integral
from typing import TYPE_CHECKING, cast

from pysatl_stats.combinatorics import combination
from pysatl_stats.distributions.support import IntegerIntervalSupport
from pysatl_stats.families.distribution import ParametricFamilyDistribution
from pysatl_stats.families.parametric_family import ParametricFamily
from pysatl_stats.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_stats.families.registry import ParametricFamilyRegister
from pysatl_stats.types import (
    CharacteristicName,
    FamilyName,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any, Self


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """
    BINOMIAL_DOC = """
    Binomial distribution.

    The binomial distribution is the discrete probability distribution of the
    number of successes in a sequence of independent trials, each succeeding
    with the same probability. It is defined by two parameters: number of
    trials n and probability of success p.

    Probability mass function:
        P(X = k) = C(n, k) * p^k * (1 - p)^(n - k) for k in {0, ..., n}, 0 otherwise
    """

    def pmf(parameters: Parametrization, k: int) -> float:
        """
        Probability mass function for binomial distribution.
            - For k < 0 or k > number_of_trials: returns 0
            - Otherwise: returns C(n, k) * p^k * (1 - p)^(n - k)

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - number_of_trials: int
            - probability_of_success: float
        k : int
            Number of successes

        Returns
        -------
        float
            Probability of exactly k successes
        """
        parameters = cast(_Standard, parameters)

        n = parameters.number_of_trials
        p = parameters.probability_of_success

        if k < 0 or k > n:
            return 0.0
        if p == 0:
            return float(k == 0)
        if p == 1:
            return float(k == n)

        try:
            return combination(n, k) * p**k * (1 - p) ** (n - k)
        except OverflowError:
            # C(n, k) does not fit in a float, sum logarithms instead
            log_mass = (
                math.lgamma(n + 1)
                - math.lgamma(k + 1)
                - math.lgamma(n - k + 1)
                + k * math.log(p)
                + (n - k) * math.log1p(-p)
            )
            return math.exp(log_mass)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of binomial distribution."""
        parameters = cast(_Standard, parameters)
        return parameters.number_of_trials * parameters.probability_of_success

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of binomial distribution."""
        parameters = cast(_Standard, parameters)
        p = parameters.probability_of_success
        return parameters.number_of_trials * p * (1 - p)

    def _support(parameters: Parametrization) -> IntegerIntervalSupport:
        """Support of binomial distribution"""
        parameters = cast(_Standard, parameters)
        return IntegerIntervalSupport(min_k=0, max_k=int(parameters.number_of_trials))

    BinomialFamily = ParametricFamily(
        name=FamilyName.BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        distribution_class=Binomial,
    )
    BinomialFamily.__doc__ = BINOMIAL_DOC

    @parametrization(family=BinomialFamily, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of binomial distribution.

        Parameters
        ----------
        number_of_trials : int
            Number of independent trials
        probability_of_success : float
            Probability of success of a single trial
        """

        number_of_trials: int
        probability_of_success: float

        @constraint(description="number_of_trials is an integer")
        def check_trials_integer(self) -> bool:
            """Check that number of trials is integral."""
            return isinstance(self.number_of_trials, Integral) and not isinstance(
                self.number_of_trials, bool
            )

        @constraint(description="number_of_trials >= 0")
        def check_trials_non_negative(self) -> bool:
            """Check that number of trials is not negative."""
            return self.number_of_trials >= 0

        @constraint(description="0 <= probability_of_success <= 1")
        def check_probability_in_unit_interval(self) -> bool:
            """Check that probability of success lies in [0, 1]."""
            return 0 <= self.probability_of_success <= 1

    ParametricFamilyRegister.register(BinomialFamily)


class Binomial(ParametricFamilyDistribution):
    """
    Binomial distribution with ``number_of_trials`` trials and success
    probability ``probability_of_success``.

    Parameters
    ----------
    number_of_trials : int
        Number of trials, must be a non-negative integer.
    probability_of_success : float
        Probability of success, must lie in [0, 1].

    Raises
    ------
    DomainError
        If a parameter is out of its domain. Trials are checked first.

    Examples
    --------
    >>> Binomial(10, 0.5).get_probability(5)
    0.24609375
    """

    __slots__ = ()

    def __init__(self, number_of_trials: int, probability_of_success: float) -> None:
        family = self._registered_family(FamilyName.BINOMIAL)
        super().__init__(
            family,
            family.make_parameters(
                number_of_trials=number_of_trials,
                probability_of_success=probability_of_success,
            ),
        )

    @property
    def number_of_trials(self) -> int:
        return cast(int, self.parameters["number_of_trials"])

    @property
    def probability_of_success(self) -> float:
        return cast(float, self.parameters["probability_of_success"])

    def set_number_of_trials(self, number_of_trials: int) -> Self:
        """
        Replace the number of trials.

        The whole parameter pair is re-validated; on failure the distribution
        keeps its previous parameters.

        Raises
        ------
        DomainError
            If the new number of trials is negative or not an integer.
        """
        self._update_parameters(number_of_trials=number_of_trials)
        return self

    def set_probability_of_success(self, probability_of_success: float) -> Self:
        """
        Replace the probability of success.

        Raises
        ------
        DomainError
            If the new probability lies outside [0, 1].
        """
        self._update_parameters(probability_of_success=probability_of_success)
        return self
