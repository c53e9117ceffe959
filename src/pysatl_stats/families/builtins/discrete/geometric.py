"""
Geometric distribution family implementation.

Contains the Geometric family and the :class:`Geometric` distribution class.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

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


def configure_geometric_family() -> None:
    """
    Configure and register the Geometric distribution family.
    """
    GEOMETRIC_DOC = """
    Geometric distribution.

    The geometric distribution models the number of independent trials
    needed to get the first success, each trial succeeding with
    probability p. Its support is {1, 2, 3, ...}.

    Probability mass function:
        P(X = k) = (1 - p)^(k - 1) * p for k >= 1, 0 otherwise
    """

    def pmf(parameters: Parametrization, k: int) -> float:
        """
        Probability mass function for geometric distribution.
            - For k < 1: returns 0
            - Otherwise: returns (1 - p)^(k - 1) * p

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - probability_of_success: float
        k : int
            Number of trials up to and including the first success

        Returns
        -------
        float
            Probability that the first success happens at trial k
        """
        parameters = cast(_Standard, parameters)
        p = parameters.probability_of_success

        if k < 1:
            return 0.0

        return (1 - p) ** (k - 1) * p

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of geometric distribution. Undefined (ZeroDivisionError) for p = 0."""
        parameters = cast(_Standard, parameters)
        return 1 / parameters.probability_of_success

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of geometric distribution. Undefined (ZeroDivisionError) for p = 0."""
        parameters = cast(_Standard, parameters)
        p = parameters.probability_of_success
        return (1 - p) / p**2

    def _support(_: Parametrization) -> IntegerIntervalSupport:
        """Support of geometric distribution"""
        return IntegerIntervalSupport(min_k=1)

    GeometricFamily = ParametricFamily(
        name=FamilyName.GEOMETRIC,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        distribution_class=Geometric,
    )
    GeometricFamily.__doc__ = GEOMETRIC_DOC

    @parametrization(family=GeometricFamily, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of geometric distribution.

        Parameters
        ----------
        probability_of_success : float
            Probability of success of a single trial
        """

        probability_of_success: float

        @constraint(description="0 <= probability_of_success <= 1")
        def check_probability_in_unit_interval(self) -> bool:
            """Check that probability of success lies in [0, 1]."""
            return 0 <= self.probability_of_success <= 1

    ParametricFamilyRegister.register(GeometricFamily)


class Geometric(ParametricFamilyDistribution):
    """
    Geometric distribution of the trial at which the first success occurs.

    Parameters
    ----------
    probability_of_success : float
        Probability of success of a single trial, must lie in [0, 1].

    Notes
    -----
    ``get_probability(0)`` is ``0.0``: at least one trial is needed.
    :meth:`mean` and :meth:`variance` raise ``ZeroDivisionError`` for a zero
    probability of success.
    """

    __slots__ = ()

    def __init__(self, probability_of_success: float) -> None:
        family = self._registered_family(FamilyName.GEOMETRIC)
        super().__init__(
            family,
            family.make_parameters(probability_of_success=probability_of_success),
        )

    @property
    def probability_of_success(self) -> float:
        return cast(float, self.parameters["probability_of_success"])

    def set_probability_of_success(self, probability_of_success: float) -> Self:
        """
        Replace the probability of success.

        Raises
        ------
        DomainError
            If the new probability lies outside [0, 1]; the previous value is kept.
        """
        self._update_parameters(probability_of_success=probability_of_success)
        return self
