"""
Discrete uniform distribution family implementation.

Contains the DiscreteUniform family and the :class:`DiscreteUniform`
distribution class.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from numbers import Integral
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


def _truncated_division(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _is_integer(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def configure_discrete_uniform_family() -> None:
    """
    Configure and register the DiscreteUniform distribution family.
    """
    DISCRETE_UNIFORM_DOC = """
    Discrete uniform distribution.

    Every integer of the interval [first_value, last_value] is equally
    probable.

    Probability mass function:
        P(X = v) = 1 / (last_value - first_value + 1) for v in [first_value, last_value], 0 otherwise

    Moments are computed with integer division truncated toward zero:
        mean = (first_value + last_value) / 2
        var = (last_value - first_value) * (last_value - first_value + 2) / 12
    """

    def pmf(parameters: Parametrization, v: int) -> float:
        """
        Probability mass function for discrete uniform distribution.
            - For v outside [first_value, last_value]: returns 0
            - Otherwise: returns 1 / (last_value - first_value + 1)
        """
        parameters = cast(_Standard, parameters)

        first = parameters.first_value
        last = parameters.last_value

        if v < first or v > last:
            return 0.0

        return 1.0 / (last - first + 1)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of discrete uniform distribution, truncated toward zero."""
        parameters = cast(_Standard, parameters)
        return float(_truncated_division(parameters.first_value + parameters.last_value, 2))

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of discrete uniform distribution, truncated toward zero."""
        parameters = cast(_Standard, parameters)
        width = parameters.last_value - parameters.first_value
        return float(_truncated_division(width * (width + 2), 12))

    def _support(parameters: Parametrization) -> IntegerIntervalSupport:
        """Support of discrete uniform distribution"""
        parameters = cast(_Standard, parameters)
        return IntegerIntervalSupport(
            min_k=int(parameters.first_value), max_k=int(parameters.last_value)
        )

    DiscreteUniformFamily = ParametricFamily(
        name=FamilyName.DISCRETE_UNIFORM,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        distribution_class=DiscreteUniform,
    )
    DiscreteUniformFamily.__doc__ = DISCRETE_UNIFORM_DOC

    @parametrization(family=DiscreteUniformFamily, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of discrete uniform distribution.

        Parameters
        ----------
        first_value : int
            Smallest value of the interval
        last_value : int
            Largest value of the interval
        """

        first_value: int
        last_value: int

        @constraint(description="first_value is an integer")
        def check_first_integer(self) -> bool:
            return _is_integer(self.first_value)

        @constraint(description="last_value is an integer")
        def check_last_integer(self) -> bool:
            return _is_integer(self.last_value)

        @constraint(description="first_value <= last_value")
        def check_first_not_greater_than_last(self) -> bool:
            """Check that the interval is not reversed."""
            return self.first_value <= self.last_value

    ParametricFamilyRegister.register(DiscreteUniformFamily)


class DiscreteUniform(ParametricFamilyDistribution):
    """
    Discrete uniform distribution on ``[first_value, last_value]``.

    Parameters
    ----------
    first_value : int
        Smallest value of the interval.
    last_value : int
        Largest value of the interval, at least ``first_value``.

    Notes
    -----
    :meth:`mean` and :meth:`variance` truncate toward zero, e.g.
    ``DiscreteUniform(1, 6).mean() == 3.0``.
    """

    __slots__ = ()

    def __init__(self, first_value: int, last_value: int) -> None:
        family = self._registered_family(FamilyName.DISCRETE_UNIFORM)
        super().__init__(
            family,
            family.make_parameters(first_value=first_value, last_value=last_value),
        )

    @property
    def first_value(self) -> int:
        return cast(int, self.parameters["first_value"])

    @property
    def last_value(self) -> int:
        return cast(int, self.parameters["last_value"])

    def set_interval(self, first_value: int, last_value: int) -> Self:
        """
        Replace both ends of the interval.

        Raises
        ------
        DomainError
            If ``first_value > last_value``; the previous interval is kept.
        """
        self._update_parameters(first_value=first_value, last_value=last_value)
        return self
