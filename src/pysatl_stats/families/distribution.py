"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from typing import TYPE_CHECKING, Self

import numpy as np

from pysatl_stats.distributions.distribution import DiscreteDistribution
from pysatl_stats.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from numpy.typing import ArrayLike

    from pysatl_stats.distributions.computation import AnalyticalComputation
    from pysatl_stats.distributions.support import DiscreteSupport
    from pysatl_stats.families.parametric_family import ParametricFamily
    from pysatl_stats.families.parametrizations import Parametrization
    from pysatl_stats.types import (
        DistributionType,
        GenericCharacteristicName,
        NumericArray,
    )


class ParametricFamilyDistribution(DiscreteDistribution):
    """
    A specific distribution instance from a parametric family.

    Represents a concrete distribution with specific parameter values,
    providing the :class:`~pysatl_stats.distributions.DiscreteDistribution`
    operations.

    Parameters
    ----------
    family : ParametricFamily
        Family this distribution belongs to.
    parameters : Parametrization
        Validated parameter values for this distribution.

    Notes
    -----
    Parameters are only replaced as a whole and only after the replacement
    has been validated, so a failed update leaves the instance unchanged.
    """

    __slots__ = ("_family", "_parameters", "_support", "_analytical_cache")

    def __init__(self, family: ParametricFamily, parameters: Parametrization) -> None:
        self._family = family
        self._set_parameters(parameters)

    @classmethod
    def from_parameters(cls, family: ParametricFamily, parameters: Parametrization) -> Self:
        """
        Create an instance from already validated parameters.

        Subclasses with their own ``__init__`` signature are supported, the
        constructor is bypassed.
        """
        instance = cls.__new__(cls)
        ParametricFamilyDistribution.__init__(instance, family, parameters)
        return instance

    @staticmethod
    def _registered_family(name: str) -> ParametricFamily:
        """Look up a built-in family, configuring the register on first use."""
        from pysatl_stats.families.configuration import configure_families_register

        return configure_families_register().get(name)

    def _set_parameters(self, parameters: Parametrization) -> None:
        self._parameters = parameters
        self._support = self._family.support_resolver(parameters)
        self._analytical_cache = self._family.build_analytical_computations(parameters)

    def _update_parameters(self, **changes: Any) -> None:
        """Validate a partial update, then swap it in."""
        self._set_parameters(self._parameters.evolve(**changes))

    @property
    def family(self) -> ParametricFamily:
        """Get the parametric family of this distribution."""
        return self._family

    @property
    def family_name(self) -> str:
        """Get the name of the parametric family."""
        return self._family.name

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._family.distribution_type(self._parameters)

    @property
    def parametrization(self) -> Parametrization:
        """Get the current parametrization object."""
        return self._parameters

    @property
    def parametrization_name(self) -> str:
        """Get the name of the current parametrization."""
        return self._parameters.name

    @property
    def parameters(self) -> dict[str, Any]:
        """Get a copy of the current parameter values."""
        return self._parameters.parameters

    @property
    def support(self) -> DiscreteSupport | None:
        """Get the support of this distribution."""
        return self._support

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Get analytical computations bound to the current parameters.

        Rebuilt each time the parameters are replaced.
        """
        return self._analytical_cache

    def query_method(
        self, characteristic_name: GenericCharacteristicName
    ) -> AnalyticalComputation[Any, Any]:
        """
        Resolve the computation of a characteristic.

        Raises
        ------
        KeyError
            If the family provides no such characteristic.
        """
        try:
            return self._analytical_cache[characteristic_name]
        except KeyError as exc:
            raise KeyError(
                f"Family '{self.family_name}' has no characteristic '{characteristic_name}'"
            ) from exc

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def get_probability(self, value: int) -> float:
        """
        Probability mass at ``value``.

        Returns ``0.0`` for values outside the support.
        """
        if self._support is not None:
            if value not in self._support:
                return 0.0
            value = int(value)
        return float(self.calculate_characteristic(CharacteristicName.PMF, value))

    def probabilities(self, values: ArrayLike) -> NumericArray:
        """
        Probability masses for an array of values.

        Parameters
        ----------
        values : ArrayLike
            Points at which to evaluate the probability mass function.

        Returns
        -------
        NumericArray
            Array of the same shape as ``values``.
        """
        arr = np.asarray(values)
        result = np.fromiter(
            (self.get_probability(v.item()) for v in arr.reshape(-1)),
            dtype=np.float64,
            count=arr.size,
        )
        return result.reshape(arr.shape)

    def cdf(self, value: int) -> float:
        """
        Cumulative mass ``P(X <= value)``.

        Sums the probability mass over the support points not exceeding
        ``value``; ``0.0`` left of the support.
        """
        if self._support is None:
            raise RuntimeError(f"Family '{self.family_name}' does not define a support")
        return math.fsum(self.get_probability(k) for k in self._support.iter_leq(value))

    def mean(self) -> float:
        """Mean of the distribution."""
        return float(self.calculate_characteristic(CharacteristicName.MEAN, None))

    def variance(self) -> float:
        """Variance of the distribution."""
        return float(self.calculate_characteristic(CharacteristicName.VAR, None))

    def standard_deviation(self) -> float:
        """Square root of the variance."""
        return math.sqrt(self.variance())

    def __repr__(self) -> str:
        args = ", ".join(f"{key}={value!r}" for key, value in self.parameters.items())
        return f"{type(self).__name__}({args})"
