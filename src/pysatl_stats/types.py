"""
Shared Types
============

Enumerations, type descriptors and numeric aliases used across PySATL Stats.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Mapping
from dataclasses import dataclass, fields, is_dataclass
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """Kind of the values a distribution produces."""

    DISCRETE = "discrete"


class DistributionType:
    """
    Descriptor of the space a distribution lives in.

    Subclasses are expected to be dataclasses; their fields are the
    :attr:`features` of the type.
    """

    __slots__ = ()

    @property
    def features(self) -> Mapping[str, Any]:
        """Field name to value mapping of this descriptor."""
        if not is_dataclass(self):
            return {}
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution over ``dimension``-dimensional real vectors.

    Parameters
    ----------
    kind : Kind
        Kind of the values.
    dimension : int
        Number of coordinates, 1 for a scalar random variable.
    """

    kind: Kind
    dimension: int


UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type of every built-in family: scalar integer-valued random variables."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""NumPy scalar accepted wherever a number is."""

Number = NumPyNumber | int | float
"""Python or NumPy real number."""

NumericArray = NDArray[NumPyNumber]
"""Array of numbers."""

BoolArray = NDArray[np.bool_]
"""Element-wise membership or comparison result."""


type GenericCharacteristicName = str
"""Key of a characteristic function in a family, e.g. ``"pmf"``."""

type ParametrizationName = str
"""Name of a parametrization within its family, e.g. ``"standard"``."""


class CharacteristicName(StrEnum):
    """Characteristics every built-in family defines analytically."""

    PMF = "pmf"
    MEAN = "mean"
    VAR = "var"


class FamilyName(StrEnum):
    """Register names of the built-in families."""

    BINOMIAL = "Binomial"
    GEOMETRIC = "Geometric"
    DISCRETE_UNIFORM = "DiscreteUniform"


__all__ = [
    "Kind",
    "DistributionType",
    "EuclideanDistributionType",
    "UnivariateDiscrete",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "BoolArray",
    "GenericCharacteristicName",
    "ParametrizationName",
    "CharacteristicName",
    "FamilyName",
]
