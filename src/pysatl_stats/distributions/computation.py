"""
Computation Primitives
======================

This module defines the building block used to evaluate distribution
characteristics:

- :class:`AnalyticalComputation` — an analytical callable bound to one
  parameter set of a distribution.

Notes
-----
- Callables are **scalar** in the univariate case. Array evaluation is done
  by the caller (see
  :meth:`~pysatl_stats.families.distribution.ParametricFamilyDistribution.probabilities`).
- Moments (``mean``, ``var``) ignore their data argument; ``None`` is passed.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pysatl_stats.types import GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided directly by the family.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pmf"``).
    func : Callable[..., Out]
        Analytical callable with the parameters already bound.
    """

    target: GenericCharacteristicName
    func: Callable[..., Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)


__all__ = [
    "AnalyticalComputation",
]
