"""
Discrete Distribution Interface
===============================

This module defines the public :class:`DiscreteDistribution` protocol, the
capability set shared by every discrete distribution in PySATL Stats:

- ``get_probability(value)`` – probability mass at ``value``;
- ``mean()`` and ``variance()`` – closed-form moments.

Notes
-----
- ``get_probability`` never fails for values outside the support, it returns
  ``0.0`` instead.
- Any object with these three methods satisfies the protocol; built-in
  families implement it through
  :class:`~pysatl_stats.families.distribution.ParametricFamilyDistribution`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Protocol, runtime_checkable


@runtime_checkable
class DiscreteDistribution(Protocol):
    """Public discrete distribution interface."""

    def get_probability(self, value: int) -> float: ...

    def mean(self) -> float: ...

    def variance(self) -> float: ...
