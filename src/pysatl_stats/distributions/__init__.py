"""
Distributions subpackage

Interfaces for discrete probability distributions used by PySATL Stats:

- discrete distribution protocol (:mod:`.distribution`);
- analytical computation primitive (:mod:`.computation`);
- discrete supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .computation import AnalyticalComputation
from .distribution import DiscreteDistribution
from .support import DiscreteSupport, IntegerIntervalSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    # distribution
    "DiscreteDistribution",
    # supports
    "Support",
    "DiscreteSupport",
    "IntegerIntervalSupport",
]
