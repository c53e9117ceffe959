"""
Built-in distribution families for PySATL Stats.

This package contains implementations of standard statistical distribution families
that are available by default in PySATL Stats.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_stats.families.builtins.discrete import (
    Binomial,
    DiscreteUniform,
    Geometric,
    configure_binomial_family,
    configure_discrete_uniform_family,
    configure_geometric_family,
)

__all__ = [
    "Binomial",
    "Geometric",
    "DiscreteUniform",
    "configure_binomial_family",
    "configure_geometric_family",
    "configure_discrete_uniform_family",
]
