"""
Built-in discrete distribution families.

This module contains implementations of discrete parametric families and the
distribution classes built on them.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_stats.families.builtins.discrete.binomial import Binomial, configure_binomial_family
from pysatl_stats.families.builtins.discrete.geometric import (
    Geometric,
    configure_geometric_family,
)
from pysatl_stats.families.builtins.discrete.uniform import (
    DiscreteUniform,
    configure_discrete_uniform_family,
)

__all__ = [
    "Binomial",
    "Geometric",
    "DiscreteUniform",
    "configure_binomial_family",
    "configure_geometric_family",
    "configure_discrete_uniform_family",
]
