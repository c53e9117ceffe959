"""
Built-in Families Setup
=======================

Registers the discrete families shipped with PySATL Stats:

- :class:`Binomial Family` — number of successes in a fixed number of trials.
- :class:`Geometric Family` — number of trials up to the first success.
- :class:`DiscreteUniform Family` — equally likely integers of an interval.

Notes
-----
- Distribution classes call :func:`configure_families_register` on first
  use, so explicit calls are only needed to inspect the register.
- :func:`reset_families_register` starts over from an empty register, which
  keeps tests independent of each other.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from pysatl_stats.families.builtins import (
    configure_binomial_family,
    configure_discrete_uniform_family,
    configure_geometric_family,
)
from pysatl_stats.families.registry import ParametricFamilyRegister

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Register the built-in families once per process.

    Later calls return the cached register without touching it.

    Returns
    -------
    ParametricFamilyRegister
        Register holding Binomial, Geometric and DiscreteUniform.
    """
    configure_binomial_family()
    configure_geometric_family()
    configure_discrete_uniform_family()
    logger.debug("Built-in families configured")
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """Forget the cached configuration and empty the register."""
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
