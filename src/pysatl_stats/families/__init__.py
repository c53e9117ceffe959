"""
Parametric Families module for working with discrete distribution families.

This package provides the framework for defining, managing, and working with
parametric families of discrete distributions, together with the built-in
Binomial, Geometric and DiscreteUniform families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import Binomial, DiscreteUniform, Geometric
from .configuration import configure_families_register, reset_families_register
from .distribution import ParametricFamilyDistribution
from .parametric_family import ParametricFamily
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import ParametricFamilyRegister

__all__ = [
    "ParametricFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "ParametricFamily",
    "ParametricFamilyDistribution",
    "Binomial",
    "Geometric",
    "DiscreteUniform",
    "constraint",
    "parametrization",
    "configure_families_register",
    "reset_families_register",
]
