"""
Descriptive statistics subpackage.

Public API:
    Statistics  - sum, mean, median, mode, amplitude, variance, standard
                  deviation and coefficient of variation of a dataset
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .statistics import Statistics

__all__ = [
    "Statistics",
]
