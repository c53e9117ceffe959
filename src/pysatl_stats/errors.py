"""
Exception hierarchy for PySATL Stats.

All exceptions inherit from :class:`PySATLStatsError` so callers can catch any
library-specific error at once. Validation failures also inherit from
:class:`ValueError`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class PySATLStatsError(Exception):
    """Base exception for all PySATL Stats errors."""


class DomainError(PySATLStatsError, ValueError):
    """
    An input lies outside the domain of an operation.

    Raised immediately at construction or setter time, before any
    computation proceeds.

    Attributes
    ----------
    constraint : str or None
        Description of the violated invariant (e.g. ``"number_of_trials >= 0"``).
    value : Any
        Offending value, if a single one can be named.
    """

    def __init__(self, message: str, constraint: str | None = None, value: Any = None):
        super().__init__(message)
        self.constraint = constraint
        self.value = value


class EmptyDatasetError(PySATLStatsError, ValueError):
    """
    A statistic is undefined for an empty dataset.

    Attributes
    ----------
    operation : str or None
        Name of the statistic that was requested.
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


__all__ = [
    "PySATLStatsError",
    "DomainError",
    "EmptyDatasetError",
]
