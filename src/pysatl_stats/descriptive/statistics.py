"""
Descriptive Statistics Engine
=============================

:class:`Statistics` owns a one-dimensional numeric dataset and computes its
sum, mean, median, mode, range (amplitude), variance, standard deviation and
coefficient of variation.

Notes
-----
- The dataset is copied on the way in and on the way out; callers never
  share the internal list.
- NumPy scalars are stored as the equivalent Python numbers.
- ``population_data`` only changes the variance denominator: ``n`` for a
  whole population, ``n - 1`` for a sample.
- :meth:`Statistics.median` sorts the stored values in place.
- ``mean``, ``variance`` and ``coefficient_of_variation`` return ``0.0`` for
  an empty dataset while ``median``, ``mode`` and ``amplitude`` raise
  :class:`~pysatl_stats.errors.EmptyDatasetError`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from collections import Counter
from numbers import Real
from typing import TYPE_CHECKING

import numpy as np

from pysatl_stats.errors import DomainError, EmptyDatasetError
from pysatl_stats.types import Number

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from typing import Self


class Statistics[T: Number]:
    """
    Descriptive statistics over an ordered numeric dataset.

    Parameters
    ----------
    values : Iterable[T], optional
        Initial dataset, e.g. a list, tuple, generator, ``range`` or 1D NumPy
        array. Empty by default.
    population_data : bool, default=True
        Whether the values are a whole population (``True``) or a sample.

    Raises
    ------
    DomainError
        If an element is not a real number (no ordering or arithmetic).

    Examples
    --------
    >>> stats = Statistics([1, 2, 3, 4, 5])
    >>> stats.mean()
    3.0
    >>> stats.set_population_data(False).variance()
    2.5
    """

    __slots__ = ("_values", "_population_data")

    def __init__(self, values: Iterable[T] = (), population_data: bool = True) -> None:
        self._values: list[T] = self._copy_checked(values)
        self._population_data = population_data

    @staticmethod
    def _copy_checked(values: Iterable[T]) -> list[T]:
        # NumPy scalars wrap around on overflow, Python numbers do not
        copied = [value.item() if isinstance(value, np.generic) else value for value in values]
        for index, value in enumerate(copied):
            if not isinstance(value, Real):
                raise DomainError(
                    f"values[{index}]: {value!r} is not a real number",
                    constraint="values are real numbers",
                    value=value,
                )
        return copied

    def _ensure_not_empty(self, operation: str) -> None:
        if not self._values:
            raise EmptyDatasetError(f"{operation}: dataset is empty", operation=operation)

    def get_values(self) -> list[T]:
        """Get a copy of the dataset."""
        return list(self._values)

    def is_population_data(self) -> bool:
        """Whether the dataset is a whole population rather than a sample."""
        return self._population_data

    def set_values(self, values: Iterable[T]) -> Self:
        """
        Replace the whole dataset.

        The previous values are kept if an element fails validation.

        Returns
        -------
        Statistics
            ``self``, for chaining.
        """
        self._values = self._copy_checked(values)
        return self

    def set_population_data(self, population_data: bool = True) -> Self:
        """
        Mark the dataset as population (``True``) or sample (``False``) data.

        Returns
        -------
        Statistics
            ``self``, for chaining.
        """
        self._population_data = population_data
        return self

    def size(self) -> int:
        """Number of values in the dataset."""
        return len(self._values)

    def calculate_sum(self, function: Callable[[T], float] | None = None) -> float:
        """
        Sum of ``function(value)`` over the dataset.

        Parameters
        ----------
        function : Callable[[T], float], optional
            Transformation applied to each value, identity by default.

        Returns
        -------
        float
            The sum, ``0.0`` for an empty dataset.
        """
        if function is None:
            return math.fsum(self._values)
        return math.fsum(function(value) for value in self._values)

    def mean(self) -> float:
        """Arithmetic mean, ``0.0`` for an empty dataset."""
        if not self._values:
            return 0.0
        return self.calculate_sum() / self.size()

    def median(self) -> float:
        """
        Middle value of the sorted dataset.

        For an even number of values the two central values are averaged.
        Sorts the stored dataset in place.

        Raises
        ------
        EmptyDatasetError
            If the dataset is empty.
        """
        self._ensure_not_empty("median")

        self._values.sort()

        mid = len(self._values) // 2
        if len(self._values) % 2 == 0:
            return float((self._values[mid - 1] + self._values[mid]) / 2)
        return float(self._values[mid])

    def mode(self) -> T:
        """
        Most frequent value.

        Ties go to the value seen first in the dataset.

        Raises
        ------
        EmptyDatasetError
            If the dataset is empty.
        """
        self._ensure_not_empty("mode")

        frequency = Counter(self._values)
        return frequency.most_common(1)[0][0]

    def amplitude(self) -> T:
        """
        Range of the dataset, ``max - min``.

        Raises
        ------
        EmptyDatasetError
            If the dataset is empty.
        """
        self._ensure_not_empty("amplitude")

        return max(self._values) - min(self._values)  # type: ignore[operator]

    def variance(self) -> float:
        """
        Mean squared deviation from the mean.

        Divides by ``n`` for population data and by ``n - 1`` for sample data.
        Returns ``0.0`` for an empty dataset, and ``nan`` with a
        ``RuntimeWarning`` for sample data with a single value.
        """
        if not self._values:
            return 0.0

        n = self.size()
        if not self._population_data and n == 1:
            warnings.warn(
                "Sample variance is undefined for a single observation",
                RuntimeWarning,
                stacklevel=2,
            )
            return math.nan

        mean_of_values = self.mean()
        sum_of_squares = self.calculate_sum(lambda value: (value - mean_of_values) ** 2)

        return sum_of_squares / n if self._population_data else sum_of_squares / (n - 1)

    def standard_deviation(self) -> float:
        """Square root of :meth:`variance`."""
        return math.sqrt(self.variance())

    def coefficient_of_variation(self) -> float:
        """
        Standard deviation divided by the mean.

        Returns ``0.0`` when the mean is exactly zero.
        """
        mean_of_values = self.mean()
        if mean_of_values == 0:
            return 0.0
        return self.standard_deviation() / mean_of_values

    def describe(self) -> dict[str, float | T | None]:
        """
        All statistics at once.

        Statistics undefined for an empty dataset (``median``, ``mode``,
        ``amplitude``) are ``None`` then. Sorts the stored dataset in place,
        like :meth:`median`.

        Returns
        -------
        dict
            Keys ``size``, ``sum``, ``mean``, ``median``, ``mode``,
            ``amplitude``, ``variance``, ``standard_deviation`` and
            ``coefficient_of_variation``.
        """
        empty = not self._values
        return {
            "size": self.size(),
            "sum": self.calculate_sum(),
            "mean": self.mean(),
            "median": None if empty else self.median(),
            "mode": None if empty else self.mode(),
            "amplitude": None if empty else self.amplitude(),
            "variance": self.variance(),
            "standard_deviation": self.standard_deviation(),
            "coefficient_of_variation": self.coefficient_of_variation(),
        }

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"Statistics(values={self._values!r}, population_data={self._population_data!r})"
