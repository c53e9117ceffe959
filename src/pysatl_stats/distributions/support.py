"""
Supports of discrete distributions.

:class:`IntegerIntervalSupport` covers every built-in family: a run of
consecutive integers, possibly without an upper end (Geometric).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from itertools import count
from numbers import Integral
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_stats.types import BoolArray, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    """Set of values a distribution can take."""

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    """Countable support whose points can be enumerated in increasing order."""

    def iter_points(self) -> Iterator[Number]: ...

    def iter_leq(self, x: Number) -> Iterator[Number]: ...

    def prev(self, x: Number) -> Number | None: ...


@dataclass(frozen=True, slots=True)
class IntegerIntervalSupport(DiscreteSupport):
    """
    Integers ``min_k, min_k + 1, ..., max_k``.

    Parameters
    ----------
    min_k : int or None
        Smallest point, ``None`` if unbounded below.
    max_k : int or None
        Largest point, ``None`` if unbounded above.

    Notes
    -----
    ``min_k > max_k`` describes the empty set. Enumeration needs a lower
    bound; ``iter_points`` and ``iter_leq`` raise ``RuntimeError`` without one.

    Examples
    --------
    >>> support = IntegerIntervalSupport(0, 3)
    >>> 2 in support, 2.5 in support, 4 in support
    (True, False, False)
    >>> list(support.iter_leq(1.5))
    [0, 1]
    """

    min_k: int | None = None
    max_k: int | None = None

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Membership test, element-wise for arrays.

        Only finite integral values (``3`` or ``3.0``) inside the bounds
        belong to the support.
        """
        if isinstance(x, Integral):
            # exact comparison, Python ints may not fit in a float
            k = int(x)
            return (self.min_k is None or k >= self.min_k) and (
                self.max_k is None or k <= self.max_k
            )

        values = np.asarray(x, dtype=float)
        inside = np.isfinite(values) & (values == np.floor(values))
        if self.min_k is not None:
            inside &= values >= self.min_k
        if self.max_k is not None:
            inside &= values <= self.max_k

        if inside.ndim == 0:
            return bool(inside)
        return cast(BoolArray, inside)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def is_empty(self) -> bool:
        return self.min_k is not None and self.max_k is not None and self.min_k > self.max_k

    @property
    def is_left_bounded(self) -> bool:
        return self.min_k is not None

    @property
    def is_right_bounded(self) -> bool:
        return self.max_k is not None

    @property
    def size(self) -> int | None:
        """Number of points, ``None`` for an unbounded support."""
        if self.is_empty:
            return 0
        if self.min_k is None or self.max_k is None:
            return None
        return self.max_k - self.min_k + 1

    def first(self) -> int | None:
        """Smallest point, ``None`` if there is none."""
        return None if self.is_empty else self.min_k

    def last(self) -> int | None:
        """Largest point, ``None`` if there is none."""
        return None if self.is_empty else self.max_k

    def next(self, x: Number) -> int | None:
        """Smallest point strictly greater than ``x``, ``None`` if there is none."""
        candidate = math.floor(x) + 1
        if self.min_k is not None:
            candidate = max(candidate, self.min_k)
        if self.is_empty or (self.max_k is not None and candidate > self.max_k):
            return None
        return candidate

    def prev(self, x: Number) -> int | None:
        """Largest point strictly less than ``x``, ``None`` if there is none."""
        candidate = math.ceil(x) - 1
        if self.max_k is not None:
            candidate = min(candidate, self.max_k)
        if self.is_empty or (self.min_k is not None and candidate < self.min_k):
            return None
        return candidate

    def _require_lower_bound(self, operation: str) -> int:
        if self.min_k is None:
            raise RuntimeError(
                f"{operation} needs a lower bound; IntegerIntervalSupport has min_k=None"
            )
        return self.min_k

    def iter_points(self) -> Iterator[int]:
        """Points in increasing order; endless if unbounded above."""
        if self.is_empty:
            return iter(())
        start = self._require_lower_bound("iter_points")
        if self.max_k is None:
            return count(start)
        return iter(range(start, self.max_k + 1))

    def iter_leq(self, x: Number) -> Iterator[int]:
        """Points not greater than ``x``, in increasing order."""
        start = self._require_lower_bound("iter_leq")
        stop = math.floor(x)
        if self.max_k is not None:
            stop = min(stop, self.max_k)
        return iter(range(start, stop + 1))

    __iter__ = iter_points


__all__ = [
    "Support",
    "DiscreteSupport",
    "IntegerIntervalSupport",
]
