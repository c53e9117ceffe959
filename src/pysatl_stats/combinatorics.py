"""
Combinatorics Helpers
=====================

Exact integer factorial and binomial coefficient used by the discrete
families.

Notes
-----
:func:`combination` does not check ``0 <= x <= n`` itself. Negative ``n``,
``x`` or ``n - x`` fail inside :func:`factorial`; keeping the arguments in
range is the caller's responsibility.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from numbers import Integral

from pysatl_stats.errors import DomainError


def factorial(x: int) -> int:
    """
    Factorial of a non-negative integer.

    Parameters
    ----------
    x : int
        Argument, ``factorial(0) == factorial(1) == 1``.

    Returns
    -------
    int
        Product ``1 * 2 * ... * x``.

    Raises
    ------
    TypeError
        If ``x`` is not integral.
    DomainError
        If ``x`` is negative.
    """
    if not isinstance(x, Integral):
        raise TypeError(f"Factorial is defined for integers only, got {type(x).__name__}")
    if x < 0:
        raise DomainError(
            f"Factorial is not defined for negative numbers, got {x}",
            constraint="x >= 0",
            value=x,
        )

    return math.factorial(int(x))


def combination(n: int, x: int) -> int:
    """
    Number of ways to choose ``x`` elements out of ``n``.

    Parameters
    ----------
    n : int
        Size of the set.
    x : int
        Size of the combination.

    Returns
    -------
    int
        ``n! / ((n - x)! * x!)``.

    Raises
    ------
    DomainError
        If ``n``, ``x`` or ``n - x`` is negative (raised by :func:`factorial`).
    """
    return factorial(n) // (factorial(n - x) * factorial(x))


__all__ = [
    "factorial",
    "combination",
]
