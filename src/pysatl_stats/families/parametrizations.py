"""
Parameter sets of distribution families.

A parametrization is a frozen dataclass holding the parameter values of one
distribution together with the constraints those values must satisfy.
Classes are declared with two decorators:

- :func:`constraint` marks an instance predicate as a constraint;
- :func:`parametrization` turns the class into a frozen dataclass, collects
  its constraints and attaches it to a :class:`ParametricFamily`.

Example
-------
>>> @parametrization(family=family, name="standard")
... class Standard(Parametrization):
...     probability_of_success: float
...
...     @constraint(description="0 <= probability_of_success <= 1")
...     def check_probability(self) -> bool:
...         return 0 <= self.probability_of_success <= 1
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass, replace
from inspect import isfunction
from typing import TYPE_CHECKING, Self

from pysatl_stats.errors import DomainError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_stats.families.parametric_family import ParametricFamily
    from pysatl_stats.types import ParametrizationName

_CONSTRAINT_MARKER = "__constraint_description__"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Named predicate over a parametrization.

    Parameters
    ----------
    description : str
        Human-readable form of the condition, e.g. ``"number_of_trials >= 0"``.
        Reported as :attr:`DomainError.constraint` when the check fails.
    check : Callable[[Any], bool]
        Returns ``True`` when the condition holds.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Base class of every parametrization.

    Subclasses become frozen dataclasses through :func:`parametrization`, so
    the values never change in place; :meth:`evolve` returns a new, validated
    object instead.
    """

    # Filled in by the @parametrization decorator
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]
    _constraints: ClassVar[tuple[ParametrizationConstraint, ...]] = ()

    @property
    def name(self) -> ParametrizationName:
        """Name under which the class is attached to its family."""
        return type(self).__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Fresh ``{field: value}`` dictionary, in field declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> tuple[ParametrizationConstraint, ...]:
        """Constraints of this parametrization, in declaration order."""
        return self._constraints

    def validate(self) -> None:
        """
        Check every constraint, stopping at the first one that fails.

        Raises
        ------
        DomainError
            Its ``constraint`` attribute is the failed description and its
            ``value`` the parameter dictionary.
        """
        for item in self._constraints:
            if not item.check(self):
                values = self.parameters
                raise DomainError(
                    f'Constraint "{item.description}" does not hold for {values}',
                    constraint=item.description,
                    value=values,
                )

    def evolve(self, **changes: Any) -> Self:
        """
        Copy with some fields replaced, validated before it is returned.

        ``self`` is never modified, which gives the distribution setters
        their all-or-nothing behaviour.

        Raises
        ------
        TypeError
            If a keyword is not a field of this parametrization.
        DomainError
            If the new values break a constraint.
        """
        updated = replace(self, **changes)  # type: ignore[type-var]
        updated.validate()
        return updated


def constraint[**P](description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Mark an instance method of a parametrization as a constraint.

    Parameters
    ----------
    description : str
        Human-readable form of the condition.

    Notes
    -----
    The function is returned unchanged apart from a marker attribute read
    by :func:`parametrization`.
    """

    def mark(func: Callable[P, bool]) -> Callable[P, bool]:
        setattr(func, _CONSTRAINT_MARKER, description)
        return func

    return mark


def _collect_constraints(cls: type) -> tuple[ParametrizationConstraint, ...]:
    found: list[ParametrizationConstraint] = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, staticmethod | classmethod):
            target = attr.__func__
            if hasattr(target, _CONSTRAINT_MARKER):
                raise TypeError(
                    f"@constraint '{attr_name}' must be an instance method, "
                    f"not @{type(attr).__name__}"
                )
            continue
        if isfunction(attr) and hasattr(attr, _CONSTRAINT_MARKER):
            found.append(
                ParametrizationConstraint(description=getattr(attr, _CONSTRAINT_MARKER), check=attr)
            )
    return tuple(found)


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator attaching a parametrization to ``family`` as ``name``.

    The class is converted to a slotted frozen dataclass unless it already is
    a dataclass, and its :func:`constraint` methods are collected in
    declaration order.

    Raises
    ------
    TypeError
        If a constraint is declared as a static or class method.
    ValueError
        If ``family`` does not declare ``name`` or already has it.
    """

    def attach(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return attach
