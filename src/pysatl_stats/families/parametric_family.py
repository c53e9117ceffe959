"""
Parametric Families
===================

:class:`ParametricFamily` describes a family of discrete distributions that
share one functional form: its named parametrizations, the analytical
characteristics (``pmf``, ``mean``, ``var``) written in terms of a
parametrization, and how the support depends on the parameters. Calling the
family produces validated distribution instances.

Notes
-----
- Characteristic functions have the signature
  ``func(parameters, data, **options)``; moments receive ``data=None``.
- The first declared parametrization name is the base one, used when no
  name is given.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from pysatl_stats.distributions.computation import AnalyticalComputation
from pysatl_stats.families.distribution import ParametricFamilyDistribution
from pysatl_stats.types import DistributionType

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence
    from typing import Any

    from pysatl_stats.distributions.support import DiscreteSupport
    from pysatl_stats.families.parametrizations import Parametrization
    from pysatl_stats.types import (
        GenericCharacteristicName,
        ParametrizationName,
    )

    type CharacteristicFunction = Callable[..., Any]
    type SupportResolver = Callable[[Parametrization], DiscreteSupport | None]
    type TypeResolver = Callable[[Parametrization], DistributionType]


def _no_support(_parameters: Parametrization) -> None:
    return None


class ParametricFamily:
    """
    Family of discrete distributions indexed by parameters.

    Parameters
    ----------
    name : str
        Family name, also the key in the family register.
    distr_type : DistributionType or Callable[[Parametrization], DistributionType]
        Fixed type of every member, or a function computing it from the
        parameters.
    distr_parametrizations : Sequence[ParametrizationName]
        Declared parametrization names; the first one is the base.
    distr_characteristics : Mapping[str, Callable]
        Analytical characteristic functions keyed by characteristic name.
    support_by_parametrization : Callable, optional
        Maps parameters to the support of the distribution. Members have no
        support (``None``) when omitted.
    distribution_class : type[ParametricFamilyDistribution], optional
        Class instantiated by :meth:`distribution`.

    Raises
    ------
    ValueError
        If no parametrization name is declared.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType | TypeResolver,
        distr_parametrizations: Sequence[ParametrizationName],
        distr_characteristics: Mapping[GenericCharacteristicName, CharacteristicFunction],
        support_by_parametrization: SupportResolver | None = None,
        distribution_class: type[ParametricFamilyDistribution] = ParametricFamilyDistribution,
    ):
        if not distr_parametrizations:
            raise ValueError(f"Family '{name}' needs at least one parametrization name.")

        self._name = name
        if isinstance(distr_type, DistributionType):
            fixed_type = distr_type
            self._type_resolver: TypeResolver = lambda _parameters: fixed_type
        else:
            self._type_resolver = distr_type
        self._support_resolver: SupportResolver = support_by_parametrization or _no_support

        self.parametrization_names: list[ParametrizationName] = list(distr_parametrizations)
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]
        self.distr_characteristics: dict[GenericCharacteristicName, CharacteristicFunction] = (
            dict(distr_characteristics)
        )
        self.distribution_class = distribution_class
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Attached parametrization classes by name."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        The base parametrization class.

        Raises
        ------
        ValueError
            If no class has been attached under the base name yet.
        """
        base_class = self._parametrizations.get(self.base_parametrization_name)
        if base_class is None:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' of family "
                f"'{self.name}' is not registered."
            )
        return base_class

    @property
    def support_resolver(self) -> SupportResolver:
        return self._support_resolver

    def distribution_type(self, parameters: Parametrization) -> DistributionType:
        return self._type_resolver(parameters)

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Attach a parametrization class under one of the declared names.

        Usually called by the ``@parametrization`` decorator rather than
        directly.

        Raises
        ------
        ValueError
            If ``name`` is not declared by the family or is already taken.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family '{self.name}'.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """Attached class for ``name``; ``KeyError`` if there is none."""
        return self._parametrizations[name]

    def build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Bind each characteristic function to ``parameters``.

        Returns
        -------
        dict[str, AnalyticalComputation]
            Computations taking only the data argument.
        """
        return {
            characteristic: AnalyticalComputation(
                target=characteristic,
                func=partial(func, parameters),
            )
            for characteristic, func in self.distr_characteristics.items()
        }

    def make_parameters(
        self,
        parametrization_name: ParametrizationName | None = None,
        **parameters_values: Any,
    ) -> Parametrization:
        """
        Build a validated parametrization object.

        Parameters
        ----------
        parametrization_name : str, optional
            Which parametrization to build, the base one by default.
        **parameters_values
            Field values.

        Raises
        ------
        KeyError
            If ``parametrization_name`` is unknown.
        TypeError
            If fields are missing or unexpected.
        DomainError
            If a constraint fails.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self.get_parametrization(parametrization_name)

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        return parameters

    def distribution(
        self,
        parametrization_name: ParametrizationName | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a member of the family.

        Accepts the same arguments as :meth:`make_parameters` and raises the
        same errors. The result is an instance of :attr:`distribution_class`.
        """
        parameters = self.make_parameters(parametrization_name, **parameters_values)
        return self.distribution_class.from_parameters(self, parameters)

    @dataclass_transform()
    def parametrization(
        self, *, name: ParametrizationName
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Method form of the ``@parametrization`` class decorator.

        Mypy does not apply ``dataclass_transform`` to methods, so the free
        function form type-checks better.
        """
        from pysatl_stats.families.parametrizations import parametrization as attach_to

        return attach_to(family=self, name=name)

    def __repr__(self) -> str:
        return f"ParametricFamily(name={self.name!r}, parametrizations={self.parametrization_names})"

    __call__ = distribution
