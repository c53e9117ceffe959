"""
Process-wide register of the discrete distribution families.

Families are looked up by name. The built-in ones are added by
:func:`~pysatl_stats.families.configuration.configure_families_register`;
user-defined families may be added with :meth:`ParametricFamilyRegister.register`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_stats.families.parametric_family import ParametricFamily

logger = logging.getLogger(__name__)


class ParametricFamilyRegister:
    """
    Name-to-family mapping shared by the whole process.

    Every instantiation returns the same object; the class methods operate on
    that single instance. References obtained before :meth:`_reset` follow the
    current singleton, not the register they were taken from.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._families = {}
            cls._instance = instance
        return cls._instance

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Look a family up by name.

        Raises
        ------
        ValueError
            If nothing is registered under ``name``.
        """
        families = cls()._families
        try:
            return families[name]
        except KeyError:
            raise ValueError(
                f"Unknown distribution family '{name}', registered: {list(families)}"
            ) from None

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Add a family under its own name.

        Parameters
        ----------
        family : ParametricFamily
            Family to add.

        Raises
        ------
        ValueError
            If the name is taken.
        """
        families = cls()._families
        if family.name in families:
            raise ValueError(f"Distribution family '{family.name}' is already registered")
        families[family.name] = family
        logger.debug("Registered parametric family %s", family.name)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls()._families

    @classmethod
    def list_registered_families(cls) -> list[str]:
        """Names of all registered families, in registration order."""
        return list(cls()._families)

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None
        logger.debug("Parametric family register reset")
