"""
Global registry for discrete distribution families using singleton pattern.

This module implements a centralized registry that maps family names to the
distribution classes implementing them, enabling construction by name across
the application.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any, ClassVar

    from pysatl_discrete.distributions.distribution import DiscreteDistribution


class DiscreteFamilyRegister:
    """
    Singleton registry for discrete distribution families.

    Maintains a global registry of all family classes, allowing them to be
    accessed by name.
    """

    _instance: ClassVar[DiscreteFamilyRegister | None] = None
    _registered_families: dict[str, type[DiscreteDistribution]]

    def __new__(cls) -> DiscreteFamilyRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_families = {}
        return cls._instance

    @classmethod
    def get(cls, name: str) -> type[DiscreteDistribution]:
        """
        Retrieve a family class by name.

        Parameters
        ----------
        name : str
            Name of the family to retrieve.

        Returns
        -------
        type[DiscreteDistribution]
            The requested family class.

        Raises
        ------
        ValueError
            If no family with the given name exists.
        """
        self = cls()
        if name not in self._registered_families:
            raise ValueError(f"No family {name} found in register")
        return self._registered_families[name]

    @classmethod
    def contains(cls, name: str) -> bool:
        """Check whether a family is registered under ``name``."""
        return name in cls()._registered_families

    @classmethod
    def names(cls) -> list[str]:
        """Names of all registered families in registration order."""
        return list(cls()._registered_families)

    @classmethod
    def register(cls, family: type[DiscreteDistribution]) -> None:
        """
        Register a new family class under its ``family_name``.

        Parameters
        ----------
        family : type[DiscreteDistribution]
            The family class to register.

        Raises
        ------
        ValueError
            If the class has no ``family_name`` or a family with the same
            name is already registered.
        """
        self = cls()
        name = getattr(family, "family_name", None)
        if name is None:
            raise ValueError(f"Family {family.__name__} does not define family_name")
        if name in self._registered_families:
            raise ValueError(f"Family {name} already found in register")
        self._registered_families[name] = family

    @classmethod
    def create(cls, name: str, /, **parameters: Any) -> DiscreteDistribution:
        """
        Construct a distribution of the family ``name``.

        Raises
        ------
        ValueError
            If the family is unknown.
        InvalidParameterError
            If the parameters violate the family constraints.
        """
        return cls.get(name)(**parameters)

    @classmethod
    def _reset(cls) -> None:
        """Drop the singleton instance (test helper)."""
        cls._instance = None
