"""
Parameter validation for distribution families.

This module provides the ``@constraint`` decorator used to declare parameter
domains on family classes and the :class:`Parametrization` mixin that
collects and enforces them when an instance is constructed.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from numbers import Integral
from typing import TYPE_CHECKING, ParamSpec

from pysatl_discrete.errors import InvalidParameterError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on a parameter value.

    Parameters
    ----------
    parameter : str
        Name of the constrained parameter.
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if the constraint is satisfied.
    """

    parameter: str
    description: str
    check: Callable[[Any], bool]


P = ParamSpec("P")


def constraint(
    parameter: str, description: str
) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    parameter : str
        Name of the parameter the predicate checks.
    description : str
        Human-readable description of the constraint.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that marks the function as a constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    Sets marker attributes on the function:
    - __is_constraint: True
    - __constraint_parameter: parameter
    - __constraint_description: description
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_parameter", parameter)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def is_integer(value: object) -> bool:
    """Check that a parameter is an integer (``bool`` excluded)."""
    return isinstance(value, Integral) and not isinstance(value, bool)


def _collect_constraints(cls: type) -> list[ParametrizationConstraint]:
    """Collect constraint methods declared on ``cls`` and its bases."""
    constraints: list[ParametrizationConstraint] = []
    seen: set[str] = set()
    for klass in reversed(cls.__mro__):
        for name, attr in klass.__dict__.items():
            if isinstance(attr, staticmethod | classmethod):
                if getattr(attr.__func__, "__is_constraint", False):
                    raise TypeError(f"@constraint '{name}' must be an instance method")
                continue
            if not (callable(attr) and isfunction(attr)):
                continue
            if not getattr(attr, "__is_constraint", False) or name in seen:
                continue
            seen.add(name)
            constraints.append(
                ParametrizationConstraint(
                    parameter=getattr(attr, "__constraint_parameter"),
                    description=getattr(attr, "__constraint_description", name),
                    check=attr,
                )
            )
    return constraints


class Parametrization:
    """
    Mixin for families whose parameters are dataclass fields.

    Subclasses declare predicates with :func:`constraint`; they are collected
    when the class is created and checked in ``__post_init__``, so an instance
    that violates its domain is never observable.
    """

    __slots__ = ()

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._constraints = _collect_constraints(cls)

    def __post_init__(self) -> None:
        self.validate()

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        if not is_dataclass(self):
            return {}
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Raises
        ------
        InvalidParameterError
            If any constraint is not satisfied.
        """
        for item in self._constraints:
            if not item.check(self):
                raise InvalidParameterError(item.parameter, item.description)


__all__ = [
    "ParametrizationConstraint",
    "Parametrization",
    "constraint",
    "is_integer",
]
