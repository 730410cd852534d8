"""
Type contracts for class subjects.

``be_assignable_to`` includes the class itself, ``be_derived_from`` does
not. Methods are looked up with ``inspect.getattr_static`` so descriptors
are not triggered during the check.
"""

from __future__ import annotations
import dataclasses
import inspect
from typing import Any, Optional, Type

from ..contracts.codes import TypeCodes
from ..core.evaluator import Contracts

_MISSING = object()


def _name(cls: Optional[type]) -> Optional[str]:
    return None if cls is None else cls.__name__


def _static(cls: type, name: str) -> Any:
    return inspect.getattr_static(cls, name, _MISSING)


def _is_method(cls: Optional[type], name: str) -> bool:
    if cls is None:
        return False
    attr = _static(cls, name)
    if isinstance(attr, (staticmethod, classmethod)):
        return True
    return inspect.isfunction(attr) or (inspect.ismethoddescriptor(attr) and callable(attr))


def _is_property(cls: Optional[type], name: str) -> bool:
    return cls is not None and isinstance(_static(cls, name), property)


def _has_default_constructor(cls: type) -> bool:
    try:
        signature = inspect.signature(cls)
    except (TypeError, ValueError):
        # builtins without introspectable signatures
        return False
    return all(
        p.default is not inspect.Parameter.empty
        or p.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        for p in signature.parameters.values()
    )


class TypeContracts(Contracts[Optional[Type[Any]]]):

    def be(self, expected: type, because: str = "", *because_args) -> TypeContracts:
        return self.assert_that(
            lambda s: s is expected,
            TypeCodes.BE,
            lambda: f"Expected type {_name(expected)} but found {self._found()}",
            self._context(because, because_args, expected_type=_name(expected), actual_type=_name(self.subject)),
        )

    def not_be(self, unexpected: type, because: str = "", *because_args) -> TypeContracts:
        return self.assert_that(
            lambda s: s is not unexpected,
            TypeCodes.NOT_BE,
            f"Did not expect type {_name(unexpected)}",
            self._context(because, because_args, unexpected_type=_name(unexpected)),
        )

    def be_assignable_to(self, base: type, because: str = "", *because_args) -> TypeContracts:
        return self.assert_that(
            lambda s: s is not None and issubclass(s, base),
            TypeCodes.BE_ASSIGNABLE_TO,
            lambda: f"Expected {self._found()} to be assignable to {base.__name__}",
            self._context(because, because_args, expected_base=base.__name__, actual_type=_name(self.subject)),
        )

    def not_be_assignable_to(self, base: type, because: str = "", *because_args) -> TypeContracts:
        return self.assert_that(
            lambda s: s is None or not issubclass(s, base),
            TypeCodes.NOT_BE_ASSIGNABLE_TO,
            lambda: f"Did not expect {self._found()} to be assignable to {base.__name__}",
            self._context(because, because_args, unexpected_base=base.__name__, actual_type=_name(self.subject)),
        )

    def be_derived_from(self, base: type, because: str = "", *because_args) -> TypeContracts:
        return self.assert_that(
            lambda s: s is not None and s is not base and issubclass(s, base),
            TypeCodes.BE_DERIVED_FROM,
            lambda: f"Expected {self._found()} to derive from {base.__name__}",
            self._context(because, because_args, expected_base=base.__name__, actual_type=_name(self.subject)),
        )

    def not_be_derived_from(self, base: type, because: str = "", *because_args) -> TypeContracts:
        return self.assert_that(
            lambda s: s is None or s is base or not issubclass(s, base),
            TypeCodes.NOT_BE_DERIVED_FROM,
            lambda: f"Did not expect {self._found()} to derive from {base.__name__}",
            self._context(because, because_args, unexpected_base=base.__name__, actual_type=_name(self.subject)),
        )

    def be_abstract(self, because: str = "", *because_args) -> TypeContracts:
        return self.assert_that(
            lambda s: s is not None and inspect.isabstract(s),
            TypeCodes.BE_ABSTRACT,
            lambda: f"Expected {self._found()} to be abstract",
            self._context(because, because_args, actual_type=_name(self.subject)),
        )

    def not_be_abstract(self, because: str = "", *because_args) -> TypeContracts:
        return self.assert_that(
            lambda s: s is not None and not inspect.isabstract(s),
            TypeCodes.NOT_BE_ABSTRACT,
            lambda: f"Expected {self._found()} not to be abstract",
            self._context(because, because_args, actual_type=_name(self.subject)),
        )

    def have_method(self, name: str, because: str = "", *because_args) -> TypeContracts:
        if not name:
            raise ValueError("Method name must not be empty")
        return self.assert_that(
            lambda s: _is_method(s, name),
            TypeCodes.HAVE_METHOD,
            lambda: f"Expected {self._found()} to have method {name!r}",
            self._context(because, because_args, method=name, actual_type=_name(self.subject)),
        )

    def not_have_method(self, name: str, because: str = "", *because_args) -> TypeContracts:
        if not name:
            raise ValueError("Method name must not be empty")
        return self.assert_that(
            lambda s: s is None or not _is_method(s, name),
            TypeCodes.NOT_HAVE_METHOD,
            lambda: f"Did not expect {self._found()} to have method {name!r}",
            self._context(because, because_args, method=name, actual_type=_name(self.subject)),
        )

    def have_property(self, name: str, because: str = "", *because_args) -> TypeContracts:
        if not name:
            raise ValueError("Property name must not be empty")
        return self.assert_that(
            lambda s: _is_property(s, name),
            TypeCodes.HAVE_PROPERTY,
            lambda: f"Expected {self._found()} to have property {name!r}",
            self._context(because, because_args, property=name, actual_type=_name(self.subject)),
        )

    def not_have_property(self, name: str, because: str = "", *because_args) -> TypeContracts:
        if not name:
            raise ValueError("Property name must not be empty")
        return self.assert_that(
            lambda s: not _is_property(s, name),
            TypeCodes.NOT_HAVE_PROPERTY,
            lambda: f"Did not expect {self._found()} to have property {name!r}",
            self._context(because, because_args, property=name, actual_type=_name(self.subject)),
        )

    def be_dataclass(self, because: str = "", *because_args) -> TypeContracts:
        return self.assert_that(
            lambda s: s is not None and dataclasses.is_dataclass(s),
            TypeCodes.BE_DATACLASS,
            lambda: f"Expected {self._found()} to be a dataclass",
            self._context(because, because_args, actual_type=_name(self.subject)),
        )

    def not_be_dataclass(self, because: str = "", *because_args) -> TypeContracts:
        return self.assert_that(
            lambda s: s is None or not dataclasses.is_dataclass(s),
            TypeCodes.NOT_BE_DATACLASS,
            lambda: f"Did not expect {self._found()} to be a dataclass",
            self._context(because, because_args, actual_type=_name(self.subject)),
        )

    def have_default_constructor(self, because: str = "", *because_args) -> TypeContracts:
        """Constructible with no arguments."""
        return self.assert_that(
            lambda s: s is not None and _has_default_constructor(s),
            TypeCodes.HAVE_DEFAULT_CONSTRUCTOR,
            lambda: f"Expected {self._found()} to be constructible without arguments",
            self._context(because, because_args, actual_type=_name(self.subject)),
        )

    def not_have_default_constructor(self, because: str = "", *because_args) -> TypeContracts:
        return self.assert_that(
            lambda s: s is not None and not _has_default_constructor(s),
            TypeCodes.NOT_HAVE_DEFAULT_CONSTRUCTOR,
            lambda: f"Did not expect {self._found()} to be constructible without arguments",
            self._context(because, because_args, actual_type=_name(self.subject)),
        )

    def _found(self) -> str:
        return "null" if self.subject is None else self.subject.__name__
