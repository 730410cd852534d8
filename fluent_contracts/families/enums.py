"""
Enum Contracts

The subject is an ``enum.Enum`` member, ``None``, or (for ``be_defined``)
a raw value that may or may not belong to the enum class given at
construction.
"""

from __future__ import annotations
from enum import Enum, Flag
from typing import Any, Iterable, Optional, Type

from ..contracts.codes import EnumCodes
from ..core.evaluator import Contracts, describe


def _name(member: Any) -> str:
    if isinstance(member, Enum):
        return f"{type(member).__name__}.{member.name}"
    return describe(member)


class EnumContracts(Contracts[Optional[Enum]]):

    def __init__(self, subject: Any, throw_on_failure: bool = False,
                 enum_type: Optional[Type[Enum]] = None):
        super().__init__(subject, throw_on_failure)
        if enum_type is None and isinstance(subject, Enum):
            enum_type = type(subject)
        self._enum_type = enum_type

    @property
    def enum_type(self) -> Optional[Type[Enum]]:
        return self._enum_type

    def be_null(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is None,
            EnumCodes.BE_NULL,
            lambda: f"Expected the enum to be null but found '{_name(self.subject)}'",
            self._context(because, because_args, actual=_name(self.subject)),
        )

    def not_be_null(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None,
            EnumCodes.NOT_BE_NULL,
            "Expected the enum to have a value but found null",
            self._context(because, because_args),
        )

    def be(self, expected: Optional[Enum], because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is expected or (s is not None and s == expected),
            EnumCodes.BE,
            lambda: f"Expected the enum to be '{_name(expected)}' but found '{_name(self.subject)}'",
            self._context(because, because_args, expected=_name(expected), actual=_name(self.subject)),
        )

    def not_be(self, unexpected: Optional[Enum], because: str = "", *because_args):
        return self.assert_that(
            lambda s: not (s is unexpected or (s is not None and s == unexpected)),
            EnumCodes.NOT_BE,
            f"Expected the enum not to be '{_name(unexpected)}' but it is",
            self._context(because, because_args, unexpected=_name(unexpected)),
        )

    def be_defined(self, because: str = "", *because_args):
        """The subject is a member of (or a value defined by) the enum type."""
        type_name = self._type_name()
        return self.assert_that(
            lambda s: s is not None and self._is_defined(s),
            EnumCodes.BE_DEFINED,
            lambda: (
                f"Expected the enum to be defined in {type_name} but found null"
                if self.subject is None
                else f"Expected the enum to be defined in {type_name} but it is not"
            ),
            self._context(because, because_args, enum_type=type_name, actual=_name(self.subject)),
        )

    def not_be_defined(self, because: str = "", *because_args):
        type_name = self._type_name()
        return self.assert_that(
            lambda s: s is not None and not self._is_defined(s),
            EnumCodes.NOT_BE_DEFINED,
            lambda: (
                f"Did not expect the enum to be defined in {type_name} but found null"
                if self.subject is None
                else f"Did not expect the enum to be defined in {type_name} but it is"
            ),
            self._context(because, because_args, enum_type=type_name, actual=_name(self.subject)),
        )

    def have_value(self, expected: Any, because: str = "", *because_args):
        actual = self._value()
        return self.assert_that(
            lambda s: s is not None and actual == expected,
            EnumCodes.HAVE_VALUE,
            lambda: (
                f"Expected the enum to have value {expected} but found null"
                if self.subject is None
                else f"Expected the enum to have value {expected} but found {actual}"
            ),
            self._context(because, because_args, expected=expected, actual=actual),
        )

    def not_have_value(self, unexpected: Any, because: str = "", *because_args):
        actual = self._value()
        return self.assert_that(
            lambda s: s is None or actual != unexpected,
            EnumCodes.NOT_HAVE_VALUE,
            lambda: f"Expected the enum to not have value {unexpected} but found {_name(self.subject)}",
            self._context(because, because_args, unexpected=unexpected, actual=actual),
        )

    def have_same_value_as(self, other: Enum, because: str = "", *because_args):
        """Value equality across possibly different enum classes."""
        return self.assert_that(
            lambda s: s is not None and self._value() == other.value,
            EnumCodes.HAVE_SAME_VALUE_AS,
            lambda: f"Expected the enum to have same value as '{_name(other)}' but found '{_name(self.subject)}'",
            self._context(because, because_args, expected=_name(other), actual=_name(self.subject)),
        )

    def not_have_same_value_as(self, other: Enum, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is None or self._value() != other.value,
            EnumCodes.NOT_HAVE_SAME_VALUE_AS,
            f"Expected the enum to not have same value as '{_name(other)}' but it does",
            self._context(because, because_args, unexpected=_name(other), actual=_name(self.subject)),
        )

    def have_same_name_as(self, other: Enum, because: str = "", *because_args):
        return self.assert_that(
            lambda s: isinstance(s, Enum) and s.name == other.name,
            EnumCodes.HAVE_SAME_NAME_AS,
            lambda: f"Expected the enum to have same name as '{_name(other)}' but found '{_name(self.subject)}'",
            self._context(because, because_args, expected=other.name, actual=_name(self.subject)),
        )

    def not_have_same_name_as(self, other: Enum, because: str = "", *because_args):
        return self.assert_that(
            lambda s: not (isinstance(s, Enum) and s.name == other.name),
            EnumCodes.NOT_HAVE_SAME_NAME_AS,
            f"Expected the enum to not have same name as '{_name(other)}' but it does",
            self._context(because, because_args, unexpected=other.name, actual=_name(self.subject)),
        )

    def have_flag(self, flag: Flag, because: str = "", *because_args):
        return self.assert_that(
            lambda s: isinstance(s, Flag) and (s & flag) == flag,
            EnumCodes.HAVE_FLAG,
            lambda: f"Expected the enum to have flag '{_name(flag)}' but found '{_name(self.subject)}'",
            self._context(because, because_args, expected_flag=_name(flag), actual=_name(self.subject)),
        )

    def not_have_flag(self, flag: Flag, because: str = "", *because_args):
        return self.assert_that(
            lambda s: not (isinstance(s, Flag) and (s & flag) == flag),
            EnumCodes.NOT_HAVE_FLAG,
            f"Expected the enum to not have flag '{_name(flag)}' but it does",
            self._context(because, because_args, unexpected_flag=_name(flag), actual=_name(self.subject)),
        )

    def match(self, predicate, because: str = "", *because_args):
        if predicate is None:
            raise ValueError("predicate must not be None")
        return self.assert_that(
            lambda s: s is not None and bool(predicate(s)),
            EnumCodes.MATCH,
            lambda: f"Expected the enum to match the predicate but found '{_name(self.subject)}'",
            self._context(because, because_args, actual=_name(self.subject)),
        )

    def be_one_of(self, valid_values: Iterable[Enum], because: str = "", *because_args):
        values = tuple(valid_values)
        listed = ", ".join(_name(v) for v in values)
        return self.assert_that(
            lambda s: s is not None and s in values,
            EnumCodes.BE_ONE_OF,
            lambda: f"Expected the enum to be one of [{listed}] but found '{_name(self.subject)}'",
            self._context(because, because_args, valid_values=listed, actual=_name(self.subject)),
        )

    def _type_name(self) -> str:
        return self._enum_type.__name__ if self._enum_type is not None else "(unknown enum)"

    def _is_defined(self, value: Any) -> bool:
        if self._enum_type is None:
            return isinstance(value, Enum)
        if isinstance(value, Enum):
            return isinstance(value, self._enum_type) and value.name in self._enum_type.__members__
        return any(member.value == value for member in self._enum_type)

    def _value(self) -> Any:
        subject = self.subject
        return subject.value if isinstance(subject, Enum) else subject
