"""
Object contracts: the fallback family for any subject.

``be_of_type`` is exact-type, ``be_assignable_to`` is ``isinstance``.
"""

from __future__ import annotations
from typing import Any, Callable, Tuple, Type, Union

from ..contracts.codes import ObjectCodes
from ..core.evaluator import Contracts, describe, type_name

TypeOrTuple = Union[type, Tuple[type, ...]]


def _type_names(target: TypeOrTuple) -> str:
    if isinstance(target, tuple):
        return " | ".join(t.__name__ for t in target)
    return target.__name__


class ObjectContracts(Contracts[Any]):

    def be(self, expected: Any, because: str = "", *because_args) -> ObjectContracts:
        return self.assert_that(
            lambda s: s == expected,
            ObjectCodes.BE,
            lambda: f"Expected {describe(expected)} but found {describe(self.subject)}",
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def not_be(self, unexpected: Any, because: str = "", *because_args) -> ObjectContracts:
        return self.assert_that(
            lambda s: s != unexpected,
            ObjectCodes.NOT_BE,
            f"Did not expect {describe(unexpected)}",
            self._context(because, because_args, unexpected=unexpected),
        )

    def be_null(self, because: str = "", *because_args) -> ObjectContracts:
        return self.assert_that(
            lambda s: s is None,
            ObjectCodes.BE_NULL,
            lambda: f"Expected null but found {describe(self.subject)}",
            self._context(because, because_args, actual=self.subject),
        )

    def not_be_null(self, because: str = "", *because_args) -> ObjectContracts:
        return self.assert_that(
            lambda s: s is not None,
            ObjectCodes.NOT_BE_NULL,
            "Expected a value but found null",
            self._context(because, because_args),
        )

    def be_same_as(self, expected: Any, because: str = "", *because_args) -> ObjectContracts:
        """Identity (``is``), not equality."""
        return self.assert_that(
            lambda s: s is expected,
            ObjectCodes.BE_SAME_AS,
            lambda: f"Expected the same instance as {describe(expected)} but found {describe(self.subject)}",
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def not_be_same_as(self, unexpected: Any, because: str = "", *because_args) -> ObjectContracts:
        return self.assert_that(
            lambda s: s is not unexpected,
            ObjectCodes.NOT_BE_SAME_AS,
            f"Did not expect the same instance as {describe(unexpected)}",
            self._context(because, because_args, unexpected=unexpected),
        )

    def be_of_type(self, expected: Type[Any], because: str = "", *because_args) -> ObjectContracts:
        def message() -> str:
            if self.subject is None:
                return f"Expected type {expected.__name__} but found null"
            return f"Expected type {expected.__name__} but found {type_name(self.subject)}"

        return self.assert_that(
            lambda s: s is not None and type(s) is expected,
            ObjectCodes.BE_OF_TYPE,
            message,
            self._context(
                because,
                because_args,
                expected_type=expected.__name__,
                actual_type=None if self.subject is None else type_name(self.subject),
            ),
        )

    def not_be_of_type(self, unexpected: Type[Any], because: str = "", *because_args) -> ObjectContracts:
        return self.assert_that(
            lambda s: s is None or type(s) is not unexpected,
            ObjectCodes.NOT_BE_OF_TYPE,
            f"Did not expect type {unexpected.__name__}",
            self._context(because, because_args, unexpected_type=unexpected.__name__),
        )

    def be_assignable_to(self, expected: TypeOrTuple, because: str = "", *because_args) -> ObjectContracts:
        def message() -> str:
            if self.subject is None:
                return f"Expected an instance of {_type_names(expected)} but found null"
            return f"Expected an instance of {_type_names(expected)} but found {type_name(self.subject)}"

        return self.assert_that(
            lambda s: s is not None and isinstance(s, expected),
            ObjectCodes.BE_ASSIGNABLE_TO,
            message,
            self._context(
                because,
                because_args,
                expected_type=_type_names(expected),
                actual_type=None if self.subject is None else type_name(self.subject),
            ),
        )

    def not_be_assignable_to(self, unexpected: TypeOrTuple, because: str = "", *because_args) -> ObjectContracts:
        return self.assert_that(
            lambda s: s is None or not isinstance(s, unexpected),
            ObjectCodes.NOT_BE_ASSIGNABLE_TO,
            lambda: f"Did not expect an instance of {_type_names(unexpected)} but found {type_name(self.subject)}",
            self._context(because, because_args, unexpected_type=_type_names(unexpected)),
        )

    def match(self, predicate: Callable[[Any], bool], because: str = "", *because_args) -> ObjectContracts:
        if predicate is None:
            raise ValueError("predicate must not be None")
        return self.assert_that(
            lambda s: bool(predicate(s)),
            ObjectCodes.MATCH,
            lambda: f"Expected {describe(self.subject)} to match the predicate",
            self._context(because, because_args, actual=self.subject),
        )
