"""Boolean contracts. The subject may be ``None`` (an absent flag)."""

from __future__ import annotations
from typing import Optional

from ..contracts.codes import BooleanCodes
from ..core.evaluator import Contracts, describe


class BooleanContracts(Contracts[Optional[bool]]):

    def have_value(self, because: str = "", *because_args) -> BooleanContracts:
        return self.assert_that(
            lambda s: s is not None,
            BooleanCodes.HAVE_VALUE,
            "Expected a value but found null",
            self._context(because, because_args),
        )

    def not_have_value(self, because: str = "", *because_args) -> BooleanContracts:
        return self.assert_that(
            lambda s: s is None,
            BooleanCodes.NOT_HAVE_VALUE,
            lambda: f"Did not expect a value but found {self.subject}",
            self._context(because, because_args, actual=self.subject),
        )

    def be_null(self, because: str = "", *because_args) -> BooleanContracts:
        return self.not_have_value(because, *because_args)

    def not_be_null(self, because: str = "", *because_args) -> BooleanContracts:
        return self.have_value(because, *because_args)

    def be_true(self, because: str = "", *because_args) -> BooleanContracts:
        return self.assert_that(
            lambda s: s is True,
            BooleanCodes.BE_TRUE,
            lambda: f"Expected true but found {describe(self.subject)}",
            self._context(because, because_args, actual=self.subject),
        )

    def be_false(self, because: str = "", *because_args) -> BooleanContracts:
        return self.assert_that(
            lambda s: s is False,
            BooleanCodes.BE_FALSE,
            lambda: f"Expected false but found {describe(self.subject)}",
            self._context(because, because_args, actual=self.subject),
        )

    def be(self, expected: bool, because: str = "", *because_args) -> BooleanContracts:
        return self.assert_that(
            lambda s: s is not None and s == expected,
            BooleanCodes.BE,
            lambda: f"Expected {expected} but found {describe(self.subject)}",
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def not_be(self, unexpected: bool, because: str = "", *because_args) -> BooleanContracts:
        return self.assert_that(
            lambda s: s is None or s != unexpected,
            BooleanCodes.NOT_BE,
            f"Did not expect {unexpected}",
            self._context(because, because_args, unexpected=unexpected, actual=self.subject),
        )

    def imply(self, consequent: bool, because: str = "", *because_args) -> BooleanContracts:
        """Logical implication: a true subject requires a true consequent."""
        def message() -> str:
            if self.subject is None:
                return "Expected a value to check implication but found null"
            return f"Expected {self.subject} to imply {consequent} but it did not"

        return self.assert_that(
            lambda s: s is not None and (not s or consequent),
            BooleanCodes.IMPLY,
            message,
            self._context(because, because_args, antecedent=self.subject, consequent=consequent),
        )
