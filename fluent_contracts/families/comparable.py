"""
Comparable and Numeric Contracts

Works for anything ordered with ``<``/``==``: numbers, Decimals, dates,
timedeltas, strings used as ranks. ``None`` fails ordering assertions with
the assertion's own code and never raises TypeError.
"""

from __future__ import annotations
from typing import Any, Iterable, Optional, TypeVar
import math

from ..contracts.codes import ComparableCodes, NumericCodes
from ..core.evaluator import Contracts, describe

V = TypeVar("V")


class ComparableContracts(Contracts[Optional[V]]):

    def have_value(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None,
            ComparableCodes.HAVE_VALUE,
            "Expected a value but found null",
            self._context(because, because_args),
        )

    def not_have_value(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is None,
            ComparableCodes.NOT_HAVE_VALUE,
            lambda: f"Did not expect a value but found '{self.subject}'",
            self._context(because, because_args, actual=self.subject),
        )

    def be(self, expected: V, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and s == expected,
            ComparableCodes.BE,
            lambda: self._found(f"Expected value to be '{expected}'"),
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def not_be(self, unexpected: V, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is None or s != unexpected,
            ComparableCodes.NOT_BE,
            f"Did not expect value to be '{unexpected}'",
            self._context(because, because_args, unexpected=unexpected, actual=self.subject),
        )

    def be_ranked_equally_to(self, expected: V, because: str = "", *because_args):
        """Neither greater nor less than ``expected`` (ordering equality)."""
        return self.assert_that(
            lambda s: s is not None and not (s < expected or expected < s),
            ComparableCodes.BE_RANKED_EQUALLY_TO,
            lambda: self._found(f"Expected value to be ranked equally to '{expected}'"),
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def not_be_ranked_equally_to(self, unexpected: V, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is None or s < unexpected or unexpected < s,
            ComparableCodes.NOT_BE_RANKED_EQUALLY_TO,
            f"Did not expect value to be ranked equally to '{unexpected}'",
            self._context(because, because_args, unexpected=unexpected, actual=self.subject),
        )

    def be_greater_than(self, expected: V, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and s > expected,
            ComparableCodes.BE_GREATER_THAN,
            lambda: self._found(f"Expected value to be greater than '{expected}'"),
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def be_greater_than_or_equal_to(self, expected: V, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and s >= expected,
            ComparableCodes.BE_GREATER_THAN_OR_EQUAL_TO,
            lambda: self._found(f"Expected value to be greater than or equal to '{expected}'"),
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def be_less_than(self, expected: V, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and s < expected,
            ComparableCodes.BE_LESS_THAN,
            lambda: self._found(f"Expected value to be less than '{expected}'"),
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def be_less_than_or_equal_to(self, expected: V, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and s <= expected,
            ComparableCodes.BE_LESS_THAN_OR_EQUAL_TO,
            lambda: self._found(f"Expected value to be less than or equal to '{expected}'"),
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def be_in_range(self, minimum: V, maximum: V, because: str = "", *because_args):
        """Inclusive on both ends."""
        return self.assert_that(
            lambda s: s is not None and minimum <= s <= maximum,
            ComparableCodes.BE_IN_RANGE,
            lambda: self._found(f"Expected value to be in range [{minimum}..{maximum}]"),
            self._context(because, because_args, minimum=minimum, maximum=maximum, actual=self.subject),
        )

    def not_be_in_range(self, minimum: V, maximum: V, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is None or s < minimum or s > maximum,
            ComparableCodes.NOT_BE_IN_RANGE,
            lambda: f"Did not expect value '{self.subject}' to be in range [{minimum}..{maximum}]",
            self._context(because, because_args, minimum=minimum, maximum=maximum, actual=self.subject),
        )

    def be_one_of(self, valid_values: Iterable[V], because: str = "", *because_args):
        values = tuple(valid_values)
        listed = ", ".join(describe(v) for v in values)
        return self.assert_that(
            lambda s: s is not None and any(s == v for v in values),
            ComparableCodes.BE_ONE_OF,
            lambda: self._found(f"Expected value to be one of [{listed}]"),
            self._context(because, because_args, valid_values=listed, actual=self.subject),
        )

    def _found(self, expectation: str) -> str:
        if self.subject is None:
            return f"{expectation} but found null"
        return f"{expectation} but found '{self.subject}'"


class NumericContracts(ComparableContracts):
    """Comparable contracts plus sign and tolerance checks for numbers."""

    def be_positive(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and s > 0,
            NumericCodes.BE_POSITIVE,
            lambda: self._found("Expected value to be positive"),
            self._context(because, because_args, actual=self.subject),
        )

    def be_negative(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and s < 0,
            NumericCodes.BE_NEGATIVE,
            lambda: self._found("Expected value to be negative"),
            self._context(because, because_args, actual=self.subject),
        )

    def be_zero(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and s == 0,
            NumericCodes.BE_ZERO,
            lambda: self._found("Expected value to be zero"),
            self._context(because, because_args, actual=self.subject),
        )

    def not_be_zero(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is None or s != 0,
            NumericCodes.NOT_BE_ZERO,
            "Did not expect value to be zero",
            self._context(because, because_args, actual=self.subject),
        )

    def be_approximately(self, expected: Any, precision: Any, because: str = "", *because_args):
        """``|subject - expected| <= precision``. NaN never matches."""
        if precision < 0:
            raise ValueError("precision must be non-negative")

        def within(s: Any) -> bool:
            if s is None:
                return False
            difference = abs(s - expected)
            if isinstance(difference, float) and math.isnan(difference):
                return False
            return difference <= precision

        return self.assert_that(
            within,
            NumericCodes.BE_APPROXIMATELY,
            lambda: self._found(f"Expected value to approximate '{expected}' +/- {precision}"),
            self._context(
                because, because_args, expected=expected, precision=precision, actual=self.subject
            ),
        )
