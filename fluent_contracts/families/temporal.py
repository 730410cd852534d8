"""
Date, datetime and timedelta contracts.

Both families extend the comparable contracts, so ordering assertions
(``be_greater_than``, ``be_in_range``...) come for free. Comparing a naive
datetime with an aware one is a caller bug and raises TypeError like any
other Python comparison.
"""

from __future__ import annotations
from datetime import date, datetime, timedelta
from typing import Optional, Union

from ..contracts.codes import DateTimeCodes, TimeSpanCodes
from .comparable import ComparableContracts

DateLike = Union[date, datetime]


def _as_date(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


class DateTimeContracts(ComparableContracts):

    def be_before(self, expected: DateLike, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and s < expected,
            DateTimeCodes.BE_BEFORE,
            lambda: self._found(f"Expected a date before <{expected}>"),
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def be_on_or_before(self, expected: DateLike, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and s <= expected,
            DateTimeCodes.BE_ON_OR_BEFORE,
            lambda: self._found(f"Expected a date on or before <{expected}>"),
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def be_after(self, expected: DateLike, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and s > expected,
            DateTimeCodes.BE_AFTER,
            lambda: self._found(f"Expected a date after <{expected}>"),
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def be_on_or_after(self, expected: DateLike, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and s >= expected,
            DateTimeCodes.BE_ON_OR_AFTER,
            lambda: self._found(f"Expected a date on or after <{expected}>"),
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def be_close_to(self, nearby: DateLike, precision: timedelta, because: str = "", *because_args):
        if precision < timedelta(0):
            raise ValueError("precision must be non-negative")
        return self.assert_that(
            lambda s: s is not None and abs(s - nearby) <= precision,
            DateTimeCodes.BE_CLOSE_TO,
            lambda: self._found(f"Expected a date within {precision} of <{nearby}>"),
            self._context(
                because, because_args, expected=nearby, precision=precision, actual=self.subject
            ),
        )

    def not_be_close_to(self, distant: DateLike, precision: timedelta, because: str = "", *because_args):
        if precision < timedelta(0):
            raise ValueError("precision must be non-negative")
        return self.assert_that(
            lambda s: s is None or abs(s - distant) > precision,
            DateTimeCodes.NOT_BE_CLOSE_TO,
            lambda: f"Did not expect a date within {precision} of <{distant}> but found <{self.subject}>",
            self._context(
                because, because_args, unexpected=distant, precision=precision, actual=self.subject
            ),
        )

    def have_year(self, expected: int, because: str = "", *because_args):
        return self._have_component("year", expected, DateTimeCodes.HAVE_YEAR, because, because_args)

    def have_month(self, expected: int, because: str = "", *because_args):
        return self._have_component("month", expected, DateTimeCodes.HAVE_MONTH, because, because_args)

    def have_day(self, expected: int, because: str = "", *because_args):
        return self._have_component("day", expected, DateTimeCodes.HAVE_DAY, because, because_args)

    def be_same_date_as(self, expected: DateLike, because: str = "", *because_args):
        """Compares the calendar date only, ignoring the time of day."""
        return self.assert_that(
            lambda s: s is not None and _as_date(s) == _as_date(expected),
            DateTimeCodes.BE_SAME_DATE_AS,
            lambda: self._found(f"Expected the date part to be <{_as_date(expected)}>"),
            self._context(because, because_args, expected=_as_date(expected), actual=self.subject),
        )

    def not_be_same_date_as(self, unexpected: DateLike, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is None or _as_date(s) != _as_date(unexpected),
            DateTimeCodes.NOT_BE_SAME_DATE_AS,
            lambda: f"Did not expect the date part to be <{_as_date(unexpected)}>",
            self._context(because, because_args, unexpected=_as_date(unexpected), actual=self.subject),
        )

    def _have_component(self, component: str, expected: int, code, because: str, because_args: tuple):
        actual: Optional[int] = None if self.subject is None else getattr(self.subject, component)

        def message() -> str:
            if self.subject is None:
                return f"Expected the {component} to be {expected} but found null"
            return f"Expected the {component} to be {expected} but found {actual}"

        return self.assert_that(
            lambda s: s is not None and actual == expected,
            code,
            message,
            self._context(because, because_args, expected=expected, actual=actual),
        )


class TimeSpanContracts(ComparableContracts):
    """Contracts for ``datetime.timedelta`` subjects."""

    def be_positive(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and s > timedelta(0),
            TimeSpanCodes.BE_POSITIVE,
            lambda: self._found("Expected a positive time span"),
            self._context(because, because_args, actual=self.subject),
        )

    def be_negative(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and s < timedelta(0),
            TimeSpanCodes.BE_NEGATIVE,
            lambda: self._found("Expected a negative time span"),
            self._context(because, because_args, actual=self.subject),
        )

    def be_close_to(self, nearby: timedelta, precision: timedelta, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and abs(s - nearby) <= precision,
            TimeSpanCodes.BE_CLOSE_TO,
            lambda: self._found(f"Expected a time span within {precision} of {nearby}"),
            self._context(
                because, because_args, expected=nearby, precision=precision, actual=self.subject
            ),
        )

    def not_be_close_to(self, distant: timedelta, precision: timedelta, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is None or abs(s - distant) > precision,
            TimeSpanCodes.NOT_BE_CLOSE_TO,
            lambda: f"Did not expect a time span within {precision} of {distant} but found {self.subject}",
            self._context(
                because, because_args, unexpected=distant, precision=precision, actual=self.subject
            ),
        )
