"""
String Contracts

Comparisons are ordinal (exact code point equality). A ``None`` subject
fails every positive assertion with that assertion's own code and passes
the negative ones (``not_contain``, ``not_start_with``...).
"""

from __future__ import annotations
from typing import Optional, Pattern, Union
import re

from ..contracts.codes import StringCodes
from ..core.evaluator import Contracts, describe

RegexLike = Union[str, Pattern[str]]


def _require_argument(value: Optional[str], name: str, action: str) -> None:
    if value is None:
        raise ValueError(f"Cannot {action} with None ({name})")


def _compile(pattern: Optional[RegexLike]) -> Pattern[str]:
    if pattern is None:
        raise ValueError("Cannot match string against None (pattern)")
    if isinstance(pattern, str):
        return re.compile(pattern)
    return pattern


def _is_upper(value: str) -> bool:
    return all(ch.isupper() for ch in value)


def _is_lower(value: str) -> bool:
    return all(ch.islower() for ch in value)


class StringContracts(Contracts[Optional[str]]):

    def be(self, expected: Optional[str], because: str = "", *because_args) -> StringContracts:
        return self.assert_that(
            lambda s: s == expected,
            StringCodes.BE,
            lambda: f"Expected '{describe(expected)}' but found '{describe(self.subject)}'",
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def not_be(self, unexpected: Optional[str], because: str = "", *because_args) -> StringContracts:
        return self.assert_that(
            lambda s: s != unexpected,
            StringCodes.NOT_BE,
            lambda: f"Did not expect '{describe(unexpected)}'",
            self._context(because, because_args, unexpected=unexpected, actual=self.subject),
        )

    def be_empty(self, because: str = "", *because_args) -> StringContracts:
        return self.assert_that(
            lambda s: s == "",
            StringCodes.BE_EMPTY,
            lambda: f"Expected empty string but found '{describe(self.subject)}'",
            self._context(because, because_args, actual=self.subject),
        )

    def not_be_empty(self, because: str = "", *because_args) -> StringContracts:
        return self.assert_that(
            lambda s: s is None or len(s) > 0,
            StringCodes.NOT_BE_EMPTY,
            "Expected non-empty string but found empty string",
            self._context(because, because_args),
        )

    def be_null_or_empty(self, because: str = "", *because_args) -> StringContracts:
        return self.assert_that(
            lambda s: not s,
            StringCodes.BE_NULL_OR_EMPTY,
            lambda: f"Expected null or empty string but found '{self.subject}'",
            self._context(because, because_args, actual=self.subject),
        )

    def not_be_null_or_empty(self, because: str = "", *because_args) -> StringContracts:
        return self.assert_that(
            lambda s: bool(s),
            StringCodes.NOT_BE_NULL_OR_EMPTY,
            lambda: f"Expected non-null and non-empty string but found '{describe(self.subject)}'",
            self._context(because, because_args, actual=self.subject),
        )

    def be_null_or_whitespace(self, because: str = "", *because_args) -> StringContracts:
        return self.assert_that(
            lambda s: s is None or s.strip() == "",
            StringCodes.BE_NULL_OR_WHITESPACE,
            lambda: f"Expected null or whitespace string but found '{self.subject}'",
            self._context(because, because_args, actual=self.subject),
        )

    def not_be_null_or_whitespace(self, because: str = "", *because_args) -> StringContracts:
        return self.assert_that(
            lambda s: s is not None and s.strip() != "",
            StringCodes.NOT_BE_NULL_OR_WHITESPACE,
            lambda: f"Expected non-null and non-whitespace string but found '{describe(self.subject)}'",
            self._context(because, because_args, actual=self.subject),
        )

    def have_length(self, expected: int, because: str = "", *because_args) -> StringContracts:
        def message() -> str:
            if self.subject is None:
                return f"Expected string with length {expected} but found null"
            return f"Expected string with length {expected} but found length {len(self.subject)}"

        return self.assert_that(
            lambda s: s is not None and len(s) == expected,
            StringCodes.HAVE_LENGTH,
            message,
            self._context(
                because,
                because_args,
                expected_length=expected,
                actual_length=-1 if self.subject is None else len(self.subject),
                actual=self.subject,
            ),
        )

    # -------------------------------------------------------------------------
    # Prefix / suffix / substring
    # -------------------------------------------------------------------------

    def start_with(self, expected: str, because: str = "", *because_args) -> StringContracts:
        _require_argument(expected, "expected", "compare start of string")
        return self.assert_that(
            lambda s: s is not None and s.startswith(expected),
            StringCodes.START_WITH,
            lambda: self._found(f"Expected string starting with '{expected}'"),
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def not_start_with(self, unexpected: str, because: str = "", *because_args) -> StringContracts:
        _require_argument(unexpected, "unexpected", "compare start of string")
        return self.assert_that(
            lambda s: s is None or not s.startswith(unexpected),
            StringCodes.NOT_START_WITH,
            f"Did not expect string to start with '{unexpected}'",
            self._context(because, because_args, unexpected=unexpected, actual=self.subject),
        )

    def end_with(self, expected: str, because: str = "", *because_args) -> StringContracts:
        _require_argument(expected, "expected", "compare end of string")
        return self.assert_that(
            lambda s: s is not None and s.endswith(expected),
            StringCodes.END_WITH,
            lambda: self._found(f"Expected string ending with '{expected}'"),
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def not_end_with(self, unexpected: str, because: str = "", *because_args) -> StringContracts:
        _require_argument(unexpected, "unexpected", "compare end of string")
        return self.assert_that(
            lambda s: s is None or not s.endswith(unexpected),
            StringCodes.NOT_END_WITH,
            f"Did not expect string to end with '{unexpected}'",
            self._context(because, because_args, unexpected=unexpected, actual=self.subject),
        )

    def contain(self, expected: str, because: str = "", *because_args) -> StringContracts:
        _require_argument(expected, "expected", "assert string containment")
        if expected == "":
            raise ValueError("Cannot assert string containment against an empty string")
        return self.assert_that(
            lambda s: s is not None and expected in s,
            StringCodes.CONTAIN,
            lambda: self._found(f"Expected string containing '{expected}'"),
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def not_contain(self, unexpected: str, because: str = "", *because_args) -> StringContracts:
        _require_argument(unexpected, "unexpected", "assert string containment")
        if unexpected == "":
            raise ValueError("Cannot assert string containment against an empty string")
        return self.assert_that(
            lambda s: s is None or unexpected not in s,
            StringCodes.NOT_CONTAIN,
            f"Did not expect string to contain '{unexpected}'",
            self._context(because, because_args, unexpected=unexpected, actual=self.subject),
        )

    # -------------------------------------------------------------------------
    # Regular expressions (re.search semantics)
    # -------------------------------------------------------------------------

    def match_regex(self, pattern: RegexLike, because: str = "", *because_args) -> StringContracts:
        regex = _compile(pattern)
        return self.assert_that(
            lambda s: s is not None and regex.search(s) is not None,
            StringCodes.MATCH_REGEX,
            lambda: self._found(f"Expected string matching regex '{regex.pattern}'"),
            self._context(because, because_args, pattern=regex.pattern, actual=self.subject),
        )

    def not_match_regex(self, pattern: RegexLike, because: str = "", *because_args) -> StringContracts:
        regex = _compile(pattern)
        return self.assert_that(
            lambda s: s is None or regex.search(s) is None,
            StringCodes.NOT_MATCH_REGEX,
            f"Did not expect string to match regex '{regex.pattern}'",
            self._context(because, because_args, pattern=regex.pattern, actual=self.subject),
        )

    # -------------------------------------------------------------------------
    # Casing
    # -------------------------------------------------------------------------

    def be_upper_cased(self, because: str = "", *because_args) -> StringContracts:
        return self.assert_that(
            lambda s: s is not None and _is_upper(s),
            StringCodes.BE_UPPER_CASED,
            lambda: f"Expected all characters to be upper cased but found '{describe(self.subject)}'",
            self._context(because, because_args, actual=self.subject),
        )

    def be_lower_cased(self, because: str = "", *because_args) -> StringContracts:
        return self.assert_that(
            lambda s: s is not None and _is_lower(s),
            StringCodes.BE_LOWER_CASED,
            lambda: f"Expected all characters to be lower cased but found '{describe(self.subject)}'",
            self._context(because, because_args, actual=self.subject),
        )

    def not_be_upper_cased(self, because: str = "", *because_args) -> StringContracts:
        return self.assert_that(
            lambda s: s is None or not _is_upper(s),
            StringCodes.NOT_BE_UPPER_CASED,
            "Did not expect all characters to be upper cased",
            self._context(because, because_args, actual=self.subject),
        )

    def not_be_lower_cased(self, because: str = "", *because_args) -> StringContracts:
        return self.assert_that(
            lambda s: s is None or not _is_lower(s),
            StringCodes.NOT_BE_LOWER_CASED,
            "Did not expect all characters to be lower cased",
            self._context(because, because_args, actual=self.subject),
        )

    def _found(self, expectation: str) -> str:
        if self.subject is None:
            return f"{expectation} but found null"
        return f"{expectation} but found '{self.subject}'"
