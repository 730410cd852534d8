"""Dictionary contracts for any ``collections.abc.Mapping`` subject."""

from __future__ import annotations
from typing import Any, Iterable, Mapping, Optional, Sized

from ..contracts.codes import DictionaryCodes
from ..core.evaluator import Contracts, describe

_MISSING = object()


class DictionaryContracts(Contracts[Optional[Mapping[Any, Any]]]):

    def be_null(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is None,
            DictionaryCodes.BE_NULL,
            lambda: f"Expected dictionary to be null but found {len(self.subject)} item(s)",
            self._context(because, because_args, actual_count=self._count()),
        )

    def not_be_null(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None,
            DictionaryCodes.NOT_BE_NULL,
            "Expected dictionary not to be null",
            self._context(because, because_args),
        )

    def be_empty(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and len(s) == 0,
            DictionaryCodes.BE_EMPTY,
            lambda: self._counted("Expected dictionary to be empty"),
            self._context(because, because_args, actual_count=self._count()),
        )

    def not_be_empty(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and len(s) > 0,
            DictionaryCodes.NOT_BE_EMPTY,
            lambda: (
                "Expected dictionary not to be empty but found null"
                if self.subject is None
                else "Expected dictionary not to be empty"
            ),
            self._context(because, because_args),
        )

    def have_count(self, expected: int, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and len(s) == expected,
            DictionaryCodes.HAVE_COUNT,
            lambda: self._counted(f"Expected dictionary to contain {expected} item(s)"),
            self._context(because, because_args, expected_count=expected, actual_count=self._count()),
        )

    def have_same_count(self, other: Sized, because: str = "", *because_args):
        if other is None:
            raise ValueError("Cannot compare dictionary count against None")
        expected = len(other)
        return self.assert_that(
            lambda s: s is not None and len(s) == expected,
            DictionaryCodes.HAVE_SAME_COUNT,
            lambda: self._counted(f"Expected dictionary to have the same count as the other collection ({expected})"),
            self._context(because, because_args, expected_count=expected, actual_count=self._count()),
        )

    def contain_key(self, key: Any, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and key in s,
            DictionaryCodes.CONTAIN_KEY,
            lambda: self._keys(f"Expected dictionary to contain key {describe(key)}"),
            self._context(because, because_args, expected_key=key),
        )

    def not_contain_key(self, key: Any, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is None or key not in s,
            DictionaryCodes.NOT_CONTAIN_KEY,
            f"Did not expect dictionary to contain key {describe(key)}",
            self._context(because, because_args, unexpected_key=key),
        )

    def contain_keys(self, keys: Iterable[Any], because: str = "", *because_args):
        expected = tuple(keys)
        missing = list(expected) if self.subject is None else [k for k in expected if k not in self.subject]
        return self.assert_that(
            lambda s: s is not None and not missing,
            DictionaryCodes.CONTAIN_KEYS,
            lambda: (
                "Expected dictionary to contain keys but found null"
                if self.subject is None
                else "Expected dictionary to contain keys " + ", ".join(describe(k) for k in missing)
            ),
            self._context(because, because_args, missing_keys=", ".join(describe(k) for k in missing)),
        )

    def contain_value(self, value: Any, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and value in s.values(),
            DictionaryCodes.CONTAIN_VALUE,
            lambda: self._counted(f"Expected dictionary to contain value {describe(value)}"),
            self._context(because, because_args, expected_value=value),
        )

    def not_contain_value(self, value: Any, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is None or value not in s.values(),
            DictionaryCodes.NOT_CONTAIN_VALUE,
            f"Did not expect dictionary to contain value {describe(value)}",
            self._context(because, because_args, unexpected_value=value),
        )

    def contain_key_value_pair(self, key: Any, value: Any, because: str = "", *because_args):
        def message() -> str:
            if self.subject is None:
                return f"Expected dictionary to contain {describe(key)}: {describe(value)} but found null"
            actual = self.subject.get(key, _MISSING)
            if actual is _MISSING:
                return f"Expected dictionary to contain {describe(key)}: {describe(value)} but the key was not found"
            return f"Expected dictionary to contain {describe(key)}: {describe(value)} but found {describe(actual)}"

        return self.assert_that(
            lambda s: s is not None and key in s and s[key] == value,
            DictionaryCodes.CONTAIN_KEY_VALUE_PAIR,
            message,
            self._context(because, because_args, key=key, expected_value=value),
        )

    def not_contain_key_value_pair(self, key: Any, value: Any, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is None or key not in s or s[key] != value,
            DictionaryCodes.NOT_CONTAIN_KEY_VALUE_PAIR,
            f"Did not expect dictionary to contain {describe(key)}: {describe(value)}",
            self._context(because, because_args, key=key, unexpected_value=value),
        )

    def _count(self) -> int:
        return -1 if self.subject is None else len(self.subject)

    def _counted(self, expectation: str) -> str:
        if self.subject is None:
            return f"{expectation} but found null"
        return f"{expectation} but found {len(self.subject)} item(s)"

    def _keys(self, expectation: str) -> str:
        if self.subject is None:
            return f"{expectation} but found null"
        return f"{expectation} but found keys [{', '.join(describe(k) for k in self.subject)}]"
