"""
Collection Contracts

The subject iterable is materialised into a tuple once at construction so
generators can be asserted on repeatedly. ``None`` is kept as ``None``:
``be_empty`` and friends fail on it with their own code.
"""

from __future__ import annotations
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from ..contracts.codes import CollectionCodes, StringCollectionCodes
from ..core.evaluator import Contracts, describe
from .actions import matches_wildcard


def _listing(items: Iterable[Any]) -> str:
    return "[" + ", ".join(describe(item) for item in items) + "]"


def _precedes(a: Any, b: Any) -> bool:
    # None sorts before every value
    if a is None:
        return b is not None
    if b is None:
        return False
    return a < b


def _is_sorted(items: Sequence[Any], descending: bool) -> bool:
    pairs = zip(items, items[1:])
    try:
        if descending:
            return all(not _precedes(a, b) for a, b in pairs)
        return all(not _precedes(b, a) for a, b in pairs)
    except TypeError:
        # items without a mutual ordering are not in order
        return False


class CollectionContracts(Contracts[Optional[Tuple[Any, ...]]]):

    def __init__(self, subject: Optional[Iterable[Any]], throw_on_failure: bool = False):
        materialised = None if subject is None else tuple(subject)
        super().__init__(materialised, throw_on_failure)

    def be_empty(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and len(s) == 0,
            CollectionCodes.BE_EMPTY,
            lambda: self._found("Expected collection to be empty"),
            self._context(because, because_args, actual_count=self._count()),
        )

    def not_be_empty(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and len(s) > 0,
            CollectionCodes.NOT_BE_EMPTY,
            lambda: (
                "Expected collection not to be empty but found null"
                if self.subject is None
                else "Expected collection not to be empty but found an empty collection"
            ),
            self._context(because, because_args),
        )

    def have_count(self, expected: int, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and len(s) == expected,
            CollectionCodes.HAVE_COUNT,
            lambda: self._counted(f"Expected collection to contain {expected} item(s)"),
            self._context(because, because_args, expected_count=expected, actual_count=self._count()),
        )

    def have_count_greater_than(self, expected: int, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and len(s) > expected,
            CollectionCodes.HAVE_COUNT_GREATER_THAN,
            lambda: self._counted(f"Expected collection to contain more than {expected} item(s)"),
            self._context(because, because_args, expected_count=expected, actual_count=self._count()),
        )

    def have_count_less_than(self, expected: int, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and len(s) < expected,
            CollectionCodes.HAVE_COUNT_LESS_THAN,
            lambda: self._counted(f"Expected collection to contain fewer than {expected} item(s)"),
            self._context(because, because_args, expected_count=expected, actual_count=self._count()),
        )

    def contain(self, expected: Any, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and expected in s,
            CollectionCodes.CONTAIN,
            lambda: self._found(f"Expected collection to contain {describe(expected)}"),
            self._context(because, because_args, expected=expected),
        )

    def not_contain(self, unexpected: Any, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is None or unexpected not in s,
            CollectionCodes.NOT_CONTAIN,
            f"Did not expect collection to contain {describe(unexpected)}",
            self._context(because, because_args, unexpected=unexpected),
        )

    def contain_single(self, predicate: Optional[Callable[[Any], bool]] = None,
                       because: str = "", *because_args):
        """Exactly one item (matching ``predicate`` when one is given)."""
        def matches(s) -> int:
            if predicate is None:
                return len(s)
            return sum(1 for item in s if predicate(item))

        return self.assert_that(
            lambda s: s is not None and matches(s) == 1,
            CollectionCodes.CONTAIN_SINGLE,
            lambda: (
                "Expected collection to contain a single item but found null"
                if self.subject is None
                else f"Expected collection to contain a single item but found {matches(self.subject)}"
            ),
            self._context(because, because_args, actual_count=self._count()),
        )

    def only_contain(self, predicate: Callable[[Any], bool], because: str = "", *because_args):
        if predicate is None:
            raise ValueError("predicate must not be None")
        return self.assert_that(
            lambda s: s is not None and all(predicate(item) for item in s),
            CollectionCodes.ONLY_CONTAIN,
            lambda: self._found("Expected collection to only contain items matching the predicate"),
            self._context(because, because_args, actual_count=self._count()),
        )

    def all_satisfy(self, check: Callable[[Any], bool], because: str = "", *because_args):
        """Every item satisfies ``check``; failing items are listed in context."""
        if check is None:
            raise ValueError("check must not be None")
        failing: List[Any] = []

        def satisfied(s) -> bool:
            if s is None:
                return False
            failing.extend(item for item in s if not check(item))
            return not failing

        context = self._context(because, because_args)
        return self.assert_that(
            satisfied,
            CollectionCodes.ALL_SATISFY,
            lambda: (
                "Expected all items to satisfy the condition but found null"
                if self.subject is None
                else f"Expected all items to satisfy the condition but {len(failing)} did not: {_listing(failing)}"
            ),
            lambda error: context(error.with_context("failing_items", _listing(failing))),
        )

    def be_subset_of(self, superset: Iterable[Any], because: str = "", *because_args):
        expected = tuple(superset)
        missing: List[Any] = []

        def contained(s) -> bool:
            if s is None:
                return False
            missing.extend(item for item in s if item not in expected)
            return not missing

        return self.assert_that(
            contained,
            CollectionCodes.BE_SUBSET_OF,
            lambda: self._found(
                f"Expected collection to be a subset of {_listing(expected)}"
                + (f", items not in superset: {_listing(missing)}" if missing else "")
            ),
            self._context(because, because_args, superset=_listing(expected)),
        )

    def not_be_subset_of(self, other: Iterable[Any], because: str = "", *because_args):
        unexpected = tuple(other)
        return self.assert_that(
            lambda s: s is None or any(item not in unexpected for item in s),
            CollectionCodes.NOT_BE_SUBSET_OF,
            f"Did not expect collection to be a subset of {_listing(unexpected)}",
            self._context(because, because_args, superset=_listing(unexpected)),
        )

    def have_element_at(self, index: int, expected: Any, because: str = "", *because_args):
        def message() -> str:
            if self.subject is None:
                return f"Expected {describe(expected)} at index {index} but found null"
            if not -len(self.subject) <= index < len(self.subject):
                return f"Expected {describe(expected)} at index {index} but the collection has {len(self.subject)} item(s)"
            return f"Expected {describe(expected)} at index {index} but found {describe(self.subject[index])}"

        return self.assert_that(
            lambda s: s is not None and -len(s) <= index < len(s) and s[index] == expected,
            CollectionCodes.HAVE_ELEMENT_AT,
            message,
            self._context(because, because_args, index=index, expected=expected),
        )

    def be_in_ascending_order(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and _is_sorted(s, descending=False),
            CollectionCodes.BE_IN_ASCENDING_ORDER,
            lambda: self._found("Expected collection to be in ascending order"),
            self._context(because, because_args),
        )

    def be_in_descending_order(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and _is_sorted(s, descending=True),
            CollectionCodes.BE_IN_DESCENDING_ORDER,
            lambda: self._found("Expected collection to be in descending order"),
            self._context(because, because_args),
        )

    def _count(self) -> int:
        return -1 if self.subject is None else len(self.subject)

    def _found(self, expectation: str) -> str:
        if self.subject is None:
            return f"{expectation} but found null"
        return f"{expectation} but found {_listing(self.subject)}"

    def _counted(self, expectation: str) -> str:
        if self.subject is None:
            return f"{expectation} but found null"
        return f"{expectation} but found {len(self.subject)}"


class StringCollectionContracts(CollectionContracts):
    """
    Collection contracts for sequences of strings.

    ``*_match`` assertions take shell-style wildcards (``*`` and ``?``).
    Equivalence ignores case and surrounding whitespace.
    """

    def contain_match(self, wildcard: str, because: str = "", *because_args):
        _require_pattern(wildcard)
        return self.assert_that(
            lambda s: s is not None and any(_matches(item, wildcard) for item in s),
            StringCollectionCodes.CONTAIN_MATCH,
            lambda: self._found(f"Expected collection to contain a match of '{wildcard}'"),
            self._context(because, because_args, pattern=wildcard),
        )

    def not_contain_match(self, wildcard: str, because: str = "", *because_args):
        _require_pattern(wildcard)
        return self.assert_that(
            lambda s: s is None or not any(_matches(item, wildcard) for item in s),
            StringCollectionCodes.NOT_CONTAIN_MATCH,
            f"Did not expect collection to contain a match of '{wildcard}'",
            self._context(because, because_args, pattern=wildcard),
        )

    def all_match(self, wildcard: str, because: str = "", *because_args):
        _require_pattern(wildcard)
        return self.assert_that(
            lambda s: s is not None and all(_matches(item, wildcard) for item in s),
            StringCollectionCodes.ALL_MATCH,
            lambda: self._found(f"Expected every item to match '{wildcard}'"),
            self._context(because, because_args, pattern=wildcard),
        )

    def contain_equivalent_of(self, expected: str, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and any(_equivalent(item, expected) for item in s),
            StringCollectionCodes.CONTAIN_EQUIVALENT_OF,
            lambda: self._found(f"Expected collection to contain an equivalent of '{expected}'"),
            self._context(because, because_args, expected=expected),
        )

    def not_contain_equivalent_of(self, unexpected: str, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is None or not any(_equivalent(item, unexpected) for item in s),
            StringCollectionCodes.NOT_CONTAIN_EQUIVALENT_OF,
            f"Did not expect collection to contain an equivalent of '{unexpected}'",
            self._context(because, because_args, unexpected=unexpected),
        )

    def only_contain_null_or_empty(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and all(not item for item in s),
            StringCollectionCodes.ONLY_CONTAIN_NULL_OR_EMPTY,
            lambda: self._found("Expected collection to only contain null or empty strings"),
            self._context(because, because_args),
        )

    def not_contain_null_or_empty(self, because: str = "", *because_args):
        return self.assert_that(
            lambda s: s is not None and all(item for item in s),
            StringCollectionCodes.NOT_CONTAIN_NULL_OR_EMPTY,
            lambda: self._found("Did not expect collection to contain null or empty strings"),
            self._context(because, because_args),
        )

    def equal(self, expected: Iterable[Optional[str]], because: str = "", *because_args):
        """Same strings in the same order."""
        values = tuple(expected)
        return self.assert_that(
            lambda s: s is not None and s == values,
            StringCollectionCodes.EQUAL,
            lambda: self._found(f"Expected collection to equal {_listing(values)}"),
            self._context(because, because_args, expected=_listing(values)),
        )


def _require_pattern(wildcard: Optional[str]) -> None:
    if wildcard is None:
        raise ValueError("Cannot match strings against None")


def _matches(item: Optional[str], wildcard: str) -> bool:
    return item is not None and matches_wildcard(item, wildcard)


def _equivalent(item: Optional[str], other: Optional[str]) -> bool:
    if item is None or other is None:
        return item is other
    return item.strip().casefold() == other.strip().casefold()
