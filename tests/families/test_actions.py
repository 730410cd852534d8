"""
Action and Exception Contract Tests

AXIOMS UNDER TEST:
==================
1. The action runs at most once, however many assertions follow
2. throw/throw_exactly hand back exception contracts for further checks
3. A missing or wrong exception fails with the throw code
"""

import pytest

from fluent_contracts import (
    ActionContracts,
    ContractViolationError,
    ExceptionContracts,
    invoking,
    matches_wildcard,
    must,
    should,
)
from fluent_contracts.contracts.codes import ExceptionCodes


def code_of(contracts):
    error = contracts.last_error
    return None if error is None else error.code


class InsufficientFunds(ValueError):
    pass


class Account:
    def __init__(self, balance):
        self.balance = balance

    def withdraw(self, amount):
        if amount > self.balance:
            raise InsufficientFunds(f"Cannot withdraw {amount} from {self.balance}")
        self.balance -= amount

    def close(self):
        try:
            raise KeyError("ledger")
        except KeyError as exc:
            raise RuntimeError("close failed") from exc


# =============================================================================
# INVOCATION
# =============================================================================

class TestInvocation:

    def test_functions_select_the_action_family(self):
        assert isinstance(should(lambda: None), ActionContracts)

    def test_action_runs_once(self):
        calls = []
        contracts = should(lambda: calls.append(1))
        contracts.not_throw().not_throw_of(KeyError).not_throw()
        assert calls == [1]

    def test_invoking_binds_subject_and_arguments(self):
        account = Account(10)
        should(invoking(account, Account.withdraw, 4)).not_throw()
        assert account.balance == 6

    def test_captured_exception_is_exposed(self):
        contracts = should(invoking(Account(0), Account.withdraw, 1))
        assert isinstance(contracts.captured, InsufficientFunds)

    def test_null_action_throws_nothing(self):
        assert code_of(ActionContracts(None).not_throw()) is None
        assert code_of(ActionContracts(None).throw(ValueError)) == ExceptionCodes.THROW


# =============================================================================
# NOT THROW
# =============================================================================

class TestNotThrow:

    def test_not_throw_failure_describes_the_exception(self):
        error = should(invoking(Account(0), Account.withdraw, 5)).not_throw().last_error
        assert error.code == ExceptionCodes.NOT_THROW
        assert error.message == (
            "Did not expect any exception to be thrown, but found <InsufficientFunds>: Cannot withdraw 5 from 0"
        )
        assert error.get("thrown_exception") == "InsufficientFunds"

    def test_not_throw_of_matches_subclasses(self):
        contracts = should(invoking(Account(0), Account.withdraw, 5))
        assert code_of(contracts.not_throw_of(ValueError)) == ExceptionCodes.NOT_THROW
        assert code_of(should(invoking(Account(0), Account.withdraw, 5)).not_throw_of(KeyError)) is None


# =============================================================================
# THROW
# =============================================================================

class TestThrow:

    def test_throw_accepts_subclasses(self):
        exceptions = should(invoking(Account(0), Account.withdraw, 5)).throw(ValueError)
        assert isinstance(exceptions, ExceptionContracts)
        assert isinstance(exceptions.which, InsufficientFunds)
        assert code_of(exceptions) is None

    def test_throw_without_exception(self):
        error = should(lambda: None).throw(ValueError).last_error
        assert error.code == ExceptionCodes.THROW
        assert error.message == "Expected a <ValueError> to be thrown, but no exception was thrown"

    def test_throw_with_wrong_exception(self):
        error = should(Account(0).close).throw(KeyError).last_error
        assert error.message == "Expected a <KeyError> to be thrown, but found <RuntimeError>: close failed"

    def test_throw_exactly_rejects_subclasses(self):
        action = invoking(Account(0), Account.withdraw, 5)
        error = should(action).throw_exactly(ValueError).last_error
        assert error.code == ExceptionCodes.THROW_EXACTLY
        assert error.message.startswith("Expected exactly <ValueError> to be thrown, but found <InsufficientFunds>")
        assert code_of(should(action).throw_exactly(InsufficientFunds)) is None

    def test_failed_throw_skips_later_checks(self):
        exceptions = should(lambda: None).throw(ValueError).with_message("anything")
        assert exceptions.last_error.code == ExceptionCodes.THROW

    def test_must_raises_on_missing_exception(self, fallback_detector):
        with pytest.raises(ContractViolationError, match="no exception was thrown"):
            must(lambda: None).throw(ValueError)


# =============================================================================
# EXCEPTION DETAILS
# =============================================================================

class TestExceptionContracts:

    def test_with_message_wildcards(self):
        exceptions = should(invoking(Account(0), Account.withdraw, 5)).throw(InsufficientFunds)
        assert code_of(exceptions.with_message("Cannot withdraw * from ?")) is None

    def test_with_message_mismatch(self):
        exceptions = should(invoking(Account(0), Account.withdraw, 5)).throw(InsufficientFunds)
        error = exceptions.with_message("Insufficient*").last_error
        assert error.code == ExceptionCodes.WITH_MESSAGE
        assert error.message == (
            "Expected exception with message matching 'Insufficient*' but found 'Cannot withdraw 5 from 0'"
        )

    def test_with_inner_exception_follows_the_cause(self):
        exceptions = should(Account(0).close).throw(RuntimeError)
        assert code_of(exceptions.with_inner_exception(KeyError)) is None
        error = should(Account(0).close).throw(RuntimeError).with_inner_exception(TypeError).last_error
        assert error.message == "Expected exception with inner exception of type 'TypeError' but found 'KeyError'"

    def test_with_inner_exception_falls_back_to_context(self):
        def handler():
            try:
                {}["missing"]
            except KeyError:
                raise ValueError("lookup failed")

        assert code_of(should(handler).throw(ValueError).with_inner_exception(KeyError)) is None

    def test_no_inner_exception(self):
        def plain():
            raise ValueError("plain")

        error = should(plain).throw(ValueError).with_inner_exception(KeyError).last_error
        assert error.message.endswith("but there was no inner exception")

    def test_where(self):
        exceptions = should(invoking(Account(3), Account.withdraw, 5)).throw(InsufficientFunds)
        assert code_of(exceptions.where(lambda e: "5" in str(e))) is None
        failed = should(invoking(Account(3), Account.withdraw, 5)).throw(InsufficientFunds)
        assert code_of(failed.where(lambda e: "99" in str(e))) == ExceptionCodes.WHERE

    def test_exception_contracts_convert_to_results(self):
        result = should(lambda: None).throw(ValueError).to_void_result()
        assert result.is_failure
        assert result.error.code == ExceptionCodes.THROW


class TestWildcards:

    @pytest.mark.parametrize(
        "text, pattern, expected",
        [
            ("abc", "abc", True),
            ("abc", "a*", True),
            ("abc", "a?c", True),
            ("abc", "a?", False),
            ("a.c", "a.c", True),
            ("abc", "a.c", False),
            ("", "", True),
            ("abc", "", False),
            ("ABC", "abc", False),
        ],
    )
    def test_matches_wildcard(self, text, pattern, expected):
        assert matches_wildcard(text, pattern) is expected
