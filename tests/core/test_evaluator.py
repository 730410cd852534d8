"""
Evaluator Core Tests

AXIOMS UNDER TEST:
==================
1. The first failure wins: once failed, later assertions are skipped
2. Validation mode never raises for a violated contract
3. Test mode records the failure, then raises it with the error's text
"""

import pytest
from hypothesis import given, strategies as st

from fluent_contracts import (
    ContractState,
    Contracts,
    ContractViolationError,
    ContractSettings,
    ErrorCode,
    override_settings,
    must,
    should,
)
from fluent_contracts.contracts.codes import BooleanCodes, NumericCodes


CODE = ErrorCode("Test", "Failure")


def chain_codes(count):
    return [ErrorCode("Test", f"Step{index}") for index in range(count)]


# =============================================================================
# STICKY FIRST FAILURE
# =============================================================================

class TestFirstFailureWins:
    """A chain reports the first failure and evaluates nothing after it."""

    def test_clean_contract_has_no_error(self):
        contracts = should(5).be_positive()
        assert contracts.state is ContractState.CLEAN
        assert not contracts.has_failed
        assert contracts.last_error is None

    def test_first_failure_is_kept(self):
        contracts = should(-5).be_positive().be_zero().be_greater_than(100)
        assert contracts.has_failed
        assert contracts.last_error.code == NumericCodes.BE_POSITIVE

    def test_predicates_after_failure_are_not_called(self):
        calls = []
        contracts = Contracts(1)
        contracts.assert_that(lambda s: False, CODE, "first")
        contracts.assert_that(lambda s: calls.append(s) or True, CODE, "second")
        assert calls == []
        assert contracts.last_error.message == "first"

    def test_message_callable_is_only_built_on_failure(self):
        built = []

        def message():
            built.append(True)
            return "built"

        Contracts(1).assert_that(lambda s: True, CODE, message)
        assert built == []
        contracts = Contracts(1).assert_that(lambda s: False, CODE, message)
        assert built == [True]
        assert contracts.last_error.message == "built"

    def test_enrich_is_applied_to_the_recorded_error(self):
        contracts = Contracts("x").assert_that(
            lambda s: False, CODE, "m", lambda e: e.with_context("k", "v")
        )
        assert contracts.last_error.get("k") == "v"

    def test_fail_records_unconditionally(self):
        contracts = Contracts(None).fail(CODE, "always")
        assert contracts.last_error.code == CODE

    def test_and_returns_the_same_instance(self):
        contracts = should(True)
        assert contracts.and_ is contracts
        assert should(True).be_true().and_.not_be(False).to_result().is_success

    @given(st.lists(st.booleans(), min_size=1, max_size=20))
    def test_reported_code_is_the_first_false_predicate(self, outcomes):
        codes = chain_codes(len(outcomes))
        evaluated = []
        contracts = Contracts(0)
        for index, (outcome, code) in enumerate(zip(outcomes, codes)):
            contracts.assert_that(
                lambda s, i=index, o=outcome: evaluated.append(i) or o, code, f"step {index}"
            )

        if all(outcomes):
            assert contracts.last_error is None
            assert evaluated == list(range(len(outcomes)))
        else:
            first = outcomes.index(False)
            assert contracts.last_error.code == codes[first]
            assert evaluated == list(range(first + 1))


# =============================================================================
# RESULT CONVERSION
# =============================================================================

class TestResultConversion:
    """should() contracts convert to Result / VoidResult."""

    def test_success_result_carries_the_subject(self):
        result = should(10).be_in_range(1, 20).to_result()
        assert result.is_success
        assert result.unwrap() == 10

    def test_failure_result_carries_the_first_error(self):
        result = should(False).be_true().to_result()
        assert result.is_failure
        assert result.error.code == BooleanCodes.BE_TRUE

    def test_void_result_round_trips_the_code(self):
        result = should(False).be_true("the flag is required").to_void_result()
        assert result.is_failure
        assert result.error.code == BooleanCodes.BE_TRUE
        assert result.error.get("reason") == "the flag is required"

    def test_conversion_is_rejected_in_throw_mode(self):
        with pytest.raises(TypeError):
            must(True).be_true().to_result()
        with pytest.raises(TypeError):
            must(True).be_true().to_void_result()


# =============================================================================
# THROW MODE
# =============================================================================

class TestThrowMode:
    """must() raises the active framework's failure exception."""

    def test_pytest_failure_is_raised_under_pytest(self):
        with pytest.raises(pytest.fail.Exception) as info:
            must(False).be_true()
        assert "Expected true but found False" in str(info.value)

    def test_passing_chain_does_not_raise(self):
        must(3).be_positive().be_less_than(4)

    def test_fallback_exception_text(self, fallback_detector):
        with pytest.raises(ContractViolationError) as info:
            must(False).be_true("the flag is required")
        assert str(info.value) == "Expected true but found False because the flag is required"

    def test_fallback_is_an_assertion_error(self, fallback_detector):
        with pytest.raises(AssertionError):
            must("abc").be("abd")

    def test_failure_is_recorded_before_raising(self, fallback_detector):
        contracts = must(-1)
        with pytest.raises(ContractViolationError):
            contracts.be_positive()
        assert contracts.has_failed
        assert contracts.last_error.code == NumericCodes.BE_POSITIVE


# =============================================================================
# REASONS AND LOGGING
# =============================================================================

class TestBecause:
    """The reason is optional, formatted with its args, always recorded."""

    def test_empty_reason_stays_empty(self):
        assert Contracts.format_because() == ""
        assert Contracts.format_because("", 1, 2) == ""

    def test_reason_is_formatted_with_args(self):
        assert Contracts.format_because("{} of {}", 3, 4) == "3 of 4"

    def test_reason_without_args_is_kept_verbatim(self):
        assert Contracts.format_because("literal {braces}") == "literal {braces}"

    def test_reason_entry_is_always_present(self):
        error = should(False).be_true().to_void_result().error
        assert error.metadata["reason"] == ""
        assert list(error.metadata) == ["actual", "reason"]

    def test_reason_args_reach_the_error(self):
        error = should(0).be_positive("order {} needs a total", 7).last_error
        assert error.get("reason") == "order 7 needs a total"


class TestFailureLogging:
    """Recorded failures are logged only when enabled."""

    def test_failures_still_recorded_with_logging_enabled(self):
        override_settings(ContractSettings(log_failures=True))
        contracts = should(0).be_positive()
        assert contracts.last_error.code == NumericCodes.BE_POSITIVE

    def test_repr_shows_state(self):
        assert "state=failed" in repr(should(0).be_positive())
