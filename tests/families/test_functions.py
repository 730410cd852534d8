"""
Async Function Contract Tests

The coroutine is awaited exactly once: through asyncio.run outside a loop,
or through ``await contracts.completed()`` inside one.
"""

import asyncio

import pytest

from fluent_contracts import FunctionContracts, should
from fluent_contracts.contracts.codes import FunctionCodes


def code_of(contracts):
    error = contracts.last_error
    return None if error is None else error.code


class Repository:
    def __init__(self):
        self.calls = 0

    async def find(self):
        self.calls += 1
        await asyncio.sleep(0)
        return {"id": 7}

    async def missing(self):
        self.calls += 1
        return None

    async def broken(self):
        self.calls += 1
        raise ConnectionError("database unavailable")


# =============================================================================
# OUTSIDE AN EVENT LOOP
# =============================================================================

class TestBlockingEvaluation:

    def test_coroutine_functions_select_the_function_family(self):
        assert isinstance(should(Repository().find), FunctionContracts)

    def test_awaited_once(self):
        repo = Repository()
        contracts = should(repo.find).not_throw().return_not_null().return_value({"id": 7})
        assert code_of(contracts) is None
        assert repo.calls == 1

    def test_not_throw_reports_the_exception(self):
        error = should(Repository().broken).not_throw().last_error
        assert error.code == FunctionCodes.NOT_THROW
        assert error.message == (
            "Did not expect any exception to be thrown, but found <ConnectionError>: database unavailable"
        )

    def test_not_throw_of(self):
        assert code_of(should(Repository().broken).not_throw_of(ConnectionError)) == FunctionCodes.NOT_THROW
        assert code_of(should(Repository().broken).not_throw_of(KeyError)) is None

    def test_throw_returns_exception_contracts(self):
        exceptions = should(Repository().broken).throw(OSError).with_message("database *")
        assert code_of(exceptions) is None
        assert isinstance(exceptions.which, ConnectionError)

    def test_throw_uses_function_codes(self):
        assert code_of(should(Repository().find).throw(OSError)) == FunctionCodes.THROW
        assert code_of(should(Repository().broken).throw_exactly(OSError)) == FunctionCodes.THROW_EXACTLY

    def test_return_values(self):
        assert code_of(should(Repository().find).return_value({"id": 8})) == FunctionCodes.RETURN
        assert code_of(should(Repository().find).not_return_value({"id": 7})) == FunctionCodes.NOT_RETURN
        assert code_of(should(Repository().missing).return_null()) is None
        assert code_of(should(Repository().missing).return_not_null()) == FunctionCodes.RETURN_NOT_NULL

    def test_return_assertions_fail_when_the_call_raised(self):
        error = should(Repository().broken).return_null().last_error
        assert error.code == FunctionCodes.RETURN_NULL
        assert error.message == (
            "Expected function to return null, but found <ConnectionError>: database unavailable"
        )

    def test_satisfy(self):
        assert code_of(should(Repository().find).satisfy(lambda r: r["id"] == 7)) is None
        assert code_of(should(Repository().find).satisfy(lambda r: r["id"] == 1)) == FunctionCodes.SATISFY

    def test_null_function(self):
        error = FunctionContracts(None).return_not_null().last_error
        assert error.message == "Expected function to return a value, but the function was null"


# =============================================================================
# INSIDE AN EVENT LOOP
# =============================================================================

class TestInsideEventLoop:

    def test_completed_awaits_inside_the_loop(self):
        repo = Repository()

        async def scenario():
            contracts = should(repo.find)
            await contracts.completed()
            return contracts.return_value({"id": 7})

        contracts = asyncio.run(scenario())
        assert code_of(contracts) is None
        assert repo.calls == 1

    def test_asserting_before_completed_is_a_usage_error(self):
        async def scenario():
            should(Repository().find).not_throw()

        with pytest.raises(RuntimeError, match="completed"):
            asyncio.run(scenario())

    def test_completed_is_idempotent(self):
        repo = Repository()

        async def scenario():
            contracts = should(repo.find)
            await contracts.completed()
            await contracts.completed()
            return contracts

        asyncio.run(scenario()).not_throw()
        assert repo.calls == 1
