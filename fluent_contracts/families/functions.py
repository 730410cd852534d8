"""
Function contracts for asynchronous callables.

The subject is a zero-argument callable returning an awaitable (usually an
``async def`` function). It is awaited exactly once. Outside an event loop
the first assertion runs it to completion with ``asyncio.run``; inside a
running loop the caller awaits it explicitly first:

    contracts = should(fetch_user)
    await contracts.completed()
    contracts.not_throw().return_not_null()

No timeout and no cancellation are applied.
"""

from __future__ import annotations
import asyncio
import inspect
from typing import Any, Callable, Optional

from ..contracts.codes import FunctionCodes
from ..core.evaluator import describe
from .actions import _CapturingContracts

_NOT_RETURNED = object()


class FunctionContracts(_CapturingContracts):

    _codes = FunctionCodes

    def __init__(self, subject: Optional[Callable[[], Any]], throw_on_failure: bool = False):
        super().__init__(subject, throw_on_failure)
        self._returned: Any = _NOT_RETURNED

    @property
    def returned(self) -> Any:
        """The awaited return value, or ``None`` when the call raised."""
        self._ensure_invoked()
        return None if self._returned is _NOT_RETURNED else self._returned

    async def completed(self) -> FunctionContracts:
        """Await the subject inside an already running event loop."""
        if not self._invoked:
            self._invoked = True
            if self.subject is not None:
                try:
                    self._returned = await self._call()
                except Exception as exc:
                    self._captured = exc
        return self

    async def _call(self) -> Any:
        result = self.subject()
        if inspect.isawaitable(result):
            result = await result
        return result

    def _ensure_invoked(self) -> None:
        if not self._invoked and self.subject is not None:
            try:
                asyncio.get_running_loop()
            except RuntimeError:
                pass
            else:
                raise RuntimeError(
                    "FunctionContracts cannot block inside a running event loop; "
                    "await contracts.completed() before asserting"
                )
        super()._ensure_invoked()

    def _invoke(self) -> None:
        self._returned = asyncio.run(self._call())

    # -------------------------------------------------------------------------
    # Return value assertions
    # -------------------------------------------------------------------------

    def return_value(self, expected: Any, because: str = "", *because_args) -> FunctionContracts:
        self._ensure_invoked()
        return self.assert_that(
            lambda _: self._returned is not _NOT_RETURNED and self._returned == expected,
            FunctionCodes.RETURN,
            lambda: self._outcome(f"Expected function to return {describe(expected)}"),
            self._context(because, because_args, expected=expected, actual=self.returned),
        )

    def not_return_value(self, unexpected: Any, because: str = "", *because_args) -> FunctionContracts:
        self._ensure_invoked()
        return self.assert_that(
            lambda _: self._returned is not _NOT_RETURNED and self._returned != unexpected,
            FunctionCodes.NOT_RETURN,
            lambda: self._outcome(f"Did not expect function to return {describe(unexpected)}"),
            self._context(because, because_args, unexpected=unexpected),
        )

    def return_not_null(self, because: str = "", *because_args) -> FunctionContracts:
        self._ensure_invoked()
        return self.assert_that(
            lambda _: self._returned is not _NOT_RETURNED and self._returned is not None,
            FunctionCodes.RETURN_NOT_NULL,
            lambda: self._outcome("Expected function to return a value"),
            self._context(because, because_args),
        )

    def return_null(self, because: str = "", *because_args) -> FunctionContracts:
        self._ensure_invoked()
        return self.assert_that(
            lambda _: self._returned is None,
            FunctionCodes.RETURN_NULL,
            lambda: self._outcome("Expected function to return null"),
            self._context(because, because_args, actual=self.returned),
        )

    def satisfy(self, predicate: Callable[[Any], bool], because: str = "", *because_args) -> FunctionContracts:
        if predicate is None:
            raise ValueError("predicate must not be None")
        self._ensure_invoked()
        return self.assert_that(
            lambda _: self._returned is not _NOT_RETURNED and bool(predicate(self._returned)),
            FunctionCodes.SATISFY,
            lambda: self._outcome("Expected the returned value to satisfy the predicate"),
            self._context(because, because_args, actual=self.returned),
        )

    def _outcome(self, expectation: str) -> str:
        if self.subject is None:
            return f"{expectation}, but the function was null"
        if self._captured is not None:
            return f"{expectation}, but found <{type(self._captured).__name__}>: {self._captured}"
        return f"{expectation}, but found {describe(self._returned)}"
