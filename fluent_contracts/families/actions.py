"""
Action and Exception Contracts
==============================

``ActionContracts`` wraps a zero-argument callable. The callable runs at
most once, on the first assertion, and any exception it raises is captured
rather than propagated.

``throw`` / ``throw_exactly`` hand back an ``ExceptionContracts`` over the
captured exception so the chain can continue with message, cause and
predicate checks:

    must(invoking(parser.parse, "")).throw(ValueError).with_message("*empty*")

When the expected exception was not raised, the returned contract is
already failed (and in ``must`` mode the failure is raised immediately).
"""

from __future__ import annotations
import re
from typing import Any, Callable, Generic, Optional, Type, TypeVar

from ..contracts.codes import ExceptionCodes
from ..contracts.base import ErrorCode
from ..core.evaluator import Contracts

X = TypeVar("X", bound=BaseException)

NONE_TEXT = "(none)"


def matches_wildcard(text: Optional[str], pattern: Optional[str]) -> bool:
    """Case-sensitive match where ``*`` is any run and ``?`` any one character."""
    if not pattern:
        return not text
    if text is None:
        return False
    regex = "".join(
        ".*" if ch == "*" else "." if ch == "?" else re.escape(ch)
        for ch in pattern
    )
    return re.fullmatch(regex, text, re.DOTALL) is not None


def exception_message(exc: Optional[BaseException]) -> str:
    return NONE_TEXT if exc is None else str(exc)


def exception_type_name(exc: Optional[BaseException]) -> str:
    return NONE_TEXT if exc is None else type(exc).__name__


def inner_exception(exc: Optional[BaseException]) -> Optional[BaseException]:
    """The explicit ``raise ... from`` cause, else the implicit context."""
    if exc is None:
        return None
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


class ExceptionContracts(Contracts[Optional[X]], Generic[X]):
    """Contracts over an exception captured from an action or function."""

    @property
    def which(self) -> Optional[X]:
        return self.subject

    def with_message(self, expected: str, because: str = "", *because_args) -> ExceptionContracts[X]:
        def message() -> str:
            if self.subject is None:
                return f"Expected exception with message matching '{expected}' but no exception was thrown"
            return f"Expected exception with message matching '{expected}' but found '{self.subject}'"

        return self.assert_that(
            lambda s: s is not None and matches_wildcard(str(s), expected),
            ExceptionCodes.WITH_MESSAGE,
            message,
            self._context(
                because,
                because_args,
                expected_pattern=expected,
                actual_message=None if self.subject is None else str(self.subject),
            ),
        )

    def with_inner_exception(
        self, inner_type: Type[BaseException], because: str = "", *because_args
    ) -> ExceptionContracts[X]:
        if inner_type is None:
            raise ValueError("inner_type must not be None")

        def message() -> str:
            expectation = f"Expected exception with inner exception of type '{inner_type.__name__}'"
            if self.subject is None:
                return f"{expectation} but no exception was thrown"
            inner = inner_exception(self.subject)
            if inner is None:
                return f"{expectation} but there was no inner exception"
            return f"{expectation} but found '{type(inner).__name__}'"

        return self.assert_that(
            lambda s: isinstance(inner_exception(s), inner_type),
            ExceptionCodes.WITH_INNER_EXCEPTION,
            message,
            self._context(
                because,
                because_args,
                expected_inner_type=inner_type.__name__,
                actual_inner_type=exception_type_name(inner_exception(self.subject)),
            ),
        )

    def where(self, predicate: Callable[[X], bool], because: str = "", *because_args) -> ExceptionContracts[X]:
        if predicate is None:
            raise ValueError("predicate must not be None")
        return self.assert_that(
            lambda s: s is not None and bool(predicate(s)),
            ExceptionCodes.WHERE,
            "Expected exception to match the predicate but the condition was not met",
            self._context(because, because_args),
        )


class _CapturingContracts(Contracts[Any]):
    """
    Shared capture logic for action and function contracts.

    Subclasses implement ``_invoke`` and pick the code family through the
    ``_codes`` attribute.
    """

    _codes: Any = ExceptionCodes

    def __init__(self, subject: Any, throw_on_failure: bool = False):
        super().__init__(subject, throw_on_failure)
        self._invoked = False
        self._captured: Optional[BaseException] = None

    @property
    def captured(self) -> Optional[BaseException]:
        """The exception raised by the subject, after invocation."""
        self._ensure_invoked()
        return self._captured

    def _invoke(self) -> None:
        raise NotImplementedError

    def _ensure_invoked(self) -> None:
        if self._invoked:
            return
        self._invoked = True
        if self.subject is None:
            return
        try:
            self._invoke()
        except Exception as exc:
            self._captured = exc

    def not_throw(self, because: str = "", *because_args):
        self._ensure_invoked()
        captured = self._captured
        return self.assert_that(
            lambda _: captured is None,
            self._codes.NOT_THROW,
            lambda: (
                f"Did not expect any exception to be thrown, but found <{type(captured).__name__}>: {captured}"
                if captured is not None
                else "Did not expect any exception to be thrown"
            ),
            self._context(
                because,
                because_args,
                thrown_exception=exception_type_name(captured),
                exception_message=exception_message(captured),
            ),
        )

    def not_throw_of(self, exc_type: Type[BaseException], because: str = "", *because_args):
        self._ensure_invoked()
        captured = self._captured
        return self.assert_that(
            lambda _: not isinstance(captured, exc_type),
            self._codes.NOT_THROW,
            lambda: f"Did not expect exception of type <{exc_type.__name__}> to be thrown, but found: {captured}",
            self._context(
                because,
                because_args,
                unexpected_exception_type=exc_type.__name__,
                thrown_exception=exception_type_name(captured),
                exception_message=exception_message(captured),
            ),
        )

    def throw(self, exc_type: Type[X], because: str = "", *because_args) -> ExceptionContracts[X]:
        """Expect ``exc_type`` or any subclass of it."""
        self._ensure_invoked()
        return self._expect(exc_type, isinstance(self._captured, exc_type), self._codes.THROW, "a", because, because_args)

    def throw_exactly(self, exc_type: Type[X], because: str = "", *because_args) -> ExceptionContracts[X]:
        """Expect exactly ``exc_type``; subclasses fail."""
        self._ensure_invoked()
        exact = self._captured is not None and type(self._captured) is exc_type
        return self._expect(exc_type, exact, self._codes.THROW_EXACTLY, "exactly", because, because_args)

    def _expect(
        self,
        exc_type: Type[X],
        matched: bool,
        code: ErrorCode,
        article: str,
        because: str,
        because_args: tuple,
    ) -> ExceptionContracts[X]:
        if matched:
            return ExceptionContracts(self._captured, self.throw_on_failure)

        captured = self._captured
        expectation = f"Expected {article} <{exc_type.__name__}> to be thrown"
        if captured is None:
            text = f"{expectation}, but no exception was thrown"
        else:
            text = f"{expectation}, but found <{type(captured).__name__}>: {captured}"

        contracts: ExceptionContracts[X] = ExceptionContracts(None, self.throw_on_failure)
        return contracts.fail(
            code,
            text,
            contracts._context(
                because,
                because_args,
                expected_exception_type=exc_type.__name__,
                thrown_exception=exception_type_name(captured),
            ),
        )


class ActionContracts(_CapturingContracts):
    """Contracts over a synchronous zero-argument callable."""

    def _invoke(self) -> None:
        self.subject()


def invoking(subject: Any, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Callable[[], Any]:
    """
    Build the zero-argument action ``lambda: func(subject, *args, **kwargs)``.

    Reads as ``must(invoking(account, Account.withdraw, 50)).throw(...)``.
    """
    if func is None:
        raise ValueError("func must not be None")
    return lambda: func(subject, *args, **kwargs)
