"""
Contract Evaluator Core
=======================

The base every contract family derives from. A contract wraps one subject
for the length of a fluent chain and turns predicates over it into either
a raised exception (``must``) or a recorded failure (``should``).

STATE MACHINE:
==============
CLEAN --(predicate fails)--> FAILED

The transition is irreversible. Once FAILED, later assertions on the same
instance are skipped and the first error stays the reported one.
Collecting several failures is the job of ContractScope, which runs
independent chains.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar, Union

import structlog

from ..config import get_settings
from ..contracts.base import Error, ErrorCode, Result, VoidResult, NULL_TEXT
from .detector import raise_violation

logger = structlog.get_logger(__name__)

S = TypeVar("S")
C = TypeVar("C", bound="Contracts")

Message = Union[str, Callable[[], str]]
Enrich = Callable[[Error], Error]


class ContractState(Enum):
    CLEAN = "clean"
    FAILED = "failed"


def describe(value: Any) -> str:
    """Text used for a value inside messages and context."""
    return NULL_TEXT if value is None else str(value)


def type_name(value: Any) -> str:
    if isinstance(value, type):
        return value.__name__
    return type(value).__name__


class Contracts(Generic[S]):
    """
    Evaluator core shared by every contract family.

    ``assert_that`` is public so third-party code can add contract methods
    on top of any family.
    """

    def __init__(self, subject: S, throw_on_failure: bool = False):
        self._subject = subject
        self._throw_on_failure = throw_on_failure
        self._state = ContractState.CLEAN
        self._failure: Optional[Error] = None

    @property
    def subject(self) -> S:
        return self._subject

    @property
    def throw_on_failure(self) -> bool:
        return self._throw_on_failure

    @property
    def state(self) -> ContractState:
        return self._state

    @property
    def has_failed(self) -> bool:
        return self._state is ContractState.FAILED

    @property
    def last_error(self) -> Optional[Error]:
        return self._failure

    @property
    def and_(self: C) -> C:
        """The same instance, for ``.and_.next_assertion()`` chains."""
        return self

    def assert_that(
        self: C,
        predicate: Callable[[S], bool],
        code: ErrorCode,
        message: Message,
        enrich: Optional[Enrich] = None,
    ) -> C:
        """
        Evaluate ``predicate`` against the subject.

        Skipped when an earlier assertion on this instance already failed.
        On failure the error is recorded, then raised in throw mode.
        ``message`` may be a callable so expensive text is built only on
        failure.
        """
        if self._state is ContractState.FAILED:
            return self
        if predicate(self._subject):
            return self

        text = message() if callable(message) else message
        error = Error(code=code, message=text)
        if enrich is not None:
            error = enrich(error)
        self._record(error)

        if self._throw_on_failure:
            raise_violation(str(error))
        return self

    def fail(self: C, code: ErrorCode, message: Message, enrich: Optional[Enrich] = None) -> C:
        """Record an unconditional failure (subject to the same short-circuit)."""
        return self.assert_that(lambda _: False, code, message, enrich)

    def _record(self, error: Error) -> None:
        self._state = ContractState.FAILED
        self._failure = error
        if get_settings().log_failures:
            logger.debug(
                "contract_failed",
                code=str(error.code),
                contract=type(self).__name__,
                throw=self._throw_on_failure,
            )

    # -------------------------------------------------------------------------
    # Result conversion (validation mode only)
    # -------------------------------------------------------------------------

    def to_result(self) -> Result[S, Error]:
        self._require_validation_mode("to_result")
        if self._failure is None:
            return Result.success(self._subject)
        return Result.failure(self._failure)

    def to_void_result(self) -> VoidResult[Error]:
        self._require_validation_mode("to_void_result")
        if self._failure is None:
            return VoidResult.success()
        return VoidResult.failure(self._failure)

    def _require_validation_mode(self, operation: str) -> None:
        if self._throw_on_failure:
            raise TypeError(f"{operation}() is only available on should() contracts")

    # -------------------------------------------------------------------------
    # Message helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def format_because(because: str = "", *because_args: Any) -> str:
        """Format the optional caller-supplied reason. Empty stays empty."""
        if not because:
            return ""
        if because_args:
            return because.format(*because_args)
        return because

    def _context(self, because: str, because_args: tuple, **entries: Any) -> Enrich:
        """Enrichment adding ``entries`` in order, then the formatted reason."""
        reason = self.format_because(because, *because_args)

        def enrich(error: Error) -> Error:
            for key, value in entries.items():
                error = error.with_context(key, value)
            return error.with_context("reason", reason)

        return enrich

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(subject={self._subject!r}, "
            f"state={self._state.value}, throw_on_failure={self._throw_on_failure})"
        )
