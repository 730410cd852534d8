"""
Multi-contract Scope Aggregator
===============================

Runs several independent validation-mode contracts and reports every
failure. This is the opposite policy from a single chain: a chain stops
at its first failure, a scope never stops.

    ContractScope.all(
        lambda: should(form.name).not_be_null_or_whitespace().to_void_result(),
        lambda: should(form.age).be_in_range(0, 150).to_void_result(),
    )
"""

from __future__ import annotations
from typing import Callable, List, Tuple, Union

import structlog

from ..contracts.base import Error, Result, Unit, UNIT, VoidResult
from .evaluator import Contracts

logger = structlog.get_logger(__name__)

ContractThunk = Callable[[], Union[VoidResult, Contracts]]


class ContractScope:
    """Namespace for scope-level aggregation."""

    @staticmethod
    def all(*contracts: ContractThunk) -> Result[Unit, Tuple[Error, ...]]:
        """
        Call every thunk once, in order, and collect the errors.

        Thunks return a VoidResult; returning a contract object is also
        accepted and converted with ``to_void_result()``.

        Returns:
            success(UNIT) when nothing failed (including no thunks at all),
            otherwise failure with the errors in call order.
        """
        errors: List[Error] = []

        for contract in contracts:
            outcome = contract()
            if isinstance(outcome, Contracts):
                outcome = outcome.to_void_result()
            if outcome.is_failure:
                errors.append(outcome.error)

        logger.debug("contract_scope_evaluated", total=len(contracts), failed=len(errors))

        if not errors:
            return Result.success(UNIT)
        return Result.failure(tuple(errors))
