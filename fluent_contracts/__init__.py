"""
Fluent Contracts

A fluent assertion/contract library with two execution modes sharing one
set of contract families:

    must(order.total).be_positive()                    # raises on failure
    result = should(order.email).contain("@").to_result()   # records it

LAYER STRUCTURE:
================

1. CONTRACTS (contracts/)
   - Responsibility: Value types (ErrorCode, Error, Result, VoidResult)
     and the error-code taxonomy
   - MUST NOT: Evaluate predicates or raise contract failures

2. CORE ENGINE (core/)
   - Responsibility: Predicate evaluation, first-failure state, test
     framework detection, multi-contract collection
   - Outputs: Raised framework exceptions or Result values

3. CONTRACT FAMILIES (families/)
   - Responsibility: Typed assertions per subject kind
   - MUST NOT: Touch the detector directly (route through assert_that)

4. ENTRY POINTS (entry.py)
   - Responsibility: must() / should() dispatch on the subject type

5. CONFIGURATION & OBSERVABILITY (config.py, observability/)
   - Responsibility: Environment settings, structlog configuration

CONSTRAINTS ENFORCED:
=====================
- Immutability-first: errors, codes and results are frozen
- First failure wins: a failed chain ignores later assertions
- Explicit errors: every failure carries a stable hierarchical code
"""

from .config import ContractSettings, get_settings, load_settings, override_settings
from .contracts import CONTRACT, NULL_TEXT, UNIT, Error, ErrorCode, Result, Unit, VoidResult
from .core import (
    ContractScope,
    ContractState,
    Contracts,
    ContractViolationError,
    DetectorConfigurationError,
    TestFrameworkDetector,
    get_detector,
    set_detector,
)
from .entry import must, should
from .families import *  # noqa: F401,F403
from .families import __all__ as _families_all

__version__ = "0.1.0"

__all__ = [
    "ContractSettings",
    "get_settings",
    "load_settings",
    "override_settings",
    "CONTRACT",
    "NULL_TEXT",
    "UNIT",
    "Error",
    "ErrorCode",
    "Result",
    "Unit",
    "VoidResult",
    "ContractScope",
    "ContractState",
    "Contracts",
    "ContractViolationError",
    "DetectorConfigurationError",
    "TestFrameworkDetector",
    "get_detector",
    "set_detector",
    "must",
    "should",
] + list(_families_all)
