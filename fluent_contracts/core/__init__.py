"""
Core Engine

RESPONSIBILITY: Dual-mode contract execution
- evaluator: predicate evaluation, sticky first-failure state, result conversion
- detector: test-framework exception resolution for throw mode
- scope: multi-contract failure collection

Contract families build on ``Contracts`` and never touch the detector
directly.
"""

from .detector import (
    ContractViolationError,
    DetectorConfigurationError,
    KNOWN_FRAMEWORKS,
    TestFrameworkDetector,
    get_detector,
    set_detector,
    raise_violation,
)
from .evaluator import Contracts, ContractState, describe, type_name
from .scope import ContractScope

__all__ = [
    "ContractViolationError",
    "DetectorConfigurationError",
    "KNOWN_FRAMEWORKS",
    "TestFrameworkDetector",
    "get_detector",
    "set_detector",
    "raise_violation",
    "Contracts",
    "ContractState",
    "describe",
    "type_name",
    "ContractScope",
]
