"""
Contracts Module

Value types shared by every layer of the library: hierarchical error
codes, the error value, and the result containers that validation-mode
contracts convert into.

DESIGN PRINCIPLES:
==================
1. All value types are immutable (frozen dataclasses)
2. Failures are data: an Error carries a stable code, a message and
   ordered key/value context
3. Codes are compared structurally, never by message text
"""

from .base import (
    ErrorCode,
    Error,
    Result,
    VoidResult,
    Unit,
    UNIT,
    NULL_TEXT,
)
from .codes import CONTRACT

__all__ = [
    "ErrorCode",
    "Error",
    "Result",
    "VoidResult",
    "Unit",
    "UNIT",
    "NULL_TEXT",
    "CONTRACT",
]
