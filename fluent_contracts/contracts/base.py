"""
Base Contracts and Shared Types

These are the foundational value types used by every contract family.
All types here are IMMUTABLE and represent pure data.

BOUNDARY ENFORCEMENT:
=====================
- This module is READ-ONLY from all layers
- The evaluator core and contract families import these types, never the
  other way around
- All types are frozen dataclasses for immutability guarantee
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar


T = TypeVar("T")
E = TypeVar("E")

NULL_TEXT = "(null)"


# =============================================================================
# ERROR CODES (Hierarchical, stable across versions)
# =============================================================================

@dataclass(frozen=True)
class ErrorCode:
    """
    Hierarchical error code.

    Codes are paths: a root segment composed with child segments using the
    ``/`` operator, e.g. ``ErrorCode("Contract") / "Boolean" / "BeTrue"``.
    Equality is structural on the path, so codes are stable identifiers that
    are independent of message text.
    """
    segments: Tuple[str, ...]

    def __init__(self, *segments: str):
        if not segments:
            raise ValueError("ErrorCode requires at least one segment")
        for segment in segments:
            _validate_segment(segment)
        object.__setattr__(self, "segments", tuple(segments))

    def __truediv__(self, child: str) -> ErrorCode:
        return ErrorCode(*self.segments, child)

    def __str__(self) -> str:
        return "/".join(self.segments)

    def __repr__(self) -> str:
        return f"ErrorCode('{self}')"

    @property
    def name(self) -> str:
        """Last segment of the path."""
        return self.segments[-1]

    @property
    def parent(self) -> Optional[ErrorCode]:
        if len(self.segments) == 1:
            return None
        return ErrorCode(*self.segments[:-1])

    def is_under(self, ancestor: ErrorCode) -> bool:
        """True when ``ancestor`` is this code or one of its ancestors."""
        depth = len(ancestor.segments)
        return self.segments[:depth] == ancestor.segments

    @staticmethod
    def parse(path: str) -> ErrorCode:
        """Rebuild a code from its ``A/B/C`` string form."""
        return ErrorCode(*path.split("/"))


def _validate_segment(segment: str) -> None:
    if not isinstance(segment, str) or not segment:
        raise ValueError("ErrorCode segments must be non-empty strings")
    if "/" in segment:
        raise ValueError(f"ErrorCode segment '{segment}' must not contain '/'")


# =============================================================================
# ERROR VALUE (Errors are data, not exceptions)
# =============================================================================

@dataclass(frozen=True)
class Error:
    """
    Immutable error representation with full context.
    Errors are data, not exceptions - they can be stored and queried.
    """
    code: ErrorCode
    message: str
    context: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def with_context(self, key: str, value: Any) -> Error:
        """Return new Error with additional context (immutable).

        Setting a key that already exists replaces its value in place, so
        insertion order is kept.
        """
        text = NULL_TEXT if value is None else str(value)
        entries = list(self.context)
        for index, (existing, _) in enumerate(entries):
            if existing == key:
                entries[index] = (key, text)
                break
        else:
            entries.append((key, text))
        return Error(code=self.code, message=self.message, context=tuple(entries))

    @property
    def metadata(self) -> Dict[str, str]:
        return dict(self.context)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        for existing, value in self.context:
            if existing == key:
                return value
        return default

    def __str__(self) -> str:
        reason = self.get("reason")
        if reason:
            return f"{self.message} because {reason}"
        return self.message


# =============================================================================
# RESULT TYPES (Either a value OR an error, never both)
# =============================================================================

class Unit:
    """The single value carried by successful results that have no payload."""

    _instance: Optional[Unit] = None

    def __new__(cls) -> Unit:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNIT"


UNIT = Unit()


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """
    Generic result type for operations that can fail.
    Either contains a value OR an error, never both.
    """
    value: Optional[T] = None
    error: Optional[E] = None
    _failed: bool = False

    @property
    def is_success(self) -> bool:
        return not self._failed

    @property
    def is_failure(self) -> bool:
        return self._failed

    def unwrap(self) -> T:
        if self._failed:
            raise ValueError(f"Cannot unwrap a failed result: {self.error}")
        return self.value

    def unwrap_error(self) -> E:
        if not self._failed:
            raise ValueError("Cannot unwrap the error of a successful result")
        return self.error

    @staticmethod
    def success(value: T) -> Result[T, Any]:
        return Result(value=value, error=None, _failed=False)

    @staticmethod
    def failure(error: E) -> Result[Any, E]:
        return Result(value=None, error=error, _failed=True)


@dataclass(frozen=True)
class VoidResult(Generic[E]):
    """Result that carries nothing on success."""
    error: Optional[E] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def unwrap_error(self) -> E:
        if self.error is None:
            raise ValueError("Cannot unwrap the error of a successful result")
        return self.error

    @staticmethod
    def success() -> VoidResult[Any]:
        return VoidResult(error=None)

    @staticmethod
    def failure(error: E) -> VoidResult[E]:
        if error is None:
            raise ValueError("VoidResult.failure requires an error")
        return VoidResult(error=error)
