"""
Test-Framework Detector
=======================

Raises the failure exception native to whichever test framework the host
process has already imported, with no import-time dependency on any of
them.

RESOLUTION:
===========
1. Walk KNOWN_FRAMEWORKS in declared order
2. An entry matches when its module is already in ``sys.modules`` and the
   dotted exception path resolves inside it
3. The first match wins, regardless of import order
4. No match: ContractViolationError

The resolved factory is cached for the life of the process. Frameworks
imported after the first failure are not picked up.
"""

from __future__ import annotations
from typing import Callable, Mapping, NoReturn, Optional, Sequence, Tuple
import sys

import structlog

from ..config import get_settings

logger = structlog.get_logger(__name__)


class ContractViolationError(AssertionError):
    """Raised by ``must()`` contracts when no known test framework is loaded."""


class DetectorConfigurationError(RuntimeError):
    """A detector table entry names an exception that cannot take one message."""


ExceptionFactory = Callable[[str], BaseException]

# (module that identifies the framework, exception path inside that module)
KNOWN_FRAMEWORKS: Tuple[Tuple[str, str], ...] = (
    ("pytest", "fail.Exception"),
    ("twisted.trial.unittest", "FailTest"),
    ("robot.api.exceptions", "Failure"),
)


def _resolve_attribute(module: object, path: str) -> Optional[type]:
    target = module
    for part in path.split("."):
        target = getattr(target, part, None)
        if target is None:
            return None
    if isinstance(target, type) and issubclass(target, BaseException):
        return target
    return None


def _bind(exception_type: type) -> ExceptionFactory:
    def factory(message: str) -> BaseException:
        try:
            return exception_type(message)
        except TypeError as exc:
            raise DetectorConfigurationError(
                f"{exception_type.__module__}.{exception_type.__qualname__} "
                f"cannot be constructed from a single message"
            ) from exc
    factory.exception_type = exception_type
    return factory


def _fallback(message: str) -> BaseException:
    return ContractViolationError(message)


_fallback.exception_type = ContractViolationError


class TestFrameworkDetector:
    """
    Resolves an exception factory once and reuses it.

    ``modules`` defaults to ``sys.modules``; tests pass a plain dict to
    simulate which frameworks are loaded.
    """

    __test__ = False

    def __init__(
        self,
        known: Sequence[Tuple[str, str]] = KNOWN_FRAMEWORKS,
        modules: Optional[Mapping[str, object]] = None,
        enabled: Optional[bool] = None,
    ):
        self._known = tuple(known)
        self._modules = modules
        self._enabled = enabled
        self._factory: Optional[ExceptionFactory] = None

    @property
    def factory(self) -> ExceptionFactory:
        # Racing threads may both resolve; they compute the same factory.
        if self._factory is None:
            self._factory = self._detect()
        return self._factory

    @property
    def exception_type(self) -> type:
        return self.factory.exception_type

    def raise_violation(self, message: str) -> NoReturn:
        raise self.factory(message)

    def _detect(self) -> ExceptionFactory:
        enabled = self._enabled
        if enabled is None:
            enabled = get_settings().detect_test_frameworks
        if not enabled:
            logger.debug("test_framework_resolved", framework=None, reason="detection disabled")
            return _fallback

        modules = sys.modules if self._modules is None else self._modules
        for module_name, exception_path in self._known:
            module = modules.get(module_name)
            if module is None:
                continue
            exception_type = _resolve_attribute(module, exception_path)
            if exception_type is None:
                logger.debug(
                    "test_framework_exception_missing",
                    framework=module_name,
                    exception=exception_path,
                )
                continue
            logger.debug(
                "test_framework_resolved",
                framework=module_name,
                exception=exception_type.__qualname__,
            )
            return _bind(exception_type)

        logger.debug("test_framework_resolved", framework=None, reason="no framework loaded")
        return _fallback


_default_detector = TestFrameworkDetector()


def get_detector() -> TestFrameworkDetector:
    return _default_detector


def set_detector(detector: TestFrameworkDetector) -> TestFrameworkDetector:
    """Install a different process-wide detector; returns the previous one."""
    global _default_detector
    previous = _default_detector
    _default_detector = detector
    return previous


def raise_violation(message: str) -> NoReturn:
    """Raise the detected framework's failure exception carrying ``message``."""
    _default_detector.raise_violation(message)
