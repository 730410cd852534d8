"""
Library settings.

Settings are read once from the environment and cached for the process.
Tests swap them with ``override_settings``.

    FLUENT_CONTRACTS_DETECT_FRAMEWORKS  "0" disables test-framework detection
    FLUENT_CONTRACTS_LOG_FAILURES       "1" logs every recorded failure
    FLUENT_CONTRACTS_LOG_LEVEL          level used by configure_logging()
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping, Optional
import os


_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ContractSettings:
    """
    Configuration for contract evaluation.

    Attributes:
        detect_test_frameworks: Probe loaded test frameworks for their native
            failure exception. When off, ``must()`` always raises
            ContractViolationError.
        log_failures: Emit a debug event for every recorded contract failure.
        log_level: Level applied by ``configure_logging`` when none is given.
    """
    detect_test_frameworks: bool = True
    log_failures: bool = False
    log_level: str = "WARNING"

    def __post_init__(self):
        level = self.log_level.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        object.__setattr__(self, "log_level", level)


def _parse_flag(raw: Optional[str], name: str, default: bool) -> bool:
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got '{raw}'")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> ContractSettings:
    """Build settings from environment variables (``os.environ`` by default)."""
    env = os.environ if environ is None else environ
    return ContractSettings(
        detect_test_frameworks=_parse_flag(
            env.get("FLUENT_CONTRACTS_DETECT_FRAMEWORKS"),
            "FLUENT_CONTRACTS_DETECT_FRAMEWORKS",
            True,
        ),
        log_failures=_parse_flag(
            env.get("FLUENT_CONTRACTS_LOG_FAILURES"),
            "FLUENT_CONTRACTS_LOG_FAILURES",
            False,
        ),
        log_level=env.get("FLUENT_CONTRACTS_LOG_LEVEL", "WARNING"),
    )


_settings: Optional[ContractSettings] = None


def get_settings() -> ContractSettings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def override_settings(settings: Optional[ContractSettings]) -> None:
    """Replace the cached settings. ``None`` forces a reload on next access."""
    global _settings
    _settings = settings
