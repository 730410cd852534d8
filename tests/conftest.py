"""
Shared fixtures.

Settings and the process-wide detector are global; every test starts from
default settings and gets the detector it found restored afterwards.
"""

import pytest

from fluent_contracts import (
    ContractSettings,
    TestFrameworkDetector,
    get_detector,
    override_settings,
    set_detector,
)
from fluent_contracts.observability import configure_logging


@pytest.fixture(scope="session", autouse=True)
def _quiet_logging():
    configure_logging("WARNING")


@pytest.fixture(autouse=True)
def _isolated_globals():
    override_settings(ContractSettings())
    previous = get_detector()
    yield
    set_detector(previous)
    override_settings(None)


@pytest.fixture
def fallback_detector():
    """Detector that sees no test framework, so must() raises ContractViolationError."""
    detector = TestFrameworkDetector(modules={})
    set_detector(detector)
    return detector
