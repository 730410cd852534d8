"""
Test-Framework Detector Tests

The detector is probed with synthetic module maps so ordering, fallback
and caching can be checked without importing any real framework.
"""

import types

import pytest

from fluent_contracts import (
    ContractSettings,
    ContractViolationError,
    DetectorConfigurationError,
    TestFrameworkDetector,
    get_detector,
    override_settings,
    set_detector,
)
from fluent_contracts.core.detector import KNOWN_FRAMEWORKS, raise_violation


class AlphaFailure(Exception):
    pass


class BetaFailure(Exception):
    pass


class NeedsTwoArguments(Exception):
    def __init__(self, message, extra):
        super().__init__(message, extra)


def fake_module(name, **attributes):
    module = types.ModuleType(name)
    for key, value in attributes.items():
        setattr(module, key, value)
    return module


TABLE = (("alpha", "AlphaFailure"), ("beta", "errors.BetaFailure"))


# =============================================================================
# RESOLUTION ORDER
# =============================================================================

class TestResolutionOrder:
    """The first table entry whose module is loaded wins."""

    def test_no_framework_falls_back(self):
        detector = TestFrameworkDetector(TABLE, modules={})
        assert detector.exception_type is ContractViolationError

    def test_single_loaded_framework_is_used(self):
        modules = {"beta": fake_module("beta", errors=fake_module("errors", BetaFailure=BetaFailure))}
        detector = TestFrameworkDetector(TABLE, modules=modules)
        assert detector.exception_type is BetaFailure

    def test_table_order_beats_load_order(self):
        modules = {
            "beta": fake_module("beta", errors=fake_module("errors", BetaFailure=BetaFailure)),
            "alpha": fake_module("alpha", AlphaFailure=AlphaFailure),
        }
        detector = TestFrameworkDetector(TABLE, modules=modules)
        assert detector.exception_type is AlphaFailure

    def test_missing_exception_moves_to_next_entry(self):
        modules = {
            "alpha": fake_module("alpha"),
            "beta": fake_module("beta", errors=fake_module("errors", BetaFailure=BetaFailure)),
        }
        detector = TestFrameworkDetector(TABLE, modules=modules)
        assert detector.exception_type is BetaFailure

    def test_non_exception_attribute_is_ignored(self):
        modules = {"alpha": fake_module("alpha", AlphaFailure="not a type")}
        detector = TestFrameworkDetector(TABLE, modules=modules)
        assert detector.exception_type is ContractViolationError

    def test_default_table_starts_with_pytest(self):
        assert KNOWN_FRAMEWORKS[0] == ("pytest", "fail.Exception")

    def test_real_modules_resolve_pytest(self):
        detector = TestFrameworkDetector()
        assert detector.exception_type is pytest.fail.Exception


# =============================================================================
# CACHING
# =============================================================================

class TestCaching:
    """Resolved once per detector, never re-detected."""

    def test_factory_is_cached(self):
        modules = {}
        detector = TestFrameworkDetector(TABLE, modules=modules)
        first = detector.factory

        modules["alpha"] = fake_module("alpha", AlphaFailure=AlphaFailure)
        assert detector.factory is first
        assert detector.exception_type is ContractViolationError

    def test_set_detector_returns_previous(self):
        replacement = TestFrameworkDetector(modules={})
        original = get_detector()
        assert set_detector(replacement) is original
        assert get_detector() is replacement


# =============================================================================
# RAISING
# =============================================================================

class TestRaising:
    """The resolved type is built from one message string."""

    def test_raise_violation_uses_resolved_type(self):
        modules = {"alpha": fake_module("alpha", AlphaFailure=AlphaFailure)}
        detector = TestFrameworkDetector(TABLE, modules=modules)
        with pytest.raises(AlphaFailure, match="Expected true"):
            detector.raise_violation("Expected true but found False")

    def test_module_level_raise_goes_through_installed_detector(self, fallback_detector):
        with pytest.raises(ContractViolationError, match="^boom$"):
            raise_violation("boom")

    def test_unconstructible_type_is_a_configuration_error(self):
        modules = {"alpha": fake_module("alpha", AlphaFailure=NeedsTwoArguments)}
        detector = TestFrameworkDetector(TABLE, modules=modules)
        with pytest.raises(DetectorConfigurationError) as info:
            detector.raise_violation("message")
        assert isinstance(info.value.__cause__, TypeError)


# =============================================================================
# SETTINGS
# =============================================================================

class TestDetectionSetting:
    """detect_test_frameworks=False always yields the fallback."""

    def test_disabled_by_settings(self):
        override_settings(ContractSettings(detect_test_frameworks=False))
        modules = {"alpha": fake_module("alpha", AlphaFailure=AlphaFailure)}
        detector = TestFrameworkDetector(TABLE, modules=modules)
        assert detector.exception_type is ContractViolationError

    def test_explicit_flag_overrides_settings(self):
        override_settings(ContractSettings(detect_test_frameworks=False))
        modules = {"alpha": fake_module("alpha", AlphaFailure=AlphaFailure)}
        detector = TestFrameworkDetector(TABLE, modules=modules, enabled=True)
        assert detector.exception_type is AlphaFailure
