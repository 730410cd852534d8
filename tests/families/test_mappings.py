"""Dictionary contract tests."""

from types import MappingProxyType

import pytest

from fluent_contracts import DictionaryContracts, should
from fluent_contracts.contracts.codes import DictionaryCodes


CONFIG = {"host": "localhost", "port": 8080}


def code_of(contracts):
    error = contracts.last_error
    return None if error is None else error.code


class TestDictionaryContracts:

    def test_null_checks(self):
        assert code_of(DictionaryContracts(None).be_null()) is None
        assert code_of(DictionaryContracts(None).not_be_null()) == DictionaryCodes.NOT_BE_NULL
        error = should(CONFIG).be_null().last_error
        assert error.message == "Expected dictionary to be null but found 2 item(s)"

    def test_emptiness_and_count(self):
        assert code_of(should({}).be_empty()) is None
        assert code_of(should(CONFIG).be_empty()) == DictionaryCodes.BE_EMPTY
        assert code_of(should({}).not_be_empty()) == DictionaryCodes.NOT_BE_EMPTY
        assert code_of(should(CONFIG).have_count(2)) is None
        assert code_of(should(CONFIG).have_count(3)) == DictionaryCodes.HAVE_COUNT

    def test_have_same_count(self):
        assert code_of(should(CONFIG).have_same_count(["a", "b"])) is None
        assert code_of(should(CONFIG).have_same_count([])) == DictionaryCodes.HAVE_SAME_COUNT
        with pytest.raises(ValueError):
            should(CONFIG).have_same_count(None)

    def test_keys(self):
        assert code_of(should(CONFIG).contain_key("host").not_contain_key("user")) is None
        error = should(CONFIG).contain_key("user").last_error
        assert error.code == DictionaryCodes.CONTAIN_KEY
        assert error.message == "Expected dictionary to contain key user but found keys [host, port]"
        assert code_of(should(CONFIG).not_contain_key("host")) == DictionaryCodes.NOT_CONTAIN_KEY

    def test_contain_keys_reports_missing(self):
        error = should(CONFIG).contain_keys(["host", "user", "password"]).last_error
        assert error.code == DictionaryCodes.CONTAIN_KEYS
        assert error.get("missing_keys") == "user, password"
        assert code_of(should(CONFIG).contain_keys(["host", "port"])) is None

    def test_values(self):
        assert code_of(should(CONFIG).contain_value(8080)) is None
        assert code_of(should(CONFIG).contain_value(80)) == DictionaryCodes.CONTAIN_VALUE
        assert code_of(should(CONFIG).not_contain_value(8080)) == DictionaryCodes.NOT_CONTAIN_VALUE

    def test_key_value_pairs(self):
        assert code_of(should(CONFIG).contain_key_value_pair("port", 8080)) is None
        error = should(CONFIG).contain_key_value_pair("port", 80).last_error
        assert error.code == DictionaryCodes.CONTAIN_KEY_VALUE_PAIR
        assert error.message == "Expected dictionary to contain port: 80 but found 8080"
        missing = should(CONFIG).contain_key_value_pair("user", "x").last_error
        assert missing.message.endswith("but the key was not found")
        assert (
            code_of(should(CONFIG).not_contain_key_value_pair("port", 8080))
            == DictionaryCodes.NOT_CONTAIN_KEY_VALUE_PAIR
        )

    def test_any_mapping_is_accepted(self):
        assert isinstance(should(MappingProxyType(CONFIG)), DictionaryContracts)
        assert code_of(should(MappingProxyType(CONFIG)).contain_key("port")) is None
