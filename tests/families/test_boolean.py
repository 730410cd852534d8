"""Boolean contract tests."""

import pytest

from fluent_contracts import BooleanContracts, should
from fluent_contracts.contracts.codes import BooleanCodes


def code_of(contracts):
    error = contracts.last_error
    return None if error is None else error.code


class TestBooleanContracts:

    def test_be_true(self):
        assert code_of(should(True).be_true()) is None
        error = should(False).be_true().last_error
        assert error.code == BooleanCodes.BE_TRUE
        assert error.message == "Expected true but found False"
        assert error.get("actual") == "False"

    def test_be_false(self):
        assert code_of(should(False).be_false()) is None
        assert code_of(should(True).be_false()) == BooleanCodes.BE_FALSE

    def test_null_subject_fails_with_own_code(self):
        contracts = BooleanContracts(None).be_true()
        assert contracts.last_error.code == BooleanCodes.BE_TRUE
        assert contracts.last_error.message == "Expected true but found (null)"

    def test_be_and_not_be(self):
        assert code_of(should(True).be(True)) is None
        assert code_of(should(True).be(False)) == BooleanCodes.BE
        assert code_of(should(True).not_be(False)) is None
        assert code_of(should(True).not_be(True)) == BooleanCodes.NOT_BE
        assert code_of(BooleanContracts(None).not_be(True)) is None

    @pytest.mark.parametrize(
        "antecedent, consequent, holds",
        [(False, False, True), (False, True, True), (True, True, True), (True, False, False)],
    )
    def test_imply_truth_table(self, antecedent, consequent, holds):
        contracts = should(antecedent).imply(consequent)
        assert contracts.has_failed is not holds

    def test_imply_on_null_fails(self):
        assert code_of(BooleanContracts(None).imply(True)) == BooleanCodes.IMPLY

    def test_value_presence(self):
        assert code_of(BooleanContracts(None).have_value()) == BooleanCodes.HAVE_VALUE
        assert code_of(BooleanContracts(None).be_null()) is None
        assert code_of(should(False).not_have_value()) == BooleanCodes.NOT_HAVE_VALUE
        assert code_of(should(False).not_be_null()) is None
