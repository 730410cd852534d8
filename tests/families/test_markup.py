"""XML element and document contract tests."""

from xml.etree import ElementTree

import pytest

from fluent_contracts import XmlDocumentContracts, XmlElementContracts, should
from fluent_contracts.contracts.codes import XmlCodes


ORDER = """
<order id="42" status="open">
    <customer>Ada</customer>
    <lines>
        <line sku="A1">2</line>
    </lines>
</order>
"""


def code_of(contracts):
    error = contracts.last_error
    return None if error is None else error.code


def order():
    return ElementTree.fromstring(ORDER)


class TestXmlElementContracts:

    def test_elements_select_the_xml_family(self):
        assert isinstance(should(order()), XmlElementContracts)

    def test_null(self):
        assert code_of(XmlElementContracts(None).be_null()) is None
        assert code_of(should(order()).be_null()) == XmlCodes.BE_NULL
        assert code_of(XmlElementContracts(None).not_be_null()) == XmlCodes.NOT_BE_NULL

    def test_name_and_value(self):
        customer = order().find("customer")
        assert code_of(should(customer).have_name("customer").have_value("Ada")) is None
        error = should(customer).have_name("client").last_error
        assert error.code == XmlCodes.HAVE_NAME
        assert error.message == "Expected XML element named 'client' but found <customer>"
        assert code_of(should(customer).have_value("Bob")) == XmlCodes.HAVE_VALUE

    def test_attributes(self):
        root = order()
        assert code_of(should(root).have_attribute("id").have_attribute("status", "open")) is None
        error = should(root).have_attribute("status", "closed").last_error
        assert error.code == XmlCodes.HAVE_ATTRIBUTE
        assert error.message == "Expected attribute 'status' to be 'closed' but found 'open'"
        assert code_of(should(root).have_attribute("owner")) == XmlCodes.HAVE_ATTRIBUTE
        assert code_of(should(root).not_have_attribute("owner")) is None
        assert code_of(should(root).not_have_attribute("id")) == XmlCodes.NOT_HAVE_ATTRIBUTE

    def test_child_elements(self):
        root = order()
        assert code_of(should(root).have_element("customer").have_element("lines/line")) is None
        assert code_of(should(root).have_element("line")) == XmlCodes.HAVE_ELEMENT
        assert code_of(should(root).not_have_element("customer")) == XmlCodes.NOT_HAVE_ELEMENT

    def test_empty_path_is_a_caller_bug(self):
        with pytest.raises(ValueError):
            should(order()).have_element("")

    def test_equivalence_ignores_formatting_and_attribute_order(self):
        compact = ElementTree.fromstring(
            '<order status="open" id="42"><customer>Ada</customer>'
            '<lines><line sku="A1">2</line></lines></order>'
        )
        assert code_of(should(order()).be_equivalent_to(compact)) is None

    def test_equivalence_detects_differences(self):
        changed = order()
        changed.find("customer").text = "Bob"
        assert code_of(should(order()).be_equivalent_to(changed)) == XmlCodes.BE_EQUIVALENT_TO
        assert code_of(should(order()).not_be_equivalent_to(changed)) is None
        assert code_of(should(order()).not_be_equivalent_to(order())) == XmlCodes.NOT_BE_EQUIVALENT_TO


class TestXmlDocumentContracts:

    def test_documents_select_the_document_family(self):
        assert isinstance(should(ElementTree.ElementTree(order())), XmlDocumentContracts)

    def test_root(self):
        document = ElementTree.ElementTree(order())
        assert code_of(should(document).have_root("order")) is None
        error = should(document).have_root("invoice").last_error
        assert error.code == XmlCodes.HAVE_ROOT
        assert error.message == "Expected XML document root 'invoice' but found 'order'"
        assert code_of(XmlDocumentContracts(None).have_root("order")) == XmlCodes.HAVE_ROOT

    def test_element_anywhere_in_the_document(self):
        document = ElementTree.ElementTree(order())
        assert code_of(should(document).have_element("line")) is None
        assert code_of(should(document).have_element("order")) is None
        assert code_of(should(document).have_element("invoice")) == XmlCodes.HAVE_ELEMENT

    def test_document_equivalence(self):
        first = ElementTree.ElementTree(order())
        second = ElementTree.ElementTree(order())
        assert code_of(should(first).be_equivalent_to(second)) is None
