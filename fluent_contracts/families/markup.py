"""
XML contracts over ``xml.etree.ElementTree``.

An element's value is its concatenated descendant text, as ``itertext``
yields it. Equivalence compares tag, attributes, stripped text and
children in order; whitespace-only text and tails are ignored.
"""

from __future__ import annotations
from typing import Any, Optional, Tuple
from xml.etree import ElementTree

from ..contracts.codes import XmlCodes
from ..core.evaluator import Contracts, describe


def element_value(element: ElementTree.Element) -> str:
    return "".join(element.itertext())


def canonical(element: Optional[ElementTree.Element]) -> Optional[Tuple[Any, ...]]:
    """Structural key used by the equivalence checks."""
    if element is None:
        return None
    return (
        element.tag,
        tuple(sorted(element.attrib.items())),
        (element.text or "").strip(),
        tuple(canonical(child) for child in element),
    )


def _root(document: Optional[ElementTree.ElementTree]) -> Optional[ElementTree.Element]:
    return None if document is None else document.getroot()


def _outline(element: Optional[ElementTree.Element]) -> str:
    if element is None:
        return "null"
    return ElementTree.tostring(element, encoding="unicode").strip()


class XmlElementContracts(Contracts[Optional[ElementTree.Element]]):

    def be_null(self, because: str = "", *because_args) -> XmlElementContracts:
        return self.assert_that(
            lambda s: s is None,
            XmlCodes.BE_NULL,
            lambda: f"Expected XML element to be null but found <{self.subject.tag}>",
            self._context(because, because_args),
        )

    def not_be_null(self, because: str = "", *because_args) -> XmlElementContracts:
        return self.assert_that(
            lambda s: s is not None,
            XmlCodes.NOT_BE_NULL,
            "Expected XML element not to be null",
            self._context(because, because_args),
        )

    def have_name(self, expected: str, because: str = "", *because_args) -> XmlElementContracts:
        return self.assert_that(
            lambda s: s is not None and s.tag == expected,
            XmlCodes.HAVE_NAME,
            lambda: f"Expected XML element named {expected!r} but found {self._tag()}",
            self._context(because, because_args, expected_name=expected, actual_name=self._tag()),
        )

    def have_value(self, expected: str, because: str = "", *because_args) -> XmlElementContracts:
        actual = None if self.subject is None else element_value(self.subject)
        return self.assert_that(
            lambda s: s is not None and actual == expected,
            XmlCodes.HAVE_VALUE,
            lambda: f"Expected XML element value {expected!r} but found {describe(actual)!r}",
            self._context(because, because_args, expected=expected, actual=actual),
        )

    def have_attribute(
        self, name: str, value: Optional[str] = None, because: str = "", *because_args
    ) -> XmlElementContracts:
        """Attribute present, and equal to ``value`` when one is given."""
        if not name:
            raise ValueError("Attribute name must not be empty")
        actual = None if self.subject is None else self.subject.get(name)

        def message() -> str:
            if self.subject is None:
                return f"Expected XML element with attribute {name!r} but found null"
            if actual is None:
                return f"Expected XML element {self._tag()} to have attribute {name!r}"
            return f"Expected attribute {name!r} to be {value!r} but found {actual!r}"

        return self.assert_that(
            lambda s: actual is not None and (value is None or actual == value),
            XmlCodes.HAVE_ATTRIBUTE,
            message,
            self._context(because, because_args, attribute=name, expected=value, actual=actual),
        )

    def not_have_attribute(self, name: str, because: str = "", *because_args) -> XmlElementContracts:
        if not name:
            raise ValueError("Attribute name must not be empty")
        return self.assert_that(
            lambda s: s is None or s.get(name) is None,
            XmlCodes.NOT_HAVE_ATTRIBUTE,
            lambda: f"Did not expect XML element {self._tag()} to have attribute {name!r}",
            self._context(because, because_args, attribute=name),
        )

    def have_element(self, path: str, because: str = "", *because_args) -> XmlElementContracts:
        """``path`` is an ElementPath expression relative to the subject."""
        if not path:
            raise ValueError("Element path must not be empty")
        return self.assert_that(
            lambda s: s is not None and s.find(path) is not None,
            XmlCodes.HAVE_ELEMENT,
            lambda: f"Expected XML element {self._tag()} to have child element {path!r}",
            self._context(because, because_args, path=path),
        )

    def not_have_element(self, path: str, because: str = "", *because_args) -> XmlElementContracts:
        if not path:
            raise ValueError("Element path must not be empty")
        return self.assert_that(
            lambda s: s is None or s.find(path) is None,
            XmlCodes.NOT_HAVE_ELEMENT,
            lambda: f"Did not expect XML element {self._tag()} to have child element {path!r}",
            self._context(because, because_args, path=path),
        )

    def be_equivalent_to(self, expected: Optional[ElementTree.Element], because: str = "", *because_args):
        return self.assert_that(
            lambda s: canonical(s) == canonical(expected),
            XmlCodes.BE_EQUIVALENT_TO,
            lambda: f"Expected XML {_outline(expected)} but found {_outline(self.subject)}",
            self._context(because, because_args, expected=_outline(expected), actual=_outline(self.subject)),
        )

    def not_be_equivalent_to(self, unexpected: Optional[ElementTree.Element], because: str = "", *because_args):
        return self.assert_that(
            lambda s: canonical(s) != canonical(unexpected),
            XmlCodes.NOT_BE_EQUIVALENT_TO,
            lambda: f"Did not expect XML equivalent to {_outline(unexpected)}",
            self._context(because, because_args, unexpected=_outline(unexpected)),
        )

    def _tag(self) -> str:
        return "null" if self.subject is None else f"<{self.subject.tag}>"


class XmlDocumentContracts(Contracts[Optional[ElementTree.ElementTree]]):

    def have_root(self, name: str, because: str = "", *because_args) -> XmlDocumentContracts:
        root = _root(self.subject)
        return self.assert_that(
            lambda s: root is not None and root.tag == name,
            XmlCodes.HAVE_ROOT,
            lambda: f"Expected XML document root {name!r} but found {'null' if root is None else repr(root.tag)}",
            self._context(because, because_args, expected_root=name, actual_root=None if root is None else root.tag),
        )

    def have_element(self, name: str, because: str = "", *because_args) -> XmlDocumentContracts:
        """Matches the root or any descendant with tag ``name``."""
        if not name:
            raise ValueError("Element name must not be empty")
        root = _root(self.subject)
        return self.assert_that(
            lambda s: root is not None and next(root.iter(name), None) is not None,
            XmlCodes.HAVE_ELEMENT,
            f"Expected XML document to contain element {name!r}",
            self._context(because, because_args, element=name),
        )

    def be_equivalent_to(self, expected: Optional[ElementTree.ElementTree], because: str = "", *because_args):
        root = _root(self.subject)
        other = _root(expected)
        return self.assert_that(
            lambda s: canonical(root) == canonical(other),
            XmlCodes.BE_EQUIVALENT_TO,
            lambda: f"Expected XML document {_outline(other)} but found {_outline(root)}",
            self._context(because, because_args, expected=_outline(other), actual=_outline(root)),
        )
