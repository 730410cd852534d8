"""
Entry Points
============

``must(subject)`` builds a contract that raises on the first failure (test
mode). ``should(subject)`` builds one that records it for ``to_result()``
(validation mode). Both pick the contract family from the subject's
runtime type:

    bool                        -> BooleanContracts
    str                         -> StringContracts
    int, float, Decimal, Real   -> NumericContracts
    date, datetime              -> DateTimeContracts
    timedelta                   -> TimeSpanContracts
    UUID                        -> GuidContracts
    Enum (including IntEnum)    -> EnumContracts
    Mapping                     -> DictionaryContracts
    other iterables             -> CollectionContracts
                                   (StringCollectionContracts when every
                                   item is a str or None, which includes
                                   empty collections)
    classes                     -> TypeContracts
    async functions             -> FunctionContracts
    other functions             -> ActionContracts
    Element / ElementTree       -> XmlElementContracts / XmlDocumentContracts
    anything else, None         -> ObjectContracts

A ``None`` subject carries no type, so it always lands on
ObjectContracts. Construct the family directly when a typed null check is
needed: ``StringContracts(None, throw_on_failure=True).not_be_null()``.
"""

from __future__ import annotations
import functools
import inspect
import numbers
import types
from collections.abc import Iterable, Mapping
from datetime import date, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any
from uuid import UUID
from xml.etree import ElementTree

from .core.evaluator import Contracts
from .families import (
    ActionContracts,
    BooleanContracts,
    CollectionContracts,
    DateTimeContracts,
    DictionaryContracts,
    EnumContracts,
    FunctionContracts,
    GuidContracts,
    NumericContracts,
    ObjectContracts,
    StringCollectionContracts,
    StringContracts,
    TimeSpanContracts,
    TypeContracts,
    XmlDocumentContracts,
    XmlElementContracts,
)


def must(subject: Any) -> Contracts:
    """Contracts that raise the active test framework's failure exception."""
    return _contracts_for(subject, True)


def should(subject: Any) -> Contracts:
    """Contracts that record failures for ``to_result()`` / ``to_void_result()``."""
    return _contracts_for(subject, False)


def _contracts_for(subject: Any, throw_on_failure: bool) -> Contracts:
    # mixed-in enums (class Color(str, Enum)) would otherwise dispatch on
    # their data type
    if isinstance(subject, Enum):
        return EnumContracts(subject, throw_on_failure)
    # classes with an iterable metaclass (Enum classes) would otherwise
    # dispatch as collections
    if isinstance(subject, type):
        return TypeContracts(subject, throw_on_failure)
    return _build(subject, throw_on_failure)


# =============================================================================
# DISPATCH TABLE
# =============================================================================

@functools.singledispatch
def _build(subject: Any, throw_on_failure: bool) -> Contracts:
    return ObjectContracts(subject, throw_on_failure)


@_build.register(bool)
def _(subject: bool, throw_on_failure: bool) -> Contracts:
    return BooleanContracts(subject, throw_on_failure)


@_build.register(str)
def _(subject: str, throw_on_failure: bool) -> Contracts:
    return StringContracts(subject, throw_on_failure)


@_build.register(int)
@_build.register(float)
@_build.register(Decimal)
@_build.register(Fraction)
@_build.register(numbers.Real)
def _(subject: Any, throw_on_failure: bool) -> Contracts:
    return NumericContracts(subject, throw_on_failure)


@_build.register(date)
def _(subject: date, throw_on_failure: bool) -> Contracts:
    return DateTimeContracts(subject, throw_on_failure)


@_build.register(timedelta)
def _(subject: timedelta, throw_on_failure: bool) -> Contracts:
    return TimeSpanContracts(subject, throw_on_failure)


@_build.register(UUID)
def _(subject: UUID, throw_on_failure: bool) -> Contracts:
    return GuidContracts(subject, throw_on_failure)


@_build.register(Enum)
def _(subject: Enum, throw_on_failure: bool) -> Contracts:
    return EnumContracts(subject, throw_on_failure)


@_build.register(dict)
@_build.register(Mapping)
def _(subject: Mapping, throw_on_failure: bool) -> Contracts:
    return DictionaryContracts(subject, throw_on_failure)


@_build.register(Iterable)
def _(subject: Iterable, throw_on_failure: bool) -> Contracts:
    items = tuple(subject)
    # empty and all-None collections could hold strings, and the string
    # family is a superset of the plain one
    if all(item is None or isinstance(item, str) for item in items):
        return StringCollectionContracts(items, throw_on_failure)
    return CollectionContracts(items, throw_on_failure)


@_build.register(types.FunctionType)
@_build.register(types.MethodType)
@_build.register(types.BuiltinFunctionType)
@_build.register(functools.partial)
def _(subject: Any, throw_on_failure: bool) -> Contracts:
    if inspect.iscoroutinefunction(subject):
        return FunctionContracts(subject, throw_on_failure)
    return ActionContracts(subject, throw_on_failure)


@_build.register(ElementTree.Element)
def _(subject: ElementTree.Element, throw_on_failure: bool) -> Contracts:
    return XmlElementContracts(subject, throw_on_failure)


@_build.register(ElementTree.ElementTree)
def _(subject: ElementTree.ElementTree, throw_on_failure: bool) -> Contracts:
    return XmlDocumentContracts(subject, throw_on_failure)
