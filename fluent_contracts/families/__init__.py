"""
Contract Families

One contract class per subject kind. Every family derives from
``core.Contracts`` and registers its error codes under
``Contract/<Family>/<Method>`` in ``contracts.codes``.
"""

from .actions import ActionContracts, ExceptionContracts, invoking, matches_wildcard
from .boolean import BooleanContracts
from .comparable import ComparableContracts, NumericContracts
from .enums import EnumContracts
from .functions import FunctionContracts
from .guids import GuidContracts, NIL_UUID
from .mappings import DictionaryContracts
from .markup import XmlDocumentContracts, XmlElementContracts
from .objects import ObjectContracts
from .sequences import CollectionContracts, StringCollectionContracts
from .strings import StringContracts
from .temporal import DateTimeContracts, TimeSpanContracts
from .types import TypeContracts

__all__ = [
    "ActionContracts",
    "ExceptionContracts",
    "invoking",
    "matches_wildcard",
    "BooleanContracts",
    "ComparableContracts",
    "NumericContracts",
    "EnumContracts",
    "FunctionContracts",
    "GuidContracts",
    "NIL_UUID",
    "DictionaryContracts",
    "XmlDocumentContracts",
    "XmlElementContracts",
    "ObjectContracts",
    "CollectionContracts",
    "StringCollectionContracts",
    "StringContracts",
    "DateTimeContracts",
    "TimeSpanContracts",
    "TypeContracts",
]
