"""
Contract Error Code Taxonomy

Every contract family registers its codes under the shared ``Contract``
root: root -> per-family segment -> per-method segment. Consumers can match
a whole family with ``code.is_under(BooleanCodes.ROOT)`` or one method with
``code == BooleanCodes.BE_TRUE``.

The path segments are part of the public surface. Renaming one is a
breaking change.
"""

from __future__ import annotations

from .base import ErrorCode


CONTRACT = ErrorCode("Contract")


class BooleanCodes:
    ROOT = CONTRACT / "Boolean"
    BE_TRUE = ROOT / "BeTrue"
    BE_FALSE = ROOT / "BeFalse"
    BE = ROOT / "Be"
    NOT_BE = ROOT / "NotBe"
    IMPLY = ROOT / "Imply"
    HAVE_VALUE = ROOT / "HaveValue"
    NOT_HAVE_VALUE = ROOT / "NotHaveValue"


class StringCodes:
    ROOT = CONTRACT / "String"
    BE = ROOT / "Be"
    NOT_BE = ROOT / "NotBe"
    BE_EMPTY = ROOT / "BeEmpty"
    NOT_BE_EMPTY = ROOT / "NotBeEmpty"
    BE_NULL_OR_EMPTY = ROOT / "BeNullOrEmpty"
    NOT_BE_NULL_OR_EMPTY = ROOT / "NotBeNullOrEmpty"
    BE_NULL_OR_WHITESPACE = ROOT / "BeNullOrWhiteSpace"
    NOT_BE_NULL_OR_WHITESPACE = ROOT / "NotBeNullOrWhiteSpace"
    HAVE_LENGTH = ROOT / "HaveLength"
    START_WITH = ROOT / "StartWith"
    NOT_START_WITH = ROOT / "NotStartWith"
    END_WITH = ROOT / "EndWith"
    NOT_END_WITH = ROOT / "NotEndWith"
    CONTAIN = ROOT / "Contain"
    NOT_CONTAIN = ROOT / "NotContain"
    MATCH_REGEX = ROOT / "MatchRegex"
    NOT_MATCH_REGEX = ROOT / "NotMatchRegex"
    BE_UPPER_CASED = ROOT / "BeUpperCased"
    BE_LOWER_CASED = ROOT / "BeLowerCased"
    NOT_BE_UPPER_CASED = ROOT / "NotBeUpperCased"
    NOT_BE_LOWER_CASED = ROOT / "NotBeLowerCased"


class ComparableCodes:
    ROOT = CONTRACT / "Comparable"
    BE = ROOT / "Be"
    NOT_BE = ROOT / "NotBe"
    BE_GREATER_THAN = ROOT / "BeGreaterThan"
    BE_GREATER_THAN_OR_EQUAL_TO = ROOT / "BeGreaterThanOrEqualTo"
    BE_LESS_THAN = ROOT / "BeLessThan"
    BE_LESS_THAN_OR_EQUAL_TO = ROOT / "BeLessThanOrEqualTo"
    BE_IN_RANGE = ROOT / "BeInRange"
    NOT_BE_IN_RANGE = ROOT / "NotBeInRange"
    BE_ONE_OF = ROOT / "BeOneOf"
    BE_RANKED_EQUALLY_TO = ROOT / "BeRankedEquallyTo"
    NOT_BE_RANKED_EQUALLY_TO = ROOT / "NotBeRankedEquallyTo"
    HAVE_VALUE = ROOT / "HaveValue"
    NOT_HAVE_VALUE = ROOT / "NotHaveValue"


class NumericCodes:
    ROOT = CONTRACT / "Numeric"
    BE_POSITIVE = ROOT / "BePositive"
    BE_NEGATIVE = ROOT / "BeNegative"
    BE_ZERO = ROOT / "BeZero"
    NOT_BE_ZERO = ROOT / "NotBeZero"
    BE_APPROXIMATELY = ROOT / "BeApproximately"


class DateTimeCodes:
    ROOT = CONTRACT / "DateTime"
    BE_CLOSE_TO = ROOT / "BeCloseTo"
    NOT_BE_CLOSE_TO = ROOT / "NotBeCloseTo"
    BE_BEFORE = ROOT / "BeBefore"
    BE_ON_OR_BEFORE = ROOT / "BeOnOrBefore"
    BE_AFTER = ROOT / "BeAfter"
    BE_ON_OR_AFTER = ROOT / "BeOnOrAfter"
    HAVE_YEAR = ROOT / "HaveYear"
    HAVE_MONTH = ROOT / "HaveMonth"
    HAVE_DAY = ROOT / "HaveDay"
    BE_SAME_DATE_AS = ROOT / "BeSameDateAs"
    NOT_BE_SAME_DATE_AS = ROOT / "NotBeSameDateAs"


class TimeSpanCodes:
    ROOT = CONTRACT / "TimeSpan"
    BE_POSITIVE = ROOT / "BePositive"
    BE_NEGATIVE = ROOT / "BeNegative"
    BE_CLOSE_TO = ROOT / "BeCloseTo"
    NOT_BE_CLOSE_TO = ROOT / "NotBeCloseTo"


class CollectionCodes:
    ROOT = CONTRACT / "Collection"
    BE_EMPTY = ROOT / "BeEmpty"
    NOT_BE_EMPTY = ROOT / "NotBeEmpty"
    HAVE_COUNT = ROOT / "HaveCount"
    HAVE_COUNT_GREATER_THAN = ROOT / "HaveCountGreaterThan"
    HAVE_COUNT_LESS_THAN = ROOT / "HaveCountLessThan"
    CONTAIN = ROOT / "Contain"
    NOT_CONTAIN = ROOT / "NotContain"
    CONTAIN_SINGLE = ROOT / "ContainSingle"
    ONLY_CONTAIN = ROOT / "OnlyContain"
    BE_SUBSET_OF = ROOT / "BeSubsetOf"
    NOT_BE_SUBSET_OF = ROOT / "NotBeSubsetOf"
    HAVE_ELEMENT_AT = ROOT / "HaveElementAt"
    ALL_SATISFY = ROOT / "AllSatisfy"
    BE_IN_ASCENDING_ORDER = ROOT / "BeInAscendingOrder"
    BE_IN_DESCENDING_ORDER = ROOT / "BeInDescendingOrder"


class StringCollectionCodes:
    ROOT = CONTRACT / "StringCollection"
    CONTAIN_MATCH = ROOT / "ContainMatch"
    NOT_CONTAIN_MATCH = ROOT / "NotContainMatch"
    ALL_MATCH = ROOT / "AllMatch"
    CONTAIN_EQUIVALENT_OF = ROOT / "ContainEquivalentOf"
    NOT_CONTAIN_EQUIVALENT_OF = ROOT / "NotContainEquivalentOf"
    ONLY_CONTAIN_NULL_OR_EMPTY = ROOT / "OnlyContainNullOrEmpty"
    NOT_CONTAIN_NULL_OR_EMPTY = ROOT / "NotContainNullOrEmpty"
    EQUAL = ROOT / "Equal"


class DictionaryCodes:
    ROOT = CONTRACT / "Dictionary"
    BE_EMPTY = ROOT / "BeEmpty"
    NOT_BE_EMPTY = ROOT / "NotBeEmpty"
    HAVE_COUNT = ROOT / "HaveCount"
    CONTAIN_KEY = ROOT / "ContainKey"
    NOT_CONTAIN_KEY = ROOT / "NotContainKey"
    CONTAIN_VALUE = ROOT / "ContainValue"
    NOT_CONTAIN_VALUE = ROOT / "NotContainValue"
    CONTAIN_KEY_VALUE_PAIR = ROOT / "ContainKeyValuePair"
    NOT_CONTAIN_KEY_VALUE_PAIR = ROOT / "NotContainKeyValuePair"
    CONTAIN_KEYS = ROOT / "ContainKeys"
    HAVE_SAME_COUNT = ROOT / "HaveSameCount"
    BE_NULL = ROOT / "BeNull"
    NOT_BE_NULL = ROOT / "NotBeNull"


class EnumCodes:
    ROOT = CONTRACT / "Enum"
    BE = ROOT / "Be"
    NOT_BE = ROOT / "NotBe"
    BE_DEFINED = ROOT / "BeDefined"
    NOT_BE_DEFINED = ROOT / "NotBeDefined"
    HAVE_VALUE = ROOT / "HaveValue"
    NOT_HAVE_VALUE = ROOT / "NotHaveValue"
    HAVE_SAME_VALUE_AS = ROOT / "HaveSameValueAs"
    NOT_HAVE_SAME_VALUE_AS = ROOT / "NotHaveSameValueAs"
    HAVE_SAME_NAME_AS = ROOT / "HaveSameNameAs"
    NOT_HAVE_SAME_NAME_AS = ROOT / "NotHaveSameNameAs"
    HAVE_FLAG = ROOT / "HaveFlag"
    NOT_HAVE_FLAG = ROOT / "NotHaveFlag"
    MATCH = ROOT / "Match"
    BE_ONE_OF = ROOT / "BeOneOf"
    BE_NULL = ROOT / "BeNull"
    NOT_BE_NULL = ROOT / "NotBeNull"


class GuidCodes:
    ROOT = CONTRACT / "Guid"
    BE_EMPTY = ROOT / "BeEmpty"
    NOT_BE_EMPTY = ROOT / "NotBeEmpty"
    BE = ROOT / "Be"
    NOT_BE = ROOT / "NotBe"
    HAVE_VALUE = ROOT / "HaveValue"
    NOT_HAVE_VALUE = ROOT / "NotHaveValue"


class ObjectCodes:
    ROOT = CONTRACT / "Object"
    BE = ROOT / "Be"
    NOT_BE = ROOT / "NotBe"
    BE_NULL = ROOT / "BeNull"
    NOT_BE_NULL = ROOT / "NotBeNull"
    BE_SAME_AS = ROOT / "BeSameAs"
    NOT_BE_SAME_AS = ROOT / "NotBeSameAs"
    BE_OF_TYPE = ROOT / "BeOfType"
    NOT_BE_OF_TYPE = ROOT / "NotBeOfType"
    BE_ASSIGNABLE_TO = ROOT / "BeAssignableTo"
    NOT_BE_ASSIGNABLE_TO = ROOT / "NotBeAssignableTo"
    MATCH = ROOT / "Match"


class TypeCodes:
    ROOT = CONTRACT / "Type"
    BE = ROOT / "Be"
    NOT_BE = ROOT / "NotBe"
    BE_ASSIGNABLE_TO = ROOT / "BeAssignableTo"
    NOT_BE_ASSIGNABLE_TO = ROOT / "NotBeAssignableTo"
    BE_DERIVED_FROM = ROOT / "BeDerivedFrom"
    NOT_BE_DERIVED_FROM = ROOT / "NotBeDerivedFrom"
    BE_ABSTRACT = ROOT / "BeAbstract"
    NOT_BE_ABSTRACT = ROOT / "NotBeAbstract"
    HAVE_PROPERTY = ROOT / "HaveProperty"
    NOT_HAVE_PROPERTY = ROOT / "NotHaveProperty"
    HAVE_METHOD = ROOT / "HaveMethod"
    NOT_HAVE_METHOD = ROOT / "NotHaveMethod"
    BE_DATACLASS = ROOT / "BeDataclass"
    NOT_BE_DATACLASS = ROOT / "NotBeDataclass"
    HAVE_DEFAULT_CONSTRUCTOR = ROOT / "HaveDefaultConstructor"
    NOT_HAVE_DEFAULT_CONSTRUCTOR = ROOT / "NotHaveDefaultConstructor"


class ExceptionCodes:
    ROOT = CONTRACT / "Exception"
    THROW = ROOT / "Throw"
    NOT_THROW = ROOT / "NotThrow"
    THROW_EXACTLY = ROOT / "ThrowExactly"
    WITH_MESSAGE = ROOT / "WithMessage"
    WITH_INNER_EXCEPTION = ROOT / "WithInnerException"
    WHERE = ROOT / "Where"


class FunctionCodes:
    ROOT = CONTRACT / "Function"
    THROW = ROOT / "Throw"
    NOT_THROW = ROOT / "NotThrow"
    THROW_EXACTLY = ROOT / "ThrowExactly"
    RETURN = ROOT / "Return"
    NOT_RETURN = ROOT / "NotReturn"
    RETURN_NOT_NULL = ROOT / "ReturnNotNull"
    RETURN_NULL = ROOT / "ReturnNull"
    SATISFY = ROOT / "Satisfy"


class XmlCodes:
    ROOT = CONTRACT / "Xml"
    BE_NULL = ROOT / "BeNull"
    NOT_BE_NULL = ROOT / "NotBeNull"
    HAVE_VALUE = ROOT / "HaveValue"
    HAVE_NAME = ROOT / "HaveName"
    HAVE_ATTRIBUTE = ROOT / "HaveAttribute"
    NOT_HAVE_ATTRIBUTE = ROOT / "NotHaveAttribute"
    HAVE_ELEMENT = ROOT / "HaveElement"
    NOT_HAVE_ELEMENT = ROOT / "NotHaveElement"
    HAVE_ROOT = ROOT / "HaveRoot"
    BE_EQUIVALENT_TO = ROOT / "BeEquivalentTo"
    NOT_BE_EQUIVALENT_TO = ROOT / "NotBeEquivalentTo"
