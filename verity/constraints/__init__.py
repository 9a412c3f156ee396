"""
Constraint tree for value assertions.

A constraint is a predicate plus the wording needed to explain a failure.
Leaves check one property of a value; operators combine leaves.

Usage:
    from verity.constraints import GreaterThan, IsType, LogicalAnd, LogicalNot

    constraint = LogicalAnd(IsType("int"), GreaterThan(0))
    constraint.evaluate(5)                       # passes silently
    constraint.evaluate(-1, return_result=True)  # False
    str(LogicalNot(constraint))                  # "not( is of type "int" and is greater than 0 )"
"""

# Base
from .base import Constraint

# Equality
from .equality import (
    IsEqual,
    IsEqualCanonicalizing,
    IsEqualIgnoringCase,
    IsEqualWithDelta,
    IsIdentical,
)

# Scalars
from .scalar import (
    Callback,
    GreaterThan,
    IsAnything,
    IsEmpty,
    IsFalse,
    IsFinite,
    IsInfinite,
    IsNan,
    IsNull,
    IsTrue,
    LessThan,
)

# Types and shape
from .type_checks import (
    NATIVE_TYPES,
    ArrayHasKey,
    Count,
    IsInstanceOf,
    IsType,
    ObjectHasProperty,
    SameSize,
    TypeDescriptor,
    count_of,
)

# Strings
from .strings import (
    RegularExpression,
    StringContains,
    StringEndsWith,
    StringMatchesFormatDescription,
    StringStartsWith,
    format_to_regex,
)

# Collections
from .traversable import (
    TraversableContainsEqual,
    TraversableContainsIdentical,
    TraversableContainsOnly,
)

# Structured documents
from .structural import (
    IsJson,
    JsonMatches,
    JsonPathExists,
    JsonPathMatches,
    XmlMatches,
    compile_json_path,
)

# Filesystem
from .filesystem import DirectoryExists, FileExists, IsReadable, IsWritable

# Domain objects
from .objects import ObjectEquals

# Operators
from .logical import (
    BinaryOperator,
    LogicalAnd,
    LogicalNot,
    LogicalOr,
    LogicalXor,
    Operator,
    count_constraints,
    negate,
)

__all__ = [
    # Base
    "Constraint",
    # Equality
    "IsEqual",
    "IsEqualCanonicalizing",
    "IsEqualIgnoringCase",
    "IsEqualWithDelta",
    "IsIdentical",
    # Scalars
    "Callback",
    "GreaterThan",
    "IsAnything",
    "IsEmpty",
    "IsFalse",
    "IsFinite",
    "IsInfinite",
    "IsNan",
    "IsNull",
    "IsTrue",
    "LessThan",
    # Types and shape
    "NATIVE_TYPES",
    "ArrayHasKey",
    "Count",
    "IsInstanceOf",
    "IsType",
    "ObjectHasProperty",
    "SameSize",
    "TypeDescriptor",
    "count_of",
    # Strings
    "RegularExpression",
    "StringContains",
    "StringEndsWith",
    "StringMatchesFormatDescription",
    "StringStartsWith",
    "format_to_regex",
    # Collections
    "TraversableContainsEqual",
    "TraversableContainsIdentical",
    "TraversableContainsOnly",
    # Structured documents
    "IsJson",
    "JsonMatches",
    "JsonPathExists",
    "JsonPathMatches",
    "XmlMatches",
    "compile_json_path",
    # Filesystem
    "DirectoryExists",
    "FileExists",
    "IsReadable",
    "IsWritable",
    # Domain objects
    "ObjectEquals",
    # Operators
    "BinaryOperator",
    "LogicalAnd",
    "LogicalNot",
    "LogicalOr",
    "LogicalXor",
    "Operator",
    "count_constraints",
    "negate",
]
