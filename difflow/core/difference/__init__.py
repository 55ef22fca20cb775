"""
Difference types for differential dataflow

Differences most commonly count the records of a multiset, but generalize to
any map from records to an Abelian group: a count together with a second
accumulation lets a collection track, for example, an average.
"""

# Capabilities
from difflow.core.difference.capabilities import (
    Abelian,
    IsZero,
    Monoid,
    Multiply,
    Semigroup,
    TypeReference,
    capabilities_of,
)

# Fixed-width integers
from difflow.core.difference.integers import (
    I8,
    I16,
    I32,
    I64,
    I128,
    ISize,
    POINTER_BITS,
    SIGNED_TYPES,
    U8,
    U16,
    U32,
    U64,
    U128,
    UNSIGNED_TYPES,
    USize,
    FixedWidthInt,
    IntegerOverflowError,
    SignedInt,
    UnsignedInt,
)

# Wrapping integers
from difflow.core.difference.wrapping import (
    WRAPPING_TYPES,
    WrappingI8,
    WrappingI16,
    WrappingI32,
    WrappingI64,
    WrappingI128,
    WrappingInt,
    WrappingISize,
)

# Presence marker
from difflow.core.difference.present import Present

# Composites
from difflow.core.difference.tuples import MAX_TUPLE_ARITY, DiffTuple, tuple_of
from difflow.core.difference.vector import DiffVec, vec_of

# Conformance
from difflow.core.difference.laws import (
    LawCheckConfig,
    LawReport,
    LawViolation,
    accumulate,
    check_associativity,
    check_commutativity,
    check_multiply_purity,
    check_negation_inverse,
    check_zero_identity,
    verify_laws,
)

__all__ = [
    # Capabilities
    "IsZero",
    "Semigroup",
    "Monoid",
    "Abelian",
    "Multiply",
    "TypeReference",
    "capabilities_of",
    # Fixed-width integers — Constants
    "POINTER_BITS",
    "SIGNED_TYPES",
    "UNSIGNED_TYPES",
    # Fixed-width integers — Exceptions
    "IntegerOverflowError",
    # Fixed-width integers — Types
    "FixedWidthInt",
    "SignedInt",
    "UnsignedInt",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "ISize",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USize",
    # Wrapping integers
    "WRAPPING_TYPES",
    "WrappingInt",
    "WrappingI8",
    "WrappingI16",
    "WrappingI32",
    "WrappingI64",
    "WrappingI128",
    "WrappingISize",
    # Presence marker
    "Present",
    # Composites
    "MAX_TUPLE_ARITY",
    "DiffTuple",
    "DiffVec",
    "tuple_of",
    "vec_of",
    # Conformance
    "LawCheckConfig",
    "LawReport",
    "LawViolation",
    "accumulate",
    "check_associativity",
    "check_commutativity",
    "check_multiply_purity",
    "check_negation_inverse",
    "check_zero_identity",
    "verify_laws",
]
