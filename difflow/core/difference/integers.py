"""
Integers — fixed-width primitive difference types

Every standard width is instantiated once:
- signed   I8, I16, I32, I64, I128, ISize  → Semigroup + Monoid + Abelian + Multiply
- unsigned U8, U16, U32, U64, U128, USize  → Semigroup + Monoid + Multiply

Unsigned types cannot represent negative magnitudes, so they have no negate()
at all and are not Abelian instances.

CRITICAL INVARIANTS:
1. The stored value always lies in [MIN, MAX] for the type's width
2. Overflow traps (IntegerOverflowError) and leaves the receiver unchanged
3. Equality, ordering and hashing are by (type, value): I8(1) != I16(1)
"""

import functools
import operator
import struct
from typing import Any, ClassVar, Final

from difflow.core.difference.capabilities import Abelian, Monoid, Multiply

# =============================================================================
# CONSTANTS
# =============================================================================

# Width of ISize / USize: the host pointer width
POINTER_BITS: Final[int] = struct.calcsize("P") * 8


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IntegerOverflowError(OverflowError):
    """
    Arithmetic left the representable range of a fixed-width type.

    This is the trap policy of the non-wrapping integers and is never masked;
    callers that expect overflow must pick a Wrapping* type instead.
    """

    pass


# =============================================================================
# BASE TYPES
# =============================================================================


@functools.total_ordering
class FixedWidthInt(Monoid, Multiply):
    """
    A mutable integer difference of fixed bit width.

    Subclasses declare BITS and SIGNED; MIN and MAX are derived.
    """

    __slots__ = ("value",)

    BITS: ClassVar[int]
    SIGNED: ClassVar[bool]
    MIN: ClassVar[int]
    MAX: ClassVar[int]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        bits = getattr(cls, "BITS", None)
        signed = getattr(cls, "SIGNED", None)
        if bits is None or signed is None:
            return
        if signed:
            cls.MIN = -(1 << (bits - 1))
            cls.MAX = (1 << (bits - 1)) - 1
        else:
            cls.MIN = 0
            cls.MAX = (1 << bits) - 1

    def __init__(self, value: int = 0) -> None:
        self.value = self._normalize(operator.index(value), "construct")

    @classmethod
    def _normalize(cls, result: int, op: str) -> int:
        """Bring an exact result into range; traps for non-wrapping types."""
        if result < cls.MIN or result > cls.MAX:
            raise IntegerOverflowError(
                f"attempt to {op} with overflow: {cls.__name__} "
                f"range [{cls.MIN}, {cls.MAX}], got {result}"
            )
        return result

    @classmethod
    def coerce(cls, value: Any) -> "FixedWidthInt":
        if isinstance(value, cls):
            return value
        if isinstance(value, FixedWidthInt):
            raise TypeError(
                f"cannot use {type(value).__name__} as {cls.__name__} operand"
            )
        return cls(value)

    # -------------------------------------------------------------------------
    # Capabilities
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.value == 0

    def _plus_equals(self, rhs: "FixedWidthInt") -> None:
        self.value = self._normalize(self.value + rhs.value, "add")

    @classmethod
    def zero(cls) -> "FixedWidthInt":
        return cls(0)

    def multiply(self, rhs: Any) -> "FixedWidthInt":
        other = type(self).coerce(rhs)
        return type(self)(self._normalize(self.value * other.value, "multiply"))

    def clone(self) -> "FixedWidthInt":
        return type(self)(self.value)

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"


class SignedInt(FixedWidthInt, Abelian):
    """Signed fixed-width integer: adds negation."""

    __slots__ = ()

    SIGNED = True

    def negate(self) -> None:
        self.value = self._normalize(-self.value, "negate")


class UnsignedInt(FixedWidthInt):
    """Unsigned fixed-width integer: no negation."""

    __slots__ = ()

    SIGNED = False


# =============================================================================
# SIGNED WIDTHS
# =============================================================================


class I8(SignedInt):
    __slots__ = ()
    BITS = 8


class I16(SignedInt):
    __slots__ = ()
    BITS = 16


class I32(SignedInt):
    __slots__ = ()
    BITS = 32


class I64(SignedInt):
    __slots__ = ()
    BITS = 64


class I128(SignedInt):
    __slots__ = ()
    BITS = 128


class ISize(SignedInt):
    __slots__ = ()
    BITS = POINTER_BITS


# =============================================================================
# UNSIGNED WIDTHS
# =============================================================================


class U8(UnsignedInt):
    __slots__ = ()
    BITS = 8


class U16(UnsignedInt):
    __slots__ = ()
    BITS = 16


class U32(UnsignedInt):
    __slots__ = ()
    BITS = 32


class U64(UnsignedInt):
    __slots__ = ()
    BITS = 64


class U128(UnsignedInt):
    __slots__ = ()
    BITS = 128


class USize(UnsignedInt):
    __slots__ = ()
    BITS = POINTER_BITS


SIGNED_TYPES: Final[tuple[type[SignedInt], ...]] = (I8, I16, I32, I64, I128, ISize)
UNSIGNED_TYPES: Final[tuple[type[UnsignedInt], ...]] = (U8, U16, U32, U64, U128, USize)
