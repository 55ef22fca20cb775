"""
Wrapping — overflow-tolerant signed integer difference types

Same capability set as the signed integers (Semigroup + Monoid + Abelian +
Multiply), but every result is reduced modulo 2**BITS into the signed range
instead of trapping. Intended for long-running counters where overflow is
expected and must not abort the computation.

Examples:
    >>> x = WrappingI8(127)
    >>> x.plus_equals(1)
    >>> x
    WrappingI8(-128)
"""

from typing import Final

from difflow.core.difference.integers import POINTER_BITS, SignedInt


class WrappingInt(SignedInt):
    """Signed fixed-width integer with modular arithmetic."""

    __slots__ = ()

    @classmethod
    def _normalize(cls, result: int, op: str) -> int:
        span = 1 << cls.BITS
        return (result - cls.MIN) % span + cls.MIN


class WrappingI8(WrappingInt):
    __slots__ = ()
    BITS = 8


class WrappingI16(WrappingInt):
    __slots__ = ()
    BITS = 16


class WrappingI32(WrappingInt):
    __slots__ = ()
    BITS = 32


class WrappingI64(WrappingInt):
    __slots__ = ()
    BITS = 64


class WrappingI128(WrappingInt):
    __slots__ = ()
    BITS = 128


class WrappingISize(WrappingInt):
    __slots__ = ()
    BITS = POINTER_BITS


WRAPPING_TYPES: Final[tuple[type[WrappingInt], ...]] = (
    WrappingI8,
    WrappingI16,
    WrappingI32,
    WrappingI64,
    WrappingI128,
    WrappingISize,
)
