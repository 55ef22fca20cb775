"""
Present — zero-sized presence marker

A difference that only says "this record exists". It has no negation and
present records cannot be retracted through it; retraction has to happen by
removing the record upstream. Addition and multiplication maintain presence,
and zero does not inhabit the type.

The point of the type is that it carries nothing: collections that never
change, or only grow (for example derived facts in Datalog), pay no per-record
storage or arithmetic for their differences. It encodes to zero bytes.
"""

import copy
from typing import Any, Optional

from difflow.core.difference.capabilities import Multiply, Semigroup


class Present(Semigroup, Multiply):
    """
    The presence marker. Single-valued: every Present() is the same object.

    Semigroup and Multiply only: not a Monoid and not Abelian.
    """

    __slots__ = ()

    _instance: Optional["Present"] = None

    def __new__(cls) -> "Present":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def coerce(cls, value: Any) -> "Present":
        if value is None or isinstance(value, cls):
            return cls()
        raise TypeError(f"cannot use {type(value).__name__} as Present operand")

    def is_zero(self) -> bool:
        return False

    def _plus_equals(self, rhs: "Present") -> None:
        pass

    def multiply(self, rhs: Any) -> Any:
        """Presence is a multiplicative identity: returns a clone of rhs."""
        return copy.deepcopy(rhs)

    def clone(self) -> "Present":
        return self

    def __copy__(self) -> "Present":
        return self

    def __deepcopy__(self, memo: dict) -> "Present":
        return self

    def __reduce__(self) -> tuple:
        return (Present, ())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Present):
            return NotImplemented
        return True

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Present):
            return NotImplemented
        return False

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Present):
            return NotImplemented
        return True

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Present):
            return NotImplemented
        return False

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Present):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(Present)

    def __repr__(self) -> str:
        return "Present"
