"""
Vector — componentwise composition over variable-length sequences

A sequence type has the capabilities of its element type:
- is_zero   — every element is zero (the empty sequence is zero)
- zero      — the empty sequence (element Monoid)
- negate    — every element in place (element Abelian)
- multiply  — rhs mapped over every element, returns a same-length list
              (element Multiply)

Addition is ragged: indices present only on the right are treated as if the
left held an implicit zero there, so the sum is as long as the longer operand.

    >>> acc = vec_of(I32)([1, 2, 3])
    >>> acc.plus_equals([1, 1, 1, 1])
    >>> list(map(int, acc))
    [2, 3, 4, 1]

Callers that need equal-length tracking must enforce it themselves; addition
never truncates and never rejects a length mismatch.

Addition and negation are all-or-nothing: if an element traps, the receiver
keeps its previous elements.
"""

import collections.abc
import functools
from typing import Any, ClassVar, Iterable, Iterator

from difflow.core.difference.capabilities import (
    Abelian,
    Monoid,
    Multiply,
    Semigroup,
    TypeReference,
)


# =============================================================================
# BASE TYPE
# =============================================================================


@functools.total_ordering
class DiffVec(Semigroup, collections.abc.Sequence):
    """
    Variable-length sequence of element differences.

    Concrete types come from vec_of(). Read access follows the Sequence
    protocol; the only mutations are plus_equals() and negate().
    """

    __slots__ = ("_items",)

    ELEMENT: ClassVar[type]

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = [self.ELEMENT.coerce(item) for item in items]

    @classmethod
    def coerce(cls, value: Any) -> "DiffVec":
        if isinstance(value, cls):
            return value
        if isinstance(value, DiffVec):
            raise TypeError(
                f"cannot use {type(value).__name__} as {cls.__name__} operand"
            )
        return cls(value)

    def is_zero(self) -> bool:
        return all(item.is_zero() for item in self._items)

    def _plus_equals(self, rhs: "DiffVec") -> None:
        # Work on clones so an element trap leaves self unchanged
        items = [item.clone() for item in self._items]

        # Apply all updates to existing elements
        for index, update in enumerate(rhs._items[: len(items)]):
            items[index].plus_equals(update)

        # Clone leftover elements from rhs
        while len(items) < len(rhs._items):
            items.append(rhs._items[len(items)].clone())

        self._items = items

    def clone(self) -> "DiffVec":
        return type(self)(item.clone() for item in self._items)

    @classmethod
    def type_reference(cls) -> TypeReference:
        return TypeReference(vec_of, (cls.ELEMENT.type_reference(),))

    def __reduce__(self) -> tuple:
        return (_rebuild, (type(self).type_reference(), list(self._items)))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return type(self)(item.clone() for item in self._items[index])
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._items == other._items

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._items < other._items

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(self._items)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(map(repr, self._items))}])"


# =============================================================================
# CAPABILITY MIXINS
# =============================================================================


class _VecMonoid(Monoid):
    __slots__ = ()

    @classmethod
    def zero(cls) -> "DiffVec":
        return cls()


class _VecAbelian(_VecMonoid, Abelian):
    __slots__ = ()

    def negate(self) -> None:
        items = [item.clone() for item in self._items]
        for item in items:
            item.negate()
        self._items = items


class _VecMultiply(Multiply):
    __slots__ = ()

    def multiply(self, rhs: Any) -> list:
        return [item.multiply(rhs) for item in self._items]


def _rebuild(diff_type: Any, items: list) -> "DiffVec":
    if isinstance(diff_type, TypeReference):
        diff_type = diff_type.resolve()
    return diff_type(items)


# =============================================================================
# FACTORY
# =============================================================================


@functools.lru_cache(maxsize=None)
def vec_of(element: type) -> type[DiffVec]:
    """
    Sequence difference type over the given element type.

    Raises:
        TypeError: element is not a Semigroup type
    """
    if not (isinstance(element, type) and issubclass(element, Semigroup)):
        raise TypeError(f"vector element must be a Semigroup type: {element!r}")

    bases: list[type] = [DiffVec]
    if issubclass(element, Abelian):
        bases.append(_VecAbelian)
    elif issubclass(element, Monoid):
        bases.append(_VecMonoid)
    if issubclass(element, Multiply):
        bases.append(_VecMultiply)

    return type(
        f"Vec[{element.__name__}]",
        tuple(bases),
        {
            "__slots__": (),
            "__module__": __name__,
            "ELEMENT": element,
            "COMMUTATIVE": element.COMMUTATIVE,
        },
    )
