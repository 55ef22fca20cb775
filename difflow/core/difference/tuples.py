"""
Tuples — componentwise composition over fixed arities

Tracks several independent accumulations per record, e.g. a count together
with a weighted sum (the average is weighted_sum / count at read time):

    >>> CountAndWeight = tuple_of(I64, I64)
    >>> acc = CountAndWeight(1, 250)
    >>> acc.plus_equals((1, 310))
    >>> acc
    Tuple[I64, I64](I64(2), I64(560))

A tuple type has a capability iff every component type has it:
- is_zero   — AND of component tests (the empty tuple is zero)
- plus_equals — componentwise, in place
- zero      — tuple of component zeros (all components Monoid)
- negate    — componentwise (all components Abelian)
- multiply  — same rhs applied to every component (all components Multiply),
              returns a plain tuple of the per-component outputs

Arities 0..MAX_TUPLE_ARITY only; wider tuples raise ValueError.
Addition and negation are all-or-nothing: if a component traps, the receiver
keeps its previous components.
"""

import functools
from typing import Any, ClassVar, Final, Iterator

from difflow.core.difference.capabilities import (
    Abelian,
    Monoid,
    Multiply,
    Semigroup,
    TypeReference,
)

# =============================================================================
# CONSTANTS
# =============================================================================

MAX_TUPLE_ARITY: Final[int] = 4


# =============================================================================
# BASE TYPE
# =============================================================================


@functools.total_ordering
class DiffTuple(Semigroup):
    """
    Fixed-arity tuple of component differences.

    Concrete types come from tuple_of(); the constructor takes ownership of the
    component values it is given and coerces raw ones (ints, tuples, lists).
    """

    __slots__ = ("_items",)

    COMPONENTS: ClassVar[tuple[type, ...]] = ()

    def __init__(self, *items: Any) -> None:
        if len(items) != len(self.COMPONENTS):
            raise ValueError(
                f"{type(self).__name__} takes {len(self.COMPONENTS)} components, "
                f"got {len(items)}"
            )
        self._items = [
            component.coerce(item) for component, item in zip(self.COMPONENTS, items)
        ]

    @classmethod
    def coerce(cls, value: Any) -> "DiffTuple":
        if isinstance(value, cls):
            return value
        if isinstance(value, DiffTuple):
            raise TypeError(
                f"cannot use {type(value).__name__} as {cls.__name__} operand"
            )
        return cls(*value)

    def is_zero(self) -> bool:
        zero = True
        for item in self._items:
            zero &= item.is_zero()
        return zero

    def _plus_equals(self, rhs: "DiffTuple") -> None:
        # Work on clones so a component trap leaves self unchanged
        items = [item.clone() for item in self._items]
        for item, update in zip(items, rhs._items):
            item.plus_equals(update)
        self._items = items

    def clone(self) -> "DiffTuple":
        return type(self)(*(item.clone() for item in self._items))

    @classmethod
    def type_reference(cls) -> TypeReference:
        return TypeReference(tuple_of, tuple(c.type_reference() for c in cls.COMPONENTS))

    def __reduce__(self) -> tuple:
        return (_rebuild, (type(self).type_reference(), tuple(self._items)))

    def as_tuple(self) -> tuple:
        """The components as a plain tuple (shared, not cloned)."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
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
        return f"{type(self).__name__}({', '.join(map(repr, self._items))})"


# =============================================================================
# CAPABILITY MIXINS
# =============================================================================


class _TupleMonoid(Monoid):
    __slots__ = ()

    @classmethod
    def zero(cls) -> "DiffTuple":
        return cls(*(component.zero() for component in cls.COMPONENTS))


class _TupleAbelian(_TupleMonoid, Abelian):
    __slots__ = ()

    def negate(self) -> None:
        items = [item.clone() for item in self._items]
        for item in items:
            item.negate()
        self._items = items


class _TupleMultiply(Multiply):
    __slots__ = ()

    def multiply(self, rhs: Any) -> tuple:
        return tuple(item.multiply(rhs) for item in self._items)


def _rebuild(diff_type: Any, items: tuple) -> "DiffTuple":
    if isinstance(diff_type, TypeReference):
        diff_type = diff_type.resolve()
    return diff_type(*items)


# =============================================================================
# FACTORY
# =============================================================================


@functools.lru_cache(maxsize=None)
def tuple_of(*components: type) -> type[DiffTuple]:
    """
    Tuple difference type over the given component types.

    Args:
        components: Semigroup subclasses, at most MAX_TUPLE_ARITY of them

    Returns:
        A DiffTuple subclass; the same class for the same components

    Raises:
        ValueError: arity above MAX_TUPLE_ARITY
        TypeError: a component is not a Semigroup type
    """
    if len(components) > MAX_TUPLE_ARITY:
        raise ValueError(
            f"tuple arity {len(components)} unsupported (max {MAX_TUPLE_ARITY})"
        )
    for component in components:
        if not (isinstance(component, type) and issubclass(component, Semigroup)):
            raise TypeError(f"tuple component must be a Semigroup type: {component!r}")

    bases: list[type] = [DiffTuple]
    if all(issubclass(c, Abelian) for c in components):
        bases.append(_TupleAbelian)
    elif all(issubclass(c, Monoid) for c in components):
        bases.append(_TupleMonoid)
    if all(issubclass(c, Multiply) for c in components):
        bases.append(_TupleMultiply)

    name = f"Tuple[{', '.join(c.__name__ for c in components)}]"
    return type(
        name,
        tuple(bases),
        {
            "__slots__": (),
            "__module__": __name__,
            "COMPONENTS": components,
            "COMMUTATIVE": all(c.COMMUTATIVE for c in components),
        },
    )
