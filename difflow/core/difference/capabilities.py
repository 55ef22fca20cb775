"""
Capabilities — algebraic contracts for difference values

A difference is the accumulation an incremental computation keeps per record:
most commonly a signed count, but it generalizes to any map from records to an
Abelian group (for example, a count together with a weighted sum, from which an
average can be derived at read time).

Capability tiers:
- IsZero     — identity test, independent of addition
- Semigroup  — in-place addition (requires clone + IsZero)
- Monoid     — Semigroup + zero constructor
- Abelian    — Monoid + in-place negation
- Multiply   — independent: combine with a value of another type

CRITICAL INVARIANTS:
1. x.plus_equals(T.zero()) leaves x unchanged (Monoid)
2. x.negate(); x.plus_equals(original) → x.is_zero() (Abelian)
3. plus_equals mutates only the receiver, multiply mutates neither operand
4. Addition is associative, with a light presumption of commutativity
"""

import abc
import copy
from typing import Any, ClassVar


# =============================================================================
# IS ZERO
# =============================================================================


class IsZero(abc.ABC):
    """
    A type that can report whether a value acts as the additive identity.

    Extracted from Semigroup so that addition can depend on a zero test without
    requiring a constructible zero element: a semigroup is not obligated to
    have one, and is_zero() may always return False in that setting.
    """

    __slots__ = ()

    @abc.abstractmethod
    def is_zero(self) -> bool:
        """
        True if the value is the additive identity.

        Used by consolidation to know when an update can be discarded: a
        difference that accumulates to zero has no effect on any accumulation.
        """


# =============================================================================
# SEMIGROUP
# =============================================================================


class Semigroup(IsZero):
    """
    A type with in-place addition and a test for zero.

    The minimal requirement for a difference. Addition lets updates to the
    same data be compacted; the zero test lets updates with no effect retire.

    Addition is mostly performed in timestamp order, but many timestamps have
    no total order, so there is a light presumption of commutativity.
    Non-commutative types must declare COMMUTATIVE = False.
    """

    __slots__ = ()

    COMMUTATIVE: ClassVar[bool] = True

    def plus_equals(self, rhs: Any) -> None:
        """
        Add rhs into self, in place. rhs is left unchanged.

        rhs may be a value of this type or anything coerce() accepts; every
        form forwards to the same _plus_equals.
        """
        self._plus_equals(type(self).coerce(rhs))

    @abc.abstractmethod
    def _plus_equals(self, rhs: "Semigroup") -> None:
        """Canonical addition with an operand of exactly this type."""

    @classmethod
    def coerce(cls, value: Any) -> "Semigroup":
        """Return value if it is an instance of cls, otherwise build one."""
        if isinstance(value, cls):
            return value
        return cls(value)

    def clone(self) -> "Semigroup":
        """Independently owned copy."""
        return copy.deepcopy(self)

    @classmethod
    def type_reference(cls) -> Any:
        """
        Picklable stand-in for this class.

        Classes importable by name are their own reference; classes built by
        a cached factory return a TypeReference that calls the factory again.
        """
        return cls


# =============================================================================
# MONOID / ABELIAN
# =============================================================================


class Monoid(Semigroup):
    """A semigroup with an explicit zero element."""

    __slots__ = ()

    @classmethod
    @abc.abstractmethod
    def zero(cls) -> "Monoid":
        """Zero element under plus_equals."""


class Abelian(Monoid):
    """
    A Monoid with negation.

    Several operators need negation to retract prior outputs, but not quite as
    many as one might imagine; most only ever add.
    """

    __slots__ = ()

    @abc.abstractmethod
    def negate(self) -> None:
        """Negate in place."""


# =============================================================================
# MULTIPLY
# =============================================================================


class Multiply(abc.ABC):
    """
    Combination of a difference with a value of a (possibly) different type.

    Used when a difference is applied to, or weighted against, a data value.
    Not required to be commutative or to have an identity.
    """

    __slots__ = ()

    @abc.abstractmethod
    def multiply(self, rhs: Any) -> Any:
        """Return a new owned output; neither self nor rhs is mutated."""


# =============================================================================
# PICKLING
# =============================================================================


class TypeReference:
    """
    Pickles as factory(*args), so unpickling yields the class the factory
    returns for those arguments.
    """

    __slots__ = ("factory", "args")

    def __init__(self, factory: Any, args: tuple) -> None:
        self.factory = factory
        self.args = args

    def resolve(self) -> type:
        """The class, without a pickle round trip (e.g. under copy.copy)."""
        args = tuple(a.resolve() if isinstance(a, TypeReference) else a for a in self.args)
        return self.factory(*args)

    def __reduce__(self) -> tuple:
        return (self.factory, self.args)

    def __repr__(self) -> str:
        return f"TypeReference({self.factory.__name__}, {self.args!r})"


def capabilities_of(cls: type) -> tuple[type, ...]:
    """
    Capability tiers implemented by a difference type, strongest first.

    Examples:
        capabilities_of(I64)     → (Abelian, Monoid, Semigroup, IsZero, Multiply)
        capabilities_of(Present) → (Semigroup, IsZero, Multiply)
    """
    tiers = [c for c in (Abelian, Monoid, Semigroup, IsZero) if issubclass(cls, c)]
    if issubclass(cls, Multiply):
        tiers.append(Multiply)
    return tuple(tiers)
