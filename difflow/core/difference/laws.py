"""
Laws — conformance checks for difference types

The algebraic contract is not enforced by the type system: an addition that
disagrees with its zero test silently corrupts consolidation and retraction.
This module is the executable form of the contract, for use in test suites of
any concrete difference type.

Laws:
1. Zero identity      — T.zero().is_zero() and x + zero == x        (Monoid)
2. Negation inverse   — (-x) + x is zero                             (Abelian)
3. Associativity      — (x + y) + z == x + (y + z)                   (Semigroup)
4. Commutativity      — x + y == y + x         (Semigroup, COMMUTATIVE types)
5. Multiply purity    — x.multiply(v) mutates neither x nor v        (Multiply)

Every check works on clones; the samples passed in are never mutated.
"""

import copy
import itertools
import logging
from typing import Any, Iterable, Optional, Sequence

from pydantic import BaseModel, Field

from difflow.core.difference.capabilities import Abelian, Monoid, Multiply, Semigroup

logger = logging.getLogger(__name__)


# =============================================================================
# MODELS
# =============================================================================


class LawCheckConfig(BaseModel):
    """Which laws verify_laws() runs beyond the unconditional ones."""

    check_commutativity: bool = Field(
        True, description="Check x + y == y + x for types declaring COMMUTATIVE"
    )
    check_multiply_purity: bool = Field(
        True, description="Check multiply() against the given multiplicands"
    )
    multiplicands: tuple[Any, ...] = Field(
        (), description="Second operands for the multiply purity check"
    )

    model_config = {"frozen": True, "arbitrary_types_allowed": True}


class LawViolation(BaseModel):
    """A single failed law, with the operands rendered by repr()."""

    law: str = Field(..., min_length=1, description="Law name")
    type_name: str = Field(..., description="Difference type under test")
    operands: tuple[str, ...] = Field(..., description="repr() of the operands")
    details: str = Field("", description="Observed vs expected")

    model_config = {"frozen": True}


class LawReport(BaseModel):
    """Result of verify_laws()."""

    checks_run: int = Field(0, ge=0)
    violations: tuple[LawViolation, ...] = ()

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return not self.violations


# =============================================================================
# HELPERS
# =============================================================================


def accumulate(values: Iterable[Semigroup]) -> Semigroup:
    """
    Sum a non-empty iterable into a clone of its first element.

    Raises:
        ValueError: values is empty
    """
    iterator = iter(values)
    try:
        total = next(iterator).clone()
    except StopIteration:
        raise ValueError("accumulate() requires at least one value") from None
    for value in iterator:
        total.plus_equals(value)
    return total


def _violation(law: str, operands: Sequence[Any], details: str) -> LawViolation:
    return LawViolation(
        law=law,
        type_name=type(operands[0]).__name__,
        operands=tuple(repr(x) for x in operands),
        details=details,
    )


# =============================================================================
# INDIVIDUAL LAWS
# =============================================================================


def check_zero_identity(x: Monoid) -> Optional[LawViolation]:
    """T.zero() is zero, and adding it leaves x unchanged."""
    zero = type(x).zero()
    if not zero.is_zero():
        return _violation("zero_identity", [x], f"zero() = {zero!r} is not is_zero()")
    result = x.clone()
    result.plus_equals(zero)
    if result != x:
        return _violation("zero_identity", [x], f"x + zero = {result!r}")
    return None


def check_negation_inverse(x: Abelian) -> Optional[LawViolation]:
    """Negating x and adding the original back gives zero."""
    result = x.clone()
    result.negate()
    result.plus_equals(x)
    if not result.is_zero():
        return _violation("negation_inverse", [x], f"-x + x = {result!r}")
    return None


def check_associativity(x: Semigroup, y: Semigroup, z: Semigroup) -> Optional[LawViolation]:
    """(x + y) + z == x + (y + z)."""
    left = x.clone()
    left.plus_equals(y)
    left.plus_equals(z)

    inner = y.clone()
    inner.plus_equals(z)
    right = x.clone()
    right.plus_equals(inner)

    if left != right:
        return _violation(
            "associativity", [x, y, z], f"(x + y) + z = {left!r}, x + (y + z) = {right!r}"
        )
    return None


def check_commutativity(x: Semigroup, y: Semigroup) -> Optional[LawViolation]:
    """x + y == y + x."""
    left = x.clone()
    left.plus_equals(y)
    right = y.clone()
    right.plus_equals(x)
    if left != right:
        return _violation("commutativity", [x, y], f"x + y = {left!r}, y + x = {right!r}")
    return None


def check_multiply_purity(x: Multiply, rhs: Any) -> Optional[LawViolation]:
    """x.multiply(rhs) leaves both operands unchanged."""
    x_before = copy.deepcopy(x)
    rhs_before = copy.deepcopy(rhs)
    x.multiply(rhs)
    if x != x_before:
        return _violation("multiply_purity", [x, rhs], f"receiver became {x!r}")
    if rhs != rhs_before:
        return _violation("multiply_purity", [x, rhs], f"operand became {rhs!r}")
    return None


# =============================================================================
# SUITE
# =============================================================================


def verify_laws(
    samples: Sequence[Semigroup], config: Optional[LawCheckConfig] = None
) -> LawReport:
    """
    Run every law applicable to the samples' type.

    Unary laws run per sample, commutativity per ordered pair, associativity
    per ordered triple, so keep the sample set small.

    Args:
        samples: Values of one difference type
        config: Optional law selection (default: LawCheckConfig())

    Returns:
        LawReport with the number of checks run and any violations
    """
    config = config or LawCheckConfig()
    if not samples:
        return LawReport()

    diff_type = type(samples[0])
    violations: list[LawViolation] = []
    checks_run = 0

    def record(result: Optional[LawViolation]) -> None:
        nonlocal checks_run
        checks_run += 1
        if result is not None:
            logger.warning("Law %s violated by %s: %s", result.law, result.type_name, result.details)
            violations.append(result)

    for x in samples:
        if isinstance(x, Monoid):
            record(check_zero_identity(x))
        if isinstance(x, Abelian):
            record(check_negation_inverse(x))
        if config.check_multiply_purity and isinstance(x, Multiply):
            for rhs in config.multiplicands:
                record(check_multiply_purity(x, rhs))

    if config.check_commutativity and diff_type.COMMUTATIVE:
        for x, y in itertools.product(samples, repeat=2):
            record(check_commutativity(x, y))

    for x, y, z in itertools.product(samples, repeat=3):
        record(check_associativity(x, y, z))

    logger.debug(
        "Verified %d law checks for %s: %d violations",
        checks_run,
        diff_type.__name__,
        len(violations),
    )
    return LawReport(checks_run=checks_run, violations=tuple(violations))
