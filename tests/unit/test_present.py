"""
Tests for the presence marker

Verifies:
1. Never zero, addition is a no-op
2. No zero constructor and no negation
3. multiply returns a clone of its operand
4. Single value: equality, ordering, hashing, copying, pickling
"""

import copy
import pickle

import pytest

from difflow.core.difference import (
    Abelian,
    LawCheckConfig,
    Monoid,
    Multiply,
    Present,
    Semigroup,
    verify_laws,
)


class TestPresentAlgebra:
    def test_never_zero(self) -> None:
        assert Present().is_zero() is False

    def test_plus_equals_is_no_op(self) -> None:
        x = Present()
        x.plus_equals(Present())
        assert x == Present()
        assert not x.is_zero()

    def test_plus_equals_accepts_none(self) -> None:
        x = Present()
        x.plus_equals(None)
        assert x == Present()

    def test_plus_equals_rejects_other_values(self) -> None:
        with pytest.raises(TypeError):
            Present().plus_equals(1)

    def test_capabilities(self) -> None:
        assert isinstance(Present(), Semigroup)
        assert isinstance(Present(), Multiply)
        assert not isinstance(Present(), Monoid)
        assert not isinstance(Present(), Abelian)

    def test_no_zero_and_no_negate(self) -> None:
        assert not hasattr(Present, "zero")
        assert not hasattr(Present(), "negate")


class TestPresentMultiply:
    def test_returns_clone_of_operand(self) -> None:
        payload = {"name": "alice", "tags": ["a", "b"]}
        result = Present().multiply(payload)
        assert result == payload
        assert result is not payload
        assert result["tags"] is not payload["tags"]

    def test_operand_unchanged(self) -> None:
        payload = [1, 2, 3]
        result = Present().multiply(payload)
        result.append(4)
        assert payload == [1, 2, 3]

    @pytest.mark.parametrize("value", [0, "record", (1, "a"), None, 2.5])
    def test_identity_on_arbitrary_values(self, value: object) -> None:
        assert Present().multiply(value) == value


class TestPresentValueSemantics:
    def test_single_value(self) -> None:
        assert Present() is Present()
        assert Present().clone() is Present()

    def test_equality_and_hash(self) -> None:
        assert Present() == Present()
        assert Present() != 1
        assert len({Present(), Present()}) == 1

    def test_ordering(self) -> None:
        assert not Present() < Present()
        assert Present() <= Present()
        assert Present() >= Present()
        assert sorted([Present(), Present()]) == [Present(), Present()]

    def test_copy_and_pickle(self) -> None:
        assert copy.copy(Present()) is Present()
        assert copy.deepcopy(Present()) is Present()
        assert pickle.loads(pickle.dumps(Present())) is Present()

    def test_repr(self) -> None:
        assert repr(Present()) == "Present"


class TestPresentLaws:
    def test_laws(self) -> None:
        config = LawCheckConfig(multiplicands=(3, "record", (1, 2)))
        report = verify_laws([Present()], config)
        assert report.ok, report.violations
        # 3 multiply purity, 1 commutativity, 1 associativity
        assert report.checks_run == 5
