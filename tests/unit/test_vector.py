"""
Tests for sequence composition

Verifies:
1. Ragged plus_equals: pairwise sums, then clones of the unmatched tail
2. is_zero / zero / negate / multiply
3. Capabilities follow the element type
4. Sequence protocol, value semantics and the algebraic laws
5. A trapping element leaves the receiver unchanged
6. Pickling, including nested composite elements
"""

import copy
import pickle

import pytest

from difflow.core.difference import (
    I8,
    I32,
    I64,
    U8,
    Abelian,
    DiffVec,
    IntegerOverflowError,
    Monoid,
    Multiply,
    Present,
    Semigroup,
    tuple_of,
    vec_of,
    verify_laws,
)

Counts = vec_of(I32)


# =============================================================================
# RAGGED ADDITION
# =============================================================================


class TestVectorPlusEquals:
    def test_right_longer_appends_tail(self) -> None:
        acc = Counts([1, 2, 3])
        acc.plus_equals(Counts([1, 1, 1, 1]))
        assert acc == Counts([2, 3, 4, 1])

    def test_equal_lengths(self) -> None:
        acc = Counts([5, 5])
        acc.plus_equals(Counts([1, 2]))
        assert acc == Counts([6, 7])

    def test_empty_left_clones_everything(self) -> None:
        acc = Counts()
        acc.plus_equals(Counts([9, 9]))
        assert acc == Counts([9, 9])

    def test_left_longer_keeps_length(self) -> None:
        acc = Counts([1, 2, 3])
        acc.plus_equals(Counts([1]))
        assert acc == Counts([2, 2, 3])

    def test_empty_right_is_no_op(self) -> None:
        acc = Counts([1, 2])
        acc.plus_equals(Counts())
        assert acc == Counts([1, 2])

    def test_length_is_max_of_operands(self) -> None:
        for left, right in [(0, 3), (2, 5), (4, 1), (3, 3)]:
            acc = Counts([1] * left)
            acc.plus_equals([1] * right)
            assert len(acc) == max(left, right)

    @pytest.mark.parametrize("operand", [[1, 1, 1, 1], (1, 1, 1, 1), Counts([1, 1, 1, 1])])
    def test_any_sequence_operand_forwards(self, operand: object) -> None:
        acc = Counts([1, 2, 3])
        acc.plus_equals(operand)
        assert acc == Counts([2, 3, 4, 1])

    def test_operand_unchanged(self) -> None:
        rhs = Counts([1, 1, 1, 1])
        Counts([1, 2, 3]).plus_equals(rhs)
        assert rhs == Counts([1, 1, 1, 1])

    def test_appended_elements_are_clones(self) -> None:
        rhs = Counts([7, 8])
        acc = Counts()
        acc.plus_equals(rhs)
        acc[0].plus_equals(100)
        assert rhs == Counts([7, 8])
        assert acc == Counts([107, 8])

    def test_self_addition(self) -> None:
        acc = Counts([1, 2])
        acc.plus_equals(acc)
        assert acc == Counts([2, 4])

    def test_other_vector_type_rejected(self) -> None:
        with pytest.raises(TypeError):
            Counts([1]).plus_equals(vec_of(I64)([1]))

    def test_presence_vector_grows(self) -> None:
        Marks = vec_of(Present)
        acc = Marks([Present()])
        acc.plus_equals([Present(), Present()])
        assert len(acc) == 2
        assert not acc.is_zero()


# =============================================================================
# REMAINING CAPABILITIES
# =============================================================================


class TestVectorIsZero:
    def test_empty_is_zero(self) -> None:
        assert Counts().is_zero()

    def test_all_zero_elements(self) -> None:
        assert Counts([0, 0, 0]).is_zero()

    def test_any_non_zero_element(self) -> None:
        assert not Counts([0, 1]).is_zero()


class TestVectorZeroNegateMultiply:
    def test_zero_is_empty(self) -> None:
        assert Counts.zero() == Counts()
        assert len(Counts.zero()) == 0

    def test_negate_every_element(self) -> None:
        value = Counts([1, -2, 0])
        value.negate()
        assert value == Counts([-1, 2, 0])

    def test_multiply_maps_rhs(self) -> None:
        assert Counts([1, 2, 3]).multiply(2) == [I32(2), I32(4), I32(6)]

    def test_multiply_empty(self) -> None:
        assert Counts().multiply(I32(5)) == []

    def test_multiply_operands_unchanged(self) -> None:
        value = Counts([1, 2])
        rhs = I32(3)
        value.multiply(rhs)
        assert value == Counts([1, 2])
        assert rhs == I32(3)

    def test_presence_multiply_clones_payload(self) -> None:
        payload = ["row"]
        result = vec_of(Present)([Present(), Present()]).multiply(payload)
        assert result == [["row"], ["row"]]
        assert result[0] is not payload


class TestVectorCapabilities:
    def test_signed_elements(self) -> None:
        assert issubclass(Counts, Abelian)
        assert issubclass(Counts, Multiply)

    def test_unsigned_elements(self) -> None:
        unsigned = vec_of(U8)
        assert issubclass(unsigned, Monoid)
        assert not issubclass(unsigned, Abelian)

    def test_presence_elements(self) -> None:
        marks = vec_of(Present)
        assert issubclass(marks, Semigroup)
        assert issubclass(marks, Multiply)
        assert not issubclass(marks, Monoid)

    def test_tuple_elements(self) -> None:
        assert issubclass(vec_of(tuple_of(I64, I64)), Abelian)

    def test_factory_cached(self) -> None:
        assert vec_of(I32) is Counts

    def test_non_difference_element(self) -> None:
        with pytest.raises(TypeError):
            vec_of(str)


# =============================================================================
# VALUE SEMANTICS
# =============================================================================


class TestVectorValueSemantics:
    def test_sequence_protocol(self) -> None:
        value = Counts([4, 5, 6])
        assert isinstance(value, DiffVec)
        assert len(value) == 3
        assert value[1] == I32(5)
        assert value[-1] == I32(6)
        assert list(value) == [I32(4), I32(5), I32(6)]
        assert I32(5) in value
        assert value.index(I32(6)) == 2

    def test_slice_returns_same_type(self) -> None:
        assert Counts([4, 5, 6])[1:] == Counts([5, 6])

    def test_nested_tuples(self) -> None:
        Pairs = vec_of(tuple_of(I64, I64))
        acc = Pairs([(1, 10)])
        acc.plus_equals([(1, 20), (1, 30)])
        assert acc == Pairs([(2, 30), (1, 30)])

    def test_clone_is_independent(self) -> None:
        original = Counts([1, 2])
        copy = original.clone()
        copy.plus_equals([1, 1, 1])
        assert original == Counts([1, 2])
        assert copy == Counts([2, 3, 1])

    def test_ordering_and_hashing(self) -> None:
        assert Counts([1, 2]) < Counts([1, 3])
        assert Counts([1]) < Counts([1, 0])
        assert hash(Counts([1, 2])) == hash(Counts([1, 2]))
        assert len({Counts([1, 2]), Counts([1, 2]), Counts()}) == 2

    def test_equality_is_per_type(self) -> None:
        assert Counts([1]) != vec_of(I64)([1])
        assert Counts([1]) != [I32(1)]

    def test_repr(self) -> None:
        assert repr(Counts([1, 2])) == "Vec[I32]([I32(1), I32(2)])"


class TestVectorLaws:
    def test_laws(self) -> None:
        samples = [Counts(), Counts([1]), Counts([1, -2, 3]), Counts([0, 5])]
        report = verify_laws(samples)
        assert report.ok, report.violations

    def test_laws_presence_elements(self) -> None:
        Marks = vec_of(Present)
        samples = [Marks(), Marks([Present()]), Marks([Present(), Present()])]
        report = verify_laws(samples)
        assert report.ok, report.violations


# =============================================================================
# TRAPS
# =============================================================================


class TestVectorTraps:
    def test_overflow_leaves_receiver_unchanged(self) -> None:
        Small = vec_of(I8)
        acc = Small([1, 127])
        with pytest.raises(IntegerOverflowError):
            acc.plus_equals([1, 1, 5])
        assert acc == Small([1, 127])

    def test_unsigned_overflow_leaves_receiver_unchanged(self) -> None:
        Unsigned = vec_of(U8)
        acc = Unsigned([3, 250])
        with pytest.raises(IntegerOverflowError):
            acc.plus_equals([1, 10])
        assert acc == Unsigned([3, 250])

    def test_negate_overflow_leaves_receiver_unchanged(self) -> None:
        Small = vec_of(I8)
        acc = Small([5, -128])
        with pytest.raises(IntegerOverflowError):
            acc.negate()
        assert acc == Small([5, -128])


# =============================================================================
# PICKLING
# =============================================================================


class TestVectorPickling:
    def test_round_trip(self) -> None:
        value = Counts([1, 2])
        restored = pickle.loads(pickle.dumps(value))
        assert restored == value
        assert type(restored) is Counts

    def test_empty(self) -> None:
        assert pickle.loads(pickle.dumps(Counts())) == Counts()

    def test_presence_elements(self) -> None:
        Marks = vec_of(Present)
        value = Marks([Present(), Present()])
        assert pickle.loads(pickle.dumps(value)) == value

    def test_nested_composites(self) -> None:
        Nested = vec_of(tuple_of(I64, vec_of(I32)))
        value = Nested([(1, [2, 3]), (4, [])])
        restored = pickle.loads(pickle.dumps(value))
        assert restored == value
        assert type(restored) is Nested

    def test_restored_value_accumulates(self) -> None:
        restored = pickle.loads(pickle.dumps(Counts([1, 2, 3])))
        restored.plus_equals([1, 1, 1, 1])
        assert restored == Counts([2, 3, 4, 1])

    def test_shallow_copy(self) -> None:
        value = vec_of(tuple_of(I64, I64))([(1, 2)])
        duplicate = copy.copy(value)
        assert duplicate == value
        assert type(duplicate) is type(value)
