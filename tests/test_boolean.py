import numpy as np
import pytest

from gpgomea.boolean import And, Nand, Nor, Not, Or, Xor
from gpgomea.operators import NonInvertibleError, OperatorType

PAIRS = np.array([[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]])


def test_and_truth_table():
    np.testing.assert_array_equal(And().compute_output(PAIRS), [0, 0, 0, 1])


def test_or_truth_table():
    np.testing.assert_array_equal(Or().compute_output(PAIRS), [0, 1, 1, 1])


def test_nand_is_negated_and():
    np.testing.assert_array_equal(
        Nand().compute_output(PAIRS), 1 - And().compute_output(PAIRS)
    )


def test_nor_is_negated_or():
    np.testing.assert_array_equal(
        Nor().compute_output(PAIRS), 1 - Or().compute_output(PAIRS)
    )


def test_xor_is_or_without_and():
    expected = Or().compute_output(PAIRS) * Nand().compute_output(PAIRS)
    np.testing.assert_array_equal(Xor().compute_output(PAIRS), expected)


def test_xor_of_equal_inputs_is_false():
    same = np.array([[0.0, 0.0], [1.0, 1.0], [5.0, -2.0]])
    np.testing.assert_array_equal(Xor().compute_output(same), np.zeros(3))


def test_not_twice_is_identity_on_bits():
    bits = np.array([[0.0], [1.0], [1.0], [0.0]])
    once = Not().compute_output(bits)
    twice = Not().compute_output(once.reshape(-1, 1))
    np.testing.assert_array_equal(twice, bits[:, 0])
    np.testing.assert_array_equal(once + bits[:, 0], np.ones(4))


def test_nonzero_values_count_as_true():
    x = np.array([[2.5, -3.0], [np.nan, 1.0]])
    np.testing.assert_array_equal(And().compute_output(x), np.ones(2))


def test_arity_and_kind():
    assert Not().arity == 1
    assert all(op.arity == 2 for op in (And(), Nand(), Or(), Nor(), Xor()))
    assert all(
        op.type is OperatorType.FUNCTION
        for op in (And(), Nand(), Or(), Nor(), Xor(), Not())
    )


def test_human_expressions():
    assert And().human_expression(["x0", "x1"]) == "(x0ANDx1)"
    assert Xor().human_expression(["a", "b"]) == "(aXORb)"
    assert Not().human_expression(["x0"]) == "NOT(x0)"


def test_boolean_operators_not_invertible():
    with pytest.raises(NonInvertibleError):
        Or().invert(np.array([1.0]), np.array([0.0]), 0)


def test_clone_keeps_class_and_name():
    clone = Nor().clone()
    assert type(clone) is Nor
    assert clone.name == "NOR"
    np.testing.assert_array_equal(
        clone.compute_output(PAIRS), Nor().compute_output(PAIRS)
    )