import numpy as np
import pytest

from gpgomea.operators import NonInvertibleError, OperatorType, Variable


@pytest.fixture
def data():
    return np.arange(12, dtype=np.float64).reshape(4, 3)


def test_variable_reads_its_column(data):
    out = Variable(2).compute_output(data)
    np.testing.assert_array_equal(out, data[:, 2])


def test_variable_output_is_a_copy(data):
    out = Variable(0).compute_output(data)
    out[0] = -100.0
    assert data[0, 0] == 0.0


def test_variable_name_and_kind():
    var = Variable(3)
    assert var.name == "x3"
    assert var.id == 3
    assert var.arity == 0
    assert var.type is OperatorType.TERM_VARIABLE


def test_variable_human_expression_ignores_args():
    assert Variable(1).human_expression([]) == "x1"
    assert Variable(1).human_expression(["a", "b"]) == "x1"


def test_clone_is_independent():
    original = Variable(4)
    copy = original.clone()
    copy.name = "renamed"
    assert original.name == "x4"
    assert copy.id == original.id
    assert type(copy) is Variable


def test_variable_cannot_be_inverted():
    with pytest.raises(NonInvertibleError):
        Variable(0).invert(np.array([1.0]), np.array([2.0]), 0)


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        Variable(-1)


def test_column_out_of_range(data):
    with pytest.raises(IndexError):
        Variable(7).compute_output(data)