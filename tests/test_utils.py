import math

import numpy as np
import pytest

from gpgomea.utils import (
    compute_distance,
    compute_distance_with_dont_cares,
    compute_linear_scaling_terms,
    compute_mean_std,
    hash_vector,
    is_number,
    normalize,
    replace_char_in_string,
    split_string_by_char,
    to_lower_case,
    to_matrix,
    to_numpy_array,
)


def test_replace_char_in_string_replaces_every_occurrence():
    result = replace_char_in_string("a,b,,c", ",", " ")
    assert "," not in result
    assert result.split(" ") == ["a", "b", "", "c"]


def test_to_lower_case_is_case_insensitive():
    text = "MiXeD Case"
    assert to_lower_case(text) == to_lower_case(text.upper())
    assert to_lower_case(text).islower()


def test_split_string_by_space_drops_empty_pieces():
    parts = split_string_by_char("--silent   --logtofile log.txt", " ")
    assert parts == ["--silent", "--logtofile", "log.txt"]


def test_split_string_by_other_char():
    assert split_string_by_char("a;b;;c d", ";") == ["a", "b", "c", "d"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12", True),
        ("-3.5", True),
        ("1.2.3", True),
        ("", False),
        ("-", False),
        ("1e5", False),
        ("abc", False),
    ],
)
def test_is_number(text, expected):
    assert is_number(text) is expected


def test_normalize_gives_zero_mean_unit_std():
    result = normalize([1.0, 2.0, 3.0, 4.0, 10.0])
    mean, std = compute_mean_std(result)
    assert mean == pytest.approx(0.0, abs=1e-12)
    assert std == pytest.approx(1.0)


def test_mean_std_of_constant_vector():
    assert compute_mean_std([4.0, 4.0, 4.0]) == (4.0, 0.0)


def test_mean_std_accepts_list_and_array_alike():
    values = [1.5, -2.0, 7.25, 3.0]
    assert compute_mean_std(values) == compute_mean_std(np.array(values))


def test_mean_std_of_empty_is_nan():
    mean, std = compute_mean_std([])
    assert np.isnan([mean, std]).tolist() == [True, True]


def test_hash_vector_equal_for_equal_values():
    values = [1.0, 2.5, -3.0]
    assert hash_vector(values) == hash_vector(np.array(values))


def test_hash_vector_treats_negative_zero_as_zero():
    assert hash_vector([0.0, 1.0]) == hash_vector([-0.0, 1.0])


def test_hash_vector_stable_with_nan():
    first = hash_vector([float("nan"), 1.0])
    assert first == hash_vector(np.array([float("nan"), 1.0]))
    assert first != hash_vector([0.0, 1.0])


def test_hash_vector_differs_for_different_values():
    assert hash_vector([1.0, 2.0]) != hash_vector([2.0, 1.0])


def test_linear_scaling_recovers_affine_map():
    p = np.array([0.0, 1.0, 2.0, 5.0])
    y = 2.0 + 3.0 * p
    a, b = compute_linear_scaling_terms(p, y)
    assert a == pytest.approx(2.0)
    assert b == pytest.approx(3.0)


def test_linear_scaling_constant_prediction_gives_zero_slope():
    y = np.array([1.0, 4.0, 7.0])
    a, b = compute_linear_scaling_terms(np.array([5.0, 5.0, 5.0]), y)
    assert b == 0.0
    assert a == pytest.approx(float(np.mean(y)))


def test_linear_scaling_precomputed_terms_agree():
    p = np.array([0.5, 1.5, -2.0, 4.0])
    y = np.array([3.0, -1.0, 2.0, 8.0])
    mean_y = float(np.mean(y))
    mean_p = float(np.mean(p))
    var_p = p - mean_p
    full = compute_linear_scaling_terms(
        p, y, mean_y, y - mean_y, mean_p, var_p, float(np.sum(var_p * var_p))
    )
    assert full == pytest.approx(compute_linear_scaling_terms(p, y))


def test_distance_to_self_is_zero_and_symmetric():
    a = np.array([1.0, -2.0, 3.5])
    b = np.array([0.0, 4.0, -1.0])
    assert compute_distance(a, a) == 0.0
    assert compute_distance(a, b) == compute_distance(b, a)
    assert compute_distance(a, b) > 0.0


def test_distance_with_linear_scaling_ignores_affine_transform():
    x = np.array([1.0, 2.0, 3.0, 7.0])
    assert compute_distance(x, 2.0 * x + 1.0, linear_scaling=True) == pytest.approx(
        0.0, abs=1e-12
    )


def test_dont_cares_single_candidates_match_plain_distance():
    x = np.array([1.0, -2.0, 3.5])
    y = np.array([0.0, 4.0, -1.0])
    candidates = [[value] for value in x]
    assert compute_distance_with_dont_cares(candidates, y) == pytest.approx(
        compute_distance(x, y)
    )


def test_dont_cares_nan_means_anything_goes():
    assert compute_distance_with_dont_cares([[float("nan")], [1.0]], [5.0, 1.0]) == 0.0


def test_dont_cares_pick_closest_candidate():
    assert compute_distance_with_dont_cares([[0.0, 3.0]], [3.0]) == 0.0


def test_dont_cares_without_candidates_is_infinite():
    assert compute_distance_with_dont_cares([[]], [1.0]) == math.inf


def test_to_numpy_array_is_flat_float64():
    result = to_numpy_array([1, 2, 3])
    assert result.dtype == np.float64
    assert result.tolist() == [1.0, 2.0, 3.0]


def test_to_matrix_copies_strided_input():
    source = np.arange(6, dtype=np.float64).reshape(2, 3).T
    result = to_matrix(source)
    assert np.array_equal(result, source)
    result[0, 0] = 100.0
    assert source[0, 0] == 0.0


def test_to_matrix_rejects_wrong_dtype():
    with pytest.raises(TypeError):
        to_matrix(np.zeros((2, 2), dtype=np.int64))


def test_to_matrix_rejects_wrong_dimensions():
    with pytest.raises(TypeError):
        to_matrix(np.zeros(3))


def test_to_matrix_rejects_non_arrays():
    with pytest.raises(TypeError):
        to_matrix([[1.0, 2.0]])