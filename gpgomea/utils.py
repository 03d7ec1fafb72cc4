"""Numeric and string helpers shared across the package."""

from __future__ import annotations

import hashlib
import math
from collections.abc import Iterable, Sequence

import numpy as np


def replace_char_in_string(original: str, to_replace: str, replacing: str) -> str:
    """Return ``original`` with every ``to_replace`` character replaced."""
    return original.replace(to_replace, replacing)


def to_lower_case(original: str) -> str:
    """Return ``original`` in lower case."""
    return original.lower()


def split_string_by_char(original: str, splitc: str) -> list[str]:
    """Split on ``splitc`` and whitespace, dropping empty pieces."""
    if splitc != " ":
        original = replace_char_in_string(original, splitc, " ")
    return original.split()


def _as_vector(x: Iterable[float]) -> np.ndarray:
    return np.asarray(x, dtype=np.float64).reshape(-1)


def compute_mean_std(x: Iterable[float]) -> tuple[float, float]:
    """Return the mean and the population standard deviation of ``x``."""
    values = _as_vector(x)
    if values.size == 0:
        return math.nan, math.nan
    mean = float(values.mean())
    deviations = values - mean
    std = math.sqrt(float(np.sum(deviations * deviations)) / values.size)
    return mean, std


def normalize(x: Iterable[float]) -> np.ndarray:
    """Return ``x`` shifted to zero mean and scaled to unit standard deviation."""
    values = _as_vector(x)
    mean, std = compute_mean_std(values)
    with np.errstate(divide="ignore", invalid="ignore"):
        return (values - mean) / std


def hash_vector(x: Iterable[float]) -> int:
    """Return a stable hash of the values in ``x``.

    Equal vectors (with ``-0.0`` equal to ``0.0``) hash equally.
    """
    values = np.array(_as_vector(x), dtype="<f8")
    values = values + 0.0
    values[np.isnan(values)] = np.nan
    digest = hashlib.blake2b(values.tobytes(), digest_size=8).digest()
    return int.from_bytes(digest, "little")


def is_number(s: str) -> bool:
    """Tell whether ``s`` is an optional minus sign followed by digits and dots."""
    body = s[1:] if s.startswith("-") else s
    return bool(body) and all(c in "0123456789." for c in body)


def compute_linear_scaling_terms(
    p: Iterable[float],
    y: Iterable[float],
    mean_y: float | None = None,
    var_terms_y: Iterable[float] | None = None,
    mean_p: float | None = None,
    var_terms_p: Iterable[float] | None = None,
    denom_p: float | None = None,
) -> tuple[float, float]:
    """Return the intercept ``a`` and slope ``b`` that best map ``p`` onto ``y``.

    Any of the intermediate terms may be supplied when already known.
    """
    p = _as_vector(p)
    y = _as_vector(y)
    with np.errstate(divide="ignore", invalid="ignore"):
        if mean_y is None:
            mean_y = float(np.mean(y)) if y.size else math.nan
        var_y = y - mean_y if var_terms_y is None else _as_vector(var_terms_y)
        if mean_p is None:
            mean_p = float(np.mean(p)) if p.size else math.nan
        var_p = p - mean_p if var_terms_p is None else _as_vector(var_terms_p)
        if denom_p is None:
            denom_p = float(np.sum(var_p * var_p))

        if denom_p != 0:
            b = float(np.sum(var_y * var_p)) / denom_p
            a = mean_y - b * mean_p
        else:
            b = 0.0
            a = mean_y
    return float(a), float(b)


def _dont_care_match(
    x: Sequence[Iterable[float]], y: Iterable[float]
) -> tuple[float, np.ndarray]:
    """Return the don't-care distance and the query vector closest to ``y``.

    Each entry of ``x`` holds the acceptable values for one position; a NaN
    among them means any value is fine there.
    """
    target = _as_vector(y)
    query = np.full(len(x), np.inf)
    total = 0.0
    for i, (candidates, wanted) in enumerate(zip(x, target)):
        wanted = float(wanted)
        best = math.inf
        for value in _as_vector(candidates):
            value = float(value)
            if math.isnan(value):
                best = 0.0
                query[i] = wanted
                break
            diff = value - wanted
            distance = diff * diff
            if distance <= best:
                best = distance
                query[i] = value
        total += best
    return total, query


def compute_distance_with_dont_cares(
    x: Sequence[Iterable[float]], y: Iterable[float]
) -> float:
    """Return the squared distance from ``y`` to the closest choice among ``x``."""
    return _dont_care_match(x, y)[0]


def compute_distance(
    x: Iterable[float],
    y: Iterable[float],
    linear_scaling: bool = False,
    mean_y: float | None = None,
    var_terms_y: Iterable[float] | None = None,
    mean_p: float | None = None,
    var_terms_p: Iterable[float] | None = None,
    denom_p: float | None = None,
) -> float:
    """Return the squared Euclidean distance between ``x`` and ``y``.

    With ``linear_scaling`` the distance is taken after ``y`` is linearly
    fitted onto ``x``.
    """
    x = _as_vector(x)
    y = _as_vector(y)
    if linear_scaling:
        a, b = compute_linear_scaling_terms(
            y, x, mean_y, var_terms_y, mean_p, var_terms_p, denom_p
        )
        residual = x - (a + b * y)
    else:
        residual = x - y
    return float(np.sum(residual * residual))


def to_numpy_array(values: Iterable[float]) -> np.ndarray:
    """Return ``values`` as a new one-dimensional float64 array."""
    if not isinstance(values, np.ndarray):
        values = list(values)
    return np.array(values, dtype=np.float64).reshape(-1)


def to_matrix(array: np.ndarray) -> np.ndarray:
    """Return a contiguous copy of a two-dimensional float64 array.

    Raises TypeError for any other type, dtype or number of dimensions.
    """
    if not isinstance(array, np.ndarray):
        raise TypeError("expected a numpy array")
    if array.dtype != np.float64:
        raise TypeError("wrong data type")
    if array.ndim != 2:
        raise TypeError("wrong number of dimensions (2)")
    return np.array(array, dtype=np.float64, order="C")