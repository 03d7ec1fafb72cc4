"""Arithmetic operators and constants for symbolic regression."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from gpgomea.operators import NonInvertibleError, Operator, OperatorType

INTERNAL_STRATEGY_PARAMETER_TAU = 1e-1
INTERNAL_STRATEGY_PARAMETER_EPS = 1e-16


def _col(x: np.ndarray, column: int) -> np.ndarray:
    return np.asarray(x, dtype=np.float64)[:, column]


def _vec(values: np.ndarray) -> np.ndarray:
    return np.asarray(values, dtype=np.float64).reshape(-1)


def _sibling(siblings: np.ndarray) -> float:
    return float(_vec(siblings)[0])


def _or_impossible(values: np.ndarray) -> np.ndarray:
    """Return ``values``, or a single infinity when there are none."""
    values = _vec(values)
    if values.size == 0:
        return np.array([math.inf])
    return values


def _periodic_inverse(desired: np.ndarray, inverse) -> np.ndarray:
    """Apply ``inverse`` to values in [-1, 1], adding the +-2*pi shifts."""
    desired = _vec(desired)
    with np.errstate(all="ignore"):
        base = inverse(desired[np.abs(desired) <= 1.0])
    shifted = np.column_stack([base, base + 2 * math.pi, base - 2 * math.pi])
    return _or_impossible(shifted.ravel())


def _format_double(value: float) -> str:
    return f"{value:f}"


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


class _Function(Operator):
    type = OperatorType.FUNCTION


class Plus(_Function):
    """Addition."""

    arity = 2
    name = "+"
    is_arithmetic = True

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        return _col(x, 0) + _col(x, 1)

    def invert(self, desired: np.ndarray, siblings: np.ndarray, idx: int) -> np.ndarray:
        return _vec(desired) - _sibling(siblings)


class Minus(_Function):
    """Subtraction."""

    arity = 2
    name = "-"
    is_arithmetic = True

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        return _col(x, 0) - _col(x, 1)

    def invert(self, desired: np.ndarray, siblings: np.ndarray, idx: int) -> np.ndarray:
        # a - b = y: a = y + b, b = a - y
        if idx == 0:
            return _vec(desired) + _sibling(siblings)
        return _sibling(siblings) - _vec(desired)


class Times(_Function):
    """Multiplication."""

    arity = 2
    name = "*"
    is_arithmetic = True

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        return _col(x, 0) * _col(x, 1)

    def invert(self, desired: np.ndarray, siblings: np.ndarray, idx: int) -> np.ndarray:
        desired = _vec(desired)
        other = _sibling(siblings)
        if other == 0:
            # Any value works if zero is wanted; otherwise nothing does.
            return np.array([math.nan if np.any(desired == 0) else math.inf])
        return desired / other


class AnalyticQuotient(_Function):
    """Analytic quotient a / sqrt(1 + b^2)."""

    arity = 2
    name = "aq"
    _offset = 1.0

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        return _col(x, 0) / np.sqrt(self._offset + np.square(_col(x, 1)))

    def invert(self, desired: np.ndarray, siblings: np.ndarray, idx: int) -> np.ndarray:
        desired = _vec(desired)
        other = _sibling(siblings)
        if idx == 0:
            return desired * math.sqrt(self._offset + other * other)
        with np.errstate(all="ignore"):
            r = (other * other) / (desired * desired) - self._offset
            keep = (desired != 0) & ~(r < 0) & ~np.isinf(r)
            return _or_impossible(np.sqrt(r[keep]))


class AnalyticQuotient01(AnalyticQuotient):
    """Analytic quotient a / sqrt(0.1 + b^2)."""

    name = "aq0.1"
    _offset = 0.1

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        return super().compute_output(x)

    def invert(self, desired: np.ndarray, siblings: np.ndarray, idx: int) -> np.ndarray:
        return super().invert(desired, siblings, idx)

    def human_expression(self, args: Sequence[str]) -> str:
        return f"({args[0]}/ sqrt( 0.1 + ({args[1]})^2 ) ) "


class ProtectedDivision(_Function):
    """Division with the divisor's magnitude kept at least 1e-6."""

    arity = 2
    name = "p/"
    is_arithmetic = True

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        b = _col(x, 1)
        sign = np.where(b < 0, -1.0, 1.0)
        return sign * (_col(x, 0) / (1e-6 + np.abs(b)))


class Exp(_Function):
    """Exponential."""

    arity = 1
    name = "exp"

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        with np.errstate(over="ignore"):
            return np.exp(_col(x, 0))

    def invert(self, desired: np.ndarray, siblings: np.ndarray, idx: int) -> np.ndarray:
        desired = _vec(desired)
        return _or_impossible(np.log(desired[desired > 0]))


class Log(_Function):
    """Protected logarithm log|x|, with non-finite results set to zero."""

    arity = 1
    name = "plog"

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        with np.errstate(all="ignore"):
            res = np.log(np.abs(_col(x, 0)))
        res[~np.isfinite(res)] = 0.0
        return res

    def invert(self, desired: np.ndarray, siblings: np.ndarray, idx: int) -> np.ndarray:
        with np.errstate(all="ignore"):
            e = np.exp(_vec(desired))
        pairs = np.column_stack([e, -e]).ravel()
        return _or_impossible(pairs[np.isfinite(pairs)])


class AnalyticLog01(_Function):
    """Analytic logarithm log(sqrt(0.1 + x^2))."""

    arity = 1
    name = "alog0.1"

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        return np.log(np.sqrt(0.1 + np.square(_col(x, 0))))

    def invert(self, desired: np.ndarray, siblings: np.ndarray, idx: int) -> np.ndarray:
        raise NonInvertibleError("analytic log cannot be inverted")


class Sin(_Function):
    """Sine."""

    arity = 1
    name = "sin"

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        return np.sin(_col(x, 0))

    def invert(self, desired: np.ndarray, siblings: np.ndarray, idx: int) -> np.ndarray:
        return _periodic_inverse(desired, np.arcsin)


class Cos(_Function):
    """Cosine."""

    arity = 1
    name = "cos"

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        return np.cos(_col(x, 0))

    def invert(self, desired: np.ndarray, siblings: np.ndarray, idx: int) -> np.ndarray:
        return _periodic_inverse(desired, np.arccos)


class Tanh(_Function):
    """Hyperbolic tangent."""

    arity = 1
    name = "tanh"

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        return np.tanh(_col(x, 0))

    def invert(self, desired: np.ndarray, siblings: np.ndarray, idx: int) -> np.ndarray:
        return _periodic_inverse(desired, np.arctanh)


class Square(_Function):
    """Square."""

    arity = 1
    name = "^2"

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        return np.square(_col(x, 0))

    def invert(self, desired: np.ndarray, siblings: np.ndarray, idx: int) -> np.ndarray:
        desired = _vec(desired)
        return _or_impossible(np.sqrt(desired[desired >= 0]))

    def human_expression(self, args: Sequence[str]) -> str:
        return f"({args[0]}){self.name}"


class SquareRoot(_Function):
    """Square root of the absolute value."""

    arity = 1
    name = "sqrt"

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        return np.sqrt(np.abs(_col(x, 0)))

    def invert(self, desired: np.ndarray, siblings: np.ndarray, idx: int) -> np.ndarray:
        sq = np.square(_vec(desired))
        return np.concatenate([sq, -sq])


class RegressionConstant(Operator):
    """A numeric constant terminal.

    Built from ``value``, or from bounds ``lower`` and ``upper``, in which case
    the value is drawn uniformly, rounded to three decimals, on first use.
    """

    arity = 0
    type = OperatorType.TERM_CONSTANT

    def __init__(
        self,
        value: float | None = None,
        lower: float | None = None,
        upper: float | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        super().__init__()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.internal_strategy_parameter = math.nan
        if value is not None:
            value = float(value)
            if math.isinf(value):
                raise ValueError("a constant cannot be initialized to INF")
            if math.isnan(value):
                raise ValueError("a constant cannot be initialized to NAN")
            self.lower = self.upper = math.nan
        else:
            if lower is None or upper is None:
                raise ValueError("either a value or both bounds must be given")
            self.lower = float(lower)
            self.upper = float(upper)
            value = math.nan
        self.constant = value

    @property
    def constant(self) -> float:
        """The constant's value; NaN until drawn."""
        return self._constant

    @constant.setter
    def constant(self, value: float) -> None:
        self._constant = float(value)
        self.name = _format_double(self._constant)

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        if math.isnan(self._constant):
            drawn = self.rng.random() * (self.upper - self.lower) + self.lower
            self.constant = _round_half_away(drawn * 1e3) / 1e3
            self.internal_strategy_parameter = max(
                math.exp(self.rng.standard_normal() * INTERNAL_STRATEGY_PARAMETER_TAU),
                INTERNAL_STRATEGY_PARAMETER_EPS,
            )
        rows = np.asarray(x).shape[0]
        return np.full(rows, self._constant, dtype=np.float64)

    def human_expression(self, args: Sequence[str]) -> str:
        return self.name