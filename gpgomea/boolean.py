"""Boolean function operators working on 0/1 data."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from gpgomea.operators import Operator, OperatorType


def _truth(x: np.ndarray, column: int) -> np.ndarray:
    # Any nonzero value, NaN included, counts as true.
    return np.asarray(x, dtype=np.float64)[:, column] != 0


class _BooleanOperator(Operator):
    type = OperatorType.FUNCTION
    arity = 2


class And(_BooleanOperator):
    """Logical conjunction."""

    name = "AND"

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        return (_truth(x, 0) & _truth(x, 1)).astype(np.float64)


class Nand(_BooleanOperator):
    """Negated conjunction."""

    name = "NAND"

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        return (~(_truth(x, 0) & _truth(x, 1))).astype(np.float64)


class Or(_BooleanOperator):
    """Logical disjunction."""

    name = "OR"

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        return (_truth(x, 0) | _truth(x, 1)).astype(np.float64)


class Nor(_BooleanOperator):
    """Negated disjunction."""

    name = "NOR"

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        return (~(_truth(x, 0) | _truth(x, 1))).astype(np.float64)


class Xor(_BooleanOperator):
    """Exclusive disjunction."""

    name = "XOR"

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        a = _truth(x, 0)
        b = _truth(x, 1)
        return ((a | b) & ~(a & b)).astype(np.float64)


class Not(_BooleanOperator):
    """Logical negation."""

    name = "NOT"
    arity = 1

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        return (~_truth(x, 0)).astype(np.float64)

    def human_expression(self, args: Sequence[str]) -> str:
        return f"{self.name}({args[0]})"