"""Base class for tree operators and the input-variable terminal."""

from __future__ import annotations

import abc
import copy
import enum
from collections.abc import Sequence

import numpy as np


class OperatorType(enum.Enum):
    """Kind of an operator: a function, a variable or a constant."""

    FUNCTION = "function"
    TERM_VARIABLE = "variable"
    TERM_CONSTANT = "constant"


class NonInvertibleError(ArithmeticError):
    """Raised when an operator has no inverse for semantic backpropagation."""


class Operator(abc.ABC):
    """An operator placed at a node of an expression tree.

    ``compute_output`` receives a matrix whose columns are the outputs of the
    node's children, one row per data point.
    """

    arity: int = 0
    type: OperatorType = OperatorType.FUNCTION
    name: str = ""
    is_arithmetic: bool = False

    def __init__(self) -> None:
        self.id = 0

    def clone(self) -> Operator:
        """Return an independent copy of this operator."""
        return copy.copy(self)

    @abc.abstractmethod
    def compute_output(self, x: np.ndarray) -> np.ndarray:
        """Return the operator's output for each row of ``x``."""

    def invert(
        self, desired: np.ndarray, siblings: np.ndarray, idx: int
    ) -> np.ndarray:
        """Return the values child ``idx`` should take to produce ``desired``.

        ``siblings`` holds the output of the other child. Operators without an
        inverse raise NonInvertibleError.
        """
        raise NonInvertibleError(f"operator {self.name!r} cannot be inverted")

    def human_expression(self, args: Sequence[str]) -> str:
        """Return a readable expression of this operator applied to ``args``."""
        if self.arity == 0:
            return self.name
        if self.arity == 1:
            return f"{self.name}({args[0]})"
        return f"({args[0]}{self.name}{args[1]})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Variable(Operator):
    """Terminal that reads one column of the input data."""

    arity = 0
    type = OperatorType.TERM_VARIABLE

    def __init__(self, index: int) -> None:
        super().__init__()
        if index < 0:
            raise ValueError("variable index must not be negative")
        self.id = index
        self.name = f"x{index}"

    def compute_output(self, x: np.ndarray) -> np.ndarray:
        return np.array(np.asarray(x, dtype=np.float64)[:, self.id])

    def human_expression(self, args: Sequence[str]) -> str:
        return self.name