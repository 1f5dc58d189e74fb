"""Sparse containers for a system of linear equations ``A·x = b``.

The parser fills an :class:`EquationSystem` incrementally, one line at a time.
Entries are only ever added to or accumulated; nothing is removed while a
document is being parsed, and a variable keeps the index it was first given.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import sympy as sp


@dataclass
class EquationSystem:
    """Coefficient table, constant vector and variable index map.

    ``constants`` is the right-hand side ``b``. Every constant term is first
    signed as if moved to the left side of the equation and then subtracted,
    so ``x + y = 10`` stores ``10`` and ``x + 3 = 5`` stores ``-3 + 5 = 2``.
    """

    coefficients: dict[tuple[int, int], float] = field(default_factory=dict)
    constants: dict[int, float] = field(default_factory=dict)
    variables: dict[str, int] = field(default_factory=dict)

    def variable_index(self, name: str) -> int:
        """Return the index of ``name``, allocating the next free one if new."""
        index = self.variables.get(name)
        if index is None:
            index = len(self.variables)
            self.variables[name] = index
        return index

    def add_coefficient(self, equation: int, variable: int, value: float) -> None:
        key = (equation, variable)
        self.coefficients[key] = self.coefficients.get(key, 0.0) + value

    def subtract_constant(self, equation: int, value: float) -> None:
        self.constants[equation] = self.constants.get(equation, 0.0) - value

    def coefficient(self, equation: int, variable: int) -> float:
        return self.coefficients.get((equation, variable), 0.0)

    def constant(self, equation: int) -> float:
        return self.constants.get(equation, 0.0)

    def variable_names(self) -> list[str]:
        """Variable names ordered by their index."""
        return sorted(self.variables, key=self.variables.__getitem__)

    @property
    def number_of_variables(self) -> int:
        return len(self.variables)

    def clear(self) -> None:
        self.coefficients.clear()
        self.constants.clear()
        self.variables.clear()

    def copy(self) -> EquationSystem:
        return EquationSystem(
            coefficients=dict(self.coefficients),
            constants=dict(self.constants),
            variables=dict(self.variables),
        )

    def to_matrices(self, number_of_equations: int) -> tuple[sp.Matrix, sp.Matrix]:
        """Build exact SymPy matrices ``A`` and ``b`` for the first N equations.

        Floats are converted through their shortest repr, so ``0.1`` becomes
        ``1/10`` rather than its binary expansion.

        Args:
            number_of_equations: Number of rows to build

        Returns:
            Tuple (A, b) with A of shape (N, number_of_variables) and b of
            shape (N, 1)
        """
        rows = number_of_equations
        cols = self.number_of_variables
        a_matrix = sp.zeros(rows, cols)
        b_vector = sp.zeros(rows, 1)
        for (equation, variable), value in self.coefficients.items():
            if equation < rows and variable < cols:
                a_matrix[equation, variable] = _exact(value)
        for equation, value in self.constants.items():
            if equation < rows:
                b_vector[equation, 0] = _exact(value)
        return a_matrix, b_vector


def _exact(value: float) -> sp.Rational:
    return sp.Rational(repr(float(value)))
