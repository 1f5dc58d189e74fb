"""Solver for the square linear systems built by the parser.

The system is solved exactly with SymPy rational arithmetic: floats from the
parser are converted to rationals, the determinant decides singularity, the
infinity-norm condition number decides ill-conditioning, and the solution is
found by LU decomposition and converted back to floats.
"""

from __future__ import annotations

from typing import Dict, Tuple

import sympy as sp

from . import config
from .logging_config import get_logger
from .system import EquationSystem
from .types import SolverError, SolverStatus

logger = get_logger("solver")


def _infinity_norm(matrix: sp.Matrix) -> sp.Expr:
    """Maximum absolute row sum."""
    return max(
        sum(abs(matrix[i, j]) for j in range(matrix.cols)) for i in range(matrix.rows)
    )


def condition_number(a_matrix: sp.Matrix) -> float:
    """Infinity-norm condition number of a non-singular square matrix."""
    return float(_infinity_norm(a_matrix) * _infinity_norm(a_matrix.inv()))


def solve_linear_system(
    system: EquationSystem, number_of_equations: int
) -> Tuple[SolverStatus, Dict[int, float]]:
    """
    Solve ``A·x = b`` for the equations collected in ``system``.

    Args:
        system: Equation system filled by the parser
        number_of_equations: Number of completed equations

    Returns:
        Tuple (status, solution) where solution maps variable index to value.
        The solution is empty unless status is SolverStatus.SUCCESS.

    Raises:
        SolverError: If the system is empty or not square
    """
    n = number_of_equations
    if n <= 0:
        raise SolverError("No equations to solve.", code="NO_EQUATIONS")
    if n != system.number_of_variables:
        raise SolverError(
            f"System has {n} equations and {system.number_of_variables} variables.",
            code="NOT_SQUARE",
        )

    a_matrix, b_vector = system.to_matrices(n)
    if a_matrix.det() == 0:
        logger.warning("Singular system of %d equations", n)
        return SolverStatus.SINGULAR, {}

    cond = condition_number(a_matrix)
    if cond > config.CONDITION_LIMIT:
        logger.warning(
            "Ill-conditioned system of %d equations (condition number %g)", n, cond
        )
        return SolverStatus.ILL_CONDITIONED, {}

    x_vector = a_matrix.LUsolve(b_vector)
    logger.debug("Solved system of %d equations (condition number %g)", n, cond)
    return SolverStatus.SUCCESS, {i: float(x_vector[i, 0]) for i in range(n)}
