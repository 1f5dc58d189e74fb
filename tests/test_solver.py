"""Unit tests for solver module."""

import unittest

import sympy as sp

from lineqpad_pkg import config
from lineqpad_pkg.parser import ParserSession, parse_line
from lineqpad_pkg.solver import condition_number, solve_linear_system
from lineqpad_pkg.system import EquationSystem
from lineqpad_pkg.types import SolverError, SolverStatus


def build(lines):
    session = ParserSession()
    system = EquationSystem()
    count = 0
    for line in lines:
        outcome, count = parse_line(line, session, system)
        assert outcome.ok, (line, outcome)
    return system, count


class TestSolveLinearSystem(unittest.TestCase):
    def test_two_by_two(self):
        system, count = build(["x + y = 10", "x - y = 2"])
        status, solution = solve_linear_system(system, count)
        self.assertEqual(status, SolverStatus.SUCCESS)
        self.assertEqual(solution, {0: 6.0, 1: 4.0})

    def test_three_by_three(self):
        system, count = build(
            ["2x + y - z = 8", "-3x - y + 2z = -11", "-2x + y + 2z = -3"]
        )
        status, solution = solve_linear_system(system, count)
        self.assertEqual(status, SolverStatus.SUCCESS)
        self.assertAlmostEqual(solution[system.variables["x"]], 2.0)
        self.assertAlmostEqual(solution[system.variables["y"]], 3.0)
        self.assertAlmostEqual(solution[system.variables["z"]], -1.0)

    def test_decimal_coefficients(self):
        system, count = build(["0.1a + 0.2b = 0.3", "a - b = 0"])
        status, solution = solve_linear_system(system, count)
        self.assertEqual(status, SolverStatus.SUCCESS)
        self.assertEqual(solution, {0: 1.0, 1: 1.0})

    def test_singular(self):
        system, count = build(["x + y = 1", "2x + 2y = 2"])
        status, solution = solve_linear_system(system, count)
        self.assertEqual(status, SolverStatus.SINGULAR)
        self.assertEqual(solution, {})

    def test_ill_conditioned(self):
        system, count = build(["x + y = 1", "x + 1.0000000000001y = 2"])
        status, solution = solve_linear_system(system, count)
        self.assertEqual(status, SolverStatus.ILL_CONDITIONED)
        self.assertEqual(solution, {})

    def test_condition_limit_is_configurable(self):
        system, count = build(["x + y = 1", "x + 1.0000000000001y = 2"])
        original = config.CONDITION_LIMIT
        config.CONDITION_LIMIT = float("inf")
        try:
            status, _ = solve_linear_system(system, count)
        finally:
            config.CONDITION_LIMIT = original
        self.assertEqual(status, SolverStatus.SUCCESS)

    def test_not_square(self):
        system, count = build(["x + y = 1"])
        with self.assertRaises(SolverError) as ctx:
            solve_linear_system(system, count)
        self.assertEqual(ctx.exception.code, "NOT_SQUARE")

    def test_no_equations(self):
        with self.assertRaises(SolverError) as ctx:
            solve_linear_system(EquationSystem(), 0)
        self.assertEqual(ctx.exception.code, "NO_EQUATIONS")


class TestConditionNumber(unittest.TestCase):
    def test_identity(self):
        self.assertEqual(condition_number(sp.eye(3)), 1.0)

    def test_diagonal(self):
        self.assertEqual(condition_number(sp.diag(1, 100)), 100.0)


if __name__ == "__main__":
    unittest.main()
