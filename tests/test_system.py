"""Unit tests for the sparse equation system containers."""

import unittest

import sympy as sp

from lineqpad_pkg.system import EquationSystem


class TestEquationSystem(unittest.TestCase):
    def test_variable_index_allocation(self):
        system = EquationSystem()
        self.assertEqual(system.variable_index("x"), 0)
        self.assertEqual(system.variable_index("y"), 1)
        self.assertEqual(system.variable_index("x"), 0)
        self.assertEqual(system.number_of_variables, 2)

    def test_absent_entries_are_zero(self):
        system = EquationSystem()
        self.assertEqual(system.coefficient(3, 4), 0.0)
        self.assertEqual(system.constant(7), 0.0)

    def test_accumulation(self):
        system = EquationSystem()
        system.add_coefficient(0, 0, 1.5)
        system.add_coefficient(0, 0, 2.0)
        system.subtract_constant(0, 4.0)
        system.subtract_constant(0, -1.0)
        self.assertEqual(system.coefficient(0, 0), 3.5)
        self.assertEqual(system.constant(0), -3.0)

    def test_variable_names_ordered_by_index(self):
        system = EquationSystem()
        for name in ["b", "a", "c"]:
            system.variable_index(name)
        self.assertEqual(system.variable_names(), ["b", "a", "c"])

    def test_copy_is_independent(self):
        system = EquationSystem()
        system.add_coefficient(0, system.variable_index("x"), 1.0)
        clone = system.copy()
        self.assertEqual(clone, system)
        clone.add_coefficient(0, 0, 1.0)
        self.assertNotEqual(clone, system)

    def test_clear(self):
        system = EquationSystem()
        system.add_coefficient(0, system.variable_index("x"), 1.0)
        system.subtract_constant(0, 1.0)
        system.clear()
        self.assertEqual(system, EquationSystem())

    def test_to_matrices(self):
        system = EquationSystem()
        x = system.variable_index("x")
        y = system.variable_index("y")
        system.add_coefficient(0, x, 1.0)
        system.add_coefficient(0, y, 0.1)
        system.add_coefficient(1, x, -2.0)
        system.subtract_constant(0, -10.0)
        a_matrix, b_vector = system.to_matrices(2)
        self.assertEqual(a_matrix, sp.Matrix([[1, sp.Rational(1, 10)], [-2, 0]]))
        self.assertEqual(b_vector, sp.Matrix([10, 0]))


if __name__ == "__main__":
    unittest.main()
