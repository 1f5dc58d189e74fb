"""Fuzzing tests for the parser and document API with random inputs."""

import random
import string
import unittest

from lineqpad_pkg.api import solve_document
from lineqpad_pkg.parser import ParserSession, parse_line
from lineqpad_pkg.system import EquationSystem
from lineqpad_pkg.types import ParseOutcome, SolveResult


class TestParserFuzzing(unittest.TestCase):
    """Fuzz test parser with random inputs."""

    def test_random_strings(self):
        """Random garbage always yields a status, never an exception."""
        rng = random.Random(1234)
        for _ in range(300):
            length = rng.randint(0, 60)
            line = "".join(rng.choices(string.printable, k=length))
            session = ParserSession()
            system = EquationSystem()
            outcome, count = parse_line(line, session, system)
            self.assertIsInstance(outcome, ParseOutcome)
            self.assertGreaterEqual(outcome.position, 0)
            self.assertLessEqual(outcome.position, len(line))
            self.assertIn(count, (0, 1))

    def test_random_equation_alphabet(self):
        """Lines built from the equation alphabet keep indices contiguous."""
        rng = random.Random(99)
        alphabet = "xyz_ab0123456789.^+-= "
        session = ParserSession()
        system = EquationSystem()
        for _ in range(300):
            line = "".join(rng.choices(alphabet, k=rng.randint(0, 30)))
            outcome, _ = parse_line(line, session, system)
            if outcome.status.is_error:
                session.reset_for_new_equation()
        self.assertEqual(
            sorted(system.variables.values()), list(range(len(system.variables)))
        )

    def test_malformed_equations(self):
        malformed = ["(((", "x++y", "x^", "*/x", "", "   ", "==", "1..2", "^2"]
        for line in malformed:
            outcome, _ = parse_line(line, ParserSession(), EquationSystem())
            self.assertIsInstance(outcome, ParseOutcome)


class TestDocumentFuzzing(unittest.TestCase):
    def test_random_documents(self):
        rng = random.Random(7)
        alphabet = "xy0123456789.+-= \n"
        for _ in range(100):
            text = "".join(rng.choices(alphabet, k=rng.randint(0, 40)))
            result = solve_document(text)
            self.assertIsInstance(result, SolveResult)
            if not result.ok:
                self.assertIsNotNone(result.error_code)


if __name__ == "__main__":
    unittest.main()
