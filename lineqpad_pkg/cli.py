from __future__ import annotations

import argparse
import json
import sys
from typing import Iterable

from . import config
from .api import format_solutions, solve_document
from .config import EQUATION_SEPARATOR, VERSION
from .logging_config import get_logger
from .types import SolveResult

logger = get_logger("cli")

REPL_SOLVE_COMMANDS = {"solve", "go"}
REPL_EXIT_COMMANDS = {"quit", "exit"}
REPL_CLEAR_COMMANDS = {"clear", "reset"}


def print_result(result: SolveResult, output_format: str = "human") -> None:
    """Print a solve result as JSON or as ``name = value`` lines."""
    if output_format == "json":
        print(json.dumps(result.to_dict(), ensure_ascii=False))
        return
    print(format_solutions(result))


def _solve_and_print(lines: Iterable[str], output_format: str) -> int:
    result = solve_document(list(lines))
    print_result(result, output_format)
    return 0 if result.ok else 1


def _split_eval_text(text: str) -> list[str]:
    """Equations given with --eval may be separated by newlines or ';'."""
    lines: list[str] = []
    for line in text.splitlines():
        lines.extend(line.split(EQUATION_SEPARATOR))
    return lines


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running lineqpad health check...")
    print("-" * 50)

    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    try:
        from .parser import LinearEquationParser
        from .system import EquationSystem

        system = EquationSystem()
        outcome = LinearEquationParser().parse("2x + 3y = 8", system)
        if outcome.ok and system.coefficients == {(0, 0): 2.0, (0, 1): 3.0}:
            print("[OK] Basic parsing works")
            checks_passed += 1
        else:
            print(f"[FAIL] Basic parsing failed: {outcome!r} {system!r}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Parsing check failed: {e}")
        checks_failed += 1

    try:
        result = solve_document(["x + y = 10", "x - y = 2"])
        if result.ok and result.solutions == {"x": 6.0, "y": 4.0}:
            print("[OK] Basic solving works")
            checks_passed += 1
        else:
            print(f"[FAIL] Solving check failed: {result!r}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Solving check failed: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"Health check: {checks_passed} passed, {checks_failed} failed")
    return 0 if checks_failed == 0 else 1


def repl_loop(output_format: str = "human") -> None:
    """Interactive loop: collect equation lines, solve on an empty line."""
    try:
        import readline  # noqa: F401
    except ImportError:
        # readline not available on Windows - that's fine
        pass

    print(
        "lineqpad: enter one equation per line, an empty line or 'solve' to "
        "solve, 'clear' to start over, 'quit' to exit."
    )
    buffer: list[str] = []
    while True:
        try:
            raw = input("... " if buffer else ">>> ")
        except (EOFError, KeyboardInterrupt):
            print()
            if buffer:
                _solve_and_print(buffer, output_format)
            print("Goodbye.")
            break

        command = raw.strip().lower()
        if command in REPL_EXIT_COMMANDS:
            print("Goodbye.")
            break
        if command in REPL_CLEAR_COMMANDS:
            buffer = []
            continue
        if command in REPL_SOLVE_COMMANDS or (not command and buffer):
            _solve_and_print(buffer, output_format)
            buffer = []
            continue
        if not command:
            continue
        buffer.append(raw)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the lineqpad CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="lineqpad", description="Solve a system of linear equations."
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="File with one equation per line ('-' reads standard input)",
    )
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Solve the given equations and exit (separate equations with ';')",
        dest="eval_text",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (default: LINEQPAD_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    from .logging_config import setup_logging

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    if args.precision and args.precision > 0:
        config.OUTPUT_PRECISION = int(args.precision)

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.eval_text is not None:
        return _solve_and_print(_split_eval_text(args.eval_text), args.format)
    if args.file:
        if args.file == "-":
            return _solve_and_print(sys.stdin.read().splitlines(), args.format)
        try:
            with open(args.file, encoding="utf-8") as handle:
                lines = handle.read().splitlines()
        except OSError as e:
            logger.error("Cannot read %s: %s", args.file, e)
            print(f"Error: cannot read {args.file}: {e.strerror or e}")
            return 1
        return _solve_and_print(lines, args.format)

    repl_loop(args.format)
    return 0


if __name__ == "__main__":
    sys.exit(main_entry())
