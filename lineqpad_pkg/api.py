"""Public API for lineqpad - returns structured objects without side effects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from . import config
from .logging_config import get_logger
from .parser import ParserMode, ParserSession, parse_line
from .solver import solve_linear_system
from .system import EquationSystem
from .types import (
    ParseOutcome,
    ParserStatus,
    SolveResult,
    SolverError,
    SolverStatus,
    status_message,
)

logger = get_logger("api")


@dataclass
class DocumentParse:
    """Everything known after feeding a document to the parser."""

    outcome: ParseOutcome
    system: EquationSystem
    number_of_equations: int = 0
    # 1-based line of the failure, or of the unterminated equation
    line: int | None = None
    unterminated: bool = False
    session: ParserSession = field(default_factory=ParserSession)

    @property
    def ok(self) -> bool:
        return self.outcome.ok and not self.unterminated


def _split_lines(text: str | Iterable[str]) -> list[str]:
    if isinstance(text, str):
        return text.splitlines()
    return list(text)


def parse_document(text: str | Iterable[str]) -> DocumentParse:
    """Parse a whole document of equations, one line at a time.

    Parsing stops at the first line that reports an error. A line whose
    trailing terms could not be consumed (two terms without an operator) is
    reported as ILLEGAL_EQUATION on that line, at the offset where the
    operator was expected.

    Args:
        text: Document text, or an iterable of lines

    Returns:
        DocumentParse with the filled EquationSystem
    """
    session = ParserSession()
    system = EquationSystem()
    outcome = ParseOutcome()
    number_of_equations = 0
    equation_start_line = 1

    for line_number, line in enumerate(_split_lines(text), start=1):
        if not session.is_mid_equation:
            equation_start_line = line_number
        outcome, number_of_equations = parse_line(line, session, system)
        if outcome.status.is_error:
            logger.debug(
                "Parse error %s",
                outcome.status.value,
                extra={"source_line": line_number, "offset": outcome.position},
            )
            return DocumentParse(
                outcome, system, number_of_equations, line_number, session=session
            )
        if session.mode is ParserMode.EXPECT_OPERATOR:
            position = session.stall_position or 0
            logger.debug(
                "Expected an operator",
                extra={"source_line": line_number, "offset": position},
            )
            return DocumentParse(
                ParseOutcome(ParserStatus.ILLEGAL_EQUATION, position),
                system,
                number_of_equations,
                line_number,
                session=session,
            )

    if session.is_mid_equation:
        return DocumentParse(
            ParseOutcome(ParserStatus.ILLEGAL_EQUATION, 0),
            system,
            number_of_equations,
            equation_start_line,
            unterminated=True,
            session=session,
        )
    return DocumentParse(outcome, system, number_of_equations, session=session)


def solve_document(text: str | Iterable[str]) -> SolveResult:
    """Parse and solve a document of linear equations.

    Args:
        text: Document text (one equation per line, or split at operators)

    Returns:
        SolveResult with solutions ordered by first appearance of each variable

    Example:
        >>> from lineqpad_pkg.api import solve_document
        >>> solve_document("x + y = 10\\nx - y = 2").solutions
        {'x': 6.0, 'y': 4.0}
    """
    parsed = parse_document(text)
    system = parsed.system
    n = parsed.number_of_equations
    m = system.number_of_variables

    if not parsed.ok:
        status = parsed.outcome.status
        error = status_message(status)
        if parsed.unterminated:
            error = "Equation is not terminated"
        return SolveResult(
            ok=False,
            result_type="parse_error",
            error=error,
            error_code=status.value,
            error_position=parsed.outcome.position,
            error_line=parsed.line,
            number_of_equations=n,
            number_of_variables=m,
        )

    if n == 0:
        error, code = "No equations to solve", "NO_EQUATIONS"
    elif n < m:
        error = f"Too few equations: {n} equations for {m} variables"
        code = "TOO_FEW_EQUATIONS"
    elif n > m:
        error = f"Too many equations: {n} equations for {m} variables"
        code = "TOO_MANY_EQUATIONS"
    else:
        error = code = None
    if code is not None:
        return SolveResult(
            ok=False,
            result_type="solve_error",
            error=error,
            error_code=code,
            number_of_equations=n,
            number_of_variables=m,
        )

    try:
        status, solution = solve_linear_system(system, n)
    except SolverError as e:
        return SolveResult(
            ok=False,
            result_type="solve_error",
            error=e.message,
            error_code=e.code,
            number_of_equations=n,
            number_of_variables=m,
        )

    if status is SolverStatus.SINGULAR:
        return SolveResult(
            ok=False,
            result_type="solve_error",
            error="Singular system of equations",
            error_code=status.value,
            number_of_equations=n,
            number_of_variables=m,
        )
    if status is SolverStatus.ILL_CONDITIONED:
        return SolveResult(
            ok=False,
            result_type="solve_error",
            error="Ill-conditioned system of equations",
            error_code=status.value,
            number_of_equations=n,
            number_of_variables=m,
        )

    solutions = {name: solution[system.variables[name]] for name in system.variable_names()}
    return SolveResult(
        ok=True,
        solutions=solutions,
        number_of_equations=n,
        number_of_variables=m,
    )


def format_number(val: Any, precision: int | None = None) -> str:
    """Format a numeric value with the given number of significant digits.

    Args:
        val: Numeric value to format
        precision: Significant digits (default: config.OUTPUT_PRECISION)

    Returns:
        Formatted string representation of the number
    """
    if precision is None:
        precision = config.OUTPUT_PRECISION
    try:
        fmt = "{:." + str(int(precision)) + "g}"
        text = fmt.format(float(val))
    except (ValueError, TypeError, OverflowError):
        return str(val)
    # avoid printing "-0"
    return "0" if text == "-0" else text


def format_solutions(result: SolveResult, precision: int | None = None) -> str:
    """Render solutions as ``name = value`` lines, or the error message."""
    if not result.ok:
        location = ""
        if result.error_line is not None:
            location = f" (line {result.error_line}"
            if result.error_position is not None and result.result_type == "parse_error":
                location += f", column {result.error_position + 1}"
            location += ")"
        return f"Error: {result.error}{location}"
    return "\n".join(
        f"{name} = {format_number(value, precision)}"
        for name, value in result.solutions.items()
    )
