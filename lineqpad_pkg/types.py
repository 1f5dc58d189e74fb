"""Status codes, result dataclasses and exceptions for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ParserStatus(str, Enum):
    """Closed set of outcomes of parsing one line."""

    SUCCESS = "SUCCESS"
    SUCCESS_NO_EQUATION = "SUCCESS_NO_EQUATION"
    ILLEGAL_EQUATION = "ILLEGAL_EQUATION"
    NO_EQUAL_SIGN = "NO_EQUAL_SIGN"
    MULTIPLE_EQUAL_SIGNS = "MULTIPLE_EQUAL_SIGNS"
    NO_TERM_BEFORE_EQUAL_SIGN = "NO_TERM_BEFORE_EQUAL_SIGN"
    NO_TERM_AFTER_EQUAL_SIGN = "NO_TERM_AFTER_EQUAL_SIGN"
    NO_TERM_ENCOUNTERED = "NO_TERM_ENCOUNTERED"
    NO_VARIABLE_IN_EQUATION = "NO_VARIABLE_IN_EQUATION"
    MULTIPLE_DECIMAL_POINTS = "MULTIPLE_DECIMAL_POINTS"
    TOO_MANY_DIGITS = "TOO_MANY_DIGITS"
    MISSING_EXPONENT = "MISSING_EXPONENT"
    ILLEGAL_EXPONENT = "ILLEGAL_EXPONENT"

    @property
    def is_error(self) -> bool:
        return self not in (ParserStatus.SUCCESS, ParserStatus.SUCCESS_NO_EQUATION)


class SolverStatus(str, Enum):
    """Outcome of solving a square linear system."""

    SUCCESS = "SUCCESS"
    SINGULAR = "SINGULAR"
    ILL_CONDITIONED = "ILL_CONDITIONED"


_STATUS_MESSAGES = {
    ParserStatus.SUCCESS: "Success",
    ParserStatus.SUCCESS_NO_EQUATION: "Success",
    ParserStatus.ILLEGAL_EQUATION: "Illegal equation",
    ParserStatus.NO_EQUAL_SIGN: "No equal sign in equation",
    ParserStatus.MULTIPLE_EQUAL_SIGNS: "More than one equal sign in equation",
    ParserStatus.NO_TERM_BEFORE_EQUAL_SIGN: "No term before the equal sign",
    ParserStatus.NO_TERM_AFTER_EQUAL_SIGN: "No term after the equal sign",
    ParserStatus.NO_TERM_ENCOUNTERED: "Expected a number or a variable",
    ParserStatus.NO_VARIABLE_IN_EQUATION: "Equation contains no variable",
    ParserStatus.MULTIPLE_DECIMAL_POINTS: "Number has more than one decimal point",
    ParserStatus.TOO_MANY_DIGITS: "Number has too many digits",
    ParserStatus.MISSING_EXPONENT: "Missing exponent after '^'",
    ParserStatus.ILLEGAL_EXPONENT: "Exponent must be one or two digits",
}


def status_message(status: ParserStatus) -> str:
    """Return the human readable text for a parser status value."""
    return _STATUS_MESSAGES.get(status, _STATUS_MESSAGES[ParserStatus.ILLEGAL_EQUATION])


@dataclass
class ParseOutcome:
    """Status of the most recent parse call and the offset where it was decided."""

    status: ParserStatus = ParserStatus.SUCCESS
    position: int = 0

    @property
    def ok(self) -> bool:
        return not self.status.is_error

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok, "status": self.status.value}
        if not self.ok:
            result_dict["position"] = self.position
            result_dict["error"] = status_message(self.status)
        return result_dict


@dataclass
class SolveResult:
    """Result of parsing and solving a document of linear equations."""

    ok: bool
    result_type: str = "system"  # "system", "parse_error", "solve_error"
    error: str | None = None
    error_code: str | None = None
    # 0-based offset within error_line (1-based) for parse errors
    error_position: int | None = None
    error_line: int | None = None
    solutions: dict[str, float] = field(default_factory=dict)
    number_of_equations: int = 0
    number_of_variables: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok, "type": self.result_type}
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        if self.error_line is not None:
            result_dict["line"] = self.error_line
        if self.error_position is not None:
            result_dict["position"] = self.error_position
        if self.ok:
            result_dict["solutions"] = dict(self.solutions)
        result_dict["equations"] = self.number_of_equations
        result_dict["variables"] = self.number_of_variables
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return (
                f"SolveResult(ok=False, result_type={self.result_type!r}, "
                f"error_code={self.error_code!r}, error={self.error!r})"
            )
        return f"SolveResult(ok=True, solutions={self.solutions!r})"


class ParseError(Exception):
    """Raised by the scanners and term assembler when a line cannot be parsed."""

    def __init__(self, status: ParserStatus, position: int):
        self.status = status
        self.position = position
        self.code = status.value
        self.message = status_message(status)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.message} (position {self.position})"


class SolverError(Exception):
    """Raised when the solver is handed a system it cannot work on."""

    def __init__(self, message: str, code: str = "SOLVER_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
