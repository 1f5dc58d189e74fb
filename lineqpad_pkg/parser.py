"""Incremental parser for systems of linear equations.

This module handles:
- Assembling terms (sign, number, optional ``^`` exponent, variable name)
- Recognizing the ``+``, ``-`` and ``=`` operators between terms
- The per-line state machine that decides when an equation is complete

Input arrives one line per call. An equation may continue on the next line
when a line ends right after an operator; a single term is never split. All
state that must survive between calls lives in a :class:`ParserSession`, and
the equations are accumulated into a caller-owned
:class:`~lineqpad_pkg.system.EquationSystem`.

Grammar::

    term     := [space] [sign] [space] [number ['^' [sign] digits]] [space] [variable] [space]
    operator := [space] ['='] [sign]
    equation := term (operator term)*
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import DIGITS, EQUAL_SIGN, EXPONENT_MARKER, MAX_EXPONENT_DIGITS
from .logging_config import get_logger
from .scanner import scan_number, scan_sign, scan_variable_name, skip_spaces
from .system import EquationSystem
from .types import ParseOutcome, ParserStatus, ParseError

logger = get_logger("parser")


class ParserMode(Enum):
    EXPECT_TERM = "term"
    EXPECT_OPERATOR = "operator"


@dataclass
class ParserSession:
    """Parser state carried from one line to the next.

    One session belongs to one document. Parsing several documents at once
    needs one session and one EquationSystem per document.
    """

    mode: ParserMode = ParserMode.EXPECT_TERM
    equation_index: int = 0
    negative_operator: bool = False
    equal_sign_seen: bool = False
    term_before_equal: bool = False
    term_after_equal: bool = False
    variable_seen: bool = False
    # offset of the first non-space character of the current line
    start_position: int = 0
    # offset where an operator was expected but none was found
    stall_position: Optional[int] = None

    def reset(self) -> None:
        """Return to the initial state for a new set of equations."""
        self._clear_equation()
        self.equation_index = 0

    def reset_for_new_equation(self) -> None:
        self._clear_equation()
        self.equation_index += 1

    def _clear_equation(self) -> None:
        self.mode = ParserMode.EXPECT_TERM
        self.negative_operator = False
        self.equal_sign_seen = False
        self.term_before_equal = False
        self.term_after_equal = False
        self.variable_seen = False
        self.start_position = 0
        self.stall_position = None

    @property
    def is_mid_equation(self) -> bool:
        """True if part of an equation has been read but it is not complete."""
        return self.equal_sign_seen or self.term_before_equal or self.term_after_equal

    def equation_status(self) -> ParserStatus:
        """Classify the equation assembled so far from its structural flags."""
        if not (
            self.equal_sign_seen
            or self.term_before_equal
            or self.term_after_equal
            or self.variable_seen
        ):
            return ParserStatus.SUCCESS_NO_EQUATION
        if not self.equal_sign_seen:
            return ParserStatus.NO_EQUAL_SIGN
        if not self.term_before_equal:
            return ParserStatus.NO_TERM_BEFORE_EQUAL_SIGN
        if not self.term_after_equal:
            return ParserStatus.NO_TERM_AFTER_EQUAL_SIGN
        if not self.variable_seen:
            return ParserStatus.NO_VARIABLE_IN_EQUATION
        return ParserStatus.SUCCESS


def _scan_exponent(line: str, position: int) -> tuple[str, int]:
    """Read the exponent that follows a '^' and return it in E-notation form."""
    _, negative, position = scan_sign(line, position)
    try:
        found, digits, position = scan_number(line, position)
    except ParseError as exc:
        raise ParseError(ParserStatus.ILLEGAL_EXPONENT, exc.position) from exc
    if not found:
        raise ParseError(ParserStatus.MISSING_EXPONENT, position)
    if len(digits) > MAX_EXPONENT_DIGITS or any(c not in DIGITS for c in digits):
        raise ParseError(ParserStatus.ILLEGAL_EXPONENT, position)
    return ("E-" if negative else "E") + digits, position


def scan_term(
    line: str, position: int, session: ParserSession, system: EquationSystem
) -> int:
    """Read one term and fold it into ``system`` at the current equation.

    The sign of the term is the exclusive-or of three toggles: the equal sign
    having been seen (terms on the right move to the left), the preceding
    operator and the term's own sign. A term without a number has magnitude
    1. A term with a variable adds to the coefficient table; a constant term
    is subtracted from the constant vector.

    Args:
        line: Input line
        position: Offset where the term starts
        session: Current parser session
        system: Equation system being built

    Returns:
        Offset just past the term and any trailing whitespace

    Raises:
        ParseError: On a malformed number or exponent, or if neither a
            number nor a variable is present
    """
    _, literal_negative, position = scan_sign(line, position)
    position = skip_spaces(line, position)

    has_number, number_text, position = scan_number(line, position)
    if has_number and position < len(line) and line[position] == EXPONENT_MARKER:
        exponent_text, position = _scan_exponent(line, position + 1)
        number_text += exponent_text

    position = skip_spaces(line, position)
    has_variable, name, position = scan_variable_name(line, position)

    negative = session.equal_sign_seen ^ session.negative_operator ^ literal_negative
    value = float(number_text) if has_number else 1.0
    if negative:
        value = -value

    if has_variable:
        session.variable_seen = True
        system.add_coefficient(
            session.equation_index, system.variable_index(name), value
        )
    elif has_number:
        system.subtract_constant(session.equation_index, value)
    else:
        raise ParseError(ParserStatus.NO_TERM_ENCOUNTERED, position)

    if session.equal_sign_seen:
        session.term_after_equal = True
    else:
        session.term_before_equal = True

    return skip_spaces(line, position)


def scan_operator(line: str, position: int, session: ParserSession) -> tuple[bool, int]:
    """Recognize ``=`` and/or a ``+``/``-`` that applies to the next term.

    Returns:
        Tuple (found, new_position)

    Raises:
        ParseError: MULTIPLE_EQUAL_SIGNS on a second '=' in one equation
    """
    position = skip_spaces(line, position)
    session.negative_operator = False

    have_equal_sign = False
    if position < len(line) and line[position] == EQUAL_SIGN:
        if session.equal_sign_seen:
            raise ParseError(ParserStatus.MULTIPLE_EQUAL_SIGNS, position)
        session.equal_sign_seen = True
        have_equal_sign = True
        position += 1

    have_sign, session.negative_operator, position = scan_sign(line, position)
    return have_sign or have_equal_sign, position


def parse_line(
    line: str, session: ParserSession, system: EquationSystem
) -> tuple[ParseOutcome, int]:
    """Parse one line of text into ``system``.

    An equation is complete when the line is used up and its last token was a
    term. A line that ends on an operator leaves the equation open, and the
    next call continues it.

    Args:
        line: One line of input text
        session: Parser session, updated in place
        system: Equation system, updated in place

    Returns:
        Tuple (outcome, number_of_equations). The outcome's position is the
        offset in ``line`` where the status was decided.
    """
    line = line.rstrip()
    if not line:
        return ParseOutcome(ParserStatus.SUCCESS_NO_EQUATION, 0), session.equation_index

    outcome = ParseOutcome(ParserStatus.SUCCESS, 0)
    position = skip_spaces(line, 0)
    session.start_position = position
    length = len(line)
    operator_found_last = False

    while position < length:
        position = skip_spaces(line, position)
        if position >= length:
            break

        if session.mode is ParserMode.EXPECT_TERM:
            try:
                position = scan_term(line, position, session, system)
            except ParseError as exc:
                outcome = ParseOutcome(exc.status, exc.position)
                position = exc.position
                break
            session.mode = ParserMode.EXPECT_OPERATOR
            operator_found_last = False
        else:
            try:
                found, position = scan_operator(line, position, session)
            except ParseError as exc:
                if position == session.start_position:
                    # nothing on this line was accepted before the failure
                    outcome = ParseOutcome(ParserStatus.ILLEGAL_EQUATION, position)
                else:
                    outcome = ParseOutcome(exc.status, exc.position)
                break
            if not found:
                # Two terms with no operator between them, e.g. "x y = 1". The
                # line is left unconsumed and the status stays SUCCESS.
                session.stall_position = position
                logger.debug(
                    "No operator at offset %d of %r; line left unconsumed",
                    position,
                    line,
                )
                break
            session.mode = ParserMode.EXPECT_TERM
            operator_found_last = True

    if outcome.status.is_error:
        logger.debug(
            "Parse error %s at offset %d of %r",
            outcome.status.value,
            outcome.position,
            line,
        )
    # a term that fails right at the end of the line still ends the equation
    if position >= length and not operator_found_last:
        session.reset_for_new_equation()
        logger.debug("Equation %d complete", session.equation_index)

    return outcome, session.equation_index


class LinearEquationParser:
    """Convenience wrapper owning one ParserSession.

    Example:
        >>> system = EquationSystem()
        >>> parser = LinearEquationParser()
        >>> parser.parse("x + y = 10", system).status
        <ParserStatus.SUCCESS: 'SUCCESS'>
        >>> parser.number_of_equations
        1
    """

    def __init__(self, session: ParserSession | None = None):
        self.session = session if session is not None else ParserSession()
        self.last_outcome = ParseOutcome()
        self.number_of_equations = self.session.equation_index

    @property
    def last_status(self) -> ParserStatus:
        return self.last_outcome.status

    @property
    def error_position(self) -> int:
        return self.last_outcome.position

    def parse(self, line: str, system: EquationSystem) -> ParseOutcome:
        self.last_outcome, self.number_of_equations = parse_line(
            line, self.session, system
        )
        return self.last_outcome

    def reset(self) -> None:
        self.session.reset()
        self.last_outcome = ParseOutcome()
        self.number_of_equations = 0
