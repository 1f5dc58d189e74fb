"""Lexical scanners for the linear equation parser.

Each scanner reads ``line`` starting at ``position`` and returns the position
just past whatever it consumed. Scanners never look at parser state; numeric
format problems are reported by raising :class:`~lineqpad_pkg.types.ParseError`
with the offset where the problem was detected.
"""

from __future__ import annotations

from .config import (
    DECIMAL_POINT,
    DIGITS,
    MAX_NUMBER_LENGTH,
    MINUS_SIGN,
    PLUS_SIGN,
    VARIABLE_CHARACTERS,
)
from .types import ParserStatus, ParseError


def skip_spaces(line: str, position: int) -> int:
    """Advance past whitespace characters."""
    length = len(line)
    while position < length and line[position].isspace():
        position += 1
    return position


def scan_sign(line: str, position: int) -> tuple[bool, bool, int]:
    """Recognize an optional ``+`` or ``-``.

    Returns:
        Tuple (has_sign, is_negative, new_position). At most one character
        is consumed.
    """
    if position < len(line):
        char = line[position]
        if char == PLUS_SIGN:
            return True, False, position + 1
        if char == MINUS_SIGN:
            return True, True, position + 1
    return False, False, position


def scan_number(line: str, position: int) -> tuple[bool, str, int]:
    """Recognize a run of digits with at most one decimal point.

    Digits and the decimal point may come in any order, so ``12.5``, ``.5``
    and ``12.`` are all numbers. A decimal point without any digit is consumed
    but does not count as a number.

    Args:
        line: Input line
        position: Offset of the first candidate character

    Returns:
        Tuple (found, text, new_position) where ``found`` is True if at least
        one digit was read

    Raises:
        ParseError: TOO_MANY_DIGITS if the literal exceeds MAX_NUMBER_LENGTH,
            MULTIPLE_DECIMAL_POINTS on a second decimal point
    """
    length = len(line)
    start = position
    digit_count = 0
    decimal_points = 0
    while position < length:
        char = line[position]
        if char in DIGITS:
            digit_count += 1
            position += 1
            if digit_count > MAX_NUMBER_LENGTH:
                raise ParseError(ParserStatus.TOO_MANY_DIGITS, position)
        elif char == DECIMAL_POINT:
            decimal_points += 1
            if decimal_points > 1:
                raise ParseError(ParserStatus.MULTIPLE_DECIMAL_POINTS, position)
            position += 1
        else:
            break

    text = line[start:position]
    if len(text) > MAX_NUMBER_LENGTH:
        raise ParseError(ParserStatus.TOO_MANY_DIGITS, position)
    return digit_count > 0, text, position


def scan_variable_name(line: str, position: int) -> tuple[bool, str, int]:
    """Recognize a run of ASCII letters and underscores.

    Returns:
        Tuple (found, name, new_position). Case is preserved.
    """
    length = len(line)
    start = position
    while position < length and line[position] in VARIABLE_CHARACTERS:
        position += 1
    name = line[start:position]
    return bool(name), name, position
