"""Centralized configuration for lineqpad.

This module defines:
- Lexical limits for numeric literals and exponents
- Output formatting precision
- Solver conditioning threshold
- Default logging level
- Character classes used by the scanners

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with LINEQPAD_)
"""

import os

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("lineqpad")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Lexical limits
MAX_NUMBER_LENGTH = int(
    os.getenv("LINEQPAD_MAX_NUMBER_LENGTH", "20")
)  # digits (and total characters) in one numeric literal
MAX_EXPONENT_DIGITS = int(
    os.getenv("LINEQPAD_MAX_EXPONENT_DIGITS", "2")
)  # digits after '^'

# Output configuration
OUTPUT_PRECISION = int(os.getenv("LINEQPAD_OUTPUT_PRECISION", "6"))

# Solver configuration
CONDITION_LIMIT = float(
    os.getenv("LINEQPAD_CONDITION_LIMIT", "1e12")
)  # infinity-norm condition number above which a system is ill-conditioned

# Logging configuration
LOG_LEVEL = os.getenv("LINEQPAD_LOG_LEVEL", "WARNING")

# Character classes
DIGITS = frozenset("0123456789")
VARIABLE_CHARACTERS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)
DECIMAL_POINT = "."
EXPONENT_MARKER = "^"
EQUAL_SIGN = "="
PLUS_SIGN = "+"
MINUS_SIGN = "-"

# Separators accepted by the CLI between equations given on one line
EQUATION_SEPARATOR = ";"
