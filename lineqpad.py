#!/usr/bin/env python3
"""
lineqpad - Linear Equation Pad

Main entry point for the lineqpad linear equation solver.
This file serves as a thin wrapper that delegates all functionality
to the lineqpad_pkg package.

Usage:
    python lineqpad.py                          # Interactive REPL
    python lineqpad.py equations.txt            # Solve a file
    python lineqpad.py -e "x+y=10; x-y=2"       # Solve inline equations
    python lineqpad.py --help                   # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for lineqpad.

    Delegates all functionality to the lineqpad_pkg.cli module,
    which handles argument parsing, solving, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    from lineqpad_pkg.cli import main_entry

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
