"""Main entry point for running lineqpad_pkg as a module.

This allows running lineqpad with:
    python -m lineqpad_pkg
    python -m lineqpad_pkg equations.txt
    python -m lineqpad_pkg -e "x + y = 10; x - y = 2"

This is equivalent to running:
    python -m lineqpad_pkg.cli
    python lineqpad.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
