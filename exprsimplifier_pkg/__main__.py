"""Main entry point for running exprsimplifier_pkg as a module.

This allows running the simplifier with:
    python -m exprsimplifier_pkg "2*(x+y)"
    python -m exprsimplifier_pkg "x*y" x=1
    python -m exprsimplifier_pkg --health-check

This is equivalent to running:
    python -m exprsimplifier_pkg.cli
    exprsimplifier (installed console script)
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
