"""Centralized configuration for the expression simplifier.

This module defines:
- Input validation limits (length, nesting depth)
- Decimal arithmetic settings for constant folding
- Cache sizes for the parse cache
- Tolerances for the SymPy cross-check
- Regex patterns for the ``name=value`` assignment format

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with EXPRSIMPLIFIER_)
"""

import os
import re

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("exprsimplifier")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Input validation limits
MAX_INPUT_LENGTH = int(
    os.getenv("EXPRSIMPLIFIER_MAX_INPUT_LENGTH", "10000")
)  # characters
MAX_EXPRESSION_DEPTH = int(
    os.getenv("EXPRSIMPLIFIER_MAX_EXPRESSION_DEPTH", "200")
)  # parenthesis nesting
MAX_TREE_DEPTH = int(
    os.getenv("EXPRSIMPLIFIER_MAX_TREE_DEPTH", "400")
)  # syntax tree height; a flat chain of n terms is n levels deep

# Decimal arithmetic
DECIMAL_PRECISION = int(
    os.getenv("EXPRSIMPLIFIER_DECIMAL_PRECISION", "28")
)  # significant digits kept by division
MAX_EXACT_EXPONENT = int(
    os.getenv("EXPRSIMPLIFIER_MAX_EXACT_EXPONENT", "10000")
)  # larger integer exponents go through the float fallback

# Cache configuration
CACHE_SIZE_PARSE = int(os.getenv("EXPRSIMPLIFIER_CACHE_SIZE_PARSE", "1024"))

# Symbolic cross-check
NUMERIC_TOLERANCE = float(
    os.getenv("EXPRSIMPLIFIER_NUMERIC_TOLERANCE", "1e-9")
)  # absorbs the float fallback of power folding
VERIFY_RESULTS = os.getenv("EXPRSIMPLIFIER_VERIFY_RESULTS", "false").lower() == "true"

VAR_NAME_RE = re.compile(r"^[^\W\d_][^\W_]*$")
NUMBER_RE = re.compile(r"^-?[0-9]+(?:\.[0-9]*)?$")
