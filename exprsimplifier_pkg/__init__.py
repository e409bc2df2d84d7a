"""Expression simplifier package: lexer, tree builder, simplifier, printer, and CLI."""

__all__ = [
    "config",
    "tokens",
    "lexer",
    "parser",
    "tree",
    "substitution",
    "simplifier",
    "printer",
    "verify",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "simplify_expression",
    "simplify",
    "validate_expression",
]
