"""lineqpad package: incremental linear equation parser, solver, and CLI."""

__all__ = [
    "config",
    "scanner",
    "parser",
    "system",
    "solver",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "parse_document",
    "solve_document",
    "format_solutions",
]
