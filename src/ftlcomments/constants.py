"""Shared constants for ftlcomments.

Constants are grouped by domain:
- Character classes: Characters the comment grammar treats specially
- Example lists: Markers recognized by the example extractor
- Input limits: DoS prevention via size constraints

Python 3.12+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Character classes
    "INLINE_WS",
    "NEWLINE",
    "NEWLINE_SYMBOL",
    "PARAMETER_SIGIL",
    "VARIABLE_SIGIL",
    "VARIABLE_PARAMETER_NAME",
    "DESCRIPTION_SEPARATOR",
    # Example lists
    "EXAMPLE_MARKER",
    # Input limits
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# Horizontal whitespace skipped between tokens on one line.
# Unlike FTL blank_inline, tabs are accepted inside comment text.
INLINE_WS: tuple[str, ...] = (" ", "\t")

# Line separator between comment entries. CRLF input keeps its \r in content.
NEWLINE: str = "\n"

# Unicode Character 'SYMBOL FOR NEWLINE' (U+2424).
# Substituted for "\n" in diagnostics so error messages stay on one line.
NEWLINE_SYMBOL: str = "␤"

# "@name value" starts a parameter entry.
PARAMETER_SIGIL: str = "@"

# "@var $name" - variable names carry a "$" sigil in source, not in the AST.
VARIABLE_SIGIL: str = "$"

# Parameter name that selects the Variable production.
VARIABLE_PARAMETER_NAME: str = "var"

# "@var $name (Type) - description"
DESCRIPTION_SEPARATOR: str = "-"

# ============================================================================
# EXAMPLE LISTS
# ============================================================================

# Prefix of the trailing "(example: ...)" / "(examples: ...)" clause.
EXAMPLE_MARKER: str = "(example"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (1 MiB).
# Comment blocks are small; anything larger is almost certainly a whole file
# passed by mistake or adversarial input.
MAX_SOURCE_SIZE: int = 1024 * 1024
