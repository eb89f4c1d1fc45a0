"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.12+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3999: Syntax errors (comment grammar failures)
        5100-5199: Validation warnings (comment-level structural checks)
    """

    # Syntax errors (3000-3999)
    # 3003 mirrors Fluent's E0003 ("Expected token"). It is the only failure
    # the comment grammar produces.
    EXPECTED_CHARACTER = 3003

    # Validation warnings (5100-5199)
    VALIDATION_DUPLICATE_VARIABLE = 5101
    VALIDATION_EXAMPLES_WITHOUT_DESCRIPTION = 5102

    @property
    def fluent_code(self) -> str:
        """Fluent-style code string (e.g., "E0003") for syntax errors.

        Validation codes have no Fluent equivalent and use their enum name.
        """
        if 3000 <= self.value < 4000:  # noqa: PLR2004 - category bounds
            return f"E{self.value - 3000:04d}"
        return self.name


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (editors, linters).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when the location is unknown)
        hint: Suggestion for fixing the error
        expected: Characters the parser expected at span
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    expected: tuple[str, ...] = ()
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[EXPECTED_CHARACTER]: Expected token: "␤"
              --> line 1, column 12
              = help: Put each comment entry on its own line

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
