"""Validation result types for comment validation.

Consolidates feedback from:
- Parser-level: the syntax error that aborted parsing (if any)
- Comment-level: warnings about accepted but suspicious entries

Python 3.12+.
"""

from dataclasses import dataclass

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]


# Maximum content length before truncation when sanitizing
_SANITIZE_MAX_CONTENT_LENGTH: int = 100


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Structured syntax error from comment validation.

    Attributes:
        code: Error code name (e.g., "EXPECTED_CHARACTER")
        message: Human-readable error message
        content: The comment line the error occurred on
        line: Line number where error occurred (1-indexed, optional)
        column: Column number where error occurred (1-indexed, optional)
    """

    code: str
    message: str
    content: str
    line: int | None = None
    column: int | None = None

    def format(self, *, sanitize: bool = False) -> str:
        """Format error as human-readable string.

        Args:
            sanitize: If True, truncate long content.

        Returns:
            Formatted error string with optional content truncation.
        """
        content_display = self.content
        if sanitize and len(self.content) > _SANITIZE_MAX_CONTENT_LENGTH:
            content_display = self.content[:_SANITIZE_MAX_CONTENT_LENGTH] + "..."

        location = ""
        if self.line is not None:
            location = f" at line {self.line}"
            if self.column is not None:
                location += f", column {self.column}"

        return f"[{self.code}]{location}: {self.message} (content: {content_display!r})"


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Structured warning from comment validation.

    Attributes:
        code: Warning code name (e.g., "VALIDATION_DUPLICATE_VARIABLE")
        message: Human-readable warning message
        context: Additional context (e.g., the variable name)
        line: Line of the offending entry (1-indexed, optional)
    """

    code: str
    message: str
    context: str | None = None
    line: int | None = None

    def format(self) -> str:
        """Format warning as a one-line string."""
        location = f" at line {self.line}" if self.line is not None else ""
        context = f" ({self.context})" if self.context else ""
        return f"[{self.code}]{location}: {self.message}{context}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable validation result.

    Attributes:
        errors: Syntax errors (at most one; parsing stops at the first)
        warnings: Comment-level warnings

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[ValidationError, ...]
    warnings: tuple[ValidationWarning, ...]

    @property
    def is_valid(self) -> bool:
        """True if no errors were found. Warnings do not affect validity."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Get number of errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Get number of warnings."""
        return len(self.warnings)

    @staticmethod
    def valid(warnings: tuple[ValidationWarning, ...] = ()) -> "ValidationResult":
        """Create a valid result, optionally carrying warnings."""
        return ValidationResult(errors=(), warnings=warnings)

    @staticmethod
    def invalid(
        errors: tuple[ValidationError, ...] = (),
        warnings: tuple[ValidationWarning, ...] = (),
    ) -> "ValidationResult":
        """Create an invalid result with errors and optional warnings."""
        return ValidationResult(errors=errors, warnings=warnings)

    def format(
        self,
        *,
        sanitize: bool = False,
        include_warnings: bool = True,
    ) -> str:
        """Format validation result as human-readable string.

        Args:
            sanitize: If True, truncate long error content.
            include_warnings: If True (default), include warnings in output.

        Returns:
            Formatted string with errors and optionally warnings.
        """
        lines: list[str] = []

        if self.errors:
            lines.append(f"Errors ({len(self.errors)}):")
            for error in self.errors:
                lines.append(f"  {error.format(sanitize=sanitize)}")

        if include_warnings and self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                lines.append(f"  {warning.format()}")

        if not lines:
            return "Validation passed: no errors or warnings"

        return "\n".join(lines)
