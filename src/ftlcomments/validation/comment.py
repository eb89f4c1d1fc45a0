"""Comment block validation.

Provides standalone validation for comment text. Useful for CI/CD pipelines,
linters and tooling that check documentation comments in .ftl files.

Architecture:
    - validate_comment(): Main entry point, orchestrates validation passes
    - _syntax_error(): Pass 1 - Convert the aborting ParseError to ValidationError
    - _check_variables(): Pass 2 - Duplicate declarations, examples without description

Python 3.12+.
"""

import logging

from ftlcomments.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)
from ftlcomments.syntax.ast import Entry, Variable
from ftlcomments.syntax.cursor import LineOffsetCache, ParseError
from ftlcomments.syntax.parser import CommentParser

__all__ = ["validate_comment"]

logger = logging.getLogger(__name__)


def _line_text(line_cache: LineOffsetCache, source: str, line: int) -> str:
    """Get the text of a 1-indexed line without its line end."""
    start = line_cache.line_start(line)
    end = source.find("\n", start)
    return source[start:] if end == -1 else source[start:end]


def _syntax_error(error: ParseError, source: str) -> ValidationError:
    """Convert the ParseError that aborted parsing to a ValidationError.

    Args:
        error: Failure returned by the parser
        source: Original comment text for position calculation
    """
    line_cache = LineOffsetCache(source)
    line, column = line_cache.get_line_col(error.position)
    diagnostic = error.to_diagnostic()
    return ValidationError(
        code=diagnostic.code.name,
        message=diagnostic.message,
        content=_line_text(line_cache, source, line),
        line=line,
        column=column,
    )


def _warning(diagnostic: Diagnostic, context: str, line: int) -> ValidationWarning:
    return ValidationWarning(
        code=diagnostic.code.name,
        message=diagnostic.message,
        context=context,
        line=line,
    )


def _check_variables(
    entries: tuple[tuple[int, Entry], ...],
    source: str,
) -> list[ValidationWarning]:
    """Check variable declarations for accepted but suspicious input.

    Performs the following checks:
    - Duplicate variable names (every declaration is kept in the AST)
    - Examples listed without any description text

    Args:
        entries: (start offset, entry) pairs from the parser
        source: Original comment text for position calculation

    Returns:
        List of warnings in source order
    """
    warnings: list[ValidationWarning] = []
    first_seen: dict[str, int] = {}

    # Build line offset cache once for efficient position lookups
    line_cache = LineOffsetCache(source)

    for offset, entry in entries:
        match entry:
            case Variable(name=name, description=description, examples=examples):
                line, _ = line_cache.get_line_col(offset)
                context = f"${name}"

                if name in first_seen:
                    diagnostic = ErrorTemplate.duplicate_variable(name, first_seen[name], line)
                    logger.warning("%s", diagnostic.message)
                    warnings.append(_warning(diagnostic, context, line))
                else:
                    first_seen[name] = line

                if examples and not description:
                    diagnostic = ErrorTemplate.examples_without_description(name)
                    warnings.append(_warning(diagnostic, context, line))
            case _:
                continue

    return warnings


def validate_comment(
    source: str,
    *,
    parser: CommentParser | None = None,
) -> ValidationResult:
    """Validate comment text without building an AST for the caller.

    Validation passes:
    1. Syntax: the first grammar failure (parsing stops there)
    2. Variables: duplicate declarations, examples without description

    Args:
        source: Comment text without FTL "#" markers
        parser: Optional parser instance (creates default if not provided)

    Returns:
        ValidationResult with at most one syntax error and any warnings

    Raises:
        ValueError: If source exceeds the parser's max_source_size

    Example:
        >>> result = validate_comment("@var $a\\n@var $a")
        >>> result.is_valid, result.warnings[0].code
        (True, 'VALIDATION_DUPLICATE_VARIABLE')

    Thread Safety:
        Thread-safe. Creates isolated parser if not provided.
    """
    if parser is None:
        parser = CommentParser()

    entries = parser.parse_located(source)
    if isinstance(entries, ParseError):
        error = _syntax_error(entries, source)
        logger.error("Comment syntax error: %s", error.format())
        return ValidationResult.invalid(errors=(error,))

    warnings = _check_variables(entries, source)
    logger.debug("Validated comment: 0 errors, %d warnings", len(warnings))
    return ValidationResult.valid(warnings=tuple(warnings))
