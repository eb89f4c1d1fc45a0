"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.12+. Zero external dependencies.
"""

from ftlcomments.constants import NEWLINE, NEWLINE_SYMBOL

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate", "printable_char"]


def printable_char(char: str) -> str:
    """Return a one-line rendering of an expected character.

    Newline is shown as SYMBOL FOR NEWLINE (U+2424) so diagnostics never
    break across lines.
    """
    if char == NEWLINE:
        return NEWLINE_SYMBOL
    return char


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Hints keyed by the expected character. Anything else gets no hint.
    _EXPECTED_HINTS: dict[str, str] = {
        NEWLINE: "Put each comment entry on its own line",
        "$": "Variable declarations look like '@var $name'",
        "#": "Every FTL comment line must start with '#', '##' or '###'",
    }

    @staticmethod
    def expected_character(char: str, span: SourceSpan | None = None) -> Diagnostic:
        """Expected a specific character at the current position.

        Args:
            char: The character the grammar required (raw, not rendered)
            span: Location of the failure (optional)

        Returns:
            Diagnostic for EXPECTED_CHARACTER
        """
        shown = printable_char(char)
        msg = f'Expected token: "{shown}"'
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_CHARACTER,
            message=msg,
            span=span,
            hint=ErrorTemplate._EXPECTED_HINTS.get(char),
            expected=(shown,),
        )

    @staticmethod
    def duplicate_variable(name: str, first_line: int, line: int) -> Diagnostic:
        """Variable documented more than once in a comment.

        Args:
            name: Variable name (without leading $)
            first_line: Line of the first declaration (1-indexed)
            line: Line of the repeated declaration (1-indexed)

        Returns:
            Warning diagnostic for VALIDATION_DUPLICATE_VARIABLE
        """
        msg = (
            f"Variable '${name}' is documented more than once "
            f"(first on line {first_line}, again on line {line})"
        )
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_DUPLICATE_VARIABLE,
            message=msg,
            hint="Merge the declarations into a single '@var' entry",
            severity="warning",
        )

    @staticmethod
    def examples_without_description(name: str) -> Diagnostic:
        """Variable carries examples but an empty description.

        Args:
            name: Variable name (without leading $)

        Returns:
            Warning diagnostic for VALIDATION_EXAMPLES_WITHOUT_DESCRIPTION
        """
        msg = f"Variable '${name}' has examples but no description"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_EXAMPLES_WITHOUT_DESCRIPTION,
            message=msg,
            hint="Describe what the variable holds before listing examples",
            severity="warning",
        )
