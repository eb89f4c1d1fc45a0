"""Comment syntax exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.12+. Zero external dependencies.
"""

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from ftlcomments.syntax.cursor import ParseError

__all__ = ["CommentLineError", "CommentSyntaxError", "FluentCommentError"]


class FluentCommentError(Exception):
    """Base exception for all ftlcomments errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FluentCommentError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CommentSyntaxError(FluentCommentError):
    """Comment text does not match the comment grammar.

    Unlike full-resource parsing there is no Junk recovery: the first unmet
    expectation aborts the whole parse.

    Attributes:
        parse_error: The failure value produced by the grammar rules
    """

    def __init__(self, parse_error: "ParseError") -> None:
        """Initialize CommentSyntaxError from a grammar failure.

        Args:
            parse_error: ParseError returned by the failing rule
        """
        super().__init__(parse_error.to_diagnostic())
        self.parse_error = parse_error


class CommentLineError(CommentSyntaxError):
    """FTL comment lines could not be turned into comment text.

    Raised when a line lacks the '#' sigil or mixes comment types.
    """
