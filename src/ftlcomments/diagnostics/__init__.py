"""Diagnostic system for comment syntax errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.12+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import CommentLineError, CommentSyntaxError, FluentCommentError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate, printable_char
from .validation import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "CommentLineError",
    "CommentSyntaxError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FluentCommentError",
    "OutputFormat",
    "SourceSpan",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "printable_char",
]
