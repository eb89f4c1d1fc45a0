"""Validation utilities for comment blocks.

This module provides standalone lint-style validation for comment text,
separated from the parser for better modularity and testability.

Python 3.12+.
"""

from ftlcomments.validation.comment import (
    validate_comment,
)

__all__ = [
    "validate_comment",
]
