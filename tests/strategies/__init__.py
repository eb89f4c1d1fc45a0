"""Hypothesis strategies for ftlcomments property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules:

- comments: comment source text and Comment AST nodes

Usage:
    from tests.strategies import comment_nodes, comment_sources
    from tests.strategies.comments import variable_nodes, descriptions
"""

from .comments import (
    # Constants
    NAME_CHARS,
    PLAIN_CHARS,
    SAFE_CHARS,
    SOURCE_FRAGMENTS,
    TYPE_CHARS,
    # String strategies (for parsing)
    comment_sources,
    descriptions,
    example_clauses,
    parameter_line_sources,
    plain_text_sources,
    # AST strategies (for serialization)
    comment_nodes,
    parameter_nodes,
    text_nodes,
    variable_nodes,
)

__all__ = [
    "NAME_CHARS",
    "PLAIN_CHARS",
    "SAFE_CHARS",
    "SOURCE_FRAGMENTS",
    "TYPE_CHARS",
    "comment_nodes",
    "comment_sources",
    "descriptions",
    "example_clauses",
    "parameter_line_sources",
    "parameter_nodes",
    "plain_text_sources",
    "text_nodes",
    "variable_nodes",
]
