"""Comment syntax package.

Provides parser, AST definitions, visitor pattern, and serialization for the
documentation grammar used inside Fluent comment blocks.

Python 3.12+.
"""

from ftlcomments.diagnostics import CommentSyntaxError

from .ast import ASTNode, Comment, Entry, Parameter, Text, Variable
from .cursor import Cursor, LineOffsetCache, ParseError, ParseResult
from .parser import CommentParser, extract_examples
from .serializer import SerializationValidationError, serialize
from .visitor import ASTTransformer, ASTVisitor

# Note: CommentSerializer is intentionally NOT exported.
# Users should use the serialize() function instead of instantiating CommentSerializer directly.

__all__ = [
    "ASTNode",
    "ASTTransformer",
    "ASTVisitor",
    "Comment",
    "CommentParser",
    "Cursor",
    "Entry",
    "LineOffsetCache",
    "Parameter",
    "ParseError",
    "ParseResult",
    "SerializationValidationError",
    "Text",
    "Variable",
    "extract_examples",
    "parse",
    "serialize",
    "try_parse",
]


def parse(source: str) -> Comment:
    """Parse comment text into AST.

    Convenience function for CommentParser.parse().

    Args:
        source: Comment text without FTL "#" markers

    Returns:
        Comment containing parsed entries

    Raises:
        CommentSyntaxError: If the text does not match the comment grammar

    Example:
        >>> from ftlcomments.syntax import parse
        >>> comment = parse("@var $name (String) - User name")
        >>> comment.body[0].name
        'name'
    """
    parser = CommentParser()
    return parser.parse(source)


def try_parse(source: str) -> tuple[Comment | None, tuple[CommentSyntaxError, ...]]:
    """Parse comment text without raising on syntax errors.

    Convenience function for CommentParser.parse_with_errors().

    Example:
        >>> comment, errors = try_parse("@var (String)")
        >>> errors[0].diagnostic.message
        'Expected token: "$"'
    """
    parser = CommentParser()
    return parser.parse_with_errors(source)
