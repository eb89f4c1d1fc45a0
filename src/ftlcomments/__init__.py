"""ftlcomments - documentation grammar for Fluent (FTL) comment blocks.

Parses the structured text inside FTL comments into an AST and serializes it
back:

    ## Greeting shown on the dashboard
    ## @var $name (String) - User name (examples: "Nick", "Oliver")
    ## @revision 2

Public API:
    parse - Parse comment text to a Comment AST
    try_parse - Parse returning (Comment | None, errors) instead of raising
    serialize - Serialize a Comment AST to comment text
    parse_comment_lines - Parse raw "#" / "##" / "###" comment lines
    serialize_comment_lines - Serialize a Comment AST as FTL comment lines
    validate_comment - Lint comment text (syntax errors and warnings)
    extract_examples - Split a trailing example list off a description

Exceptions:
    FluentCommentError - Base exception class
    CommentSyntaxError - Comment text does not match the grammar
    CommentLineError - Raw comment lines are malformed

Submodules:
    ftlcomments.syntax.ast - AST node types (Comment, Text, Parameter, Variable)
    ftlcomments.introspection - Variable and parameter lookup over a Comment
    ftlcomments.diagnostics - Error types, formatters and validation results
"""

from .diagnostics import CommentLineError, CommentSyntaxError, FluentCommentError
from .enums import CommentType
from .syntax import Comment, Parameter, Text, Variable, extract_examples, parse, serialize, try_parse
from .syntax.comment_lines import parse_comment_lines, serialize_comment_lines
from .validation import validate_comment

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("ftlcomments")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Comment",
    "CommentLineError",
    "CommentSyntaxError",
    "CommentType",
    "FluentCommentError",
    "Parameter",
    "Text",
    "Variable",
    "__version__",
    "extract_examples",
    "parse",
    "parse_comment_lines",
    "serialize",
    "serialize_comment_lines",
    "try_parse",
    "validate_comment",
]
