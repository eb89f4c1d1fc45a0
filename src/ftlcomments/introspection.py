"""Comment introspection for variable and parameter extraction.

Read-only helpers over a parsed Comment. Nothing here re-parses source; all
functions work on the AST, so programmatically built comments are supported
too.

Python 3.12+.
"""

from dataclasses import dataclass

from ftlcomments.constants import NEWLINE
from ftlcomments.syntax.ast import Comment, Parameter, Text, Variable
from ftlcomments.syntax.visitor import ASTVisitor

__all__ = [
    "CommentInfo",
    "EntryCollector",
    "find_variable",
    "get_parameters",
    "get_text",
    "get_variables",
    "introspect_comment",
]


@dataclass(frozen=True, slots=True)
class CommentInfo:
    """Immutable summary of a comment block."""

    variables: tuple[Variable, ...]
    """Variable declarations in source order (duplicates kept)."""

    parameters: tuple[Parameter, ...]
    """Generic parameters in source order (never includes variables)."""

    text: str
    """Content of all Text entries joined with newlines."""

    _variable_names: frozenset[str]
    """Cached variable names for O(1) lookup."""

    def get_variable_names(self) -> frozenset[str]:
        """Get set of documented variable names (without $ prefix)."""
        return self._variable_names

    def documents_variable(self, name: str) -> bool:
        """Check if the comment documents a variable.

        Args:
            name: Variable name (without $ prefix)
        """
        return name in self._variable_names

    def get_parameter_names(self) -> frozenset[str]:
        """Get set of generic parameter names (without @ prefix)."""
        return frozenset(parameter.name for parameter in self.parameters)


class EntryCollector(ASTVisitor[None]):
    """AST visitor that sorts comment entries by kind.

    Comment is the only node with children, so generic_visit() reaches every
    entry; each visit_<Entry> method records it.
    """

    __slots__ = ("parameters", "texts", "variables")

    def __init__(self) -> None:
        """Initialize visitor with empty result lists."""
        super().__init__()
        self.variables: list[Variable] = []
        self.parameters: list[Parameter] = []
        self.texts: list[Text] = []

    def visit_Variable(self, node: Variable) -> None:
        """Record a variable declaration."""
        self.variables.append(node)

    def visit_Parameter(self, node: Parameter) -> None:
        """Record a generic parameter."""
        self.parameters.append(node)

    def visit_Text(self, node: Text) -> None:
        """Record a text entry."""
        self.texts.append(node)


def _collect(comment: Comment) -> EntryCollector:
    collector = EntryCollector()
    collector.visit(comment)
    return collector


def get_variables(comment: Comment) -> tuple[Variable, ...]:
    """Get all variable declarations in source order.

    Example:
        >>> [v.name for v in get_variables(parse("@var $a\\n@revision 1\\n@var $b"))]
        ['a', 'b']
    """
    return tuple(_collect(comment).variables)


def get_parameters(comment: Comment, name: str | None = None) -> tuple[Parameter, ...]:
    """Get generic parameters in source order, optionally filtered by name.

    Args:
        comment: Comment AST
        name: Only return parameters with this name (without @ prefix)
    """
    parameters = _collect(comment).parameters
    if name is None:
        return tuple(parameters)
    return tuple(parameter for parameter in parameters if parameter.name == name)


def find_variable(comment: Comment, name: str) -> Variable | None:
    """Find the first declaration of a variable.

    Args:
        comment: Comment AST
        name: Variable name (without $ prefix)

    Returns:
        First matching Variable, or None if the variable is not documented
    """
    for entry in comment.body:
        match entry:
            case Variable(name=variable_name) if variable_name == name:
                return entry
            case _:
                continue
    return None


def get_text(comment: Comment) -> str:
    """Get the free text of a comment (Text entries joined with newlines)."""
    return NEWLINE.join(text.content for text in _collect(comment).texts)


def introspect_comment(comment: Comment) -> CommentInfo:
    """Summarize a comment block in one pass.

    Example:
        >>> info = introspect_comment(parse("Greeting\\n@var $user (String) - User name"))
        >>> info.documents_variable("user"), info.text
        (True, 'Greeting')
    """
    collector = _collect(comment)
    variables = tuple(collector.variables)
    return CommentInfo(
        variables=variables,
        parameters=tuple(collector.parameters),
        text=NEWLINE.join(text.content for text in collector.texts),
        _variable_names=frozenset(variable.name for variable in variables),
    )
