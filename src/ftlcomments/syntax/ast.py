"""Comment AST (Abstract Syntax Tree) node definitions.

A parsed comment block is a Comment owning an ordered tuple of entries.
Entry is a closed union of three frozen node types; consumers dispatch with
``match`` rather than a type tag:

    match entry:
        case Variable(name=name):
            ...
        case Parameter(name=name, value=value):
            ...
        case Text(content=content):
            ...

Python 3.12+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = [
    "ASTNode",
    "Comment",
    "Entry",
    "Parameter",
    "Text",
    "Variable",
]


@dataclass(frozen=True, slots=True)
class Text:
    """Run of free-form prose.

    Lines are joined with "\\n" exactly as in source; interior blank lines are
    kept. Never begins with "@" after leading inline whitespace.

    Example:
        foo is foo
        and more foo
    """

    content: str


@dataclass(frozen=True, slots=True)
class Parameter:
    """Generic "@name value" declaration.

    The value is the remainder of the first line only.

    Example:
        @revision 1  ->  Parameter(name="revision", value="1")
    """

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class Variable:
    """Documented variable: "@var $name (Type) - description (examples: a, b)".

    Attributes:
        name: Variable identifier without the "$" sigil
        variable_type: Free-text type annotation, None when absent
        description: Prose description with any trailing example list
            removed, None when there is no " - " part
        examples: Raw example tokens in source order (quotes kept)

    Example:
        @var $name (String) - User Name (example: "Nick", "Oliver")
        ->  Variable(
                name="name",
                variable_type="String",
                description="User Name",
                examples=('"Nick"', '"Oliver"'),
            )
    """

    name: str
    variable_type: str | None = None
    description: str | None = None
    examples: tuple[str, ...] = ()


type Entry = Text | Parameter | Variable


@dataclass(frozen=True, slots=True)
class Comment:
    """Root AST node: one parsed comment block.

    Attributes:
        body: Entries in source order
    """

    body: tuple[Entry, ...] = ()


type ASTNode = Comment | Text | Parameter | Variable
