"""Serialize comment AST back to comment text.

Converts AST nodes to comment source. Useful for:
- Formatters
- Documentation generators
- Property-based testing (roundtrip: parse -> serialize -> parse)

Python 3.12+.
"""

from ftlcomments.constants import (
    DESCRIPTION_SEPARATOR,
    INLINE_WS,
    NEWLINE,
    PARAMETER_SIGIL,
    VARIABLE_PARAMETER_NAME,
    VARIABLE_SIGIL,
)

from .ast import Comment, Entry, Parameter, Text, Variable
from .parser.examples import extract_examples
from .visitor import ASTVisitor

__all__ = ["CommentSerializer", "SerializationValidationError", "serialize"]


class SerializationValidationError(ValueError):
    """Raised when AST validation fails during serialization.

    The AST would serialize to text that parses back to a different AST.
    Only programmatically built nodes can trigger this; parser output always
    round-trips.
    """


def _format_examples(examples: tuple[str, ...]) -> str:
    """Render the trailing example clause ("(example: a)" / "(examples: a, b)")."""
    label = "example" if len(examples) == 1 else "examples"
    return f"({label}: {', '.join(examples)})"


def _description_text(node: Variable) -> str:
    """Description as written after " - ", including any example clause."""
    description = node.description or ""
    if not node.examples:
        return description
    clause = _format_examples(node.examples)
    return f"{description} {clause}" if description else clause


def _starts_parameter_line(line: str) -> bool:
    return line.lstrip("".join(INLINE_WS)).startswith(PARAMETER_SIGIL)


def _validate_text(node: Text, previous: Entry | None, context: str) -> None:
    """Validate a Text entry and its position after the previous entry."""
    if any(_starts_parameter_line(line) for line in node.content.split(NEWLINE)):
        msg = f"{context}: text contains a line starting with '{PARAMETER_SIGIL}'"
        raise SerializationValidationError(msg)

    match previous:
        case Text():
            msg = f"{context}: adjacent text entries would merge into one"
            raise SerializationValidationError(msg)
        case Variable(description=description) if (
            description is not None and not node.content.startswith(NEWLINE)
        ):
            msg = (
                f"{context}: text after a described variable must start with "
                "a blank line, otherwise it continues the description"
            )
            raise SerializationValidationError(msg)
        case _:
            pass


def _validate_parameter(node: Parameter, context: str) -> None:
    """Validate a generic Parameter."""
    if node.name == VARIABLE_PARAMETER_NAME:
        msg = f"{context}: parameter named '{VARIABLE_PARAMETER_NAME}' must be a Variable"
        raise SerializationValidationError(msg)
    if " " in node.name or NEWLINE in node.name:
        msg = f"{context}: parameter name {node.name!r} contains a space or newline"
        raise SerializationValidationError(msg)
    if NEWLINE in node.value or node.value.startswith(INLINE_WS):
        msg = f"{context}: parameter value {node.value!r} spans lines or starts with whitespace"
        raise SerializationValidationError(msg)


def _validate_variable(node: Variable, context: str) -> None:
    """Validate a Variable, including its example clause."""
    if " " in node.name or NEWLINE in node.name:
        msg = f"{context}: variable name {node.name!r} contains a space or newline"
        raise SerializationValidationError(msg)

    if node.variable_type is not None and ")" in node.variable_type:
        msg = f"{context}: variable type {node.variable_type!r} contains ')'"
        raise SerializationValidationError(msg)

    if node.description is None:
        if node.examples:
            msg = f"{context}: examples require a description (use an empty string)"
            raise SerializationValidationError(msg)
        return

    description = node.description
    if (
        description.startswith(INLINE_WS)
        or NEWLINE + NEWLINE in description
        or NEWLINE + PARAMETER_SIGIL in description
    ):
        msg = (
            f"{context}: description {description!r} starts with whitespace "
            "or contains a blank line or a parameter line"
        )
        raise SerializationValidationError(msg)

    if extract_examples(_description_text(node)) != (node.examples, description):
        msg = f"{context}: examples {node.examples!r} do not survive example extraction"
        raise SerializationValidationError(msg)


def _validate_comment(comment: Comment) -> None:
    """Validate a Comment AST for serialization.

    Raises:
        SerializationValidationError: If any entry would not round-trip
    """
    if comment.body == (Text(content=""),):
        msg = "entry 0: a lone empty text entry serializes to an empty comment"
        raise SerializationValidationError(msg)

    previous: Entry | None = None
    for index, entry in enumerate(comment.body):
        context = f"entry {index}"
        match entry:
            case Text():
                _validate_text(entry, previous, context)
            case Parameter():
                _validate_parameter(entry, context)
            case Variable():
                context = f"{context} (${entry.name})"
                _validate_variable(entry, context)
                if index < len(comment.body) - 1 and _description_text(entry).endswith(NEWLINE):
                    msg = f"{context}: only the last entry may end its description with a newline"
                    raise SerializationValidationError(msg)
        previous = entry


class CommentSerializer(ASTVisitor[str]):
    """Converts a Comment AST back to comment text.

    Each entry is rendered by its visit_<Entry> method; entries are joined
    with newlines. Reusable: all output state is local to serialize().

    Usage:
        >>> serializer = CommentSerializer()
        >>> serializer.serialize(Comment(body=(Parameter("revision", "1"),)))
        '@revision 1'
    """

    def serialize(self, comment: Comment, *, validate: bool = False) -> str:
        """Serialize Comment to comment text.

        Args:
            comment: Comment AST node
            validate: If True, check the AST round-trips before serializing

        Returns:
            Comment text (no trailing newline)

        Raises:
            SerializationValidationError: If validate=True and AST is invalid
        """
        if validate:
            _validate_comment(comment)
        return self.visit(comment)

    def visit_Comment(self, node: Comment) -> str:
        """Serialize entries separated by newlines."""
        return NEWLINE.join(self.visit(entry) for entry in node.body)

    def visit_Text(self, node: Text) -> str:
        """Serialize Text verbatim."""
        return node.content

    def visit_Parameter(self, node: Parameter) -> str:
        """Serialize Parameter as "@name value" ("@name" when value is empty)."""
        if node.value:
            return f"{PARAMETER_SIGIL}{node.name} {node.value}"
        return f"{PARAMETER_SIGIL}{node.name}"

    def visit_Variable(self, node: Variable) -> str:
        """Serialize Variable as "@var $name (type) - description (examples: ...)"."""
        parts = [f"{PARAMETER_SIGIL}{VARIABLE_PARAMETER_NAME} {VARIABLE_SIGIL}{node.name}"]

        if node.variable_type is not None:
            parts.append(f" ({node.variable_type})")

        if node.description is not None or node.examples:
            parts.append(f" {DESCRIPTION_SEPARATOR} {_description_text(node)}")

        return "".join(parts)


def serialize(comment: Comment, *, validate: bool = False) -> str:
    """Serialize Comment to comment text.

    Convenience function for CommentSerializer.serialize().

    Args:
        comment: Comment AST node
        validate: If True, check the AST round-trips before serializing

    Returns:
        Comment text

    Raises:
        SerializationValidationError: If validate=True and AST is invalid

    Example:
        >>> from ftlcomments.syntax import parse, serialize
        >>> serialize(parse("@var $name (String) - User name"))
        '@var $name (String) - User name'
    """
    serializer = CommentSerializer()
    return serializer.serialize(comment, validate=validate)
