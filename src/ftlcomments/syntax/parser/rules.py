"""Grammar rules for the comment sub-language.

EBNF (informal):
    comment      := entry ("\\n" entry)*
    entry        := parameter | text
    text         := any text not starting an "@" line
    parameter    := "@" name (" " variable | " " value)
    variable     := "$" varname [ "(" type ")" ] [ " - " description ]
    description  := multiline text, optionally ending in
                    "(example: a, b)" or "(examples: a, b)"

Every rule takes an immutable Cursor and returns either
ParseResult[T] (value + cursor after the production) or ParseError.
Rules never raise for malformed input; the first ParseError is propagated
unchanged to the caller, which aborts the parse. There is no Junk recovery
in comments.
"""

from ftlcomments.constants import (
    DESCRIPTION_SEPARATOR,
    NEWLINE,
    PARAMETER_SIGIL,
    VARIABLE_PARAMETER_NAME,
    VARIABLE_SIGIL,
)
from ftlcomments.diagnostics import ErrorTemplate
from ftlcomments.syntax.ast import Entry, Parameter, Text, Variable
from ftlcomments.syntax.cursor import Cursor, ParseError, ParseResult
from ftlcomments.syntax.parser.examples import extract_examples
from ftlcomments.syntax.parser.whitespace import (
    is_description_break,
    is_parameter_line_break,
    skip_inline_ws,
    starts_parameter,
)

__all__ = [
    "expect_char",
    "parse_description",
    "parse_entry",
    "parse_parameter",
    "parse_parameter_name",
    "parse_parameter_value",
    "parse_text",
    "parse_variable",
    "parse_variable_name",
    "parse_variable_type",
]

# Characters that end a parameter or variable name.
_NAME_STOPS: tuple[str, ...] = (" ", NEWLINE)

# Characters that end a "(type)" annotation. The type may span lines.
_TYPE_STOPS: tuple[str, ...] = (")",)


def expect_char(cursor: Cursor, char: str) -> ParseResult[str] | ParseError:
    """Consume char if it is the current character.

    Args:
        cursor: Current position in source
        char: Required character

    Returns:
        ParseResult with the consumed character, or ParseError
        (EXPECTED_CHARACTER). A missing newline is reported as "␤".
    """
    if cursor.is_at(char):
        return ParseResult(char, cursor.advance())

    diagnostic = ErrorTemplate.expected_character(char)
    return ParseError(
        diagnostic.message,
        cursor,
        expected=diagnostic.expected,
        code=diagnostic.code,
        hint=diagnostic.hint,
    )


def parse_entry(cursor: Cursor) -> ParseResult[Entry] | ParseError:
    """Parse one entry: a parameter if "@" follows inline whitespace, else text.

    Whitespace before "@" is consumed; whitespace before plain text is kept
    as part of the text.
    """
    if starts_parameter(cursor):
        return parse_parameter(skip_inline_ws(cursor))
    return parse_text(cursor)


def parse_text(cursor: Cursor) -> ParseResult[Text]:
    """Parse free text up to EOF or up to the newline before a parameter line.

    Newlines followed by anything other than a parameter are part of the
    content, so multi-line prose and interior blank lines stay together.
    The terminating newline is left unconsumed for the entry separator.
    """
    start = cursor
    while not cursor.is_eof and not is_parameter_line_break(cursor):
        cursor = cursor.advance()
    return ParseResult(Text(content=start.slice_to(cursor.pos)), cursor)


def parse_parameter(cursor: Cursor) -> ParseResult[Entry] | ParseError:
    """Parse "@name value", or "@var ..." as a Variable.

    Args:
        cursor: Position of the "@"
    """
    sigil = expect_char(cursor, PARAMETER_SIGIL)
    if isinstance(sigil, ParseError):
        return sigil

    name = parse_parameter_name(sigil.cursor)
    if name.value == VARIABLE_PARAMETER_NAME:
        return parse_variable(name.cursor)

    value = parse_parameter_value(skip_inline_ws(name.cursor))
    return ParseResult(Parameter(name=name.value, value=value.value), value.cursor)


def parse_parameter_name(cursor: Cursor) -> ParseResult[str]:
    """Read a parameter name up to a space, newline or EOF."""
    end = cursor.skip_until(_NAME_STOPS)
    return ParseResult(cursor.slice_to(end.pos), end)


def parse_parameter_value(cursor: Cursor) -> ParseResult[str]:
    """Read the rest of the line (never spans lines)."""
    end = cursor.skip_until((NEWLINE,))
    return ParseResult(cursor.slice_to(end.pos), end)


def parse_variable(cursor: Cursor) -> ParseResult[Entry] | ParseError:
    """Parse the part of a variable declaration after "@var".

    Grammar:
        "$" varname [ "(" type ")" ] [ "-" description ]

    Inline whitespace is allowed between all parts. Without "-" the variable
    has no description and no examples.
    """
    name = parse_variable_name(skip_inline_ws(cursor))
    if isinstance(name, ParseError):
        return name

    variable_type = parse_variable_type(skip_inline_ws(name.cursor))

    cursor = skip_inline_ws(variable_type.cursor)
    if not cursor.is_at(DESCRIPTION_SEPARATOR):
        variable = Variable(name=name.value, variable_type=variable_type.value)
        return ParseResult(variable, cursor)

    description = parse_description(skip_inline_ws(cursor.advance()))
    examples, trimmed = extract_examples(description.value)
    variable = Variable(
        name=name.value,
        variable_type=variable_type.value,
        description=trimmed,
        examples=examples,
    )
    return ParseResult(variable, description.cursor)


def parse_variable_name(cursor: Cursor) -> ParseResult[str] | ParseError:
    """Parse "$name" and return the name without its sigil."""
    sigil = expect_char(cursor, VARIABLE_SIGIL)
    if isinstance(sigil, ParseError):
        return sigil
    return parse_parameter_name(sigil.cursor)


def parse_variable_type(cursor: Cursor) -> ParseResult[str | None]:
    """Parse an optional "(type)" annotation.

    Returns:
        ParseResult with the type text, or with None when no "(" is present.
        An unclosed "(" runs to EOF; the ")" is consumed only when present.
    """
    if not cursor.is_at("("):
        return ParseResult(None, cursor)

    start = cursor.advance()
    end = start.skip_until(_TYPE_STOPS)
    after = end.advance() if end.is_at(")") else end
    return ParseResult(start.slice_to(end.pos), after)


def parse_description(cursor: Cursor) -> ParseResult[str]:
    """Read a multi-line description.

    Stops at EOF, or before a newline that is followed by a blank line or by
    a line starting with "@". The boundary newline is left unconsumed.
    """
    start = cursor
    while not cursor.is_eof and not is_description_break(cursor):
        cursor = cursor.advance()
    return ParseResult(start.slice_to(cursor.pos), cursor)
