"""Bridge between FTL comment lines and comment text.

In an .ftl file a comment block is a run of lines sharing one sigil:

    ## @var $name (String) - User name
    ## @revision 2

The comment grammar works on the text after the sigils. This module strips
the sigils (one optional space each) and puts them back on serialization.

Fluent syntax:
    CommentLine ::= ("###" | "##" | "#") ("\\u0020" comment_char*)? line_end

The space after the sigil is optional here, so "#text" is also accepted.
"""

import logging

from ftlcomments.constants import NEWLINE
from ftlcomments.diagnostics import CommentLineError, ErrorTemplate
from ftlcomments.enums import CommentType
from ftlcomments.syntax.ast import Comment
from ftlcomments.syntax.cursor import Cursor, ParseError, ParseResult
from ftlcomments.syntax.parser import CommentParser
from ftlcomments.syntax.serializer import serialize

__all__ = ["parse_comment_lines", "serialize_comment_lines", "strip_comment_lines"]

logger = logging.getLogger(__name__)

_MAX_HASHES = 3


def _expected(cursor: Cursor, token: str) -> ParseError:
    """ParseError for a missing sigil or separator token."""
    diagnostic = ErrorTemplate.expected_character(token)
    return ParseError(
        diagnostic.message,
        cursor,
        expected=diagnostic.expected,
        code=diagnostic.code,
        hint=diagnostic.hint,
    )


def _parse_comment_line(
    cursor: Cursor, comment_type: CommentType | None
) -> ParseResult[tuple[str, CommentType]] | ParseError:
    """Parse one comment line, returning its content and comment type.

    Args:
        cursor: Start of the line
        comment_type: Type fixed by the first line of the block, or None for it
    """
    line_start = cursor
    hash_count = 0
    while cursor.is_at("#"):
        hash_count += 1
        cursor = cursor.advance()

    if hash_count == 0:
        return _expected(line_start, comment_type.sigil if comment_type else "#")
    if hash_count > _MAX_HASHES:
        return _expected(line_start.advance(_MAX_HASHES), " ")

    line_type = CommentType.from_hash_count(hash_count)
    if comment_type is not None and line_type is not comment_type:
        return _expected(line_start, comment_type.sigil)

    # At most one space belongs to the sigil
    if cursor.is_at(" "):
        cursor = cursor.advance()

    end = cursor.skip_until((NEWLINE,))
    content = cursor.slice_to(end.pos)
    return ParseResult((content, line_type), end.advance())


def strip_comment_lines(source: str) -> tuple[str, CommentType]:
    """Remove comment sigils from a block of FTL comment lines.

    Args:
        source: One or more lines all starting with the same "#", "##" or "###".
            A final line end is optional and ignored.

    Returns:
        Tuple of (comment text, comment type). Empty source gives ("", COMMENT).

    Raises:
        CommentLineError: If a line has no sigil, more than three '#', or a
            different sigil than the first line

    Example:
        >>> strip_comment_lines("## @revision 2\\n## Second line\\n")
        ('@revision 2\\nSecond line', <CommentType.GROUP: 'group'>)
    """
    cursor = Cursor(source, 0)
    lines: list[str] = []
    comment_type: CommentType | None = None

    while not cursor.is_eof:
        result = _parse_comment_line(cursor, comment_type)
        if isinstance(result, ParseError):
            raise CommentLineError(result)
        content, comment_type = result.value
        lines.append(content)
        cursor = result.cursor

    resolved_type = comment_type or CommentType.COMMENT
    logger.debug("Stripped %d %s comment lines", len(lines), resolved_type)
    return (NEWLINE.join(lines), resolved_type)


def parse_comment_lines(source: str, parser: CommentParser | None = None) -> Comment:
    """Parse a block of FTL comment lines into a Comment AST.

    Positions in a CommentSyntaxError raised here refer to the stripped text,
    not to the original lines.

    Args:
        source: FTL comment lines
        parser: Parser to use (default: CommentParser with default limits)

    Raises:
        CommentLineError: If the lines are not a single comment block
        CommentSyntaxError: If the stripped text does not parse

    Example:
        >>> parse_comment_lines("# @var $count (Number)").body[0].variable_type
        'Number'
    """
    text, _ = strip_comment_lines(source)
    return (parser or CommentParser()).parse(text)


def serialize_comment_lines(
    comment: Comment,
    comment_type: CommentType = CommentType.COMMENT,
    *,
    validate: bool = False,
) -> str:
    """Serialize a Comment AST as FTL comment lines.

    Every line ends in "\\n". Empty lines become a bare sigil.

    Args:
        comment: Comment AST
        comment_type: Sigil to write ("#", "##" or "###")
        validate: Passed to serialize()

    Example:
        >>> print(serialize_comment_lines(CommentParser().parse("intro\\n\\n@revision 1")), end="")
        # intro
        #
        # @revision 1
    """
    prefix = comment_type.sigil
    output: list[str] = []
    for line in serialize(comment, validate=validate).split(NEWLINE):
        if line:
            output.append(f"{prefix} {line}\n")
        else:
            output.append(f"{prefix}\n")
    return "".join(output)
