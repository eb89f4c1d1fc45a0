"""Core comment parser implementation.

This module provides the CommentParser class that orchestrates parsing of
comment text into the AST defined in :mod:`ftlcomments.syntax.ast`.

Architecture:
    The parser uses an immutable cursor pattern (:class:`~ftlcomments.syntax.cursor.Cursor`).
    Each rule in :mod:`~ftlcomments.syntax.parser.rules` returns either a
    :class:`~ftlcomments.syntax.cursor.ParseResult` or a
    :class:`~ftlcomments.syntax.cursor.ParseError`. The first ParseError
    aborts the whole parse: a comment block is either fully parsed or rejected.

Security:
    Includes configurable input size limit to prevent DoS attacks via
    unbounded memory allocation from extremely large inputs.
"""

import logging

from ftlcomments.constants import MAX_SOURCE_SIZE, NEWLINE
from ftlcomments.diagnostics import CommentSyntaxError
from ftlcomments.syntax.ast import Comment, Entry
from ftlcomments.syntax.cursor import Cursor, ParseError, ParseResult
from ftlcomments.syntax.parser.rules import expect_char, parse_entry

__all__ = ["CommentParser", "parse_located_entries"]

logger = logging.getLogger(__name__)


def parse_located_entries(
    cursor: Cursor,
) -> ParseResult[tuple[tuple[int, Entry], ...]] | ParseError:
    """Parse entries until EOF, requiring a newline between consecutive entries.

    Args:
        cursor: Start of the comment text

    Returns:
        ParseResult with (start offset, entry) pairs in source order, or the
        first ParseError encountered. The offset is where the entry's line
        begins, before any indentation.
    """
    entries: list[tuple[int, Entry]] = []

    while not cursor.is_eof:
        if entries:
            separator = expect_char(cursor, NEWLINE)
            if isinstance(separator, ParseError):
                return separator
            cursor = separator.cursor

        entry = parse_entry(cursor)
        if isinstance(entry, ParseError):
            return entry
        entries.append((cursor.pos, entry.value))
        cursor = entry.cursor

    return ParseResult(tuple(entries), cursor)


class CommentParser:
    """Comment block parser using the immutable cursor pattern.

    Thread-safe: holds only configuration, all parse state is local.

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 1 MiB)
    """

    __slots__ = ("_max_source_size",)

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize parser with an optional size limit.

        Args:
            max_source_size: Maximum source size in characters (default: 1 MiB).
                            Set to 0 to disable the limit (not recommended).
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    def parse(self, source: str) -> Comment:
        """Parse comment text into a Comment AST.

        Args:
            source: Comment text without FTL "#" markers

        Returns:
            :class:`~ftlcomments.syntax.ast.Comment` with entries in source order

        Raises:
            CommentSyntaxError: If the text does not match the comment grammar
            ValueError: If source exceeds max_source_size

        Example:
            >>> parser = CommentParser()
            >>> parser.parse("@revision 1").body[0]
            Parameter(name='revision', value='1')
        """
        result = self.parse_result(source)
        if isinstance(result, ParseError):
            raise CommentSyntaxError(result)
        return result

    def parse_with_errors(
        self, source: str
    ) -> tuple[Comment | None, tuple[CommentSyntaxError, ...]]:
        """Parse comment text, returning errors instead of raising them.

        Returns:
            Tuple of (result, errors):
            - result: Parsed Comment, or None if parsing failed
            - errors: Empty tuple on success, one CommentSyntaxError on failure

        Raises:
            ValueError: If source exceeds max_source_size

        Example:
            >>> comment, errors = CommentParser().parse_with_errors("@var name")
            >>> comment is None, len(errors)
            (True, 1)
        """
        result = self.parse_result(source)
        if isinstance(result, ParseError):
            return (None, (CommentSyntaxError(result),))
        return (result, ())

    def parse_result(self, source: str) -> Comment | ParseError:
        """Parse comment text into a Comment or the ParseError that stopped it.

        Raises:
            ValueError: If source exceeds max_source_size
        """
        entries = self.parse_located(source)
        if isinstance(entries, ParseError):
            return entries
        return Comment(body=tuple(entry for _, entry in entries))

    def parse_located(self, source: str) -> tuple[tuple[int, Entry], ...] | ParseError:
        """Parse comment text into (start offset, entry) pairs.

        Used by tools that report per-entry locations (the AST carries none).

        Raises:
            ValueError: If source exceeds max_source_size

        Example:
            >>> CommentParser().parse_located("intro\\n@revision 1")
            ((0, Text(content='intro')), (6, Parameter(name='revision', value='1')))
        """
        self._check_size(source)

        result = parse_located_entries(Cursor(source, 0))
        if isinstance(result, ParseError):
            logger.debug("Comment parse failed: %s", result.format_error())
            return result

        logger.debug("Parsed comment with %d entries", len(result.value))
        return result.value

    def _check_size(self, source: str) -> None:
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in CommentParser constructor to increase limit."
            )
            raise ValueError(msg)
