"""Whitespace handling and lookahead probes for the comment grammar.

Inline whitespace in comments is space (U+0020) or tab (U+0009). Newlines
are never skipped here; they separate entries and are handled by the rules.
"""

from ftlcomments.constants import INLINE_WS, NEWLINE, PARAMETER_SIGIL
from ftlcomments.syntax.cursor import Cursor


def skip_inline_ws(cursor: Cursor) -> Cursor:
    """Skip a maximal run of inline whitespace (space, tab).

    Used both to commit past whitespace and, on a throwaway copy, to probe
    ahead: the caller decides whether to adopt the returned cursor.

    Args:
        cursor: Current position in source

    Returns:
        New cursor at first non-inline-whitespace character (or EOF)
    """
    while cursor.is_at_any(INLINE_WS):
        cursor = cursor.advance()
    return cursor


def starts_parameter(cursor: Cursor) -> bool:
    """Check whether a parameter ("@") starts here after inline whitespace.

    Pure lookahead: nothing is committed.
    """
    return skip_inline_ws(cursor).is_at(PARAMETER_SIGIL)


def is_parameter_line_break(cursor: Cursor) -> bool:
    """Check whether cursor sits on a newline that ends a Text entry.

    A Text entry stops right before a newline whose next line starts a
    parameter, so the top-level loop can consume it as the entry separator.
    """
    return cursor.is_at(NEWLINE) and starts_parameter(cursor.advance())


def is_description_break(cursor: Cursor) -> bool:
    """Check whether cursor sits on a newline that ends a description.

    A description runs until a blank line or a line starting with "@"
    (without skipping indentation first).
    """
    return cursor.is_at(NEWLINE) and cursor.peek() in (NEWLINE, PARAMETER_SIGIL)
