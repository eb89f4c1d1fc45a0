"""Trailing example-list extraction for variable descriptions.

A variable description may end with a parenthesized list of sample values:

    User name (examples: "John", "Mary")

This is a documentation convention, not a grammar production, so the
extractor is a best-effort suffix match that never fails: anything that does
not look exactly like a trailing clause leaves the description untouched.
"""

from ftlcomments.constants import EXAMPLE_MARKER

__all__ = ["extract_examples"]


def extract_examples(text: str) -> tuple[tuple[str, ...], str]:
    """Split a trailing "(example: ...)" / "(examples: ...)" clause off text.

    Algorithm:
        1. Find the LAST "(example" in text.
        2. Skip an optional "s"; the next character must be ":".
        3. Skip the ":" and at most one space.
        4. The list runs to the next ")", which must be the final character.
        5. Split on ",", stripping whitespace around each piece. Pieces are
           kept verbatim, quotes included.
        6. Drop one space immediately before the clause.

    Args:
        text: Raw description text

    Returns:
        (examples, trimmed_text). On any mismatch: ((), text) unchanged.

    Example:
        >>> extract_examples('User name (examples: "John", "Mary")')
        (('"John"', '"Mary"'), 'User name')
        >>> extract_examples("see (example: a) above")
        ((), 'see (example: a) above')
    """
    example_pos = text.rfind(EXAMPLE_MARKER)
    if example_pos == -1:
        return ((), text)

    ptr = example_pos + len(EXAMPLE_MARKER)
    if text.startswith("s", ptr):
        ptr += 1
    if not text.startswith(":", ptr):
        return ((), text)
    ptr += 1
    if text.startswith(" ", ptr):
        ptr += 1

    close_pos = text.find(")", ptr)
    if close_pos == -1 or close_pos != len(text) - 1:
        return ((), text)

    examples = tuple(piece.strip() for piece in text[ptr:close_pos].split(","))

    if example_pos > 0 and text[example_pos - 1] == " ":
        example_pos -= 1
    return (examples, text[:example_pos])
