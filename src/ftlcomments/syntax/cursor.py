"""Immutable cursor infrastructure for comment parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.12+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (O(n) only for errors)

Speculative Lookahead:
    Because a Cursor is a value, lookahead needs no second mutable pointer.
    A rule marks a position by keeping the cursor it has, probes ahead with
    a copy, and then either commits (adopts the probe) or rewinds (drops it):

        >>> lookahead = skip_inline_ws(cursor)   # probe
        >>> if lookahead.is_at("@"):
        ...     cursor = lookahead                # commit
        ... # else: lookahead is discarded        # rewind

Line Ending Support:
    "\\n" is the line delimiter. CRLF input keeps its "\\r" as content.
"""

from dataclasses import dataclass, field

from ftlcomments.diagnostics import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["Cursor", "LineOffsetCache", "ParseError", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Note: This is the preferred way to check for EOF.
              Use this in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input. Check is_eof (or use is_at) first.
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def is_at(self, char: str) -> bool:
        """Check whether the current character equals char.

        Returns False at EOF instead of raising, so it is safe in loop
        conditions and lookahead probes.
        """
        return not self.is_eof and self.source[self.pos] == char

    def is_at_any(self, chars: tuple[str, ...]) -> bool:
        """Check whether the current character is one of chars (False at EOF)."""
        return not self.is_eof and self.source[self.pos] in chars

    def peek(self, offset: int = 1) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF).

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.advance().pos
            1
            >>> cursor.pos  # Original unchanged
            0
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Store the start cursor, scan, then slice:

            >>> start = Cursor("hello world", 0)
            >>> cursor = start
            >>> while not cursor.is_eof and cursor.current != " ":
            ...     cursor = cursor.advance()
            >>> start.slice_to(cursor.pos)
            'hello'
        """
        return self.source[self.pos : end_pos]

    def skip_until(self, stops: tuple[str, ...]) -> "Cursor":
        """Advance to the first character in stops (or EOF), not consuming it.

        Example:
            >>> Cursor("name rest", 0).skip_until((" ", "\\n")).pos
            4
        """
        c = self
        while not c.is_eof and c.current not in stops:
            c = c.advance()
        return c

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position.
            Only call for error reporting, not during normal parsing!

        Example:
            >>> Cursor("line1\\nline2", 8).compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in O(n) single pass, then provides
    O(log n) lookups using binary search. Used by validation, which maps
    several entries back to source lines.

    Example:
        >>> cache = LineOffsetCache("line1\\nline2\\nline3")
        >>> cache.get_line_col(6)   # Start of line 2
        (2, 1)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        """Build line offset cache from source."""
        offsets = [0]
        for i, char in enumerate(source):
            if char == "\n":
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    @property
    def line_count(self) -> int:
        """Number of lines in the indexed source."""
        return len(self._offsets)

    def line_start(self, line: int) -> int:
        """Offset of the first character of a 1-indexed line."""
        return self._offsets[line - 1]

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get line and column for position using binary search.

        Args:
            pos: Character position in source (0-indexed, clamped)

        Returns:
            (line, column) tuple (1-indexed)
        """
        pos = max(0, min(pos, self._source_len))

        # Line number = index of largest offset <= pos
        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= pos:
                left = mid
            else:
                right = mid - 1

        return (left + 1, pos - self._offsets[left] + 1)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Pattern:
        Every grammar rule has signature:
            def parse_foo(cursor: Cursor) -> ParseResult[Foo] | ParseError:
                ...
                return ParseResult(parsed_value, new_cursor)

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Parse failure with location and the characters that were expected.

    Returned (never raised) by grammar rules. The public parse() converts it
    into a CommentSyntaxError; try_parse() hands it back inside one.

    Example:
        >>> cursor = Cursor("@var name", 5)
        >>> error = ParseError('Expected token: "$"', cursor, expected=("$",))
        >>> print(error.format_error())
        1:6: Expected token: "$" (expected: '$')
    """

    message: str
    cursor: Cursor
    expected: tuple[str, ...] = field(default_factory=tuple)
    code: DiagnosticCode = DiagnosticCode.EXPECTED_CHARACTER
    hint: str | None = None

    @property
    def position(self) -> int:
        """Character offset of the failure."""
        return self.cursor.pos

    def to_diagnostic(self) -> Diagnostic:
        """Build a Diagnostic carrying the failure location."""
        line, col = self.cursor.compute_line_col()
        span = SourceSpan(start=self.cursor.pos, end=self.cursor.pos, line=line, column=col)
        return Diagnostic(
            code=self.code,
            message=self.message,
            span=span,
            hint=self.hint,
            expected=self.expected,
        )

    def format_error(self) -> str:
        """Format error with line:column.

        Example:
            >>> error = ParseError("Expected ')'", Cursor("a\\n(b", 4), expected=(")",))
            >>> error.format_error()
            "2:3: Expected ')' (expected: ')')"
        """
        line, col = self.cursor.compute_line_col()
        error_msg = f"{line}:{col}: {self.message}"

        if self.expected:
            expected_str = ", ".join(f"'{e}'" for e in self.expected)
            error_msg += f" (expected: {expected_str})"

        return error_msg

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format error with source context and pointer.

        Shows the problematic line and a caret pointing to the error location.

        Args:
            context_lines: Number of lines to show before/after error

        Returns:
            Multi-line formatted error with context
        """
        line, col = self.cursor.compute_line_col()
        lines = self.cursor.source.split("\n")

        result_lines = [self.format_error(), ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1])

            if i == line:
                pointer = " " * (len(line_num_str) + col - 1) + "^"
                result_lines.append(pointer)

        return "\n".join(result_lines)
