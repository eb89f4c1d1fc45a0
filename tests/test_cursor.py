"""Tests for cursor infrastructure.

Validates the immutable cursor pattern used by the comment grammar.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftlcomments.diagnostics import DiagnosticCode
from ftlcomments.syntax.cursor import Cursor, LineOffsetCache, ParseError, ParseResult

# ============================================================================
# CURSOR BASIC TESTS
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_cursor(self) -> None:
        """Create cursor at position 0."""
        cursor = Cursor("hello", 0)

        assert cursor.source == "hello"
        assert cursor.pos == 0
        assert not cursor.is_eof

    def test_cursor_immutability(self) -> None:
        """Cursor is immutable (frozen dataclass)."""
        cursor = Cursor("hello", 0)

        with pytest.raises(AttributeError):
            cursor.pos = 5  # type: ignore[misc]

    def test_advance_returns_new_cursor(self) -> None:
        """advance() leaves the original cursor untouched."""
        cursor = Cursor("hello", 0)
        moved = cursor.advance(2)

        assert moved.pos == 2
        assert cursor.pos == 0

    def test_advance_clamps_at_eof(self) -> None:
        """advance() never moves past the end of source."""
        assert Cursor("hi", 1).advance(10).pos == 2

    def test_cursors_compare_by_value(self) -> None:
        """A saved cursor is a mark: equal position means equal cursor."""
        source = "abc"
        assert Cursor(source, 1) == Cursor(source, 0).advance()


# ============================================================================
# EOF DETECTION
# ============================================================================


class TestCursorEOF:
    """Test EOF detection and EOF-safe accessors."""

    def test_is_eof_true_for_empty_source(self) -> None:
        """is_eof is True for empty source at position 0."""
        assert Cursor("", 0).is_eof

    def test_is_eof_true_at_end(self) -> None:
        """is_eof is True at end of source."""
        assert Cursor("hello", 5).is_eof

    def test_current_raises_at_eof(self) -> None:
        """current raises EOFError instead of returning a sentinel."""
        with pytest.raises(EOFError, match="Unexpected EOF at position 5"):
            _ = Cursor("hello", 5).current

    def test_is_at_false_at_eof(self) -> None:
        """is_at() is safe to call at EOF."""
        assert not Cursor("a", 1).is_at("a")

    def test_is_at_any_false_at_eof(self) -> None:
        """is_at_any() is safe to call at EOF."""
        assert not Cursor("", 0).is_at_any((" ", "\t"))

    def test_peek_beyond_eof_is_none(self) -> None:
        """peek() returns None past the end."""
        cursor = Cursor("ab", 1)

        assert cursor.peek(0) == "b"
        assert cursor.peek() is None


# ============================================================================
# SCANNING
# ============================================================================


class TestCursorScanning:
    """Test scanning helpers used by the grammar rules."""

    def test_is_at(self) -> None:
        """is_at() compares the current character."""
        cursor = Cursor("@var", 0)

        assert cursor.is_at("@")
        assert not cursor.is_at("v")

    def test_skip_until_stops_before_stop_char(self) -> None:
        """skip_until() does not consume the stop character."""
        end = Cursor("name rest", 0).skip_until((" ", "\n"))

        assert end.pos == 4
        assert end.current == " "

    def test_skip_until_runs_to_eof(self) -> None:
        """skip_until() stops at EOF when no stop character occurs."""
        assert Cursor("name", 0).skip_until((")",)).is_eof

    def test_slice_to(self) -> None:
        """slice_to() extracts from the cursor to an end offset."""
        start = Cursor("@revision 1", 1)
        end = start.skip_until((" ",))

        assert start.slice_to(end.pos) == "revision"


# ============================================================================
# LINE / COLUMN
# ============================================================================


class TestLineColumn:
    """Test line:column computation."""

    @pytest.mark.parametrize(
        ("source", "pos", "expected"),
        [
            ("abc", 0, (1, 1)),
            ("abc", 2, (1, 3)),
            ("line1\nline2", 6, (2, 1)),
            ("line1\nline2", 8, (2, 3)),
            ("a\n\nb", 3, (3, 1)),
        ],
    )
    def test_compute_line_col(self, source: str, pos: int, expected: tuple[int, int]) -> None:
        """compute_line_col() is 1-indexed like text editors."""
        assert Cursor(source, pos).compute_line_col() == expected

    def test_line_offset_cache_lookups(self) -> None:
        """LineOffsetCache maps offsets to lines with binary search."""
        cache = LineOffsetCache("line1\nline2\nline3")

        assert cache.line_count == 3
        assert cache.line_start(3) == 12
        assert cache.get_line_col(0) == (1, 1)
        assert cache.get_line_col(6) == (2, 1)
        assert cache.get_line_col(14) == (3, 3)

    def test_line_offset_cache_clamps_position(self) -> None:
        """Out-of-range positions are clamped to the source."""
        cache = LineOffsetCache("ab")

        assert cache.get_line_col(-5) == (1, 1)
        assert cache.get_line_col(99) == (1, 3)

    @given(st.text(alphabet="ab\n", max_size=40), st.data())
    def test_cache_agrees_with_cursor(self, source: str, data: st.DataObject) -> None:
        """LineOffsetCache and Cursor.compute_line_col() agree everywhere."""
        pos = data.draw(st.integers(min_value=0, max_value=len(source)))
        cache = LineOffsetCache(source)

        assert cache.get_line_col(pos) == Cursor(source, pos).compute_line_col()


# ============================================================================
# PARSE RESULT / PARSE ERROR
# ============================================================================


class TestParseResultAndError:
    """Test result and failure values returned by grammar rules."""

    def test_parse_result_holds_value_and_cursor(self) -> None:
        """ParseResult pairs a value with the cursor after it."""
        cursor = Cursor("hello", 0)
        result = ParseResult("h", cursor.advance())

        assert result.value == "h"
        assert result.cursor.pos == 1

    def test_parse_error_defaults(self) -> None:
        """ParseError defaults to the expected-character code."""
        error = ParseError('Expected token: "$"', Cursor("@var x", 5), expected=("$",))

        assert error.code is DiagnosticCode.EXPECTED_CHARACTER
        assert error.position == 5

    def test_format_error(self) -> None:
        """format_error() renders line:column, message and expectations."""
        error = ParseError("Expected ')'", Cursor("a\n(b", 4), expected=(")",))

        assert error.format_error() == "2:3: Expected ')' (expected: ')')"

    def test_format_error_without_expected(self) -> None:
        """Expectation suffix is omitted when nothing was expected."""
        error = ParseError("boom", Cursor("abc", 1))

        assert error.format_error() == "1:2: boom"

    def test_format_with_context_points_at_column(self) -> None:
        """format_with_context() draws a caret under the failing column."""
        error = ParseError("Expected token", Cursor("first\n@var name", 11), expected=("$",))
        lines = error.format_with_context().split("\n")

        assert lines[0] == "2:6: Expected token (expected: '$')"
        assert "   2 | @var name" in lines
        caret_line = lines[lines.index("   2 | @var name") + 1]
        assert caret_line.index("^") == len("   2 | ") + 5

    def test_to_diagnostic_carries_span(self) -> None:
        """to_diagnostic() converts the cursor into a SourceSpan."""
        error = ParseError('Expected token: "$"', Cursor("x\n@var y", 7), expected=("$",))
        diagnostic = error.to_diagnostic()

        assert diagnostic.span is not None
        assert diagnostic.span.start == 7
        assert (diagnostic.span.line, diagnostic.span.column) == (2, 6)
        assert diagnostic.expected == ("$",)
