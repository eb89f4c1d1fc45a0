"""Tests for comment grammar failures.

The grammar has a single failure kind (expected character). Every failure
aborts the whole parse; there is no partial result.
"""

from __future__ import annotations

import pytest
from hypothesis import given

from ftlcomments.diagnostics import CommentSyntaxError, DiagnosticCode, FluentCommentError
from ftlcomments.syntax import CommentParser, parse, try_parse
from ftlcomments.syntax.cursor import Cursor, ParseError
from ftlcomments.syntax.parser.rules import expect_char
from tests.strategies import comment_sources


def _error(source: str) -> CommentSyntaxError:
    with pytest.raises(CommentSyntaxError) as exc_info:
        parse(source)
    return exc_info.value


# ============================================================================
# EXPECT_CHAR
# ============================================================================


class TestExpectChar:
    """Test the single-character expectation primitive."""

    def test_consumes_matching_character(self) -> None:
        """A match advances past the character."""
        result = expect_char(Cursor("$x", 0), "$")

        assert not isinstance(result, ParseError)
        assert result.value == "$"
        assert result.cursor.pos == 1

    def test_mismatch_returns_error(self) -> None:
        """A mismatch is returned, not raised, and does not advance."""
        result = expect_char(Cursor("x", 0), "$")

        assert isinstance(result, ParseError)
        assert result.position == 0
        assert result.message == 'Expected token: "$"'
        assert result.expected == ("$",)

    def test_eof_is_a_mismatch(self) -> None:
        """Expecting at EOF fails instead of raising EOFError."""
        result = expect_char(Cursor("", 0), ")")

        assert isinstance(result, ParseError)
        assert result.expected == (")",)

    def test_newline_rendered_as_symbol(self) -> None:
        """A missing newline is shown as U+2424 so messages stay one line."""
        result = expect_char(Cursor("x", 0), "\n")

        assert isinstance(result, ParseError)
        assert result.message == 'Expected token: "␤"'
        assert result.expected == ("␤",)


# ============================================================================
# GRAMMAR FAILURES
# ============================================================================


class TestVariableErrors:
    """Test malformed variable declarations."""

    def test_missing_dollar(self) -> None:
        """'@var' must be followed by '$name'."""
        error = _error("@var name")

        assert error.parse_error.position == 5
        assert error.parse_error.expected == ("$",)
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.EXPECTED_CHARACTER
        assert error.diagnostic.hint == "Variable declarations look like '@var $name'"

    def test_bare_var(self) -> None:
        """'@var' at EOF still expects '$'."""
        error = _error("@var")

        assert error.parse_error.position == 4
        assert error.parse_error.expected == ("$",)

    def test_trailing_junk_after_variable(self) -> None:
        """Anything but '-' or a newline after the type is rejected."""
        error = _error("@var $x (T) y")

        assert error.parse_error.position == 12
        assert error.parse_error.message == 'Expected token: "␤"'

    def test_trailing_junk_after_name(self) -> None:
        """Without type or '-', the entry must end after the name."""
        error = _error("@var $x junk")

        assert error.parse_error.position == 8
        assert error.parse_error.expected == ("␤",)


class TestErrorReporting:
    """Test how failures surface through the public API."""

    def test_syntax_error_is_fluent_comment_error(self) -> None:
        """CommentSyntaxError belongs to the package's exception hierarchy."""
        assert isinstance(_error("@var x"), FluentCommentError)

    def test_error_location_on_later_line(self) -> None:
        """Spans carry 1-indexed line and column."""
        error = _error("intro\n@var name")

        assert error.diagnostic is not None
        assert error.diagnostic.span is not None
        assert (error.diagnostic.span.line, error.diagnostic.span.column) == (2, 6)

    def test_error_message_is_rust_style(self) -> None:
        """str(error) is the formatted diagnostic."""
        assert str(_error("@var name")) == (
            'error[EXPECTED_CHARACTER]: Expected token: "$"\n'
            "  --> line 1, column 6\n"
            "  = expected: $\n"
            "  = help: Variable declarations look like '@var $name'"
        )

    def test_no_partial_result(self) -> None:
        """Entries parsed before the failure are discarded."""
        comment, errors = try_parse("intro\n@revision 1\n@var oops")

        assert comment is None
        assert errors[0].parse_error.format_error() == "3:6: Expected token: \"$\" (expected: '$')"

    def test_size_limit_is_not_a_syntax_error(self) -> None:
        """Oversized input raises ValueError from every entry point."""
        parser = CommentParser(max_source_size=1)

        with pytest.raises(ValueError, match="max_source_size"):
            parser.parse_with_errors("ab")


# ============================================================================
# PROPERTIES
# ============================================================================


class TestParserProperties:
    """Property tests over grammar-shaped input."""

    @given(comment_sources())
    def test_parse_only_raises_syntax_errors(self, source: str) -> None:
        """parse() returns a Comment or raises CommentSyntaxError, nothing else."""
        try:
            parse(source)
        except CommentSyntaxError as error:
            assert error.diagnostic is not None
            assert 0 <= error.parse_error.position <= len(source)

    @given(comment_sources())
    def test_try_parse_agrees_with_parse(self, source: str) -> None:
        """try_parse() fails exactly when parse() raises."""
        comment, errors = try_parse(source)

        if comment is None:
            assert len(errors) == 1
            with pytest.raises(CommentSyntaxError):
                parse(source)
        else:
            assert errors == ()
            assert parse(source) == comment
