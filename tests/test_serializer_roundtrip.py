"""Property-based round-trip tests: parse -> serialize -> parse.

Two directions are checked:
- Source first: anything the parser accepts serializes to text that parses
  back to the same AST.
- AST first: generated ASTs accepted by validate=True survive the trip.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings

from ftlcomments.syntax import Comment, serialize, try_parse
from ftlcomments.syntax.parser import CommentParser
from tests.strategies import comment_nodes, comment_sources


class TestSourceRoundTrip:
    """Round trip starting from grammar-shaped source text."""

    @given(comment_sources())
    def test_parser_output_round_trips(self, source: str) -> None:
        """parse(serialize(parse(s))) == parse(s) whenever s parses."""
        comment, _ = try_parse(source)
        event(f"parsed={comment is not None}")
        if comment is None:
            return

        assert CommentParser().parse(serialize(comment)) == comment

    @given(comment_sources())
    def test_parser_output_passes_validation(self, source: str) -> None:
        """validate=True never rejects what the parser produced."""
        comment, _ = try_parse(source)
        if comment is None:
            return

        serialize(comment, validate=True)

    @given(comment_sources())
    def test_serialization_is_idempotent(self, source: str) -> None:
        """Serializing twice through the parser is stable."""
        comment, _ = try_parse(source)
        if comment is None:
            return

        once = serialize(comment)
        assert serialize(CommentParser().parse(once)) == once


class TestAstRoundTrip:
    """Round trip starting from generated ASTs."""

    @given(comment_nodes())
    def test_generated_ast_round_trips(self, comment: Comment) -> None:
        """parse(serialize(c)) == c for every validated AST."""
        text = serialize(comment, validate=True)

        assert CommentParser().parse(text) == comment

    @pytest.mark.fuzz
    @settings(max_examples=5000)
    @given(comment_nodes())
    def test_generated_ast_round_trips_intensive(self, comment: Comment) -> None:
        """Intensive variant of the AST round trip for dedicated fuzz runs."""
        assert CommentParser().parse(serialize(comment, validate=True)) == comment
