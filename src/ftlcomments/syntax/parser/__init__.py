"""Comment grammar parser module.

Module Organization:
- core.py: CommentParser class and the entry loop
- rules.py: Grammar rules (entries, text, parameters, variables)
- whitespace.py: Inline whitespace skipping and lookahead probes
- examples.py: Trailing example-list extraction

Public API:
    CommentParser: Main parser class
    extract_examples: Example-list extractor (pure function)
"""

from ftlcomments.syntax.parser.core import CommentParser
from ftlcomments.syntax.parser.examples import extract_examples

__all__ = ["CommentParser", "extract_examples"]
