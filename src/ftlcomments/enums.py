"""Enumerations for ftlcomments type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.12+.
"""

from enum import StrEnum


class CommentType(StrEnum):
    """Type of FTL comment line a comment block was written with.

    StrEnum provides automatic string conversion: str(CommentType.COMMENT) == "comment"
    """

    COMMENT = "comment"
    """Standalone comment: # This is a comment"""

    GROUP = "group"
    """Group comment: ## Group Title"""

    RESOURCE = "resource"
    """Resource comment: ### Resource Description"""

    @property
    def sigil(self) -> str:
        """Line prefix for this comment type ("#", "##" or "###")."""
        return _SIGILS[self]

    @staticmethod
    def from_hash_count(count: int) -> "CommentType":
        """Map a run of 1-3 '#' characters to its comment type.

        Raises:
            ValueError: If count is not 1, 2 or 3
        """
        for comment_type, sigil in _SIGILS.items():
            if len(sigil) == count:
                return comment_type
        msg = f"Invalid comment sigil: expected 1-3 '#' characters, found {count}"
        raise ValueError(msg)


_SIGILS: dict[CommentType, str] = {
    CommentType.COMMENT: "#",
    CommentType.GROUP: "##",
    CommentType.RESOURCE: "###",
}


__all__ = [
    "CommentType",
]
