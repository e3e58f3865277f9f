"""Token definitions for the markup lexer.

The markup vocabulary is small: runs of character data, start tags,
end tags and empty (void or self-closing) tags.  Every scanned token is
a ``Token`` dataclass carrying its type, its decoded value (tag name or
text), the tag attributes and its source position.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Exhaustive enumeration of markup token types."""

    TEXT = auto()
    START_TAG = auto()
    END_TAG = auto()
    EMPTY_TAG = auto()
    EOF = auto()


TAG_TOKENS: frozenset[TokenType] = frozenset(
    {TokenType.START_TAG, TokenType.END_TAG, TokenType.EMPTY_TAG}
)


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token with source-location metadata.

    Parameters
    ----------
    type:
        The ``TokenType`` variant for this token.
    value:
        For tags, the lower-cased tag name.  For ``TEXT``, the character
        data with reserved entities already decoded.
    line:
        1-based line number in the source.
    col:
        1-based column number of the first character of the token.
    offset:
        0-based offset from the start of the source string.
    attrs:
        Attribute ``(name, value)`` pairs in source order (tags only).
    """

    type: TokenType
    value: str
    line: int
    col: int
    offset: int
    attrs: tuple[tuple[str, str], ...] = ()

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.col})"

    @property
    def is_tag(self) -> bool:
        """Return True for start, end and empty tags."""
        return self.type in TAG_TOKENS

    def attr(self, name: str) -> str | None:
        """Return the first value of attribute ``name``, or ``None``."""
        for key, value in self.attrs:
            if key == name:
                return value
        return None
