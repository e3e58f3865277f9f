"""Markup grammar module.

Exports token definitions, the tag vocabulary and the reserved-character
escaping helpers.
"""
from __future__ import annotations

from notedoc.grammar.entities import escape, unescape
from notedoc.grammar.tags import (
    HEADING_LEVELS,
    MAX_NESTING_DEPTH,
    TABLE_SECTION_TAGS,
    VOID_TAGS,
    parse_attributes,
)
from notedoc.grammar.tokens import TAG_TOKENS, Token, TokenType

__all__ = [
    # Token types
    "TokenType",
    "Token",
    "TAG_TOKENS",
    # Tag vocabulary
    "VOID_TAGS",
    "HEADING_LEVELS",
    "MAX_NESTING_DEPTH",
    "TABLE_SECTION_TAGS",
    "parse_attributes",
    # Entities
    "escape",
    "unescape",
]
