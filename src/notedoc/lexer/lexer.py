"""Markup lexer: converts raw markup text into a flat list of tokens.

The lexer is a single-pass character scanner that produces a
``list[Token]`` from a markup string.  It tracks line and column numbers
for every token so diagnostics can point at the offending input.

Scanning rules:
    - ``<`` followed by a letter opens a start tag; ``</`` followed by a
      letter opens an end tag.  Any other ``<`` is ordinary text.
    - a tag that ends with ``/>`` or whose name is in ``VOID_TAGS`` is
      emitted as ``EMPTY_TAG``.
    - a tag without a closing ``>`` turns the rest of the input into text.
    - character data has the reserved entities (``&amp;`` and friends)
      decoded; adjacent text runs are merged into one ``TEXT`` token.

The lexer never raises: every input string yields a token list
terminated by ``EOF``.
"""
from __future__ import annotations

import re
from typing import Final

from notedoc.grammar.entities import unescape
from notedoc.grammar.tags import TAG_NAME, VOID_TAGS, parse_attributes
from notedoc.grammar.tokens import Token, TokenType

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_TAG_START: Final[re.Pattern[str]] = re.compile(r"[A-Za-z]")
_QUOTES: Final[frozenset[str]] = frozenset({'"', "'"})


class Lexer:
    """Single-pass markup lexer.

    Parameters
    ----------
    source:
        The complete markup text to tokenize.
    """

    __slots__ = ("_source", "_pos", "_line", "_col", "_tokens", "_token_line", "_token_col")

    def __init__(self, source: str) -> None:
        self._source: str = source
        self._pos: int = 0
        self._line: int = 1
        self._col: int = 1
        self._tokens: list[Token] = []
        self._token_line: int = 1
        self._token_col: int = 1

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def tokenize(self) -> list[Token]:
        """Scan the entire source and return the complete token list.

        Returns
        -------
        list[Token]
            Ordered list of tokens, always ending with an ``EOF`` token
            whose offset equals the source length.
        """
        while self._pos < len(self._source):
            self._scan_one()
        self._token_line = self._line
        self._token_col = self._col
        self._emit(TokenType.EOF, "", self._pos)
        return self._tokens

    # ------------------------------------------------------------------
    # Internal scanner
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position without advancing."""
        return self._source[self._pos] if self._pos < len(self._source) else ""

    def _peek(self, offset: int = 1) -> str:
        """Return the character at ``pos + offset`` without advancing."""
        idx = self._pos + offset
        return self._source[idx] if idx < len(self._source) else ""

    def _advance(self) -> str:
        """Consume and return the current character, updating line/col."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _advance_to(self, index: int) -> None:
        """Consume characters up to (not including) ``index``."""
        while self._pos < index:
            self._advance()

    def _emit(
        self,
        token_type: TokenType,
        value: str,
        start_offset: int,
        attrs: tuple[tuple[str, str], ...] = (),
    ) -> None:
        """Append a token using the recorded start position."""
        self._tokens.append(
            Token(
                type=token_type,
                value=value,
                line=self._token_line,
                col=self._token_col,
                offset=start_offset,
                attrs=attrs,
            )
        )

    def _emit_text(self, raw: str, start_offset: int) -> None:
        """Append character data, merging it into a preceding TEXT token."""
        value = unescape(raw)
        if self._tokens and self._tokens[-1].type is TokenType.TEXT:
            previous = self._tokens.pop()
            self._tokens.append(
                Token(
                    type=TokenType.TEXT,
                    value=previous.value + value,
                    line=previous.line,
                    col=previous.col,
                    offset=previous.offset,
                )
            )
            return
        self._emit(TokenType.TEXT, value, start_offset)

    def _at_tag_start(self) -> bool:
        """Return True if the ``<`` under the cursor opens a tag."""
        if self._current() != "<":
            return False
        nxt = self._peek()
        if nxt == "/":
            return bool(_TAG_START.match(self._peek(2)))
        return bool(_TAG_START.match(nxt))

    def _scan_one(self) -> None:
        """Scan exactly one token."""
        self._token_line = self._line
        self._token_col = self._col
        start = self._pos
        if self._at_tag_start():
            self._scan_tag(start)
        else:
            self._scan_text(start)

    # ------------------------------------------------------------------
    # Token-specific scanners
    # ------------------------------------------------------------------

    def _scan_text(self, start: int) -> None:
        """Consume character data up to the next tag opening."""
        self._advance()
        while self._pos < len(self._source) and not self._at_tag_start():
            self._advance()
        self._emit_text(self._source[start : self._pos], start)

    def _find_tag_end(self, start: int) -> int:
        """Return the index of the ``>`` closing the tag opened at ``start``.

        Quoted attribute values may contain ``>``.  A quote opens a value
        only when it follows ``=`` (whitespace allowed in between), so an
        apostrophe inside an unquoted value is an ordinary character.  If
        quoting never balances, the first ``>`` after ``start`` is used
        instead.  Returns -1 when there is no ``>`` at all.
        """
        quote = ""
        previous = ""
        for idx in range(start + 1, len(self._source)):
            ch = self._source[idx]
            if quote:
                if ch == quote:
                    quote = ""
                    previous = ch
            elif ch in _QUOTES and previous == "=":
                quote = ch
            elif ch == ">":
                return idx
            elif not ch.isspace():
                previous = ch
        return self._source.find(">", start + 1)

    def _scan_tag(self, start: int) -> None:
        """Consume a start, end or empty tag."""
        end = self._find_tag_end(start)
        if end == -1:
            # Malformed: the rest of the input is plain text.
            self._advance_to(len(self._source))
            self._emit_text(self._source[start:], start)
            return

        interior = self._source[start + 1 : end]
        self._advance_to(end + 1)

        if interior.startswith("/"):
            match = TAG_NAME.match(interior, 1)
            self._emit(TokenType.END_TAG, match.group(0).lower() if match else "", start)
            return

        match = TAG_NAME.match(interior)
        name = match.group(0).lower() if match else ""
        rest = interior[match.end() :] if match else interior
        attrs = tuple((key, unescape(value)) for key, value in parse_attributes(rest))
        self_closing = interior.rstrip().endswith("/")
        token_type = (
            TokenType.EMPTY_TAG if self_closing or name in VOID_TAGS else TokenType.START_TAG
        )
        self._emit(token_type, name, start, attrs)


# ---------------------------------------------------------------------------
# Module-level convenience function
# ---------------------------------------------------------------------------


def tokenize(source: str) -> list[Token]:
    """Tokenize a markup string and return the complete token list.

    Parameters
    ----------
    source:
        Markup text, possibly malformed.

    Returns
    -------
    list[Token]
        All tokens, terminated by ``EOF``.

    Example
    -------
    ::

        from notedoc.lexer import tokenize
        tokens = tokenize('<p>BP <strong>120/80</strong></p>')
    """
    return Lexer(source).tokenize()
