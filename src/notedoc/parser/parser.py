"""Markup tree parser.

Converts the flat token list produced by the lexer into a list of
``ParsedElement`` trees.

Tag matching
------------
For each start tag the parser looks for the matching end tag with a
depth counter: another start tag of the same name pushes, an end tag of
the same name pops, and the end tag met at depth 0 closes the element.
The tokens in between are parsed recursively to build the children, so
``<div><div>a</div>b</div>`` nests correctly.

Recovery
--------
The parser never raises.

- an end tag with no open element is skipped;
- a start tag with no matching end tag turns the raw remainder of the
  enclosing range (from that tag on) into one text leaf;
- text that is empty after trimming is dropped, other text keeps its
  surrounding whitespace;
- an element at ``max_depth`` keeps its descendant text flattened into a
  single leaf instead of being descended into.
"""
from __future__ import annotations

from notedoc.grammar.entities import unescape
from notedoc.grammar.tags import MAX_NESTING_DEPTH
from notedoc.grammar.tokens import Token, TokenType
from notedoc.lexer.lexer import tokenize
from notedoc.parser.elements import ParsedElement


class TreeParser:
    """Builds ``ParsedElement`` trees from markup tokens.

    Parameters
    ----------
    tokens:
        The token list produced by the lexer.  Must end with ``EOF``.
    source:
        The markup the tokens were scanned from; used to recover the raw
        text of unterminated elements.
    max_depth:
        Maximum element nesting depth that is descended into.
    """

    def __init__(
        self,
        tokens: list[Token],
        source: str,
        max_depth: int = MAX_NESTING_DEPTH,
    ) -> None:
        self._tokens: list[Token] = tokens
        self._source: str = source
        self._max_depth: int = max_depth

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self) -> list[ParsedElement]:
        """Parse the whole token list.

        Returns
        -------
        list[ParsedElement]
            Top-level elements and text leaves in source order.
        """
        if not self._tokens:
            return []
        return self._parse_range(0, len(self._tokens) - 1, 0)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _parse_range(self, lo: int, hi: int, depth: int) -> list[ParsedElement]:
        """Parse tokens ``[lo, hi)``; ``tokens[hi]`` bounds the range."""
        elements: list[ParsedElement] = []
        idx = lo
        while idx < hi:
            tok = self._tokens[idx]

            if tok.type is TokenType.TEXT:
                if tok.value.strip():
                    elements.append(ParsedElement.text_leaf(tok.value))
                idx += 1
                continue

            if tok.type is TokenType.END_TAG:
                # Stray end tag: nothing open at this level.
                idx += 1
                continue

            if tok.type is TokenType.EMPTY_TAG:
                elements.append(ParsedElement.element(tok.value, tok.attrs))
                idx += 1
                continue

            close = self._find_close(idx, hi)
            if close is None:
                remainder = unescape(self._source[tok.offset : self._tokens[hi].offset])
                if remainder.strip():
                    elements.append(ParsedElement.text_leaf(remainder))
                break

            if depth >= self._max_depth:
                children = self._flatten(idx + 1, close)
            else:
                children = tuple(self._parse_range(idx + 1, close, depth + 1))
            elements.append(ParsedElement.element(tok.value, tok.attrs, children))
            idx = close + 1

        return elements

    def _find_close(self, start: int, hi: int) -> int | None:
        """Return the index of the end tag matching the start tag at ``start``."""
        name = self._tokens[start].value
        depth = 0
        for idx in range(start + 1, hi):
            tok = self._tokens[idx]
            if tok.value != name:
                continue
            if tok.type is TokenType.START_TAG:
                depth += 1
            elif tok.type is TokenType.END_TAG:
                if depth == 0:
                    return idx
                depth -= 1
        return None

    def _flatten(self, lo: int, hi: int) -> tuple[ParsedElement, ...]:
        """Collapse tokens ``[lo, hi)`` into at most one text leaf."""
        text = "".join(
            tok.value for tok in self._tokens[lo:hi] if tok.type is TokenType.TEXT
        )
        if not text.strip():
            return ()
        return (ParsedElement.text_leaf(text),)


# ---------------------------------------------------------------------------
# Module-level convenience function
# ---------------------------------------------------------------------------


def parse(source: str, max_depth: int = MAX_NESTING_DEPTH) -> list[ParsedElement]:
    """Tokenize and parse a markup string into ``ParsedElement`` trees.

    Parameters
    ----------
    source:
        Markup text, possibly malformed.
    max_depth:
        Maximum element nesting depth that is descended into.

    Returns
    -------
    list[ParsedElement]
        Top-level parse trees; empty for blank input.
    """
    return TreeParser(tokenize(source), source, max_depth=max_depth).parse()
