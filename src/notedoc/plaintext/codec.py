"""Plain-text shorthand codec.

The minimal text-box editor stores notes as lines of shorthand::

    # Title
    - first item
    - second item
    A paragraph.

``decode_text`` reads that shorthand into a document and ``encode_text``
writes a document back out.  The mapping is lossy in both directions:
inline marks have no shorthand and are dropped, and encoding covers
more block kinds (ordered lists, quotes, code, rules, tables) than
decoding reads back.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

from notedoc.model.nodes import (
    Blockquote,
    BulletList,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Table,
    Text,
    plain_text,
)

HEADING_LINE: Final[re.Pattern[str]] = re.compile(r"^(#{1,6})\s+(.+)$")
LIST_LINE: Final[re.Pattern[str]] = re.compile(r"^[-•]\s+(.+)$")
LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r?\n")

CODE_FENCE = "```"
RULE_LINE = "---"


class LineKind(Enum):
    """Classification of one shorthand line."""

    HEADING = "heading"
    LIST_ITEM = "listItem"
    PARAGRAPH = "paragraph"
    EMPTY = "empty"


@dataclass(frozen=True, slots=True)
class ParsedLine:
    """One classified shorthand line with its prefix removed."""

    kind: LineKind
    text: str = ""
    level: int | None = None


def classify_line(line: str) -> ParsedLine:
    """Classify a single line of shorthand.

    The line is trimmed first; a heading needs one to six ``#`` followed
    by whitespace, a list item a ``-`` or ``•`` followed by whitespace.
    """
    trimmed = line.strip()
    if not trimmed:
        return ParsedLine(LineKind.EMPTY)

    match = HEADING_LINE.match(trimmed)
    if match:
        return ParsedLine(LineKind.HEADING, match.group(2), level=len(match.group(1)))

    match = LIST_LINE.match(trimmed)
    if match:
        return ParsedLine(LineKind.LIST_ITEM, match.group(1))

    return ParsedLine(LineKind.PARAGRAPH, trimmed)


def _inline(text: str) -> tuple[Node, ...]:
    return (Text(text),) if text else ()


def decode_text(text: str) -> Document:
    """Read plain-text shorthand into a ``Document``.

    Parameters
    ----------
    text:
        Shorthand lines separated by ``\\n`` or ``\\r\\n``.

    Returns
    -------
    Document
        One node per line, except that consecutive list-item lines form
        a single bullet list.  Empty lines become empty paragraphs.
    """
    nodes: list[Node] = []
    items: list[ListItem] = []

    for line in LINE_BREAK.split(text):
        parsed = classify_line(line)
        if parsed.kind is LineKind.LIST_ITEM:
            items.append(ListItem((Paragraph(_inline(parsed.text)),)))
            continue
        if items:
            nodes.append(BulletList(tuple(items)))
            items = []
        if parsed.kind is LineKind.HEADING:
            nodes.append(Heading(parsed.level or 1, _inline(parsed.text)))
        elif parsed.kind is LineKind.PARAGRAPH:
            nodes.append(Paragraph(_inline(parsed.text)))
        else:
            nodes.append(Paragraph())
    if items:
        nodes.append(BulletList(tuple(items)))

    return Document(tuple(nodes)) if nodes else Document.empty()


def _item_text(item: Node) -> str:
    # Only the first block of an item has a place on its line.
    content = getattr(item, "content", ())
    return plain_text(content[0]) if content else ""


def encode_node(node: Node) -> str:
    """Render one top-level node as shorthand (possibly several lines)."""
    if isinstance(node, Heading):
        return f"{'#' * node.level} {plain_text(node)}"
    if isinstance(node, BulletList):
        return "\n".join(f"- {_item_text(item)}" for item in node.content)
    if isinstance(node, OrderedList):
        return "\n".join(f"{index}. {_item_text(item)}" for index, item in enumerate(node.content, 1))
    if isinstance(node, ListItem):
        return _item_text(node)
    if isinstance(node, Blockquote):
        return f"> {plain_text(node)}"
    if isinstance(node, CodeBlock):
        return f"{CODE_FENCE}\n{node.code}\n{CODE_FENCE}"
    if isinstance(node, HorizontalRule):
        return RULE_LINE
    if isinstance(node, Table):
        return "\n".join(
            " | ".join(plain_text(cell).strip() for cell in row.content) for row in node.content
        )
    return plain_text(node)


def encode_text(document: Document) -> str:
    """Write a ``Document`` as plain-text shorthand.

    Parameters
    ----------
    document:
        The document to encode.

    Returns
    -------
    str
        One line (or line group) per top-level node joined with ``\\n``.
        Marks and link targets are dropped.
    """
    return "\n".join(encode_node(node) for node in document.content)
