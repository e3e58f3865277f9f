"""Native block projection: a flat, display-only view of a document.

Renderers that cannot display markup draw notes from a list of
``NativeBlock`` objects instead.  The projection is deliberately lossy:

- link targets are dropped; only the five boolean style flags survive
- a list item shows only the text of its first block child
- a table becomes one ``"a | b"`` paragraph per row, with a ``"---"``
  paragraph after the header row

``blocks_to_document`` goes the other way, for editors that save from
blocks: style flags become marks again and ``"\\n"`` becomes a hard break.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from notedoc.model.nodes import (
    BOLD,
    CODE,
    ITALIC,
    LIST_TYPES,
    STRIKE,
    UNDERLINE,
    Blockquote,
    BulletList,
    CodeBlock,
    Document,
    HardBreak,
    Heading,
    HorizontalRule,
    ListItem,
    Mark,
    MarkType,
    Node,
    OrderedList,
    Paragraph,
    Table,
    Text,
    canonical_marks,
    children_of,
    plain_text,
)
from notedoc.model.structure import merge_text

TABLE_CELL_SEPARATOR = " | "
TABLE_HEADER_RULE = "---"

_FLAG_MARKS: dict[str, Mark] = {
    "bold": BOLD,
    "italic": ITALIC,
    "underline": UNDERLINE,
    "strike": STRIKE,
    "code": CODE,
}


@dataclass(frozen=True, slots=True)
class TextSegment:
    """A run of styled text."""

    text: str
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike: bool = False
    code: bool = False

    @classmethod
    def from_text(cls, node: Text) -> "TextSegment":
        return cls(
            text=node.value,
            bold=node.has_mark(MarkType.BOLD),
            italic=node.has_mark(MarkType.ITALIC),
            underline=node.has_mark(MarkType.UNDERLINE),
            strike=node.has_mark(MarkType.STRIKE),
            code=node.has_mark(MarkType.CODE),
        )

    def to_dict(self) -> dict[str, object]:
        """Return ``{"text": ...}`` plus only the flags that are set."""
        data: dict[str, object] = {"text": self.text}
        for flag in _FLAG_MARKS:
            if getattr(self, flag):
                data[flag] = True
        return data

    def marks(self) -> tuple[Mark, ...]:
        """Return the canonical marks for the flags that are set."""
        return canonical_marks([mark for flag, mark in _FLAG_MARKS.items() if getattr(self, flag)])


@dataclass(frozen=True, slots=True)
class NativeBlock:
    """A display block.

    Parameters
    ----------
    kind:
        ``heading``, ``paragraph``, ``bulletList``, ``orderedList``,
        ``listItem``, ``blockquote``, ``codeBlock`` or ``horizontalRule``.
    segments:
        Styled text of the block.
    level:
        Heading level; ``None`` for other kinds.
    children:
        Item blocks of a list; ``None`` for other kinds.
    """

    kind: str
    segments: tuple[TextSegment, ...] = ()
    level: int | None = None
    children: tuple["NativeBlock", ...] | None = None

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "kind": self.kind,
            "segments": [segment.to_dict() for segment in self.segments],
        }
        if self.level is not None:
            data["level"] = self.level
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data


def text_segments(node: Node) -> list[TextSegment]:
    """Return the segments of every text leaf under ``node``, in order.

    A hard break contributes a ``"\\n"`` segment.
    """
    if isinstance(node, Text):
        return [TextSegment.from_text(node)]
    if isinstance(node, HardBreak):
        return [TextSegment("\n")]
    segments: list[TextSegment] = []
    for child in children_of(node):
        segments.extend(text_segments(child))
    return segments


def _segments_of(nodes: tuple[Node, ...]) -> tuple[TextSegment, ...]:
    segments: list[TextSegment] = []
    for node in nodes:
        segments.extend(text_segments(node))
    return tuple(segments)


def _project_table(table: Table) -> list[NativeBlock]:
    blocks: list[NativeBlock] = []
    for index, row in enumerate(table.content):
        cells = [plain_text(cell).strip() for cell in row.content]
        if any(cells):
            line = TABLE_CELL_SEPARATOR.join(cells)
            blocks.append(NativeBlock("paragraph", (TextSegment(line),)))
        if index == 0 and len(table.content) > 1:
            blocks.append(NativeBlock("paragraph", (TextSegment(TABLE_HEADER_RULE),)))
    return blocks


def project_node(node: Node) -> list[NativeBlock]:
    """Project one top-level node; most nodes yield exactly one block."""
    if isinstance(node, Heading):
        return [NativeBlock("heading", _segments_of(node.content), level=node.level)]
    if isinstance(node, Paragraph):
        return [NativeBlock("paragraph", _segments_of(node.content))]
    if isinstance(node, LIST_TYPES):
        items: list[NativeBlock] = []
        for item in node.content:
            items.extend(project_node(item))
        return [NativeBlock(node.kind, (), children=tuple(items))]
    if isinstance(node, ListItem):
        first = node.content[0] if node.content else None
        segments = tuple(text_segments(first)) if first is not None else ()
        return [NativeBlock("listItem", segments)]
    if isinstance(node, Blockquote):
        return [NativeBlock("blockquote", _segments_of(node.content))]
    if isinstance(node, CodeBlock):
        return [NativeBlock("codeBlock", (TextSegment(node.code, code=True),))]
    if isinstance(node, HorizontalRule):
        return [NativeBlock("horizontalRule")]
    if isinstance(node, Table):
        return _project_table(node)
    if isinstance(node, (Text, HardBreak)):
        return [NativeBlock("paragraph", tuple(text_segments(node)))]
    # Table parts outside a table: show their text.
    return [NativeBlock("paragraph", _segments_of(children_of(node)))]


def project_native(document: Document) -> list[NativeBlock]:
    """Flatten ``document`` into display blocks.

    Parameters
    ----------
    document:
        The document to project.

    Returns
    -------
    list[NativeBlock]
        One block per top-level node, except tables which yield one
        block per row.
    """
    blocks: list[NativeBlock] = []
    for node in document.content:
        blocks.extend(project_node(node))
    return blocks


# ---------------------------------------------------------------------------
# Blocks → document
# ---------------------------------------------------------------------------


def segments_to_inline(segments: Iterable[TextSegment]) -> tuple[Node, ...]:
    """Rebuild inline nodes from styled segments.

    Every ``"\\n"`` inside a segment becomes a ``HardBreak``; neighbouring
    runs with the same flags are merged and empty runs are dropped.
    """
    inline: list[Node] = []
    for segment in segments:
        marks = segment.marks()
        for index, line in enumerate(segment.text.split("\n")):
            if index:
                inline.append(HardBreak())
            inline.append(Text(line, marks))
    return tuple(merge_text(inline))


def _list_item(block: NativeBlock) -> ListItem:
    return ListItem((Paragraph(segments_to_inline(block.segments)),))


def _list_items(block: NativeBlock) -> tuple[ListItem, ...]:
    # A list block without children is a single item holding its own text.
    if block.children is None:
        return (_list_item(block),)
    return tuple(_list_item(child) for child in block.children)


def block_to_node(block: NativeBlock) -> Node:
    """Rebuild one top-level node from a display block.

    Unknown kinds become paragraphs.  A bare ``listItem`` block becomes a
    one-item bullet list.
    """
    if block.kind == Heading.kind:
        level = min(max(block.level or 1, 1), 6)
        return Heading(level, segments_to_inline(block.segments))
    if block.kind == BulletList.kind:
        return BulletList(_list_items(block))
    if block.kind == OrderedList.kind:
        return OrderedList(_list_items(block))
    if block.kind == ListItem.kind:
        return BulletList((_list_item(block),))
    if block.kind == Blockquote.kind:
        return Blockquote((Paragraph(segments_to_inline(block.segments)),))
    if block.kind == CodeBlock.kind:
        return CodeBlock.of("".join(segment.text for segment in block.segments))
    if block.kind == HorizontalRule.kind:
        return HorizontalRule()
    return Paragraph(segments_to_inline(block.segments))


def blocks_to_document(blocks: Sequence[NativeBlock]) -> Document:
    """Rebuild a ``Document`` from display blocks.

    Consecutive list blocks of the same kind are joined into one list, so
    an editor that keeps one block per item saves a single list.

    Parameters
    ----------
    blocks:
        Display blocks in document order.

    Returns
    -------
    Document
        Never empty; no blocks yield one empty paragraph.
    """
    content: list[Node] = []
    for block in blocks:
        node = block_to_node(block)
        previous = content[-1] if content else None
        if isinstance(node, LIST_TYPES) and type(previous) is type(node):
            content[-1] = type(node)(previous.content + node.content)  # type: ignore[union-attr]
            continue
        content.append(node)
    return Document(tuple(content) or (Paragraph(),))
