"""Document model node definitions.

Every node is a frozen dataclass so that document trees are immutable
and hashable; transforms always return new trees.  The ``Node`` union
covers all node variants; downstream code dispatches with
``isinstance`` checks against the classes below, and each class carries
a ``kind`` string matching its persisted name.

Marks are kept as a tuple in canonical order (bold, italic, underline,
strike, code, link) with at most one mark per type, so two text nodes
carrying the same styles compare equal regardless of how the styles
were applied.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


# ---------------------------------------------------------------------------
# Marks
# ---------------------------------------------------------------------------


class MarkType(Enum):
    """Inline style kinds.  Definition order is the canonical order."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKE = "strike"
    CODE = "code"
    LINK = "link"

    @property
    def rank(self) -> int:
        """Position of this mark type in the canonical order."""
        return _MARK_ORDER.index(self)


_MARK_ORDER: tuple[MarkType, ...] = tuple(MarkType)


@dataclass(frozen=True, slots=True)
class Mark:
    """An inline style applied to a text node.

    Parameters
    ----------
    type:
        The mark kind.
    href:
        Link target; only meaningful for ``MarkType.LINK``.
    """

    type: MarkType
    href: str | None = None

    def __repr__(self) -> str:
        if self.href is not None:
            return f"Mark({self.type.value}, {self.href!r})"
        return f"Mark({self.type.value})"

    @classmethod
    def link(cls, href: str) -> "Mark":
        return cls(MarkType.LINK, href)


BOLD = Mark(MarkType.BOLD)
ITALIC = Mark(MarkType.ITALIC)
UNDERLINE = Mark(MarkType.UNDERLINE)
STRIKE = Mark(MarkType.STRIKE)
CODE = Mark(MarkType.CODE)


def canonical_marks(marks: tuple[Mark, ...] | list[Mark]) -> tuple[Mark, ...]:
    """Return ``marks`` deduplicated by type and sorted canonically.

    When a type occurs more than once the first occurrence wins.
    """
    seen: dict[MarkType, Mark] = {}
    for mark in marks:
        seen.setdefault(mark.type, mark)
    return tuple(sorted(seen.values(), key=lambda m: m.type.rank))


# ---------------------------------------------------------------------------
# Inline nodes
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Text:
    """A text leaf.

    Parameters
    ----------
    value:
        The character data.
    marks:
        Canonically ordered inline styles.
    """

    kind: ClassVar[str] = "text"

    value: str
    marks: tuple[Mark, ...] = ()

    def has_mark(self, mark_type: MarkType) -> bool:
        """Return True if a mark of ``mark_type`` is present."""
        return any(mark.type is mark_type for mark in self.marks)

    def get_mark(self, mark_type: MarkType) -> Mark | None:
        """Return the mark of ``mark_type``, or ``None`` if absent."""
        for mark in self.marks:
            if mark.type is mark_type:
                return mark
        return None

    def with_mark(self, mark: Mark) -> "Text":
        """Return a copy carrying ``mark`` in addition to the current marks.

        A mark whose type is already present is not added again.
        """
        return Text(self.value, canonical_marks(self.marks + (mark,)))


@dataclass(frozen=True, slots=True)
class HardBreak:
    """A forced line break inside a block."""

    kind: ClassVar[str] = "hardBreak"


# ---------------------------------------------------------------------------
# Block nodes
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Paragraph:
    """A paragraph of inline content."""

    kind: ClassVar[str] = "paragraph"

    content: tuple["Node", ...] = ()


@dataclass(frozen=True, slots=True)
class Heading:
    """A section heading.

    Parameters
    ----------
    level:
        Heading rank, 1 through 6.
    content:
        Inline content.
    """

    kind: ClassVar[str] = "heading"

    level: int
    content: tuple["Node", ...] = ()


@dataclass(frozen=True, slots=True)
class BulletList:
    """An unordered list; content is ``ListItem`` nodes only."""

    kind: ClassVar[str] = "bulletList"

    content: tuple["ListItem", ...] = ()


@dataclass(frozen=True, slots=True)
class OrderedList:
    """A numbered list; content is ``ListItem`` nodes only."""

    kind: ClassVar[str] = "orderedList"

    content: tuple["ListItem", ...] = ()


@dataclass(frozen=True, slots=True)
class ListItem:
    """A list entry; content is block nodes."""

    kind: ClassVar[str] = "listItem"

    content: tuple["Node", ...] = ()


@dataclass(frozen=True, slots=True)
class Blockquote:
    """A quoted section; content is block nodes."""

    kind: ClassVar[str] = "blockquote"

    content: tuple["Node", ...] = ()


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """Preformatted code.  Content is exactly one unmarked ``Text``."""

    kind: ClassVar[str] = "codeBlock"

    content: tuple[Text, ...] = (Text(""),)

    @property
    def code(self) -> str:
        return "".join(text.value for text in self.content)

    @classmethod
    def of(cls, code: str) -> "CodeBlock":
        return cls((Text(code),))


@dataclass(frozen=True, slots=True)
class HorizontalRule:
    """A thematic break."""

    kind: ClassVar[str] = "horizontalRule"


# ---------------------------------------------------------------------------
# Table nodes
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TableCell:
    """A data cell; content is block nodes."""

    kind: ClassVar[str] = "tableCell"

    content: tuple["Node", ...] = ()


@dataclass(frozen=True, slots=True)
class TableHeader:
    """A header cell; content is block nodes."""

    kind: ClassVar[str] = "tableHeader"

    content: tuple["Node", ...] = ()


@dataclass(frozen=True, slots=True)
class TableRow:
    """A table row; content is ``TableCell`` / ``TableHeader`` nodes."""

    kind: ClassVar[str] = "tableRow"

    content: tuple[Union[TableCell, TableHeader], ...] = ()


@dataclass(frozen=True, slots=True)
class Table:
    """A table; content is ``TableRow`` nodes."""

    kind: ClassVar[str] = "table"

    content: tuple[TableRow, ...] = ()


Node = Union[
    Text,
    HardBreak,
    Paragraph,
    Heading,
    BulletList,
    OrderedList,
    ListItem,
    Blockquote,
    CodeBlock,
    HorizontalRule,
    Table,
    TableRow,
    TableCell,
    TableHeader,
]

INLINE_TYPES: tuple[type, ...] = (Text, HardBreak)
LIST_TYPES: tuple[type, ...] = (BulletList, OrderedList)
CELL_TYPES: tuple[type, ...] = (TableCell, TableHeader)
TABLE_TYPES: tuple[type, ...] = (Table, TableRow, TableCell, TableHeader)

TABLE_KINDS: frozenset[str] = frozenset(cls.kind for cls in TABLE_TYPES)

NODE_CLASSES: dict[str, type] = {
    cls.kind: cls
    for cls in (
        Text,
        HardBreak,
        Paragraph,
        Heading,
        BulletList,
        OrderedList,
        ListItem,
        Blockquote,
        CodeBlock,
        HorizontalRule,
        Table,
        TableRow,
        TableCell,
        TableHeader,
    )
}


def children_of(node: Node) -> tuple[Node, ...]:
    """Return the child nodes of ``node`` (empty for leaves and void nodes)."""
    return getattr(node, "content", ())


def plain_text(node: "Node | Document") -> str:
    """Return all text under ``node`` concatenated, without markup."""
    if isinstance(node, Text):
        return node.value
    return "".join(plain_text(child) for child in children_of(node))


# ---------------------------------------------------------------------------
# Document root
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Document:
    """The root of a rich-text note.

    Parameters
    ----------
    content:
        Top-level block nodes.  Every public operation returns documents
        with at least one node.
    """

    kind: ClassVar[str] = "doc"

    content: tuple[Node, ...] = ()

    @classmethod
    def empty(cls) -> "Document":
        """Return the canonical empty document: one empty paragraph."""
        return cls((Paragraph(),))

    @property
    def has_text(self) -> bool:
        """True when any text leaf carries non-whitespace characters."""
        return _has_text(self.content)

    def walk(self) -> Iterator[Node]:
        """Yield every node of the tree in document order."""
        stack: list[Node] = list(reversed(self.content))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(children_of(node)))


def _has_text(nodes: tuple[Node, ...]) -> bool:
    for node in nodes:
        if isinstance(node, Text) and node.value.strip():
            return True
        if _has_text(children_of(node)):
            return True
    return False
