"""notedoc document model.

Exports all node types, mark helpers, the structural helpers shared by
every tree producer, and the serializer for converting documents to and
from dicts, JSON and YAML.
"""
from __future__ import annotations

from notedoc.model.errors import DocumentFormatError
from notedoc.model.nodes import (
    BOLD,
    CODE,
    INLINE_TYPES,
    ITALIC,
    LIST_TYPES,
    NODE_CLASSES,
    STRIKE,
    TABLE_KINDS,
    TABLE_TYPES,
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
    TableCell,
    TableHeader,
    TableRow,
    Text,
    canonical_marks,
    children_of,
    plain_text,
)
from notedoc.model.serializer import DocumentSerializer

__all__ = [
    # Root and node types
    "Document",
    "Node",
    "Text",
    "HardBreak",
    "Paragraph",
    "Heading",
    "BulletList",
    "OrderedList",
    "ListItem",
    "Blockquote",
    "CodeBlock",
    "HorizontalRule",
    "Table",
    "TableRow",
    "TableCell",
    "TableHeader",
    # Marks
    "Mark",
    "MarkType",
    "BOLD",
    "ITALIC",
    "UNDERLINE",
    "STRIKE",
    "CODE",
    "canonical_marks",
    # Node groups
    "INLINE_TYPES",
    "LIST_TYPES",
    "TABLE_TYPES",
    "TABLE_KINDS",
    "NODE_CLASSES",
    # Helpers
    "children_of",
    "plain_text",
    # Persistence
    "DocumentSerializer",
    "DocumentFormatError",
]
