"""Structural invariants shared by every producer of document trees.

The builder (markup → document) and the persistence reader
(dict → document) both funnel their children through these helpers so
that block containers never hold bare inline nodes and inline
containers never hold blocks.

Adjacent text leaves carrying identical marks are merged.  Markup cannot
express the boundary between them, so keeping them apart would make a
serialized document parse back into a different tree.
"""
from __future__ import annotations

from collections.abc import Iterable

from notedoc.model.nodes import (
    CELL_TYPES,
    INLINE_TYPES,
    ListItem,
    Node,
    Paragraph,
    TableRow,
    Text,
    children_of,
)


def merge_text(inline: Iterable[Node]) -> list[Node]:
    """Merge neighbouring ``Text`` leaves with equal marks; drop empty ones."""
    merged: list[Node] = []
    for node in inline:
        if isinstance(node, Text):
            if not node.value:
                continue
            previous = merged[-1] if merged else None
            if isinstance(previous, Text) and previous.marks == node.marks:
                merged[-1] = Text(previous.value + node.value, node.marks)
                continue
        merged.append(node)
    return merged


def _collect_inline(nodes: Iterable[Node], into: list[Node]) -> None:
    for node in nodes:
        if isinstance(node, INLINE_TYPES):
            into.append(node)
        else:
            _collect_inline(children_of(node), into)


def inline_only(nodes: Iterable[Node]) -> tuple[Node, ...]:
    """Return the inline nodes of ``nodes``, splicing in those of any block."""
    inline: list[Node] = []
    _collect_inline(nodes, inline)
    return tuple(merge_text(inline))


def wrap_inline_runs(nodes: Iterable[Node]) -> tuple[Node, ...]:
    """Wrap each consecutive run of inline nodes in one ``Paragraph``.

    Block nodes pass through unchanged; empty text leaves are dropped.
    """
    blocks: list[Node] = []
    run: list[Node] = []
    for node in nodes:
        if isinstance(node, INLINE_TYPES):
            run.append(node)
            continue
        if run:
            blocks.extend(_paragraph(run))
            run = []
        blocks.append(node)
    if run:
        blocks.extend(_paragraph(run))
    return tuple(blocks)


def _paragraph(run: list[Node]) -> list[Node]:
    content = merge_text(run)
    return [Paragraph(tuple(content))] if content else []


def block_content(nodes: Iterable[Node]) -> tuple[Node, ...]:
    """Block content for list items, quotes and cells; never empty."""
    return wrap_inline_runs(nodes) or (Paragraph(),)


def list_items(nodes: Iterable[Node]) -> tuple[ListItem, ...]:
    """Keep only ``ListItem`` children."""
    return tuple(node for node in nodes if isinstance(node, ListItem))


def table_rows(nodes: Iterable[Node]) -> tuple[TableRow, ...]:
    """Keep only ``TableRow`` children."""
    return tuple(node for node in nodes if isinstance(node, TableRow))


def table_cells(nodes: Iterable[Node]) -> tuple[Node, ...]:
    """Keep only ``TableCell`` / ``TableHeader`` children."""
    return tuple(node for node in nodes if isinstance(node, CELL_TYPES))
