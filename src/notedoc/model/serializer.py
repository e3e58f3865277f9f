"""Document persistence: dict, JSON and YAML forms of the document model.

The serialized form is a plain dict/list structure with ``"kind"``
discriminator fields, the shape notes are stored in::

    {"kind": "doc", "content": [
        {"kind": "heading", "level": 2, "content": [
            {"kind": "text", "value": "Vitals"}]},
        {"kind": "paragraph", "content": [
            {"kind": "text", "value": "120/80", "marks": [{"kind": "bold"}]}]}]}

Reading is lenient.  Older notes were stored in the TipTap spelling
(``type`` instead of ``kind``, ``text`` instead of ``value``, ``level``
and ``href`` under ``attrs``); both spellings are accepted.  Entries
that are not mappings, unknown marks and links without a target are
dropped, and the structural invariants of the model are re-established
on the way in.

Usage
-----
::

    from notedoc.model.serializer import DocumentSerializer

    serializer = DocumentSerializer()
    json_text = serializer.to_json(document)
    assert serializer.from_json(json_text) == document
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import yaml

from notedoc.grammar.tags import MAX_NESTING_DEPTH
from notedoc.model.errors import DocumentFormatError
from notedoc.model.nodes import (
    NODE_CLASSES,
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
    plain_text,
)
from notedoc.model.structure import (
    block_content,
    inline_only,
    list_items,
    table_cells,
    table_rows,
    wrap_inline_runs,
)

_MARK_TYPES: dict[str, MarkType] = {mark_type.value: mark_type for mark_type in MarkType}


def _kind_of(data: Mapping[str, Any]) -> str:
    kind = data.get("kind", data.get("type"))
    return kind if isinstance(kind, str) else ""


def _attr(data: Mapping[str, Any], name: str) -> Any:
    """Read ``name`` directly or from a TipTap-style ``attrs`` mapping."""
    if name in data:
        return data[name]
    attrs = data.get("attrs")
    if isinstance(attrs, Mapping):
        return attrs.get(name)
    return None


def _heading_level(raw: Any) -> int:
    try:
        level = int(raw)
    except (TypeError, ValueError, OverflowError):
        return 1
    return min(max(level, 1), 6)


class DocumentSerializer:
    """Converts between ``Document`` trees and plain Python structures.

    Parameters
    ----------
    max_depth:
        Nesting depth beyond which ``from_dict`` stops reading children.
    """

    def __init__(self, max_depth: int = MAX_NESTING_DEPTH) -> None:
        self._max_depth = max_depth

    # ------------------------------------------------------------------
    # Serialization (document → dict)
    # ------------------------------------------------------------------

    def to_dict(self, document: Document) -> dict[str, object]:
        """Serialize a ``Document`` to a JSON-compatible dict."""
        return {
            "kind": Document.kind,
            "content": [self.node_to_dict(node) for node in document.content],
        }

    def node_to_dict(self, node: Node) -> dict[str, object]:
        """Serialize a single node (and its subtree)."""
        if isinstance(node, Text):
            data: dict[str, object] = {"kind": Text.kind, "value": node.value}
            if node.marks:
                data["marks"] = [self._mark_to_dict(mark) for mark in node.marks]
            return data
        if isinstance(node, (HardBreak, HorizontalRule)):
            return {"kind": node.kind}
        if isinstance(node, Heading):
            return {
                "kind": Heading.kind,
                "level": node.level,
                "content": [self.node_to_dict(child) for child in node.content],
            }
        return {
            "kind": node.kind,
            "content": [self.node_to_dict(child) for child in node.content],
        }

    def _mark_to_dict(self, mark: Mark) -> dict[str, object]:
        if mark.type is MarkType.LINK:
            return {"kind": mark.type.value, "href": mark.href}
        return {"kind": mark.type.value}

    # ------------------------------------------------------------------
    # Deserialization (dict → document)
    # ------------------------------------------------------------------

    def from_dict(self, data: Mapping[str, Any]) -> Document:
        """Deserialize a ``Document`` from a plain dict.

        Never raises for mapping input: unreadable parts are dropped and
        an empty result becomes ``Document.empty()``.
        """
        raw_content = data.get("content") if isinstance(data, Mapping) else None
        return self.from_nodes(raw_content if isinstance(raw_content, (list, tuple)) else ())

    def from_nodes(self, items: list[Any] | tuple[Any, ...]) -> Document:
        """Build a ``Document`` from a sequence of node dicts or ``Node`` objects."""
        content = wrap_inline_runs(self._nodes_from_list(items, 0))
        return Document(content or (Paragraph(),))

    def _nodes_from_list(self, items: Any, depth: int) -> list[Node]:
        if not isinstance(items, (list, tuple)) or depth > self._max_depth:
            return []
        nodes: list[Node] = []
        for item in items:
            if isinstance(item, tuple(NODE_CLASSES.values())):
                nodes.append(item)
            elif isinstance(item, Mapping):
                nodes.extend(self._nodes_from_dict(item, depth))
        return nodes

    def _nodes_from_dict(self, data: Mapping[str, Any], depth: int) -> list[Node]:
        """Read one node dict; unknown kinds splice in their readable parts."""
        kind = _kind_of(data)
        children = self._nodes_from_list(data.get("content"), depth + 1)

        if kind == Text.kind:
            text = self._text_from_dict(data)
            return [text] if text.value else []
        if kind == HardBreak.kind:
            return [HardBreak()]
        if kind == HorizontalRule.kind:
            return [HorizontalRule()]
        if kind == Paragraph.kind:
            return [Paragraph(inline_only(children))]
        if kind == Heading.kind:
            return [Heading(_heading_level(_attr(data, "level")), inline_only(children))]
        if kind == BulletList.kind:
            return [BulletList(list_items(children))]
        if kind == OrderedList.kind:
            return [OrderedList(list_items(children))]
        if kind == ListItem.kind:
            return [ListItem(block_content(children))]
        if kind == Blockquote.kind:
            return [Blockquote(block_content(children))]
        if kind == CodeBlock.kind:
            return [CodeBlock.of("".join(plain_text(child) for child in children))]
        if kind == Table.kind:
            return [Table(table_rows(children))]
        if kind == TableRow.kind:
            return [TableRow(table_cells(children))]
        if kind == TableCell.kind:
            return [TableCell(block_content(children))]
        if kind == TableHeader.kind:
            return [TableHeader(block_content(children))]

        raw_text = data.get("text", data.get("value"))
        if isinstance(raw_text, str) and raw_text:
            return [Text(raw_text)]
        return children

    def _text_from_dict(self, data: Mapping[str, Any]) -> Text:
        raw_value = data.get("value", data.get("text", ""))
        value = raw_value if isinstance(raw_value, str) else ("" if raw_value is None else str(raw_value))
        marks: list[Mark] = []
        raw_marks = data.get("marks")
        if isinstance(raw_marks, (list, tuple)):
            for raw_mark in raw_marks:
                mark = self._mark_from_dict(raw_mark)
                if mark is not None:
                    marks.append(mark)
        return Text(value, canonical_marks(marks))

    def _mark_from_dict(self, data: Any) -> Mark | None:
        if isinstance(data, Mark):
            return data
        if not isinstance(data, Mapping):
            return None
        mark_type = _MARK_TYPES.get(_kind_of(data))
        if mark_type is None:
            return None
        if mark_type is MarkType.LINK:
            href = _attr(data, "href")
            return Mark.link(href) if isinstance(href, str) and href else None
        return Mark(mark_type)

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, document: Document, indent: int | None = 2) -> str:
        """Serialize a ``Document`` to a JSON string."""
        return json.dumps(self.to_dict(document), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> Document:
        """Deserialize a ``Document`` from a JSON string.

        Raises
        ------
        DocumentFormatError
            If ``text`` is not valid JSON or does not hold an object.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentFormatError(str(exc), "json") from exc
        if not isinstance(data, Mapping):
            raise DocumentFormatError(f"expected an object, got {type(data).__name__}", "json")
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, document: Document) -> str:
        """Serialize a ``Document`` to a YAML string."""
        return yaml.dump(self.to_dict(document), default_flow_style=False, allow_unicode=True)

    def from_yaml(self, text: str) -> Document:
        """Deserialize a ``Document`` from a YAML string.

        Raises
        ------
        DocumentFormatError
            If ``text`` is not valid YAML or does not hold a mapping.
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DocumentFormatError(str(exc), "yaml") from exc
        if not isinstance(data, Mapping):
            raise DocumentFormatError(f"expected a mapping, got {type(data).__name__}", "yaml")
        return self.from_dict(data)
