"""Document builder: parse tree → document model.

The ``DocumentBuilder`` maps each ``ParsedElement`` to zero or more
document nodes through a tag dispatch table.  Every handler returns a
list so that inline formatting tags can hand back the marked inline
nodes of their subtree, and unknown tags can splice their text into the
surrounding content.

Mapping
-------
- ``p`` → paragraph, ``h1``–``h6`` → heading
- ``ul`` / ``ol`` → bullet / ordered list of ``li`` items only
- ``li``, ``blockquote`` → block containers; inline runs become paragraphs
- ``pre`` → code block holding all descendant text joined by newlines
- ``strong``/``b``, ``em``/``i``, ``u``, ``s``/``strike``, ``code``,
  ``a[href]`` → marks on every descendant text leaf
- ``br`` → hard break, ``hr`` → horizontal rule
- ``div`` → paragraph of its inline content, dropped when empty
- ``table`` and its parts → table nodes
- anything else → its inline descendants

Usage
-----
::

    from notedoc.builder import DocumentBuilder
    from notedoc.parser import parse

    document = DocumentBuilder().build(parse("<p>BP <b>120/80</b></p>"))
"""
from __future__ import annotations

from collections.abc import Callable, Iterable

from notedoc.grammar.tags import HEADING_LEVELS, MAX_NESTING_DEPTH, TABLE_SECTION_TAGS
from notedoc.model.nodes import (
    BOLD,
    CODE,
    ITALIC,
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
    Node,
    OrderedList,
    Paragraph,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    Text,
)
from notedoc.model.structure import (
    block_content,
    inline_only,
    list_items,
    table_cells,
    table_rows,
    wrap_inline_runs,
)
from notedoc.parser.elements import ParsedElement
from notedoc.parser.parser import parse

_MARK_TAGS: dict[str, Mark] = {
    "strong": BOLD,
    "b": BOLD,
    "em": ITALIC,
    "i": ITALIC,
    "u": UNDERLINE,
    "s": STRIKE,
    "strike": STRIKE,
    "code": CODE,
}


def _apply_mark(nodes: Iterable[Node], mark: Mark) -> tuple[Node, ...]:
    return tuple(node.with_mark(mark) if isinstance(node, Text) else node for node in nodes)


class DocumentBuilder:
    """Builds a ``Document`` from ``ParsedElement`` trees.

    The builder holds no state between calls; one instance may be reused
    for any number of documents.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[ParsedElement], list[Node]]] = {
            "p": self._build_paragraph,
            "ul": self._build_bullet_list,
            "ol": self._build_ordered_list,
            "li": self._build_list_item,
            "blockquote": self._build_blockquote,
            "pre": self._build_code_block,
            "br": self._build_hard_break,
            "hr": self._build_horizontal_rule,
            "a": self._build_link,
            "div": self._build_div,
            "table": self._build_table,
            "tr": self._build_table_row,
            "td": self._build_table_cell,
            "th": self._build_table_header,
        }
        for tag in HEADING_LEVELS:
            self._handlers[tag] = self._build_heading
        for tag in _MARK_TAGS:
            self._handlers[tag] = self._build_marked
        for tag in TABLE_SECTION_TAGS:
            self._handlers[tag] = self._build_table_section

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build(self, elements: Iterable[ParsedElement]) -> Document:
        """Build a document from top-level parse trees.

        Parameters
        ----------
        elements:
            Output of the tree parser.

        Returns
        -------
        Document
            A document with at least one top-level node.
        """
        content = wrap_inline_runs(self.build_nodes(elements))
        return Document(content) if content else Document.empty()

    def build_nodes(self, elements: Iterable[ParsedElement]) -> list[Node]:
        """Convert a sequence of parse trees into document nodes."""
        nodes: list[Node] = []
        for element in elements:
            nodes.extend(self.build_element(element))
        return nodes

    def build_element(self, element: ParsedElement) -> list[Node]:
        """Convert one parse tree into zero or more document nodes."""
        if element.is_text:
            return [Text(element.text)] if element.text else []
        handler = self._handlers.get(element.tag.lower(), self._build_unknown)
        return handler(element)

    # ------------------------------------------------------------------
    # Block handlers
    # ------------------------------------------------------------------

    def _children(self, element: ParsedElement) -> list[Node]:
        return self.build_nodes(element.children)

    def _build_paragraph(self, element: ParsedElement) -> list[Node]:
        return [Paragraph(inline_only(self._children(element)))]

    def _build_heading(self, element: ParsedElement) -> list[Node]:
        level = HEADING_LEVELS[element.tag.lower()]
        return [Heading(level, inline_only(self._children(element)))]

    def _build_bullet_list(self, element: ParsedElement) -> list[Node]:
        return [BulletList(list_items(self._children(element)))]

    def _build_ordered_list(self, element: ParsedElement) -> list[Node]:
        return [OrderedList(list_items(self._children(element)))]

    def _build_list_item(self, element: ParsedElement) -> list[Node]:
        return [ListItem(block_content(self._children(element)))]

    def _build_blockquote(self, element: ParsedElement) -> list[Node]:
        return [Blockquote(block_content(self._children(element)))]

    def _build_code_block(self, element: ParsedElement) -> list[Node]:
        return [CodeBlock.of("\n".join(element.text_leaves()))]

    def _build_hard_break(self, element: ParsedElement) -> list[Node]:
        return [HardBreak()]

    def _build_horizontal_rule(self, element: ParsedElement) -> list[Node]:
        return [HorizontalRule()]

    def _build_div(self, element: ParsedElement) -> list[Node]:
        inline = inline_only(self._children(element))
        return [Paragraph(inline)] if inline else []

    # ------------------------------------------------------------------
    # Inline handlers
    # ------------------------------------------------------------------

    def _build_marked(self, element: ParsedElement) -> list[Node]:
        mark = _MARK_TAGS[element.tag.lower()]
        return list(_apply_mark(inline_only(self._children(element)), mark))

    def _build_link(self, element: ParsedElement) -> list[Node]:
        inline = inline_only(self._children(element))
        href = element.attr("href")
        if href is None:
            return list(inline)
        return list(_apply_mark(inline, Mark.link(href)))

    def _build_unknown(self, element: ParsedElement) -> list[Node]:
        return list(inline_only(self._children(element)))

    # ------------------------------------------------------------------
    # Table handlers
    # ------------------------------------------------------------------

    def _build_table(self, element: ParsedElement) -> list[Node]:
        return [Table(table_rows(self._children(element)))]

    def _build_table_section(self, element: ParsedElement) -> list[Node]:
        # thead/tbody/tfoot are transparent: their rows belong to the table.
        return list(table_rows(self._children(element)))

    def _build_table_row(self, element: ParsedElement) -> list[Node]:
        return [TableRow(table_cells(self._children(element)))]

    def _build_table_cell(self, element: ParsedElement) -> list[Node]:
        return [TableCell(block_content(self._children(element)))]

    def _build_table_header(self, element: ParsedElement) -> list[Node]:
        return [TableHeader(block_content(self._children(element)))]


# ---------------------------------------------------------------------------
# Module-level convenience functions
# ---------------------------------------------------------------------------


def build_document(elements: Iterable[ParsedElement]) -> Document:
    """Build a ``Document`` from parse trees with a fresh builder."""
    return DocumentBuilder().build(elements)


def to_document(markup: str, max_depth: int = MAX_NESTING_DEPTH) -> Document:
    """Parse ``markup`` and build its document.

    Parameters
    ----------
    markup:
        Markup text, possibly malformed or empty.
    max_depth:
        Maximum element nesting depth that is descended into.

    Returns
    -------
    Document
        Never empty; blank markup yields ``Document.empty()``.
    """
    return build_document(parse(markup, max_depth=max_depth))
