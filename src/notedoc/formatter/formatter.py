"""Markup formatter: document model → markup text.

The ``MarkupFormatter`` is the inverse of the document builder.  It is a
pure structural recursion with a fixed output style:

- marks are written in canonical order with bold outermost, so a text
  marked bold + italic renders as ``<strong><em>x</em></strong>``
- ``& < > " '`` are escaped in text and in link targets
- a list item or table cell whose first child is a paragraph omits that
  paragraph's ``<p>`` wrapper
- code blocks render as ``<pre><code>…</code></pre>``
- no whitespace is inserted between elements

Usage
-----
::

    from notedoc.formatter import MarkupFormatter

    markup = MarkupFormatter().format(document)
"""
from __future__ import annotations

from collections.abc import Sequence

from notedoc.grammar.entities import escape
from notedoc.grammar.tags import MAX_NESTING_DEPTH
from notedoc.model.nodes import (
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
    children_of,
    plain_text,
)

_MARK_TAGS: dict[MarkType, str] = {
    MarkType.BOLD: "strong",
    MarkType.ITALIC: "em",
    MarkType.UNDERLINE: "u",
    MarkType.STRIKE: "s",
    MarkType.CODE: "code",
    MarkType.LINK: "a",
}

_CONTAINER_TAGS: dict[type, str] = {
    BulletList: "ul",
    OrderedList: "ol",
    Blockquote: "blockquote",
    Table: "table",
    TableRow: "tr",
}


class MarkupFormatter:
    """Renders documents and nodes as markup.

    Parameters
    ----------
    max_depth:
        Nesting depth beyond which subtrees are written as escaped plain
        text instead of being descended into.  A node at exactly
        ``max_depth`` is still written as markup, the same bound the tree
        parser keeps elements to.
    """

    def __init__(self, max_depth: int = MAX_NESTING_DEPTH) -> None:
        self._max_depth = max_depth

    def format(self, target: Document | Node | Sequence[Node]) -> str:
        """Render ``target`` as markup.

        Parameters
        ----------
        target:
            A ``Document``, a single node, or a sequence of nodes.

        Returns
        -------
        str
            The markup; empty for an empty sequence.
        """
        if isinstance(target, Document):
            return self._format_nodes(target.content, 0)
        if isinstance(target, (list, tuple)):
            return self._format_nodes(target, 0)
        return self._format_node(target, 0)

    # ------------------------------------------------------------------
    # Node rendering
    # ------------------------------------------------------------------

    def _format_nodes(self, nodes: Sequence[Node], depth: int) -> str:
        return "".join(self._format_node(node, depth) for node in nodes)

    def _format_node(self, node: Node, depth: int) -> str:
        if isinstance(node, Text):
            return self._format_text(node)
        if isinstance(node, HardBreak):
            return "<br>"
        if isinstance(node, HorizontalRule):
            return "<hr>"
        if depth > self._max_depth:
            return escape(plain_text(node))

        inner_depth = depth + 1
        if isinstance(node, Paragraph):
            return f"<p>{self._format_nodes(node.content, inner_depth)}</p>"
        if isinstance(node, Heading):
            return f"<h{node.level}>{self._format_nodes(node.content, inner_depth)}</h{node.level}>"
        if isinstance(node, CodeBlock):
            return f"<pre><code>{escape(node.code)}</code></pre>"
        if isinstance(node, ListItem):
            return f"<li>{self._format_block_content(node.content, inner_depth)}</li>"
        if isinstance(node, TableHeader):
            return f"<th>{self._format_block_content(node.content, inner_depth)}</th>"
        if isinstance(node, TableCell):
            return f"<td>{self._format_block_content(node.content, inner_depth)}</td>"

        tag = _CONTAINER_TAGS.get(type(node))
        if tag is None:
            return escape(plain_text(node))
        return f"<{tag}>{self._format_nodes(children_of(node), inner_depth)}</{tag}>"

    def _format_block_content(self, content: Sequence[Node], depth: int) -> str:
        """Render block content, unwrapping a leading paragraph.

        An empty leading paragraph keeps its wrapper when more blocks
        follow, otherwise it would vanish on re-parsing.
        """
        if not content or not isinstance(content[0], Paragraph):
            return self._format_nodes(content, depth)
        first = content[0]
        if not first.content and len(content) > 1:
            return self._format_nodes(content, depth)
        return self._format_nodes(first.content, depth + 1) + self._format_nodes(content[1:], depth)

    def _format_text(self, text: Text) -> str:
        rendered = escape(text.value)
        # Innermost first, so the first canonical mark ends up outermost.
        for mark in reversed(text.marks):
            rendered = self._wrap_mark(mark, rendered)
        return rendered

    @staticmethod
    def _wrap_mark(mark: Mark, inner: str) -> str:
        tag = _MARK_TAGS[mark.type]
        if mark.type is MarkType.LINK:
            return f'<a href="{escape(mark.href or "")}">{inner}</a>'
        return f"<{tag}>{inner}</{tag}>"


# ---------------------------------------------------------------------------
# Module-level convenience function
# ---------------------------------------------------------------------------


def to_markup(
    target: Document | Node | Sequence[Node],
    max_depth: int = MAX_NESTING_DEPTH,
) -> str:
    """Render a document, node or node sequence as markup.

    Parameters
    ----------
    target:
        What to render.
    max_depth:
        Nesting depth beyond which subtrees are written as plain text.

    Returns
    -------
    str
        The markup text.
    """
    return MarkupFormatter(max_depth=max_depth).format(target)
