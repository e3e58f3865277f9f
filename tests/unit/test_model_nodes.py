"""Unit tests for notedoc.model.nodes and notedoc.model.structure."""
from __future__ import annotations

import dataclasses

import pytest

from notedoc.model.nodes import (
    BOLD,
    CODE,
    ITALIC,
    NODE_CLASSES,
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
from notedoc.model.structure import (
    block_content,
    inline_only,
    list_items,
    merge_text,
    table_cells,
    wrap_inline_runs,
)


# ---------------------------------------------------------------------------
# Marks
# ---------------------------------------------------------------------------


class TestMarks:
    def test_rank_follows_canonical_order(self) -> None:
        ranks = [mark_type.rank for mark_type in MarkType]
        assert ranks == sorted(ranks)
        assert MarkType.BOLD.rank < MarkType.LINK.rank

    def test_canonical_marks_sorts(self) -> None:
        link = Mark.link("https://example.com")
        assert canonical_marks([link, CODE, ITALIC, BOLD]) == (BOLD, ITALIC, CODE, link)

    def test_canonical_marks_deduplicates_first_wins(self) -> None:
        first = Mark.link("a")
        second = Mark.link("b")
        assert canonical_marks([second, BOLD, first, BOLD]) == (BOLD, second)

    def test_link_carries_href(self) -> None:
        link = Mark.link("x")
        assert link.type is MarkType.LINK
        assert link.href == "x"

    def test_mark_repr(self) -> None:
        assert repr(BOLD) == "Mark(bold)"
        assert repr(Mark.link("x")) == "Mark(link, 'x')"

    def test_marks_are_hashable(self) -> None:
        assert len({BOLD, Mark(MarkType.BOLD), ITALIC}) == 2


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


class TestText:
    def test_with_mark_keeps_canonical_order(self) -> None:
        text = Text("x", (ITALIC,)).with_mark(BOLD)
        assert text.marks == (BOLD, ITALIC)

    def test_with_mark_does_not_duplicate(self) -> None:
        text = Text("x", (BOLD,)).with_mark(BOLD)
        assert text.marks == (BOLD,)

    def test_has_and_get_mark(self) -> None:
        link = Mark.link("x")
        text = Text("x", (UNDERLINE, link))
        assert text.has_mark(MarkType.UNDERLINE)
        assert not text.has_mark(MarkType.STRIKE)
        assert text.get_mark(MarkType.LINK) == link
        assert text.get_mark(MarkType.CODE) is None

    def test_text_is_frozen(self) -> None:
        text = Text("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            text.value = "y"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Nodes and document
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("cls, kind", [
    (Text, "text"),
    (HardBreak, "hardBreak"),
    (Paragraph, "paragraph"),
    (Heading, "heading"),
    (BulletList, "bulletList"),
    (OrderedList, "orderedList"),
    (ListItem, "listItem"),
    (Blockquote, "blockquote"),
    (CodeBlock, "codeBlock"),
    (HorizontalRule, "horizontalRule"),
    (Table, "table"),
    (TableRow, "tableRow"),
    (TableCell, "tableCell"),
    (TableHeader, "tableHeader"),
    (Document, "doc"),
])
def test_kind_names(cls: type, kind: str) -> None:
    assert cls.kind == kind


def test_node_classes_registry_covers_every_kind() -> None:
    assert set(NODE_CLASSES) == {
        "text", "hardBreak", "paragraph", "heading", "bulletList", "orderedList",
        "listItem", "blockquote", "codeBlock", "horizontalRule",
        "table", "tableRow", "tableCell", "tableHeader",
    }


class TestCodeBlock:
    def test_default_holds_one_empty_text(self) -> None:
        assert CodeBlock().content == (Text(""),)
        assert CodeBlock().code == ""

    def test_of(self) -> None:
        assert CodeBlock.of("a\nb") == CodeBlock((Text("a\nb"),))
        assert CodeBlock.of("a\nb").code == "a\nb"


class TestDocument:
    def test_empty_is_one_empty_paragraph(self) -> None:
        assert Document.empty() == Document((Paragraph(),))

    def test_has_text(self) -> None:
        assert not Document.empty().has_text
        assert not Document((Paragraph((Text("   "),)),)).has_text
        nested = Document((BulletList((ListItem((Paragraph((Text("x"),)),)),)),))
        assert nested.has_text

    def test_walk_is_preorder(self) -> None:
        document = Document(
            (
                Heading(1, (Text("t"),)),
                BulletList((ListItem((Paragraph((Text("a"),)),)),)),
            )
        )
        kinds = [node.kind for node in document.walk()]
        assert kinds == ["heading", "text", "bulletList", "listItem", "paragraph", "text"]

    def test_plain_text(self) -> None:
        document = Document((Heading(1, (Text("t"),)), Paragraph((Text("a", (BOLD,)), HardBreak(), Text("b")))))
        assert plain_text(document) == "tab"

    def test_children_of_leaf_is_empty(self) -> None:
        assert children_of(Text("x")) == ()
        assert children_of(HorizontalRule()) == ()


# ---------------------------------------------------------------------------
# Structure helpers
# ---------------------------------------------------------------------------


class TestStructureHelpers:
    def test_merge_text_joins_equal_marks(self) -> None:
        merged = merge_text([Text("a"), Text("b"), Text("c", (BOLD,)), Text("d", (BOLD,))])
        assert merged == [Text("ab"), Text("cd", (BOLD,))]

    def test_merge_text_keeps_different_marks_apart(self) -> None:
        merged = merge_text([Text("a"), Text("b", (STRIKE,))])
        assert merged == [Text("a"), Text("b", (STRIKE,))]

    def test_merge_text_does_not_cross_hard_breaks(self) -> None:
        merged = merge_text([Text("a"), HardBreak(), Text("b")])
        assert merged == [Text("a"), HardBreak(), Text("b")]

    def test_merge_text_drops_empty_text(self) -> None:
        assert merge_text([Text(""), Text("a")]) == [Text("a")]

    def test_inline_only_splices_blocks(self) -> None:
        nodes = [Text("a"), Paragraph((Text("b"), HardBreak())), BulletList((ListItem((Paragraph((Text("c"),)),)),))]
        assert inline_only(nodes) == (Text("ab"), HardBreak(), Text("c"))

    def test_wrap_inline_runs(self) -> None:
        nodes = [Text("a"), HardBreak(), HorizontalRule(), Text("b")]
        assert wrap_inline_runs(nodes) == (
            Paragraph((Text("a"), HardBreak())),
            HorizontalRule(),
            Paragraph((Text("b"),)),
        )

    def test_wrap_inline_runs_skips_empty_runs(self) -> None:
        assert wrap_inline_runs([Text(""), HorizontalRule()]) == (HorizontalRule(),)

    def test_block_content_never_empty(self) -> None:
        assert block_content([]) == (Paragraph(),)

    def test_list_items_filters(self) -> None:
        item = ListItem((Paragraph(),))
        assert list_items([item, Paragraph(), Text("x"), item]) == (item, item)

    def test_table_cells_filters(self) -> None:
        cell = TableCell((Paragraph(),))
        header = TableHeader((Paragraph(),))
        assert table_cells([cell, Paragraph(), header]) == (cell, header)
