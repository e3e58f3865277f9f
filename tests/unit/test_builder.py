"""Unit tests for notedoc.builder — parse tree to document model."""
from __future__ import annotations

import pytest

from notedoc.builder import DocumentBuilder, build_document, to_document
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
    OrderedList,
    Paragraph,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    Text,
)
from notedoc.parser import ParsedElement, parse


def _para(*inline: object) -> Paragraph:
    return Paragraph(tuple(inline))  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------


class TestBlocks:
    def test_scenario_note(self, vitals_markup: str, vitals_document: Document) -> None:
        assert to_document(vitals_markup) == vitals_document

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_heading_levels(self, level: int) -> None:
        document = to_document(f"<h{level}>t</h{level}>")
        assert document == Document((Heading(level, (Text("t"),)),))

    def test_upper_case_tags(self) -> None:
        assert to_document("<H3>t</H3>") == Document((Heading(3, (Text("t"),)),))

    def test_entities_are_decoded(self) -> None:
        document = to_document("<p>a &amp; b &lt;c&gt; &#39;d&#39;</p>")
        assert document == Document((_para(Text("a & b <c> 'd'")),))

    def test_hard_break_and_rule(self) -> None:
        document = to_document("<p>a<br>b</p><hr>")
        assert document == Document((_para(Text("a"), HardBreak(), Text("b")), HorizontalRule()))

    def test_blockquote(self) -> None:
        document = to_document("<blockquote><p>quoted</p></blockquote>")
        assert document == Document((Blockquote((_para(Text("quoted")),)),))

    def test_blockquote_inline_content_is_wrapped(self) -> None:
        document = to_document("<blockquote>quoted</blockquote>")
        assert document == Document((Blockquote((_para(Text("quoted")),)),))

    def test_empty_blockquote_holds_empty_paragraph(self) -> None:
        assert to_document("<blockquote></blockquote>") == Document((Blockquote((Paragraph(),)),))

    def test_block_inside_paragraph_is_flattened(self) -> None:
        document = to_document("<p>a<ul><li>b</li></ul></p>")
        assert document == Document((_para(Text("ab")),))


class TestCodeBlocks:
    def test_pre_code(self) -> None:
        document = to_document("<pre><code>x = 1\ny = 2</code></pre>")
        assert document == Document((CodeBlock.of("x = 1\ny = 2"),))

    def test_pre_text_leaves_joined_by_newline(self) -> None:
        assert to_document("<pre>a<b>b</b></pre>") == Document((CodeBlock.of("a\nb"),))

    def test_pre_entities_decoded(self) -> None:
        assert to_document("<pre>&lt;tag&gt;</pre>") == Document((CodeBlock.of("<tag>"),))

    def test_empty_pre(self) -> None:
        assert to_document("<pre></pre>") == Document((CodeBlock(),))


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------


class TestLists:
    def test_bullet_list(self) -> None:
        document = to_document("<ul><li>A</li><li>B</li></ul>")
        assert document == Document(
            (BulletList((ListItem((_para(Text("A")),)), ListItem((_para(Text("B")),)))),)
        )

    def test_ordered_list(self) -> None:
        document = to_document("<ol><li>one</li></ol>")
        assert document == Document((OrderedList((ListItem((_para(Text("one")),)),)),))

    def test_non_item_children_are_dropped(self) -> None:
        document = to_document("<ul><li>A</li><p>x</p>stray<li>B</li></ul>")
        bullet = document.content[0]
        assert isinstance(bullet, BulletList)
        assert len(bullet.content) == 2

    def test_empty_item_holds_empty_paragraph(self) -> None:
        assert to_document("<ul><li></li></ul>") == Document((BulletList((ListItem((Paragraph(),)),)),))

    def test_nested_list(self) -> None:
        document = to_document("<ul><li>A<ul><li>B</li></ul></li></ul>")
        inner = BulletList((ListItem((_para(Text("B")),)),))
        assert document == Document((BulletList((ListItem((_para(Text("A")), inner)),)),))

    def test_whitespace_between_items_is_ignored(self) -> None:
        document = to_document("<ul>\n  <li>A</li>\n  <li>B</li>\n</ul>")
        assert document == to_document("<ul><li>A</li><li>B</li></ul>")


# ---------------------------------------------------------------------------
# Marks
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("tag, mark", [
    ("strong", BOLD),
    ("b", BOLD),
    ("em", ITALIC),
    ("i", ITALIC),
    ("u", UNDERLINE),
    ("s", STRIKE),
    ("strike", STRIKE),
    ("code", CODE),
])
def test_mark_tags(tag: str, mark: Mark) -> None:
    document = to_document(f"<p><{tag}>x</{tag}></p>")
    assert document == Document((_para(Text("x", (mark,))),))


class TestMarks:
    @pytest.mark.parametrize("markup", [
        "<p><b><i>x</i></b></p>",
        "<p><i><b>x</b></i></p>",
    ])
    def test_nesting_order_does_not_matter(self, markup: str) -> None:
        assert to_document(markup) == Document((_para(Text("x", (BOLD, ITALIC))),))

    def test_repeated_mark_is_applied_once(self) -> None:
        assert to_document("<p><b><b>x</b></b></p>") == Document((_para(Text("x", (BOLD,))),))

    def test_adjacent_equal_runs_merge(self) -> None:
        assert to_document("<p><b>a</b><b>b</b></p>") == Document((_para(Text("ab", (BOLD,))),))

    def test_mark_spans_hard_break(self) -> None:
        document = to_document("<p><b>a<br>b</b></p>")
        assert document == Document((_para(Text("a", (BOLD,)), HardBreak(), Text("b", (BOLD,))),))

    def test_link_with_target(self) -> None:
        document = to_document('<p><a href="https://e.com/?a=1&amp;b=2">link</a></p>')
        assert document == Document((_para(Text("link", (Mark.link("https://e.com/?a=1&b=2"),))),))

    def test_anchor_without_target_is_plain_text(self) -> None:
        assert to_document("<p><a name='x'>plain</a></p>") == Document((_para(Text("plain")),))

    def test_apostrophe_in_unquoted_attribute_keeps_text(self) -> None:
        document = to_document("<p><a title=Bob's>x</a></p><p>Alice's</p>")
        assert document == Document((_para(Text("x")), _para(Text("Alice's"))))

    def test_top_level_marked_text_is_wrapped(self) -> None:
        assert to_document("<b>x</b>") == Document((_para(Text("x", (BOLD,))),))


# ---------------------------------------------------------------------------
# Unknown and generic tags
# ---------------------------------------------------------------------------


class TestGenericTags:
    def test_div_becomes_paragraph(self) -> None:
        document = to_document("<div>a<b>b</b></div>")
        assert document == Document((_para(Text("a"), Text("b", (BOLD,))),))

    @pytest.mark.parametrize("markup", ["<div></div>", "<div>   </div>"])
    def test_empty_div_is_dropped(self, markup: str) -> None:
        assert to_document(markup) == Document.empty()

    def test_span_keeps_its_text(self) -> None:
        assert to_document("<p>a<span>b</span></p>") == Document((_para(Text("ab")),))

    def test_unknown_top_level_tag(self) -> None:
        assert to_document("<section>hello</section>") == Document((_para(Text("hello")),))

    def test_loose_text_between_blocks(self) -> None:
        document = to_document("a<p>b</p>c")
        assert document == Document((_para(Text("a")), _para(Text("b")), _para(Text("c"))))

    def test_unterminated_tag_is_kept_as_text(self) -> None:
        assert to_document("<p>abc") == Document((_para(Text("<p>abc")),))


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


class TestTables:
    def test_simple_table(self) -> None:
        document = to_document("<table><tr><th>H</th></tr><tr><td>c</td></tr></table>")
        assert document == Document(
            (
                Table(
                    (
                        TableRow((TableHeader((_para(Text("H")),)),)),
                        TableRow((TableCell((_para(Text("c")),)),)),
                    )
                ),
            )
        )

    def test_sections_are_transparent(self) -> None:
        sectioned = "<table><thead><tr><th>H</th></tr></thead><tbody><tr><td>c</td></tr></tbody></table>"
        plain = "<table><tr><th>H</th></tr><tr><td>c</td></tr></table>"
        assert to_document(sectioned) == to_document(plain)

    def test_empty_cell_holds_empty_paragraph(self) -> None:
        document = to_document("<table><tr><td></td></tr></table>")
        assert document == Document((Table((TableRow((TableCell((Paragraph(),)),)),)),))


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


class TestEntryPoints:
    @pytest.mark.parametrize("markup", ["", "   ", "\n\t"])
    def test_blank_markup_gives_empty_document(self, markup: str) -> None:
        assert to_document(markup) == Document.empty()

    def test_builder_is_reusable(self) -> None:
        builder = DocumentBuilder()
        first = builder.build(parse("<p>a</p>"))
        second = builder.build(parse("<p>a</p>"))
        assert first == second

    def test_build_document_matches_to_document(self, vitals_markup: str) -> None:
        assert build_document(parse(vitals_markup)) == to_document(vitals_markup)

    def test_build_element_on_text_leaf(self) -> None:
        builder = DocumentBuilder()
        assert builder.build_element(ParsedElement.text_leaf("x")) == [Text("x")]
        assert builder.build_element(ParsedElement.text_leaf("")) == []

    def test_max_depth_limits_descent(self) -> None:
        source = "<blockquote>" * 10 + "deep" + "</blockquote>" * 10
        document = to_document(source, max_depth=3)
        assert "deep" in [node.value for node in document.walk() if isinstance(node, Text)]

    def test_very_deep_markup_does_not_raise(self) -> None:
        source = "<blockquote>" * 1000 + "deep" + "</blockquote>" * 1000
        assert to_document(source).has_text
