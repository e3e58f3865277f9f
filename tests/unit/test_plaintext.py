"""Unit tests for notedoc.plaintext — the plain-text shorthand codec."""
from __future__ import annotations

import pytest

from notedoc.builder import to_document
from notedoc.model.nodes import (
    BOLD,
    BulletList,
    Document,
    Heading,
    ListItem,
    Mark,
    Paragraph,
    Text,
)
from notedoc.plaintext import LineKind, ParsedLine, classify_line, decode_text, encode_node, encode_text


def _item(value: str) -> ListItem:
    return ListItem((Paragraph((Text(value),)),))


# ---------------------------------------------------------------------------
# Line classification
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("line, expected", [
    ("# Title", ParsedLine(LineKind.HEADING, "Title", 1)),
    ("###### Six", ParsedLine(LineKind.HEADING, "Six", 6)),
    ("  ## Indented  ", ParsedLine(LineKind.HEADING, "Indented", 2)),
    ("####### Seven", ParsedLine(LineKind.PARAGRAPH, "####### Seven")),
    ("#NoSpace", ParsedLine(LineKind.PARAGRAPH, "#NoSpace")),
    ("- item", ParsedLine(LineKind.LIST_ITEM, "item")),
    ("• item", ParsedLine(LineKind.LIST_ITEM, "item")),
    ("-item", ParsedLine(LineKind.PARAGRAPH, "-item")),
    ("plain words", ParsedLine(LineKind.PARAGRAPH, "plain words")),
    ("", ParsedLine(LineKind.EMPTY)),
    ("   \t", ParsedLine(LineKind.EMPTY)),
])
def test_classify_line(line: str, expected: ParsedLine) -> None:
    assert classify_line(line) == expected


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class TestDecode:
    def test_scenario_shorthand(self) -> None:
        assert decode_text("# Title\n- item1\n- item2") == Document(
            (Heading(1, (Text("Title"),)), BulletList((_item("item1"), _item("item2"))))
        )

    def test_windows_line_endings(self) -> None:
        assert decode_text("# T\r\n- a") == decode_text("# T\n- a")

    def test_empty_lines_become_empty_paragraphs(self) -> None:
        assert decode_text("a\n\nb") == Document(
            (Paragraph((Text("a"),)), Paragraph(), Paragraph((Text("b"),)))
        )

    def test_list_runs_are_split_by_other_lines(self) -> None:
        document = decode_text("- a\ntext\n- b")
        assert document == Document(
            (BulletList((_item("a"),)), Paragraph((Text("text"),)), BulletList((_item("b"),)))
        )

    def test_paragraph_text_is_trimmed(self) -> None:
        assert decode_text("   spaced   ") == Document((Paragraph((Text("spaced"),)),))

    def test_empty_text(self) -> None:
        assert decode_text("") == Document.empty()

    def test_markup_characters_are_literal(self) -> None:
        assert decode_text("<b>x</b>") == Document((Paragraph((Text("<b>x</b>"),)),))


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


class TestEncode:
    def test_scenario_document(self, vitals_document: Document) -> None:
        assert encode_text(vitals_document) == "## Vitals\nBP 120/80"

    def test_marks_and_links_are_dropped(self) -> None:
        document = Document((Paragraph((Text("a", (BOLD,)), Text("b", (Mark.link("h"),)))),))
        assert encode_text(document) == "ab"

    def test_ordered_list_is_numbered(self) -> None:
        assert encode_text(to_document("<ol><li>one</li><li>two</li></ol>")) == "1. one\n2. two"

    def test_list_item_uses_first_block(self) -> None:
        document = to_document("<ul><li>A<ul><li>B</li></ul></li></ul>")
        assert encode_text(document) == "- A"

    def test_blockquote(self) -> None:
        assert encode_text(to_document("<blockquote><p>q</p></blockquote>")) == "> q"

    def test_code_block_is_fenced(self) -> None:
        document = to_document("<pre><code>x = 1\ny = 2</code></pre>")
        assert encode_text(document) == "```\nx = 1\ny = 2\n```"

    def test_horizontal_rule(self) -> None:
        assert encode_text(to_document("<p>a</p><hr>")) == "a\n---"

    def test_table_rows(self) -> None:
        markup = "<table><tr><th>H1</th><th>H2</th></tr><tr><td>a</td><td>b</td></tr></table>"
        assert encode_text(to_document(markup)) == "H1 | H2\na | b"

    def test_empty_document(self) -> None:
        assert encode_text(Document.empty()) == ""

    def test_encode_node_on_list_item(self) -> None:
        assert encode_node(_item("x")) == "x"


class TestRoundTrip:
    @pytest.mark.parametrize("text", [
        "# Title\n- item1\n- item2",
        "## Vitals\nBP 120/80",
        "a\n\nb",
    ])
    def test_shorthand_survives(self, text: str) -> None:
        assert encode_text(decode_text(text)) == text

    def test_marks_are_lost(self) -> None:
        document = to_document("<p><strong>x</strong></p>")
        assert decode_text(encode_text(document)) == Document((Paragraph((Text("x"),)),))
