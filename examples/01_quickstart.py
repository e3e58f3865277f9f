#!/usr/bin/env python3
"""Example: Quickstart — notedoc

Minimal working example: parse note markup into a document, render it
back, project it for a native renderer and gate on tables.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install notedoc
"""
from __future__ import annotations

import notedoc

NOTE_MARKUP = (
    "<h2>Vitals</h2>"
    "<p>BP <strong>120/80</strong>, HR <em>72</em></p>"
    "<ul><li>Afebrile</li><li>No acute distress</li></ul>"
)


def main() -> None:
    print(f"notedoc version: {notedoc.__version__}")

    # Step 1: Parse markup into a document
    document = notedoc.to_document(NOTE_MARKUP)
    print(f"Parsed {len(document.content)} top-level nodes: "
          f"{[node.kind for node in document.content]}")

    # Step 2: Render it back to markup
    markup = notedoc.to_markup(document)
    print(f"Round trip identical: {markup == NOTE_MARKUP}")

    # Step 3: Project for a renderer without markup support
    for block in notedoc.project_native(document):
        text = "".join(segment.text for segment in block.segments)
        print(f"  [{block.kind}] {text}")

    # Step 4: Capability gating
    print(f"Contains table: {notedoc.contains_table(document)}")


if __name__ == "__main__":
    main()
