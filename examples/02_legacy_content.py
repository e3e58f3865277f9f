#!/usr/bin/env python3
"""Example: Normalizing legacy stored content

Notes stored over the years come in several shapes. ``normalize``
accepts all of them and returns canonical markup plus a document.

Usage:
    python examples/02_legacy_content.py

Requirements:
    pip install notedoc
"""
from __future__ import annotations

import json

import notedoc

STORED_SHAPES: list[object] = [
    None,
    "<p>Plain <b>markup</b></p>",
    {"html": "<p>Wrapped markup</p><table><tr><td>x</td></tr></table>"},
    {"type": "doc", "content": [{"type": "paragraph", "content": [{"type": "text", "text": "TipTap JSON"}]}]},
    [{"kind": "heading", "level": 3, "content": [{"kind": "text", "value": "Bare node list"}]}],
]


def main() -> None:
    for stored in STORED_SHAPES:
        result = notedoc.normalize(stored)
        print(f"{result.shape.value:>15}: {result.markup!r}  table={notedoc.contains_table(stored)}")

    print("\nPersisted form of the last one:")
    print(json.dumps(result.to_dict(), indent=2))

    print("\nPlain-text shorthand:")
    document = notedoc.decode_text("# Plan\n- rest\n- fluids")
    print(notedoc.encode_text(document))


if __name__ == "__main__":
    main()
