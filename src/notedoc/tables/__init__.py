"""Table detection module.

Exports ``contains_table`` and its markup and node-level helpers.
"""
from __future__ import annotations

from notedoc.tables.detector import (
    TABLE_MARKUP,
    contains_table,
    markup_has_table,
    nodes_have_table,
)

__all__ = [
    "TABLE_MARKUP",
    "contains_table",
    "markup_has_table",
    "nodes_have_table",
]
