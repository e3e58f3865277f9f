"""Native block projection module.

Exports ``project_native``, its inverse ``blocks_to_document`` and the
``NativeBlock`` / ``TextSegment`` display types.
"""
from __future__ import annotations

from notedoc.projection.native import (
    NativeBlock,
    TextSegment,
    block_to_node,
    blocks_to_document,
    project_native,
    project_node,
    segments_to_inline,
    text_segments,
)

__all__ = [
    "NativeBlock",
    "TextSegment",
    "block_to_node",
    "blocks_to_document",
    "project_native",
    "project_node",
    "segments_to_inline",
    "text_segments",
]
