"""Plain-text shorthand codec module.

Exports ``decode_text``, ``encode_text`` and the line classifier.
"""
from __future__ import annotations

from notedoc.plaintext.codec import (
    LineKind,
    ParsedLine,
    classify_line,
    decode_text,
    encode_node,
    encode_text,
)

__all__ = [
    "LineKind",
    "ParsedLine",
    "classify_line",
    "decode_text",
    "encode_node",
    "encode_text",
]
