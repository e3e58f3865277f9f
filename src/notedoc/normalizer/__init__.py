"""Content normalizer module.

Exports ``normalize``, ``classify`` and the ``ContentShape`` and
``NormalizedContent`` types.
"""
from __future__ import annotations

from notedoc.normalizer.normalizer import (
    DEFAULT_MARKUP_FIELDS,
    ContentShape,
    NormalizedContent,
    classify,
    normalize,
)

__all__ = [
    "ContentShape",
    "NormalizedContent",
    "DEFAULT_MARKUP_FIELDS",
    "classify",
    "normalize",
]
