"""Markup tree parser module.

Exports the ``TreeParser`` class, the ``parse`` convenience function and
the transient parse-tree types.
"""
from __future__ import annotations

from notedoc.parser.elements import ElementKind, ParsedElement
from notedoc.parser.parser import TreeParser, parse

__all__ = [
    "TreeParser",
    "parse",
    "ParsedElement",
    "ElementKind",
]
