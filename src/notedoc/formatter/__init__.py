"""Markup formatter module.

Exports the ``MarkupFormatter`` class and the ``to_markup`` convenience
function.
"""
from __future__ import annotations

from notedoc.formatter.formatter import MarkupFormatter, to_markup

__all__ = ["MarkupFormatter", "to_markup"]
