"""Markup lexer module.

Exports the ``Lexer`` class and the ``tokenize`` convenience function.
"""
from __future__ import annotations

from notedoc.lexer.lexer import Lexer, tokenize

__all__ = ["Lexer", "tokenize"]
