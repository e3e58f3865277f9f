"""Document builder module.

Exports the ``DocumentBuilder`` class and the ``build_document`` and
``to_document`` convenience functions.
"""
from __future__ import annotations

from notedoc.builder.builder import DocumentBuilder, build_document, to_document

__all__ = ["DocumentBuilder", "build_document", "to_document"]
