"""notedoc — conversion engine between note markup and a rich-text document model.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Every function accepts an optional ``settings`` argument
(``notedoc.config.Settings``); ``None`` means the defaults.  No function
here reads files or the environment.

Example
-------
::

    import notedoc

    # Any stored shape → canonical markup + document
    content = notedoc.normalize("<h2>Vitals</h2><p>BP <strong>120/80</strong></p>")

    # Document → markup and back
    markup = notedoc.to_markup(content.document)
    document = notedoc.to_document(markup)

    # Flat blocks for renderers without markup support
    blocks = notedoc.project_native(document)
    document = notedoc.blocks_to_document(blocks)

    # Capability gating
    needs_table_editor = notedoc.contains_table(content.document)

    # Plain-text shorthand
    document = notedoc.decode_text("# Title\\n- item1\\n- item2")
    text = notedoc.encode_text(document)

    notedoc.__version__
    '0.1.0'
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

__version__: str = "0.1.0"

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from notedoc.config import Settings
    from notedoc.model.nodes import Document, Node
    from notedoc.normalizer.normalizer import NormalizedContent
    from notedoc.projection.native import NativeBlock


def _settings(settings: "Settings | None") -> "Settings":
    from notedoc.config import Settings

    return settings if settings is not None else Settings()


def normalize(content: object, settings: "Settings | None" = None) -> "NormalizedContent":
    """Convert stored note content of any accepted shape to canonical form.

    Parameters
    ----------
    content:
        A ``Document``, a document mapping, a list of nodes, a markup
        wrapper mapping, a markup string, or ``None``.
    settings:
        Depth limit and markup wrapper keys.

    Returns
    -------
    NormalizedContent
        ``markup`` and ``document``; the document is never empty.
    """
    from notedoc.normalizer.normalizer import normalize as _normalize

    resolved = _settings(settings)
    result = _normalize(
        content,
        max_depth=resolved.max_depth,
        markup_fields=tuple(resolved.markup_fields),
    )
    logger.debug(
        "Normalized %s content as %s (%d top-level nodes)",
        type(content).__name__,
        result.shape.value,
        len(result.document.content),
    )
    return result


def to_markup(
    target: "Document | Node | Sequence[Node]",
    settings: "Settings | None" = None,
) -> str:
    """Serialize a document, node or node sequence to markup.

    Parameters
    ----------
    target:
        What to serialize.
    settings:
        Depth limit.

    Returns
    -------
    str
        Markup text.
    """
    from notedoc.formatter.formatter import to_markup as _to_markup

    return _to_markup(target, max_depth=_settings(settings).max_depth)


def to_document(markup: str, settings: "Settings | None" = None) -> "Document":
    """Parse markup into a ``Document``.

    Parameters
    ----------
    markup:
        Markup text; may be malformed or empty.
    settings:
        Depth limit.

    Returns
    -------
    Document
        Never empty; blank markup yields one empty paragraph.
    """
    from notedoc.builder.builder import to_document as _to_document

    document = _to_document(markup, max_depth=_settings(settings).max_depth)
    logger.debug(
        "Parsed %d characters of markup into %d top-level nodes",
        len(markup),
        len(document.content),
    )
    return document


def project_native(document: "Document", settings: "Settings | None" = None) -> list["NativeBlock"]:
    """Project a ``Document`` into flat display blocks.

    Parameters
    ----------
    document:
        The document to project.
    settings:
        Accepted for symmetry with the other operations; the projection
        has no tunables.

    Returns
    -------
    list[NativeBlock]
        Display blocks in document order.
    """
    from notedoc.projection.native import project_native as _project_native

    return _project_native(document)


def blocks_to_document(blocks: "Sequence[NativeBlock]", settings: "Settings | None" = None) -> "Document":
    """Rebuild a ``Document`` from display blocks, e.g. when a block editor saves.

    Parameters
    ----------
    blocks:
        Display blocks in document order.
    settings:
        Accepted for symmetry; the conversion has no tunables.

    Returns
    -------
    Document
        Never empty.
    """
    from notedoc.projection.native import blocks_to_document as _blocks_to_document

    document = _blocks_to_document(blocks)
    logger.debug("Rebuilt %d top-level nodes from %d blocks", len(document.content), len(blocks))
    return document


def contains_table(content: object, settings: "Settings | None" = None) -> bool:
    """Return True if note content contains a table.

    Parameters
    ----------
    content:
        Note content in any accepted shape.
    settings:
        ``table_detection`` decides the answer reported when detection
        fails internally; ``markup_fields`` names the wrapper keys.

    Returns
    -------
    bool
        True when a table node or table tag is present.
    """
    from notedoc.tables.detector import contains_table as _contains_table

    resolved = _settings(settings)
    found = _contains_table(
        content,
        fail_closed=resolved.fail_closed,
        markup_fields=tuple(resolved.markup_fields),
    )
    logger.debug("Table detection on %s content: %s", type(content).__name__, found)
    return found


def decode_text(text: str, settings: "Settings | None" = None) -> "Document":
    """Read plain-text shorthand into a ``Document``.

    Parameters
    ----------
    text:
        Shorthand lines (``# heading``, ``- item``, paragraphs).
    settings:
        Accepted for symmetry; the codec has no tunables.

    Returns
    -------
    Document
        The decoded document.
    """
    from notedoc.plaintext.codec import decode_text as _decode_text

    return _decode_text(text)


def encode_text(document: "Document", settings: "Settings | None" = None) -> str:
    """Write a ``Document`` as plain-text shorthand; marks are dropped.

    Parameters
    ----------
    document:
        The document to encode.
    settings:
        Accepted for symmetry; the codec has no tunables.

    Returns
    -------
    str
        Shorthand text.
    """
    from notedoc.plaintext.codec import encode_text as _encode_text

    return _encode_text(document)


__all__ = [
    "__version__",
    "normalize",
    "to_markup",
    "to_document",
    "project_native",
    "blocks_to_document",
    "contains_table",
    "decode_text",
    "encode_text",
]
