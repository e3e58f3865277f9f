"""Content normalizer: any stored note body → canonical markup + document.

Notes have been persisted in several shapes over time.  ``classify``
resolves which one a value is, once, and ``normalize`` converts it into a
``NormalizedContent`` holding both the markup and the document.

Accepted shapes
---------------
``DOCUMENT``
    A ``Document`` or a mapping whose ``kind`` (or legacy ``type``) is
    ``"doc"``.
``NODE_LIST``
    A list or tuple of nodes, as ``Node`` objects or mappings.
``MARKUP_WRAPPER``
    A mapping holding a markup string under one of the configured
    wrapper keys (``html`` and ``markup`` by default).
``MARKUP``
    A markup string.
``EMPTY``
    ``None`` and anything else.

``normalize`` never raises for any of these.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from notedoc.builder.builder import to_document
from notedoc.formatter.formatter import to_markup
from notedoc.grammar.tags import MAX_NESTING_DEPTH
from notedoc.model.nodes import Document
from notedoc.model.serializer import DocumentSerializer

DEFAULT_MARKUP_FIELDS: tuple[str, ...] = ("html", "markup")


class ContentShape(Enum):
    """The closed set of stored content shapes."""

    DOCUMENT = "document"
    NODE_LIST = "node_list"
    MARKUP_WRAPPER = "markup_wrapper"
    MARKUP = "markup"
    EMPTY = "empty"


@dataclass(frozen=True, slots=True)
class NormalizedContent:
    """A note body in canonical form.

    Parameters
    ----------
    markup:
        Markup text; empty for empty content.
    document:
        The document model; never empty.
    shape:
        The shape the input was recognised as.
    """

    markup: str
    document: Document
    shape: ContentShape = ContentShape.EMPTY

    def to_dict(self) -> dict[str, object]:
        """Return the persisted ``{"markup": ..., "document": {...}}`` form."""
        return {
            "markup": self.markup,
            "document": DocumentSerializer().to_dict(self.document),
        }


def _markup_field(content: Mapping[Any, Any], fields: Sequence[str]) -> str | None:
    for name in fields:
        value = content.get(name)
        if isinstance(value, str):
            return value
    return None


def classify(content: object, markup_fields: Sequence[str] = DEFAULT_MARKUP_FIELDS) -> ContentShape:
    """Return the ``ContentShape`` of ``content``."""
    if isinstance(content, Document):
        return ContentShape.DOCUMENT
    if isinstance(content, str):
        return ContentShape.MARKUP
    if isinstance(content, (list, tuple)):
        return ContentShape.NODE_LIST
    if isinstance(content, Mapping):
        if content.get("kind", content.get("type")) == Document.kind:
            return ContentShape.DOCUMENT
        if _markup_field(content, markup_fields) is not None:
            return ContentShape.MARKUP_WRAPPER
    return ContentShape.EMPTY


def normalize(
    content: object,
    max_depth: int = MAX_NESTING_DEPTH,
    markup_fields: Sequence[str] = DEFAULT_MARKUP_FIELDS,
) -> NormalizedContent:
    """Convert any accepted content shape into ``NormalizedContent``.

    Parameters
    ----------
    content:
        A stored note body of any accepted shape, or ``None``.
    max_depth:
        Nesting depth limit for parsing, reading and serializing.
    markup_fields:
        Wrapper keys that hold markup strings.

    Returns
    -------
    NormalizedContent
        Markup and document for ``content``; ``("", Document.empty())``
        for empty or unrecognised input.
    """
    shape = classify(content, markup_fields)

    if shape is ContentShape.MARKUP:
        markup = str(content)
        return NormalizedContent(markup, to_document(markup, max_depth=max_depth), shape)

    if shape is ContentShape.MARKUP_WRAPPER:
        markup = _markup_field(content, markup_fields) or ""  # type: ignore[arg-type]
        return NormalizedContent(markup, to_document(markup, max_depth=max_depth), shape)

    serializer = DocumentSerializer(max_depth=max_depth)
    if shape is ContentShape.DOCUMENT:
        if isinstance(content, Document):
            document = content if content.content else Document.empty()
        else:
            document = serializer.from_dict(content)  # type: ignore[arg-type]
    elif shape is ContentShape.NODE_LIST:
        document = serializer.from_nodes(content)  # type: ignore[arg-type]
    else:
        return NormalizedContent("", Document.empty(), shape)

    return NormalizedContent(to_markup(document, max_depth=max_depth), document, shape)
