"""Table detection for capability gating.

Clients that cannot edit tables route notes containing one to an editor
that can.  ``contains_table`` answers that question for every accepted
content shape: documents, node sequences, mappings, markup strings and
markup wrappers.

Detection fails open: an internal failure is logged and reported as
"no table" unless ``fail_closed`` is requested.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any, Final

from notedoc.model.nodes import TABLE_KINDS, TABLE_TYPES, Document, children_of
from notedoc.normalizer.normalizer import DEFAULT_MARKUP_FIELDS

logger = logging.getLogger(__name__)

TABLE_MARKUP: Final[re.Pattern[str]] = re.compile(r"<(table|tr|td|th)\b[^>]*>", re.IGNORECASE)


def markup_has_table(markup: str) -> bool:
    """Return True if ``markup`` contains a table, row or cell tag."""
    return bool(markup) and TABLE_MARKUP.search(markup) is not None


def nodes_have_table(nodes: Sequence[Any]) -> bool:
    """Return True if any node at any depth is a table part.

    ``nodes`` may mix ``Node`` objects and node mappings.
    """
    stack: list[Any] = list(nodes)
    while stack:
        node = stack.pop()
        if isinstance(node, TABLE_TYPES):
            return True
        if isinstance(node, Mapping):
            if node.get("kind", node.get("type")) in TABLE_KINDS:
                return True
            content = node.get("content")
            if isinstance(content, (list, tuple)):
                stack.extend(content)
        else:
            stack.extend(children_of(node))
    return False


def _detect(content: object, markup_fields: Sequence[str]) -> bool:
    if not content:
        return False
    if isinstance(content, Document):
        return nodes_have_table(content.content)
    if isinstance(content, str):
        return markup_has_table(content)
    if isinstance(content, (list, tuple)):
        return nodes_have_table(content)
    if isinstance(content, Mapping):
        if content.get("kind", content.get("type")) == Document.kind:
            return nodes_have_table(content.get("content") or ())
        for name in markup_fields:
            value = content.get(name)
            if isinstance(value, str):
                return markup_has_table(value)
        if "content" in content:
            return _detect(content["content"], markup_fields)
    return False


def contains_table(
    content: object,
    *,
    fail_closed: bool = False,
    markup_fields: Sequence[str] = DEFAULT_MARKUP_FIELDS,
) -> bool:
    """Return True if ``content`` contains a table.

    Parameters
    ----------
    content:
        Note content in any accepted shape, or ``None``.
    fail_closed:
        Value reported when detection itself fails.  The default
        (``False``) lets the note through.
    markup_fields:
        Wrapper keys that hold markup strings.

    Returns
    -------
    bool
        True when a table node or table tag is present.
    """
    try:
        return _detect(content, markup_fields)
    except Exception:
        logger.warning(
            "Table detection failed for %s content; reporting %s.",
            type(content).__name__,
            fail_closed,
            exc_info=True,
        )
        return fail_closed
