"""Escaping and unescaping of the five reserved markup characters.

Only ``& < > " '`` are handled.  Any other entity reference is left
untouched on the way in and never produced on the way out.
"""
from __future__ import annotations

import re
from typing import Final

_ESCAPE_MAP: Final[dict[str, str]] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}

_UNESCAPE_MAP: Final[dict[str, str]] = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&#x27;": "'",
    "&apos;": "'",
}

_ESCAPE_RE: Final[re.Pattern[str]] = re.compile(r"[&<>\"']")
_UNESCAPE_RE: Final[re.Pattern[str]] = re.compile(
    r"&(?:amp|lt|gt|quot|apos|#39|#x27);", re.IGNORECASE
)


def escape(text: str) -> str:
    """Escape all five reserved characters in ``text``."""
    return _ESCAPE_RE.sub(lambda m: _ESCAPE_MAP[m.group(0)], text)


def unescape(text: str) -> str:
    """Decode the reserved-character entities in ``text`` in a single pass.

    ``&amp;lt;`` therefore decodes to ``&lt;``, not to ``<``.
    """
    if "&" not in text:
        return text
    return _UNESCAPE_RE.sub(lambda m: _UNESCAPE_MAP[m.group(0).lower()], text)
