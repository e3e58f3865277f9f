"""Tag vocabulary shared by the lexer, builder and formatter."""
from __future__ import annotations

import re
from typing import Final

# Tags that never have content, whether or not they are written with a
# trailing slash.
VOID_TAGS: Final[frozenset[str]] = frozenset({"br", "hr", "img", "input"})

HEADING_LEVELS: Final[dict[str, int]] = {f"h{level}": level for level in range(1, 7)}

TABLE_SECTION_TAGS: Final[frozenset[str]] = frozenset({"thead", "tbody", "tfoot"})

# Nesting depth beyond which parsing, building and serialization stop
# descending.  Stored content can be corrupted or hostile.
MAX_NESTING_DEPTH: Final[int] = 64

TAG_NAME: Final[re.Pattern[str]] = re.compile(r"[A-Za-z][A-Za-z0-9:-]*")

ATTRIBUTE: Final[re.Pattern[str]] = re.compile(
    r"""([A-Za-z_:][\w:.-]*)\s*=\s*(?:"([^"]*)"|'([^']*)')"""
)


def parse_attributes(interior: str) -> tuple[tuple[str, str], ...]:
    """Extract ``name="value"`` / ``name='value'`` pairs from a tag interior.

    Names are lower-cased; values are returned raw (entity decoding is
    the caller's job).  Anything that does not look like a quoted
    attribute is skipped.
    """
    pairs: list[tuple[str, str]] = []
    for match in ATTRIBUTE.finditer(interior):
        value = match.group(2) if match.group(2) is not None else match.group(3)
        pairs.append((match.group(1).lower(), value))
    return tuple(pairs)
