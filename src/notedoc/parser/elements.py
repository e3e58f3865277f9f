"""Transient parse-tree types produced by the tree parser.

A ``ParsedElement`` is either an element (tag name, attributes and
children) or a text leaf.  The tree only lives between parsing and
document building and is discarded afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ElementKind(Enum):
    """Discriminator for ``ParsedElement``."""

    ELEMENT = auto()
    TEXT = auto()


@dataclass(frozen=True, slots=True)
class ParsedElement:
    """A node of the transient parse tree.

    Parameters
    ----------
    kind:
        ``ELEMENT`` or ``TEXT``.
    tag:
        Lower-cased tag name (elements only).
    attrs:
        Attribute ``(name, value)`` pairs in source order (elements only).
    text:
        Character data with reserved entities decoded (text leaves only).
    children:
        Child elements and text leaves (elements only).
    """

    kind: ElementKind
    tag: str = ""
    attrs: tuple[tuple[str, str], ...] = ()
    text: str = ""
    children: tuple["ParsedElement", ...] = ()

    @classmethod
    def text_leaf(cls, text: str) -> "ParsedElement":
        """Build a text leaf."""
        return cls(kind=ElementKind.TEXT, text=text)

    @classmethod
    def element(
        cls,
        tag: str,
        attrs: tuple[tuple[str, str], ...] = (),
        children: tuple["ParsedElement", ...] = (),
    ) -> "ParsedElement":
        """Build an element node."""
        return cls(kind=ElementKind.ELEMENT, tag=tag, attrs=attrs, children=children)

    @property
    def is_text(self) -> bool:
        return self.kind is ElementKind.TEXT

    def attr(self, name: str) -> str | None:
        """Return the first value of attribute ``name``, or ``None``."""
        for key, value in self.attrs:
            if key == name:
                return value
        return None

    def text_leaves(self) -> list[str]:
        """Return every descendant text payload in document order."""
        if self.is_text:
            return [self.text]
        leaves: list[str] = []
        for child in self.children:
            leaves.extend(child.text_leaves())
        return leaves

    def text_content(self) -> str:
        """Return all descendant text concatenated."""
        return "".join(self.text_leaves())
