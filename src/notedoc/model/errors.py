"""Error types raised when reading persisted documents.

The conversion core itself never raises; these errors only surface from
the text-level readers (JSON and YAML) used by storage and the CLI.
"""
from __future__ import annotations


class DocumentFormatError(ValueError):
    """Raised when persisted document text cannot be read.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    source_format:
        The text format being read, e.g. ``"json"`` or ``"yaml"``.
    """

    def __init__(self, message: str, source_format: str) -> None:
        super().__init__(f"Invalid {source_format} document: {message}")
        self.format_message = message
        self.source_format = source_format
