"""Error kinds raised by the show-notes pipeline."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Classification of a fatal pipeline failure."""

    CONFIGURATION = "configuration"
    PARSE = "parse"
    MODEL = "model"


class ShowNotesError(Exception):
    """Fatal show-notes failure.

    The message always reads ``"Failed to generate show notes: <cause>"``; the
    underlying exception, if any, is chained as ``__cause__``.
    """

    def __init__(self, kind: ErrorKind, detail: str) -> None:
        super().__init__(f"Failed to generate show notes: {detail}")
        self.kind = kind
        self.detail = detail


class OutlineParseError(ValueError):
    """The outline pass did not return a JSON array of ``{title, first}`` objects."""
