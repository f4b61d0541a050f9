"""Data models for transcript segments and chapter outlines."""

from __future__ import annotations

from dataclasses import dataclass, field

# Timecode given to the single fallback segment of an unstructured transcript.
SENTINEL_ZERO_TIMECODE = "00:00:00,000"

# Start value for a chapter whose opening sentence could not be found.
UNKNOWN_START = "??:??"


@dataclass(frozen=True)
class Segment:
    """Transcript text anchored to a single ``HH:MM:SS,mmm`` start timecode."""

    timecode: str
    text: str


@dataclass(frozen=True)
class ChapterDraft:
    """A chapter proposed by the outline pass.

    ``first`` is the chapter's opening sentence as quoted by the model; it is
    only used to find the chapter's real start time.
    """

    title: str
    first: str


@dataclass(frozen=True)
class ChapterEnriched:
    """A chapter anchored to a real ``MM:SS`` start time (or ``??:??``)."""

    title: str
    start: str


@dataclass(frozen=True)
class TranscriptStats:
    """Size and cue diagnostics for a raw transcript."""

    length: int
    approx_tokens: int
    cue_count: int
    first_timecodes: list[str] = field(default_factory=list)
    last_timecodes: list[str] = field(default_factory=list)
