"""Transcript parsing: SRT-style cues to segments, narrative text, diagnostics."""

from __future__ import annotations

import math
import re

from src.ingestion.models import SENTINEL_ZERO_TIMECODE, Segment, TranscriptStats

_TIMECODE = r"\d{2}:\d{2}:\d{2},\d{3}"

# Cue header followed by its text block.  The header leaves its newline to the
# block so an empty block can end right away.  The block ends at the next
# numbered cue header, the next bare timecode header, or end of input.
_CUE_RE = re.compile(
    rf"({_TIMECODE})[ \t]*-->[ \t]*{_TIMECODE}[ \t]*(?=\n|\Z)"
    rf"(.*?)"
    rf"(?=\n\s*\d+[ \t]*\n{_TIMECODE}[ \t]*-->|\n{_TIMECODE}[ \t]*-->|\Z)",
    re.DOTALL,
)

# Numbered cue header, as counted by the diagnostics.
_NUMBERED_CUE_RE = re.compile(rf"\d+\n({_TIMECODE}) --> ({_TIMECODE})")

_NEWLINES_RE = re.compile(r"\s*\n\s*")


def parse_segments(content: str) -> list[Segment]:
    """Parse a raw transcript into time-anchored segments.

    Handles SRT cues like::

        1
        00:00:01,000 --> 00:00:04,000
        Hello and welcome.

    Only the start timecode of each cue is kept.  Line breaks inside a cue are
    collapsed to single spaces; cues with no text are kept with empty text so
    timing stays continuous.

    If no cue headers are found, the whole (trimmed) input becomes a single
    segment at ``00:00:00,000``, so the result is never empty.
    """
    normalized = content.replace("\r\n", "\n")
    segments = [
        Segment(timecode=match.group(1), text=_NEWLINES_RE.sub(" ", match.group(2)).strip())
        for match in _CUE_RE.finditer(normalized)
    ]

    if not segments:
        return [Segment(timecode=SENTINEL_ZERO_TIMECODE, text=content.strip())]

    return segments


def to_plain_text(segments: list[Segment]) -> str:
    """Join segment texts with single spaces, dropping all timing information."""
    return " ".join(segment.text for segment in segments)


def describe_transcript(content: str, sample: int = 3) -> TranscriptStats:
    """Collect size and cue statistics for logging before the model calls.

    Token count is a rough ``chars / 4`` estimate.
    """
    starts = [match.group(1) for match in _NUMBERED_CUE_RE.finditer(content.replace("\r\n", "\n"))]
    return TranscriptStats(
        length=len(content),
        approx_tokens=math.ceil(len(content) / 4),
        cue_count=len(starts),
        first_timecodes=starts[:sample],
        last_timecodes=starts[-sample:] if starts else [],
    )
