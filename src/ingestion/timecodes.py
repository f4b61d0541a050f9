"""Timecode arithmetic and sentence-to-timestamp lookup."""

from __future__ import annotations

import re

from src.ingestion.models import UNKNOWN_START, Segment

# Length of the normalized sentence prefix used as the search key.
SEARCH_KEY_LENGTH = 60

_NON_ALNUM_RE = re.compile(r"[^a-z0-9 ]")


def to_mm_ss(timecode: str) -> str:
    """Convert ``HH:MM:SS,mmm`` to ``MM:SS`` (hours and milliseconds dropped)."""
    return timecode[3:8]


def to_minutes(mm_ss: str) -> float:
    """Convert ``MM:SS`` to fractional minutes.

    Raises:
        ValueError: If *mm_ss* is not two colon-separated integers.
    """
    minutes, seconds = mm_ss.split(":")
    return int(minutes) + int(seconds) / 60


def final_timecode(segments: list[Segment]) -> str:
    """Return the ``MM:SS`` start of the last segment, i.e. the recording's real end."""
    return to_mm_ss(segments[-1].timecode)


def normalize_text(text: str) -> str:
    """Lower-case *text* and drop everything outside ``[a-z0-9 ]``."""
    return _NON_ALNUM_RE.sub("", text.lower())


def locate_timestamp(sentence: str, segments: list[Segment]) -> str:
    """Find the ``MM:SS`` start of the first segment containing *sentence*.

    Matching is plain substring containment on normalized text, using the
    first 60 normalized characters of *sentence* as the key.  Segments are
    scanned in order and the first hit wins.  Returns ``??:??`` when nothing
    contains the key, or when the key is empty.
    """
    key = normalize_text(sentence)[:SEARCH_KEY_LENGTH]
    if not key:
        return UNKNOWN_START

    for segment in segments:
        if key in normalize_text(segment.text):
            return to_mm_ss(segment.timecode)

    return UNKNOWN_START
