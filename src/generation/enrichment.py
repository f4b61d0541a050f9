"""Chapter enrichment: anchor drafts to real timecodes and cover the tail."""

from __future__ import annotations

import logging

from src.ingestion.models import UNKNOWN_START, ChapterDraft, ChapterEnriched, Segment
from src.ingestion.timecodes import final_timecode, locate_timestamp, to_minutes
from src.pipeline_config import DEFAULT_COVERAGE_THRESHOLD_MINUTES

logger = logging.getLogger(__name__)

CLOSING_TITLE = "Closing Thoughts"


def _last_known_start(chapters: list[ChapterEnriched]) -> float:
    """Minutes of the latest chapter with a known start, else 0."""
    for chapter in reversed(chapters):
        if chapter.start != UNKNOWN_START:
            return to_minutes(chapter.start)
    return 0.0


def ensure_coverage(
    chapters: list[ChapterEnriched],
    end_time: str,
    threshold_minutes: float = DEFAULT_COVERAGE_THRESHOLD_MINUTES,
) -> list[ChapterEnriched]:
    """Append a "Closing Thoughts" chapter at *end_time* if the outline stops short.

    A chapter is added only when the gap between *end_time* and the last known
    chapter start is strictly greater than *threshold_minutes*.
    """
    gap = to_minutes(end_time) - _last_known_start(chapters)
    if gap > threshold_minutes:
        logger.info("Outline ends %.1f min before %s; appending %r", gap, end_time, CLOSING_TITLE)
        return [*chapters, ChapterEnriched(title=CLOSING_TITLE, start=end_time)]
    return list(chapters)


def enrich_chapters(
    drafts: list[ChapterDraft],
    segments: list[Segment],
    threshold_minutes: float = DEFAULT_COVERAGE_THRESHOLD_MINUTES,
) -> list[ChapterEnriched]:
    """Map each draft to its real start time, then enforce end-of-recording coverage.

    Chapter order is kept exactly as the model returned it.
    """
    chapters = [
        ChapterEnriched(title=draft.title, start=locate_timestamp(draft.first, segments))
        for draft in drafts
    ]

    misses = sum(1 for chapter in chapters if chapter.start == UNKNOWN_START)
    if misses:
        logger.warning("%d of %d chapters could not be matched to a timestamp", misses, len(chapters))

    return ensure_coverage(chapters, final_timecode(segments), threshold_minutes)
