"""Deep-dive pass: write the final show notes from the anchored outline."""

from __future__ import annotations

import logging
import re

from src.generation.gemini import TextGenerator
from src.generation.prompts import build_deep_dive_prompt
from src.ingestion.models import ChapterEnriched
from src.pipeline_config import ModelCallConfig

logger = logging.getLogger(__name__)

_TIMESTAMPS_SECTION_RE = re.compile(
    r"^#*\s*Timestamps\s*\n(.+?)(?=^#*\s*Key Insights|\Z)",
    re.MULTILINE | re.DOTALL | re.IGNORECASE,
)


def render_chapters(chapters: list[ChapterEnriched]) -> str:
    """Render chapters as ``"MM:SS Title"`` lines."""
    return "\n".join(f"{chapter.start} {chapter.title}" for chapter in chapters)


def extract_timestamps_section(text: str) -> str | None:
    """Return the body of the "Timestamps" section, or None if absent."""
    match = _TIMESTAMPS_SECTION_RE.search(text)
    if match is None:
        return None
    return match.group(1).strip()


def request_deep_dive(
    generator: TextGenerator,
    call: ModelCallConfig,
    narrative: str,
    chapters: list[ChapterEnriched],
    show_name: str,
    host_name: str,
) -> str:
    """Ask the deep-dive model for the final show notes.

    The response is not validated against the requested sections; it is only
    trimmed of surrounding whitespace.
    """
    prompt = build_deep_dive_prompt(narrative, render_chapters(chapters), show_name, host_name)
    text = generator.generate(call, prompt).strip()

    logger.debug(
        "Generated Timestamps section:\n%s",
        extract_timestamps_section(text) or "<<not found>>",
    )
    return text
