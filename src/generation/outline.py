"""Outline pass: request a coarse chapter list and parse it into drafts."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from src.generation.errors import OutlineParseError
from src.generation.gemini import TextGenerator
from src.generation.prompts import build_outline_prompt
from src.ingestion.models import ChapterDraft
from src.pipeline_config import ModelCallConfig

logger = logging.getLogger(__name__)

_OPENING_FENCE_RE = re.compile(r"^```[a-zA-Z]*[ \t]*\n?")
_CLOSING_FENCE_RE = re.compile(r"\n?```$")


def strip_code_fences(text: str) -> str:
    """Remove an enclosing markdown code fence (```` ``` ```` or ```` ```json ````).

    Text without fences is returned trimmed and otherwise unchanged.
    """
    stripped = text.strip()
    stripped = _OPENING_FENCE_RE.sub("", stripped)
    stripped = _CLOSING_FENCE_RE.sub("", stripped)
    return stripped.strip()


def parse_outline(text: str) -> list[ChapterDraft]:
    """Parse an outline response into chapter drafts.

    Fences are stripped first.  Anything other than a JSON array of objects
    with string ``title`` and ``first`` fields is rejected.

    Raises:
        OutlineParseError: If the response does not have the expected shape.
    """
    body = strip_code_fences(text)
    try:
        data: Any = json.loads(body)
    except json.JSONDecodeError as exc:
        raise OutlineParseError(f"Outline response is not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise OutlineParseError(
            f"Outline response must be a JSON array, got {type(data).__name__}"
        )

    drafts: list[ChapterDraft] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise OutlineParseError(f"Outline entry {index} is not an object")
        title = item.get("title")
        first = item.get("first")
        if not isinstance(title, str) or not isinstance(first, str):
            raise OutlineParseError(
                f"Outline entry {index} needs string 'title' and 'first' fields"
            )
        drafts.append(ChapterDraft(title=title, first=first))

    return drafts


def request_outline(
    generator: TextGenerator,
    call: ModelCallConfig,
    narrative: str,
    end_time: str,
) -> list[ChapterDraft]:
    """Ask the overview model for 8-12 chapters covering ``00:00`` to *end_time*."""
    prompt = build_outline_prompt(narrative, end_time)
    response = generator.generate(call, prompt)
    drafts = parse_outline(response)
    logger.info("Outline pass returned %d chapters", len(drafts))
    return drafts
