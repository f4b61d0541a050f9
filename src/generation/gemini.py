"""Gemini text generation transport."""

from __future__ import annotations

import logging
import time
from typing import Protocol

import google.generativeai as genai

from src.pipeline_config import ModelCallConfig

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """Anything that turns a prompt into text for a given model call."""

    def generate(self, call: ModelCallConfig, prompt: str) -> str: ...


class GeminiTextGenerator:
    """Blocking Gemini client.

    A fresh ``GenerativeModel`` is built per call so each request carries its
    own model name and safety settings.  No retries and no timeout are added
    here; transport errors propagate to the caller.
    """

    def __init__(self, api_key: str) -> None:
        genai.configure(api_key=api_key)  # type: ignore[attr-defined]

    def generate(self, call: ModelCallConfig, prompt: str) -> str:
        model = genai.GenerativeModel(  # type: ignore[attr-defined]
            call.model,
            safety_settings=call.safety_settings,
        )
        logger.debug("Prompt for %s (first 300 chars):\n%s", call.tier.value, prompt[:300])

        started = time.perf_counter()
        response = model.generate_content(prompt)
        logger.info(
            "Gemini %s call (%s) took %.2fs",
            call.tier.value,
            call.model,
            time.perf_counter() - started,
        )

        # response.text raises ValueError when the candidate was blocked
        return str(response.text)
