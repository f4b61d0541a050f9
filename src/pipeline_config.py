"""Pipeline configuration: model tiers, safety settings and PipelineConfig."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from google.generativeai.types import HarmBlockThreshold, HarmCategory

if TYPE_CHECKING:
    from src.config import Settings

# Outline must reach within this many minutes of the end of the recording.
DEFAULT_COVERAGE_THRESHOLD_MINUTES = 5.0


class ModelTier(str, Enum):
    """The two Gemini tiers the pipeline calls, in call order."""

    OVERVIEW = "overview"
    DEEP_DIVE = "deep_dive"


def default_safety_settings() -> dict[HarmCategory, HarmBlockThreshold]:
    """Block medium-and-above harassment and hate speech."""
    return {
        HarmCategory.HARM_CATEGORY_HARASSMENT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
        HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
    }


@dataclass(frozen=True)
class ModelCallConfig:
    """Immutable description of one model call: tier, model name, safety filters."""

    tier: ModelTier
    model: str
    safety_settings: dict[HarmCategory, HarmBlockThreshold] = field(
        default_factory=default_safety_settings
    )


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable configuration for the show-notes pipeline.

    Built once at process start (see :meth:`from_settings`) and injected into
    :class:`~src.generation.pipeline.ShowNotesPipeline`, so the pipeline never
    reads the environment itself.
    """

    api_key: str = ""
    overview_model: str = "gemini-1.5-flash"
    deep_dive_model: str = "gemini-1.5-pro"
    show_name: str = "Crazy Wisdom"
    host_name: str = "Stewart Alsop"
    coverage_threshold_minutes: float = DEFAULT_COVERAGE_THRESHOLD_MINUTES

    @classmethod
    def from_settings(cls, settings: Settings) -> PipelineConfig:
        return cls(
            api_key=settings.gemini_api_key,
            overview_model=settings.overview_model,
            deep_dive_model=settings.deep_dive_model,
            show_name=settings.show_name,
            host_name=settings.host_name,
        )

    def model_call(self, tier: ModelTier) -> ModelCallConfig:
        """Return the call configuration for *tier*."""
        if tier is ModelTier.OVERVIEW:
            return ModelCallConfig(tier=tier, model=self.overview_model)
        return ModelCallConfig(tier=tier, model=self.deep_dive_model)
