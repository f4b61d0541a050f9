"""Show-notes pipeline: parse -> outline -> enrich -> deep dive."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from src.generation.deep_dive import request_deep_dive
from src.generation.enrichment import enrich_chapters
from src.generation.errors import ErrorKind, OutlineParseError, ShowNotesError
from src.generation.gemini import GeminiTextGenerator, TextGenerator
from src.generation.outline import request_outline
from src.ingestion.models import ChapterDraft, ChapterEnriched, Segment
from src.ingestion.parsers import describe_transcript, parse_segments, to_plain_text
from src.ingestion.timecodes import final_timecode
from src.pipeline_config import ModelTier, PipelineConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutlineStage:
    """Output of stage 1 and the only input of stage 2."""

    narrative: str
    end_time: str
    drafts: list[ChapterDraft]
    chapters: list[ChapterEnriched]


class ShowNotesPipeline:
    """Two-pass show-notes generator.

    Stage 1 asks the overview model for a chapter outline and anchors it to
    real timecodes.  Stage 2 feeds that outline and the full narrative to the
    deep-dive model.  The stages run strictly in order; every failure aborts
    the call with a :class:`ShowNotesError`.
    """

    def __init__(
        self,
        config: PipelineConfig,
        generator_factory: Callable[[str], TextGenerator] = GeminiTextGenerator,
    ) -> None:
        self.config = config
        self._generator_factory = generator_factory

    def generate_show_notes(self, raw_transcript: str) -> str:
        """Turn a raw transcript into formatted show notes.

        Raises:
            ShowNotesError: On missing credentials, an unparseable outline, or
                any model/transport failure.
        """
        if not self.config.api_key:
            raise ShowNotesError(ErrorKind.CONFIGURATION, "GEMINI_API_KEY is not configured")

        self._log_transcript(raw_transcript)

        try:
            generator = self._generator_factory(self.config.api_key)
            segments = parse_segments(raw_transcript)
            stage = self.run_outline_stage(generator, segments)
            return self.run_deep_dive_stage(generator, stage)
        except OutlineParseError as exc:
            logger.error("Outline pass returned unparseable data: %s", exc)
            raise ShowNotesError(ErrorKind.PARSE, str(exc)) from exc
        except Exception as exc:
            logger.error("Show notes generation failed: %s", exc)
            raise ShowNotesError(ErrorKind.MODEL, str(exc) or type(exc).__name__) from exc

    def run_outline_stage(self, generator: TextGenerator, segments: list[Segment]) -> OutlineStage:
        """Stage 1: outline request, draft parsing, timestamp enrichment."""
        narrative = to_plain_text(segments)
        end_time = final_timecode(segments)
        logger.info("Parsed %d segments; recording ends at %s", len(segments), end_time)

        drafts = request_outline(
            generator,
            self.config.model_call(ModelTier.OVERVIEW),
            narrative,
            end_time,
        )
        chapters = enrich_chapters(drafts, segments, self.config.coverage_threshold_minutes)
        return OutlineStage(narrative=narrative, end_time=end_time, drafts=drafts, chapters=chapters)

    def run_deep_dive_stage(self, generator: TextGenerator, stage: OutlineStage) -> str:
        """Stage 2: final show notes from the anchored outline."""
        return request_deep_dive(
            generator,
            self.config.model_call(ModelTier.DEEP_DIVE),
            stage.narrative,
            stage.chapters,
            self.config.show_name,
            self.config.host_name,
        )

    @staticmethod
    def _log_transcript(raw_transcript: str) -> None:
        stats = describe_transcript(raw_transcript)
        logger.info(
            "Transcript: %d chars, ~%d tokens, %d SRT cues",
            stats.length,
            stats.approx_tokens,
            stats.cue_count,
        )
        if stats.cue_count:
            logger.debug("First timestamps: %s", stats.first_timecodes)
            logger.debug("Last timestamps: %s", stats.last_timecodes)
        logger.debug("Start of transcript:\n%s", raw_transcript[:100])
        logger.debug("End of transcript:\n%s", raw_transcript[-100:])


def generate_show_notes(raw_transcript: str, config: PipelineConfig | None = None) -> str:
    """Generate show notes with *config*, or with configuration from the environment."""
    if config is None:
        from src.config import get_settings

        config = PipelineConfig.from_settings(get_settings())
    return ShowNotesPipeline(config).generate_show_notes(raw_transcript)
