"""Tests for transcript parsing: segments, narrative text and diagnostics."""

from __future__ import annotations

import math

import pytest

from src.ingestion.models import SENTINEL_ZERO_TIMECODE, Segment
from src.ingestion.parsers import describe_transcript, parse_segments, to_plain_text
from src.ingestion.timecodes import final_timecode

ROUND_TRIP_SRT = (
    "1\n00:00:00,000 --> 00:00:03,000\nHello world.\n\n"
    "2\n00:00:05,000 --> 00:00:08,000\nSecond line."
)


def _build_srt(texts: list[str]) -> str:
    blocks = []
    for i, text in enumerate(texts):
        start = f"00:{i // 60:02d}:{i % 60:02d},000"
        end = f"00:{i // 60:02d}:{i % 60:02d},900"
        blocks.append(f"{i + 1}\n{start} --> {end}\n{text}")
    return "\n\n".join(blocks) + "\n"


class TestParseSegments:
    def test_round_trip_example(self) -> None:
        segments = parse_segments(ROUND_TRIP_SRT)
        assert segments == [
            Segment(timecode="00:00:00,000", text="Hello world."),
            Segment(timecode="00:00:05,000", text="Second line."),
        ]
        assert to_plain_text(segments) == "Hello world. Second line."
        assert final_timecode(segments) == "00:05"

    @pytest.mark.parametrize("n", [1, 3, 25, 90])
    def test_n_cues_give_n_segments_in_order(self, n: int) -> None:
        texts = [f"Sentence number {i}." for i in range(n)]
        segments = parse_segments(_build_srt(texts))
        assert len(segments) == n
        assert [s.text for s in segments] == texts
        assert " ".join(to_plain_text(segments).split()) == " ".join(texts)

    def test_only_start_timecode_kept(self) -> None:
        segments = parse_segments("1\n00:01:02,345 --> 00:01:09,999\nText.")
        assert segments[0].timecode == "00:01:02,345"

    def test_multiline_cue_collapsed(self) -> None:
        srt = "1\n00:00:01,000 --> 00:00:05,000\nThis is line one.\nThis is line two.\n"
        segments = parse_segments(srt)
        assert len(segments) == 1
        assert segments[0].text == "This is line one. This is line two."

    def test_empty_cue_kept(self) -> None:
        srt = (
            "1\n00:00:01,000 --> 00:00:02,000\n\n"
            "2\n00:00:03,000 --> 00:00:04,000\nAfter the pause.\n"
        )
        segments = parse_segments(srt)
        assert len(segments) == 2
        assert segments[0] == Segment(timecode="00:00:01,000", text="")
        assert segments[1].text == "After the pause."

    def test_empty_unnumbered_cue_followed_directly_by_header(self) -> None:
        srt = "00:00:01,000 --> 00:00:02,000\n00:00:03,000 --> 00:00:04,000\nHi.\n"
        segments = parse_segments(srt)
        assert segments == [
            Segment(timecode="00:00:01,000", text=""),
            Segment(timecode="00:00:03,000", text="Hi."),
        ]

    def test_empty_numbered_cue_followed_directly_by_next_cue(self) -> None:
        srt = "1\n00:00:01,000 --> 00:00:02,000\n2\n00:00:03,000 --> 00:00:04,000\nHi.\n"
        segments = parse_segments(srt)
        assert segments == [
            Segment(timecode="00:00:01,000", text=""),
            Segment(timecode="00:00:03,000", text="Hi."),
        ]

    def test_header_at_end_of_input(self) -> None:
        segments = parse_segments("1\n00:00:01,000 --> 00:00:02,000")
        assert segments == [Segment(timecode="00:00:01,000", text="")]

    def test_unnumbered_cues(self) -> None:
        srt = (
            "00:00:01,000 --> 00:00:02,000\nFirst.\n"
            "00:00:03,000 --> 00:00:04,000\nSecond.\n"
        )
        segments = parse_segments(srt)
        assert [s.timecode for s in segments] == ["00:00:01,000", "00:00:03,000"]
        assert [s.text for s in segments] == ["First.", "Second."]

    def test_crlf_line_endings(self) -> None:
        segments = parse_segments(ROUND_TRIP_SRT.replace("\n", "\r\n"))
        assert [s.text for s in segments] == ["Hello world.", "Second line."]

    def test_malformed_timecode_falls_into_previous_block(self) -> None:
        srt = (
            "1\n00:00:01,000 --> 00:00:02,000\nGood.\n\n"
            "2\n0:00:03,000 --> 00:00:04,000\nBad header.\n"
        )
        segments = parse_segments(srt)
        assert len(segments) == 1
        assert segments[0].text.startswith("Good.")
        assert segments[0].text.endswith("Bad header.")


class TestFallbackSegment:
    @pytest.mark.parametrize(
        "raw",
        [
            "Just a plain transcript with no timing.",
            "  Speaker 1: Hello.\nSpeaker 2: Hi there.\n\n",
            "WEBVTT\n\n00:00:01.000 --> 00:00:05.000\nVTT uses dots, not commas.",
            "",
        ],
    )
    def test_plain_text_is_single_segment(self, raw: str) -> None:
        segments = parse_segments(raw)
        assert len(segments) == 1
        assert segments[0].timecode == SENTINEL_ZERO_TIMECODE
        assert segments[0].text == raw.strip()

    def test_fallback_final_timecode_is_zero(self) -> None:
        assert final_timecode(parse_segments("no timestamps here")) == "00:00"


class TestToPlainText:
    def test_empty(self) -> None:
        assert to_plain_text([]) == ""

    def test_joins_with_spaces(self) -> None:
        segments = [Segment("00:00:00,000", "One."), Segment("00:00:01,000", "Two.")]
        assert to_plain_text(segments) == "One. Two."


class TestDescribeTranscript:
    def test_srt_stats(self) -> None:
        stats = describe_transcript(ROUND_TRIP_SRT)
        assert stats.length == len(ROUND_TRIP_SRT)
        assert stats.approx_tokens == math.ceil(len(ROUND_TRIP_SRT) / 4)
        assert stats.cue_count == 2
        assert stats.first_timecodes == ["00:00:00,000", "00:00:05,000"]
        assert stats.last_timecodes == ["00:00:00,000", "00:00:05,000"]

    def test_samples_first_and_last_three(self) -> None:
        stats = describe_transcript(_build_srt([f"Line {i}." for i in range(10)]))
        assert stats.cue_count == 10
        assert stats.first_timecodes == ["00:00:00,000", "00:00:01,000", "00:00:02,000"]
        assert stats.last_timecodes == ["00:00:07,000", "00:00:08,000", "00:00:09,000"]

    def test_plain_text_has_no_cues(self) -> None:
        stats = describe_transcript("Hello there.")
        assert stats.cue_count == 0
        assert stats.first_timecodes == []
        assert stats.last_timecodes == []
