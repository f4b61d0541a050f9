"""Shared fixtures: a fake text generator standing in for Gemini."""

from __future__ import annotations

import pytest

from src.pipeline_config import ModelCallConfig


class FakeGenerator:
    """Returns canned responses in order and records every call."""

    def __init__(self, responses: list[str | Exception]) -> None:
        self.responses = list(responses)
        self.calls: list[tuple[ModelCallConfig, str]] = []

    def generate(self, call: ModelCallConfig, prompt: str) -> str:
        self.calls.append((call, prompt))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def make_generator():
    return FakeGenerator
