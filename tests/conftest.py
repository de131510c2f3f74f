"""Shared fixtures: explicit settings, a fake API and response payloads."""
from collections.abc import Iterator
from typing import Any

import pytest
from structlog.testing import capture_logs

from helpers import FakeOpenAI
from ryst_openai.config import OpenAISettings


@pytest.fixture
def settings() -> OpenAISettings:
    return OpenAISettings(api_key="sk-test", api_org=None, _env_file=None)


@pytest.fixture
def fake_api() -> FakeOpenAI:
    return FakeOpenAI()


@pytest.fixture
def completion_payload() -> dict[str, Any]:
    return {
        "id": "cmpl-1",
        "object": "text_completion",
        "created": 1689000000,
        "model": "babbage-002",
        "choices": [
            {
                "text": "\n\nThis is a test.",
                "index": 0,
                "logprobs": None,
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 5, "completion_tokens": 7, "total_tokens": 12},
    }


@pytest.fixture
def chat_payload() -> dict[str, Any]:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 1689000000,
        "model": "gpt-3.5-turbo",
        "choices": [
            {
                "message": {"role": "assistant", "content": "This is a test."},
                "index": 0,
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 12, "completion_tokens": 5, "total_tokens": 17},
    }


@pytest.fixture(autouse=True)
def log_events() -> Iterator[list[dict[str, Any]]]:
    with capture_logs() as events:
        yield events
