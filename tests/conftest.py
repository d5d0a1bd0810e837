"""Shared test fixtures."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest

from app import create_app

TEST_CONFIG = {
    "TESTING": True,
    "OPENAI_API_KEY": "test-key",
    "OPENAI_MODEL": "gpt-test",
    "RATELIMIT_STORAGE_URI": "memory://",
    "CORS_ORIGINS": ["*"],
}


def make_completion(content, prompt_tokens: int = 100, completion_tokens: int = 50) -> MagicMock:
    """Build a mock OpenAI ChatCompletion-like object."""
    completion = MagicMock()
    completion.choices = [MagicMock()]
    completion.choices[0].message.content = content
    completion.usage.prompt_tokens = prompt_tokens
    completion.usage.completion_tokens = completion_tokens
    completion.usage.total_tokens = prompt_tokens + completion_tokens
    return completion


@pytest.fixture
def openai_client() -> MagicMock:
    client = MagicMock()
    client.chat.completions.create.return_value = make_completion(
        json.dumps({"variants": [{"nodeId": "1:2", "options": ["สวัสดีค่ะ", "หวัดดี", "สวัสดีครับ"]}]})
    )
    return client


@pytest.fixture
def app(openai_client):
    return create_app(TEST_CONFIG, openai_client=openai_client)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def sample_nodes() -> list[dict]:
    return [
        {
            "id": "1:2",
            "name": "Title",
            "characters": "Hello",
            "fontName": {"family": "Noto Sans Thai", "style": "Bold"},
            "path": ["Frame 1", "Header"],
        },
        {
            "id": "1:3",
            "name": "Greeting",
            "characters": "Welcome back, {userName}",
            "fontName": {"family": "Noto Sans Thai", "style": "Regular"},
            "path": ["Frame 1", "Body"],
        },
    ]


@pytest.fixture
def sample_config() -> dict:
    return {
        "identity": "Gen Z casual",
        "targetAudience": "University students",
        "politeParticles": True,
        "lengthConstraint": "similar",
    }
