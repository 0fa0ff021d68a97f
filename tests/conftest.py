"""Test configuration and fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

from pagi_external_api.config import PAGIConfig
from tests._helpers import make_response

PAGI_ENV_VARS = (
    "OPENROUTER_API_KEY",
    "OPENROUTER_DEFAULT_MODEL",
    "JIRA_API_TOKEN",
    "JIRA_BASE_URL",
    "CROWDSTRIKE_API_TOKEN",
    "CROWDSTRIKE_BASE_URL",
    "LOG_LEVEL",
    "DEFAULT_MODEL",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Clear PAGI variables and run from an empty directory so no `.env` leaks in."""
    for name in PAGI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def pagi_config() -> PAGIConfig:
    """Provide a test configuration with every integration enabled."""
    return PAGIConfig(
        openrouter_api_key="test-key",
        openrouter_default_model="test/default-model",
        jira_api_token="jira-token",
        crowdstrike_api_token="cs-token",
    )


@pytest.fixture
def mock_session() -> Mock:
    """Provide a session whose `post` returns a single "hello" completion."""
    session = Mock(spec=requests.Session)
    session.post.return_value = make_response(
        payload={"id": "gen-1", "choices": [{"message": {"role": "assistant", "content": "hello"}}]}
    )
    return session
