"""
Shared test fixtures for zentao-mcp tests.
Patches config module to avoid loading a real .env or reaching a ZenTao server.
"""

from unittest.mock import MagicMock

import pytest


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch, tmp_path):
    """Ensure every test starts with a clean config state.
    Prevents tests from reading the real .env or sleeping between retries."""
    from zentao_mcp import config

    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "ENV_PATH", str(tmp_path / ".env"))
    monkeypatch.setattr(config, "BASE_URL", "http://zentao.test")
    monkeypatch.setattr(config, "AUTH_METHOD", "app")
    monkeypatch.setattr(config, "APP_CODE", "")
    monkeypatch.setattr(config, "APP_KEY", "")
    monkeypatch.setattr(config, "HTTP_MAX_RETRIES", 2)
    monkeypatch.setattr(config, "HTTP_RETRY_DELAY_SECONDS", 0)
    monkeypatch.setattr(config, "LOG_LEVEL", "error")
    monkeypatch.setattr(config, "LOG_JSON", False)


@pytest.fixture
def client():
    """A ZenTaoClient stand-in whose verbs return a canned JSON body."""
    mock = MagicMock()
    mock.auth_method = "app"
    for verb in ("get", "post", "put", "delete"):
        getattr(mock, verb).return_value = b'{"status":"success"}'
    return mock
