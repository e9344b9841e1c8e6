"""
Unit tests for environment-driven settings (core/config.py).
"""

import pytest

from core.config import NBP_API_BASE, Settings


class TestSettings:
    """Tests for Settings defaults and overrides."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in (
            "NBP_API_BASE",
            "NBP_REQUEST_TIMEOUT",
            "MCP_TRANSPORT",
            "MCP_HOST",
            "MCP_PORT",
            "LOG_LEVEL",
            "AGENT_MODEL",
        ):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        settings = Settings()

        assert settings.api_base == NBP_API_BASE
        assert settings.request_timeout == 10.0
        assert settings.transport == "stdio"
        assert settings.port == 8000
        assert settings.log_level == "INFO"

    def test_overrides_from_environment(self, monkeypatch):
        monkeypatch.setenv("NBP_API_BASE", "http://localhost:9000/api/")
        monkeypatch.setenv("NBP_REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("MCP_TRANSPORT", "HTTP")
        monkeypatch.setenv("MCP_PORT", "8123")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.api_base == "http://localhost:9000/api"
        assert settings.request_timeout == 2.5
        assert settings.transport == "http"
        assert settings.port == 8123
        assert settings.log_level == "DEBUG"

    def test_blank_value_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv("MCP_TRANSPORT", "  ")

        assert Settings().transport == "stdio"

    def test_unknown_transport_rejected(self, monkeypatch):
        monkeypatch.setenv("MCP_TRANSPORT", "websocket")

        with pytest.raises(ValueError, match="MCP_TRANSPORT"):
            Settings()

    def test_non_positive_timeout_rejected(self, monkeypatch):
        monkeypatch.setenv("NBP_REQUEST_TIMEOUT", "0")

        with pytest.raises(ValueError, match="NBP_REQUEST_TIMEOUT"):
            Settings()
