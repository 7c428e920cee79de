from pathlib import Path

import pytest

from giftdates.config import Settings, get_settings, reset_settings


class TestSettings:
    """Test Settings class field defaults and computed properties."""

    def test_default_timezone_none(self):
        s = Settings(_env_file=None)
        assert s.timezone is None

    def test_timezone_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TIMEZONE", "America/New_York")
        s = Settings(_env_file=None)
        assert s.timezone == "America/New_York"

    def test_transport_defaults(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("MCP_TRANSPORT", raising=False)
        monkeypatch.delenv("MCP_PORT", raising=False)
        s = Settings(_env_file=None)
        assert s.mcp_transport == "stdio"
        assert s.mcp_host == "0.0.0.0"
        assert s.mcp_port == 8000

    def test_transport_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("MCP_TRANSPORT", "streamable-http")
        monkeypatch.setenv("MCP_PORT", "9001")
        s = Settings(_env_file=None)
        assert s.mcp_transport == "streamable-http"
        assert s.mcp_port == 9001

    def test_default_data_dir(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("DATA_DIR", raising=False)
        s = Settings(_env_file=None)
        expected = Path(__file__).resolve().parent.parent / "data"
        assert s.data_dir == expected

    def test_custom_data_dir(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DATA_DIR", "/tmp/custom")
        s = Settings(_env_file=None)
        assert s.data_dir == Path("/tmp/custom")

    def test_default_log_level(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        s = Settings(_env_file=None)
        assert s.log_level == "INFO"

    def test_custom_log_level(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings(_env_file=None)
        assert s.log_level == "DEBUG"


class TestGetSettings:
    """Test the lazy singleton get_settings / reset_settings."""

    def setup_method(self):
        reset_settings()

    def teardown_method(self):
        reset_settings()

    def test_get_settings_returns_settings(self):
        assert isinstance(get_settings(), Settings)

    def test_get_settings_is_singleton(self):
        s1 = get_settings()
        s2 = get_settings()
        assert s1 is s2

    def test_reset_settings_clears_cache(self):
        s1 = get_settings()
        reset_settings()
        s2 = get_settings()
        assert s1 is not s2
