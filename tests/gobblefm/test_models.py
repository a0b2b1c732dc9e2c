"""Unit tests for client configuration."""

import pytest

from gobblefm.models import DEFAULT_RETRIES, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, ENDPOINT, LastFMConfig


class TestLastFMConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        config = LastFMConfig(api_key="k")

        assert config.endpoint == "https://ws.audioscrobbler.com/2.0/"
        assert config.retries == DEFAULT_RETRIES == 5
        assert config.timeout == DEFAULT_TIMEOUT == 30.0
        assert config.user_agent == DEFAULT_USER_AGENT

    def test_negative_retries(self):
        with pytest.raises(ValueError, match="retries"):
            LastFMConfig(retries=-1)

    def test_non_positive_timeout(self):
        with pytest.raises(ValueError, match="timeout"):
            LastFMConfig(timeout=0)

    def test_endpoint_scheme(self):
        with pytest.raises(ValueError, match="HTTP/HTTPS"):
            LastFMConfig(endpoint="ftp://ws.audioscrobbler.com/2.0/")

    def test_endpoint_trailing_slash(self):
        with pytest.raises(ValueError, match="end with"):
            LastFMConfig(endpoint="https://ws.audioscrobbler.com/2.0")

    def test_http_endpoint_warns(self):
        with pytest.warns(UserWarning, match="insecurely"):
            LastFMConfig(endpoint="http://ws.audioscrobbler.com/2.0/")

    def test_frozen(self):
        config = LastFMConfig()

        with pytest.raises(AttributeError):
            config.api_key = "other"


class TestFromEnv:
    """Test environment-driven configuration."""

    def test_reads_variables(self, monkeypatch):
        monkeypatch.setenv("LAST_FM_API_KEY", "envkey")
        monkeypatch.setenv("LAST_FM_API_SECRET", "envsecret")
        monkeypatch.setenv("LAST_FM_RETRIES", "2")
        monkeypatch.setenv("LAST_FM_TIMEOUT", "7.5")
        monkeypatch.setenv("LAST_FM_USER_AGENT", "test-agent/1.0")

        config = LastFMConfig.from_env()

        assert config == LastFMConfig(
            api_key="envkey",
            secret="envsecret",
            user_agent="test-agent/1.0",
            retries=2,
            timeout=7.5,
            endpoint=ENDPOINT,
        )

    def test_defaults_when_unset(self, monkeypatch):
        for name in ("API_KEY", "API_SECRET", "USER_AGENT", "RETRIES", "TIMEOUT"):
            monkeypatch.delenv(f"LAST_FM_{name}", raising=False)

        assert LastFMConfig.from_env() == LastFMConfig()

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("SCROBBLER_API_KEY", "other")

        assert LastFMConfig.from_env(prefix="SCROBBLER_").api_key == "other"

    def test_invalid_number(self, monkeypatch):
        monkeypatch.setenv("LAST_FM_RETRIES", "many")

        with pytest.raises(ValueError):
            LastFMConfig.from_env()
