"""Tests for environment configuration."""

import pytest

from rss_editor.config import EditorConfig, load_config
from rss_editor.exceptions import ConfigError


class TestLoadConfig:
    def test_defaults(self):
        assert load_config({}) == EditorConfig()

    def test_reads_values(self):
        config = load_config(
            {
                "RSS_EDITOR_TIMEOUT": "2.5",
                "RSS_EDITOR_USER_AGENT": "agent/2",
                "RSS_EDITOR_LANGUAGE": "ko-KR",
                "RSS_EDITOR_LOG_LEVEL": "debug",
            }
        )

        assert config == EditorConfig(timeout=2.5, user_agent="agent/2", language="ko-KR", log_level="DEBUG")

    @pytest.mark.parametrize("value", ["soon", "0", "-1"])
    def test_bad_timeout(self, value):
        with pytest.raises(ConfigError):
            load_config({"RSS_EDITOR_TIMEOUT": value})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("RSS_EDITOR_LANGUAGE", "nl-NL")

        assert load_config(dotenv=False).language == "nl-NL"
