"""
Tests for settings validation.
"""

import pytest
from pydantic import ValidationError

from jobinfo.chat.llm import OpenAIClient, build_llm_client
from jobinfo.config import BASE_STOP_WORDS, Settings, get_settings

from conftest import make_settings

ENV_VARS = (
    "LLM_PROVIDER",
    "GEMINI_API_KEY",
    "OPENAI_API_KEY",
    "MATCH_PROFILE",
    "MATCH_STRICT_THRESHOLD",
    "MATCH_LENIENT_THRESHOLD",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture
def env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    def test_strict_threshold_by_default(self):
        assert make_settings().match_threshold == 0.3

    def test_lenient_threshold(self):
        settings = make_settings(match_profile="LENIENT", lenient_threshold=0.5)
        assert settings.match_profile == "lenient"
        assert settings.match_threshold == 0.5

    @pytest.mark.parametrize(
        "field,value",
        [
            ("match_profile", "fuzzy"),
            ("llm_provider", "anthropic"),
            ("log_format", "xml"),
            ("strict_threshold", 1.5),
            ("lenient_threshold", -0.1),
        ],
    )
    def test_rejects_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            make_settings(**{field: value})

    def test_salary_stop_word_toggle(self):
        assert "salary" in make_settings().stop_words()
        words = make_settings(salary_is_stop_word=False).stop_words()
        assert "salary" not in words
        assert words == BASE_STOP_WORDS


class TestSettingsFromEnvironment:
    def test_defaults(self, env):
        settings = Settings()
        assert settings.llm_provider == "gemini"
        assert settings.match_profile == "strict"
        assert settings.match_threshold == 0.3
        assert settings.log_level == "INFO"

    def test_values_are_normalised(self, env):
        env.setenv("LLM_PROVIDER", "OpenAI")
        env.setenv("MATCH_PROFILE", "Lenient")
        env.setenv("MATCH_LENIENT_THRESHOLD", "0.5")
        env.setenv("LOG_FORMAT", "JSON")
        env.setenv("LOG_LEVEL", "debug")
        settings = get_settings()
        assert settings.llm_provider == "openai"
        assert settings.match_profile == "lenient"
        assert settings.match_threshold == 0.5
        assert settings.log_format == "json"
        assert settings.log_level == "DEBUG"

    def test_provider_from_env_selects_client(self, env):
        env.setenv("LLM_PROVIDER", "OpenAI")
        env.setenv("OPENAI_API_KEY", "sk-test")
        env.setenv("GEMINI_API_KEY", "test-key")
        assert isinstance(build_llm_client(get_settings()), OpenAIClient)

    @pytest.mark.parametrize(
        "name,value",
        [
            ("LLM_PROVIDER", "anthropic"),
            ("MATCH_PROFILE", "fuzzy"),
            ("MATCH_STRICT_THRESHOLD", "5"),
            ("LOG_FORMAT", "xml"),
            ("LOG_LEVEL", "loud"),
        ],
    )
    def test_invalid_env_rejected(self, env, name, value):
        env.setenv(name, value)
        with pytest.raises(ValidationError):
            Settings()
