import os
from typing import Callable, FrozenSet, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

load_dotenv()


BASE_STOP_WORDS: FrozenSet[str] = frozenset(
    [
        "knowledge",
        "skills",
        "abilities",
        "for",
        "in",
        "the",
        "a",
        "an",
        "and",
        "of",
        "what",
        "are",
    ]
)


def _env(name: str, default: Optional[str] = None) -> Callable[[], Optional[str]]:
    # read at construction time so every value passes through the validators
    return lambda: os.getenv(name, default)


class Settings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    llm_provider: str = Field(default_factory=_env("LLM_PROVIDER", "gemini"))
    gemini_api_key: str | None = Field(default_factory=_env("GEMINI_API_KEY"))
    gemini_model: str = Field(default_factory=_env("GEMINI_MODEL", "gemini-2.5-flash"))
    openai_api_key: str | None = Field(default_factory=_env("OPENAI_API_KEY"))
    openai_model: str = Field(default_factory=_env("OPENAI_MODEL", "gpt-3.5-turbo"))
    llm_timeout_seconds: float = Field(default_factory=_env("LLM_TIMEOUT_SECONDS", "30"))

    job_descriptions_path: str = Field(default_factory=_env("JOB_DESCRIPTIONS_PATH", "data/job-descriptions.json"))
    salaries_path: str = Field(default_factory=_env("SALARIES_PATH", "data/salaries.json"))

    match_profile: str = Field(default_factory=_env("MATCH_PROFILE", "strict"))
    strict_threshold: float = Field(default_factory=_env("MATCH_STRICT_THRESHOLD", "0.3"))
    lenient_threshold: float = Field(default_factory=_env("MATCH_LENIENT_THRESHOLD", "0.6"))
    min_word_length: int = Field(default_factory=_env("MATCH_MIN_WORD_LENGTH", "4"))
    min_fragment_length: int = Field(default_factory=_env("MATCH_MIN_FRAGMENT_LENGTH", "3"))
    salary_is_stop_word: bool = Field(default_factory=_env("SALARY_IS_STOP_WORD", "true"))

    log_level: str = Field(default_factory=_env("LOG_LEVEL", "INFO"))
    log_format: str = Field(default_factory=_env("LOG_FORMAT", "key-value"))

    @field_validator("llm_provider")
    @classmethod
    def check_provider(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in ("gemini", "openai"):
            raise ValueError(f"unknown LLM provider '{value}' (expected gemini or openai)")
        return value

    @field_validator("match_profile")
    @classmethod
    def check_profile(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in ("strict", "lenient"):
            raise ValueError(f"unknown match profile '{value}' (expected strict or lenient)")
        return value

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in ("key-value", "json"):
            raise ValueError(f"unknown log format '{value}' (expected key-value or json)")
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level '{value}'")
        return value

    @field_validator("strict_threshold", "lenient_threshold")
    @classmethod
    def check_threshold(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError("thresholds must be between 0 and 1")
        return value

    @property
    def match_threshold(self) -> float:
        if self.match_profile == "lenient":
            return self.lenient_threshold
        return self.strict_threshold

    def stop_words(self) -> FrozenSet[str]:
        if self.salary_is_stop_word:
            return BASE_STOP_WORDS | {"salary"}
        return BASE_STOP_WORDS


def get_settings() -> Settings:
    return Settings()
