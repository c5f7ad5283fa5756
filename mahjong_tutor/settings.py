"""Application configuration via environment variables (MAHJONG_TUTOR_*)."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from mahjong_tutor.coach.advice import DEFAULT_API_BASE, DEFAULT_MODEL, DEFAULT_TIMEOUT
from mahjong_tutor.player.base import Difficulty
from mahjong_tutor.ui.i18n import SUPPORTED_LANGUAGES


class TutorSettings(BaseSettings):
    model_config = {"env_prefix": "MAHJONG_TUTOR_"}

    language: str = "en"
    difficulty: Difficulty = Difficulty.NORMAL
    advice_model: str = Field(default=DEFAULT_MODEL, min_length=1)
    advice_api_base: str = Field(default=DEFAULT_API_BASE, min_length=1)
    advice_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    credential_path: str = Field(default="~/.mahjong_tutor/credentials.json", min_length=1)
    log_dir: str = ""  # Empty disables the log file
    log_level: str = "INFO"

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        v = v.lower()
        if v not in SUPPORTED_LANGUAGES:
            raise ValueError(f"language must be one of {', '.join(SUPPORTED_LANGUAGES)}")
        return v

    @field_validator("difficulty", mode="before")
    @classmethod
    def parse_difficulty(cls, v):
        return Difficulty.parse(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"invalid log level {v!r}")
        return v
