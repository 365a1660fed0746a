# textsplit/config/base.py

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SplitterConfig(BaseSettings):
    """
    Default settings for the command line tools.
    Settings are loaded from a .env file or TEXTSPLIT_* environment variables.
    The library functions never read these; they take explicit arguments.
    """

    # Splitting defaults
    DEFAULT_CHUNK_SIZE: int = Field(default=1000, gt=0)
    DEFAULT_CHUNK_OVERLAP: int = Field(default=0, ge=0)

    # Logging
    LOG_LEVEL: str = "INFO"

    # Pydantic model config
    model_config = SettingsConfigDict(
        env_prefix="TEXTSPLIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level

    @model_validator(mode="after")
    def _check_overlap(self) -> "SplitterConfig":
        if self.DEFAULT_CHUNK_OVERLAP >= self.DEFAULT_CHUNK_SIZE:
            raise ValueError(
                f"DEFAULT_CHUNK_OVERLAP ({self.DEFAULT_CHUNK_OVERLAP}) must be less than "
                f"DEFAULT_CHUNK_SIZE ({self.DEFAULT_CHUNK_SIZE})"
            )
        return self
