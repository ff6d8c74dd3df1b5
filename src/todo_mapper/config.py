"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONTAINS_MARKERS: tuple[str, ...] = (
    "//TODO",
    "// TODO",
    "TODO:",
    "TODO[",
    "TODO [",
    "TODO\r",
    "TODO\n",
)
DEFAULT_SUFFIX_MARKERS: tuple[str, ...] = ("TODO",)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "todo-mapper"
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = False

    # HTTP API
    host: str = "127.0.0.1"
    port: int = 8000

    # Scanning settings
    worker_count: int = 4
    max_file_size_bytes: int = 1_000_000  # 1MB

    # Comment matching (literal, case-sensitive substrings)
    todo_contains_markers: list[str] = list(DEFAULT_CONTAINS_MARKERS)
    todo_suffix_markers: list[str] = list(DEFAULT_SUFFIX_MARKERS)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return upper

    @field_validator("worker_count")
    @classmethod
    def validate_worker_count(cls, v: int) -> int:
        if v < 1:
            raise ValueError("worker_count must be >= 1")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
