"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - max_canvas_size bounds every caller-supplied canvas size at the HTTP boundary
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    service_name: str = "art-forge"
    service_version: str = "1.0.0"
    public_base_url: str = ""

    # Rendering
    default_canvas_size: int = 400
    max_canvas_size: int = 2000

    @field_validator("default_canvas_size", "max_canvas_size")
    @classmethod
    def positive_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("canvas sizes must be positive")
        return v

    # Preview responses
    preview_cache_max_age: int = 86_400

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
