"""Application settings using Pydantic BaseSettings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    api_v1_prefix: str = "/api/v1"

    # Site copy
    site_title: str = "Gemini Prompts"
    heading_prefix: str = "Gemini Prompts for"

    # Prompt catalog location: a filesystem path or an http(s) URL
    prompts_source: str = "data/prompts.json"

    # Search and previews
    search_min_query_length: int = 2
    preview_max_chars: int = 150

    # Copy-to-clipboard feedback duration
    copy_feedback_ms: int = 2000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
