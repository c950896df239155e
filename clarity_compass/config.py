"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Decision history (local, single user)
    database_url: str = "sqlite:///./clarity_compass.db"
    history_default_limit: int = 50

    # Advice provider (OpenAI-compatible chat completions)
    openai_api_key: str | None = None
    openai_base_url: str | None = None
    advice_model: str = "gpt-4o-mini"
    advice_temperature: float = 0.7
    advice_language: str = "English"
    advice_timeout_seconds: float = 30.0
    advice_max_retries: int = 2

    # Service
    service_name: str = "clarity-compass"
    log_level: str = "INFO"


settings = Settings()
