"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ARIMMA_",
        extra="ignore",
    )

    # Service
    service_name: str = "arimma-credit"
    log_level: str = "INFO"

    # API
    api_prefix: str = "/api/finance"
    docs_enabled: bool = True


settings = Settings()
