"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "card-gateway"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 4242
    cors_origins: list[str] = ["*"]

    # Stripe
    stripe_secret_key: str = ""
    stripe_api_url: str = "https://api.stripe.com/v1"
    stripe_api_timeout: float = 30.0
    payment_method_list_limit: int = 8

    # Metrics
    metrics_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
