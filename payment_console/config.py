"""Configuration management using Pydantic Settings"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from payment_console.domain.pagination import ITEMS_PER_PAGE_OPTIONS


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Remote Payment Gateway
    gateway_api_base: str = "http://localhost:8080/api"

    # Service
    service_name: str = "payment-console"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0

    # Listing
    default_items_per_page: int = 10
    discard_stale_responses: bool = True  # Drop responses overtaken by a newer fetch

    @field_validator("default_items_per_page")
    @classmethod
    def check_items_per_page(cls, value: int) -> int:
        if value not in ITEMS_PER_PAGE_OPTIONS:
            raise ValueError(f"default_items_per_page must be one of {list(ITEMS_PER_PAGE_OPTIONS)}")
        return value


settings = Settings()
