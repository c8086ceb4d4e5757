import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    app_name: str = Field(
        default="Link Cards",
        description="Application name",
    )
    linkpreview_api_key: str = Field(
        default="",
        description="API key sent to the link preview provider",
    )
    linkpreview_endpoint: str = Field(
        default="https://api.linkpreview.net",
        description="Link preview provider endpoint",
    )
    request_timeout: float = Field(
        default=10.0,
        description="Timeout in seconds for outbound HTTP calls",
    )
    gateway_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the gateway, used by the page",
    )
    storage_path: Path = Field(
        default=Path.home() / ".link_cards" / "storage.json",
        description="File holding the page's local storage",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


settings = get_settings()
