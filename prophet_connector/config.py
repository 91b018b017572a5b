"""Configuration for the Alpha Vantage and SEC EDGAR connectors."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Connector settings sourced from environment variables or a ``.env`` file.

    Environment variables:
        ALPHA_VANTAGE_API_KEY, ALPHA_VANTAGE_BASE_URL,
        SEC_BASE_URL, SEC_USER_AGENT, SEC_TIMEOUT
    """

    alpha_vantage_api_key: str = Field(
        "demo",
        description="Alpha Vantage API key appended to every generated URL.",
    )
    alpha_vantage_base_url: str = Field(
        "https://www.alphavantage.co/",
        description="Alpha Vantage root URL, including the trailing slash.",
    )
    sec_base_url: str = Field(
        "https://data.sec.gov",
        description="Base URL for the SEC EDGAR data APIs.",
    )
    sec_user_agent: str = Field(
        "prophet-connector/0.1.0 (contact@example.com)",
        description="User-Agent sent to EDGAR. SEC requires contact details.",
    )
    sec_timeout: float = Field(
        30.0,
        description="Per-request timeout in seconds for EDGAR requests.",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
