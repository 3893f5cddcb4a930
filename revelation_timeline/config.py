"""Application configuration loaded from environment variables."""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings."""

    quran_client_id: Optional[str] = Field(
        default=None, description="OAuth2 client identifier for the Quran Foundation APIs."
    )
    quran_client_secret: Optional[str] = Field(
        default=None, description="OAuth2 client secret for the Quran Foundation APIs."
    )
    quran_oauth_url: str = "https://prelive-oauth2.quran.foundation/oauth2/token"
    quran_api_base_url: str = "https://apis-prelive.quran.foundation/content/api/v4"
    quran_translation_id: int = 20
    quran_token_safety_margin: int = 300
    quran_http_timeout: Optional[float] = 30.0
    quran_max_per_page: int = 50

    verses_per_page: int = 10

    cors_origins: List[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 4000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("quran_http_timeout", mode="before")
    @classmethod
    def _empty_timeout_means_none(cls, value):
        if value == "":
            return None
        return value


settings = Settings()
