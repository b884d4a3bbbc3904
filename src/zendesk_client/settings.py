"""Client settings (env/.env)."""

from __future__ import annotations

from pydantic import AnyHttpUrl, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for reaching a Zendesk account."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    zendesk_subdomain: str | None = Field(default=None, alias="ZENDESK_SUBDOMAIN")
    zendesk_base_url: AnyHttpUrl | None = Field(default=None, alias="ZENDESK_BASE_URL")

    zendesk_email: str | None = Field(default=None, alias="ZENDESK_EMAIL")
    zendesk_api_token: str | None = Field(default=None, alias="ZENDESK_API_TOKEN")
    zendesk_oauth_token: str | None = Field(default=None, alias="ZENDESK_OAUTH_TOKEN")

    http_timeout_seconds: float = Field(
        default=15.0,
        alias="HTTP_TIMEOUT_SECONDS",
        gt=0,
    )
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    @model_validator(mode="after")
    def _check_account(self) -> Settings:
        if not self.zendesk_subdomain and self.zendesk_base_url is None:
            raise ValueError("Set ZENDESK_SUBDOMAIN or ZENDESK_BASE_URL")
        if self.zendesk_oauth_token:
            return self
        if not (self.zendesk_email and self.zendesk_api_token):
            raise ValueError(
                "Set ZENDESK_OAUTH_TOKEN, or both ZENDESK_EMAIL and ZENDESK_API_TOKEN"
            )
        return self

    @property
    def base_url(self) -> str:
        """Root of the v2 API, without a trailing slash."""
        if self.zendesk_base_url is not None:
            return str(self.zendesk_base_url).rstrip("/")
        return f"https://{self.zendesk_subdomain}.zendesk.com/api/v2"
