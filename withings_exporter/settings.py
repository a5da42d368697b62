from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Variables are matched regardless of case so the conventional upper-case
    # names (``WITHINGS_APP_CLIENT_ID``) populate the lower-case fields.
    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore"
    )

    withings_api_access_token: Optional[str] = None
    withings_app_client_id: Optional[str] = None
    withings_app_client_secret: Optional[str] = None

    wbsapi_url: str = "https://wbsapi.withings.net"
    withings_authorize_url: str = "https://account.withings.com/oauth2_user/authorize2"
    withings_redirect_uri: str = "http://localhost"
    withings_scopes: str = "user.info,user.metrics"
    withings_oauth_state: str = "withings-exporter"

    metrics_host: str = "0.0.0.0"
    metrics_port: int = 8080
    log_level: str = "INFO"

    @property
    def has_credentials(self) -> bool:
        return bool(self.withings_app_client_id and self.withings_app_client_secret)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
