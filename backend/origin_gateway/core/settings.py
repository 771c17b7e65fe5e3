import os
import sys
from functools import lru_cache
from urllib.parse import urlparse

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_ORIGIN_API_BASE_URL = "http://localhost:8000/api"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Origin Gateway"
    app_env: str = "local"

    origin_api_base_url: str = DEFAULT_ORIGIN_API_BASE_URL
    origin_request_timeout_seconds: float = 30.0
    origin_locale: str = "ar"
    origin_frontend_api_key: str = ""
    origin_api_hostname: str = ""

    tenant_registry_json: str = ""
    log_level: str = "INFO"

    @model_validator(mode="after")
    def validate_origin_settings(self) -> "Settings":
        if self.origin_request_timeout_seconds <= 0:
            raise ValueError("ORIGIN_REQUEST_TIMEOUT_SECONDS must be positive.")

        base_url = self.origin_api_base_url.strip().rstrip("/")
        parsed = urlparse(base_url)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            if self.app_env.lower() == "production":
                raise ValueError("Production requires ORIGIN_API_BASE_URL to be an absolute http(s) URL.")
            base_url = DEFAULT_ORIGIN_API_BASE_URL
        self.origin_api_base_url = base_url
        self.origin_locale = self.origin_locale.strip() or "ar"
        return self


@lru_cache
def get_settings() -> Settings:
    app_env = os.getenv("APP_ENV", "").lower()
    is_pytest_runtime = "pytest" in sys.modules
    if app_env == "test" or (not app_env and is_pytest_runtime):
        def _env_or_default(name: str, default: str) -> str:
            value = os.getenv(name)
            if value is None:
                return default
            stripped = value.strip()
            return stripped if stripped else default

        return Settings(
            app_env="test",
            origin_api_base_url=_env_or_default("ORIGIN_API_BASE_URL", "http://origin.test/api"),
            origin_frontend_api_key=_env_or_default("ORIGIN_FRONTEND_API_KEY", ""),
            tenant_registry_json=_env_or_default("TENANT_REGISTRY_JSON", ""),
            log_level=_env_or_default("LOG_LEVEL", "DEBUG"),
        )
    return Settings()
