from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Hotel Operations Analytics"
    environment: str = "development"
    api_prefix: str = "/api/v1"
    cors_allow_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    supabase_url: str = Field(..., alias="SUPABASE_URL")
    supabase_service_role_key: Optional[str] = Field(
        default=None, alias="SUPABASE_SERVICE_ROLE_KEY"
    )
    supabase_anon_key: Optional[str] = Field(default=None, alias="SUPABASE_ANON_KEY")
    supabase_timeout_seconds: float = Field(default=30.0, alias="SUPABASE_TIMEOUT_SECONDS")

    default_hotel_slug: str = Field(default="default-hotel", alias="DEFAULT_HOTEL_SLUG")
    default_hotel_name: str = Field(default="Default Hotel", alias="DEFAULT_HOTEL_NAME")
    default_hotel_rating: float = Field(default=4.6, alias="DEFAULT_HOTEL_RATING")

    # 0 = Monday ... 6 = Sunday
    reporting_week_start: int = Field(default=0, ge=0, le=6, alias="REPORTING_WEEK_START")
    dashboard_max_workers: int = Field(default=6, ge=1, alias="DASHBOARD_MAX_WORKERS")


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_cors_origins() -> list[str]:
    settings = get_settings()
    return [origin.strip() for origin in settings.cors_allow_origins.split(",") if origin.strip()]
