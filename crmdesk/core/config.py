from __future__ import annotations

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "crmdesk"
    app_env: str = "development"
    app_debug: bool = False
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    app_log_level: str = "INFO"

    # Store
    seed_demo_data: bool = True

    # Dashboard
    activity_feed_limit: int = 10
    top_customers_limit: int = 5

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @model_validator(mode="after")
    def validate_production_flags(self) -> Settings:
        if self.is_production and self.app_debug:
            raise ValueError("app_debug must be disabled in production")
        return self


settings = Settings()
