"""Application configuration via environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central configuration for Drivya Match."""

    # Application
    app_name: str = "Drivya Match"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = Field(default="development", pattern=r"^(development|staging|production)$")
    log_level: str = "INFO"
    log_format: str = Field(default="json", pattern=r"^(json|console)$")

    # API
    api_prefix: str = "/api"
    allowed_origins: str = "http://localhost:3000"
    rate_limit_default: str = "100/minute"

    # Storage
    storage_backend: str = Field(default="memory", pattern=r"^(memory|database)$")
    database_url: str = "sqlite:///./drivya.db"
    seed_demo_data: bool = True

    # Directory
    submission_confidence: int = Field(default=85, ge=0, le=100)

    # Recommendations
    recommendation_default_limit: int = Field(default=10, ge=1)
    recommendation_max_limit: int = Field(default=100, ge=1)

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    model_config = {"env_prefix": "DRIVYA_", "env_file": ".env", "extra": "ignore"}


def get_settings() -> Settings:
    """Return a settings instance built from the environment."""
    return Settings()
