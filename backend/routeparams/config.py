"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Notes:
    - Default values are for development only
    - The application refuses to start in production mode with debug enabled
    """

    # Application
    app_name: str = "Route Parameters API"
    app_env: str = Field(default="development", description="Environment: development, staging, production")
    debug: bool = False

    # CORS - Restrict in production
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_methods: List[str] = ["GET", "POST", "OPTIONS"]
    cors_allow_headers: List[str] = ["Content-Type", "Authorization", "X-Request-ID"]

    # Logging
    log_level: str = "INFO"
    log_requests: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is one the logging module knows."""
        level = v.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env.lower() == "production"

    def validate_production_settings(self) -> List[str]:
        """Validate settings are safe for production. Returns list of errors."""
        errors = []

        if self.is_production():
            # Check CORS origins
            if any("localhost" in origin for origin in self.cors_origins):
                errors.append("CORS_ORIGINS should not include localhost in production")

            # Check debug mode
            if self.debug:
                errors.append("DEBUG must be False in production")

        return errors


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
