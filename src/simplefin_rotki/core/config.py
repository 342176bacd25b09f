"""Application configuration using Pydantic Settings."""

from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra environment variables not defined in Settings
    )

    # Application
    APP_NAME: str = "SimpleFin Rotki Bridge"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 3001

    # Public base URL used to build claim links and access URLs
    PUBLIC_URL: str = "http://127.0.0.1:3001"

    # Rotki backend
    ROTKI_BALANCES_PATH: str = "/api/1/balances"
    ROTKI_TIMEOUT: float = 30.0

    # Organization stamped on every SimpleFin account
    ORGANIZATION_NAME: str | None = "Rotki"
    ORGANIZATION_DOMAIN: str | None = None

    # Inbound headers forwarded to the Rotki backend (matched case-insensitively)
    FORWARDED_HEADERS: list[str] = ["traceparent", "tracestate", "x-request-id", "x-trace-id"]

    # CORS
    CORS_ORIGINS: list[str] = ["*"]
    CORS_METHODS: list[str] = ["GET", "POST"]
    CORS_HEADERS: list[str] = ["*"]

    @field_validator("PUBLIC_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Links are built as ``{PUBLIC_URL}/f/...`` so drop any trailing slash."""
        return v.rstrip("/")

    @property
    def LOGGING_CONFIG(self) -> dict[str, Any]:
        """Logging configuration for ``logging.config.dictConfig``."""
        level = self.LOG_LEVEL.upper()
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": level,
                "handlers": ["console"],
            },
            "loggers": {
                "simplefin_rotki": {
                    "level": level,
                },
            },
        }


settings = Settings()
