"""Configuration for the HuleEdu REST client.

Uses Pydantic settings for environment-based configuration. Settings are
constructed explicitly by the caller (or the DI provider) and passed in.
"""

from __future__ import annotations

from enum import Enum

import httpx
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class RestClientSettings(BaseSettings):
    """Configuration settings for the REST client and auth layer."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="REST_CLIENT_",
        case_sensitive=False,
        extra="ignore",
    )

    # Service identity
    SERVICE_NAME: str = "huleedu-rest-client"

    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    # Backend
    BASE_URL: str = Field(
        default="http://localhost:8000",
        description="Base URL of the REST backend",
    )
    AUTH_PATH: str = Field(
        default="/auth/login",
        description="Path of the client-credentials token endpoint",
    )

    # HTTP client configuration
    HTTP_CLIENT_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        description="HTTP client request timeout in seconds",
    )
    HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        gt=0,
        description="HTTP client connection timeout in seconds",
    )

    def http_timeout(self) -> httpx.Timeout:
        return httpx.Timeout(
            self.HTTP_CLIENT_TIMEOUT_SECONDS,
            connect=self.HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS,
        )

    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION
