# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""MFNav Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated application configuration for the NAV history service.
    Only adapters/infrastructure read the process environment; other layers
    receive values through dependency injection.

Design:
    - Pydantic v2 BaseSettings; unknown environment variables are ignored
      because Lambda injects many ``AWS_*`` variables.
    - Environment enumeration for coarse behavior toggles (includes TEST).
    - Singleton accessor `get_settings()` with LRU cache.
    - Upstream provider settings live next to the provider client
      (``infrastructure/external_apis/mfapi/settings.py``).
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Logical deployment environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    CI = "ci"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Typed application configuration for the NAV history service."""

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical deployment environment.",
        validation_alias="ENVIRONMENT",
    )

    # ---------------------------
    # Service identity / metadata
    # ---------------------------
    service_name: str = Field(
        default="mfnav-api",
        description="Logical service name for logging.",
        validation_alias="SERVICE_NAME",
    )
    service_version: str | None = Field(
        default=None,
        description="Service version reported in OpenAPI and startup logs.",
        validation_alias="SERVICE_VERSION",
    )

    # ---------------------------
    # Logging
    # ---------------------------
    log_level: str | None = Field(
        default=None,
        description="Override log level (e.g., 'DEBUG', 'INFO'). If not set, INFO is used.",
        validation_alias="LOG_LEVEL",
    )

    # ---------------------------
    # OpenAPI / docs
    # ---------------------------
    docs_url: str | None = Field(
        default="/docs",
        description="Swagger UI docs URL. Set to an empty value to disable.",
        validation_alias="DOCS_URL",
    )
    openapi_url: str | None = Field(
        default="/openapi.json",
        description="OpenAPI JSON schema URL. Set to an empty value to disable.",
        validation_alias="OPENAPI_URL",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_test(self) -> bool:
        """Return True for test and CI environments."""
        return self.environment in (Environment.TEST, Environment.CI)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance (cached)."""
    return Settings()
