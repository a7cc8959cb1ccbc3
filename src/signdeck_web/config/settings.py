# src/signdeck_web/config/settings.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Signdeck Web Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated configuration for the Signdeck web controller layer. This
    module centralizes environment parsing and validation. Controllers and
    collaborators receive `Settings` via dependency injection rather than
    reading the process environment themselves.

Design:
    - Each field is read from an upper-case environment variable of the same
      name (or from `.env`); unknown keys in `.env` are rejected.
    - The clock timezone is checked against the zoneinfo database at load.
    - `get_settings()` builds the object once and logs what it resolved.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """Deployment environment the process reports in its logs."""

    DEVELOPMENT = "development"
    TEST = "test"
    CI = "ci"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Typed application configuration for the Signdeck web layer."""

    # ---------------------------
    # Core environment
    # ---------------------------
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical deployment environment.",
        validation_alias="ENVIRONMENT",
    )

    app_surface: str = Field(
        default="web",
        min_length=1,
        description=(
            "Named application surface served by this process. 'web' serves pages "
            "and AJAX fragments; any other name is treated as the JSON API."
        ),
        validation_alias="APP_SURFACE",
    )

    # ---------------------------
    # Templates
    # ---------------------------
    templates_dir: str = Field(
        default="templates",
        description="Directory containing Jinja2 page and fragment templates.",
        validation_alias="TEMPLATES_DIR",
    )
    template_extension: str = Field(
        default=".html",
        description="Suffix appended to state template names before rendering.",
        validation_alias="TEMPLATE_EXTENSION",
    )

    # ---------------------------
    # Grids
    # ---------------------------
    grid_default_length: int = Field(
        default=10,
        ge=1,
        le=10_000,
        description="Page length used by grid filters when the request omits 'length'.",
        validation_alias="GRID_DEFAULT_LENGTH",
    )

    # ---------------------------
    # Clock
    # ---------------------------
    clock_format: str = Field(
        default="%H:%M",
        min_length=1,
        description="strftime format for the page clock.",
        validation_alias="CLOCK_FORMAT",
    )
    timezone: str = Field(
        default="UTC",
        description="IANA timezone used for the page clock.",
        validation_alias="TIMEZONE",
    )

    # ---------------------------
    # Logging
    # ---------------------------
    log_level: str | None = Field(
        default=None,
        description="Override log level (e.g., 'DEBUG', 'INFO'). If not set, defaults are used.",
        validation_alias="LOG_LEVEL",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="forbid",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def _validate_timezone(self) -> Settings:
        """Reject timezone names the zoneinfo database does not know.

        Returns:
            Settings: The validated settings instance.

        Raises:
            ValueError: If ``timezone`` is not a known IANA zone.
        """
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {self.timezone!r}") from exc
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton `Settings` instance.

    Returns:
        Settings: Validated application settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
        logger.info(
            "Settings initialized",
            extra={
                "environment": settings.environment.value,
                "app_surface": settings.app_surface,
                "templates_dir": settings.templates_dir,
                "template_extension": settings.template_extension,
                "grid_default_length": settings.grid_default_length,
                "timezone": settings.timezone,
            },
        )
        return settings
    except ValidationError as exc:
        logger.exception("Invalid application configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc
