"""
Library configuration (pydantic-settings).

Every field can be set from an environment variable of the same name
(case-insensitive) and every field has a default, so importing the package
needs no environment at all.

Fields:
    ENVIRONMENT                       development | testing | ci | production
    LOG_LEVEL                         minimum level name
    PERMISSION_STORE_TIMEOUT_SECONDS  deadline for one grant lookup
    CASBIN_MODEL_PATH                 model.conf used by the enforcer
    CASBIN_POLICY_PATH                optional policy CSV
    AUDIT_DECISIONS                   publish AccessDecisionRecorded events

Usage:
    from accessgate.core.config import settings

    deadline = settings.permission_store_timeout_seconds
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from accessgate.core.enums import Environment

DEFAULT_CASBIN_MODEL_PATH = str(
    Path(__file__).resolve().parent.parent
    / "infrastructure"
    / "authorization"
    / "model.conf"
)


class Settings(BaseSettings):
    """
    Flat settings object.

    Precedence: environment variables, then the defaults below.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Deployment environment; selects console or JSON logs",
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum log level name",
    )
    app_name: str = Field(
        default="accessgate",
        description="Name bound to every log line",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Package version bound to every log line",
    )

    permission_store_timeout_seconds: float = Field(
        default=2.0,
        description="Deadline for a single permission store read. Exceeding "
        "it denies the request with permission-store-unavailable.",
    )
    casbin_model_path: str = Field(
        default=DEFAULT_CASBIN_MODEL_PATH,
        description="Casbin model configuration",
    )
    casbin_policy_path: str | None = Field(
        default=None,
        description="Casbin policy CSV; unset means an empty policy",
    )

    audit_decisions: bool = Field(
        default=True,
        description="Subscribe the audit log handler to access decisions",
    )

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Upper-case the level and reject names logging does not know.

        Raises:
            ValueError: For an unknown level name.
        """
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level '{v}' is not a valid logging level")
        return level

    @field_validator("permission_store_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("permission_store_timeout_seconds must be greater than 0")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Load settings once per process.

    Returns:
        Settings: Cached instance.
    """
    return Settings()


settings = get_settings()
