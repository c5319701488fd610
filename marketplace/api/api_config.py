# This file defines runtime settings for the API layer in one place.
# It exists so the caller header, deposit cap, report limits, and data source can be configured without code edits.
# The config loader reads environment variables and applies safe defaults for local development.

from __future__ import annotations

import os
import re
from decimal import Decimal, InvalidOperation
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from marketplace.common.settings import DEFAULT_DATABASE_URL

_HEADER_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "Freelance Marketplace API"
    host: str = "0.0.0.0"
    port: int = 3001
    environment: str = "local"
    database_url: str = DEFAULT_DATABASE_URL
    app_version: str = "0.1.0"
    allowed_origins: list[str] = Field(default_factory=list)
    profile_header_name: str = "profile_id"
    deposit_cap_ratio: Decimal = Decimal("0.25")
    default_best_clients_limit: int = 2
    max_best_clients_limit: int = 100
    enable_request_logging: bool = False
    create_schema_on_startup: bool = True

    @field_validator("profile_header_name")
    @classmethod
    def validate_header_name(cls, value: str) -> str:
        if not _HEADER_NAME_RE.match(value):
            raise ValueError(f"Invalid HTTP header name: {value!r}")
        return value.lower()

    @field_validator("deposit_cap_ratio")
    @classmethod
    def validate_ratio(cls, value: Decimal) -> Decimal:
        if value <= 0 or value > 1:
            raise ValueError("deposit_cap_ratio must be in (0, 1].")
        return value

    @field_validator("port", "default_best_clients_limit", "max_best_clients_limit")
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value

    @model_validator(mode="after")
    def validate_limits(self) -> ApiConfig:
        if self.default_best_clients_limit > self.max_best_clients_limit:
            raise ValueError("default_best_clients_limit must not exceed max_best_clients_limit.")
        return self


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_decimal(name: str, default: Decimal) -> Decimal:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return Decimal(raw.strip())
    except InvalidOperation as exc:
        raise ValueError(f"{name} must be a decimal number, got {raw!r}") from exc


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "Freelance Marketplace API"),
        "host": os.getenv("API_HOST", "0.0.0.0"),
        "port": _env_int("API_PORT", 3001),
        "environment": os.getenv("ENV", "local"),
        "database_url": os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL,
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", []),
        "profile_header_name": os.getenv("API_PROFILE_HEADER_NAME", "profile_id"),
        "deposit_cap_ratio": _env_decimal("API_DEPOSIT_CAP_RATIO", Decimal("0.25")),
        "default_best_clients_limit": _env_int("API_DEFAULT_BEST_CLIENTS_LIMIT", 2),
        "max_best_clients_limit": _env_int("API_MAX_BEST_CLIENTS_LIMIT", 100),
        "enable_request_logging": _env_bool("API_ENABLE_REQUEST_LOGGING", False),
        "create_schema_on_startup": _env_bool("API_CREATE_SCHEMA_ON_STARTUP", True),
    }

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
