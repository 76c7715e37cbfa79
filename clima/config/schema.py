"""Pydantic v2 configuration schema with strict validation."""

from typing import Literal

import httpx
from pydantic import BaseModel, Field, field_validator

from clima.config.defaults import DEFAULT_UNITS, DEFAULT_WEATHER_URL


class ConfigurationError(Exception):
    """Raised when the configuration cannot produce valid requests."""


def parse_base_url(base_url: str) -> httpx.URL:
    """Parse the weather endpoint, forcing HTTPS. Requires a host."""
    try:
        url = httpx.URL(base_url)
        if not url.host:
            raise ConfigurationError(f"Base URL has no host: {base_url!r}")
        return url.copy_with(scheme="https")
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"Malformed base URL {base_url!r}: {e}") from e


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    base_url: str = Field(default=DEFAULT_WEATHER_URL, min_length=1)
    api_key: str = ""
    units: Literal["metric"] = DEFAULT_UNITS

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        try:
            parse_base_url(value)
        except ConfigurationError as e:
            raise ValueError(str(e)) from e
        return value


class ClimaConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    api: ApiConfig = ApiConfig()
