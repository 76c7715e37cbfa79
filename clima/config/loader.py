"""YAML config loader with environment overrides."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from clima.config.defaults import API_KEY_ENV, BASE_URL_ENV
from clima.config.schema import ClimaConfig, ConfigurationError

logger = logging.getLogger(__name__)

REDACTED = "***"


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ClimaConfig:
    """Load and validate config from an optional YAML file plus environment.

    OPENWEATHER_API_KEY and OPENWEATHER_BASE_URL override the file. Any
    problem is raised as ConfigurationError so it surfaces at startup.
    """
    env = os.environ if environ is None else environ
    raw: dict[str, Any] = {}

    if path is not None:
        path = Path(path)
        try:
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigurationError(f"Cannot read config {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigurationError(f"Config {path} must be a mapping")

    section = raw.get("api") or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Config {path}: 'api' must be a mapping")
    api = dict(section)
    if env.get(API_KEY_ENV):
        api["api_key"] = env[API_KEY_ENV]
    if env.get(BASE_URL_ENV):
        api["base_url"] = env[BASE_URL_ENV]
    raw["api"] = api

    try:
        config = ClimaConfig(**raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    if not config.api.api_key.strip():
        raise ConfigurationError(
            f"No API key configured; set {API_KEY_ENV} or api.api_key"
        )
    logger.debug("Loaded config with base_url=%s", config.api.base_url)
    return config


def redacted(config: ClimaConfig) -> dict[str, Any]:
    """Dump the config for display with the API key masked."""
    data = config.model_dump()
    if data["api"]["api_key"]:
        data["api"]["api_key"] = REDACTED
    return data
