"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from clima.config.schema import ApiConfig, ClimaConfig

TEST_BASE_URL = "https://test-weather.example.com/data/2.5/weather"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def api_config() -> ApiConfig:
    return ApiConfig(base_url=TEST_BASE_URL, api_key="test-key")


@pytest.fixture
def clima_config(api_config: ApiConfig) -> ClimaConfig:
    return ClimaConfig(api=api_config)


@pytest.fixture
def london_payload(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "weather_london.json") as f:
        return json.load(f)


@pytest.fixture(autouse=True)
def _clear_weather_env(monkeypatch: pytest.MonkeyPatch):
    """Keep the developer's real credentials out of the tests."""
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
    monkeypatch.delenv("OPENWEATHER_BASE_URL", raising=False)
