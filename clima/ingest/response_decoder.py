"""Decoding of OpenWeather current-weather JSON into WeatherRecord."""

import logging

from pydantic import BaseModel, Field, ValidationError

from clima.models.weather import WeatherRecord

logger = logging.getLogger(__name__)


class DecodeError(Exception):
    """Raised when a response body does not match the weather payload."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class MainBlock(BaseModel):
    model_config = {"strict": True}

    temp: float


class ConditionEntry(BaseModel):
    model_config = {"strict": True}

    id: int
    description: str


class WeatherPayload(BaseModel):
    model_config = {"strict": True}

    name: str
    dt: int | None = None
    main: MainBlock
    # Element 0 drives classification, so an empty list is a decode error.
    weather: list[ConditionEntry] = Field(min_length=1)


def decode(body: bytes | str) -> WeatherRecord:
    """Parse a response body and extract city name, temperature and code."""
    try:
        payload = WeatherPayload.model_validate_json(body)
    except ValidationError as e:
        logger.debug("Weather payload rejected: %s", e)
        raise DecodeError(_summarize(e), cause=e) from e

    return WeatherRecord(
        temperature=payload.main.temp,
        city_name=payload.name,
        condition_code=payload.weather[0].id,
    )


def _summarize(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<body>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)
