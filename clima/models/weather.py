"""Weather query, record and request outcome models."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TypeAlias

from clima.models.condition import ConditionCategory, classify


@dataclass(frozen=True)
class CityQuery:
    name: str


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


WeatherQuery: TypeAlias = CityQuery | Coordinate


@dataclass(frozen=True)
class WeatherRecord:
    temperature: float  # degrees Celsius
    city_name: str
    condition_code: int

    @property
    def temperature_string(self) -> str:
        return f"{self.temperature:.1f}"

    @property
    def condition_category(self) -> ConditionCategory:
        return classify(self.condition_code)

    @property
    def condition_name(self) -> str:
        return self.condition_category.symbol


@dataclass(frozen=True)
class Success:
    record: WeatherRecord


@dataclass(frozen=True)
class WeatherFailure(ABC):
    """Base for the failure outcomes of a weather fetch."""

    @property
    @abstractmethod
    def message(self) -> str: ...


@dataclass(frozen=True)
class NetworkFailure(WeatherFailure):
    cause: Exception

    @property
    def message(self) -> str:
        return f"Network error: {self.cause}"


@dataclass(frozen=True)
class InvalidResponse(WeatherFailure):
    status_code: int

    @property
    def message(self) -> str:
        return f"Unexpected status code: {self.status_code}"


@dataclass(frozen=True)
class DecodeFailure(WeatherFailure):
    cause: Exception

    @property
    def message(self) -> str:
        return f"Could not decode weather response: {self.cause}"


RequestOutcome: TypeAlias = Success | NetworkFailure | InvalidResponse | DecodeFailure
