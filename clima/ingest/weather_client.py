"""Async OpenWeather client reporting outcomes to a delegate."""

import asyncio
import logging
from typing import Protocol

import httpx

from clima.config.schema import ApiConfig, ClimaConfig
from clima.ingest.query_builder import QueryBuilder, redact
from clima.ingest.response_decoder import DecodeError, decode
from clima.models.weather import (
    CityQuery,
    Coordinate,
    DecodeFailure,
    InvalidResponse,
    NetworkFailure,
    RequestOutcome,
    Success,
    WeatherFailure,
    WeatherQuery,
    WeatherRecord,
)

logger = logging.getLogger(__name__)

# Exact set, not the 2xx range: 204/206 are rejected, 304 is decoded.
ACCEPTED_STATUS_CODES = frozenset({200, 201, 202, 203, 304})


class WeatherDelegate(Protocol):
    def on_weather_updated(self, client: "WeatherClient", record: WeatherRecord) -> None: ...

    def on_weather_failed(self, client: "WeatherClient", failure: WeatherFailure) -> None: ...


class WeatherClient:
    """Fetches current weather and notifies the delegate exactly once per call.

    Each fetch is independent: there is no queuing, retrying or caching, and
    concurrent calls may complete in any order. The delegate runs on the
    event loop that awaited the fetch.
    """

    def __init__(
        self,
        config: ClimaConfig | ApiConfig | QueryBuilder,
        delegate: WeatherDelegate | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        if isinstance(config, QueryBuilder):
            self.query_builder = config
        elif isinstance(config, ClimaConfig):
            self.query_builder = QueryBuilder(config.api)
        else:
            self.query_builder = QueryBuilder(config)
        self.delegate = delegate
        self.http_client = http_client
        self._tasks: set[asyncio.Task] = set()

    async def fetch_weather(self, city_name: str) -> RequestOutcome:
        return await self.fetch(CityQuery(city_name))

    async def fetch_weather_at(self, latitude: float, longitude: float) -> RequestOutcome:
        return await self.fetch(Coordinate(latitude, longitude))

    def start_fetch(self, query: WeatherQuery) -> asyncio.Task:
        """Schedule a fetch on the running loop without waiting for it.

        The client holds the task until it finishes, so callers may drop it.
        """
        task = asyncio.get_running_loop().create_task(self.fetch(query))
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Background weather fetch failed", exc_info=task.exception())

    async def fetch(self, query: WeatherQuery) -> RequestOutcome:
        """Run one request and deliver its outcome to the delegate.

        The outcome is also returned so awaiting callers can use it directly.
        """
        url = self.query_builder.build(query)
        outcome = await self._request(url)
        self._notify(outcome)
        return outcome

    async def _request(self, url: httpx.URL) -> RequestOutcome:
        logger.info("GET %s", redact(url))
        try:
            resp = await self._get(url)
        except httpx.RequestError as e:
            logger.warning("Weather request failed for %s: %s", redact(url), e)
            return NetworkFailure(e)

        if resp.status_code not in ACCEPTED_STATUS_CODES:
            logger.warning(
                "Weather API returned %d for %s", resp.status_code, redact(url)
            )
            return InvalidResponse(resp.status_code)

        try:
            record = decode(resp.content)
        except DecodeError as e:
            logger.warning("Weather response could not be decoded: %s", e)
            return DecodeFailure(e)

        logger.debug(
            "Decoded weather for %s: %s C, code %d",
            record.city_name, record.temperature_string, record.condition_code,
        )
        return Success(record)

    async def _get(self, url: httpx.URL) -> httpx.Response:
        if self.http_client is not None:
            return await self.http_client.get(url)
        async with httpx.AsyncClient() as client:
            return await client.get(url)

    def _notify(self, outcome: RequestOutcome) -> None:
        if self.delegate is None:
            logger.debug("No delegate registered; outcome returned only")
            return
        if isinstance(outcome, Success):
            self.delegate.on_weather_updated(self, outcome.record)
        else:
            self.delegate.on_weather_failed(self, outcome)
