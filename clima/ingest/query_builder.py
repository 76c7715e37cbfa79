"""Request URL construction for the OpenWeather current-weather endpoint."""

import httpx

from clima.config.schema import ApiConfig, ConfigurationError, parse_base_url
from clima.models.weather import CityQuery, Coordinate, WeatherQuery


class QueryBuilder:
    def __init__(self, api: ApiConfig):
        if not api.api_key.strip():
            raise ConfigurationError("API key must not be empty")
        self.base_url = parse_base_url(api.base_url)
        self.api_key = api.api_key
        self.units = api.units

    def build(self, query: WeatherQuery) -> httpx.URL:
        if isinstance(query, CityQuery):
            return self.build_by_city(query.name)
        if isinstance(query, Coordinate):
            return self.build_by_coordinates(query.latitude, query.longitude)
        raise TypeError(f"Unsupported weather query: {query!r}")

    def build_by_city(self, name: str) -> httpx.URL:
        """URL for a city lookup. The name is percent-encoded as given."""
        return self._with_params({"q": name})

    def build_by_coordinates(self, latitude: float, longitude: float) -> httpx.URL:
        """URL for a coordinate lookup, each value rounded to two decimals."""
        return self._with_params({
            "lat": f"{latitude:.2f}",
            "lon": f"{longitude:.2f}",
        })

    def _with_params(self, params: dict[str, str]) -> httpx.URL:
        return self.base_url.copy_merge_params({
            **params,
            "appid": self.api_key,
            "units": self.units,
        })


def redact(url: httpx.URL) -> httpx.URL:
    """Copy of url with the API key masked, for logging."""
    if "appid" not in url.params:
        return url
    return url.copy_set_param("appid", "***")
