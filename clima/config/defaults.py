"""Default upstream endpoint and environment variable names."""

DEFAULT_WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_UNITS = "metric"

API_KEY_ENV = "OPENWEATHER_API_KEY"
BASE_URL_ENV = "OPENWEATHER_BASE_URL"

# Shown when a lookup is attempted with no city name.
LOCATION_PLACEHOLDER = "Please enter a city name"
