"""Weather condition categories and the code classifier."""

from enum import StrEnum


class ConditionCategory(StrEnum):
    THUNDERSTORM = "thunderstorm"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"
    FOG = "fog"
    SMOKE = "smoke"
    HAZE = "haze"
    DUST = "dust"
    TORNADO = "tornado"
    CLOUDY = "cloudy"
    CLEAR = "clear"

    @property
    def symbol(self) -> str:
        """Icon symbol name used to render this category."""
        return _SYMBOLS[self]


_SYMBOLS: dict[ConditionCategory, str] = {
    ConditionCategory.THUNDERSTORM: "cloud.bolt",
    ConditionCategory.DRIZZLE: "cloud.drizzle",
    ConditionCategory.RAIN: "cloud.rain",
    ConditionCategory.SNOW: "cloud.snow",
    ConditionCategory.FOG: "cloud.fog",
    ConditionCategory.SMOKE: "smoke",
    ConditionCategory.HAZE: "sun.haze",
    ConditionCategory.DUST: "sun.dust",
    ConditionCategory.TORNADO: "tornado",
    ConditionCategory.CLOUDY: "cloud",
    ConditionCategory.CLEAR: "sun.max",
}

# Ordered; first match wins. Bounds are inclusive.
_RANGES: list[tuple[int, int, ConditionCategory]] = [
    (200, 232, ConditionCategory.THUNDERSTORM),
    (300, 321, ConditionCategory.DRIZZLE),
    (500, 531, ConditionCategory.RAIN),
    (771, 771, ConditionCategory.RAIN),
    (600, 622, ConditionCategory.SNOW),
    (701, 701, ConditionCategory.FOG),
    (741, 751, ConditionCategory.FOG),
    (711, 711, ConditionCategory.SMOKE),
    (721, 721, ConditionCategory.HAZE),
    (731, 731, ConditionCategory.DUST),
    (761, 761, ConditionCategory.DUST),
    (781, 781, ConditionCategory.TORNADO),
    (801, 804, ConditionCategory.CLOUDY),
]


def classify(condition_code: int) -> ConditionCategory:
    """Map an OpenWeather condition code to its display category.

    Total over all integers: anything outside the known ranges, including
    800 (clear sky), zero and negative codes, falls back to CLEAR.
    """
    for low, high, category in _RANGES:
        if low <= condition_code <= high:
            return category
    return ConditionCategory.CLEAR
