"""Tests for condition code classification."""

import pytest

from clima.models.condition import ConditionCategory, classify


class TestClassify:
    @pytest.mark.parametrize(
        "code,expected",
        [
            (200, ConditionCategory.THUNDERSTORM),
            (232, ConditionCategory.THUNDERSTORM),
            (300, ConditionCategory.DRIZZLE),
            (321, ConditionCategory.DRIZZLE),
            (500, ConditionCategory.RAIN),
            (531, ConditionCategory.RAIN),
            (771, ConditionCategory.RAIN),
            (600, ConditionCategory.SNOW),
            (622, ConditionCategory.SNOW),
            (701, ConditionCategory.FOG),
            (741, ConditionCategory.FOG),
            (751, ConditionCategory.FOG),
            (711, ConditionCategory.SMOKE),
            (721, ConditionCategory.HAZE),
            (731, ConditionCategory.DUST),
            (761, ConditionCategory.DUST),
            (781, ConditionCategory.TORNADO),
            (801, ConditionCategory.CLOUDY),
            (804, ConditionCategory.CLOUDY),
        ],
    )
    def test_known_ranges(self, code: int, expected: ConditionCategory):
        assert classify(code) == expected

    @pytest.mark.parametrize(
        "code", [800, 0, -5, 199, 233, 322, 532, 623, 700, 740, 752, 805, 2**31 - 1, -(2**31)]
    )
    def test_unknown_codes_fall_back_to_clear(self, code: int):
        assert classify(code) == ConditionCategory.CLEAR

    def test_gaps_between_atmosphere_codes(self):
        # 702-710 sit between fog (701) and smoke (711)
        assert classify(705) == ConditionCategory.CLEAR
        assert classify(770) == ConditionCategory.CLEAR


class TestConditionSymbol:
    def test_symbols(self):
        assert ConditionCategory.THUNDERSTORM.symbol == "cloud.bolt"
        assert ConditionCategory.RAIN.symbol == "cloud.rain"
        assert ConditionCategory.HAZE.symbol == "sun.haze"
        assert ConditionCategory.CLOUDY.symbol == "cloud"
        assert ConditionCategory.CLEAR.symbol == "sun.max"

    def test_every_category_has_symbol(self):
        for category in ConditionCategory:
            assert category.symbol
