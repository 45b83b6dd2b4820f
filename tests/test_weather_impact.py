import pytest

from src.dispatch.models.domain import WeatherCondition, WeatherKind
from src.dispatch.services.weather.impact import (
    adjustment_note,
    describe,
    multiplier,
    weather_impact_percent,
    weather_sub_score,
)


@pytest.mark.parametrize(
    "kind, expected_multiplier, expected_score",
    [
        (WeatherKind.SUNNY, 1.0, 10.0),
        (WeatherKind.CLOUDY, 1.1, 7.0),
        (WeatherKind.RAIN, 1.3, 5.0),
        (WeatherKind.STORM, 1.5, 2.0),
    ],
)
def test_policy_table(kind, expected_multiplier, expected_score):
    condition = WeatherCondition(kind=kind, temperature=70, wind_speed=5, precipitation=0)

    assert multiplier(condition) == expected_multiplier
    assert weather_sub_score(condition) == expected_score


def test_missing_weather_defaults_to_sunny():
    assert multiplier(None) == 1.0
    assert weather_sub_score(None) == 10.0
    assert weather_impact_percent(None) == 100


def test_accepts_plain_strings():
    assert multiplier("rain") == 1.3
    assert WeatherCondition(kind="storm").kind is WeatherKind.STORM


def test_unknown_condition_is_rejected():
    with pytest.raises(ValueError):
        multiplier("hail")


def test_adjustment_note():
    assert adjustment_note("sunny") == "Optimal weather conditions"
    assert adjustment_note("rain") == "Adjusted for rain conditions (+30% time)"


def test_describe_includes_forecast_values():
    summary = describe(WeatherCondition(kind="cloudy", temperature=75, wind_speed=8, precipitation=20))

    assert summary["condition"] == "cloudy"
    assert summary["temperature"] == 75
    assert summary["travel_multiplier"] == 1.1
    assert summary["sub_score"] == 7.0
