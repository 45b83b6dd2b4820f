"""Weather impact on travel.

Weather slows crews down between sites and burns more fuel; it never changes
how long the work at a site takes. Callers that have no forecast pass
``None`` and get sunny-day figures.
"""

from __future__ import annotations

from typing import Optional, Union

from ...models.domain import WeatherCondition, WeatherKind

WeatherInput = Union[WeatherCondition, WeatherKind, str, None]

TRAVEL_MULTIPLIERS: dict[WeatherKind, float] = {
    WeatherKind.SUNNY: 1.0,
    WeatherKind.CLOUDY: 1.1,
    WeatherKind.RAIN: 1.3,
    WeatherKind.STORM: 1.5,
}

SUB_SCORES: dict[WeatherKind, float] = {
    WeatherKind.SUNNY: 10.0,
    WeatherKind.CLOUDY: 7.0,
    WeatherKind.RAIN: 5.0,
    WeatherKind.STORM: 2.0,
}

# Share of a normal day's capacity left after weather, as a percentage.
IMPACT_PERCENT: dict[WeatherKind, int] = {
    WeatherKind.SUNNY: 100,
    WeatherKind.CLOUDY: 90,
    WeatherKind.RAIN: 80,
    WeatherKind.STORM: 80,
}


def resolve_kind(condition: WeatherInput) -> WeatherKind:
    if condition is None:
        return WeatherKind.SUNNY
    if isinstance(condition, WeatherCondition):
        return condition.kind
    return WeatherKind(condition)


def multiplier(condition: WeatherInput) -> float:
    """Factor (>= 1.0) applied to drive time and fuel cost."""

    return TRAVEL_MULTIPLIERS[resolve_kind(condition)]


def weather_sub_score(condition: WeatherInput) -> float:
    """Weather contribution to the optimization score, within [0, 10]."""

    return SUB_SCORES[resolve_kind(condition)]


def weather_impact_percent(condition: WeatherInput) -> int:
    return IMPACT_PERCENT[resolve_kind(condition)]


def adjustment_note(condition: WeatherInput) -> str:
    kind = resolve_kind(condition)
    if kind is WeatherKind.SUNNY:
        return "Optimal weather conditions"
    extra = round((multiplier(kind) - 1) * 100)
    return f"Adjusted for {kind.value} conditions (+{extra}% time)"


def describe(condition: Optional[WeatherCondition]) -> dict:
    """Summary of a forecast for response metadata."""

    kind = resolve_kind(condition)
    return {
        "condition": kind.value,
        "temperature": condition.temperature if condition else None,
        "wind_speed": condition.wind_speed if condition else None,
        "precipitation": condition.precipitation if condition else None,
        "travel_multiplier": multiplier(kind),
        "sub_score": weather_sub_score(kind),
    }
