"""Weather impact exports."""

from .impact import adjustment_note, multiplier, weather_impact_percent, weather_sub_score

__all__ = ["multiplier", "weather_sub_score", "weather_impact_percent", "adjustment_note"]
