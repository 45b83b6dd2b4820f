"""Application configuration and settings management."""

from pathlib import Path
from typing import Annotated, Any, Literal

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="DISPATCH_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Crew Dispatch Route Engine"
    api_prefix: str = "/api"
    data_root: Path = Field(default=Path("data"), description="Root directory for seed data files.")
    jobs_file: Path = Field(
        default=Path("data/jobs.csv"),
        description="Job tickets to load for the day (id, lat, long, estimated_hours, priority, ...).",
    )
    crews_file: Path = Field(
        default=Path("data/crews.csv"),
        description="Crew roster (id, name, specialization, capacity_hint).",
    )
    fuel_cost_per_mile: float = Field(default=0.75, ge=0.0, description="Flat fuel cost per mile driven.")
    drive_minutes_per_mile: float = Field(default=2.5, ge=0.0)
    min_segment_minutes: float = Field(
        default=10.0,
        ge=0.0,
        description="Minimum drive time charged per hop (parking and transition overhead).",
    )
    workday_hours: float = Field(default=8.0, gt=0.0, description="Billable hours that count as a full day.")
    debounce_window_ms: int = Field(
        default=100,
        ge=0,
        description="Quiet period after the last move before dirty crews are recomputed.",
    )
    default_start_time: str = Field(default="08:00", pattern=r"^\d{1,2}:\d{2}$")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    frontend_allowed_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("data_root", "jobs_file", "crews_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
