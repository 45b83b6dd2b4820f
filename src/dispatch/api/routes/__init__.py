"""Route group exports."""

from . import health, ledgers, routes, schedules

__all__ = ["health", "ledgers", "routes", "schedules"]
