"""Aggregate figures of a parsed report, as printed by the CLI."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportSummary:
    month: str  # YYYY-MM of the earliest report
    day_count: int
    first_date: str  # YYYY-MM-DD
    last_date: str  # YYYY-MM-DD
    mean_temp: float
    min_low_temp: float
    max_high_temp: float
    total_rain: float
    max_wind_speed: float
    max_wind_direction: str | None
