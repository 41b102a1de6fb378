"""Output formatters for report summaries."""

import json
from dataclasses import asdict

from meteo.models.summary import ReportSummary
from meteo.models.units import RainUnit, TemperatureUnit, WindSpeedUnit


def format_summary_text(s: ReportSummary) -> str:
    """Plain text summary for the terminal."""
    temp = TemperatureUnit.CELSIUS
    lines = [
        f"=== Report {s.month} | {s.day_count} days "
        f"({s.first_date} .. {s.last_date}) ===",
        f"Mean temp of the period: {s.mean_temp:.1f} {temp}",
        f"Temperature range: {s.min_low_temp:.1f} .. {s.max_high_temp:.1f} {temp}",
        f"Rain: {s.total_rain:.1f} {RainUnit.MM}",
    ]
    wind = f"Max wind: {s.max_wind_speed:.1f} {WindSpeedUnit.KM_HR}"
    if s.max_wind_direction:
        wind += f" {s.max_wind_direction}"
    lines.append(wind)
    return "\n".join(lines)


def format_summary_json(s: ReportSummary) -> str:
    """JSON summary for programmatic consumption."""
    data = asdict(s)
    data["units"] = {
        "temperature": TemperatureUnit.CELSIUS.value,
        "rain": RainUnit.MM.value,
        "wind_speed": WindSpeedUnit.KM_HR.value,
    }
    return json.dumps(data, indent=2)
