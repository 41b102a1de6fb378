"""Summarizer: reduces a parsed report to a ReportSummary."""

from meteo.models.report import Report
from meteo.models.summary import ReportSummary


def summarize(report: Report) -> ReportSummary:
    """Compute the summary figures of a non-empty report."""
    temperatures = report.temperature_range()
    windiest = max(report.days, key=lambda day: day.high_wind_speed)
    return ReportSummary(
        month=report.metadata.date.strftime("%Y-%m"),
        day_count=len(report.days),
        first_date=report.first_date().isoformat(),
        last_date=report.last_date().isoformat(),
        mean_temp=report.mean_temperature(),
        min_low_temp=temperatures.low,
        max_high_temp=temperatures.high,
        total_rain=report.total_rain(),
        max_wind_speed=windiest.high_wind_speed,
        max_wind_direction=(
            windiest.wind_direction.value if windiest.wind_direction else None
        ),
    )
