"""Shared test fixtures."""

from pathlib import Path

import pytest

TITLE = "MONTHLY CLIMATOLOGICAL SUMMARY for {month}. {year}"
SEPARATOR = "-" * 84


def build_report_text(
    day_lines: list[str], month: str = "JUN", year: int = 2006
) -> str:
    """Assemble a minimal report around the given data lines."""
    lines = [
        TITLE.format(month=month, year=year),
        "",
        "DAY TEMP  HIGH   TIME   LOW    TIME   DAYS  DAYS  RAIN  SPEED HIGH   TIME  DIR",
        SEPARATOR,
        *day_lines,
        SEPARATOR,
    ]
    return "\n".join(lines) + "\n"


@pytest.fixture
def report_text():
    """Factory fixture for minimal report texts."""
    return build_report_text


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
