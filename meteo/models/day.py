"""Per-day measurements of a monthly climatological summary."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum


class Direction(StrEnum):
    N = "N"
    NNE = "NNE"
    NE = "NE"
    ENE = "ENE"
    E = "E"
    ESE = "ESE"
    SE = "SE"
    SSE = "SSE"
    S = "S"
    SSW = "SSW"
    SW = "SW"
    WSW = "WSW"
    W = "W"
    WNW = "WNW"
    NW = "NW"
    NNW = "NNW"

    @classmethod
    def parse(cls, word: str) -> "Direction":
        try:
            return cls(word)
        except ValueError:
            raise ValueError(f"Unknown wind direction: {word}") from None


@dataclass(frozen=True)
class Day:
    date: date

    mean_temp: float
    high_temp: float
    high_temp_date: datetime
    low_temp: float
    low_temp_date: datetime

    rain: float

    avg_wind_speed: float
    high_wind_speed: float
    high_wind_speed_date: datetime | None
    wind_direction: Direction | None


@dataclass(frozen=True)
class EmptyDay:
    """A calendar line carrying only its day number.

    Returned by the day parser instead of a Day; never stored in a report.
    """

    date: date
