"""Parsed report with date-range queries and multi-month merge."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from datetime import date
from functools import cmp_to_key, total_ordering
from typing import Any, NamedTuple, TypeVar

from meteo.errors import EmptyReportError, MetadataMismatchError
from meteo.models.day import Day
from meteo.models.metadata import Metadata

T = TypeVar("T")


class ValueRange(NamedTuple):
    """Half-open interval [low, high)."""

    low: Any
    high: Any


@total_ordering
@dataclass(eq=False)
class Report:
    metadata: Metadata
    # Expected ascending by date; the parser warns but never reorders.
    days: list[Day] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Report):
            return NotImplemented
        return self.metadata.date == other.metadata.date

    def __lt__(self, other: "Report") -> bool:
        if not isinstance(other, Report):
            return NotImplemented
        return self.metadata.date < other.metadata.date

    def _require_days(self) -> None:
        if not self.days:
            raise EmptyReportError()

    def first_date(self) -> date:
        self._require_days()
        return self.days[0].date

    def last_date(self) -> date:
        self._require_days()
        return self.days[-1].date

    def range(
        self,
        extract: Callable[[Day], T],
        compare: Callable[[T, T], int] | None = None,
    ) -> ValueRange:
        """Minimum and maximum of extract(day) over all days.

        compare follows the cmp(a, b) -> int convention; natural ordering
        is used when omitted.
        """
        self._require_days()
        values = [extract(day) for day in self.days]
        key = cmp_to_key(compare) if compare is not None else None
        return ValueRange(min(values, key=key), max(values, key=key))

    def temperature_range(self) -> ValueRange:
        """Lowest low_temp to highest high_temp of the report."""
        self._require_days()
        return ValueRange(
            min(day.low_temp for day in self.days),
            max(day.high_temp for day in self.days),
        )

    def mean_temperature(self) -> float:
        self._require_days()
        return sum(day.mean_temp for day in self.days) / len(self.days)

    def total_rain(self) -> float:
        return sum(day.rain for day in self.days)

    def merge(self, other: "Report") -> None:
        """Append the days of another month of the same station.

        The earlier report's days come first and the receiver takes the
        earlier date. Days are concatenated, never re-sorted. Raises
        MetadataMismatchError, leaving both reports untouched, when the
        station identity differs.
        """
        if self.metadata != other.metadata:
            raise MetadataMismatchError()

        if self.metadata.date < other.metadata.date:
            self.days.extend(other.days)
        else:
            self.metadata = replace(self.metadata, date=other.metadata.date)
            self.days = other.days + self.days


def merge_reports(reports: Iterable[Report]) -> Report:
    """Merge monthly reports of one station into a new report, oldest first."""
    ordered = sorted(reports)
    if not ordered:
        raise EmptyReportError("No reports to merge")

    merged = Report(metadata=ordered[0].metadata, days=list(ordered[0].days))
    for report in ordered[1:]:
        merged.merge(report)
    return merged
