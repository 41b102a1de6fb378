"""Tests for report queries and merge."""

from datetime import date, datetime

import pytest

from meteo.errors import EmptyReportError, MetadataMismatchError
from meteo.models.day import Day, Direction
from meteo.models.metadata import PLACEHOLDER_STATION, Metadata
from meteo.models.report import Report, ValueRange, merge_reports


def _metadata(year: int = 2006, month: int = 6, **overrides) -> Metadata:
    fields = {**PLACEHOLDER_STATION, **overrides}
    return Metadata(date=date(year, month, 1), **fields)


def _day(
    d: date,
    mean: float = 15.0,
    high: float = 20.0,
    low: float = 10.0,
    rain: float = 0.0,
    wind: float = 10.0,
) -> Day:
    return Day(
        date=d,
        mean_temp=mean,
        high_temp=high,
        high_temp_date=datetime(d.year, d.month, d.day, 14, 0),
        low_temp=low,
        low_temp_date=datetime(d.year, d.month, d.day, 5, 0),
        rain=rain,
        avg_wind_speed=wind / 2,
        high_wind_speed=wind,
        high_wind_speed_date=None,
        wind_direction=Direction.N,
    )


def _report(year: int, month: int, days: list[int], **overrides) -> Report:
    return Report(
        metadata=_metadata(year, month, **overrides),
        days=[_day(date(year, month, n)) for n in days],
    )


class TestMetadataEquality:
    def test_date_ignored(self):
        assert _metadata(2006, 6) == _metadata(2006, 7)

    def test_identity_fields_compared(self):
        assert _metadata(city="ALES") != _metadata()
        assert _metadata(elevation=300) != _metadata()
        assert _metadata(lat=(43, 59, 24)) != _metadata()


class TestReportOrdering:
    def test_equality_by_date(self):
        a = _report(2006, 6, [1])
        b = _report(2006, 6, [2, 3])
        assert a == b

    def test_ordering_by_date(self):
        june = _report(2006, 6, [1])
        july = _report(2006, 7, [1])
        assert june < july
        assert sorted([july, june])[0] is june


class TestQueries:
    def test_first_last_date(self):
        report = _report(2006, 6, [3, 4, 9])
        assert report.first_date() == date(2006, 6, 3)
        assert report.last_date() == date(2006, 6, 9)

    def test_empty_report(self):
        report = _report(2006, 6, [])
        with pytest.raises(EmptyReportError):
            report.first_date()
        with pytest.raises(EmptyReportError):
            report.last_date()
        with pytest.raises(EmptyReportError):
            report.temperature_range()
        with pytest.raises(EmptyReportError):
            report.range(lambda d: d.rain)

    def test_range_natural_order(self):
        report = Report(
            metadata=_metadata(),
            days=[
                _day(date(2006, 6, 1), rain=2.0),
                _day(date(2006, 6, 2), rain=0.5),
                _day(date(2006, 6, 3), rain=7.5),
            ],
        )
        assert report.range(lambda d: d.rain) == ValueRange(0.5, 7.5)

    def test_range_with_comparator(self):
        report = Report(
            metadata=_metadata(),
            days=[_day(date(2006, 6, 1), wind=5.0), _day(date(2006, 6, 2), wind=30.0)],
        )
        reverse = lambda a, b: (b > a) - (b < a)  # noqa: E731
        result = report.range(lambda d: d.high_wind_speed, reverse)
        assert result.low == 30.0
        assert result.high == 5.0

    def test_temperature_range_uses_low_and_high(self):
        report = Report(
            metadata=_metadata(),
            days=[
                _day(date(2006, 6, 1), mean=12.0, high=18.0, low=-2.0),
                _day(date(2006, 6, 2), mean=20.0, high=31.5, low=9.0),
            ],
        )
        assert report.temperature_range() == (-2.0, 31.5)

    def test_mean_and_rain(self):
        report = Report(
            metadata=_metadata(),
            days=[
                _day(date(2006, 6, 1), mean=10.0, rain=1.5),
                _day(date(2006, 6, 2), mean=20.0, rain=2.5),
            ],
        )
        assert report.mean_temperature() == pytest.approx(15.0)
        assert report.total_rain() == pytest.approx(4.0)


class TestMerge:
    def test_later_into_earlier(self):
        june = _report(2006, 6, [1, 2])
        july = _report(2006, 7, [1, 2, 3])
        expected = june.days + july.days

        june.merge(july)
        assert june.metadata.date == date(2006, 6, 1)
        assert june.days == expected

    def test_earlier_into_later(self):
        june = _report(2006, 6, [1, 2])
        july = _report(2006, 7, [1, 2, 3])
        expected = june.days + july.days

        july.merge(june)
        assert july.metadata.date == date(2006, 6, 1)
        assert july.days == expected

    def test_no_resort(self):
        june = Report(
            metadata=_metadata(2006, 6),
            days=[_day(date(2006, 6, 5)), _day(date(2006, 6, 2))],
        )
        july = _report(2006, 7, [1])
        june.merge(july)
        assert [d.date for d in june.days] == [
            date(2006, 6, 5), date(2006, 6, 2), date(2006, 7, 1),
        ]

    def test_metadata_mismatch(self):
        june = _report(2006, 6, [1, 2])
        july = _report(2006, 7, [1], city="ALES")
        june_days = list(june.days)
        july_days = list(july.days)

        with pytest.raises(MetadataMismatchError, match="Metadata differs"):
            june.merge(july)
        assert june.days == june_days
        assert july.days == july_days
        assert june.metadata.date == date(2006, 6, 1)

    def test_argument_not_modified(self):
        june = _report(2006, 6, [1])
        july = _report(2006, 7, [1, 2])
        july.merge(june)
        assert len(june.days) == 1
        assert june.metadata.date == date(2006, 6, 1)

    def test_metadata_otherwise_preserved(self):
        june = _report(2006, 6, [1])
        july = _report(2006, 7, [1])
        july.merge(june)
        assert july.metadata == june.metadata
        assert july.metadata.city == "LE VIGAN"


class TestMergeReports:
    def test_sorted_concatenation(self):
        aug = _report(2006, 8, [1])
        june = _report(2006, 6, [1, 2])
        july = _report(2006, 7, [1])

        merged = merge_reports([aug, june, july])
        assert merged.metadata.date == date(2006, 6, 1)
        assert [d.date for d in merged.days] == [
            date(2006, 6, 1), date(2006, 6, 2), date(2006, 7, 1), date(2006, 8, 1),
        ]

    def test_inputs_untouched(self):
        june = _report(2006, 6, [1])
        july = _report(2006, 7, [1])
        merge_reports([june, july])
        assert len(june.days) == 1
        assert len(july.days) == 1

    def test_no_reports(self):
        with pytest.raises(EmptyReportError):
            merge_reports([])

    def test_mismatch(self):
        with pytest.raises(MetadataMismatchError):
            merge_reports([_report(2006, 6, [1]), _report(2006, 7, [1], name="other")])
