"""Parser for monthly climatological summary weather reports."""

from meteo.errors import (
    BadDay,
    BadField,
    BadHeader,
    BadMonth,
    BadTitle,
    EmptyReportError,
    InvalidDay,
    MetadataError,
    MetadataMismatchError,
    MeteoError,
    MissingTitle,
    ParseDayError,
    ReportParseError,
    TruncatedReport,
)
from meteo.models.day import Day, Direction, EmptyDay
from meteo.models.metadata import Metadata
from meteo.models.report import Report, ValueRange, merge_reports
from meteo.parsing.day import parse_day
from meteo.parsing.header import parse_metadata
from meteo.parsing.report import parse_report, parse_report_file

__version__ = "0.1.0"

__all__ = [
    "BadDay",
    "BadField",
    "BadHeader",
    "BadMonth",
    "BadTitle",
    "Day",
    "Direction",
    "EmptyDay",
    "EmptyReportError",
    "InvalidDay",
    "Metadata",
    "MetadataError",
    "MetadataMismatchError",
    "MeteoError",
    "MissingTitle",
    "ParseDayError",
    "Report",
    "ReportParseError",
    "TruncatedReport",
    "ValueRange",
    "merge_reports",
    "parse_day",
    "parse_metadata",
    "parse_report",
    "parse_report_file",
]
