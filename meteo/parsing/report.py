"""Assemble a Report from the full text of a monthly summary."""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

from meteo.errors import TruncatedReport
from meteo.models.day import Day, EmptyDay
from meteo.models.report import Report
from meteo.parsing.day import parse_day
from meteo.parsing.header import parse_metadata

logger = logging.getLogger(__name__)

DisorderObserver = Callable[[Day, Day], None]


def is_separator(line: str) -> bool:
    return bool(line) and all(c == "-" for c in line)


def log_disorder(previous: Day, current: Day) -> None:
    logger.warning(
        "Days are not ordered: %s follows %s", current.date, previous.date
    )


def _skip_to_separator(lines: Iterator[str]) -> None:
    for line in lines:
        if is_separator(line):
            return
    raise TruncatedReport("header")


def parse_report(
    text: str, on_disorder: DisorderObserver | None = None
) -> Report:
    """Parse a whole report.

    Lines between the title block and the first dash separator are
    ignored. Every following line is a day record until the next separator
    (or an empty line). Empty days are skipped; any other malformed line
    aborts the parse. A day not strictly after its predecessor is reported
    to on_disorder (a logged warning by default) and kept in place.
    """
    if on_disorder is None:
        on_disorder = log_disorder

    lines = iter(text.splitlines())
    metadata = parse_metadata(lines)
    _skip_to_separator(lines)

    days: list[Day] = []
    for line in lines:
        if not line or is_separator(line):
            break

        day = parse_day(metadata.date, line)
        if isinstance(day, EmptyDay):
            logger.debug("Skipping empty day %s", day.date)
            continue

        if days and days[-1].date >= day.date:
            on_disorder(days[-1], day)
        days.append(day)
    else:
        raise TruncatedReport("closing")

    return Report(metadata=metadata, days=days)


def parse_report_file(path: str | Path, **kwargs) -> Report:
    """Read a report file and parse it."""
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    return parse_report(text, **kwargs)
