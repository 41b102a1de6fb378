"""Parse the title block of a report into its Metadata."""

import logging
from collections.abc import Iterator
from datetime import date

from meteo.errors import BadHeader, BadMonth, BadTitle, MissingTitle
from meteo.models.metadata import PLACEHOLDER_STATION, Metadata
from meteo.parsing.tokenizer import MONTHS, Lexer, TokenKind

logger = logging.getLogger(__name__)


def parse_metadata(lines: Iterator[str]) -> Metadata:
    """Consume the title line and the blank line after it.

    Expects `MONTHLY CLIMATOLOGICAL SUMMARY for <MON>. <YEAR>`. The returned
    date is the first day of that month.
    """
    title = next(lines, None)
    if title is None:
        raise MissingTitle()

    lexer = Lexer(title)
    if lexer.accept(TokenKind.TITLE) is None:
        raise BadTitle()

    token = lexer.next_token()
    if token is None or token.kind not in MONTHS:
        raise BadMonth(lexer.slice)
    month = MONTHS[token.kind]

    if lexer.accept(TokenKind.DOT) is None:
        raise BadMonth("Missing dot after month")

    if lexer.accept(TokenKind.NUMBER) is None:
        raise BadMonth("Missing year after month")
    try:
        year = int(lexer.slice)
        anchor = date(year, month, 1)
    except ValueError as e:
        raise BadMonth(f"Invalid year {lexer.slice}: {e}") from e

    blank = next(lines, None)
    if blank is None or blank.strip():
        raise BadHeader()

    logger.debug("Parsed header for %04d-%02d", anchor.year, anchor.month)

    # TODO: read NAME/CITY/STATE/ELEV/LAT/LONG from the station block
    return Metadata(date=anchor, **PLACEHOLDER_STATION)
