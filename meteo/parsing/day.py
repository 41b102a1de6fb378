"""Parse one data line of a report into a Day.

A data line reads, whitespace separated:

    DAY MEAN HIGH HH:MM LOW HH:MM HEAT COOL RAIN AVGWIND HIGHWIND (HH:MM|---) (DIR|---)

The heating and cooling degree-day columns are read but not kept. A line
holding only the day number yields EmptyDay instead of a Day.
"""

from datetime import date, datetime

from meteo.errors import BadDay, BadField, InvalidDay
from meteo.models.day import Day, Direction, EmptyDay
from meteo.parsing.tokenizer import Lexer, TokenKind


def _number(lexer: Lexer, field: str) -> float:
    if lexer.accept(TokenKind.NUMBER) is None:
        raise BadField(field)
    return float(lexer.slice)


def _integer(lexer: Lexer, field: str) -> int:
    if lexer.accept(TokenKind.NUMBER) is None:
        raise BadField(field)
    try:
        return int(lexer.slice)
    except ValueError:
        raise BadField(field, f"not an integer: {lexer.slice}") from None


def _at(day: date, hour: int, minute: int, field: str) -> datetime:
    try:
        return datetime(day.year, day.month, day.day, hour, minute)
    except ValueError as e:
        raise BadField(field, str(e)) from e


def _time_rest(lexer: Lexer, day: date, hour: int, field: str) -> datetime:
    """Read `:MM` after an already consumed hour."""
    if lexer.accept(TokenKind.COLON) is None:
        raise BadField(f"{field} colon")
    minute = _integer(lexer, f"{field} minute")
    return _at(day, hour, minute, field)


def _time(lexer: Lexer, day: date, field: str) -> datetime:
    hour = _integer(lexer, f"{field} hour")
    return _time_rest(lexer, day, hour, field)


def parse_day(anchor: date, line: str) -> Day | EmptyDay:
    """Parse a data line of the month starting at anchor.

    Raises BadDay when the day number is missing, InvalidDay when the month
    has no such day, and BadField naming the first malformed field.
    """
    lexer = Lexer(line)

    if lexer.accept(TokenKind.NUMBER) is None:
        raise BadDay()
    try:
        day_number = int(lexer.slice)
    except ValueError:
        raise BadDay() from None

    try:
        day = anchor.replace(day=day_number)
    except ValueError as e:
        raise InvalidDay(day_number, e) from e

    token = lexer.next_token()
    if token is None:
        return EmptyDay(date=day)
    if token.kind is not TokenKind.NUMBER:
        raise BadField("mean temp", f"unexpected token {token.text!r}")
    mean_temp = float(token.text)

    high_temp = _number(lexer, "high temp")
    high_temp_date = _time(lexer, day, "high temp")

    low_temp = _number(lexer, "low temp")
    low_temp_date = _time(lexer, day, "low temp")

    _number(lexer, "heat degree days")
    _number(lexer, "cool degree days")

    rain = _number(lexer, "rain")
    avg_wind_speed = _number(lexer, "avg wind speed")
    high_wind_speed = _number(lexer, "high wind speed")

    token = lexer.next_token()
    if token is not None and token.kind is TokenKind.MISSING:
        high_wind_speed_date = None
    elif token is not None and token.kind is TokenKind.NUMBER:
        try:
            hour = int(token.text)
        except ValueError:
            raise BadField("high wind speed hour", token.text) from None
        high_wind_speed_date = _time_rest(lexer, day, hour, "high wind speed")
    else:
        raise BadField("high wind speed hour")

    token = lexer.next_token()
    if token is not None and token.kind is TokenKind.MISSING:
        wind_direction = None
    elif token is not None and token.kind is TokenKind.WORD:
        try:
            wind_direction = Direction.parse(token.text)
        except ValueError as e:
            raise BadField("wind direction", str(e)) from e
    else:
        raise BadField("wind direction")

    return Day(
        date=day,
        mean_temp=mean_temp,
        high_temp=high_temp,
        high_temp_date=high_temp_date,
        low_temp=low_temp,
        low_temp_date=low_temp_date,
        rain=rain,
        avg_wind_speed=avg_wind_speed,
        high_wind_speed=high_wind_speed,
        high_wind_speed_date=high_wind_speed_date,
        wind_direction=wind_direction,
    )
