"""Exception hierarchy for report parsing and merging."""


class MeteoError(Exception):
    """Base class for every error raised by meteo."""


class ReportParseError(MeteoError):
    """A report could not be parsed."""


class TruncatedReport(ReportParseError):
    def __init__(self, section: str):
        self.section = section
        super().__init__(f"Report ended before the {section} separator")


# Header errors


class MetadataError(ReportParseError):
    pass


class MissingTitle(MetadataError):
    def __init__(self):
        super().__init__("Missing title")


class BadTitle(MetadataError):
    def __init__(self):
        super().__init__("Bad title")


class BadMonth(MetadataError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Bad month: {detail}")


class BadHeader(MetadataError):
    def __init__(self):
        super().__init__("Bad header")


# Day errors


class ParseDayError(ReportParseError):
    pass


class BadDay(ParseDayError):
    def __init__(self):
        super().__init__("Bad day")


class InvalidDay(ParseDayError):
    """The day number does not exist in the report's month."""

    def __init__(self, day: int, cause: ValueError):
        self.day = day
        self.cause = cause
        super().__init__(f"Invalid day: {day} ({cause})")


class BadField(ParseDayError):
    def __init__(self, field: str, detail: str | None = None):
        self.field = field
        self.detail = detail
        message = f"Bad {field}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


# Report operations


class MetadataMismatchError(MeteoError):
    def __init__(self):
        super().__init__("Metadata differs")


class EmptyReportError(MeteoError):
    def __init__(self, message: str = "Report has no days"):
        super().__init__(message)
