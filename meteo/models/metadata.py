"""Station identity and reporting month of a report."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Metadata:
    # First day of the report's month. The day component is a placeholder,
    # only year and month are meaningful. Excluded from equality so that
    # reports of the same station in different months compare equal.
    date: date = field(compare=False)

    name: str
    city: str
    state: str

    elevation: int
    lat: tuple[int, int, int]
    long: tuple[int, int, int]


# Station fields are not read from the header block yet; every report
# carries this station identity.
PLACEHOLDER_STATION = {
    "name": "maxou",
    "city": "LE VIGAN",
    "state": "FRONCE",
    "elevation": 245,
    "lat": (43, 59, 23),
    "long": (3, 36, 4),
}
