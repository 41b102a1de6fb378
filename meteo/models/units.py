"""Measurement units of the values in a report, as printed in its header."""

from enum import StrEnum


class TemperatureUnit(StrEnum):
    CELSIUS = "ºC"


class RainUnit(StrEnum):
    MM = "mm"


class WindSpeedUnit(StrEnum):
    KM_HR = "km/hr"
