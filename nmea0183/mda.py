"""MDA - Meteorological composite."""

from __future__ import annotations

from dataclasses import dataclass

from .fields import Cursor
from .sentence import NmeaSentence, SentenceType


@dataclass(frozen=True)
class MdaData:
    """Weather readings.

    ``$--MDA,n.nn,I,n.nnn,B,n.n,C,n.C,n.n,n,n.n,C,n.n,T,n.n,M,n.n,N,n.n,M*hh``
    """

    pressure_in_hg: float | None = None
    """Pressure in inches of mercury."""
    pressure_bar: float | None = None
    """Pressure in bars."""
    air_temp_deg: float | None = None
    """Air temperature, degrees Celsius."""
    water_temp_deg: float | None = None
    """Water temperature, degrees Celsius."""
    rel_humidity: float | None = None
    """Relative humidity, percent."""
    abs_humidity: float | None = None
    """Absolute humidity, percent."""
    dew_point: float | None = None
    """Dew point, degrees Celsius."""
    wind_direction_true: float | None = None
    """True wind direction, degrees."""
    wind_direction_magnetic: float | None = None
    """Magnetic wind direction, degrees."""
    wind_speed_knots: float | None = None
    """Wind speed, knots."""
    wind_speed_ms: float | None = None
    """Wind speed, metres per second."""


# Each value field and the unit letter that may follow it in its own field.
_FIELDS: tuple[tuple[str, str | None], ...] = (
    ("pressure_in_hg", "I"),
    ("pressure_bar", "B"),
    ("air_temp_deg", "C"),
    ("water_temp_deg", "C"),
    ("rel_humidity", None),
    ("abs_humidity", None),
    ("dew_point", "C"),
    ("wind_direction_true", "T"),
    ("wind_direction_magnetic", "M"),
    ("wind_speed_knots", "N"),
    ("wind_speed_ms", "M"),
)


def parse_mda(sentence: NmeaSentence) -> MdaData:
    """Parse the data of an MDA sentence; every value and unit may be empty."""
    cursor = Cursor(sentence.require(SentenceType.MDA))
    values: dict[str, float | None] = {}
    for index, (name, unit) in enumerate(_FIELDS):
        if index:
            cursor.expect_char(",")
        values[name] = cursor.optional(Cursor.float)
        if unit is not None:
            cursor.expect_char(",")
            cursor.accept_char(unit)
    return MdaData(**values)