"""MWV - Wind speed and angle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .fields import Cursor
from .sentence import NmeaSentence, SentenceType


class MwvReference(Enum):
    """Whether the wind is measured relative to the vessel or is theoretical."""

    RELATIVE = "R"
    THEORETICAL = "T"


class MwvWindSpeedUnits(Enum):
    """Unit of the wind speed."""

    KILOMETERS_PER_HOUR = "K"
    METERS_PER_SECOND = "M"
    KNOTS = "N"
    MILES_PER_HOUR = "S"


@dataclass(frozen=True)
class MwvData:
    """Wind angle and speed in relation to the vessel's bow.

    ``$--MWV,x.x,a,x.x,a,a*hh``
    """

    wind_direction: float | None
    reference: MwvReference | None
    wind_speed: float | None
    wind_speed_units: MwvWindSpeedUnits | None
    data_valid: bool


def _comma_then_one_of(chars: str):
    def parse(cursor: Cursor) -> str:
        cursor.expect_char(",")
        return cursor.one_of(chars)

    return parse


def parse_mwv(sentence: NmeaSentence) -> MwvData:
    """Parse the data of an MWV sentence; the status field is required."""
    cursor = Cursor(sentence.require(SentenceType.MWV))
    direction = cursor.optional(Cursor.float)
    reference = cursor.optional(_comma_then_one_of("RT"))
    cursor.expect_char(",")
    speed = cursor.optional(Cursor.float)
    units = cursor.optional(_comma_then_one_of("KMNS"))
    status = _comma_then_one_of("AV")(cursor)
    return MwvData(
        wind_direction=direction,
        reference=None if reference is None else MwvReference(reference),
        wind_speed=speed,
        wind_speed_units=None if units is None else MwvWindSpeedUnits(units),
        data_valid=status == "A",
    )