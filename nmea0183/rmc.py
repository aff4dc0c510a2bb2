"""RMC - Recommended minimum navigation information."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from enum import Enum

from .fields import (
    Cursor,
    parse_date,
    parse_hms,
    parse_lat_lon,
    parse_magnetic_variation,
)
from .sentence import NmeaSentence, ParsingError, SentenceType


class FaaMode(Enum):
    """FAA mode indicator (NMEA 2.3 and later)."""

    AUTONOMOUS = "A"
    DIFFERENTIAL = "D"
    ESTIMATED = "E"
    MANUAL = "M"
    DATA_NOT_VALID = "N"
    SIMULATOR = "S"


class RmcStatusOfFix(Enum):
    """Status of the fix."""

    AUTONOMOUS = "A"
    DIFFERENTIAL = "D"
    INVALID = "V"


class RmcNavigationStatus(Enum):
    """Navigation status (NMEA 4.1 and later)."""

    AUTONOMOUS = "A"
    DIFFERENTIAL = "D"
    ESTIMATED = "E"
    MANUAL = "M"
    NOT_VALID = "N"
    SIMULATOR = "S"
    VALID = "V"


@dataclass(frozen=True)
class RmcData:
    """Time, date, position, course and speed of a fix.

    ``$--RMC,hhmmss.ss,A,ddmm.mm,a,dddmm.mm,a,x.x,x.x,xxxx,x.x,a,m,s*hh``
    """

    fix_time: time | None
    fix_date: date | None
    status_of_fix: RmcStatusOfFix
    lat: float | None
    lon: float | None
    speed_over_ground: float | None
    true_course: float | None
    magnetic_variation: float | None
    faa_mode: FaaMode | None
    nav_status: RmcNavigationStatus | None


def _faa_mode(cursor: Cursor) -> FaaMode:
    letter = cursor.take(1)
    try:
        return FaaMode(letter)
    except ValueError:
        raise ParsingError(f"unknown FAA mode {letter!r}", cursor.rest, "MapRes") from None


def _nav_status(cursor: Cursor) -> RmcNavigationStatus:
    return RmcNavigationStatus(cursor.one_of("ADEMNSV"))


def parse_rmc(sentence: NmeaSentence) -> RmcData:
    """Parse the data of an RMC sentence.

    The FAA mode and the navigation status are read only when present.
    """
    cursor = Cursor(sentence.require(SentenceType.RMC))
    fix_time = cursor.optional(parse_hms)
    cursor.expect_char(",")
    status_of_fix = RmcStatusOfFix(cursor.one_of("ADV"))
    cursor.expect_char(",")
    lat_lon = parse_lat_lon(cursor)
    cursor.expect_char(",")
    speed_over_ground = cursor.optional(Cursor.float)
    cursor.expect_char(",")
    true_course = cursor.optional(Cursor.float)
    cursor.expect_char(",")
    fix_date = cursor.optional(parse_date)
    cursor.expect_char(",")
    magnetic_variation = parse_magnetic_variation(cursor)

    faa_mode = None
    if cursor.accept_char(",") is not None:
        faa_mode = cursor.optional(_faa_mode)
    nav_status = None
    if cursor.accept_char(",") is not None:
        nav_status = cursor.optional(_nav_status)

    lat, lon = lat_lon if lat_lon is not None else (None, None)
    return RmcData(
        fix_time=fix_time,
        fix_date=fix_date,
        status_of_fix=status_of_fix,
        lat=lat,
        lon=lon,
        speed_over_ground=speed_over_ground,
        true_course=true_course,
        magnetic_variation=magnetic_variation,
        faa_mode=faa_mode,
        nav_status=nav_status,
    )