"""ZFO - UTC and time from origin waypoint."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time, timedelta

from .fields import Cursor, array_string, parse_duration_hms, parse_hms
from .sentence import TEXT_PARAMETER_MAX_LEN, NmeaSentence, SentenceType


@dataclass(frozen=True)
class ZfoData:
    """Time of observation and time elapsed since the origin waypoint.

    ``$--ZFO,hhmmss.ss,hhmmss.ss,c--c*hh``
    """

    fix_time: time | None = None
    fix_duration: timedelta | None = None
    waypoint_id: str | None = None
    """Origin waypoint id."""


def parse_zfo(sentence: NmeaSentence) -> ZfoData:
    """Parse the data of a ZFO sentence; the waypoint id may hold at most 64 bytes."""
    cursor = Cursor(sentence.require(SentenceType.ZFO))
    fix_time = cursor.optional(parse_hms)
    cursor.expect_char(",")
    fix_duration = cursor.optional(parse_duration_hms)
    cursor.expect_char(",")
    waypoint = cursor.take_while(lambda c: c not in ",*")
    return ZfoData(
        fix_time=fix_time,
        fix_duration=fix_duration,
        waypoint_id=array_string(waypoint, TEXT_PARAMETER_MAX_LEN) if waypoint else None,
    )