"""ZTG - UTC and time to destination waypoint."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time, timedelta

from .fields import Cursor, array_string, parse_duration_hms, parse_hms
from .sentence import TEXT_PARAMETER_MAX_LEN, NmeaSentence, SentenceType


@dataclass(frozen=True)
class ZtgData:
    """Time of observation and time remaining to the destination waypoint.

    ``$--ZTG,hhmmss.ss,hhmmss.ss,c--c*hh``
    """

    fix_time: time | None = None
    fix_duration: timedelta | None = None
    waypoint_id: str | None = None
    """Destination waypoint id."""


def parse_ztg(sentence: NmeaSentence) -> ZtgData:
    """Parse the data of a ZTG sentence; the waypoint id may hold at most 64 bytes."""
    cursor = Cursor(sentence.require(SentenceType.ZTG))
    fix_time = cursor.optional(parse_hms)
    cursor.expect_char(",")
    fix_duration = cursor.optional(parse_duration_hms)
    cursor.expect_char(",")
    waypoint = cursor.take_while(lambda c: c not in ",*")
    return ZtgData(
        fix_time=fix_time,
        fix_duration=fix_duration,
        waypoint_id=array_string(waypoint, TEXT_PARAMETER_MAX_LEN) if waypoint else None,
    )