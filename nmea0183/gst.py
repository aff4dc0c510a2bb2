"""GST - GPS pseudorange noise statistics."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from .fields import Cursor, parse_hms
from .sentence import NmeaSentence, SentenceType


@dataclass(frozen=True)
class GstData:
    """Error statistics of a fix.

    ``$--GST,hhmmss.ss,x,x,x,x,x,x,x*hh``
    """

    time: time | None
    rms_sd: float | None
    ellipse_semi_major_sd: float | None
    ellipse_semi_minor_sd: float | None
    err_ellipse_orientation: float | None
    lat_sd: float | None
    long_sd: float | None
    alt_sd: float | None


def parse_gst(sentence: NmeaSentence) -> GstData:
    """Parse the data of a GST sentence; every field may be empty."""
    cursor = Cursor(sentence.require(SentenceType.GST))
    fix_time = cursor.optional(parse_hms)
    values: list[float | None] = []
    for _ in range(7):
        cursor.expect_char(",")
        values.append(cursor.optional(Cursor.float))
    return GstData(fix_time, *values)