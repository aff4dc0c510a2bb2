"""VTG - Track made good and ground speed."""

from __future__ import annotations

from dataclasses import dataclass

from .fields import Cursor
from .sentence import NmeaSentence, SentenceType

KNOTS_TO_KMPH = 1.852


@dataclass(frozen=True)
class VtgData:
    """True course and speed over ground in knots.

    ``$--VTG,x.x,T,x.x,M,x.x,N,x.x,K*hh``
    """

    true_course: float | None = None
    speed_over_ground: float | None = None


def parse_vtg(sentence: NmeaSentence) -> VtgData:
    """Parse the data of a VTG sentence.

    The speed in knots is used; when it is empty the speed in km/h is converted.
    """
    cursor = Cursor(sentence.require(SentenceType.VTG))
    true_course = cursor.optional(Cursor.float)
    cursor.expect_char(",")
    cursor.accept_char("T")
    cursor.expect_char(",")
    cursor.optional(Cursor.float)
    cursor.expect_char(",")
    cursor.accept_char("M")
    cursor.expect_char(",")
    knots = cursor.optional(Cursor.float)
    cursor.expect_char(",")
    cursor.accept_char("N")
    kmph = cursor.optional(Cursor.float)
    cursor.expect_char(",")
    cursor.accept_char("K")

    if knots is not None:
        speed = knots
    elif kmph is not None:
        speed = kmph / KNOTS_TO_KMPH
    else:
        speed = None
    return VtgData(true_course=true_course, speed_over_ground=speed)