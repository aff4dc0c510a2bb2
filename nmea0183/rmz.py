"""PGRMZ - Garmin altitude."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .fields import Cursor, parse_number_in_range
from .sentence import NmeaSentence, SentenceType, UnknownTalkerIdError

_U32_MAX = 0xFFFF_FFFF
_GARMIN_TALKER = "PG"


class PgrmzFixType(Enum):
    """Kind of position fix."""

    NO_FIX = "1"
    TWO_DIMENSIONAL = "2"
    THREE_DIMENSIONAL = "3"


@dataclass(frozen=True)
class PgrmzData:
    """Current altitude in feet and the fix type.

    ``$PGRMZ,hhh,f,M*hh``
    """

    altitude: int
    fix_type: PgrmzFixType


def parse_pgrmz(sentence: NmeaSentence) -> PgrmzData:
    """Parse the data of a PGRMZ sentence; the talker id must be 'PG'."""
    data = sentence.require(SentenceType.RMZ)
    if sentence.talker_id != _GARMIN_TALKER:
        raise UnknownTalkerIdError(_GARMIN_TALKER, sentence.talker_id)
    cursor = Cursor(data)
    altitude = parse_number_in_range(cursor, 0, _U32_MAX)
    cursor.expect_char(",")
    cursor.expect_char("f")
    cursor.expect_char(",")
    fix_type = PgrmzFixType(cursor.one_of("123"))
    return PgrmzData(altitude, fix_type)