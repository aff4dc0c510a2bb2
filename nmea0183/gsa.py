"""GSA - GPS DOP and active satellites."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .fields import Cursor, parse_number_in_range
from .sentence import NmeaSentence, ParsingError, SentenceType

MAX_PRN_FIELDS = 18
"""Number of PRN fields kept; any further fields are dropped."""

_U32_MAX = 0xFFFF_FFFF


class GsaMode1(Enum):
    """Selection mode: manual (forced 2D or 3D) or automatic."""

    MANUAL = "M"
    AUTOMATIC = "A"


class GsaMode2(Enum):
    """Fix mode."""

    NO_FIX = "1"
    FIX_2D = "2"
    FIX_3D = "3"


@dataclass
class GsaData:
    """Dilution of precision and the satellites used in the fix.

    ``$--GSA,a,a,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x.x,x.x,x.x*hh``
    """

    mode1: GsaMode1
    mode2: GsaMode2
    fix_sats_prn: list[int] = field(default_factory=list)
    pdop: float | None = None
    hdop: float | None = None
    vdop: float | None = None


def _prn(cursor: Cursor) -> int:
    return parse_number_in_range(cursor, 0, _U32_MAX)


def _prn_fields(cursor: Cursor) -> list[int | None]:
    """Read ``x,`` fields (each possibly empty) until one does not match."""
    prns: list[int | None] = []
    while True:
        start = cursor.pos
        try:
            prn = cursor.optional(_prn)
            cursor.expect_char(",")
        except ParsingError:
            cursor.pos = start
            return prns
        if len(prns) < MAX_PRN_FIELDS:
            prns.append(prn)


def _tail(cursor: Cursor) -> tuple[list[int | None], float | None, float | None, float | None]:
    rest = cursor.rest
    if rest and set(rest) == {","}:
        # Receivers without a fix may send only empty fields, in any number.
        cursor.pos = len(cursor.text)
        return [], None, None, None
    prns = _prn_fields(cursor)
    pdop = cursor.float()
    cursor.expect_char(",")
    hdop = cursor.float()
    cursor.expect_char(",")
    vdop = cursor.float()
    return prns, pdop, hdop, vdop


def parse_gsa(sentence: NmeaSentence) -> GsaData:
    """Parse the data of a GSA sentence.

    Empty PRN fields are skipped; at most 18 PRN fields are read.
    """
    cursor = Cursor(sentence.require(SentenceType.GSA))
    mode1 = GsaMode1(cursor.one_of("MA"))
    cursor.expect_char(",")
    mode2 = GsaMode2(cursor.one_of("123"))
    cursor.expect_char(",")
    prns, pdop, hdop, vdop = _tail(cursor)
    return GsaData(
        mode1=mode1,
        mode2=mode2,
        fix_sats_prn=[prn for prn in prns if prn is not None],
        pdop=pdop,
        hdop=hdop,
        vdop=vdop,
    )