"""HDT - Heading, true."""

from __future__ import annotations

from dataclasses import dataclass

from .fields import Cursor, parse_float_num
from .sentence import NmeaSentence, SentenceType


@dataclass(frozen=True)
class HdtData:
    """True heading of the vessel.

    ``$--HDT,x.x,T*hh``
    """

    heading: float | None = None


def _float_until_comma(cursor: Cursor) -> float:
    return parse_float_num(cursor.take_until(","))


def parse_hdt(sentence: NmeaSentence) -> HdtData:
    """Parse the data of an HDT sentence.

    The heading may be empty; the field after it must be 'T'.
    """
    cursor = Cursor(sentence.require(SentenceType.HDT))
    heading = cursor.optional(_float_until_comma)
    cursor.expect_char(",")
    cursor.expect_char("T")
    return HdtData(heading)