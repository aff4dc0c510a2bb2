"""VHW - Water speed and heading."""

from __future__ import annotations

from dataclasses import dataclass

from .fields import Cursor, parse_float_num
from .sentence import NmeaSentence, SentenceType


@dataclass(frozen=True)
class VhwData:
    """Heading of the vessel and its speed through the water.

    ``$--VHW,x.x,T,x.x,M,x.x,N,x.x,K*hh``
    """

    heading_true: float | None = None
    """Heading, degrees true."""
    heading_magnetic: float | None = None
    """Heading, degrees magnetic."""
    relative_speed_knots: float | None = None
    """Speed relative to the water, knots."""
    relative_speed_kmph: float | None = None
    """Speed relative to the water, km/h."""


def _float_until_comma(cursor: Cursor) -> float:
    return parse_float_num(cursor.take_until(","))


def _float_with_unit(cursor: Cursor, unit: str) -> float | None:
    """Read ``x.x,u``; the value counts only if the unit letter is present."""
    value = cursor.optional(_float_until_comma)
    cursor.expect_char(",")
    if cursor.accept_char(unit) is None:
        return None
    return value


def parse_vhw(sentence: NmeaSentence) -> VhwData:
    """Parse the data of a VHW sentence.

    A value whose unit letter is missing or wrong is reported as None.
    """
    cursor = Cursor(sentence.require(SentenceType.VHW))
    values: list[float | None] = []
    for index, unit in enumerate("TMNK"):
        if index:
            cursor.expect_char(",")
        values.append(_float_with_unit(cursor, unit))
    return VhwData(*values)