"""MTW - Mean temperature of water."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .fields import Cursor
from .sentence import NmeaSentence, SentenceType


class MtwUnit(Enum):
    """Unit of the water temperature; only Celsius is defined."""

    CELSIUS = "C"


@dataclass(frozen=True)
class MtwData:
    """Water temperature in degrees Celsius.

    ``$--MTW,x.x,C*hh``
    """

    temperature: float | None = None


def parse_mtw(sentence: NmeaSentence) -> MtwData:
    """Parse the data of an MTW sentence; the unit must be 'C'."""
    cursor = Cursor(sentence.require(SentenceType.MTW))
    temperature = cursor.optional(Cursor.float)
    cursor.expect_char(",")
    cursor.one_of(MtwUnit.CELSIUS.value)
    return MtwData(temperature)