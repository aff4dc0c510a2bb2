"""GSV - Satellites in view."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .fields import Cursor, parse_number_in_range
from .sentence import NmeaSentence, SentenceType, UnknownGnssTypeError

SATELLITES_PER_SENTENCE = 4

_U16_MAX = 0xFFFF
_U32_MAX = 0xFFFF_FFFF
_I32_MAX = 0x7FFF_FFFF


class GnssType(Enum):
    """Satellite navigation system."""

    GALILEO = "Galileo"
    GPS = "Gps"
    GLONASS = "Glonass"
    BEIDOU = "Beidou"
    NAVIC = "NavIC"
    QZSS = "Qzss"


_TALKER_GNSS = {
    "GA": GnssType.GALILEO,
    "GP": GnssType.GPS,
    "GL": GnssType.GLONASS,
    "BD": GnssType.BEIDOU,
    "GB": GnssType.BEIDOU,
    "GI": GnssType.NAVIC,
    "GQ": GnssType.QZSS,
    "PQ": GnssType.QZSS,
    "QZ": GnssType.QZSS,
}


@dataclass(frozen=True)
class Satellite:
    """One satellite in view."""

    gnss_type: GnssType
    prn: int
    elevation: float | None = None
    azimuth: float | None = None
    snr: float | None = None


@dataclass
class GsvData:
    """One sentence of a group reporting the satellites in view.

    ``sats_info`` always holds four entries; unused ones are None.
    """

    gnss_type: GnssType
    number_of_sentences: int
    sentence_num: int
    sats_in_view: int
    sats_info: list[Satellite | None] = field(default_factory=list)


def _number(cursor: Cursor, maximum: int) -> int:
    return parse_number_in_range(cursor, 0, maximum)


def _optional_angle(cursor: Cursor) -> float | None:
    value = cursor.optional(lambda c: _number(c, _I32_MAX))
    return None if value is None else float(value)


def _satellite(cursor: Cursor, gnss_type: GnssType) -> Satellite:
    prn = _number(cursor, _U32_MAX)
    cursor.expect_char(",")
    elevation = _optional_angle(cursor)
    cursor.expect_char(",")
    azimuth = _optional_angle(cursor)
    cursor.expect_char(",")
    snr = _optional_angle(cursor)
    if cursor.rest:
        cursor.expect_char(",")
    return Satellite(gnss_type, prn, elevation, azimuth, snr)


def parse_gsv(sentence: NmeaSentence) -> GsvData:
    """Parse the data of a GSV sentence; the talker id gives the GNSS type."""
    data = sentence.require(SentenceType.GSV)
    gnss_type = _TALKER_GNSS.get(sentence.talker_id)
    if gnss_type is None:
        raise UnknownGnssTypeError(sentence.talker_id)

    cursor = Cursor(data)
    number_of_sentences = _number(cursor, _U16_MAX)
    cursor.expect_char(",")
    sentence_num = _number(cursor, _U16_MAX)
    cursor.expect_char(",")
    sats_in_view = _number(cursor, _U16_MAX)
    cursor.expect_char(",")
    sats_info = [
        cursor.optional(lambda c: _satellite(c, gnss_type))
        for _ in range(SATELLITES_PER_SENTENCE)
    ]
    return GsvData(
        gnss_type=gnss_type,
        number_of_sentences=number_of_sentences,
        sentence_num=sentence_num,
        sats_in_view=sats_in_view,
        sats_info=sats_info,
    )