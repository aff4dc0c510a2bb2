"""TXT - Text transmission."""

from __future__ import annotations

from dataclasses import dataclass

from .fields import Cursor, array_string, parse_number_in_range
from .sentence import TEXT_PARAMETER_MAX_LEN, NmeaSentence, SentenceType

_U8_MAX = 255


@dataclass(frozen=True)
class TxtData:
    """A text message, for example from a u-blox receiver.

    ``$--TXT,xx,xx,xx,c--c*hh``
    """

    count: int
    """Total number of messages in this transmission."""
    seq: int
    """Number of this message within the transmission."""
    text_ident: int
    """Text identifier; u-blox uses it for severity."""
    text: str


def _u8(cursor: Cursor) -> int:
    return parse_number_in_range(cursor, 0, _U8_MAX)


def parse_txt(sentence: NmeaSentence) -> TxtData:
    """Parse the data of a TXT sentence; the text may hold at most 64 bytes."""
    cursor = Cursor(sentence.require(SentenceType.TXT))
    count = _u8(cursor)
    cursor.expect_char(",")
    seq = _u8(cursor)
    cursor.expect_char(",")
    text_ident = _u8(cursor)
    cursor.expect_char(",")
    text = cursor.take_while(lambda c: c not in ",*")
    return TxtData(
        count=count,
        seq=seq,
        text_ident=text_ident,
        text=array_string(text, TEXT_PARAMETER_MAX_LEN),
    )