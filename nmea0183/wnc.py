"""WNC - Distance, waypoint to waypoint."""

from __future__ import annotations

from dataclasses import dataclass

from .fields import Cursor, array_string
from .sentence import TEXT_PARAMETER_MAX_LEN, NmeaSentence, SentenceType


@dataclass(frozen=True)
class WncData:
    """Distance between two waypoints.

    ``$--WNC,x.x,N,x.x,K,c--c,c--c*hh``
    """

    distance_nautical_miles: float | None = None
    distance_kilometers: float | None = None
    waypoint_id_destination: str | None = None
    waypoint_id_origin: str | None = None


def _waypoint_id(cursor: Cursor) -> str | None:
    text = cursor.take_while(lambda c: c != ",")
    if not text:
        return None
    return array_string(text, TEXT_PARAMETER_MAX_LEN)


def do_parse_wnc(data: str) -> WncData:
    """Parse the data field of a WNC sentence."""
    cursor = Cursor(data)
    nautical_miles = cursor.optional(Cursor.float)
    cursor.expect_char(",")
    cursor.accept_char("N")
    cursor.expect_char(",")
    kilometers = cursor.optional(Cursor.float)
    cursor.expect_char(",")
    cursor.accept_char("K")
    cursor.expect_char(",")
    destination = _waypoint_id(cursor)
    cursor.expect_char(",")
    origin = _waypoint_id(cursor)
    return WncData(
        distance_nautical_miles=nautical_miles,
        distance_kilometers=kilometers,
        waypoint_id_destination=destination,
        waypoint_id_origin=origin,
    )


def parse_wnc(sentence: NmeaSentence) -> WncData:
    """Parse a WNC sentence; waypoint ids may hold at most 64 bytes."""
    return do_parse_wnc(sentence.require(SentenceType.WNC))