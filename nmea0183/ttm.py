"""TTM - Tracked target message."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from enum import Enum

from .fields import Cursor, parse_float_num, parse_hms, parse_number_in_range
from .sentence import NmeaSentence, ParsingError, SentenceType

MAX_TARGET_NAME_LEN = 32
"""Longest target name, in UTF-8 bytes."""


class TtmReference(Enum):
    """Reference of a bearing or course."""

    RELATIVE = "R"
    THEORETICAL = "T"


@dataclass(frozen=True)
class TtmAngle:
    """An angle in degrees together with its reference."""

    angle: float
    reference: TtmReference


class TtmDistanceUnit(Enum):
    """Unit used for speed and distance."""

    KILOMETER = "K"
    NAUTICAL_MILE = "N"
    STATUTE_MILE = "S"


class TtmStatus(Enum):
    """Tracking status of the target."""

    LOST = "L"
    """Tracked target has been lost."""
    QUERY = "Q"
    """Target in the process of acquisition."""
    TRACKING = "T"
    """Target is being tracked."""


class TtmTypeOfAcquisition(Enum):
    """How the target was acquired."""

    AUTOMATIC = "A"
    MANUAL = "M"
    REPORTED = "R"


@dataclass(frozen=True)
class TtmData:
    """A target tracked by radar.

    ``$--TTM,xx,x.x,x.x,a,x.x,x.x,a,x.x,x.x,a,c--c,a,a,hhmmss.ss,a*hh``
    """

    target_number: int | None = None
    target_distance: float | None = None
    bearing_from_own_ship: TtmAngle | None = None
    target_speed: float | None = None
    target_course: TtmAngle | None = None
    distance_of_cpa: float | None = None
    """Distance of the closest point of approach."""
    time_to_cpa: float | None = None
    """Time until the closest point of approach."""
    speed_or_distance_unit: TtmDistanceUnit | None = None
    target_name: str | None = None
    target_status: TtmStatus | None = None
    is_target_reference: bool = False
    """True if the target is used to determine own-ship position or velocity."""
    time_of_data: time | None = None
    type_of_acquisition: TtmTypeOfAcquisition | None = None


def _float_until_comma(cursor: Cursor) -> float:
    return parse_float_num(cursor.take_until(","))


def _optional_letter(cursor: Cursor, chars: str) -> str | None:
    return cursor.optional(lambda c: c.one_of(chars))


def _target_number(cursor: Cursor) -> int:
    return parse_number_in_range(cursor, 0, 99)


def _angle(cursor: Cursor) -> TtmAngle | None:
    angle = cursor.optional(_float_until_comma)
    cursor.expect_char(",")
    reference = _optional_letter(cursor, "RT")
    if angle is None or reference is None:
        return None
    return TtmAngle(angle, TtmReference(reference))


def parse_ttm(sentence: NmeaSentence) -> TtmData:
    """Parse the data of a TTM sentence; every field may be empty."""
    cursor = Cursor(sentence.require(SentenceType.TTM))

    target_number = cursor.optional(_target_number)
    cursor.expect_char(",")
    target_distance = cursor.optional(_float_until_comma)
    cursor.expect_char(",")
    bearing = _angle(cursor)
    cursor.expect_char(",")
    target_speed = cursor.optional(_float_until_comma)
    cursor.expect_char(",")
    target_course = _angle(cursor)
    cursor.expect_char(",")
    distance_of_cpa = cursor.optional(_float_until_comma)
    cursor.expect_char(",")
    time_to_cpa = cursor.optional(_float_until_comma)
    cursor.expect_char(",")

    unit = _optional_letter(cursor, "KNS")
    cursor.expect_char(",")

    name = cursor.take_until(",")
    cursor.expect_char(",")
    if len(name.encode("utf-8")) > MAX_TARGET_NAME_LEN:
        raise ParsingError(
            f"target name is longer than {MAX_TARGET_NAME_LEN} bytes",
            cursor.rest,
            "Fail",
        )

    status = _optional_letter(cursor, "LQT")
    cursor.expect_char(",")
    is_reference = _optional_letter(cursor, "R") is not None
    cursor.expect_char(",")
    time_of_data = cursor.optional(parse_hms)
    cursor.expect_char(",")
    acquisition = _optional_letter(cursor, "AMR")

    return TtmData(
        target_number=target_number,
        target_distance=target_distance,
        bearing_from_own_ship=bearing,
        target_speed=target_speed,
        target_course=target_course,
        distance_of_cpa=distance_of_cpa,
        time_to_cpa=time_to_cpa,
        speed_or_distance_unit=None if unit is None else TtmDistanceUnit(unit),
        target_name=name or None,
        target_status=None if status is None else TtmStatus(status),
        is_target_reference=is_reference,
        time_of_data=time_of_data,
        type_of_acquisition=(
            None if acquisition is None else TtmTypeOfAcquisition(acquisition)
        ),
    )