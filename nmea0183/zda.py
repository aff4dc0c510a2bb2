"""ZDA - Time and date: UTC, day, month, year and local time zone."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

from .fields import Cursor, parse_hms, parse_num, parse_number_in_range
from .sentence import NmeaSentence, SentenceType

_MAX_ZONE_HOURS = 13
_MAX_ZONE_MINUTES = 59


@dataclass(frozen=True)
class ZdaData:
    """UTC time and date together with the local zone.

    ``$--ZDA,hhmmss.ss,xx,xx,xxxx,xx,xx*hh``
    """

    utc_time: time | None = None
    day: int | None = None
    month: int | None = None
    year: int | None = None
    local_zone_hours: int | None = None
    local_zone_minutes: int | None = None

    def utc_date(self) -> date | None:
        """The UTC date, or None if day, month or year is missing or invalid."""
        if self.day is None or self.month is None or self.year is None:
            return None
        try:
            return date(self.year, self.month, self.day)
        except ValueError:
            return None

    def utc_date_time(self) -> datetime | None:
        """The UTC date and time, or None if any part of it is missing."""
        if self.utc_time is None:
            return None
        utc_date = self.utc_date()
        if utc_date is None:
            return None
        return datetime.combine(utc_date, self.utc_time)

    def offset(self) -> timezone | None:
        """The local zone offset, if either zone field is present."""
        hours = self.local_zone_hours
        minutes = self.local_zone_minutes
        if hours is None and minutes is None:
            return None
        seconds = ((hours or 0) * 60 + (minutes or 0)) * 60
        try:
            return timezone(timedelta(seconds=seconds))
        except ValueError:
            return None

    def local_date_time(self) -> datetime | None:
        """The date and time carrying the local zone offset, or None if anything is missing."""
        date_time = self.utc_date_time()
        offset = self.offset()
        if date_time is None or offset is None:
            return None
        return date_time.replace(tzinfo=offset)


def _year(cursor: Cursor) -> int:
    return parse_num(cursor.take(4))


def parse_zda(sentence: NmeaSentence) -> ZdaData:
    """Parse the data of a ZDA sentence; every field may be empty."""
    cursor = Cursor(sentence.require(SentenceType.ZDA))
    utc_time = cursor.optional(parse_hms)
    cursor.expect_char(",")
    day = cursor.optional(lambda c: parse_number_in_range(c, 1, 31))
    cursor.expect_char(",")
    month = cursor.optional(lambda c: parse_number_in_range(c, 1, 12))
    cursor.expect_char(",")
    year = cursor.optional(_year)
    cursor.expect_char(",")
    sign = -1 if cursor.accept_char("-") is not None else 1
    hours = cursor.optional(lambda c: parse_number_in_range(c, 0, _MAX_ZONE_HOURS))
    cursor.expect_char(",")
    minutes = cursor.optional(
        lambda c: parse_number_in_range(c, -_MAX_ZONE_MINUTES, _MAX_ZONE_MINUTES)
    )
    return ZdaData(
        utc_time=utc_time,
        day=day,
        month=month,
        year=year,
        local_zone_hours=None if hours is None else hours * sign,
        local_zone_minutes=None if minutes is None else minutes * sign,
    )