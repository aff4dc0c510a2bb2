"""Field-level parsers shared by the sentence parsers."""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import date, time, timedelta
from itertools import takewhile
from typing import TypeVar

from .sentence import ParameterLengthError, ParsingError

T = TypeVar("T")

_DIGITS = re.compile(r"[0-9]+")
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|nan|infinity|inf",
    re.IGNORECASE,
)
_FLOAT_WHOLE = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|infinity|inf|nan)",
    re.IGNORECASE,
)
_UNSIGNED = re.compile(r"\+?[0-9]+")
_U8_MAX = 255


class Cursor:
    """A read position within a sentence's data field.

    Every method consumes what it matched and returns it; on a mismatch it
    raises ParsingError and leaves the position where it was.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def __repr__(self) -> str:
        return f"Cursor(rest={self.rest!r})"

    @property
    def rest(self) -> str:
        """The text not yet consumed."""
        return self.text[self.pos:]

    def _error(self, kind: str, message: str) -> ParsingError:
        return ParsingError(message, self.rest, kind)

    def expect_char(self, char: str) -> str:
        """Consume the given character or raise."""
        if self.pos < len(self.text) and self.text[self.pos] == char:
            self.pos += 1
            return char
        raise self._error("Char", f"expected {char!r}")

    def accept_char(self, char: str) -> str | None:
        """Consume the given character if it comes next."""
        if self.pos < len(self.text) and self.text[self.pos] == char:
            self.pos += 1
            return char
        return None

    def one_of(self, chars: str) -> str:
        """Consume one character that is among the given ones."""
        if self.pos < len(self.text) and self.text[self.pos] in chars:
            found = self.text[self.pos]
            self.pos += 1
            return found
        raise self._error("OneOf", f"expected one of {chars!r}")

    def take(self, count: int) -> str:
        """Consume exactly count characters."""
        if len(self.text) - self.pos < count:
            raise self._error("Eof", f"expected {count} more characters")
        chunk = self.text[self.pos:self.pos + count]
        self.pos += count
        return chunk

    def take_until(self, stop: str) -> str:
        """Consume everything before the next occurrence of stop."""
        index = self.text.find(stop, self.pos)
        if index < 0:
            raise self._error("TakeUntil", f"{stop!r} not found")
        chunk = self.text[self.pos:index]
        self.pos = index
        return chunk

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume the longest run of characters that satisfy predicate."""
        chunk = "".join(takewhile(predicate, self.rest))
        self.pos += len(chunk)
        return chunk

    def float(self) -> float:
        """Consume a floating point number."""
        match = _FLOAT_PREFIX.match(self.text, self.pos)
        if match is None:
            raise self._error("Float", "expected a floating point number")
        self.pos = match.end()
        return float(match.group())

    def number(self) -> int:
        """Consume a run of decimal digits as a non-negative integer."""
        match = _DIGITS.match(self.text, self.pos)
        if match is None:
            raise self._error("Digit", "expected a number")
        self.pos = match.end()
        return int(match.group())

    def optional(self, parser: Callable[[Cursor], T]) -> T | None:
        """Run parser; on failure restore the position and return None."""
        start = self.pos
        try:
            return parser(self)
        except ParsingError:
            self.pos = start
            return None


@contextmanager
def _atomic(cursor: Cursor) -> Iterator[int]:
    start = cursor.pos
    try:
        yield start
    except ParsingError:
        cursor.pos = start
        raise


def _invalid(cursor: Cursor, start: int, message: str) -> ParsingError:
    return ParsingError(message, cursor.text[start:], "MapRes")


def _take_num(cursor: Cursor, count: int) -> int:
    start = cursor.pos
    chunk = cursor.take(count)
    try:
        value = parse_num(chunk)
    except ParsingError as exc:
        cursor.pos = start
        raise _invalid(cursor, start, exc.message) from None
    if value > _U8_MAX:
        cursor.pos = start
        raise _invalid(cursor, start, "parse of number failed")
    return value


def _round_half_away(value: float) -> int:
    return math.floor(value + 0.5)


def parse_num(text: str) -> int:
    """Parse an unsigned decimal integer, optionally prefixed by '+'."""
    if _UNSIGNED.fullmatch(text) is None:
        raise ParsingError("parse of number failed")
    return int(text)


def parse_float_num(text: str) -> float:
    """Parse a whole string as a floating point number."""
    if _FLOAT_WHOLE.fullmatch(text) is None:
        raise ParsingError("parse of float number failed")
    return float(text)


def parse_number_in_range(cursor: Cursor, lower: int, upper: int) -> int:
    """Parse a number and require lower <= number <= upper."""
    with _atomic(cursor) as start:
        value = cursor.number()
        if value < lower or value > upper:
            raise _invalid(
                cursor, start, "Parsed number is outside of the expected range"
            )
        return value


def _seconds_field(cursor: Cursor) -> float:
    return Cursor(cursor.take_until(",")).float()


def parse_hms(cursor: Cursor) -> time:
    """Parse an ``hhmmss.ss`` time of day that runs up to the next comma."""
    with _atomic(cursor) as start:
        hour = _take_num(cursor, 2)
        minute = _take_num(cursor, 2)
        seconds = _seconds_field(cursor)
        if math.copysign(1.0, seconds) < 0:
            raise _invalid(cursor, start, "Invalid time: second is negative")
        if hour >= 24:
            raise _invalid(cursor, start, "Invalid time: hour >= 24")
        if minute >= 60:
            raise _invalid(cursor, start, "Invalid time: min >= 60")
        if seconds >= 60.0:
            raise _invalid(cursor, start, "Invalid time: sec >= 60")
        if math.isnan(seconds):
            whole, nanos = 0, 0
        else:
            whole = int(seconds)
            nanos = _round_half_away((seconds - whole) * 1_000_000_000)
        return time(hour, minute, whole, min(nanos // 1000, 999_999))


def parse_duration_hms(cursor: Cursor) -> timedelta:
    """Parse an ``hhmmss.ss`` elapsed time, up to the next comma, to milliseconds."""
    with _atomic(cursor) as start:
        hours = _take_num(cursor, 2)
        minutes = _take_num(cursor, 2)
        seconds = _seconds_field(cursor)
        if hours >= 24:
            raise _invalid(cursor, start, "Invalid time: hours >= 24")
        if minutes >= 60:
            raise _invalid(cursor, start, "Invalid time: minutes >= 60")
        if not math.isfinite(seconds):
            raise _invalid(cursor, start, "Invalid time: seconds is not finite")
        if seconds < 0.0:
            raise _invalid(cursor, start, "Invalid time: seconds is negative")
        if seconds >= 60.0:
            raise _invalid(cursor, start, "Invalid time: seconds >= 60")
        whole = int(seconds)
        millis = _round_half_away((seconds - whole) * 1000)
        return timedelta(
            milliseconds=hours * 3_600_000 + minutes * 60_000 + whole * 1000 + millis
        )


def do_parse_lat_lon(cursor: Cursor) -> tuple[float, float]:
    """Parse ``ddmm.mm,N|S,dddmm.mm,E|W`` into signed decimal degrees."""
    with _atomic(cursor):
        lat_deg = _take_num(cursor, 2)
        lat_min = cursor.float()
        cursor.expect_char(",")
        lat_dir = cursor.one_of("NS")
        cursor.expect_char(",")
        lon_deg = _take_num(cursor, 3)
        lon_min = cursor.float()
        cursor.expect_char(",")
        lon_dir = cursor.one_of("EW")

    lat = lat_deg + lat_min / 60.0
    if lat_dir == "S":
        lat = -lat
    lon = lon_deg + lon_min / 60.0
    if lon_dir == "W":
        lon = -lon
    return lat, lon


def parse_lat_lon(cursor: Cursor) -> tuple[float, float] | None:
    """Parse a position, or None when its four fields are empty."""
    if cursor.text.startswith(",,,", cursor.pos):
        cursor.pos += 3
        return None
    return do_parse_lat_lon(cursor)


def do_parse_magnetic_variation(cursor: Cursor) -> float:
    """Parse ``x.x,E|W``; westerly variation is negative."""
    with _atomic(cursor):
        variation = cursor.float()
        cursor.expect_char(",")
        direction = cursor.one_of("EW")
    return variation if direction == "E" else -variation


def parse_magnetic_variation(cursor: Cursor) -> float | None:
    """Parse a magnetic variation, or None when its value field is empty."""
    if cursor.accept_char(",") is not None:
        return None
    return do_parse_magnetic_variation(cursor)


def parse_date(cursor: Cursor) -> date:
    """Parse a ``ddmmyy`` date; years 83-99 are 19xx, all others 20xx."""
    with _atomic(cursor) as start:
        day = _take_num(cursor, 2)
        month = _take_num(cursor, 2)
        year = _take_num(cursor, 2)
        year += 1900 if 83 <= year <= 99 else 2000
        if not 1 <= month <= 12:
            raise _invalid(cursor, start, "Invalid month < 1 or > 12")
        if not 1 <= day <= 31:
            raise _invalid(cursor, start, "Invalid day < 1 or > 31")
        try:
            return date(year, month, day)
        except ValueError:
            raise _invalid(cursor, start, "Invalid date") from None


def array_string(text: str, max_length: int) -> str:
    """Return text if its UTF-8 length fits max_length, else raise."""
    length = len(text.encode("utf-8"))
    if length > max_length:
        raise ParameterLengthError(max_length, length)
    return text