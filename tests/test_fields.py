from datetime import date, time, timedelta

import pytest

from nmea0183.fields import (
    Cursor,
    array_string,
    do_parse_lat_lon,
    do_parse_magnetic_variation,
    parse_date,
    parse_duration_hms,
    parse_float_num,
    parse_hms,
    parse_lat_lon,
    parse_magnetic_variation,
    parse_num,
    parse_number_in_range,
)
from nmea0183.sentence import (
    TEXT_PARAMETER_MAX_LEN,
    ParameterLengthError,
    ParsingError,
)


def run(parser, text):
    cursor = Cursor(text)
    return parser(cursor), cursor.rest


def test_do_parse_lat_lon():
    (lat, lon), _ = run(do_parse_lat_lon, "4807.038,N,01131.324,E")
    assert lat == pytest.approx(48.0 + 7.038 / 60.0)
    assert lon == pytest.approx(11.0 + 31.324 / 60.0)


def test_do_parse_lat_lon_south_west_is_negative():
    (lat, lon), rest = run(do_parse_lat_lon, "1234.567,S,09876.543,W,")
    assert lat == pytest.approx(-(12.0 + 34.567 / 60.0))
    assert lon == pytest.approx(-(98.0 + 76.543 / 60.0))
    assert rest == ","


def test_parse_hms():
    value, rest = run(parse_hms, "125619,")
    assert value == time(12, 56, 19)
    assert value.microsecond == 0
    assert rest == ","

    value, _ = run(parse_hms, "125619.5,")
    assert (value.hour, value.minute, value.second) == (12, 56, 19)
    assert value.microsecond == 500_000


def test_parse_hms_rejects_invalid_hour_and_restores_position():
    cursor = Cursor("255619,")
    with pytest.raises(ParsingError) as info:
        parse_hms(cursor)
    assert info.value.message == "Invalid time: hour >= 24"
    assert cursor.pos == 0


def test_parse_hms_requires_comma():
    with pytest.raises(ParsingError):
        parse_hms(Cursor("125619"))


def test_parse_duration_hms():
    value, _ = run(parse_duration_hms, "125619,")
    assert value == timedelta(hours=12, minutes=56, seconds=19)
    assert value.total_seconds() == 12 * 60 * 60 + 56 * 60 + 19

    value, _ = run(parse_duration_hms, "125619.5,")
    assert value == timedelta(hours=12, minutes=56, seconds=19, milliseconds=500)


def test_parse_duration_hms_rejects_minutes_over_range():
    with pytest.raises(ParsingError) as info:
        parse_duration_hms(Cursor("126019,"))
    assert info.value.message == "Invalid time: minutes >= 60"


def test_parse_date():
    assert run(parse_date, "180283")[0] == date(1983, 2, 18)
    assert run(parse_date, "180299")[0] == date(1999, 2, 18)
    assert run(parse_date, "311200")[0] == date(2000, 12, 31)
    assert run(parse_date, "311282")[0] == date(2082, 12, 31)


def test_parse_date_rejects_bad_month():
    with pytest.raises(ParsingError) as info:
        parse_date(Cursor("181383"))
    assert info.value.message == "Invalid month < 1 or > 12"


def test_parse_magnetic_variation():
    value, _ = run(parse_magnetic_variation, "12,E")
    assert value == pytest.approx(12.0)
    value, _ = run(parse_magnetic_variation, "12,W")
    assert value == pytest.approx(-12.0)

    assert run(parse_magnetic_variation, ",")[0] is None
    assert run(parse_magnetic_variation, ",,")[0] is None
    assert run(parse_magnetic_variation, ",W")[0] is None

    with pytest.raises(ParsingError):
        parse_magnetic_variation(Cursor("12,"))
    with pytest.raises(ParsingError):
        parse_magnetic_variation(Cursor("12,Q"))


def test_do_parse_magnetic_variation_west():
    value, rest = run(do_parse_magnetic_variation, "14.2,W,A")
    assert value == pytest.approx(-14.2)
    assert rest == ",A"


def test_parse_array_string():
    assert array_string("12345", 5) == "12345"
    with pytest.raises(ParameterLengthError) as info:
        array_string("123456", 5)
    assert info.value.max_length == 5
    assert info.value.parameter_length == 6


def test_array_string_at_text_limit():
    assert array_string("A" * TEXT_PARAMETER_MAX_LEN, TEXT_PARAMETER_MAX_LEN) == "A" * 64
    with pytest.raises(ParameterLengthError) as info:
        array_string("A" * 72, TEXT_PARAMETER_MAX_LEN)
    assert (info.value.max_length, info.value.parameter_length) == (64, 72)


def test_parse_number_in_range():
    assert run(lambda c: parse_number_in_range(c, 10, 20), "12")[0] == 12

    with pytest.raises(ParsingError) as info:
        parse_number_in_range(Cursor("9"), 10, 20)
    assert info.value.remaining == "9"
    assert info.value.kind == "MapRes"

    with pytest.raises(ParsingError) as info:
        parse_number_in_range(Cursor("21"), 10, 20)
    assert info.value.remaining == "21"
    assert info.value.kind == "MapRes"


def test_parse_number():
    assert parse_num("12") == 12
    with pytest.raises(ParsingError) as info:
        parse_num("12.5")
    assert info.value.message == "parse of number failed"


def test_parse_float_num():
    assert parse_float_num("12.5") == 12.5
    assert parse_float_num("12") == 12.0
    with pytest.raises(ParsingError) as info:
        parse_float_num("12.5.5")
    assert info.value.message == "parse of float number failed"


def test_parse_lat_lon():
    assert run(parse_lat_lon, "4807.038,N,01131.324,E")[0] is not None
    value, rest = run(parse_lat_lon, ",,,,")
    assert value is None
    assert rest == ","

    with pytest.raises(ParsingError) as info:
        parse_lat_lon(Cursor("51.5074,0.1278"))
    assert info.value.remaining == "0.1278"
    assert info.value.kind == "OneOf"

    assert run(parse_lat_lon, "1234.567,N,09876.543,W")[0] is not None
    assert run(parse_lat_lon, "0000.000,S,00000.000,E")[0] is not None
    assert run(parse_lat_lon, "1234.567,S,09876.543,E")[0] is not None

    with pytest.raises(ParsingError):
        parse_lat_lon(Cursor("40.7128,"))

    with pytest.raises(ParsingError) as info:
        parse_lat_lon(Cursor(", -74.0060"))
    assert info.value.remaining == ", -74.0060"
    assert info.value.kind == "MapRes"

    with pytest.raises(ParsingError) as info:
        parse_lat_lon(Cursor("abc,def"))
    assert info.value.remaining == "abc,def"
    assert info.value.kind == "MapRes"


def test_cursor_expect_char_leaves_position_on_failure():
    cursor = Cursor("A,B")
    assert cursor.expect_char("A") == "A"
    with pytest.raises(ParsingError):
        cursor.expect_char("B")
    assert cursor.rest == ",B"


def test_cursor_accept_char():
    cursor = Cursor(",x")
    assert cursor.accept_char("x") is None
    assert cursor.accept_char(",") == ","
    assert cursor.rest == "x"


def test_cursor_one_of():
    cursor = Cursor("M,3")
    assert cursor.one_of("MA") == "M"
    with pytest.raises(ParsingError) as info:
        cursor.one_of("123")
    assert info.value.kind == "OneOf"
    assert cursor.rest == ",3"


def test_cursor_take_and_take_until():
    cursor = Cursor("abcd,ef")
    assert cursor.take(2) == "ab"
    assert cursor.take_until(",") == "cd"
    assert cursor.rest == ",ef"
    with pytest.raises(ParsingError):
        cursor.take(10)
    with pytest.raises(ParsingError):
        cursor.take_until("*")
    assert cursor.rest == ",ef"


def test_cursor_take_while():
    cursor = Cursor("text,more")
    assert cursor.take_while(lambda c: c != ",") == "text"
    assert cursor.take_while(lambda c: c != ",") == ""
    assert cursor.rest == ",more"


def test_cursor_float_and_number():
    cursor = Cursor("-1.5e2,42,")
    assert cursor.float() == -150.0
    cursor.expect_char(",")
    assert cursor.number() == 42
    assert cursor.rest == ","
    with pytest.raises(ParsingError):
        cursor.number()
    with pytest.raises(ParsingError):
        cursor.float()


def test_cursor_optional_restores_position():
    cursor = Cursor("25xx,")
    assert cursor.optional(parse_hms) is None
    assert cursor.pos == 0
    assert cursor.optional(Cursor.number) == 25
    assert cursor.rest == "xx,"
    assert Cursor(",").optional(Cursor.float) is None