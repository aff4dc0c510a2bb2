from datetime import time

import pytest

from nmea0183.sentence import (
    NmeaSentence,
    ParsingError,
    SentenceType,
    WrongSentenceHeaderError,
)
from nmea0183.ttm import (
    TtmData,
    TtmDistanceUnit,
    TtmReference,
    TtmStatus,
    TtmTypeOfAcquisition,
    parse_ttm,
)


def ttm(data: str) -> NmeaSentence:
    return NmeaSentence("RA", SentenceType.TTM, data, 0)


def test_parse_ttm_full():
    data = parse_ttm(ttm("00,0.5,187.5,T,12.0,17.6,T,0.0,1.2,N,TGT00,T,,100023.00,A"))
    assert data.target_number == 0
    assert data.target_distance == pytest.approx(0.5)

    bearing = data.bearing_from_own_ship
    assert bearing.angle == pytest.approx(187.5)
    assert bearing.reference is TtmReference.THEORETICAL

    assert data.target_speed == pytest.approx(12.0)

    course = data.target_course
    assert course.angle == pytest.approx(17.6)
    assert course.reference is TtmReference.THEORETICAL

    assert data.distance_of_cpa == pytest.approx(0.0)
    assert data.time_to_cpa == pytest.approx(1.2)
    assert data.speed_or_distance_unit is TtmDistanceUnit.NAUTICAL_MILE
    assert data.target_name == "TGT00"
    assert data.target_status is TtmStatus.TRACKING
    assert data.is_target_reference is False
    assert data.time_of_data == time(10, 0, 23)
    assert data.type_of_acquisition is TtmTypeOfAcquisition.AUTOMATIC


def test_parse_ttm_all_optional():
    assert parse_ttm(ttm(",,,,,,,,,,,,,,")) == TtmData(
        target_number=None,
        target_distance=None,
        bearing_from_own_ship=None,
        target_speed=None,
        target_course=None,
        distance_of_cpa=None,
        time_to_cpa=None,
        speed_or_distance_unit=None,
        target_name=None,
        target_status=None,
        is_target_reference=False,
        time_of_data=None,
        type_of_acquisition=None,
    )


def test_parse_ttm_example_with_reference_target():
    data = parse_ttm(ttm("01,0.2,190.8,R,12.1,109.7,T,0.1,0.5,K,TGT01,L,R,100021.00,M"))
    assert data.target_number == 1
    assert data.bearing_from_own_ship.reference is TtmReference.RELATIVE
    assert data.speed_or_distance_unit is TtmDistanceUnit.KILOMETER
    assert data.target_status is TtmStatus.LOST
    assert data.is_target_reference is True
    assert data.time_of_data == time(10, 0, 21)
    assert data.type_of_acquisition is TtmTypeOfAcquisition.MANUAL


def test_angle_without_reference_is_none():
    data = parse_ttm(ttm("05,1.0,90.0,,3.0,45.0,R,,,,,,,,"))
    assert data.bearing_from_own_ship is None
    assert data.target_course.angle == pytest.approx(45.0)
    assert data.target_course.reference is TtmReference.RELATIVE


def test_target_number_out_of_range():
    with pytest.raises(ParsingError):
        parse_ttm(ttm("100,,,,,,,,,,,,,,"))


def test_target_name_too_long():
    name = "N" * 33
    with pytest.raises(ParsingError):
        parse_ttm(ttm(f",,,,,,,,,,{name},,,,"))


def test_target_name_at_limit():
    name = "N" * 32
    assert parse_ttm(ttm(f",,,,,,,,,,{name},,,,")).target_name == name


def test_wrong_sentence():
    sentence = NmeaSentence("GP", SentenceType.AAM, "", 0)
    with pytest.raises(WrongSentenceHeaderError) as info:
        parse_ttm(sentence)
    assert info.value.expected is SentenceType.TTM
    assert info.value.found is SentenceType.AAM