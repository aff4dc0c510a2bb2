"""Sentence headers, the split form of a sentence and the errors raised while parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

TEXT_PARAMETER_MAX_LEN = 64
"""Longest text field, in UTF-8 bytes, that a sentence may carry."""


class SentenceType(Enum):
    """Three-letter sentence formatter codes."""

    AAM = "AAM"
    ALM = "ALM"
    APA = "APA"
    BOD = "BOD"
    BWC = "BWC"
    BWW = "BWW"
    DBK = "DBK"
    DBS = "DBS"
    DPT = "DPT"
    GBS = "GBS"
    GGA = "GGA"
    GLL = "GLL"
    GNS = "GNS"
    GSA = "GSA"
    GST = "GST"
    GSV = "GSV"
    HDT = "HDT"
    MDA = "MDA"
    MTW = "MTW"
    MWV = "MWV"
    RMC = "RMC"
    RMZ = "RMZ"
    TTM = "TTM"
    TXT = "TXT"
    VHW = "VHW"
    VTG = "VTG"
    WNC = "WNC"
    ZDA = "ZDA"
    ZFO = "ZFO"
    ZTG = "ZTG"


def _type_name(value: object) -> str:
    return value.name if isinstance(value, SentenceType) else str(value)


class NmeaError(Exception):
    """Base class of every error raised while parsing a sentence."""


class ParsingError(NmeaError):
    """A field of the sentence does not have the expected form."""

    def __init__(self, message: str, remaining: str = "", kind: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.remaining = remaining
        self.kind = kind

    def __str__(self) -> str:
        if self.kind:
            return f"{self.message} ({self.kind} at {self.remaining!r})"
        return self.message


class WrongSentenceHeaderError(NmeaError):
    """A sentence was handed to the parser of a different sentence type."""

    def __init__(self, expected: SentenceType, found: SentenceType) -> None:
        super().__init__(
            f"wrong sentence header: expected {_type_name(expected)}, "
            f"found {_type_name(found)}"
        )
        self.expected = expected
        self.found = found


class UnknownGnssTypeError(NmeaError):
    """The talker id names no known satellite system."""

    def __init__(self, talker_id: str) -> None:
        super().__init__(f"unknown GNSS type for talker id {talker_id!r}")
        self.talker_id = talker_id


class UnknownTalkerIdError(NmeaError):
    """The talker id is not the one the sentence requires."""

    def __init__(self, expected: str, found: str) -> None:
        super().__init__(f"unknown talker id: expected {expected!r}, found {found!r}")
        self.expected = expected
        self.found = found


class ParameterLengthError(NmeaError):
    """A text field is longer than allowed."""

    def __init__(self, max_length: int, parameter_length: int) -> None:
        super().__init__(
            f"parameter of length {parameter_length} exceeds the maximum of {max_length}"
        )
        self.max_length = max_length
        self.parameter_length = parameter_length


@dataclass(frozen=True)
class NmeaSentence:
    """A sentence split into talker id, sentence type, data field and checksum."""

    talker_id: str
    message_id: SentenceType
    data: str
    checksum: int = 0

    def require(self, expected: SentenceType) -> str:
        """Return the data field, or raise if the sentence is not of the expected type."""
        if self.message_id != expected:
            raise WrongSentenceHeaderError(expected, self.message_id)
        return self.data