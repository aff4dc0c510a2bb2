"""Parsers for the data fields of NMEA 0183 sentences, one module per sentence type."""

__version__ = "0.7.0"