"""NMEA 0183 decoders for GGA and GSV sentences."""

from gnss_analyzer.nmea.errors import InvalidDataError, NMEAError, ParsingError
from gnss_analyzer.nmea.fields import convert_to_decimal_degrees
from gnss_analyzer.nmea.gga import parse_gga
from gnss_analyzer.nmea.gsv import GSVReassembler
from gnss_analyzer.nmea.sentence import classify_sentence, split_fields
from gnss_analyzer.nmea.types import (
    FIX_TYPES,
    GNSSData,
    SatelliteInfo,
    SentenceType,
)

__all__ = [
    "FIX_TYPES",
    "GNSSData",
    "GSVReassembler",
    "InvalidDataError",
    "NMEAError",
    "ParsingError",
    "SatelliteInfo",
    "SentenceType",
    "classify_sentence",
    "convert_to_decimal_degrees",
    "parse_gga",
    "split_fields",
]
