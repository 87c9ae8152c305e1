"""GNSS analyzer package for decoding NMEA 0183 GGA and GSV sentences."""

from gnss_analyzer.gnss import GNSSReader
from gnss_analyzer.nmea import (
    FIX_TYPES,
    GNSSData,
    GSVReassembler,
    InvalidDataError,
    NMEAError,
    ParsingError,
    SatelliteInfo,
    SentenceType,
    classify_sentence,
    convert_to_decimal_degrees,
    parse_gga,
    split_fields,
)
from gnss_analyzer.nmea_parser import NMEAParser

__all__ = [
    "FIX_TYPES",
    "GNSSData",
    "GNSSReader",
    "GSVReassembler",
    "InvalidDataError",
    "NMEAError",
    "NMEAParser",
    "ParsingError",
    "SatelliteInfo",
    "SentenceType",
    "classify_sentence",
    "convert_to_decimal_degrees",
    "parse_gga",
    "split_fields",
]
