"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,123519,4807.038,N,11131.000,E,1,08,0.9,545.4,M,,*47
           |      |        | |         | | |  |   |     | |
           |      |        | |         | | |  |   |     | +-- Geoid height (optional)
           |      |        | |         | | |  |   +-----+-- Altitude above MSL
           |      |        | |         | | |  +-- HDOP (horizontal dilution)
           |      |        | |         | | +-- Number of satellites
           |      |        | |         | +-- Fix quality
           |      |        | +---------+-- Longitude (DDDMM.MMMM) + E/W
           |      +--------+-- Latitude (DDMM.MMMM) + N/S
           +-- UTC time (HHMMSS or HHMMSS.ss)

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    Any other code is rejected.

Decoding is eager and not transactional: fields are validated and written to
the snapshot one at a time in the order above, and the first violation stops
the decode. A snapshot whose decode raised must be treated as unreliable.
"""

import datetime as dt
import logging
from collections.abc import Callable, Sequence

from gnss_analyzer.nmea.errors import InvalidDataError, NMEAError, ParsingError
from gnss_analyzer.nmea.fields import (
    convert_to_decimal_degrees,
    parse_float_field,
    parse_int_field,
    parse_utc_time,
)
from gnss_analyzer.nmea.types import FIX_TYPES, GNSSData

__all__ = ["parse_gga"]

logger = logging.getLogger(__name__)

# Tag, time, lat, N/S, lon, E/W, quality, satellites, HDOP, altitude
_MINIMUM_FIELD_COUNT = 10
_MINIMUM_TIME_LENGTH = 6

_MAX_SATELLITES = 50
_MAX_HDOP = 50.0
_MIN_ALTITUDE_METERS = -500.0
_MAX_ALTITUDE_METERS = 10000.0

_LATITUDE_HEMISPHERES = ("N", "S")
_LONGITUDE_HEMISPHERES = ("E", "W")


def _utc_today() -> dt.date:
    return dt.datetime.now(dt.timezone.utc).date()


def _decode_timestamp(
    value: str,
    data: GNSSData,
    today: Callable[[], dt.date],
) -> None:
    """Update ``data.timestamp`` from the UTC time field.

    A field shorter than HHMMSS is an error. A field of the right length that
    does not name a valid time of day leaves the previous timestamp in place.
    """
    if len(value) < _MINIMUM_TIME_LENGTH:
        raise InvalidDataError(f"Invalid UTC time in GGA frame: {value!r}")

    time_of_day = parse_utc_time(value)
    if time_of_day is not None:
        data.timestamp = dt.datetime.combine(today(), time_of_day)


def _decode_coordinate(
    value: str,
    direction: str,
    hemispheres: tuple[str, str],
    name: str,
) -> float:
    try:
        if direction and direction not in hemispheres:
            raise InvalidDataError(f"Unexpected hemisphere indicator {direction!r}")
        return convert_to_decimal_degrees(value, direction)
    except InvalidDataError as exc:
        raise InvalidDataError(f"{name} conversion failed: {exc}") from exc


def _decode_fix_type(value: str) -> str:
    code = parse_int_field(value)
    if code is None:
        raise InvalidDataError(f"Invalid fix quality code: {value!r}")
    if code not in FIX_TYPES:
        raise InvalidDataError(f"Unknown fix quality code: {code}")
    return FIX_TYPES[code]


def _decode_num_satellites(value: str) -> int:
    count = parse_int_field(value)
    if count is None or not 0 <= count <= _MAX_SATELLITES:
        raise InvalidDataError(f"Number of satellites out of range: {value!r}")
    return count


def _decode_hdop(value: str) -> float:
    hdop = parse_float_field(value)
    if hdop is None or not 0.0 < hdop <= _MAX_HDOP:
        raise InvalidDataError(f"HDOP value out of range: {value!r}")
    return hdop


def _decode_altitude(value: str) -> float:
    altitude = parse_float_field(value)
    if altitude is None or not (
        _MIN_ALTITUDE_METERS <= altitude <= _MAX_ALTITUDE_METERS
    ):
        raise InvalidDataError(f"Altitude out of realistic bounds: {value!r}")
    return altitude


def _decode_fields(
    fields: Sequence[str],
    data: GNSSData,
    today: Callable[[], dt.date],
) -> None:
    """Validate GGA fields in order and write each one to the snapshot.

    Maps NMEA field indices to GNSSData attributes:
        fields[1]    -> timestamp (HHMMSS, combined with today's date)
        fields[2:4]  -> latitude_degrees
        fields[4:6]  -> longitude_degrees
        fields[6]    -> fix_type
        fields[7]    -> num_satellites
        fields[8]    -> horizontal_dilution_of_precision
        fields[9]    -> altitude_meters
    """
    if len(fields) < _MINIMUM_FIELD_COUNT:
        raise ParsingError(
            f"GGA frame too short: expected >={_MINIMUM_FIELD_COUNT} fields, "
            f"got {len(fields)}"
        )

    _decode_timestamp(fields[1], data, today)
    data.latitude_degrees = _decode_coordinate(
        fields[2], fields[3], _LATITUDE_HEMISPHERES, "Latitude"
    )
    data.longitude_degrees = _decode_coordinate(
        fields[4], fields[5], _LONGITUDE_HEMISPHERES, "Longitude"
    )
    data.fix_type = _decode_fix_type(fields[6])
    data.num_satellites = _decode_num_satellites(fields[7])
    data.horizontal_dilution_of_precision = _decode_hdop(fields[8])
    data.altitude_meters = _decode_altitude(fields[9])


def parse_gga(
    fields: Sequence[str],
    data: GNSSData,
    *,
    today: Callable[[], dt.date] | None = None,
) -> None:
    """Decode a tokenized GGA sentence into ``data``.

    Args:
        fields: Comma-separated fields of the sentence, tag included
            (e.g. ``["$GPGGA", "123519", "4807.038", "N", ...]``)
        data: Snapshot to update in place
        today: Returns the calendar date combined with the UTC time of day.
            Defaults to the current UTC date.

    Raises:
        ParsingError: If fewer than 10 fields are present
        InvalidDataError: If a field is malformed or out of range. Fields
            decoded before the failing one have already been written.

    Example:
        >>> data = GNSSData()
        >>> line = "$GPGGA,123519,4807.038,N,11131.000,E,1,08,0.9,545.4,M,,*47"
        >>> parse_gga(split_fields(line), data)
        >>> data.fix_type
        'GPS Fix'
        >>> data.longitude_degrees
        111.51666...
    """
    try:
        _decode_fields(fields, data, today or _utc_today)
    except NMEAError as exc:
        logger.warning("GGA decode failed: %s", exc)
        raise
