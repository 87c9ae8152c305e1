"""NMEA field parsing utilities.

This module provides utilities for parsing individual fields from NMEA sentences.
NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). The ``parse_*_field`` helpers return None for empty or
unparseable input so callers can decide whether a missing value is an error.
The coordinate converter, by contrast, raises InvalidDataError: a position
field that cannot be read is never silently replaced by a default.
"""

import datetime as dt
import math

from gnss_analyzer.nmea.errors import InvalidDataError

# Width of the integer degree prefix, by hemisphere.
# Latitude is DDMM.MMMM, longitude is DDDMM.MMMM.
_DEGREE_DIGITS = {"N": 2, "S": 2, "E": 3, "W": 3}

# Hemispheres that make the decimal value negative
_NEGATIVE_HEMISPHERES = ("S", "W")


def parse_float_field(value: str) -> float | None:
    """Parse a string field to float, returning None if empty or invalid.

    NMEA fields may be empty (indicated by consecutive commas like ",,").
    This function treats empty strings as "no data" rather than an error.
    Non-finite values ("nan", "inf") are not valid NMEA and also give None.

    Args:
        value: String value from an NMEA field

    Returns:
        Parsed float value, or None if the field is empty or unparseable

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("")  # empty field
        None
    """
    if not value:
        return None
    try:
        result = float(value)
    except ValueError:
        return None
    if not math.isfinite(result):
        return None
    return result


def parse_int_field(value: str) -> int | None:
    """Parse a string field to int, returning None if empty or invalid.

    Similar to parse_float_field but for integer values like satellite count,
    fix quality indicators or PRN numbers.

    Args:
        value: String value from an NMEA field

    Returns:
        Parsed integer value, or None if the field is empty or unparseable

    Example:
        >>> parse_int_field("08")
        8
        >>> parse_int_field("")
        None
    """
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_utc_time(value: str) -> dt.time | None:
    """Parse the HHMMSS prefix of an NMEA time field into a UTC time of day.

    Any fractional seconds after the first six characters are ignored.

    Args:
        value: Time field in HHMMSS or HHMMSS.ss format

    Returns:
        A timezone-aware ``datetime.time``, or None if the field is shorter
        than six characters, contains non-digits in HHMMSS, or does not name
        a valid time of day (e.g. "256000")

    Example:
        >>> parse_utc_time("123519.00")
        datetime.time(12, 35, 19, tzinfo=datetime.timezone.utc)
        >>> parse_utc_time("996000")
        None
    """
    digits = value[:6]
    if len(digits) < 6 or not digits.isdecimal():
        return None
    try:
        return dt.time(
            int(digits[0:2]),
            int(digits[2:4]),
            int(digits[4:6]),
            tzinfo=dt.timezone.utc,
        )
    except ValueError:
        return None


def _split_coordinate(value: str, degree_digits: int) -> tuple[int, float]:
    """Split an NMEA coordinate into its degree and minute components.

    NMEA coordinates use a fixed-width degree prefix followed by decimal
    minutes: DDMM.MMMM for latitude and DDDMM.MMMM for longitude.

    Args:
        value: Coordinate string
        degree_digits: Width of the degree prefix (2 or 3)

    Returns:
        Tuple of (degrees, minutes)

    Raises:
        InvalidDataError: If the value is too short or either part fails to
            parse

    Example:
        >>> _split_coordinate("4807.038", 2)  # 48° 07.038'
        (48, 7.038)
        >>> _split_coordinate("01131.000", 3)  # 11° 31.000'
        (11, 31.0)
    """
    if len(value) < degree_digits:
        raise InvalidDataError(
            f"Coordinate {value!r} too short for {degree_digits} degree digits"
        )

    degree_text = value[:degree_digits]
    if not degree_text.isdecimal():
        raise InvalidDataError(f"Invalid degrees in coordinate {value!r}")

    minutes = parse_float_field(value[degree_digits:])
    if minutes is None or minutes < 0:
        raise InvalidDataError(f"Invalid minutes in coordinate {value!r}")

    return int(degree_text), minutes


def convert_to_decimal_degrees(value: str, direction: str) -> float:
    """Convert an NMEA coordinate to signed decimal degrees.

    NMEA uses degrees-minutes format with a hemisphere indicator.
    This function converts to decimal degrees with sign convention:
    - North/East = positive
    - South/West = negative

    The hemisphere also selects the degree width: two digits for N/S
    (latitude), three for E/W (longitude).

    The conversion formula is:
        decimal_degrees = degrees + (minutes / 60)

    Args:
        value: Coordinate in DDMM.MMMM or DDDMM.MMMM format
        direction: Hemisphere indicator ("N", "S", "E", or "W")

    Returns:
        Decimal degrees (positive for N/E, negative for S/W)

    Raises:
        InvalidDataError: If either field is empty, the hemisphere is not one
            of N/S/E/W, or the coordinate cannot be parsed

    Example:
        >>> convert_to_decimal_degrees("4807.038", "N")
        48.1173  # 48° + 7.038'/60
        >>> convert_to_decimal_degrees("01131.000", "W")
        -11.5166667  # negative for West
    """
    if not value or not direction:
        raise InvalidDataError("Empty latitude/longitude or direction")

    degree_digits = _DEGREE_DIGITS.get(direction)
    if degree_digits is None:
        raise InvalidDataError(f"Unknown hemisphere indicator: {direction!r}")

    degrees, minutes = _split_coordinate(value, degree_digits)
    decimal_degrees = degrees + minutes / 60.0

    if direction in _NEGATIVE_HEMISPHERES:
        return -decimal_degrees

    return decimal_degrees
