"""NMEA data types for decoded sentences.

Design Decisions:
    1. Mutable snapshot: GNSSData is filled in place by successive decoder
       calls (GGA for the fix, GSV for the satellite table). Decoders never
       replace the snapshot or its ``satellites`` dict, so the caller can keep
       references to both.

    2. None as the "missing" marker: a satellite field that failed to parse is
       stored as None rather than a magic number, so "no data" is never
       confused with a measured zero.

    3. fix_type as a label: the numeric GGA quality code is translated through
       FIX_TYPES; codes outside the table are rejected at decode time, so the
       label is always one of its values.
"""

import datetime as dt
import enum
from dataclasses import dataclass, field

__all__ = ["FIX_TYPES", "GNSSData", "SatelliteInfo", "SentenceType"]

# GGA fix quality code -> label. 3 (PPS) and 5+ (RTK float, dead reckoning,
# manual, simulator) are not accepted.
FIX_TYPES: dict[int, str] = {
    0: "No Fix",
    1: "GPS Fix",
    2: "DGPS Fix",
    4: "RTK Fix",
}


class SentenceType(enum.Enum):
    """Sentence kinds recognised by the classifier."""

    UNKNOWN = 0
    GGA = 1
    GSV = 2


@dataclass
class SatelliteInfo:
    """One row of the satellites-in-view table reported by GSV.

    Attributes:
        elevation_degrees: Elevation above the horizon (0-90), or None if the
            field was empty or unparseable.
        azimuth_degrees: Azimuth from true north (0-359), or None.
        snr_dbhz: Signal-to-noise ratio in dB-Hz, or None. Receivers leave
            this empty for satellites that are in view but not tracked.
    """

    elevation_degrees: float | None
    azimuth_degrees: float | None
    snr_dbhz: float | None


@dataclass
class GNSSData:
    """Snapshot of receiver state assembled from GGA and GSV sentences.

    Attributes:
        num_satellites: Satellites used in the fix (0-50), from GGA.
        latitude_degrees: Latitude in decimal degrees, positive=North.
        longitude_degrees: Longitude in decimal degrees, positive=East.
        altitude_meters: Altitude above mean sea level (-500 to 10000).
        average_snr: Mean SNR (dB-Hz) over the satellites of the last complete
            GSV sequence that reported one.
        horizontal_dilution_of_precision: HDOP, in (0, 50] once decoded.
        vertical_dilution_of_precision: VDOP. Not carried by GGA or GSV, so it
            keeps its default.
        satellites: PRN -> SatelliteInfo for the last complete GSV sequence.
        fix_type: One of the FIX_TYPES labels.
        timestamp: UTC time of the fix on the current calendar date, or None
            until a GGA sentence with a valid time of day is decoded.
    """

    num_satellites: int = 0
    latitude_degrees: float = 0.0
    longitude_degrees: float = 0.0
    altitude_meters: float = 0.0
    average_snr: float = 0.0
    horizontal_dilution_of_precision: float = 0.0
    vertical_dilution_of_precision: float = 0.0
    satellites: dict[int, SatelliteInfo] = field(default_factory=dict)
    fix_type: str = FIX_TYPES[0]
    timestamp: dt.datetime | None = None
