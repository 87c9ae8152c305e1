"""JSON formatting utilities for GNSS snapshots."""

import json

from gnss_analyzer.nmea.types import GNSSData

__all__ = ["format_gnss_message"]


def format_gnss_message(data: GNSSData) -> str:
    """Serialize a GNSS snapshot into a single-line JSON string."""
    timestamp = data.timestamp.isoformat() if data.timestamp is not None else None

    return json.dumps({
        "type": "gnss",
        "lat": data.latitude_degrees,
        "lon": data.longitude_degrees,
        "alt": data.altitude_meters,
        "fix_type": data.fix_type,
        "num_satellites": data.num_satellites,
        "hdop": data.horizontal_dilution_of_precision,
        "vdop": data.vertical_dilution_of_precision,
        "average_snr": data.average_snr,
        "timestamp": timestamp,
        "satellites": [
            {
                "prn": prn,
                "elevation": info.elevation_degrees,
                "azimuth": info.azimuth_degrees,
                "snr": info.snr_dbhz,
            }
            for prn, info in sorted(data.satellites.items())
        ],
    })
