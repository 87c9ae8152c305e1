"""GNSS module for decoding snapshots from a stream of NMEA 0183 lines."""

from gnss_analyzer.gnss.reader import GNSSReader

__all__ = ["GNSSReader"]
