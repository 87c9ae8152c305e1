"""GSV sentence reassembly.

GSV (Satellites in View) reports the receiver's satellite table. A table
holds up to four satellites per sentence, so it is split across a sequence of
sentences that all carry the sequence length and their own 1-based index.

GSV Sentence Format:
    $GPGSV,3,1,11,03,03,111,00,04,15,270,00,06,01,010,00,13,06,292,00*74
           | | |  |  |  |   |  +-- next satellite group ...
           | | |  |  |  |   +-- SNR (dB-Hz, empty when not tracking)
           | | |  |  |  +-- Azimuth (degrees)
           | | |  |  +-- Elevation (degrees)
           | | |  +-- PRN
           | | +-- Total satellites in view
           | +-- Message number (1..N)
           +-- Total number of messages (N)

The reassembler trusts stream order: message 1 always starts a new sequence,
and the table is complete when the message number reaches N. There is no
timeout or sequence identifier, so a lost message 1 merges two sequences.
"""

import logging
from collections.abc import Sequence

from gnss_analyzer.nmea.errors import InvalidDataError, NMEAError, ParsingError
from gnss_analyzer.nmea.fields import parse_float_field, parse_int_field
from gnss_analyzer.nmea.types import GNSSData, SatelliteInfo

__all__ = ["GSVReassembler"]

logger = logging.getLogger(__name__)

# Tag, total messages, message number, satellites in view
_MINIMUM_FIELD_COUNT = 4
_FIRST_SATELLITE_FIELD = 4
_SATELLITE_GROUP_SIZE = 4


def _parse_positive_int(value: str, name: str) -> int:
    result = parse_int_field(value)
    if result is None or result <= 0:
        raise InvalidDataError(f"Invalid GSV {name}: {value!r}")
    return result


def _parse_satellite_group(
    group: Sequence[str],
) -> tuple[int, SatelliteInfo] | None:
    """Parse one {PRN, elevation, azimuth, SNR} group.

    Returns None when the PRN is not a positive integer. Any other field that
    fails to parse is recorded as None.
    """
    prn = parse_int_field(group[0])
    if prn is None or prn <= 0:
        return None
    return prn, SatelliteInfo(
        elevation_degrees=parse_float_field(group[1]),
        azimuth_degrees=parse_float_field(group[2]),
        snr_dbhz=parse_float_field(group[3]),
    )


def _average_snr(satellites: dict[int, SatelliteInfo]) -> float:
    values = [
        info.snr_dbhz for info in satellites.values() if info.snr_dbhz is not None
    ]
    if not values:
        return 0.0
    return sum(values) / len(values)


class GSVReassembler:
    """Accumulates a satellite table across the sentences of a GSV sequence.

    One instance holds the state of one receiver stream. Feed it every GSV
    sentence of that stream in order::

        reassembler = GSVReassembler()
        for fields in gsv_sentences:
            table = reassembler.decode(fields, data)
            if table is not None:
                # sequence complete; data.satellites now holds the table
                ...

    Not thread-safe. Independent streams need independent instances.
    """

    def __init__(self) -> None:
        self._expected_parts = 0
        self._pending: dict[int, SatelliteInfo] = {}

    @property
    def expected_parts(self) -> int:
        """Message count of the active sequence, 0 when none is active."""
        return self._expected_parts

    @property
    def pending(self) -> dict[int, SatelliteInfo]:
        """Copy of the satellites accumulated so far in the active sequence."""
        return dict(self._pending)

    def reset(self) -> None:
        """Drop any partially accumulated sequence."""
        self._expected_parts = 0
        self._pending.clear()

    def _accumulate(self, fields: Sequence[str]) -> None:
        # Satellite groups start at field 4; a trailing partial group is ignored
        last_start = len(fields) - _SATELLITE_GROUP_SIZE
        for start in range(
            _FIRST_SATELLITE_FIELD, last_start + 1, _SATELLITE_GROUP_SIZE
        ):
            group = fields[start : start + _SATELLITE_GROUP_SIZE]
            parsed = _parse_satellite_group(group)
            if parsed is None:
                continue
            prn, info = parsed
            self._pending[prn] = info

    def _complete(self, data: GNSSData) -> dict[int, SatelliteInfo]:
        table = dict(self._pending)
        data.satellites.clear()
        data.satellites.update(table)
        data.average_snr = _average_snr(table)
        self.reset()
        return table

    def _decode_fields(
        self,
        fields: Sequence[str],
        data: GNSSData,
    ) -> dict[int, SatelliteInfo] | None:
        if len(fields) < _MINIMUM_FIELD_COUNT:
            raise ParsingError(
                f"GSV frame too short: expected >={_MINIMUM_FIELD_COUNT} fields, "
                f"got {len(fields)}"
            )

        total_messages = _parse_positive_int(fields[1], "message count")
        message_number = _parse_positive_int(fields[2], "message number")
        # fields[3] (satellites in view) is informational only

        if message_number == 1:
            self._pending.clear()
            self._expected_parts = total_messages

        self._accumulate(fields)

        if self._expected_parts and message_number == self._expected_parts:
            return self._complete(data)
        return None

    def decode(
        self,
        fields: Sequence[str],
        data: GNSSData,
    ) -> dict[int, SatelliteInfo] | None:
        """Add one tokenized GSV sentence to the active sequence.

        When the sentence is the last one of its sequence, the accumulated
        table replaces the contents of ``data.satellites``, ``data.average_snr``
        is recomputed, and the accumulator is cleared.

        Args:
            fields: Comma-separated fields of the sentence, tag included
            data: Snapshot to receive the completed table

        Returns:
            The completed PRN -> SatelliteInfo table when this sentence ends
            the sequence, otherwise None

        Raises:
            ParsingError: If fewer than 4 fields are present
            InvalidDataError: If the message count or number is not a
                positive integer
        """
        try:
            return self._decode_fields(fields, data)
        except NMEAError as exc:
            logger.warning("GSV decode failed: %s", exc)
            raise
