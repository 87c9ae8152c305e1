"""Line dispatcher for a single NMEA receiver stream."""

import datetime as dt
from collections.abc import Callable

from gnss_analyzer.nmea.gga import parse_gga
from gnss_analyzer.nmea.gsv import GSVReassembler
from gnss_analyzer.nmea.sentence import classify_sentence, split_fields
from gnss_analyzer.nmea.types import GNSSData, SentenceType

__all__ = ["NMEAParser"]


class NMEAParser:
    """Routes raw NMEA lines from one receiver to the matching decoder.

    The parser owns the GSV reassembly state for its stream, so one instance
    must be used per receiver. Separate instances never share state and can
    decode independent streams side by side.

    Decoder errors (``ParsingError``, ``InvalidDataError``) propagate to the
    caller unchanged. Lines with an unsupported tag are ignored.

    Example:
        >>> parser = NMEAParser()
        >>> data = GNSSData()
        >>> line = "$GPGGA,123519,4807.038,N,11131.000,E,1,08,0.9,545.4,M,,*47"
        >>> parser.parse_line(line, data)
        <SentenceType.GGA: 1>
        >>> data.num_satellites
        8

    Args:
        today: Date provider passed to the GGA decoder. Defaults to the
            current UTC date.
    """

    def __init__(self, today: Callable[[], dt.date] | None = None) -> None:
        self._today = today
        self._gsv = GSVReassembler()

    @property
    def gsv(self) -> GSVReassembler:
        """Reassembly state of this stream's GSV sequences."""
        return self._gsv

    def reset(self) -> None:
        """Forget any partially received GSV sequence."""
        self._gsv.reset()

    def parse_line(self, line: str, data: GNSSData) -> SentenceType:
        """Decode one raw NMEA line into ``data``.

        Args:
            line: Raw sentence, with or without checksum and line ending
            data: Caller-owned snapshot to update in place

        Returns:
            The sentence type that was recognised. ``SentenceType.UNKNOWN``
            means the line was ignored and ``data`` is untouched.

        Raises:
            ParsingError: If the sentence has too few fields for its type
            InvalidDataError: If a field fails validation
        """
        sentence_type = classify_sentence(line)
        if sentence_type is SentenceType.GGA:
            parse_gga(split_fields(line), data, today=self._today)
        elif sentence_type is SentenceType.GSV:
            self._gsv.decode(split_fields(line), data)
        return sentence_type
